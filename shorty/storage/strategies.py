"""
Link store strategies using Strategy Pattern.

The store is the single authoritative owner of ShortLinkRecords: it assigns
identifiers, enforces URL uniqueness and keeps hit counters. The service
layer only talks to it through the four operations below.

- SQLAlchemy: Production (any database SQLAlchemy supports)
- In-memory: Development/testing
"""

import logging
import threading
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Dict, Optional

from sqlalchemy import update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from shorty.exceptions import DuplicateUrl
from shorty.models.url import ShortLink
from shorty.schemas.url import ShortLinkRecord

logger = logging.getLogger(__name__)

# Largest value a signed 64-bit INTEGER primary key can hold
MAX_LINK_ID = 2 ** 63 - 1


class LinkStore(ABC):
    """
    Abstract base class for link stores.
    
    Implementations must enforce uniqueness of url; a losing concurrent
    insert raises DuplicateUrl instead of creating a second record.
    """
    
    @abstractmethod
    def find_by_url(self, url: str) -> Optional[ShortLinkRecord]:
        """
        Look up a record by exact URL (no normalization).
        
        Returns:
            The record, or None if the URL was never stored
        """
        pass
    
    @abstractmethod
    def find_by_id(self, link_id: int) -> Optional[ShortLinkRecord]:
        """Look up a record by identifier"""
        pass
    
    @abstractmethod
    def insert(self, url: str, created_at: datetime) -> int:
        """
        Store a new URL.
        
        Args:
            url: URL to store
            created_at: Creation timestamp
            
        Returns:
            The store-assigned identifier
            
        Raises:
            DuplicateUrl: the URL is already stored
        """
        pass
    
    @abstractmethod
    def record_hit(self, link_id: int, accessed_at: datetime) -> None:
        """
        Increment the hit counter and set the accessed timestamp.
        A missing id is a no-op.
        """
        pass


class SQLAlchemyLinkStore(LinkStore):
    """
    SQLAlchemy implementation backed by the `urls` table.
    
    Uses one session per request (injected), like the rest of the app.
    """
    
    def __init__(self, db: Session):
        self.db = db
    
    def find_by_url(self, url: str) -> Optional[ShortLinkRecord]:
        row = self.db.query(ShortLink).filter(ShortLink.url == url).first()
        return ShortLinkRecord.model_validate(row) if row else None
    
    def find_by_id(self, link_id: int) -> Optional[ShortLinkRecord]:
        # Decoded codes are untrusted and may not even fit the column
        if not 0 <= link_id <= MAX_LINK_ID:
            return None
        row = self.db.get(ShortLink, link_id)
        return ShortLinkRecord.model_validate(row) if row else None
    
    def insert(self, url: str, created_at: datetime) -> int:
        link = ShortLink(url=url, created=created_at, hits=0)
        try:
            self.db.add(link)
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.warning("IntegrityError storing url=%s: %s", url, e.orig)
            raise DuplicateUrl(url) from e
        
        self.db.refresh(link)
        return link.id
    
    def record_hit(self, link_id: int, accessed_at: datetime) -> None:
        if not 0 <= link_id <= MAX_LINK_ID:
            return
        # Single UPDATE so concurrent hits never overwrite each other
        try:
            self.db.execute(
                update(ShortLink)
                .where(ShortLink.id == link_id)
                .values(hits=ShortLink.hits + 1, accessed=accessed_at)
            )
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise


class InMemoryLinkStore(LinkStore):
    """
    In-memory store using Python dicts.
    
    Pros:
    - Simple (no external dependencies)
    - Thread-safe (one lock around every operation)
    - Good for development and testing
    
    Cons:
    - Lost on restart
    - Not shared between processes
    
    Identifiers start at 1, like an auto-increment primary key.
    """
    
    def __init__(self):
        self._lock = threading.Lock()
        self._records: Dict[int, ShortLinkRecord] = {}
        self._ids_by_url: Dict[str, int] = {}
        self._next_id = 1
    
    def find_by_url(self, url: str) -> Optional[ShortLinkRecord]:
        with self._lock:
            link_id = self._ids_by_url.get(url)
            return self._records.get(link_id) if link_id is not None else None
    
    def find_by_id(self, link_id: int) -> Optional[ShortLinkRecord]:
        with self._lock:
            return self._records.get(link_id)
    
    def insert(self, url: str, created_at: datetime) -> int:
        with self._lock:
            if url in self._ids_by_url:
                raise DuplicateUrl(url)
            
            link_id = self._next_id
            self._next_id += 1
            self._records[link_id] = ShortLinkRecord(id=link_id, url=url, created=created_at)
            self._ids_by_url[url] = link_id
            return link_id
    
    def record_hit(self, link_id: int, accessed_at: datetime) -> None:
        with self._lock:
            record = self._records.get(link_id)
            if record is None:
                return
            self._records[link_id] = record.model_copy(
                update={"hits": record.hits + 1, "accessed": accessed_at}
            )
    
    def __len__(self) -> int:
        with self._lock:
            return len(self._records)
