import logging
from datetime import datetime, timezone
from typing import Optional

from shorty.cache.strategies import CacheStrategy
from shorty.config import settings
from shorty.exceptions import CodeError, DuplicateUrl, NotFound
from shorty.schemas.url import ShortLinkRecord
from shorty.services.short_code_strategies import ShortCodeStrategy
from shorty.storage.strategies import LinkStore

logger = logging.getLogger(__name__)


def _now() -> datetime:
    return datetime.now(timezone.utc)


class ShortLinkService:
    """
    Registration and resolution of short links.
    
    Dependencies are injected (not created internally):
    - store: owns records, identifiers and hit counters
    - strategy: immutable codec configuration (plain or salted)
    - cache: optional identifier -> URL cache for the resolve path
    
    The service itself holds no mutable state, so one instance can serve
    concurrent requests as long as the store can.
    """
    
    def __init__(
        self,
        store: LinkStore,
        strategy: ShortCodeStrategy,
        cache: Optional[CacheStrategy] = None,
        track: bool = True,
        cache_ttl: Optional[int] = None
    ):
        self.store = store
        self.strategy = strategy
        self.cache = cache
        self.track = track
        self.cache_ttl = cache_ttl if cache_ttl is not None else settings.cache_ttl

    def encode_identifier(self, identifier: int) -> str:
        return self.strategy.encode_identifier(identifier)

    def decode_code(self, code: str) -> int:
        return self.strategy.decode_code(code)

    async def register(self, url: str) -> str:
        """
        Return the short code for url, storing it first if needed.
        
        Process (find-or-create):
        1. Look the URL up by exact string match
        2. If absent, insert it and take the store-assigned id
        3. If the insert loses a race (DuplicateUrl), look it up again and
           use the winner's id
        4. Encode the id
        
        Registering the same URL any number of times, concurrently or not,
        yields one record and one code.
        """
        existing = self.store.find_by_url(url)
        if existing is not None:
            return self.encode_identifier(existing.id)
        
        try:
            link_id = self.store.insert(url, _now())
        except DuplicateUrl:
            logger.warning("Concurrent registration of %s, reusing stored record", url[:80])
            existing = self.store.find_by_url(url)
            if existing is None:
                raise
            link_id = existing.id
        else:
            logger.info("Registered id=%d url=%s", link_id, url[:80])
        
        return self.encode_identifier(link_id)

    def _lookup_id(self, code: str) -> int:
        """Decode code; malformed codes look exactly like unknown ones"""
        try:
            return self.decode_code(code)
        except CodeError as e:
            logger.debug("Rejected short code: %s", e)
            raise NotFound(code) from None

    async def resolve(self, code: str) -> str:
        """
        Return the destination URL for code and record the hit.
        
        Flow:
        1. Decode the code to an identifier (failure -> NotFound)
        2. Check the cache, fall back to the store (absent -> NotFound)
        3. Record the hit unless tracking is disabled; a tracking failure
           is logged and does not block the redirect
        
        Raises:
            NotFound: the code is malformed or matches no record
        """
        link_id = self._lookup_id(code)
        cache_key = f"link:{link_id}"
        
        url = await self.cache.get(cache_key) if self.cache else None
        if url is None:
            record = self.store.find_by_id(link_id)
            if record is None:
                raise NotFound(code)
            url = record.url
            if self.cache:
                await self.cache.set(cache_key, url, ttl=self.cache_ttl)
        
        if self.track:
            try:
                self.store.record_hit(link_id, _now())
            except Exception as e:
                logger.warning("Hit tracking failed for id=%d: %s", link_id, e)
        
        return url

    async def stats(self, code: str) -> ShortLinkRecord:
        """
        Return the stored record for code without recording a hit.
        
        Raises:
            NotFound: the code is malformed or matches no record
        """
        link_id = self._lookup_id(code)
        record = self.store.find_by_id(link_id)
        if record is None:
            raise NotFound(code)
        return record
