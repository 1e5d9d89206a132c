"""
Factory for creating link store instances.
"""

from enum import Enum
from typing import Optional

from sqlalchemy.orm import Session

from .strategies import LinkStore, SQLAlchemyLinkStore, InMemoryLinkStore


class LinkStoreBackend(Enum):
    """Available link store backends"""
    SQLALCHEMY = "sqlalchemy"
    MEMORY = "memory"


class LinkStoreFactory:
    """
    Simple factory for creating link stores.
    
    SQLAlchemy stores wrap the per-request session, so a new one is built
    for every request. The in-memory store is a singleton; otherwise each
    request would see an empty store.
    """
    
    _memory_instance: Optional[InMemoryLinkStore] = None
    
    @classmethod
    def create(cls, backend: LinkStoreBackend, db: Optional[Session] = None) -> LinkStore:
        """
        Create a link store.
        
        Args:
            backend: Type of store backend (from enum)
            db: Database session (required for SQLAlchemy)
            
        Returns:
            LinkStore instance
        """
        if backend == LinkStoreBackend.SQLALCHEMY:
            if db is None:
                raise ValueError("SQLAlchemy link store needs a database session")
            return SQLAlchemyLinkStore(db)
        
        elif backend == LinkStoreBackend.MEMORY:
            if cls._memory_instance is None:
                cls._memory_instance = InMemoryLinkStore()
            return cls._memory_instance
        
        else:
            raise ValueError(f"Unknown store backend: {backend}")
    
    @classmethod
    def clear_instance(cls):
        """Clear cached in-memory store (for testing)"""
        cls._memory_instance = None
