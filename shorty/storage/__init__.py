"""
Link store module for the shortener.
Implements Strategy Pattern for flexible storage backends.
"""

from .strategies import LinkStore, SQLAlchemyLinkStore, InMemoryLinkStore
from .factory import LinkStoreFactory, LinkStoreBackend

__all__ = [
    "LinkStore",
    "SQLAlchemyLinkStore",
    "InMemoryLinkStore",
    "LinkStoreFactory",
    "LinkStoreBackend",
]
