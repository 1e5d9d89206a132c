"""
FastAPI dependencies for dependency injection.

This module provides singleton instances of the cache and the short code
strategy, plus a per-request link store and service.

Pattern: Dependency Injection
- Loose coupling between components
- Easy to test (inject fakes via app.dependency_overrides)
- Flexible (swap implementations via config)
"""

from functools import lru_cache

from fastapi import Depends
from sqlalchemy.orm import Session

from shorty.cache.factory import CacheFactory, CacheBackend
from shorty.cache.strategies import CacheStrategy
from shorty.config import settings
from shorty.database.connection import get_db
from shorty.services.short_code_factory import ShortCodeFactory
from shorty.services.short_code_strategies import ShortCodeStrategy
from shorty.services.url_service import ShortLinkService
from shorty.storage.factory import LinkStoreFactory, LinkStoreBackend
from shorty.storage.strategies import LinkStore


@lru_cache()
def get_cache() -> CacheStrategy:
    """
    Get cache instance (singleton).
    
    Returns:
        CacheStrategy instance based on settings
    """
    backend = CacheBackend(settings.cache_backend)
    return CacheFactory.create(backend)


@lru_cache()
def get_short_code_strategy() -> ShortCodeStrategy:
    """
    Get the short code strategy (singleton).
    
    Called once at startup so that a bad alphabet, salt or padding stops
    the app before it serves anything.
    
    Raises:
        ConfigurationError: invalid codec settings
    """
    return ShortCodeFactory.create_strategy(settings)


def get_link_store(db: Session = Depends(get_db)) -> LinkStore:
    """Get the link store for this request"""
    backend = LinkStoreBackend(settings.store_backend)
    return LinkStoreFactory.create(backend, db)


def get_url_service(
    store: LinkStore = Depends(get_link_store),
    strategy: ShortCodeStrategy = Depends(get_short_code_strategy),
    cache: CacheStrategy = Depends(get_cache)
) -> ShortLinkService:
    """
    Get ShortLinkService with all dependencies injected.
    
    Controllers depend on the service; the service depends on the store,
    the codec strategy and the cache.
    """
    return ShortLinkService(
        store=store,
        strategy=strategy,
        cache=cache,
        track=settings.track,
        cache_ttl=settings.cache_ttl
    )
