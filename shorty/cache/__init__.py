"""
Cache module for the shortener.
Implements Strategy Pattern for flexible cache backends.
"""

from .strategies import CacheStrategy, RedisCache, InMemoryCache, NullCache
from .factory import CacheFactory, CacheBackend

__all__ = [
    "CacheStrategy",
    "RedisCache", 
    "InMemoryCache",
    "NullCache",
    "CacheFactory",
    "CacheBackend",
]
