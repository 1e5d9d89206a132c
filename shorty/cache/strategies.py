"""
Cache strategies using Strategy Pattern.
Allows switching between different cache backends (Redis, In-Memory, Null).

The shortener caches identifier -> URL, a mapping that never changes once
a record exists, so entries never need invalidating.
"""

import logging
import threading
from abc import ABC, abstractmethod
from typing import Optional, Dict

logger = logging.getLogger(__name__)


class CacheStrategy(ABC):
    """
    Abstract base class for cache strategies.
    
    All methods are async because cache operations involve I/O (network for Redis).
    A cache failure must never fail a request: errors read as a miss.
    """
    
    @abstractmethod
    async def get(self, key: str) -> Optional[str]:
        """
        Get value from cache.
        
        Args:
            key: Cache key
            
        Returns:
            Cached value or None if not found
        """
        pass
    
    @abstractmethod
    async def set(self, key: str, value: str, ttl: int = 3600) -> bool:
        """
        Set value in cache with TTL (Time To Live).
        
        Args:
            key: Cache key
            value: Value to cache
            ttl: Time to live in seconds (default: 1 hour)
            
        Returns:
            True if successful, False otherwise
        """
        pass


class RedisCache(CacheStrategy):
    """
    Redis cache implementation.
    
    Shared between every worker process, with TTL support.
    Used in production environments.
    """
    
    def __init__(self, redis_client):
        """
        Initialize Redis cache.
        
        Args:
            redis_client: Redis client instance (redis.Redis)
        """
        self.redis = redis_client
    
    async def get(self, key: str) -> Optional[str]:
        try:
            value = self.redis.get(key)
            return value.decode('utf-8') if value else None
        except Exception as e:
            logger.warning("Redis get error for %s: %s", key, e)
            return None
    
    async def set(self, key: str, value: str, ttl: int = 3600) -> bool:
        try:
            return bool(self.redis.setex(key, ttl, value))
        except Exception as e:
            logger.warning("Redis set error for %s: %s", key, e)
            return False


class InMemoryCache(CacheStrategy):
    """
    In-memory cache implementation using Python dict.
    
    Not distributed (each process has its own cache) and TTL is ignored,
    which is harmless here because cached mappings never go stale.
    """
    
    def __init__(self):
        self._lock = threading.Lock()
        self._cache: Dict[str, str] = {}
    
    async def get(self, key: str) -> Optional[str]:
        with self._lock:
            return self._cache.get(key)
    
    async def set(self, key: str, value: str, ttl: int = 3600) -> bool:
        with self._lock:
            self._cache[key] = value
        return True


class NullCache(CacheStrategy):
    """
    Null Object Pattern - cache that does nothing.
    
    Used for testing and for disabling the cache.
    """
    
    async def get(self, key: str) -> Optional[str]:
        """Always returns None (cache miss)"""
        return None
    
    async def set(self, key: str, value: str, ttl: int = 3600) -> bool:
        """Pretends to set but does nothing"""
        return True
