# core/cache.py

"""
In-process TTL cache for provider reads.

The module catalog is global and changes only when an operator edits the
`modules` table, so it is cached here. Workspace enablements and actor
permissions are NOT cached: they change on admin actions and must be
re-read on every workspace switch.
"""

from typing import Optional, Any
from datetime import datetime, timedelta
from threading import Lock
from core.logging_config import logger


class CacheEntry:
    """A cached value with expiration time."""

    def __init__(self, value: Any, ttl_seconds: int):
        self.value = value
        self.expires_at = datetime.now() + timedelta(seconds=ttl_seconds)

    def is_expired(self) -> bool:
        return datetime.now() >= self.expires_at


class SimpleCache:
    """
    In-memory cache with TTL support.

    Thread-safe for concurrent access. `None` is never stored, so a miss and
    a cached "nothing" cannot be confused.
    """

    def __init__(self):
        self._cache: dict[str, CacheEntry] = {}
        self._lock = Lock()

    def get(self, key: str) -> Optional[Any]:
        """
        Get a value from the cache.

        Args:
            key: Cache key

        Returns:
            Cached value or None if not found or expired
        """
        with self._lock:
            entry = self._cache.get(key)
            if entry is None:
                return None

            if entry.is_expired():
                del self._cache[key]
                return None

            return entry.value

    def set(self, key: str, value: Any, ttl_seconds: int = 300):
        """
        Set a value in the cache with TTL.

        Args:
            key: Cache key
            value: Value to cache (None is ignored)
            ttl_seconds: Time to live in seconds (default: 5 minutes)
        """
        if value is None:
            return
        with self._lock:
            self._cache[key] = CacheEntry(value, ttl_seconds)

    def delete(self, key: str):
        with self._lock:
            self._cache.pop(key, None)

    def delete_prefix(self, prefix: str) -> int:
        """
        Drop every key starting with `prefix`.

        Returns:
            Number of entries removed
        """
        with self._lock:
            keys = [k for k in self._cache if k.startswith(prefix)]
            for k in keys:
                del self._cache[k]
        if keys:
            logger.debug(f"Cache invalidated {len(keys)} entries for prefix {prefix!r}")
        return len(keys)

    def clear(self):
        with self._lock:
            self._cache.clear()

    def size(self) -> int:
        with self._lock:
            return len(self._cache)


# Global cache instance
_cache = SimpleCache()


def get_cache() -> SimpleCache:
    """Get the global cache instance."""
    return _cache


def cache_key(*parts: str) -> str:
    """Build a namespaced key, e.g. cache_key("modules", "catalog")."""
    return ":".join(parts)


def cache_get(key: str) -> Optional[Any]:
    return _cache.get(key)


def cache_set(key: str, value: Any, ttl_seconds: int = 300):
    _cache.set(key, value, ttl_seconds)


def cache_delete(key: str):
    _cache.delete(key)


def cache_delete_prefix(prefix: str) -> int:
    return _cache.delete_prefix(prefix)


def cache_clear():
    """Clear all cache entries."""
    _cache.clear()
