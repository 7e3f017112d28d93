# tests/test_cache.py

"""
Tests for caching functionality.
"""

from datetime import datetime, timedelta
from unittest.mock import patch

from core.cache import (
    SimpleCache,
    cache_clear,
    cache_delete,
    cache_delete_prefix,
    cache_get,
    cache_key,
    cache_set,
    get_cache,
)


def test_cache_set_and_get():
    cache_set("test_key", "test_value", ttl_seconds=60)
    assert cache_get("test_key") == "test_value"


def test_cache_expiration():
    """Entries are dropped once their TTL has passed."""
    cache = SimpleCache()
    cache.set("expiring_key", "value", ttl_seconds=1)
    assert cache.get("expiring_key") == "value"

    later = datetime.now() + timedelta(seconds=5)
    with patch("core.cache.datetime") as mock_datetime:
        mock_datetime.now.return_value = later
        assert cache.get("expiring_key") is None

    assert cache.size() == 0


def test_cache_ignores_none():
    cache_set("none_key", None)
    assert get_cache().size() == 0


def test_cache_keeps_empty_lists():
    """An empty module catalog is a real value, not a miss."""
    cache_set("empty", [])
    assert cache_get("empty") == []


def test_cache_delete():
    cache_set("delete_key", "delete_value")
    cache_delete("delete_key")
    assert cache_get("delete_key") is None


def test_cache_delete_prefix():
    cache_set(cache_key("modules", "catalog"), ["crm"])
    cache_set(cache_key("modules", "other"), ["x"])
    cache_set(cache_key("workspace", "ws-a"), ["y"])

    assert cache_delete_prefix("modules:") == 2
    assert cache_get("modules:catalog") is None
    assert cache_get("workspace:ws-a") == ["y"]


def test_cache_clear():
    cache_set("key1", "value1")
    cache_set("key2", "value2")

    cache_clear()

    assert cache_get("key1") is None
    assert cache_get("key2") is None
