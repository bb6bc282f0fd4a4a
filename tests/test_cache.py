"""Tests for cratedocs.cache module."""

import pytest

from cratedocs.cache import DocCache, crate_cache_key, item_cache_key


class TestDocCache:

    @pytest.mark.asyncio
    async def test_missing_key_returns_none(self):
        assert await DocCache().get("test_key") is None

    @pytest.mark.asyncio
    async def test_set_then_get(self):
        cache = DocCache()
        await cache.set("test_key", "test_value")
        assert await cache.get("test_key") == "test_value"
        assert len(cache) == 1

    @pytest.mark.asyncio
    async def test_clear(self):
        cache = DocCache()
        await cache.set("a", "1")
        await cache.clear()
        assert len(cache) == 0


class TestCacheKeys:

    def test_crate_keys(self):
        assert crate_cache_key("serde") == "serde"
        assert crate_cache_key("serde", "1.0.0") == "serde:1.0.0"

    def test_item_keys(self):
        assert item_cache_key("serde", "de::Error") == "serde:de::Error"
        assert item_cache_key("serde", "de::Error", "1.0.0") == "serde:1.0.0:de::Error"
