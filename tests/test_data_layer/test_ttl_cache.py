"""Unit tests for TTLCache.

Test Strategy:
1. Test set/get round trip and the returned absolute expiry
2. Test lazy expiry with an injected clock (expired entries are misses)
3. Test the disabled cache (stores nothing, always misses)
4. Test deterministic keys and the stats counters
"""
import asyncio

import pytest

from datalayer.services.core.ttl_cache import TTLCache, make_key


class TestTTLCache:
    """Test suite for the async TTL cache."""

    # Storage & Expiry
    # ─────────────────────────────────────────────────────────────

    @pytest.mark.asyncio
    async def test_set_then_get(self, clock):
        """Should return a stored value and its expiry."""
        cache = TTLCache(default_ttl=60, clock=clock)

        expiry = await cache.set("k", {"v": 1})

        assert await cache.get("k") == {"v": 1}
        assert (expiry - clock.now).total_seconds() == 60

    @pytest.mark.asyncio
    async def test_entry_expires_after_ttl(self, clock):
        """Should report a miss and evict once the TTL has elapsed."""
        cache = TTLCache(default_ttl=60, clock=clock)
        await cache.set("k", "value")

        clock.advance(59)
        assert await cache.get("k") == "value"

        clock.advance(1)
        assert await cache.get("k") is None
        assert cache.stats()["size"] == 0

    @pytest.mark.asyncio
    async def test_per_entry_ttl_overrides_default(self, clock):
        cache = TTLCache(default_ttl=60, clock=clock)
        await cache.set("short", 1, ttl=5)

        clock.advance(6)
        assert await cache.get("short") is None

    @pytest.mark.asyncio
    async def test_get_entry_returns_value_and_expiry(self, clock):
        cache = TTLCache(default_ttl=30, clock=clock)
        expiry = await cache.set("k", "v")

        assert await cache.get_entry("k") == ("v", expiry)

    @pytest.mark.asyncio
    async def test_disabled_cache_never_stores(self, clock):
        """Should store nothing and always miss when disabled."""
        cache = TTLCache(enabled=False, clock=clock)

        assert await cache.set("k", "v") is None
        assert await cache.get("k") is None
        assert cache.stats()["size"] == 0

    @pytest.mark.asyncio
    async def test_delete_and_clear(self, clock):
        cache = TTLCache(clock=clock)
        await cache.set("a", 1)
        await cache.set("b", 2)

        await cache.delete("a")
        assert await cache.get("a") is None

        await cache.clear()
        assert cache.stats()["size"] == 0

    @pytest.mark.asyncio
    async def test_concurrent_writers(self, clock):
        """Should hold every key written concurrently."""
        cache = TTLCache(clock=clock)

        await asyncio.gather(*(cache.set(f"k{i}", i) for i in range(50)))

        assert cache.stats()["size"] == 50

    # Keys & Stats
    # ─────────────────────────────────────────────────────────────

    def test_make_key_ignores_param_order(self):
        """Should build the same key for the same params in any order."""
        assert make_key("get_team_stats", {"team_id": "1", "season": "2025"}) == make_key(
            "get_team_stats", {"season": "2025", "team_id": "1"}
        )

    def test_make_key_distinguishes_operations_and_params(self):
        assert make_key("a", {"x": 1}) != make_key("b", {"x": 1})
        assert make_key("a", {"x": 1}) != make_key("a", {"x": 2})
        assert make_key("a", {"x": 1}).startswith("a:")

    @pytest.mark.asyncio
    async def test_stats_count_hits_and_misses(self, clock):
        cache = TTLCache(default_ttl=60, name="test", clock=clock)
        await cache.set("k", 1)
        await cache.get("k")
        await cache.get("missing")

        stats = cache.stats()
        assert stats["hits"] == 1
        assert stats["misses"] == 1
        assert stats["enabled"] is True
        assert stats["default_ttl_seconds"] == 60
