"""
Async time-boxed key/value cache.

Entries carry an absolute expiry that is checked lazily on read; there is no
background sweep. All map access goes through one asyncio.Lock so concurrent
sub-fetches can share an instance safely.
"""
import asyncio
import hashlib
import json
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Dict, Optional, Tuple

from datalayer.core.logging import get_logger
from datalayer.core.metrics import record_cache_hit, record_cache_miss

logger = get_logger(__name__)

Clock = Callable[[], datetime]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def make_key(operation: str, params: Optional[Dict[str, Any]] = None) -> str:
    """
    Deterministic cache key for an operation and its parameters.

    Parameter order does not matter; values that are not JSON types
    (enums, dates) are stringified.

    Examples:
        >>> make_key("get_team_stats", {"team_id": "1", "season": "2024"}) == \\
        ...     make_key("get_team_stats", {"season": "2024", "team_id": "1"})
        True
    """
    payload = json.dumps(params or {}, sort_keys=True, default=str)
    digest = hashlib.sha256(payload.encode("utf-8")).hexdigest()[:16]
    return f"{operation}:{digest}"


class TTLCache:
    """
    Time-boxed cache shared by the orchestrator and the verification overlay.

    Args:
        default_ttl: TTL in seconds used when ``set`` is called without one
        enabled: When False the cache stores nothing and every read misses
        name: Label used for metrics and logs
        clock: Callable returning the current aware datetime (injectable for tests)
    """

    def __init__(
        self,
        default_ttl: int = 300,
        enabled: bool = True,
        name: str = "data_layer",
        clock: Optional[Clock] = None,
    ):
        self.default_ttl = default_ttl
        self.enabled = enabled
        self.name = name
        self._clock = clock or _utcnow
        self._entries: Dict[str, Tuple[Any, datetime]] = {}  # key -> (value, expiry)
        self._lock = asyncio.Lock()
        self._hits = 0
        self._misses = 0

    async def get(self, key: str) -> Optional[Any]:
        """Return the cached value, or None on a miss or an expired entry."""
        entry = await self.get_entry(key)
        return entry[0] if entry else None

    async def get_entry(self, key: str) -> Optional[Tuple[Any, datetime]]:
        """Return ``(value, expiry)`` for a live entry, evicting it if stale."""
        if not self.enabled:
            return None

        async with self._lock:
            entry = self._entries.get(key)
            if entry is not None and self._clock() >= entry[1]:
                del self._entries[key]
                entry = None

            if entry is None:
                self._misses += 1
                record_cache_miss(self.name)
                return None

            self._hits += 1
            record_cache_hit(self.name)
            return entry

    async def set(self, key: str, value: Any, ttl: Optional[int] = None) -> Optional[datetime]:
        """
        Store a value.

        Returns:
            The absolute expiry, or None when caching is disabled
        """
        if not self.enabled:
            return None

        ttl = self.default_ttl if ttl is None else ttl
        expiry = self._clock() + timedelta(seconds=ttl)
        async with self._lock:
            self._entries[key] = (value, expiry)
        return expiry

    async def delete(self, key: str) -> None:
        async with self._lock:
            self._entries.pop(key, None)

    async def clear(self) -> None:
        async with self._lock:
            self._entries.clear()
            self._hits = 0
            self._misses = 0
        logger.info(f"Cache '{self.name}' cleared")

    def stats(self) -> Dict[str, Any]:
        """Size and hit/miss counters (size includes not-yet-evicted stale entries)."""
        return {
            "name": self.name,
            "size": len(self._entries),
            "hits": self._hits,
            "misses": self._misses,
            "enabled": self.enabled,
            "default_ttl_seconds": self.default_ttl,
        }
