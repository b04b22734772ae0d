"""Per-sport API-Sports adapters."""
from datalayer.services.adapters.american_football import AmericanFootballAdapter
from datalayer.services.adapters.base import BaseSportAdapter
from datalayer.services.adapters.basketball import BasketballAdapter
from datalayer.services.adapters.config import (
    EUROLEAGUE_CONFIG,
    NBA_CONFIG,
    NFL_CONFIG,
    NHL_CONFIG,
    SOCCER_CONFIG,
    AdapterConfig,
)
from datalayer.services.adapters.hockey import HockeyAdapter
from datalayer.services.adapters.registry import AdapterRegistry, build_default_registry
from datalayer.services.adapters.soccer import SoccerAdapter

__all__ = [
    "AdapterConfig",
    "AdapterRegistry",
    "AmericanFootballAdapter",
    "BaseSportAdapter",
    "BasketballAdapter",
    "HockeyAdapter",
    "SoccerAdapter",
    "build_default_registry",
    "EUROLEAGUE_CONFIG",
    "NBA_CONFIG",
    "NFL_CONFIG",
    "NHL_CONFIG",
    "SOCCER_CONFIG",
]
