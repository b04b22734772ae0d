"""
Adapter registry.

Holds one adapter per sport and answers which sports are available (have a
configured provider credential).

Usage:
    registry = build_default_registry(client, resolver, espn=espn)
    adapter = registry.get(Sport.BASKETBALL)
"""
from typing import Dict, List, Optional

from datalayer.core.logging import get_logger
from datalayer.models.enums import Sport
from datalayer.services.adapters.american_football import AmericanFootballAdapter
from datalayer.services.adapters.base import BaseSportAdapter, Clock
from datalayer.services.adapters.basketball import BasketballAdapter
from datalayer.services.adapters.hockey import HockeyAdapter
from datalayer.services.adapters.soccer import SoccerAdapter
from datalayer.services.core.espn_service import ESPNInjuryService
from datalayer.services.core.provider_client import ApiSportsClient
from datalayer.services.resolution.team_resolver import TeamNameResolver

logger = get_logger(__name__)


class AdapterRegistry:
    """Sport -> adapter lookup."""

    def __init__(self):
        self._adapters: Dict[Sport, BaseSportAdapter] = {}

    def register(self, adapter: BaseSportAdapter) -> None:
        """Register an adapter under its sport, replacing any previous one."""
        if adapter.sport in self._adapters:
            logger.info(f"Replacing adapter for {adapter.sport.value}")
        self._adapters[adapter.sport] = adapter

    def get(self, sport: Sport) -> Optional[BaseSportAdapter]:
        return self._adapters.get(sport)

    def sports(self) -> List[Sport]:
        return list(self._adapters)

    def available(self) -> List[Sport]:
        """Registered sports whose provider is configured."""
        return [sport for sport, adapter in self._adapters.items() if adapter.is_available()]

    def is_available(self, sport: Sport) -> bool:
        adapter = self._adapters.get(sport)
        return adapter is not None and adapter.is_available()


def build_default_registry(
    client: ApiSportsClient,
    resolver: TeamNameResolver,
    espn: Optional[ESPNInjuryService] = None,
    clock: Optional[Clock] = None,
) -> AdapterRegistry:
    """Registry with the four API-Sports adapters sharing one client and resolver."""
    registry = AdapterRegistry()
    registry.register(SoccerAdapter(client, resolver, clock=clock))
    registry.register(BasketballAdapter(client, resolver, clock=clock))
    registry.register(HockeyAdapter(client, resolver, clock=clock))
    registry.register(AmericanFootballAdapter(client, resolver, clock=clock, espn=espn))
    return registry
