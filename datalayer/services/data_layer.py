"""
Data layer orchestrator.

Single entry point for sports data. Dispatches point lookups to the sport's
adapter, caches every successful response, and composes the enriched match
view (both teams' stats, recent games, injuries, head-to-head and odds)
with concurrent sub-fetches.

Team resolution is the only fatal step of an aggregation. Every other
sub-fetch failure leaves its field empty and adds a warning.

Usage:
    data_layer = build_data_layer()
    response = await data_layer.get_enriched_match_data("nba", "Lakers", "Celtics")
    if response.success:
        print(response.data.home_team.stats.record)
    await data_layer.close()
"""
import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, List, Optional, Sequence

from datalayer.core import config
from datalayer.core.logging import clear_correlation_id, ensure_correlation_id, get_logger
from datalayer.models.entities import EnrichedMatch, Match, TeamContext
from datalayer.models.enums import DataProvider, MatchStatus, Sport, normalize_sport
from datalayer.models.envelope import DataLayerResponse, ErrorCode, utcnow
from datalayer.services.adapters.base import BaseSportAdapter
from datalayer.services.adapters.registry import AdapterRegistry, build_default_registry
from datalayer.services.core.espn_service import ESPNInjuryService
from datalayer.services.core.odds_api_service import OddsApiService
from datalayer.services.core.provider_client import ApiSportsClient
from datalayer.services.core.ttl_cache import TTLCache, make_key
from datalayer.services.resolution.team_resolver import TeamNameResolver

logger = get_logger(__name__)


@dataclass
class EnrichOptions:
    """Toggles and limits for ``get_enriched_match_data``."""
    include_stats: bool = True
    include_recent_games: bool = True
    include_h2h: bool = True
    include_injuries: bool = True
    include_odds: bool = False
    recent_games_limit: int = 5
    h2h_limit: int = 5


async def _skipped() -> None:
    return None


class DataLayer:
    """
    Orchestrator over the adapter registry.

    Args:
        registry: Sport adapters
        cache: Response cache (successful responses only)
        odds_service: Optional odds source; without it ``get_odds`` is NOT_CONFIGURED
        resolver: Resolver shared by the adapters (for cache stats/clearing)
        resources: Extra objects with an async ``close()`` owned by this instance
        logger: Optional logger
    """

    def __init__(
        self,
        registry: AdapterRegistry,
        cache: TTLCache,
        odds_service: Optional[OddsApiService] = None,
        resolver: Optional[TeamNameResolver] = None,
        resources: Sequence[Any] = (),
        logger: Optional[logging.Logger] = None,
    ):
        self.registry = registry
        self.cache = cache
        self.odds_service = odds_service
        self.resolver = resolver
        self._resources = list(resources)
        self.logger = logger or globals()["logger"]

    # ------------------------------------------------------------------
    # Dispatch & caching
    # ------------------------------------------------------------------

    def _adapter(self, sport: Any) -> Optional[BaseSportAdapter]:
        resolved = normalize_sport(sport)
        return self.registry.get(resolved) if resolved else None

    @staticmethod
    def _unsupported(sport: Any) -> DataLayerResponse:
        return DataLayerResponse.fail(
            ErrorCode.SPORT_NOT_SUPPORTED, f"Sport not supported: {sport}", DataProvider.API_SPORTS
        )

    async def _cached(
        self,
        method: str,
        params: Dict[str, Any],
        fetch: Callable[[], Awaitable[DataLayerResponse]],
        provider: DataProvider,
    ) -> DataLayerResponse:
        """Serve from cache, else fetch and cache on success."""
        key = make_key(method, params)
        entry = await self.cache.get_entry(key)
        if entry is not None:
            response, expiry = entry
            return response.as_cached(expiry)

        try:
            response = await fetch()
        except Exception as e:
            self.logger.exception(f"{method} failed for {params}: {e}")
            return DataLayerResponse.fail(ErrorCode.FETCH_ERROR, f"{method} failed: {e}", provider)

        if response.success:
            await self.cache.set(key, response)
        return response

    async def _dispatch(self, method: str, sport: Any, params: Dict[str, Any]) -> DataLayerResponse:
        adapter = self._adapter(sport)
        if adapter is None:
            return self._unsupported(sport)

        operation = getattr(adapter, method)
        return await self._cached(
            method,
            {"sport": adapter.sport.value, **params},
            lambda: operation(**params),
            adapter.provider,
        )

    # ------------------------------------------------------------------
    # Point lookups
    # ------------------------------------------------------------------

    async def find_team(self, sport: Any, name: Optional[str] = None, team_id: Optional[Any] = None, league: Optional[Any] = None):
        return await self._dispatch("find_team", sport, {"name": name, "team_id": team_id, "league": league})

    async def get_matches(
        self,
        sport: Any,
        team_id: Optional[Any] = None,
        date=None,
        date_from=None,
        date_to=None,
        season: Optional[str] = None,
        limit: int = 20,
    ):
        return await self._dispatch(
            "get_matches",
            sport,
            {
                "team_id": team_id,
                "date": date,
                "date_from": date_from,
                "date_to": date_to,
                "season": season,
                "limit": limit,
            },
        )

    async def get_team_stats(self, sport: Any, team_id: Any, season: Optional[str] = None):
        return await self._dispatch("get_team_stats", sport, {"team_id": team_id, "season": season})

    async def get_recent_games(self, sport: Any, team_id: Any, limit: int = 5):
        return await self._dispatch("get_recent_games", sport, {"team_id": team_id, "limit": limit})

    async def get_h2h(self, sport: Any, team1: Any, team2: Any, limit: int = 10):
        return await self._dispatch("get_h2h", sport, {"team1": team1, "team2": team2, "limit": limit})

    async def get_injuries(self, sport: Any, team_id: Any):
        return await self._dispatch("get_injuries", sport, {"team_id": team_id})

    async def get_odds(self, sport: Any, home_team: str, away_team: str):
        """Bookmaker odds for a fixture from The Odds API."""
        resolved = normalize_sport(sport)
        if resolved is None:
            return self._unsupported(sport)
        if self.odds_service is None:
            return DataLayerResponse.fail(
                ErrorCode.NOT_CONFIGURED, "Odds service not configured", DataProvider.THE_ODDS_API
            )

        return await self._cached(
            "get_odds",
            {"sport": resolved.value, "home": home_team, "away": away_team},
            lambda: self.odds_service.get_match_odds(resolved, home_team, away_team),
            DataProvider.THE_ODDS_API,
        )

    # ------------------------------------------------------------------
    # Aggregation
    # ------------------------------------------------------------------

    async def get_enriched_match_data(
        self,
        sport: Any,
        home_team_name: str,
        away_team_name: str,
        options: Optional[EnrichOptions] = None,
    ) -> DataLayerResponse[EnrichedMatch]:
        """
        Compose the enriched view of a fixture.

        Args:
            sport: Sport or sport alias
            home_team_name: Home team, any spelling
            away_team_name: Away team, any spelling
            options: Sub-fetch toggles and limits

        Returns:
            DataLayerResponse with EnrichedMatch; fails only with
            SPORT_NOT_SUPPORTED or TEAM_NOT_FOUND
        """
        token = ensure_correlation_id()
        try:
            return await self._enrich(sport, home_team_name, away_team_name, options or EnrichOptions())
        finally:
            if token is not None:
                clear_correlation_id(token)

    async def _enrich(self, sport: Any, home_name: str, away_name: str, options: EnrichOptions):
        adapter = self._adapter(sport)
        if adapter is None:
            return self._unsupported(sport)
        sport = adapter.sport

        home_result, away_result = await asyncio.gather(
            self.find_team(sport, name=home_name),
            self.find_team(sport, name=away_name),
        )
        unresolved = [
            f"{side} team '{name}'"
            for side, name, result in (("home", home_name, home_result), ("away", away_name, away_result))
            if not result.success
        ]
        if unresolved:
            self.logger.warning(f"Enrichment aborted, could not resolve {', '.join(unresolved)}")
            return DataLayerResponse.fail(
                ErrorCode.TEAM_NOT_FOUND, f"Could not resolve {', '.join(unresolved)}", adapter.provider
            )

        home, away = home_result.data, away_result.data
        fetches = {
            "home stats": self.get_team_stats(sport, home.external_id) if options.include_stats else None,
            "away stats": self.get_team_stats(sport, away.external_id) if options.include_stats else None,
            "home recent games": (
                self.get_recent_games(sport, home.external_id, options.recent_games_limit)
                if options.include_recent_games else None
            ),
            "away recent games": (
                self.get_recent_games(sport, away.external_id, options.recent_games_limit)
                if options.include_recent_games else None
            ),
            "h2h": (
                self.get_h2h(sport, home.external_id, away.external_id, options.h2h_limit)
                if options.include_h2h else None
            ),
            "home injuries": self.get_injuries(sport, home.external_id) if options.include_injuries else None,
            "away injuries": self.get_injuries(sport, away.external_id) if options.include_injuries else None,
            "odds": self.get_odds(sport, home.name, away.name) if options.include_odds else None,
        }
        responses = await asyncio.gather(
            *(fetch if fetch is not None else _skipped() for fetch in fetches.values())
        )
        results = dict(zip(fetches, responses))

        warnings: List[str] = []
        for label, response in results.items():
            # A capability the sport lacks is not a degraded fetch
            if response is not None and not response.success and response.error_code != ErrorCode.NOT_SUPPORTED:
                warnings.append(f"{label}: {response.error_code}")

        def data(label: str):
            response = results[label]
            return response.data if response is not None and response.success else None

        match = Match(
            id=f"{sport.value}-{home.external_id}-{away.external_id}",
            external_id=f"{home.external_id}-{away.external_id}",
            sport=sport,
            league=home.league or adapter.config.league_name,
            league_id=str(adapter.config.league_id),
            season=adapter.current_season(),
            home_team=home,
            away_team=away,
            status=MatchStatus.SCHEDULED,
            date=utcnow(),
            provider=adapter.provider,
        )
        enriched = EnrichedMatch(
            match=match,
            home_team=TeamContext(
                team=home,
                stats=data("home stats"),
                recent_games=data("home recent games"),
                injuries=data("home injuries"),
            ),
            away_team=TeamContext(
                team=away,
                stats=data("away stats"),
                recent_games=data("away recent games"),
                injuries=data("away injuries"),
            ),
            h2h=data("h2h"),
            odds=data("odds"),
            warnings=tuple(warnings),
        )

        if warnings:
            self.logger.info(f"Enriched {match.id} with {len(warnings)} warnings: {warnings}")
        else:
            self.logger.info(f"Enriched {match.id}")
        return DataLayerResponse.ok(enriched, adapter.provider)

    # ------------------------------------------------------------------
    # Introspection & lifecycle
    # ------------------------------------------------------------------

    def get_available_sports(self) -> List[Sport]:
        """Sports whose provider credential is configured."""
        return self.registry.available()

    def is_sport_available(self, sport: Any) -> bool:
        resolved = normalize_sport(sport)
        return resolved is not None and self.registry.is_available(resolved)

    async def clear_cache(self) -> None:
        await self.cache.clear()
        if self.resolver is not None:
            self.resolver.clear_cache()

    def get_cache_stats(self) -> Dict[str, Any]:
        stats = {"cache": self.cache.stats()}
        if self.resolver is not None:
            resolver_stats = self.resolver.get_cache_stats()
            stats["resolver"] = {k: v for k, v in resolver_stats.items() if k != "entries"}
        return stats

    async def close(self) -> None:
        """Close every HTTP client this instance owns."""
        if self.odds_service is not None:
            await self.odds_service.close()
        for resource in self._resources:
            await resource.close()


def build_data_layer(settings: Optional[config.Settings] = None) -> DataLayer:
    """Default wiring: one API-Sports client, resolver, ESPN and odds service."""
    settings = settings or config.settings

    resolver = TeamNameResolver(
        threshold=settings.FUZZY_MATCH_THRESHOLD,
        same_team_threshold=settings.SAME_TEAM_THRESHOLD,
    )
    client = ApiSportsClient(settings.API_SPORTS_KEY, timeout=settings.API_SPORTS_TIMEOUT)
    espn = ESPNInjuryService(resolver, cache_ttl=settings.ESPN_CACHE_TTL)
    odds = OddsApiService(
        settings.THE_ODDS_API_KEY,
        regions=settings.ODDS_API_REGIONS,
        cache_ttl=settings.ODDS_API_CACHE_TTL,
    )
    cache = TTLCache(
        default_ttl=settings.get_cache_ttl_seconds(),
        enabled=settings.DATA_LAYER_ENABLE_CACHING,
    )

    registry = build_default_registry(client, resolver, espn=espn)
    logger.info(f"Data layer ready, available sports: {[s.value for s in registry.available()]}")
    return DataLayer(registry, cache, odds_service=odds, resolver=resolver, resources=(client, espn))
