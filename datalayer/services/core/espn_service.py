"""
ESPN injuries feed for gridiron football.

API-Sports has no injuries endpoint for american football, so the gridiron
adapter reads ESPN's public league-wide injury report and picks out one team.

ESPN API Endpoints:
- Base URL: https://site.api.espn.com/apis/site/v2/sports/
- Documentation: Unofficial, community-maintained

The feed is grouped by team display name. Teams are matched by name through
the resolver's same-team predicate, since ESPN ids differ from API-Sports ids.
"""
import logging
from typing import Any, Dict, Optional, Tuple

import httpx
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential

from datalayer.core.logging import get_logger
from datalayer.core.metrics import record_provider_request
from datalayer.models.entities import Injury
from datalayer.models.enums import DataProvider, Sport
from datalayer.models.envelope import DataLayerResponse, ErrorCode
from datalayer.services.core.circuit_breaker import espn_api_breaker, with_circuit_breaker
from datalayer.services.core.ttl_cache import TTLCache, make_key
from datalayer.services.resolution.team_resolver import TeamNameResolver
from datalayer.utils.injuries import normalize_injury_status
from datalayer.utils.seasons import season_aware_ttl

logger = get_logger(__name__)

# ESPN API base URL
ESPN_BASE_URL = "https://site.api.espn.com/apis/site/v2/sports"

# Sport mappings
ESPN_SPORT_PATHS = {
    Sport.AMERICAN_FOOTBALL: "football/nfl",
}


class ESPNInjuryService:
    """
    ESPN injury report lookups.

    Usage:
        service = ESPNInjuryService(resolver)
        response = await service.get_team_injuries(Sport.AMERICAN_FOOTBALL, "Chiefs", "nfl-17")
    """

    def __init__(
        self,
        resolver: TeamNameResolver,
        cache_ttl: int = 600,
        client: Optional[httpx.AsyncClient] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.resolver = resolver
        self.cache_ttl = cache_ttl
        self._cache = TTLCache(default_ttl=cache_ttl, name="espn")
        self._client = client
        self._owns_client = client is None
        self.logger = logger or globals()["logger"]

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None:
            timeout = httpx.Timeout(30.0)
            limits = httpx.Limits(max_keepalive_connections=5, max_connections=10)
            self._client = httpx.AsyncClient(
                timeout=timeout,
                limits=limits,
                headers={"Accept": "application/json"},
            )
            self._owns_client = True
        return self._client

    async def close(self):
        """Close the HTTP client."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    @with_circuit_breaker(espn_api_breaker, fallback=None)
    @retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=2, max=10),
        retry=retry_if_exception_type(httpx.TransportError),
        reraise=True,
    )
    async def _fetch_json(self, url: str) -> Dict[str, Any]:
        """GET a feed; returns None (fallback) while the ESPN breaker is open."""
        client = await self._get_client()
        response = await client.get(url)
        response.raise_for_status()
        return response.json()

    async def _get_feed(self, sport: Sport) -> Tuple[Optional[Dict[str, Any]], Optional[str], str]:
        """Return ``(feed, error_code, message)`` for a sport's injury report."""
        url = f"{ESPN_BASE_URL}/{ESPN_SPORT_PATHS[sport]}/injuries"
        cache_key = make_key("espn_injuries", {"url": url})

        cached = await self._cache.get(cache_key)
        if cached is not None:
            return cached, None, ""

        try:
            feed = await self._fetch_json(url)
        except (httpx.HTTPError, ValueError) as e:
            self.logger.error(f"Error fetching ESPN injuries from {url}: {e}")
            record_provider_request(DataProvider.ESPN.value, ErrorCode.FETCH_ERROR)
            return None, ErrorCode.FETCH_ERROR, f"ESPN injuries fetch failed: {e}"

        if feed is None:
            record_provider_request(DataProvider.ESPN.value, ErrorCode.CIRCUIT_OPEN)
            return None, ErrorCode.CIRCUIT_OPEN, "ESPN circuit breaker is open"

        record_provider_request(DataProvider.ESPN.value, "success")
        await self._cache.set(cache_key, feed, ttl=season_aware_ttl(sport, self.cache_ttl))
        return feed, None, ""

    async def get_team_injuries(
        self,
        sport: Sport,
        team_name: str,
        team_id: str,
    ) -> DataLayerResponse[Tuple[Injury, ...]]:
        """
        Injuries for one team from the league-wide ESPN report.

        Args:
            sport: Sport (only american football has an ESPN feed here)
            team_name: Team display name used to find the team's block
            team_id: Canonical team id stamped on each Injury

        Returns:
            DataLayerResponse with a tuple of Injury (empty when the team has
            no listed injuries)
        """
        provider = DataProvider.ESPN
        if sport not in ESPN_SPORT_PATHS:
            return DataLayerResponse.fail(
                ErrorCode.NOT_SUPPORTED, f"ESPN injuries are not available for {sport.value}", provider
            )

        feed, error_code, message = await self._get_feed(sport)
        if error_code:
            return DataLayerResponse.fail(error_code, message, provider)

        for block in feed.get("injuries", []):
            block_name = block.get("displayName", "")
            if block_name and self.resolver.is_same_team(block_name, team_name, sport):
                injuries = tuple(
                    self._transform_injury(item, sport, team_id, block_name)
                    for item in block.get("injuries", [])
                )
                self.logger.debug(f"ESPN: {len(injuries)} injuries for {block_name}")
                return DataLayerResponse.ok(injuries, provider)

        # Team not listed means nobody is on the report
        return DataLayerResponse.ok((), provider)

    def _transform_injury(self, item: Dict[str, Any], sport: Sport, team_id: str, team_name: str) -> Injury:
        athlete = item.get("athlete") or {}
        details = item.get("details") or {}
        injury_type = details.get("type") or (item.get("type") or {}).get("description") or "Unknown"

        return Injury(
            player_id=str(athlete.get("id") or item.get("id") or ""),
            player_name=athlete.get("displayName", ""),
            team_id=team_id,
            team_name=team_name,
            sport=sport,
            type=injury_type,
            status=normalize_injury_status(item.get("status")),
            description=item.get("shortComment") or item.get("longComment") or "",
            expected_return=details.get("returnDate"),
            provider=DataProvider.ESPN,
        )

