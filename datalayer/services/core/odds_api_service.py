"""
The Odds API service for fetching betting odds.

Game odds (moneyline, spread, totals) for one fixture, looked up by team
names. Scores and stats come from API-Sports; only odds come from here.

Quota Tracking: Response headers x-requests-remaining, x-requests-used
"""
import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

import httpx
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential

from datalayer.core.logging import get_logger
from datalayer.core.metrics import record_provider_request, update_odds_api_quota
from datalayer.models.entities import BookmakerOdds, MoneylineQuote, Odds, SpreadQuote, TotalQuote
from datalayer.models.enums import DataProvider, Sport
from datalayer.models.envelope import DataLayerResponse, ErrorCode, utcnow
from datalayer.services.core.circuit_breaker import CircuitBreakerError, odds_api_breaker
from datalayer.services.core.ttl_cache import TTLCache, make_key

logger = get_logger(__name__)

# The Odds API base URL
THE_ODDS_API_BASE = "https://api.the-odds-api.com/v4"

ODDS_SPORT_KEYS = {
    Sport.SOCCER: "soccer_epl",
    Sport.BASKETBALL: "basketball_nba",
    Sport.HOCKEY: "icehockey_nhl",
    Sport.AMERICAN_FOOTBALL: "americanfootball_nfl",
}

ODDS_MARKETS = "h2h,spreads,totals"

# Alert thresholds on remaining monthly requests
QUOTA_CRITICAL = 1000
QUOTA_WARNING = 4000


def parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    """Parse an ISO-8601 timestamp with a trailing 'Z'."""
    if not value:
        return None
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None


def names_match(event_name: str, requested_name: str) -> bool:
    """
    Loose team-name comparison used to pair an odds event with a fixture.

    Either name's first token must appear inside the other name.

    Examples:
        >>> names_match("Los Angeles Lakers", "los angeles")
        True
        >>> names_match("Manchester City", "Arsenal")
        False
    """
    event = (event_name or "").lower().strip()
    requested = (requested_name or "").lower().strip()
    if not event or not requested:
        return False
    return requested.split()[0] in event or event.split()[0] in requested


class OddsApiService:
    """
    The Odds API service for betting odds.

    Args:
        api_key: The Odds API key; empty means every lookup returns NOT_CONFIGURED
        regions: Bookmaker regions (us, uk, eu, au)
        cache_ttl: TTL in seconds for fetched odds boards
        client: Optional pre-built httpx.AsyncClient
        logger: Optional logger
    """

    def __init__(
        self,
        api_key: str,
        regions: str = "us",
        cache_ttl: int = 120,
        client: Optional[httpx.AsyncClient] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.api_key = api_key
        self.regions = regions
        self.cache_ttl = cache_ttl
        self._cache = TTLCache(default_ttl=cache_ttl, name="odds_api")
        self._client = client
        self._owns_client = client is None
        self.logger = logger or globals()["logger"]

        # Quota tracking (from response headers)
        self._requests_remaining: Optional[int] = None
        self._requests_used: Optional[int] = None
        self._quota_last_updated: Optional[datetime] = None

    def is_configured(self) -> bool:
        return bool(self.api_key)

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None:
            timeout = httpx.Timeout(30.0)
            limits = httpx.Limits(max_keepalive_connections=5, max_connections=10)
            self._client = httpx.AsyncClient(timeout=timeout, limits=limits)
            self._owns_client = True
        return self._client

    async def close(self):
        """Close the HTTP client."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    def _update_quota_from_headers(self, response: httpx.Response):
        """
        Update quota tracking from response headers.

        The Odds API returns:
        - x-requests-remaining: Requests left in current billing period
        - x-requests-used: Requests used in current billing period
        """
        try:
            remaining = response.headers.get("x-requests-remaining")
            used = response.headers.get("x-requests-used")

            if remaining:
                self._requests_remaining = int(float(remaining))
            if used:
                self._requests_used = int(float(used))

            self._quota_last_updated = utcnow()
        except (ValueError, TypeError) as e:
            self.logger.warning(f"Failed to parse quota headers: {e}")
            return

        if self._requests_remaining is None:
            return

        if self._requests_remaining < QUOTA_CRITICAL:
            self.logger.error(
                f"CRITICAL: Odds API quota critically low! "
                f"Only {self._requests_remaining} requests remaining."
            )
        elif self._requests_remaining < QUOTA_WARNING:
            self.logger.warning(
                f"WARNING: Odds API quota running low. {self._requests_remaining} requests remaining."
            )

        if self._requests_used is not None:
            update_odds_api_quota(remaining=self._requests_remaining, used=self._requests_used)

    def get_quota_status(self) -> Dict[str, Any]:
        """Remaining/used requests and last update time, as last seen in headers."""
        return {
            "requests_remaining": self._requests_remaining,
            "requests_used": self._requests_used,
            "last_updated": self._quota_last_updated.isoformat() if self._quota_last_updated else None,
        }

    @odds_api_breaker
    async def _send(self, url: str, params: Dict[str, Any]) -> httpx.Response:
        """Issue the GET; wrapped with the Odds API circuit breaker."""
        client = await self._get_client()
        return await client.get(url, params=params)

    @retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=2, max=10),
        retry=retry_if_exception_type(httpx.TransportError),
        reraise=True,
    )
    async def _fetch_events(self, sport_key: str) -> List[Dict[str, Any]]:
        """Fetch the odds board for a sport key (retried on transport errors)."""
        params = {
            "apiKey": self.api_key,
            "regions": self.regions,
            "markets": ODDS_MARKETS,
            "oddsFormat": "american",
        }
        response = await self._send(f"{THE_ODDS_API_BASE}/sports/{sport_key}/odds", params)
        self._update_quota_from_headers(response)
        response.raise_for_status()
        return response.json()

    async def get_match_odds(
        self,
        sport: Sport,
        home_team: str,
        away_team: str,
    ) -> DataLayerResponse[Odds]:
        """
        Find bookmaker odds for a fixture by team names.

        Args:
            sport: Sport of the fixture
            home_team: Home team name (any spelling close to the bookmaker's)
            away_team: Away team name

        Returns:
            DataLayerResponse with Odds, or NOT_CONFIGURED / NO_ODDS_FOUND /
            CIRCUIT_OPEN / FETCH_ERROR
        """
        provider = DataProvider.THE_ODDS_API
        if not self.is_configured():
            return DataLayerResponse.fail(ErrorCode.NOT_CONFIGURED, "The Odds API key is not configured", provider)

        sport_key = ODDS_SPORT_KEYS.get(sport)
        if sport_key is None:
            return DataLayerResponse.fail(ErrorCode.NOT_SUPPORTED, f"No odds market for {sport}", provider)

        cache_key = make_key("odds_board", {"sport_key": sport_key, "regions": self.regions})
        events = await self._cache.get(cache_key)
        if events is None:
            try:
                events = await self._fetch_events(sport_key)
            except CircuitBreakerError:
                self.logger.warning("Odds API circuit breaker is OPEN - returning no odds")
                record_provider_request(provider.value, ErrorCode.CIRCUIT_OPEN)
                return DataLayerResponse.fail(ErrorCode.CIRCUIT_OPEN, "The Odds API circuit breaker is open", provider)
            except (httpx.HTTPError, ValueError) as e:
                self.logger.error(f"Error fetching {sport_key} odds: {e}")
                record_provider_request(provider.value, ErrorCode.FETCH_ERROR)
                return DataLayerResponse.fail(ErrorCode.FETCH_ERROR, f"Odds fetch failed: {e}", provider)

            record_provider_request(provider.value, "success")
            await self._cache.set(cache_key, events, ttl=self.cache_ttl)

        for event in events or []:
            if names_match(event.get("home_team", ""), home_team) and names_match(event.get("away_team", ""), away_team):
                return DataLayerResponse.ok(self._transform_event(event), provider)

        self.logger.info(f"No odds event matched {home_team} vs {away_team} ({sport_key})")
        return DataLayerResponse.fail(
            ErrorCode.NO_ODDS_FOUND, f"No odds found for {home_team} vs {away_team}", provider
        )

    def _transform_event(self, event: Dict[str, Any]) -> Odds:
        home_name = event.get("home_team", "")
        away_name = event.get("away_team", "")

        bookmakers = []
        for bookmaker in event.get("bookmakers", []):
            markets = {m.get("key"): m.get("outcomes", []) for m in bookmaker.get("markets", [])}
            bookmakers.append(
                BookmakerOdds(
                    key=bookmaker.get("key", ""),
                    title=bookmaker.get("title", ""),
                    last_update=parse_timestamp(bookmaker.get("last_update")),
                    moneyline=_parse_moneyline(markets.get("h2h"), home_name, away_name),
                    spread=_parse_spread(markets.get("spreads"), home_name, away_name),
                    total=_parse_total(markets.get("totals")),
                )
            )

        updates = [b.last_update for b in bookmakers if b.last_update is not None]
        return Odds(
            match_id=str(event.get("id", "")),
            home_team=home_name,
            away_team=away_name,
            bookmakers=tuple(bookmakers),
            commence_time=parse_timestamp(event.get("commence_time")),
            last_update=max(updates) if updates else None,
        )


def _parse_moneyline(outcomes, home_name: str, away_name: str) -> Optional[MoneylineQuote]:
    if not outcomes:
        return None
    prices = {o.get("name"): o.get("price") for o in outcomes}
    return MoneylineQuote(home=prices.get(home_name), away=prices.get(away_name), draw=prices.get("Draw"))


def _parse_spread(outcomes, home_name: str, away_name: str) -> Optional[SpreadQuote]:
    if not outcomes:
        return None
    by_name = {o.get("name"): o for o in outcomes}
    home = by_name.get(home_name, {})
    away = by_name.get(away_name, {})
    return SpreadQuote(
        home_line=home.get("point"),
        home_price=home.get("price"),
        away_line=away.get("point"),
        away_price=away.get("price"),
    )


def _parse_total(outcomes) -> Optional[TotalQuote]:
    if not outcomes:
        return None
    by_name = {str(o.get("name", "")).lower(): o for o in outcomes}
    over = by_name.get("over", {})
    under = by_name.get("under", {})
    return TotalQuote(
        line=over.get("point", under.get("point")),
        over_price=over.get("price"),
        under_price=under.get("price"),
    )
