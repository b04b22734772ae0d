"""Tests for OddsApiService.

Test Strategy:
1. Test loose team-name pairing between bookmaker events and fixtures
2. Test transformation of bookmaker markets (moneyline, spread, totals)
3. Test failure envelopes (not configured, no match, fetch error, open breaker)
4. Test board caching and quota tracking from response headers
"""
from datetime import datetime, timezone
from unittest.mock import AsyncMock

import httpx
import pytest

from datalayer.models.enums import DataProvider, Sport
from datalayer.models.envelope import ErrorCode
from datalayer.services.core.circuit_breaker import CircuitBreakerError
from datalayer.services.core.odds_api_service import OddsApiService, names_match, parse_timestamp

HOME = "Los Angeles Lakers"
AWAY = "Boston Celtics"


@pytest.fixture
def service(payloads, monkeypatch):
    service = OddsApiService("test-key")
    monkeypatch.setattr(
        service,
        "_fetch_events",
        AsyncMock(return_value=[
            payloads.odds_event("Golden State Warriors", "Denver Nuggets", event_id="evt-0"),
            payloads.odds_event(HOME, AWAY),
        ]),
    )
    return service


class TestNamesMatch:
    """Test suite for names_match."""

    @pytest.mark.parametrize(
        "event_name,requested",
        [(HOME, "Lakers"), (HOME, "los angeles"), ("Manchester City", "Manchester City FC")],
    )
    def test_matches(self, event_name, requested):
        assert names_match(event_name, requested)

    @pytest.mark.parametrize(
        "event_name,requested",
        [(HOME, "Celtics"), ("Manchester City", "Arsenal"), ("", "Lakers"), (HOME, "")],
    )
    def test_does_not_match(self, event_name, requested):
        assert not names_match(event_name, requested)

    def test_parse_timestamp(self):
        assert parse_timestamp("2025-11-16T00:30:00Z") == datetime(2025, 11, 16, 0, 30, tzinfo=timezone.utc)
        assert parse_timestamp("not a date") is None
        assert parse_timestamp(None) is None


class TestGetMatchOdds:
    """Test suite for get_match_odds."""

    @pytest.mark.asyncio
    async def test_transforms_matching_event(self, service):
        """Should pick the event for the fixture and parse every market."""
        result = await service.get_match_odds(Sport.BASKETBALL, "Lakers", "Celtics")

        assert result.success
        assert result.metadata.provider == DataProvider.THE_ODDS_API
        odds = result.data
        assert odds.match_id == "evt-1"
        assert (odds.home_team, odds.away_team) == (HOME, AWAY)
        assert [b.key for b in odds.bookmakers] == ["fanduel", "draftkings"]

        fanduel = odds.bookmakers[0]
        assert (fanduel.moneyline.home, fanduel.moneyline.away, fanduel.moneyline.draw) == (-150, 130, None)
        assert (fanduel.spread.home_line, fanduel.spread.away_line) == (-3.5, 3.5)
        assert (fanduel.total.line, fanduel.total.over_price, fanduel.total.under_price) == (228.5, -105, -115)

        draftkings = odds.bookmakers[1]
        assert draftkings.spread is None
        assert draftkings.total is None
        assert odds.last_update == datetime(2025, 11, 15, 11, 30, tzinfo=timezone.utc)
        assert odds.commence_time == datetime(2025, 11, 16, 0, 30, tzinfo=timezone.utc)

    @pytest.mark.asyncio
    async def test_board_is_cached_per_sport(self, service):
        await service.get_match_odds(Sport.BASKETBALL, "Lakers", "Celtics")
        await service.get_match_odds(Sport.BASKETBALL, "Warriors", "Nuggets")

        assert service._fetch_events.await_count == 1

    @pytest.mark.asyncio
    async def test_no_matching_event(self, service):
        result = await service.get_match_odds(Sport.BASKETBALL, "Miami Heat", "Chicago Bulls")

        assert result.error_code == ErrorCode.NO_ODDS_FOUND
        assert result.error.message == "No odds found for Miami Heat vs Chicago Bulls"

    @pytest.mark.asyncio
    async def test_not_configured(self):
        service = OddsApiService("")

        result = await service.get_match_odds(Sport.BASKETBALL, "Lakers", "Celtics")

        assert result.error_code == ErrorCode.NOT_CONFIGURED

    @pytest.mark.asyncio
    async def test_fetch_error(self, monkeypatch):
        service = OddsApiService("test-key")
        monkeypatch.setattr(service, "_fetch_events", AsyncMock(side_effect=httpx.ConnectError("down")))

        result = await service.get_match_odds(Sport.HOCKEY, "Bruins", "Leafs")

        assert result.error_code == ErrorCode.FETCH_ERROR

    @pytest.mark.asyncio
    async def test_open_breaker(self, monkeypatch):
        service = OddsApiService("test-key")
        monkeypatch.setattr(service, "_fetch_events", AsyncMock(side_effect=CircuitBreakerError("open")))

        result = await service.get_match_odds(Sport.SOCCER, "Arsenal", "Chelsea")

        assert result.error_code == ErrorCode.CIRCUIT_OPEN


class TestOddsHttp:
    """Test suite for the HTTP request and quota headers."""

    @pytest.mark.asyncio
    async def test_request_shape_and_quota(self, payloads):
        """Should query the sport's board and record quota headers."""
        seen = {}

        def handler(request):
            seen["path"] = request.url.path
            seen["params"] = dict(request.url.params)
            return httpx.Response(
                200,
                json=[payloads.odds_event(HOME, AWAY)],
                headers={"x-requests-remaining": "3500", "x-requests-used": "1500"},
            )

        service = OddsApiService(
            "test-key", client=httpx.AsyncClient(transport=httpx.MockTransport(handler))
        )

        result = await service.get_match_odds(Sport.BASKETBALL, "Lakers", "Celtics")

        assert result.success
        assert seen["path"] == "/v4/sports/basketball_nba/odds"
        assert seen["params"] == {
            "apiKey": "test-key",
            "regions": "us",
            "markets": "h2h,spreads,totals",
            "oddsFormat": "american",
        }
        quota = service.get_quota_status()
        assert quota["requests_remaining"] == 3500
        assert quota["requests_used"] == 1500
        assert quota["last_updated"] is not None

    @pytest.mark.asyncio
    async def test_http_error_status(self):
        service = OddsApiService(
            "test-key", client=httpx.AsyncClient(transport=httpx.MockTransport(lambda r: httpx.Response(401)))
        )

        result = await service.get_match_odds(Sport.BASKETBALL, "Lakers", "Celtics")

        assert result.error_code == ErrorCode.FETCH_ERROR
