"""Shared pytest fixtures for sports-data-layer tests."""
import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple

import httpx
import pytest

# Add project root to Python path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from datalayer.services.core.circuit_breaker import (  # noqa: E402
    api_sports_breaker,
    espn_api_breaker,
    odds_api_breaker,
    reset_breaker,
)
from datalayer.services.core.provider_client import ApiSportsClient  # noqa: E402
from datalayer.services.resolution.team_resolver import TeamNameResolver  # noqa: E402

# 15 Nov 2025: basketball "2025-2026", everything else "2025"
FIXED_NOW = datetime(2025, 11, 15, 12, 0, tzinfo=timezone.utc)

TeamRef = Tuple[int, str]


class FakeClock:
    """Controllable clock; call it for the current time, ``advance`` to move it."""

    def __init__(self, now: datetime = FIXED_NOW):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now = self.now + timedelta(seconds=seconds)


class MockApi:
    """
    httpx.MockTransport handler for API-Sports.

    Routes requests by URL path to canned bodies (or callables taking the
    query params) and records every call as ``(path, params)``.
    """

    def __init__(self):
        self.routes: Dict[str, Callable[[Dict[str, str]], Any]] = {}
        self.calls: List[Tuple[str, Dict[str, str]]] = []

    def on(self, path: str, body: Any = None, handler: Optional[Callable] = None) -> None:
        self.routes[path] = handler or (lambda params: body)

    def handler(self, request: httpx.Request) -> httpx.Response:
        params = dict(request.url.params)
        self.calls.append((request.url.path, params))
        route = self.routes.get(request.url.path)
        if route is None:
            return httpx.Response(200, json=Payloads.body([]))
        result = route(params)
        if isinstance(result, httpx.Response):
            return result
        return httpx.Response(200, json=result)

    def calls_to(self, path: str) -> List[Dict[str, str]]:
        return [params for call_path, params in self.calls if call_path == path]


class Payloads:
    """Builders for API-Sports, ESPN and Odds API payloads."""

    @staticmethod
    def body(items: Any, errors: Any = None) -> Dict[str, Any]:
        return {
            "get": "",
            "parameters": {},
            "errors": errors if errors is not None else [],
            "results": len(items) if isinstance(items, list) else 1,
            "response": items,
        }

    # Basketball / hockey teams share one shape

    @staticmethod
    def team(team_id: int, name: str, country: str = "USA") -> Dict[str, Any]:
        return {"id": team_id, "name": name, "logo": f"https://media.api-sports.io/{team_id}.png", "country": {"name": country}}

    @staticmethod
    def basketball_game(
        game_id: int,
        home: TeamRef,
        away: TeamRef,
        home_score: Optional[int],
        away_score: Optional[int],
        status: str = "FT",
        timestamp: int = 1760000000,
        season: str = "2025-2026",
    ) -> Dict[str, Any]:
        def side(total):
            if total is None:
                return {"quarter_1": None, "quarter_2": None, "quarter_3": None, "quarter_4": None, "total": None}
            quarter = total // 4
            return {
                "quarter_1": quarter,
                "quarter_2": quarter,
                "quarter_3": quarter,
                "quarter_4": total - 3 * quarter,
                "total": total,
            }

        return {
            "id": game_id,
            "date": datetime.fromtimestamp(timestamp, tz=timezone.utc).isoformat(),
            "timestamp": timestamp,
            "status": {"long": "", "short": status},
            "league": {"id": 12, "name": "NBA", "season": season},
            "teams": {
                "home": {"id": home[0], "name": home[1], "logo": None},
                "away": {"id": away[0], "name": away[1], "logo": None},
            },
            "scores": {"home": side(home_score), "away": side(away_score)},
        }

    @staticmethod
    def basketball_statistics(wins: int, losses: int, points_for: int, points_against: int) -> Dict[str, Any]:
        return {
            "league": {"id": 12, "name": "NBA", "season": "2025-2026"},
            "team": {"id": 145, "name": "Los Angeles Lakers"},
            "games": {
                "played": {"home": 5, "away": 5, "all": wins + losses},
                "wins": {"home": {"total": 3}, "away": {"total": wins - 3}, "all": {"total": wins, "percentage": "0.6"}},
                "loses": {"home": {"total": 2}, "away": {"total": losses - 2}, "all": {"total": losses, "percentage": "0.4"}},
            },
            "points": {
                "for": {"total": {"home": 600, "away": points_for - 600, "all": points_for}},
                "against": {"total": {"home": 550, "away": points_against - 550, "all": points_against}},
            },
        }

    @staticmethod
    def basketball_standing(team_id: int, wins: int, losses: int, points_for: int, points_against: int, form: str = "WWLWL"):
        return {
            "position": 3,
            "team": {"id": team_id, "name": "Boston Celtics"},
            "group": {"name": "Eastern Conference"},
            "games": {"played": wins + losses, "win": {"total": wins}, "lose": {"total": losses}},
            "points": {"for": points_for, "against": points_against},
            "form": form,
        }

    # Soccer

    @staticmethod
    def soccer_team(team_id: int, name: str, code: Optional[str] = None) -> Dict[str, Any]:
        return {
            "team": {"id": team_id, "name": name, "code": code, "country": "England", "founded": 1878, "logo": None},
            "venue": {"id": 556, "name": "Old Trafford", "city": "Manchester", "capacity": 76212},
        }

    @staticmethod
    def soccer_fixture(
        fixture_id: int,
        home: TeamRef,
        away: TeamRef,
        home_goals: Optional[int],
        away_goals: Optional[int],
        status: str = "FT",
        timestamp: int = 1760000000,
    ) -> Dict[str, Any]:
        return {
            "fixture": {
                "id": fixture_id,
                "date": datetime.fromtimestamp(timestamp, tz=timezone.utc).isoformat(),
                "timestamp": timestamp,
                "status": {"short": status},
                "venue": {"name": "Old Trafford"},
            },
            "league": {"id": 39, "name": "Premier League", "season": 2025, "round": "Regular Season - 10"},
            "teams": {
                "home": {"id": home[0], "name": home[1], "logo": None},
                "away": {"id": away[0], "name": away[1], "logo": None},
            },
            "goals": {"home": home_goals, "away": away_goals},
            "score": {"halftime": {"home": 1 if home_goals else 0, "away": 0}},
        }

    @staticmethod
    def soccer_statistics(wins: int, draws: int, losses: int, goals_for: int, goals_against: int, form: str = "WDLWW"):
        return {
            "league": {"id": 39, "name": "Premier League", "season": 2025},
            "team": {"id": 33, "name": "Manchester United"},
            "form": form,
            "fixtures": {
                "played": {"total": wins + draws + losses},
                "wins": {"home": 3, "away": wins - 3, "total": wins},
                "draws": {"home": 1, "away": draws - 1, "total": draws},
                "loses": {"home": 1, "away": losses - 1, "total": losses},
            },
            "goals": {
                "for": {"total": {"home": 10, "away": goals_for - 10, "total": goals_for}},
                "against": {"total": {"home": 4, "away": goals_against - 4, "total": goals_against}},
            },
            "biggest": {
                "streak": {"wins": 3, "draws": 1, "loses": 1},
                "wins": {"home": "3-0", "away": "1-2"},
                "loses": {"home": "0-1", "away": "2-0"},
            },
            "clean_sheet": {"home": 2, "away": 1, "total": 3},
            "failed_to_score": {"home": 0, "away": 2, "total": 2},
        }

    # Hockey

    @staticmethod
    def hockey_game(
        game_id: int,
        home: TeamRef,
        away: TeamRef,
        home_score: Optional[int],
        away_score: Optional[int],
        status: str = "FT",
        timestamp: int = 1760000000,
        periods: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        return {
            "id": game_id,
            "date": datetime.fromtimestamp(timestamp, tz=timezone.utc).isoformat(),
            "timestamp": timestamp,
            "status": {"short": status},
            "league": {"id": 57, "name": "NHL", "season": 2025},
            "teams": {
                "home": {"id": home[0], "name": home[1], "logo": None},
                "away": {"id": away[0], "name": away[1], "logo": None},
            },
            "scores": {"home": home_score, "away": away_score},
            "periods": periods if periods is not None else {"first": "1-0", "second": "1-1", "third": "1-1", "overtime": None},
        }

    # American football

    @staticmethod
    def nfl_team(team_id: int, name: str, code: str) -> Dict[str, Any]:
        return {
            "id": team_id,
            "name": name,
            "code": code,
            "city": "Kansas City",
            "coach": "Andy Reid",
            "owner": "Clark Hunt",
            "stadium": "GEHA Field at Arrowhead Stadium",
            "established": 1960,
            "logo": None,
            "country": {"name": "USA"},
        }

    @staticmethod
    def nfl_game(
        game_id: int,
        home: TeamRef,
        away: TeamRef,
        home_score: Optional[int],
        away_score: Optional[int],
        status: str = "FT",
        timestamp: int = 1760000000,
        stage: str = "Regular Season",
    ) -> Dict[str, Any]:
        def side(total):
            return {"quarter_1": None if total is None else total, "total": total}

        return {
            "game": {
                "id": game_id,
                "stage": stage,
                "week": "Week 6",
                "date": {"timezone": "UTC", "date": "2025-10-09", "time": "00:15", "timestamp": timestamp},
                "venue": {"name": "GEHA Field at Arrowhead Stadium", "city": "Kansas City"},
                "status": {"short": status, "long": ""},
            },
            "league": {"id": 1, "name": "NFL", "season": "2025"},
            "teams": {
                "home": {"id": home[0], "name": home[1], "logo": None},
                "away": {"id": away[0], "name": away[1], "logo": None},
            },
            "scores": {"home": side(home_score), "away": side(away_score)},
        }

    @staticmethod
    def nfl_standing(team_id: int, name: str, won: int, lost: int, ties: int = 0, points_for: int = 400, points_against: int = 300):
        return {
            "league": {"id": 1, "name": "NFL", "season": 2025},
            "conference": "American Football Conference",
            "division": "AFC West",
            "position": 1,
            "team": {"id": team_id, "name": name},
            "won": won,
            "lost": lost,
            "ties": ties,
            "points": {"for": points_for, "against": points_against, "difference": points_for - points_against},
            "records": {"home": "6-2", "road": "5-4", "conference": "8-4", "division": "4-2"},
            "streak": "W2",
        }

    # ESPN / The Odds API

    @staticmethod
    def espn_injuries(team_name: str, *players: Tuple[str, str, str]) -> Dict[str, Any]:
        return {
            "injuries": [
                {
                    "displayName": team_name,
                    "injuries": [
                        {
                            "id": f"inj-{i}",
                            "status": status,
                            "shortComment": comment,
                            "athlete": {"id": f"{1000 + i}", "displayName": player},
                            "details": {"type": "Knee", "returnDate": "2025-12-01"},
                        }
                        for i, (player, status, comment) in enumerate(players)
                    ],
                }
            ]
        }

    @staticmethod
    def odds_event(home: str, away: str, event_id: str = "evt-1") -> Dict[str, Any]:
        return {
            "id": event_id,
            "sport_key": "basketball_nba",
            "commence_time": "2025-11-16T00:30:00Z",
            "home_team": home,
            "away_team": away,
            "bookmakers": [
                {
                    "key": "fanduel",
                    "title": "FanDuel",
                    "last_update": "2025-11-15T11:00:00Z",
                    "markets": [
                        {"key": "h2h", "outcomes": [{"name": home, "price": -150}, {"name": away, "price": 130}]},
                        {
                            "key": "spreads",
                            "outcomes": [
                                {"name": home, "price": -110, "point": -3.5},
                                {"name": away, "price": -110, "point": 3.5},
                            ],
                        },
                        {
                            "key": "totals",
                            "outcomes": [
                                {"name": "Over", "price": -105, "point": 228.5},
                                {"name": "Under", "price": -115, "point": 228.5},
                            ],
                        },
                    ],
                },
                {
                    "key": "draftkings",
                    "title": "DraftKings",
                    "last_update": "2025-11-15T11:30:00Z",
                    "markets": [
                        {"key": "h2h", "outcomes": [{"name": home, "price": -145}, {"name": away, "price": 125}]},
                    ],
                },
            ],
        }


@pytest.fixture(autouse=True)
def reset_breakers():
    """Keep breaker state from leaking between tests."""
    yield
    for breaker in (api_sports_breaker, odds_api_breaker, espn_api_breaker):
        reset_breaker(breaker)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def payloads():
    return Payloads


@pytest.fixture
def mock_api() -> MockApi:
    return MockApi()


@pytest.fixture
def api_client(mock_api: MockApi) -> ApiSportsClient:
    """ApiSportsClient whose HTTP goes to ``mock_api``."""
    http = httpx.AsyncClient(transport=httpx.MockTransport(mock_api.handler))
    return ApiSportsClient("test-key", client=http)


@pytest.fixture
def resolver() -> TeamNameResolver:
    return TeamNameResolver()
