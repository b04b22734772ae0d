"""
Hockey adapter (API-Hockey, NHL).

Game scores arrive as plain integers. Period scores arrive either as
``{"home": 1, "away": 0}`` objects or as ``"1-0"`` strings, and team
statistics come flat or nested depending on the season, so both shapes are
read.
"""
from typing import Any, Dict, Optional

from datalayer.models.entities import (
    Match,
    PeriodScore,
    Record,
    Score,
    Scoring,
    Team,
    TeamStats,
    canonical_id,
)
from datalayer.services.adapters.base import (
    BaseSportAdapter,
    as_int,
    dig,
    from_timestamp,
    optional_int,
)
from datalayer.services.adapters.config import NHL_CONFIG
from datalayer.utils.form import build_form

PERIODS = ("first", "second", "third", "overtime", "penalties")


def parse_period(value: Any) -> Optional[PeriodScore]:
    """
    Period score from either provider shape.

    Examples:
        >>> parse_period("2-1")
        PeriodScore(home=2, away=1)
        >>> parse_period({"home": 0, "away": 3})
        PeriodScore(home=0, away=3)
        >>> parse_period(None) is None
        True
    """
    if isinstance(value, dict):
        if value.get("home") is None and value.get("away") is None:
            return None
        return PeriodScore(home=as_int(value.get("home")), away=as_int(value.get("away")))
    if isinstance(value, str) and "-" in value:
        home, _, away = value.partition("-")
        return PeriodScore(home=as_int(home.strip()), away=as_int(away.strip()))
    return None


class HockeyAdapter(BaseSportAdapter):
    DEFAULT_CONFIG = NHL_CONFIG

    def _transform_team(self, raw: Dict[str, Any]) -> Team:
        name = raw.get("name") or ""
        return Team(
            id=canonical_id(self.sport, raw.get("id")),
            external_id=str(raw.get("id")),
            name=name,
            short_name=self._short_name(name),
            sport=self.sport,
            league=self.config.league_name,
            country=dig(raw, "country", "name"),
            founded=optional_int(raw.get("founded")),
            logo=raw.get("logo"),
        )

    def _transform_match(self, raw: Dict[str, Any]) -> Match:
        league = raw.get("league") or {}
        teams = raw.get("teams") or {}
        scores = raw.get("scores") or {}

        score = None
        if scores.get("home") is not None or scores.get("away") is not None:
            raw_periods = raw.get("periods") or {}
            periods = tuple(
                period for period in (parse_period(raw_periods.get(name)) for name in PERIODS)
                if period is not None
            )
            score = Score(home=as_int(scores.get("home")), away=as_int(scores.get("away")), periods=periods)

        return Match(
            id=canonical_id(self.sport, raw.get("id")),
            external_id=str(raw.get("id")),
            sport=self.sport,
            league=league.get("name") or self.config.league_name,
            league_id=str(league.get("id") or self.config.league_id),
            season=str(league.get("season") or ""),
            home_team=self._side_team(teams.get("home")),
            away_team=self._side_team(teams.get("away")),
            status=self.map_status(dig(raw, "status", "short")),
            date=from_timestamp(raw.get("timestamp"), raw.get("date")),
            score=score,
        )

    def _transform_stats(self, raw: Dict[str, Any], team_id: str, season: str) -> TeamStats:
        games = raw.get("games") or {}
        record = Record.from_counts(
            wins=as_int(games.get("wins")) + as_int(games.get("wins_overtime")),
            losses=as_int(games.get("loses")) + as_int(games.get("loses_overtime")),
        )
        scoring = Scoring.from_totals(
            as_int(dig(raw, "goals", "for")),
            as_int(dig(raw, "goals", "against")),
            record.played,
        )
        extended = {
            "overtime_wins": optional_int(games.get("wins_overtime")),
            "overtime_losses": optional_int(games.get("loses_overtime")),
        }

        return TeamStats(
            team_id=canonical_id(self.sport, team_id),
            season=season,
            sport=self.sport,
            league=self.config.league_name,
            record=record,
            scoring=scoring,
            extended={key: value for key, value in extended.items() if value is not None},
        )

    def _transform_standing(self, row: Dict[str, Any], team_id: str, season: str) -> TeamStats:
        # Overtime and shootout results are reported apart from regulation ones
        games = row.get("games") or {}
        record = Record.from_counts(
            wins=as_int(dig(games, "win", "total")) + as_int(dig(games, "win_overtime", "total")),
            losses=as_int(dig(games, "lose", "total")) + as_int(dig(games, "lose_overtime", "total")),
        )
        goals_for = dig(row, "goals", "for")
        goals_against = dig(row, "goals", "against")
        if goals_for is None:
            goals_for = dig(row, "points", "for")
            goals_against = dig(row, "points", "against")
        scoring = Scoring.from_totals(as_int(goals_for), as_int(goals_against), record.played)

        extended = {
            "position": optional_int(row.get("position")),
            "overtime_wins": optional_int(dig(row, "games", "win_overtime", "total")),
            "overtime_losses": optional_int(dig(row, "games", "lose_overtime", "total")),
            "points": row.get("points") if isinstance(row.get("points"), int) else None,
        }

        return TeamStats(
            team_id=canonical_id(self.sport, team_id),
            season=season,
            sport=self.sport,
            league=self.config.league_name,
            record=record,
            scoring=scoring,
            form=build_form(row.get("form")),
            extended={key: value for key, value in extended.items() if value is not None},
        )
