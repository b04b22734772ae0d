"""
Basketball adapter (API-Basketball).

Defaults to the NBA. Pass ``EUROLEAGUE_CONFIG`` (or another AdapterConfig)
to serve a secondary league through the same transforms.
"""
from typing import Any, Dict

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
from datalayer.services.adapters.config import NBA_CONFIG
from datalayer.utils.form import build_form

QUARTERS = ("quarter_1", "quarter_2", "quarter_3", "quarter_4")


class BasketballAdapter(BaseSportAdapter):
    DEFAULT_CONFIG = NBA_CONFIG

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
            logo=raw.get("logo"),
        )

    def _transform_match(self, raw: Dict[str, Any]) -> Match:
        league = raw.get("league") or {}
        teams = raw.get("teams") or {}
        home_scores = dig(raw, "scores", "home") or {}
        away_scores = dig(raw, "scores", "away") or {}

        score = None
        if home_scores.get("total") is not None or away_scores.get("total") is not None:
            periods = tuple(
                PeriodScore(home=as_int(home_scores.get(q)), away=as_int(away_scores.get(q)))
                for q in QUARTERS
                if home_scores.get(q) is not None or away_scores.get(q) is not None
            )
            score = Score(
                home=as_int(home_scores.get("total")),
                away=as_int(away_scores.get("total")),
                periods=periods,
            )

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
            venue=raw.get("venue") if isinstance(raw.get("venue"), str) else dig(raw, "venue", "name"),
            score=score,
        )

    def _transform_stats(self, raw: Dict[str, Any], team_id: str, season: str) -> TeamStats:
        games = raw.get("games") or {}
        record = Record.from_counts(
            wins=as_int(games.get("wins")),
            losses=as_int(games.get("loses")),
        )
        scoring = Scoring.from_totals(
            as_int(dig(raw, "points", "for", "total")),
            as_int(dig(raw, "points", "against", "total")),
            record.played,
            home_for=optional_int(dig(raw, "points", "for", "total", "home")),
            home_against=optional_int(dig(raw, "points", "against", "total", "home")),
            away_for=optional_int(dig(raw, "points", "for", "total", "away")),
            away_against=optional_int(dig(raw, "points", "against", "total", "away")),
        )
        extended = {
            "home_wins": optional_int(dig(games, "wins", "home", "total")),
            "away_wins": optional_int(dig(games, "wins", "away", "total")),
            "home_losses": optional_int(dig(games, "loses", "home", "total")),
            "away_losses": optional_int(dig(games, "loses", "away", "total")),
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
        record = Record.from_counts(
            wins=as_int(dig(row, "games", "win", "total")),
            losses=as_int(dig(row, "games", "lose", "total")),
        )
        scoring = Scoring.from_totals(
            as_int(dig(row, "points", "for")),
            as_int(dig(row, "points", "against")),
            record.played,
        )
        extended = {
            "position": optional_int(row.get("position")),
            "group": dig(row, "group", "name"),
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
