"""
Soccer adapter (API-Football, Premier League by default).

Soccer is the richest provider: per-team statistics with home/away splits,
form strings, standings, head-to-head fixtures and an injury feed.
"""
from typing import Any, Dict, Optional, Tuple

from datalayer.models.entities import (
    Injury,
    Match,
    PeriodScore,
    Record,
    Score,
    Scoring,
    Team,
    TeamStats,
    Venue,
    canonical_id,
)
from datalayer.models.enums import Sport
from datalayer.models.envelope import DataLayerResponse
from datalayer.services.adapters.base import (
    BaseSportAdapter,
    DateLike,
    as_int,
    dig,
    flatten,
    format_date,
    from_timestamp,
    optional_int,
)
from datalayer.services.adapters.config import SOCCER_CONFIG
from datalayer.utils.form import build_form
from datalayer.utils.injuries import normalize_injury_status


class SoccerAdapter(BaseSportAdapter):
    DEFAULT_CONFIG = SOCCER_CONFIG

    def _raw_team_name(self, raw: Dict[str, Any]) -> str:
        return dig(raw, "team", "name", default="")

    def _raw_status(self, raw: Dict[str, Any]) -> Optional[str]:
        return dig(raw, "fixture", "status", "short")

    def _raw_timestamp(self, raw: Dict[str, Any]) -> int:
        return as_int(dig(raw, "fixture", "timestamp"))

    def _short_name(self, name: str) -> str:
        return name[:3].upper()

    # Query parameters

    def _games_params(
        self,
        season: str,
        team_id: Optional[str] = None,
        date: Optional[DateLike] = None,
        date_from: Optional[DateLike] = None,
        date_to: Optional[DateLike] = None,
    ) -> Dict[str, Any]:
        params = super()._games_params(season, team_id=team_id, date=date)
        params["from"] = format_date(date_from)
        params["to"] = format_date(date_to)
        return params

    def _recent_params(self, team_id: str, season: str) -> Dict[str, Any]:
        return {"team": team_id, "season": season}

    def _h2h_params(self, h2h: str, season: Optional[str], limit: int) -> Dict[str, Any]:
        return {"h2h": h2h, "last": limit}

    # Transforms

    def _transform_team(self, raw: Dict[str, Any]) -> Team:
        team = raw.get("team") or {}
        venue = raw.get("venue") or {}
        name = team.get("name") or ""

        return Team(
            id=canonical_id(self.sport, team.get("id")),
            external_id=str(team.get("id")),
            name=name,
            short_name=team.get("code") or self._short_name(name),
            sport=self.sport,
            league=self.config.league_name,
            venue=Venue(name=venue.get("name"), city=venue.get("city"), capacity=venue.get("capacity")) if venue else None,
            country=team.get("country"),
            founded=team.get("founded"),
            logo=team.get("logo"),
        )

    def _transform_match(self, raw: Dict[str, Any]) -> Match:
        fixture = raw["fixture"]
        league = raw.get("league") or {}
        teams = raw.get("teams") or {}
        goals = raw.get("goals") or {}

        score = None
        if goals.get("home") is not None or goals.get("away") is not None:
            halftime = dig(raw, "score", "halftime") or {}
            score = Score(
                home=as_int(goals.get("home")),
                away=as_int(goals.get("away")),
                halftime=(
                    PeriodScore(home=as_int(halftime.get("home")), away=as_int(halftime.get("away")))
                    if halftime.get("home") is not None
                    else None
                ),
            )

        return Match(
            id=canonical_id(self.sport, fixture.get("id")),
            external_id=str(fixture.get("id")),
            sport=self.sport,
            league=league.get("name") or self.config.league_name,
            league_id=str(league.get("id") or self.config.league_id),
            season=str(league.get("season") or ""),
            round=league.get("round"),
            home_team=self._side_team(teams.get("home")),
            away_team=self._side_team(teams.get("away")),
            status=self.map_status(dig(fixture, "status", "short")),
            date=from_timestamp(fixture.get("timestamp"), fixture.get("date")),
            venue=dig(fixture, "venue", "name"),
            score=score,
        )

    def _transform_stats(self, raw: Dict[str, Any], team_id: str, season: str) -> TeamStats:
        fixtures = raw.get("fixtures") or {}
        goals = raw.get("goals") or {}

        record = Record.from_counts(
            wins=as_int(dig(fixtures, "wins", "total")),
            losses=as_int(dig(fixtures, "loses", "total")),
            draws=as_int(dig(fixtures, "draws", "total")),
        )
        scoring = Scoring.from_totals(
            as_int(dig(goals, "for", "total", "total")),
            as_int(dig(goals, "against", "total", "total")),
            record.played,
            home_for=optional_int(dig(goals, "for", "total", "home")),
            home_against=optional_int(dig(goals, "against", "total", "home")),
            away_for=optional_int(dig(goals, "for", "total", "away")),
            away_against=optional_int(dig(goals, "against", "total", "away")),
        )

        biggest = raw.get("biggest") or {}
        extended = {
            "clean_sheets": optional_int(dig(raw, "clean_sheet", "total")),
            "failed_to_score": optional_int(dig(raw, "failed_to_score", "total")),
            "biggest_win_home": dig(biggest, "wins", "home"),
            "biggest_win_away": dig(biggest, "wins", "away"),
            "biggest_loss_home": dig(biggest, "loses", "home"),
            "biggest_loss_away": dig(biggest, "loses", "away"),
            "longest_win_streak": optional_int(dig(biggest, "streak", "wins")),
            "longest_draw_streak": optional_int(dig(biggest, "streak", "draws")),
            "longest_loss_streak": optional_int(dig(biggest, "streak", "loses")),
        }

        return TeamStats(
            team_id=canonical_id(self.sport, team_id),
            season=season,
            sport=self.sport,
            league=dig(raw, "league", "name") or self.config.league_name,
            record=record,
            scoring=scoring,
            # /teams/statistics lists form oldest first
            form=build_form((raw.get("form") or "")[::-1]),
            extended={key: value for key, value in extended.items() if value is not None},
        )

    def _standing_rows(self, data: Any):
        rows = []
        for entry in data or []:
            standings = dig(entry, "league", "standings")
            rows.extend(flatten(standings) if standings is not None else flatten([entry]))
        return rows

    def _transform_standing(self, row: Dict[str, Any], team_id: str, season: str) -> TeamStats:
        overall = row.get("all") or {}
        record = Record.from_counts(
            wins=as_int(overall.get("win")),
            losses=as_int(overall.get("lose")),
            draws=as_int(overall.get("draw")),
        )
        scoring = Scoring.from_totals(
            as_int(dig(overall, "goals", "for")),
            as_int(dig(overall, "goals", "against")),
            record.played,
            home_for=optional_int(dig(row, "home", "goals", "for")),
            home_against=optional_int(dig(row, "home", "goals", "against")),
            away_for=optional_int(dig(row, "away", "goals", "for")),
            away_against=optional_int(dig(row, "away", "goals", "against")),
        )
        extended = {"rank": optional_int(row.get("rank")), "points": optional_int(row.get("points"))}

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

    # Injuries

    async def get_injuries(self, team_id: Any) -> DataLayerResponse[Tuple[Injury, ...]]:
        """Current-season injury list for a team from API-Football."""
        external_id = self._external_id(team_id)
        result = await self._request(
            self.config.injuries_endpoint, {"team": external_id, "season": self.current_season()}
        )
        if not result.success:
            return self._request_failed(result, "injuries")

        return self._ok(tuple(self._transform_injury(raw) for raw in result.data or []))

    def _transform_injury(self, raw: Dict[str, Any]) -> Injury:
        player = raw.get("player") or {}
        team = raw.get("team") or {}
        kind = player.get("type") or ""

        return Injury(
            player_id=str(player.get("id")),
            player_name=player.get("name") or "",
            team_id=canonical_id(self.sport, team.get("id")),
            team_name=team.get("name") or "",
            sport=Sport.SOCCER,
            type=kind,
            status=normalize_injury_status(kind),
            description=player.get("reason") or "",
        )
