"""
American football adapter (API-American-Football, NFL).

API-Sports has no per-team statistics endpoint for the NFL, so season stats
come from standings, with a previous-season fallback for the offseason.
Injuries are delegated to the ESPN injury service.
"""
import logging
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
from datalayer.models.envelope import DataLayerResponse
from datalayer.services.adapters.base import (
    BaseSportAdapter,
    Clock,
    as_int,
    dig,
    from_timestamp,
    optional_int,
)
from datalayer.services.adapters.config import NFL_CONFIG, AdapterConfig
from datalayer.services.core.espn_service import ESPNInjuryService
from datalayer.services.core.provider_client import ApiSportsClient
from datalayer.services.resolution.team_resolver import TeamNameResolver

REGULAR_SEASON = "Regular Season"
QUARTERS = ("quarter_1", "quarter_2", "quarter_3", "quarter_4", "overtime")


class AmericanFootballAdapter(BaseSportAdapter):
    """
    NFL adapter.

    Args:
        espn: ESPN injury service; without it injuries are NOT_SUPPORTED
        regular_season_only: Count only regular-season games as recent games
    """

    DEFAULT_CONFIG = NFL_CONFIG

    def __init__(
        self,
        client: ApiSportsClient,
        resolver: TeamNameResolver,
        config: Optional[AdapterConfig] = None,
        clock: Optional[Clock] = None,
        logger: Optional[logging.Logger] = None,
        espn: Optional[ESPNInjuryService] = None,
        regular_season_only: bool = True,
    ):
        super().__init__(client, resolver, config=config, clock=clock, logger=logger)
        self.espn = espn
        self.regular_season_only = regular_season_only

    def _raw_status(self, raw: Dict[str, Any]) -> Optional[str]:
        return dig(raw, "game", "status", "short")

    def _raw_timestamp(self, raw: Dict[str, Any]) -> int:
        return as_int(dig(raw, "game", "date", "timestamp"))

    def _include_in_recent(self, raw: Dict[str, Any]) -> bool:
        if not self.regular_season_only:
            return True
        return dig(raw, "game", "stage") == REGULAR_SEASON

    def _transform_team(self, raw: Dict[str, Any]) -> Team:
        name = raw.get("name") or ""
        stadium = raw.get("stadium")
        return Team(
            id=canonical_id(self.sport, raw.get("id")),
            external_id=str(raw.get("id")),
            name=name,
            short_name=raw.get("code") or self._short_name(name),
            sport=self.sport,
            league=self.config.league_name,
            venue=Venue(name=stadium, city=raw.get("city")) if stadium else None,
            country=dig(raw, "country", "name"),
            founded=optional_int(raw.get("established")),
            logo=raw.get("logo"),
        )

    def _transform_match(self, raw: Dict[str, Any]) -> Match:
        game = raw.get("game") or {}
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
            id=canonical_id(self.sport, game.get("id")),
            external_id=str(game.get("id")),
            sport=self.sport,
            league=league.get("name") or self.config.league_name,
            league_id=str(league.get("id") or self.config.league_id),
            season=str(league.get("season") or ""),
            round=game.get("week") or game.get("stage"),
            home_team=self._side_team(teams.get("home")),
            away_team=self._side_team(teams.get("away")),
            status=self.map_status(dig(game, "status", "short")),
            date=from_timestamp(dig(game, "date", "timestamp"), dig(game, "date", "date")),
            venue=dig(game, "venue", "name"),
            score=score,
        )

    def _transform_standing(self, row: Dict[str, Any], team_id: str, season: str) -> TeamStats:
        record = Record.from_counts(
            wins=as_int(row.get("won")),
            losses=as_int(row.get("lost")),
            draws=as_int(row.get("ties")),
        )
        scoring = Scoring.from_totals(
            as_int(dig(row, "points", "for")),
            as_int(dig(row, "points", "against")),
            record.played,
        )
        extended = {
            "position": optional_int(row.get("position")),
            "conference": row.get("conference"),
            "division": row.get("division"),
            "point_difference": optional_int(dig(row, "points", "difference")),
            "home_record": dig(row, "records", "home"),
            "road_record": dig(row, "records", "road"),
            "conference_record": dig(row, "records", "conference"),
            "division_record": dig(row, "records", "division"),
            "streak": row.get("streak"),
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

    async def get_injuries(self, team_id: Any) -> DataLayerResponse[Tuple[Injury, ...]]:
        """ESPN injury report for a team, located by the team's display name."""
        if self.espn is None:
            return await super().get_injuries(team_id)

        team = await self.find_team(team_id=team_id)
        if not team.success:
            return team
        return await self.espn.get_team_injuries(self.sport, team.data.name, team.data.id)
