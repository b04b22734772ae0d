"""
Base sport adapter for API-Sports.

This module provides the common capability contract every sport implements
and the algorithms they share:
- Multi-tier team search against the provider's live team list
- Previous-season fallback for team lists, recent games and head-to-head
- Summary folds for recent games and head-to-head
- Provider status mapping

Subclasses only supply payload accessors and transforms. Every public method
returns a DataLayerResponse; provider failures never raise. Malformed
payloads do raise from the transforms and are handled by the orchestrator.

Usage:
    adapter = BasketballAdapter(client, resolver)
    team = await adapter.find_team(name="Lakers")
    stats = await adapter.get_team_stats(team.data.external_id)
"""
import asyncio
import logging
from abc import ABC, abstractmethod
from datetime import date as DateType
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple, Union

from datalayer.core.logging import get_logger
from datalayer.models.entities import (
    H2HSummary,
    HeadToHead,
    Injury,
    Match,
    RecentGames,
    RecentSummary,
    Team,
    TeamStats,
    canonical_id,
    team_id_prefix,
)
from datalayer.models.enums import DataProvider, MatchStatus, Sport
from datalayer.models.envelope import DataLayerResponse, ErrorCode
from datalayer.services.adapters.config import AdapterConfig
from datalayer.services.core.provider_client import ApiSportsClient, ProviderResult
from datalayer.services.resolution.name_normalizer import fold
from datalayer.services.resolution.team_resolver import TeamNameResolver
from datalayer.utils.seasons import current_season, previous_season

logger = get_logger(__name__)

Clock = Callable[[], datetime]
DateLike = Union[datetime, DateType, str]

EPOCH = datetime.fromtimestamp(0, tz=timezone.utc)


# =============================================================================
# PAYLOAD HELPERS
# =============================================================================

def dig(data: Any, *path: str, default: Any = None) -> Any:
    """Walk nested dicts; returns ``default`` when any step is missing or null."""
    current = data
    for key in path:
        if not isinstance(current, dict):
            return default
        current = current.get(key)
        if current is None:
            return default
    return current


def as_int(value: Any, default: int = 0) -> int:
    """
    Coerce a provider number to int.

    Accepts ints, numeric strings and the nested ``{"all": ...}`` /
    ``{"total": ...}`` wrappers API-Sports uses for splits.

    Examples:
        >>> as_int({"all": {"total": 30, "percentage": "0.600"}})
        30
        >>> as_int("12")
        12
        >>> as_int(None)
        0
    """
    if isinstance(value, dict):
        for key in ("all", "total"):
            if key in value:
                return as_int(value[key], default)
        return default
    if value is None or value == "":
        return default
    try:
        return int(float(value))
    except (TypeError, ValueError):
        return default


def optional_int(value: Any) -> Optional[int]:
    """Like ``as_int`` but keeps absence as None."""
    if value is None:
        return None
    return as_int(value)


def flatten(rows: Any) -> List[Dict[str, Any]]:
    """Flatten nested standings groups into one list of rows."""
    flat: List[Dict[str, Any]] = []
    for row in rows or []:
        if isinstance(row, list):
            flat.extend(flatten(row))
        elif isinstance(row, dict):
            flat.append(row)
    return flat


def first_record(data: Any) -> Optional[Dict[str, Any]]:
    """Statistics endpoints answer with either an object or a one-item list."""
    if isinstance(data, dict):
        return data or None
    if isinstance(data, list):
        return next((item for item in data if isinstance(item, dict) and item), None)
    return None


def from_timestamp(value: Any, iso: Optional[str] = None) -> datetime:
    """Aware UTC datetime from a unix timestamp, falling back to an ISO string."""
    if value is not None:
        try:
            return datetime.fromtimestamp(int(value), tz=timezone.utc)
        except (TypeError, ValueError, OverflowError, OSError):
            pass
    if iso:
        try:
            parsed = datetime.fromisoformat(str(iso).replace("Z", "+00:00"))
            return parsed if parsed.tzinfo else parsed.replace(tzinfo=timezone.utc)
        except ValueError:
            pass
    return EPOCH


def format_date(value: Optional[DateLike]) -> Optional[str]:
    """YYYY-MM-DD query parameter."""
    if value is None:
        return None
    if isinstance(value, (datetime, DateType)):
        return value.strftime("%Y-%m-%d")
    return str(value)


def _as_date(value: DateLike) -> DateType:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, DateType):
        return value
    return DateType.fromisoformat(str(value)[:10])


def within(moment: datetime, date_from: Optional[DateLike], date_to: Optional[DateLike]) -> bool:
    """Inclusive date-range check on the calendar date of ``moment``."""
    day = moment.date()
    if date_from is not None and day < _as_date(date_from):
        return False
    if date_to is not None and day > _as_date(date_to):
        return False
    return True


def _team_goals(match: Match, team_external_id: str) -> Tuple[int, int]:
    """(goals for, goals against) from one side's perspective."""
    home = match.score.home if match.score else 0
    away = match.score.away if match.score else 0
    if match.home_team.external_id == team_external_id:
        return home, away
    return away, home


def fold_recent(team_external_id: str, matches: Iterable[Match]) -> RecentSummary:
    """Wins/losses/draws and goals for one team over finished matches; a tie is a draw."""
    wins = losses = draws = goals_for = goals_against = 0
    for match in matches:
        scored, conceded = _team_goals(match, team_external_id)
        goals_for += scored
        goals_against += conceded
        if scored > conceded:
            wins += 1
        elif scored < conceded:
            losses += 1
        else:
            draws += 1
    return RecentSummary(
        wins=wins, losses=losses, draws=draws, goals_for=goals_for, goals_against=goals_against
    )


def fold_h2h(team1_external_id: str, matches: Iterable[Match]) -> H2HSummary:
    """Head-to-head summary from team1's perspective; every match lands in exactly one bucket."""
    matches = tuple(matches)
    recent = fold_recent(team1_external_id, matches)
    return H2HSummary(
        total_games=len(matches),
        team1_wins=recent.wins,
        team2_wins=recent.losses,
        draws=recent.draws,
        team1_goals=recent.goals_for,
        team2_goals=recent.goals_against,
    )


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


# =============================================================================
# BASE ADAPTER
# =============================================================================

class BaseSportAdapter(ABC):
    """
    Common data-access contract for one sport on API-Sports.

    Args:
        client: Shared API-Sports client
        resolver: Team name resolver
        config: Sport configuration (defaults to the subclass's DEFAULT_CONFIG)
        clock: Callable returning the current aware datetime, used for season math
        logger: Optional logger
    """

    DEFAULT_CONFIG: AdapterConfig
    provider: DataProvider = DataProvider.API_SPORTS

    def __init__(
        self,
        client: ApiSportsClient,
        resolver: TeamNameResolver,
        config: Optional[AdapterConfig] = None,
        clock: Optional[Clock] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.client = client
        self.resolver = resolver
        self.config = config or self.DEFAULT_CONFIG
        self._clock = clock or _utcnow
        self.logger = logger or globals()["logger"]

    @property
    def sport(self) -> Sport:
        return self.config.sport

    def is_available(self) -> bool:
        """True when the provider client has a credential."""
        return self.client.is_configured()

    def current_season(self) -> str:
        return current_season(self.sport, on=self._clock(), two_year=self.config.two_year_season)

    def _season_candidates(self, season: Optional[str] = None) -> List[str]:
        season = season or self.current_season()
        return [season, previous_season(season)]

    def _external_id(self, team_id: Any) -> str:
        """Provider id from either a provider id or a canonical id."""
        value = str(team_id).strip()
        prefix = f"{team_id_prefix(self.sport)}-"
        return value[len(prefix):] if value.startswith(prefix) else value

    async def _request(self, endpoint: str, params: Dict[str, Any]) -> ProviderResult:
        return await self.client.request(self.config.base_url, endpoint, params)

    def _ok(self, data) -> DataLayerResponse:
        return DataLayerResponse.ok(data, self.provider)

    def _fail(self, code: str, message: str) -> DataLayerResponse:
        return DataLayerResponse.fail(code, message, self.provider)

    def _request_failed(self, result: ProviderResult, what: str) -> DataLayerResponse:
        """Failed envelope keeping the provider's code (HTTP_503, NETWORK_ERROR, ...)."""
        code = result.error_code or ErrorCode.FETCH_ERROR
        return self._fail(code, result.error_message or f"Failed to fetch {what}")

    def map_status(self, code: Optional[str]) -> MatchStatus:
        """Provider status code to MatchStatus; unmapped codes are UNKNOWN."""
        return self.config.status_map.get(code or "", MatchStatus.UNKNOWN)

    # ------------------------------------------------------------------
    # Payload accessors (overridden where the provider nests differently)
    # ------------------------------------------------------------------

    def _raw_team_name(self, raw: Dict[str, Any]) -> str:
        return raw.get("name") or ""

    def _raw_status(self, raw: Dict[str, Any]) -> Optional[str]:
        return dig(raw, "status", "short")

    def _raw_timestamp(self, raw: Dict[str, Any]) -> int:
        return as_int(raw.get("timestamp"))

    def _is_finished(self, raw: Dict[str, Any]) -> bool:
        return self._raw_status(raw) in self.config.finished_statuses

    def _include_in_recent(self, raw: Dict[str, Any]) -> bool:
        return True

    def _short_name(self, name: str) -> str:
        words = name.split()
        return words[-1] if words else name

    def _side_team(self, raw: Dict[str, Any]) -> Team:
        """Team embedded in a game payload (id, name, logo only)."""
        raw = raw or {}
        name = raw.get("name") or ""
        return Team(
            id=canonical_id(self.sport, raw.get("id")),
            external_id=str(raw.get("id")),
            name=name,
            short_name=self._short_name(name),
            sport=self.sport,
            league=self.config.league_name,
            logo=raw.get("logo"),
        )

    # ------------------------------------------------------------------
    # Query parameters
    # ------------------------------------------------------------------

    def _team_params(self, season: str, team_id: Optional[str] = None, league: Optional[Any] = None) -> Dict[str, Any]:
        return {"id": team_id, "league": league or self.config.league_id, "season": season}

    def _games_params(
        self,
        season: str,
        team_id: Optional[str] = None,
        date: Optional[DateLike] = None,
        date_from: Optional[DateLike] = None,
        date_to: Optional[DateLike] = None,
    ) -> Dict[str, Any]:
        return {
            "league": self.config.league_id,
            "season": season,
            "team": team_id,
            "date": format_date(date),
        }

    def _recent_params(self, team_id: str, season: str) -> Dict[str, Any]:
        return {"team": team_id, "league": self.config.league_id, "season": season}

    def _h2h_params(self, h2h: str, season: Optional[str], limit: int) -> Dict[str, Any]:
        return {"h2h": h2h, "league": self.config.league_id, "season": season}

    def _stats_params(self, team_id: str, season: str) -> Dict[str, Any]:
        return {"team": team_id, "league": self.config.league_id, "season": season}

    def _standing_rows(self, data: Any) -> List[Dict[str, Any]]:
        return flatten(data)

    # ------------------------------------------------------------------
    # Transforms
    # ------------------------------------------------------------------

    @abstractmethod
    def _transform_team(self, raw: Dict[str, Any]) -> Team:
        """Provider team record to Team."""

    @abstractmethod
    def _transform_match(self, raw: Dict[str, Any]) -> Match:
        """Provider game/fixture record to Match."""

    @abstractmethod
    def _transform_standing(self, row: Dict[str, Any], team_id: str, season: str) -> TeamStats:
        """Standings row to TeamStats."""

    def _transform_stats(self, raw: Dict[str, Any], team_id: str, season: str) -> TeamStats:
        """Statistics endpoint payload to TeamStats (only for sports that have one)."""
        raise NotImplementedError(f"{self.sport.value} has no statistics endpoint")

    # ------------------------------------------------------------------
    # Capability contract
    # ------------------------------------------------------------------

    async def find_team(
        self,
        name: Optional[str] = None,
        team_id: Optional[Any] = None,
        league: Optional[Any] = None,
    ) -> DataLayerResponse[Team]:
        """
        Find a team by provider id or by any spelling of its name.

        By id: current season, then previous season. By name: fetch the
        league's team list (current season, else previous), then for each
        resolver variation try an exact and a containment match against the
        live list, then fall back to fuzzy similarity with the resolved name.
        """
        if not name and not team_id:
            return self._fail(ErrorCode.INVALID_QUERY, "Team name or ID required")

        if team_id:
            found, error = await self._find_team_by_id(self._external_id(team_id), league)
            if found is not None:
                return self._ok(self._transform_team(found))
            if not name:
                if error is not None:
                    return self._fail(error.code, error.message)
                return self._fail(
                    ErrorCode.TEAM_NOT_FOUND, f"Could not find {self.config.league_name} team: {team_id}"
                )

        teams, error = await self._fetch_team_list(league)
        if not teams:
            if error is not None:
                return self._fail(error.code, error.message)
            return self._fail(ErrorCode.FETCH_ERROR, f"Could not fetch {self.config.league_name} teams")

        raw = self._match_team(name, teams)
        if raw is None:
            self.logger.warning(f"Could not find {self.config.league_name} team: '{name}'")
            return self._fail(ErrorCode.TEAM_NOT_FOUND, f"Could not find {self.config.league_name} team: {name}")

        return self._ok(self._transform_team(raw))

    async def _find_team_by_id(self, team_id: str, league: Optional[Any]):
        error = None
        for season in self._season_candidates():
            result = await self._request(self.config.teams_endpoint, self._team_params(season, team_id=team_id, league=league))
            if result.success and result.data:
                return result.data[0], None
            error = result.error
        return None, error

    async def _fetch_team_list(self, league: Optional[Any] = None):
        error = None
        for season in self._season_candidates():
            result = await self._request(self.config.teams_endpoint, self._team_params(season, league=league))
            if result.success and result.data:
                return result.data, None
            error = result.error
            self.logger.info(f"No {self.config.league_name} teams for season {season}")
        return [], error

    def _match_team(self, name: str, teams: List[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
        """Pick the provider team record for ``name``, or None."""
        key = self.config.resolver_key
        candidates = [(raw, fold(self._raw_team_name(raw))) for raw in teams]
        candidates = [(raw, team_name) for raw, team_name in candidates if team_name]

        for variation in self.resolver.get_search_variations(name, key):
            target = fold(variation)
            if not target:
                continue
            for raw, team_name in candidates:
                if team_name == target:
                    return raw
            for raw, team_name in candidates:
                if target in team_name or team_name in target:
                    return raw

        resolved = fold(self.resolver.resolve(name, key))
        best, best_score = None, 0
        for raw, team_name in candidates:
            score = self.resolver.scorer(resolved, team_name)
            if score > best_score:
                best, best_score = raw, score

        if best is not None and best_score >= self.resolver.threshold:
            self.logger.debug(f"Fuzzy team match '{name}' -> '{self._raw_team_name(best)}' ({best_score})")
            return best
        return None

    async def get_matches(
        self,
        team_id: Optional[Any] = None,
        date: Optional[DateLike] = None,
        date_from: Optional[DateLike] = None,
        date_to: Optional[DateLike] = None,
        season: Optional[str] = None,
        limit: int = 20,
    ) -> DataLayerResponse[Tuple[Match, ...]]:
        """Games for the league (optionally one team / date range), in provider order."""
        season = season or self.current_season()
        params = self._games_params(
            season,
            team_id=self._external_id(team_id) if team_id else None,
            date=date,
            date_from=date_from,
            date_to=date_to,
        )
        result = await self._request(self.config.games_endpoint, params)
        if not result.success:
            return self._request_failed(result, "games")

        matches = [self._transform_match(raw) for raw in result.data or []]
        if date_from is not None or date_to is not None:
            matches = [m for m in matches if within(m.date, date_from, date_to)]
        return self._ok(tuple(matches[:limit]))

    async def get_team_stats(self, team_id: Any, season: Optional[str] = None) -> DataLayerResponse[TeamStats]:
        """Season stats from the statistics endpoint, else derived from standings."""
        external_id = self._external_id(team_id)
        if season:
            seasons = [season]
        elif self.config.stats_season_fallback:
            seasons = self._season_candidates()
        else:
            seasons = [self.current_season()]

        for candidate in seasons:
            stats = await self._stats_for_season(external_id, candidate)
            if stats is not None:
                return self._ok(stats)

        return self._fail(ErrorCode.STATS_NOT_FOUND, f"Could not find stats for team {team_id}")

    async def _stats_for_season(self, team_id: str, season: str) -> Optional[TeamStats]:
        if self.config.statistics_endpoint:
            result = await self._request(self.config.statistics_endpoint, self._stats_params(team_id, season))
            raw = first_record(result.data) if result.success else None
            if raw:
                return self._transform_stats(raw, team_id, season)

        if self.config.standings_endpoint:
            result = await self._request(
                self.config.standings_endpoint, {"league": self.config.league_id, "season": season}
            )
            if result.success:
                for row in self._standing_rows(result.data):
                    if str(dig(row, "team", "id")) == team_id:
                        return self._transform_standing(row, team_id, season)
        return None

    async def get_recent_games(self, team_id: Any, limit: int = 5) -> DataLayerResponse[RecentGames]:
        """
        Most recent finished games for a team.

        Zero finished games in the current season retries once with the
        previous season; still nothing is an empty (successful) result.
        """
        external_id = self._external_id(team_id)
        finished: List[Dict[str, Any]] = []

        for index, season in enumerate(self._season_candidates()):
            result = await self._request(self.config.games_endpoint, self._recent_params(external_id, season))
            if not result.success:
                if index == 0:
                    return self._request_failed(result, "games")
                break
            finished = [
                raw for raw in result.data or []
                if self._is_finished(raw) and self._include_in_recent(raw)
            ]
            if finished:
                break
            if index == 0:
                self.logger.info(f"No finished games for team {external_id} in {season}, trying previous season")

        finished.sort(key=self._raw_timestamp, reverse=True)
        games = tuple(self._transform_match(raw) for raw in finished[:limit])
        return self._ok(
            RecentGames(
                team_id=canonical_id(self.sport, external_id),
                sport=self.sport,
                summary=fold_recent(external_id, games),
                games=games,
                provider=self.provider,
            )
        )

    async def _lookup_team(self, value: Any) -> DataLayerResponse[Team]:
        """Numeric input (or a canonical id) is a provider id, anything else a name."""
        text = str(value).strip()
        external_id = self._external_id(text)
        if external_id.isdigit():
            return await self.find_team(team_id=external_id)
        return await self.find_team(name=text)

    async def get_h2h(self, team1: Any, team2: Any, limit: int = 10) -> DataLayerResponse[HeadToHead]:
        """Finished meetings between two teams, most recent first, summarized from team1's side."""
        result1, result2 = await asyncio.gather(self._lookup_team(team1), self._lookup_team(team2))
        missing = [str(team) for team, result in ((team1, result1), (team2, result2)) if not result.success]
        if missing:
            return self._fail(ErrorCode.TEAM_NOT_FOUND, f"Could not find team: {', '.join(missing)}")

        first, second = result1.data, result2.data
        h2h = f"{first.external_id}-{second.external_id}"
        seasons = self._season_candidates() if self.config.h2h_season_scoped else [None]
        finished: List[Dict[str, Any]] = []

        for index, season in enumerate(seasons):
            result = await self._request(self.config.h2h_endpoint, self._h2h_params(h2h, season, limit))
            if not result.success:
                if index == 0:
                    return self._request_failed(result, "H2H")
                break
            finished = [raw for raw in result.data or [] if self._is_finished(raw)]
            if finished:
                break

        finished.sort(key=self._raw_timestamp, reverse=True)
        matches = tuple(self._transform_match(raw) for raw in finished[:limit])
        return self._ok(
            HeadToHead(
                team1_id=first.id,
                team2_id=second.id,
                sport=self.sport,
                summary=fold_h2h(first.external_id, matches),
                matches=matches,
                provider=self.provider,
            )
        )

    async def get_injuries(self, team_id: Any) -> DataLayerResponse[Tuple[Injury, ...]]:
        """Optional capability; sports without an injury source report NOT_SUPPORTED."""
        return self._fail(ErrorCode.NOT_SUPPORTED, f"Injuries are not supported for {self.sport.value}")
