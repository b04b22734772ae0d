"""
Verified match data.

Overlay for consumers that must not act on unverified numbers. It wraps the
data layer and adds:
- Season cross-validation of every stats payload
- A four-level data quality grade with a human-readable reason
- A sufficiency gate callers consult before using the data

Team identities are cached for days and stat snapshots for hours, in caches
separate from the orchestrator's.

Usage:
    service = VerifiedMatchService.from_settings(data_layer)
    response = await service.get_verified_match_data("nba", "Lakers", "Celtics")
    gate = is_data_sufficient_for_analysis(response.data)
    if gate.minimum_met:
        ...
"""
import asyncio
import dataclasses
import logging
from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional, Tuple

from datalayer.core import config
from datalayer.core.logging import clear_correlation_id, ensure_correlation_id, get_logger
from datalayer.models.entities import HeadToHead, Record, Scoring, Streak, Team, TeamStats
from datalayer.models.enums import DataProvider, QualityGrade, Sport, StreakType, normalize_sport
from datalayer.models.envelope import DataLayerResponse, ErrorCode, utcnow
from datalayer.services.core.ttl_cache import TTLCache, make_key
from datalayer.services.data_layer import DataLayer
from datalayer.utils.form import parse_streak

logger = get_logger(__name__)

DEFAULT_H2H_LIMIT = 10


# ============================================================================
# VERIFIED VIEWS
# ============================================================================

@dataclass(frozen=True)
class VerifiedTeamStats:
    team_id: str
    team_name: str
    season: str
    record: Record
    scoring: Scoring
    form: str
    streak: Streak
    provider: DataProvider
    fetched_at: datetime
    verified: bool = True


@dataclass(frozen=True)
class VerifiedH2HMatch:
    date: datetime
    home_team: str
    away_team: str
    home_score: int
    away_score: int
    winner: str  # home, away or draw
    venue: Optional[str] = None
    competition: Optional[str] = None


@dataclass(frozen=True)
class VerifiedH2HSummary:
    total: int
    home_wins: int
    away_wins: int
    draws: int
    home_goals_total: int
    away_goals_total: int


@dataclass(frozen=True)
class VerifiedH2H:
    matches: Tuple[VerifiedH2HMatch, ...]
    summary: VerifiedH2HSummary
    provider: DataProvider
    fetched_at: datetime
    verified: bool = True


@dataclass(frozen=True)
class VerifiedMatchInput:
    sport: str
    home_team: str
    away_team: str
    season: str
    league: Optional[str] = None


@dataclass(frozen=True)
class VerificationSource:
    provider: DataProvider
    fetched_at: datetime
    api_calls_made: int


@dataclass(frozen=True)
class VerifiedMatchData:
    input: VerifiedMatchInput
    season: str
    home_stats: Optional[VerifiedTeamStats]
    away_stats: Optional[VerifiedTeamStats]
    h2h: Optional[VerifiedH2H]
    data_quality: QualityGrade
    quality_reason: str
    warnings: Tuple[str, ...]
    source: VerificationSource
    verified: bool = True


@dataclass(frozen=True)
class DataSufficiency:
    sufficient: bool
    minimum_met: bool
    reason: str


# ============================================================================
# CHECKS
# ============================================================================

def validate_season(requested: str, received: Optional[str]) -> Tuple[bool, Optional[str]]:
    """
    Cross-check the season a provider echoed back.

    Returns:
        (valid, warning) - warning is None when valid

    Examples:
        >>> validate_season("2025-2026", "2025")
        (True, None)
        >>> validate_season("2025", "2024")
        (False, 'Season mismatch: requested 2025, received 2024')
    """
    if not received:
        return False, "No season in response"

    requested, received = str(requested), str(received)
    if requested == received:
        return True, None
    if "-" in requested and received == requested.split("-")[0]:
        return True, None
    return False, f"Season mismatch: requested {requested}, received {received}"


def derive_streak(form: Optional[str]) -> Streak:
    """Streak from a form string; no form means a zero-length 'none' streak."""
    return parse_streak(form) or Streak(type=StreakType.NONE, count=0)


def assess_data_quality(
    home_stats: Optional[VerifiedTeamStats],
    away_stats: Optional[VerifiedTeamStats],
    h2h: Optional[VerifiedH2H],
    warnings: List[str],
    min_form: int = 3,
) -> Tuple[QualityGrade, str]:
    """
    Grade the assembled data.

    HIGH needs both sides' stats, a non-empty H2H, at least ``min_form``
    form results per side and no warnings. Any stats (or any source with
    warnings) is MEDIUM, anything else present is LOW.
    """
    has_home = home_stats is not None
    has_away = away_stats is not None
    has_h2h = h2h is not None and len(h2h.matches) > 0
    has_good_form = (
        has_home and has_away
        and len(home_stats.form) >= min_form
        and len(away_stats.form) >= min_form
    )

    if not (has_home or has_away or has_h2h):
        return QualityGrade.UNAVAILABLE, "No verified data available from API"

    if has_home and has_away and has_h2h and has_good_form and not warnings:
        return QualityGrade.HIGH, "Full data available: team stats, form, and H2H"

    if has_home or has_away or warnings:
        if warnings:
            return QualityGrade.MEDIUM, f"Partial data with warnings: {', '.join(warnings)}"
        return QualityGrade.MEDIUM, "Partial data available (missing some sources)"

    return QualityGrade.LOW, "Limited data available"


def is_data_sufficient_for_analysis(data: VerifiedMatchData) -> DataSufficiency:
    """Gate for downstream analysis; the minimum bar is one side with verified stats."""
    has_any_stats = data.home_stats is not None or data.away_stats is not None
    has_both_stats = data.home_stats is not None and data.away_stats is not None

    if not has_any_stats:
        return DataSufficiency(
            sufficient=False,
            minimum_met=False,
            reason="No verified team stats available. Cannot produce reliable analysis.",
        )
    if not has_both_stats:
        return DataSufficiency(
            sufficient=True,
            minimum_met=True,
            reason="Only one team has verified stats. Analysis will be limited.",
        )
    if data.h2h is None:
        return DataSufficiency(
            sufficient=True, minimum_met=True, reason="Team stats verified. H2H data unavailable."
        )
    return DataSufficiency(sufficient=True, minimum_met=True, reason="Full verified data available for analysis.")


def build_verified_h2h(h2h: HeadToHead) -> VerifiedH2H:
    """H2H view with a winner per match and home/away totals."""
    matches = []
    for match in h2h.matches:
        home_score = match.score.home if match.score else 0
        away_score = match.score.away if match.score else 0
        if home_score == away_score:
            winner = "draw"
        elif home_score > away_score:
            winner = "home"
        else:
            winner = "away"
        matches.append(
            VerifiedH2HMatch(
                date=match.date,
                home_team=match.home_team.name,
                away_team=match.away_team.name,
                home_score=home_score,
                away_score=away_score,
                winner=winner,
                venue=match.venue,
                competition=match.league,
            )
        )

    summary = VerifiedH2HSummary(
        total=len(matches),
        home_wins=sum(1 for m in matches if m.winner == "home"),
        away_wins=sum(1 for m in matches if m.winner == "away"),
        draws=sum(1 for m in matches if m.winner == "draw"),
        home_goals_total=sum(m.home_score for m in matches),
        away_goals_total=sum(m.away_score for m in matches),
    )
    return VerifiedH2H(matches=tuple(matches), summary=summary, provider=h2h.provider, fetched_at=utcnow())


# ============================================================================
# SERVICE
# ============================================================================

class VerifiedMatchService:
    """
    Verified match data on top of a DataLayer.

    Args:
        data_layer: Orchestrator used for every fetch
        identity_cache: Cache for resolved teams (long TTL)
        stats_cache: Cache for stat snapshots (short TTL)
        min_form: Form results per side required for a HIGH grade
        logger: Optional logger
    """

    def __init__(
        self,
        data_layer: DataLayer,
        identity_cache: Optional[TTLCache] = None,
        stats_cache: Optional[TTLCache] = None,
        min_form: int = 3,
        logger: Optional[logging.Logger] = None,
    ):
        self.data_layer = data_layer
        self.identity_cache = identity_cache or TTLCache(default_ttl=86400, name="identity")
        self.stats_cache = stats_cache or TTLCache(default_ttl=3600, name="stats")
        self.min_form = min_form
        self.logger = logger or globals()["logger"]

    @classmethod
    def from_settings(cls, data_layer: DataLayer, settings: Optional[config.Settings] = None) -> "VerifiedMatchService":
        settings = settings or config.settings
        return cls(
            data_layer,
            identity_cache=TTLCache(default_ttl=settings.get_identity_ttl_seconds(), name="identity"),
            stats_cache=TTLCache(default_ttl=settings.get_stats_ttl_seconds(), name="stats"),
            min_form=settings.HIGH_QUALITY_MIN_FORM,
        )

    async def _resolve_team(
        self, sport: Sport, name: str, league: Optional[str]
    ) -> Tuple[Optional[Team], Optional[str], int]:
        """Returns (team, error, api_calls)."""
        key = make_key("identity", {"sport": sport.value, "name": name.strip().lower(), "league": league})
        team = await self.identity_cache.get(key)
        if team is not None:
            return team, None, 0

        response = await self.data_layer.find_team(sport, name=name, league=league)
        if not response.success:
            return None, f"Could not find team \"{name}\" in {sport.value} database", 1

        await self.identity_cache.set(key, response.data)
        return response.data, None, 1

    async def _fetch_stats(
        self, sport: Sport, team: Team, season: str
    ) -> Tuple[Optional[VerifiedTeamStats], Optional[str], Optional[str], int]:
        """Returns (stats, error, season warning, api_calls)."""
        key = make_key("verified_stats", {"sport": sport.value, "team_id": team.id, "season": season})
        stats: Optional[TeamStats] = await self.stats_cache.get(key)
        calls = 0

        if stats is None:
            calls = 1
            response = await self.data_layer.get_team_stats(sport, team.external_id, season=season)
            if not response.success:
                return None, f"No stats available for {team.name} in season {season}", None, calls
            stats = response.data
            await self.stats_cache.set(key, stats)

        _, season_warning = validate_season(season, stats.season)
        form = stats.form.last5 if stats.form else ""
        streak = stats.form.streak if stats.form and stats.form.streak else derive_streak(form)

        verified = VerifiedTeamStats(
            team_id=team.id,
            team_name=team.name,
            season=stats.season,
            record=stats.record,
            scoring=stats.scoring,
            form=form,
            streak=streak,
            provider=stats.provider,
            fetched_at=utcnow(),
        )
        return verified, None, season_warning, calls

    async def get_verified_match_data(
        self,
        sport,
        home_team: str,
        away_team: str,
        league: Optional[str] = None,
    ) -> DataLayerResponse[VerifiedMatchData]:
        """
        Resolve, fetch, cross-check and grade the data for one fixture.

        The envelope is successful unless the grade is UNAVAILABLE; the
        verified payload is attached either way.
        """
        resolved = normalize_sport(sport)
        adapter = self.data_layer.registry.get(resolved) if resolved else None
        if adapter is None:
            return DataLayerResponse.fail(
                ErrorCode.SPORT_NOT_SUPPORTED, f"Sport not supported: {sport}", DataProvider.API_SPORTS
            )

        token = ensure_correlation_id()
        try:
            data = await self._verify(resolved, adapter.current_season(), home_team, away_team, league)
        finally:
            if token is not None:
                clear_correlation_id(token)

        if data.data_quality == QualityGrade.UNAVAILABLE:
            failure = DataLayerResponse.fail(ErrorCode.FETCH_ERROR, data.quality_reason, adapter.provider)
            return dataclasses.replace(failure, data=data)
        return DataLayerResponse.ok(data, adapter.provider)

    async def _verify(
        self, sport: Sport, season: str, home_name: str, away_name: str, league: Optional[str]
    ) -> VerifiedMatchData:
        warnings: List[str] = []
        api_calls = 0
        self.logger.info(f"Verifying {home_name} vs {away_name} ({sport.value}, season {season})")

        (home, home_error, home_calls), (away, away_error, away_calls) = await asyncio.gather(
            self._resolve_team(sport, home_name, league),
            self._resolve_team(sport, away_name, league),
        )
        api_calls += home_calls + away_calls
        if home_error:
            warnings.append(f"Home team: {home_error}")
        if away_error:
            warnings.append(f"Away team: {away_error}")

        home_stats = away_stats = None
        for side, team in (("Home", home), ("Away", away)):
            if team is None:
                continue
            stats, error, season_warning, calls = await self._fetch_stats(sport, team, season)
            api_calls += calls
            if error:
                warnings.append(f"{side} stats: {error}")
            if season_warning:
                warnings.append(season_warning)
            if side == "Home":
                home_stats = stats
            else:
                away_stats = stats

        h2h = None
        if home is not None and away is not None:
            response = await self.data_layer.get_h2h(sport, home.external_id, away.external_id, DEFAULT_H2H_LIMIT)
            api_calls += 1
            if response.success and response.data.matches:
                h2h = build_verified_h2h(response.data)
            else:
                warnings.append(f"H2H: No H2H data available for {home.name} vs {away.name}")

        quality, reason = assess_data_quality(home_stats, away_stats, h2h, warnings, self.min_form)
        self.logger.info(f"Verification complete: quality={quality.value}, warnings={len(warnings)}, calls={api_calls}")

        return VerifiedMatchData(
            input=VerifiedMatchInput(
                sport=sport.value, home_team=home_name, away_team=away_name, season=season, league=league
            ),
            season=season,
            home_stats=home_stats,
            away_stats=away_stats,
            h2h=h2h,
            data_quality=quality,
            quality_reason=reason,
            warnings=tuple(warnings),
            source=VerificationSource(provider=DataProvider.API_SPORTS, fetched_at=utcnow(), api_calls_made=api_calls),
        )
