"""Tests for the verified match data overlay.

Test Strategy:
1. Test season cross-validation (exact, start-year echo, mismatch, missing)
2. Test the quality grade is a pure function of its inputs
3. Test the sufficiency gate messages
4. Test VerifiedMatchService end to end over a mocked DataLayer
   - HIGH grade, warnings for missing pieces, UNAVAILABLE envelope
   - identity and stats caching, api call accounting
"""
from datetime import datetime, timezone
from unittest.mock import AsyncMock, Mock

import pytest

from datalayer.models.entities import (
    Form,
    H2HSummary,
    HeadToHead,
    Match,
    Record,
    Score,
    Scoring,
    Streak,
    Team,
    TeamStats,
)
from datalayer.models.enums import DataProvider, MatchStatus, QualityGrade, Sport, StreakType
from datalayer.models.envelope import DataLayerResponse, ErrorCode
from datalayer.services.adapters import BasketballAdapter
from datalayer.services.core.provider_client import ApiSportsClient
from datalayer.services.verification import (
    VerifiedH2H,
    VerifiedH2HSummary,
    VerifiedMatchService,
    VerifiedTeamStats,
    assess_data_quality,
    build_verified_h2h,
    derive_streak,
    is_data_sufficient_for_analysis,
    validate_season,
)

PROVIDER = DataProvider.API_SPORTS
NOW = datetime(2025, 11, 15, 12, 0, tzinfo=timezone.utc)


def make_team(external_id: str, name: str) -> Team:
    return Team(
        id=f"basketball-{external_id}",
        external_id=external_id,
        name=name,
        short_name=name.split()[-1],
        sport=Sport.BASKETBALL,
        league="NBA",
    )


LAKERS = make_team("145", "Los Angeles Lakers")
CELTICS = make_team("133", "Boston Celtics")


def verified_stats(form: str = "WWLWW") -> VerifiedTeamStats:
    record = Record.from_counts(wins=10, losses=5)
    return VerifiedTeamStats(
        team_id="basketball-145",
        team_name="Los Angeles Lakers",
        season="2025-2026",
        record=record,
        scoring=Scoring.from_totals(1700, 1600, record.played),
        form=form,
        streak=derive_streak(form),
        provider=PROVIDER,
        fetched_at=NOW,
    )


def match(home: Team, away: Team, home_score: int, away_score: int) -> Match:
    return Match(
        id="basketball-1",
        external_id="1",
        sport=Sport.BASKETBALL,
        league="NBA",
        league_id="12",
        season="2025-2026",
        home_team=home,
        away_team=away,
        status=MatchStatus.FINISHED,
        date=NOW,
        score=Score(home=home_score, away=away_score),
    )


def verified_h2h(total: int = 2) -> VerifiedH2H:
    h2h = HeadToHead(
        team1_id=LAKERS.id,
        team2_id=CELTICS.id,
        sport=Sport.BASKETBALL,
        summary=H2HSummary(total, 0, 0, 0, 0, 0),
        matches=tuple(match(LAKERS, CELTICS, 100, 90) for _ in range(total)),
    )
    return build_verified_h2h(h2h)


class TestSeasonValidation:
    """Test suite for validate_season."""

    @pytest.mark.parametrize(
        "requested,received",
        [("2025", "2025"), ("2025-2026", "2025-2026"), ("2025-2026", "2025"), ("2025", 2025)],
    )
    def test_valid(self, requested, received):
        assert validate_season(requested, received) == (True, None)

    def test_mismatch(self):
        assert validate_season("2025", "2024") == (False, "Season mismatch: requested 2025, received 2024")

    def test_missing(self):
        valid, warning = validate_season("2025", None)

        assert not valid
        assert warning == "No season in response"


class TestQualityGrade:
    """Test suite for assess_data_quality."""

    def test_high(self):
        grade, reason = assess_data_quality(verified_stats(), verified_stats(), verified_h2h(), [])

        assert grade == QualityGrade.HIGH
        assert reason == "Full data available: team stats, form, and H2H"

    def test_short_form_is_not_high(self):
        """Should require at least min_form results per side."""
        grade, _ = assess_data_quality(verified_stats("WL"), verified_stats(), verified_h2h(), [])

        assert grade == QualityGrade.MEDIUM

    def test_min_form_is_configurable(self):
        grade, _ = assess_data_quality(verified_stats("WL"), verified_stats("LW"), verified_h2h(), [], min_form=2)

        assert grade == QualityGrade.HIGH

    def test_warnings_downgrade_to_medium(self):
        grade, reason = assess_data_quality(verified_stats(), verified_stats(), verified_h2h(), ["Season mismatch"])

        assert grade == QualityGrade.MEDIUM
        assert reason == "Partial data with warnings: Season mismatch"

    def test_empty_h2h_is_not_high(self):
        grade, reason = assess_data_quality(verified_stats(), verified_stats(), verified_h2h(total=0), [])

        assert grade == QualityGrade.MEDIUM
        assert reason == "Partial data available (missing some sources)"

    def test_h2h_only_is_low(self):
        grade, reason = assess_data_quality(None, None, verified_h2h(), [])

        assert grade == QualityGrade.LOW
        assert reason == "Limited data available"

    def test_nothing_is_unavailable(self):
        grade, reason = assess_data_quality(None, None, None, ["Home team: not found"])

        assert grade == QualityGrade.UNAVAILABLE
        assert reason == "No verified data available from API"

    def test_grade_is_deterministic(self):
        """Should give the same grade for the same inputs every time."""
        inputs = (verified_stats(), None, verified_h2h(), ["x"])

        assert len({assess_data_quality(*inputs) for _ in range(5)}) == 1


class TestHelpers:
    """Test suite for streaks, H2H views and the sufficiency gate."""

    def test_derive_streak(self):
        assert derive_streak("LLWWW") == Streak(type=StreakType.LOSS, count=2)
        assert derive_streak("") == Streak(type=StreakType.NONE, count=0)
        assert derive_streak(None).count == 0

    def test_verified_h2h_winners(self):
        h2h = HeadToHead(
            team1_id=LAKERS.id,
            team2_id=CELTICS.id,
            sport=Sport.BASKETBALL,
            summary=H2HSummary(3, 1, 2, 0, 0, 0),
            matches=(match(LAKERS, CELTICS, 100, 90), match(CELTICS, LAKERS, 110, 95), match(LAKERS, CELTICS, 99, 99)),
        )

        view = build_verified_h2h(h2h)

        assert [m.winner for m in view.matches] == ["home", "home", "draw"]
        assert view.summary == VerifiedH2HSummary(
            total=3, home_wins=2, away_wins=0, draws=1, home_goals_total=309, away_goals_total=284
        )
        assert view.matches[1].home_team == "Boston Celtics"

    def _data(self, home=None, away=None, h2h=None):
        return Mock(home_stats=home, away_stats=away, h2h=h2h)

    def test_sufficiency_without_stats(self):
        gate = is_data_sufficient_for_analysis(self._data(h2h=verified_h2h()))

        assert not gate.sufficient
        assert not gate.minimum_met
        assert gate.reason == "No verified team stats available. Cannot produce reliable analysis."

    def test_sufficiency_with_one_side(self):
        gate = is_data_sufficient_for_analysis(self._data(home=verified_stats()))

        assert gate.minimum_met
        assert gate.reason == "Only one team has verified stats. Analysis will be limited."

    def test_sufficiency_without_h2h(self):
        gate = is_data_sufficient_for_analysis(self._data(home=verified_stats(), away=verified_stats()))

        assert gate.reason == "Team stats verified. H2H data unavailable."

    def test_sufficiency_full(self):
        gate = is_data_sufficient_for_analysis(
            self._data(home=verified_stats(), away=verified_stats(), h2h=verified_h2h())
        )

        assert gate.sufficient
        assert gate.reason == "Full verified data available for analysis."


# ─────────────────────────────────────────────────────────────
# Service
# ─────────────────────────────────────────────────────────────

def team_stats(team: Team, season: str = "2025-2026", form: str = "WWLWW") -> TeamStats:
    record = Record.from_counts(wins=10, losses=5)
    return TeamStats(
        team_id=team.id,
        season=season,
        sport=Sport.BASKETBALL,
        record=record,
        scoring=Scoring.from_totals(1700, 1600, record.played),
        form=Form(last5=form, streak=Streak(StreakType.WIN, 2)),
    )


def ok(data):
    return DataLayerResponse.ok(data, PROVIDER)


def fail(code: str):
    return DataLayerResponse.fail(code, "failed", PROVIDER)


@pytest.fixture
def data_layer(clock, resolver):
    """Mocked DataLayer whose registry holds a real basketball adapter (for the season)."""
    adapter = BasketballAdapter(ApiSportsClient("key"), resolver, clock=clock)
    teams = {"Lakers": LAKERS, "Celtics": CELTICS}

    data_layer = Mock()
    data_layer.registry.get = Mock(side_effect=lambda sport: adapter if sport == Sport.BASKETBALL else None)
    data_layer.find_team = AsyncMock(
        side_effect=lambda sport, name=None, league=None: ok(teams[name]) if name in teams else fail(ErrorCode.TEAM_NOT_FOUND)
    )
    data_layer.get_team_stats = AsyncMock(
        side_effect=lambda sport, team_id, season=None: ok(team_stats(LAKERS if team_id == "145" else CELTICS))
    )
    data_layer.get_h2h = AsyncMock(
        return_value=ok(
            HeadToHead(
                team1_id=LAKERS.id,
                team2_id=CELTICS.id,
                sport=Sport.BASKETBALL,
                summary=H2HSummary(1, 1, 0, 0, 100, 90),
                matches=(match(LAKERS, CELTICS, 100, 90),),
            )
        )
    )
    return data_layer


class TestVerifiedMatchService:
    """Test suite for get_verified_match_data."""

    @pytest.mark.asyncio
    async def test_full_data_is_high(self, data_layer):
        service = VerifiedMatchService(data_layer)

        result = await service.get_verified_match_data("nba", "Lakers", "Celtics")

        assert result.success
        data = result.data
        assert data.data_quality == QualityGrade.HIGH
        assert data.warnings == ()
        assert data.season == "2025-2026"
        assert data.input.sport == "basketball"
        assert data.home_stats.team_name == "Los Angeles Lakers"
        assert data.home_stats.form == "WWLWW"
        assert data.h2h.summary.total == 1
        assert data.source.api_calls_made == 5
        data_layer.get_team_stats.assert_any_await(Sport.BASKETBALL, "145", season="2025-2026")

    @pytest.mark.asyncio
    async def test_season_mismatch_is_warning(self, data_layer):
        """Should keep the stats but flag the season the provider returned."""
        data_layer.get_team_stats.side_effect = lambda sport, team_id, season=None: ok(
            team_stats(LAKERS, season="2024-2025")
        )
        service = VerifiedMatchService(data_layer)

        result = await service.get_verified_match_data("nba", "Lakers", "Celtics")

        data = result.data
        assert data.home_stats.season == "2024-2025"
        assert "Season mismatch: requested 2025-2026, received 2024-2025" in data.warnings
        assert data.data_quality == QualityGrade.MEDIUM

    @pytest.mark.asyncio
    async def test_missing_team_and_h2h(self, data_layer):
        """Should warn for the unresolved team and skip H2H."""
        service = VerifiedMatchService(data_layer)

        result = await service.get_verified_match_data("nba", "Lakers", "Quidditch Falcons")

        data = result.data
        assert data.away_stats is None
        assert data.h2h is None
        assert data.warnings == ('Away team: Could not find team "Quidditch Falcons" in basketball database',)
        assert data.data_quality == QualityGrade.MEDIUM
        data_layer.get_h2h.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_stats_and_h2h_failures(self, data_layer):
        data_layer.get_team_stats.side_effect = lambda sport, team_id, season=None: (
            ok(team_stats(LAKERS)) if team_id == "145" else fail(ErrorCode.STATS_NOT_FOUND)
        )
        data_layer.get_h2h.return_value = fail(ErrorCode.FETCH_ERROR)
        service = VerifiedMatchService(data_layer)

        result = await service.get_verified_match_data("nba", "Lakers", "Celtics")

        assert result.data.warnings == (
            "Away stats: No stats available for Boston Celtics in season 2025-2026",
            "H2H: No H2H data available for Los Angeles Lakers vs Boston Celtics",
        )

    @pytest.mark.asyncio
    async def test_unavailable_is_failed_envelope_with_data(self, data_layer):
        """Should fail the envelope but still attach the graded payload."""
        service = VerifiedMatchService(data_layer)

        result = await service.get_verified_match_data("nba", "Quidditch Falcons", "Hogwarts Hippogriffs")

        assert not result.success
        assert result.error_code == ErrorCode.FETCH_ERROR
        assert result.error.message == "No verified data available from API"
        assert result.data.data_quality == QualityGrade.UNAVAILABLE
        assert len(result.data.warnings) == 2

    @pytest.mark.asyncio
    async def test_unsupported_sport(self, data_layer):
        service = VerifiedMatchService(data_layer)

        result = await service.get_verified_match_data("curling", "Lakers", "Celtics")

        assert result.error_code == ErrorCode.SPORT_NOT_SUPPORTED
        data_layer.find_team.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_identity_and_stats_are_cached(self, data_layer):
        """Should not repeat lookups inside the cache windows."""
        service = VerifiedMatchService(data_layer)

        await service.get_verified_match_data("nba", "Lakers", "Celtics")
        result = await service.get_verified_match_data("nba", "Lakers", "Celtics")

        assert data_layer.find_team.await_count == 2
        assert data_layer.get_team_stats.await_count == 2
        assert data_layer.get_h2h.await_count == 2
        assert result.data.source.api_calls_made == 1
        assert result.data.data_quality == QualityGrade.HIGH

    @pytest.mark.asyncio
    async def test_identity_cache_keyed_by_trimmed_lowercase_name(self, data_layer):
        service = VerifiedMatchService(data_layer)

        await service.get_verified_match_data("nba", "Lakers", "Celtics")
        result = await service.get_verified_match_data("nba", "LAKERS", "celtics")

        assert data_layer.find_team.await_count == 2
        assert result.data.source.api_calls_made == 1
