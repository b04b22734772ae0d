"""Unit tests for season utilities.

Test Strategy:
1. Test season rollover per sport (start month boundary)
2. Test the two-year basketball representation and its override
3. Test previous-season arithmetic in both representations
4. Test in-season windows and the offseason cache TTL stretch
"""
from datetime import date, datetime, timezone

import pytest

from datalayer.models.enums import Sport
from datalayer.utils.seasons import (
    OFFSEASON_CACHE_TTL,
    current_season,
    is_in_season,
    previous_season,
    season_aware_ttl,
    season_start,
    season_start_year,
)


class TestCurrentSeason:
    """Test suite for current season computation."""

    # Rollover per sport
    # ─────────────────────────────────────────────────────────────

    @pytest.mark.parametrize(
        "sport,on,expected",
        [
            (Sport.BASKETBALL, date(2025, 11, 15), "2025-2026"),
            (Sport.BASKETBALL, date(2025, 3, 1), "2024-2025"),
            (Sport.BASKETBALL, date(2025, 10, 1), "2025-2026"),
            (Sport.BASKETBALL, date(2025, 9, 30), "2024-2025"),
            (Sport.HOCKEY, date(2025, 11, 15), "2025"),
            (Sport.HOCKEY, date(2025, 9, 30), "2024"),
            (Sport.AMERICAN_FOOTBALL, date(2025, 9, 1), "2025"),
            (Sport.AMERICAN_FOOTBALL, date(2026, 1, 20), "2025"),
            (Sport.SOCCER, date(2025, 8, 1), "2025"),
            (Sport.SOCCER, date(2025, 7, 31), "2024"),
        ],
    )
    def test_season_for_fixed_date(self, sport, on, expected):
        """Should roll over on the sport's start month."""
        assert current_season(sport, on=on) == expected

    def test_accepts_aware_datetime(self):
        """Should use the calendar date of a datetime."""
        on = datetime(2025, 11, 15, 23, 0, tzinfo=timezone.utc)
        assert current_season(Sport.BASKETBALL, on=on) == "2025-2026"

    def test_secondary_basketball_league_uses_single_year(self):
        """Should drop the two-year form when asked (Euroleague and friends)."""
        assert current_season(Sport.BASKETBALL, on=date(2025, 11, 15), two_year=False) == "2025"

    def test_start_year(self):
        """Should report the calendar year the season started."""
        assert season_start_year(Sport.AMERICAN_FOOTBALL, date(2026, 2, 1)) == 2025


class TestSeasonArithmetic:
    """Test suite for previous-season and start-year helpers."""

    def test_previous_two_year_season(self):
        assert previous_season("2025-2026") == "2024-2025"

    def test_previous_single_year_season(self):
        assert previous_season("2025") == "2024"

    def test_season_start(self):
        assert season_start("2025-2026") == "2025"
        assert season_start("2025") == "2025"


class TestSeasonWindows:
    """Test suite for in-season checks and TTL stretching."""

    def test_nfl_window_spans_new_year(self):
        """Should treat January as in season for the NFL."""
        assert is_in_season(Sport.AMERICAN_FOOTBALL, date(2026, 1, 10))
        assert not is_in_season(Sport.AMERICAN_FOOTBALL, date(2025, 6, 1))

    def test_soccer_summer_break(self):
        assert not is_in_season(Sport.SOCCER, date(2025, 7, 1))
        assert is_in_season(Sport.SOCCER, date(2025, 12, 26))

    def test_ttl_unchanged_in_season(self):
        assert season_aware_ttl(Sport.BASKETBALL, 600, date(2025, 12, 1)) == 600

    def test_ttl_stretched_in_offseason(self):
        assert season_aware_ttl(Sport.BASKETBALL, 600, date(2025, 8, 1)) == OFFSEASON_CACHE_TTL
