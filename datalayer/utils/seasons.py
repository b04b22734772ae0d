"""
Season utilities for every supported sport.

Season naming follows API-Sports conventions:
- Basketball top league (NBA): Oct-Jun, "2025-2026"
- Basketball secondary leagues (Euroleague etc.): Oct-Jun, "2025"
- Ice hockey: Oct-Jun, "2025"
- American football: Sep-Feb, "2025"
- Soccer: Aug-May, "2025"

A date before the sport's start month belongs to the season that started the
previous calendar year.
"""
from datetime import date as DateType
from datetime import datetime, timezone
from typing import Optional, Union

from datalayer.models.enums import Sport

# UTC timezone for Python < 3.11 compatibility
try:
    from datetime import UTC
except ImportError:
    UTC = timezone.utc

DateLike = Union[datetime, DateType]

# Month the season rolls over (1-indexed)
SEASON_START_MONTH = {
    Sport.BASKETBALL: 10,
    Sport.HOCKEY: 10,
    Sport.AMERICAN_FOOTBALL: 9,
    Sport.SOCCER: 8,
}

# Active season ranges: (start_month, start_day) to (end_month, end_day)
SPORT_SEASONS = {
    Sport.BASKETBALL: {"start": (10, 1), "end": (6, 30)},
    Sport.HOCKEY: {"start": (10, 1), "end": (6, 30)},
    Sport.AMERICAN_FOOTBALL: {"start": (9, 1), "end": (2, 15)},
    Sport.SOCCER: {"start": (8, 1), "end": (5, 31)},
}

OFFSEASON_CACHE_TTL = 86400  # 24 hours


def _today(on: Optional[DateLike]) -> DateType:
    if on is None:
        return datetime.now(UTC).date()
    if isinstance(on, datetime):
        return on.date()
    return on


def season_start_year(sport: Sport, on: Optional[DateLike] = None) -> int:
    """
    Calendar year in which the season active on ``on`` started.

    Examples:
        >>> season_start_year(Sport.SOCCER, DateType(2025, 7, 31))
        2024
        >>> season_start_year(Sport.SOCCER, DateType(2025, 8, 1))
        2025
    """
    day = _today(on)
    return day.year if day.month >= SEASON_START_MONTH[sport] else day.year - 1


def current_season(sport: Sport, on: Optional[DateLike] = None, two_year: Optional[bool] = None) -> str:
    """
    Season string for ``sport`` on a given date.

    Args:
        sport: Sport to compute the season for
        on: Date to evaluate (defaults to today, UTC)
        two_year: Force the "YYYY-YYYY" representation on or off. Defaults
                  to True for basketball (top league) and False otherwise.

    Returns:
        Season string, e.g. "2025-2026" or "2025"

    Examples:
        >>> current_season(Sport.BASKETBALL, DateType(2025, 11, 15))
        '2025-2026'
        >>> current_season(Sport.BASKETBALL, DateType(2025, 3, 1))
        '2024-2025'
        >>> current_season(Sport.BASKETBALL, DateType(2025, 3, 1), two_year=False)
        '2024'
    """
    start = season_start_year(sport, on)
    if two_year is None:
        two_year = sport == Sport.BASKETBALL
    if two_year:
        return f"{start}-{start + 1}"
    return str(start)


def previous_season(season: str) -> str:
    """
    The season one full cycle earlier, in the same representation.

    Examples:
        >>> previous_season("2024-2025")
        '2023-2024'
        >>> previous_season("2024")
        '2023'
    """
    if "-" in season:
        start = int(season.split("-")[0])
        return f"{start - 1}-{start}"
    return str(int(season) - 1)


def season_start(season: str) -> str:
    """Start year of a season string ("2024-2025" -> "2024")."""
    return season.split("-")[0]


def is_in_season(sport: Sport, date: Optional[DateLike] = None) -> bool:
    """
    Check if a date falls inside the active season window for a sport.

    Args:
        sport: Sport to check
        date: Date to check (defaults to today)

    Returns:
        True if in season; unknown sports are treated as in season
    """
    if sport not in SPORT_SEASONS:
        return True

    day = _today(date)
    start_month, start_day = SPORT_SEASONS[sport]["start"]
    end_month, end_day = SPORT_SEASONS[sport]["end"]
    season_start_date = DateType(day.year, start_month, start_day)
    season_end_date = DateType(day.year, end_month, end_day)

    # Seasons spanning two calendar years
    if season_start_date > season_end_date:
        return day >= season_start_date or day <= season_end_date
    return season_start_date <= day <= season_end_date


def season_aware_ttl(sport: Sport, in_season_ttl: int, date: Optional[DateLike] = None) -> int:
    """
    Cache TTL that stretches to 24 hours outside the active season.

    Args:
        sport: Sport the cached data belongs to
        in_season_ttl: TTL in seconds while the season is active
        date: Date to evaluate (defaults to today)
    """
    if is_in_season(sport, date):
        return in_season_ttl
    return max(in_season_ttl, OFFSEASON_CACHE_TTL)
