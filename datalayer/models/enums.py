"""Closed vocabularies shared by every component."""
from enum import Enum
from typing import Optional, Union


class Sport(str, Enum):
    SOCCER = "soccer"
    BASKETBALL = "basketball"
    HOCKEY = "hockey"
    AMERICAN_FOOTBALL = "american_football"


class DataProvider(str, Enum):
    API_SPORTS = "api-sports"
    THE_ODDS_API = "the-odds-api"
    ESPN = "espn"
    CACHED = "cached"


class MatchStatus(str, Enum):
    SCHEDULED = "scheduled"
    LIVE = "live"
    HALFTIME = "halftime"
    FINISHED = "finished"
    POSTPONED = "postponed"
    CANCELLED = "cancelled"
    SUSPENDED = "suspended"
    UNKNOWN = "unknown"


class InjuryStatus(str, Enum):
    OUT = "out"
    DOUBTFUL = "doubtful"
    QUESTIONABLE = "questionable"
    PROBABLE = "probable"
    DAY_TO_DAY = "day-to-day"


class StreakType(str, Enum):
    WIN = "win"
    LOSS = "loss"
    DRAW = "draw"
    NONE = "none"


class QualityGrade(str, Enum):
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"
    UNAVAILABLE = "UNAVAILABLE"


# Names callers commonly use for each sport
SPORT_ALIASES = {
    "soccer": Sport.SOCCER,
    "football": Sport.SOCCER,
    "basketball": Sport.BASKETBALL,
    "basketball_nba": Sport.BASKETBALL,
    "nba": Sport.BASKETBALL,
    "euroleague": Sport.BASKETBALL,
    "hockey": Sport.HOCKEY,
    "icehockey": Sport.HOCKEY,
    "ice_hockey": Sport.HOCKEY,
    "nhl": Sport.HOCKEY,
    "american_football": Sport.AMERICAN_FOOTBALL,
    "americanfootball": Sport.AMERICAN_FOOTBALL,
    "gridiron": Sport.AMERICAN_FOOTBALL,
    "nfl": Sport.AMERICAN_FOOTBALL,
}


def normalize_sport(value: Union[str, Sport, None]) -> Optional[Sport]:
    """
    Map a sport name or alias to a Sport.

    Examples:
        >>> normalize_sport("NBA")
        <Sport.BASKETBALL: 'basketball'>
        >>> normalize_sport("curling") is None
        True
    """
    if isinstance(value, Sport):
        return value
    if not value:
        return None
    return SPORT_ALIASES.get(value.strip().lower())
