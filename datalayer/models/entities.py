"""
Normalized, provider-agnostic entities.

Every record is a frozen dataclass and every collection is a tuple, so an
entity cannot change after an adapter builds it. The cache stores these
records directly.
"""
from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType
from typing import Mapping, Optional, Tuple, Union

from datalayer.models.enums import (
    DataProvider,
    InjuryStatus,
    MatchStatus,
    Sport,
    StreakType,
)

ExtendedValue = Union[int, float, str]


def team_id_prefix(sport: Sport) -> str:
    """Prefix used in canonical team and match ids."""
    return "nfl" if sport == Sport.AMERICAN_FOOTBALL else sport.value


def canonical_id(sport: Sport, external_id) -> str:
    """Canonical id for a (sport, provider id) pair, e.g. ``basketball-145``."""
    return f"{team_id_prefix(sport)}-{external_id}"


# ============================================================================
# TEAMS & MATCHES
# ============================================================================

@dataclass(frozen=True)
class Venue:
    name: Optional[str] = None
    city: Optional[str] = None
    capacity: Optional[int] = None


@dataclass(frozen=True)
class Team:
    """A team as known to one provider, under a canonical id."""
    id: str
    external_id: str
    name: str
    short_name: str
    sport: Sport
    league: Optional[str] = None
    venue: Optional[Venue] = None
    country: Optional[str] = None
    founded: Optional[int] = None
    logo: Optional[str] = None


@dataclass(frozen=True)
class PeriodScore:
    home: int
    away: int


@dataclass(frozen=True)
class Score:
    home: int
    away: int
    halftime: Optional[PeriodScore] = None
    periods: Tuple[PeriodScore, ...] = ()


@dataclass(frozen=True)
class Match:
    """A snapshot of one fixture; status is whatever the provider reported."""
    id: str
    external_id: str
    sport: Sport
    league: str
    league_id: str
    season: str
    home_team: Team
    away_team: Team
    status: MatchStatus
    date: datetime
    round: Optional[str] = None
    venue: Optional[str] = None
    score: Optional[Score] = None
    provider: DataProvider = DataProvider.API_SPORTS


# ============================================================================
# STATISTICS
# ============================================================================

@dataclass(frozen=True)
class Record:
    """Win/loss/draw record; ``played`` is always wins + losses + draws."""
    wins: int
    losses: int
    draws: int
    played: int
    win_percentage: float

    @classmethod
    def from_counts(cls, wins: int, losses: int, draws: int = 0) -> "Record":
        played = wins + losses + draws
        win_percentage = round(wins / played, 3) if played > 0 else 0.0
        return cls(wins=wins, losses=losses, draws=draws, played=played, win_percentage=win_percentage)


@dataclass(frozen=True)
class Scoring:
    total_for: int
    total_against: int
    average_for: float
    average_against: float
    home_for: Optional[int] = None
    home_against: Optional[int] = None
    away_for: Optional[int] = None
    away_against: Optional[int] = None

    @classmethod
    def from_totals(cls, total_for: int, total_against: int, played: int, **splits) -> "Scoring":
        """Build scoring with per-game averages over ``played`` games."""
        average_for = round(total_for / played, 2) if played > 0 else 0.0
        average_against = round(total_against / played, 2) if played > 0 else 0.0
        return cls(
            total_for=total_for,
            total_against=total_against,
            average_for=average_for,
            average_against=average_against,
            **splits,
        )


@dataclass(frozen=True)
class Streak:
    type: StreakType
    count: int


@dataclass(frozen=True)
class Form:
    """Recent results, most recent first (e.g. ``"WWLDW"``)."""
    last5: str
    last10: Optional[str] = None
    streak: Optional[Streak] = None


@dataclass(frozen=True)
class TeamStats:
    team_id: str
    season: str
    sport: Sport
    record: Record
    scoring: Scoring
    league: Optional[str] = None
    form: Optional[Form] = None
    extended: Mapping[str, ExtendedValue] = field(default_factory=dict)
    provider: DataProvider = DataProvider.API_SPORTS

    def __post_init__(self):
        object.__setattr__(self, "extended", MappingProxyType(dict(self.extended)))


# ============================================================================
# HEAD-TO-HEAD & RECENT GAMES
# ============================================================================

@dataclass(frozen=True)
class H2HSummary:
    total_games: int
    team1_wins: int
    team2_wins: int
    draws: int
    team1_goals: int
    team2_goals: int


@dataclass(frozen=True)
class HeadToHead:
    team1_id: str
    team2_id: str
    sport: Sport
    summary: H2HSummary
    matches: Tuple[Match, ...] = ()
    provider: DataProvider = DataProvider.API_SPORTS


@dataclass(frozen=True)
class RecentSummary:
    wins: int
    losses: int
    draws: int
    goals_for: int
    goals_against: int


@dataclass(frozen=True)
class RecentGames:
    team_id: str
    sport: Sport
    summary: RecentSummary
    games: Tuple[Match, ...] = ()
    provider: DataProvider = DataProvider.API_SPORTS


# ============================================================================
# INJURIES & ODDS
# ============================================================================

@dataclass(frozen=True)
class Injury:
    player_id: str
    player_name: str
    team_id: str
    team_name: str
    sport: Sport
    type: str
    status: InjuryStatus
    description: str = ""
    expected_return: Optional[str] = None
    provider: DataProvider = DataProvider.API_SPORTS


@dataclass(frozen=True)
class MoneylineQuote:
    home: Optional[float] = None
    away: Optional[float] = None
    draw: Optional[float] = None


@dataclass(frozen=True)
class SpreadQuote:
    home_line: Optional[float] = None
    home_price: Optional[float] = None
    away_line: Optional[float] = None
    away_price: Optional[float] = None


@dataclass(frozen=True)
class TotalQuote:
    line: Optional[float] = None
    over_price: Optional[float] = None
    under_price: Optional[float] = None


@dataclass(frozen=True)
class BookmakerOdds:
    key: str
    title: str
    last_update: Optional[datetime] = None
    moneyline: Optional[MoneylineQuote] = None
    spread: Optional[SpreadQuote] = None
    total: Optional[TotalQuote] = None


@dataclass(frozen=True)
class Odds:
    match_id: str
    home_team: str
    away_team: str
    bookmakers: Tuple[BookmakerOdds, ...] = ()
    commence_time: Optional[datetime] = None
    last_update: Optional[datetime] = None
    provider: DataProvider = DataProvider.THE_ODDS_API


# ============================================================================
# COMPOSITION
# ============================================================================

@dataclass(frozen=True)
class TeamContext:
    """One side of an enriched match; empty fields mean the sub-fetch was skipped or failed."""
    team: Team
    stats: Optional[TeamStats] = None
    recent_games: Optional[RecentGames] = None
    injuries: Optional[Tuple[Injury, ...]] = None


@dataclass(frozen=True)
class EnrichedMatch:
    match: Match
    home_team: TeamContext
    away_team: TeamContext
    h2h: Optional[HeadToHead] = None
    odds: Optional[Odds] = None
    warnings: Tuple[str, ...] = ()
