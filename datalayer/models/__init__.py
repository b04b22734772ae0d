"""
Data layer models.

All entities are immutable value records; see ``entities`` for the domain
types and ``envelope`` for the response wrapper.
"""
from datalayer.models.enums import (
    DataProvider,
    InjuryStatus,
    MatchStatus,
    QualityGrade,
    Sport,
    StreakType,
    normalize_sport,
)
from datalayer.models.entities import (
    BookmakerOdds,
    EnrichedMatch,
    Form,
    H2HSummary,
    HeadToHead,
    Injury,
    Match,
    MoneylineQuote,
    Odds,
    PeriodScore,
    RecentGames,
    RecentSummary,
    Record,
    Score,
    Scoring,
    SpreadQuote,
    Streak,
    Team,
    TeamContext,
    TeamStats,
    TotalQuote,
    Venue,
    canonical_id,
)
from datalayer.models.envelope import (
    DataLayerResponse,
    ErrorCode,
    ErrorInfo,
    ResponseMetadata,
    to_primitive,
)

__all__ = [
    "BookmakerOdds",
    "DataLayerResponse",
    "DataProvider",
    "EnrichedMatch",
    "ErrorCode",
    "ErrorInfo",
    "Form",
    "H2HSummary",
    "HeadToHead",
    "Injury",
    "InjuryStatus",
    "Match",
    "MatchStatus",
    "MoneylineQuote",
    "Odds",
    "PeriodScore",
    "QualityGrade",
    "RecentGames",
    "RecentSummary",
    "Record",
    "ResponseMetadata",
    "Score",
    "Scoring",
    "Sport",
    "SpreadQuote",
    "Streak",
    "StreakType",
    "Team",
    "TeamContext",
    "TeamStats",
    "TotalQuote",
    "Venue",
    "canonical_id",
    "normalize_sport",
    "to_primitive",
]
