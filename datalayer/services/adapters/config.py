"""
Sport Configuration for the API-Sports adapters.

This module centralizes all sport-specific settings:
- API-Sports host, league id and league name
- Endpoint paths per capability
- Provider status code maps
- Season representation
- Alias table used for team name resolution

The base adapter works with any sport through configuration; subclasses only
supply payload transforms.
"""
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Optional

from datalayer.models.enums import MatchStatus, Sport
from datalayer.services.core.provider_client import API_SPORTS_BASE_URLS, LEAGUE_IDS


# =============================================================================
# STATUS MAPS
# =============================================================================

COMMON_STATUS_MAP: Dict[str, MatchStatus] = {
    "NS": MatchStatus.SCHEDULED,
    "LIVE": MatchStatus.LIVE,
    "Q1": MatchStatus.LIVE,
    "Q2": MatchStatus.LIVE,
    "Q3": MatchStatus.LIVE,
    "Q4": MatchStatus.LIVE,
    "OT": MatchStatus.LIVE,
    "HT": MatchStatus.HALFTIME,
    "FT": MatchStatus.FINISHED,
    "AOT": MatchStatus.FINISHED,
    "POST": MatchStatus.POSTPONED,
    "CANC": MatchStatus.CANCELLED,
    "SUSP": MatchStatus.SUSPENDED,
}

HOCKEY_STATUS_MAP: Dict[str, MatchStatus] = {
    **COMMON_STATUS_MAP,
    "P1": MatchStatus.LIVE,
    "P2": MatchStatus.LIVE,
    "P3": MatchStatus.LIVE,
    "PT": MatchStatus.LIVE,  # Penalty time
    "BT": MatchStatus.HALFTIME,  # Break time
    "AP": MatchStatus.FINISHED,  # After penalties
}

SOCCER_STATUS_MAP: Dict[str, MatchStatus] = {
    "TBD": MatchStatus.SCHEDULED,
    "NS": MatchStatus.SCHEDULED,
    "1H": MatchStatus.LIVE,
    "2H": MatchStatus.LIVE,
    "ET": MatchStatus.LIVE,
    "P": MatchStatus.LIVE,
    "LIVE": MatchStatus.LIVE,
    "HT": MatchStatus.HALFTIME,
    "BT": MatchStatus.HALFTIME,
    "FT": MatchStatus.FINISHED,
    "AET": MatchStatus.FINISHED,
    "PEN": MatchStatus.FINISHED,
    "AWD": MatchStatus.FINISHED,
    "WO": MatchStatus.FINISHED,
    "PST": MatchStatus.POSTPONED,
    "CANC": MatchStatus.CANCELLED,
    "ABD": MatchStatus.CANCELLED,
    "SUSP": MatchStatus.SUSPENDED,
    "INT": MatchStatus.SUSPENDED,
}


@dataclass(frozen=True)
class AdapterConfig:
    """
    Complete configuration for one sport/league on API-Sports.

    ``statistics_endpoint`` is None where the provider has no per-team
    statistics (stats then come from standings only). ``injuries_endpoint``
    is None where API-Sports has no injury feed.
    """
    # Sport identification
    sport: Sport
    league_name: str
    league_id: int
    resolver_key: str  # Alias table key for the name resolver

    # API paths
    base_url: str
    games_endpoint: str
    h2h_endpoint: str
    teams_endpoint: str = "/teams"
    standings_endpoint: Optional[str] = "/standings"
    statistics_endpoint: Optional[str] = None
    injuries_endpoint: Optional[str] = None

    # Provider status code -> MatchStatus
    status_map: Dict[str, MatchStatus] = field(default_factory=lambda: dict(COMMON_STATUS_MAP))

    # Season settings
    two_year_season: bool = False  # "2025-2026" instead of "2025"
    h2h_season_scoped: bool = True  # H2H query carries a season parameter
    stats_season_fallback: bool = False  # Retry standings with the previous season

    @property
    def finished_statuses(self) -> FrozenSet[str]:
        """Provider codes that mean the match is over."""
        return frozenset(code for code, status in self.status_map.items() if status == MatchStatus.FINISHED)


# =============================================================================
# SPORT CONFIGURATIONS
# =============================================================================

SOCCER_CONFIG = AdapterConfig(
    sport=Sport.SOCCER,
    league_name="Premier League",
    league_id=LEAGUE_IDS["PREMIER_LEAGUE"],
    resolver_key="soccer",
    base_url=API_SPORTS_BASE_URLS["soccer"],
    games_endpoint="/fixtures",
    h2h_endpoint="/fixtures/headtohead",
    statistics_endpoint="/teams/statistics",
    injuries_endpoint="/injuries",
    status_map=SOCCER_STATUS_MAP,
    h2h_season_scoped=False,
)

NBA_CONFIG = AdapterConfig(
    sport=Sport.BASKETBALL,
    league_name="NBA",
    league_id=LEAGUE_IDS["NBA"],
    resolver_key="basketball",
    base_url=API_SPORTS_BASE_URLS["basketball"],
    games_endpoint="/games",
    h2h_endpoint="/games",
    statistics_endpoint="/statistics",
    two_year_season=True,
)

# Secondary basketball leagues use single-year seasons
EUROLEAGUE_CONFIG = AdapterConfig(
    sport=Sport.BASKETBALL,
    league_name="Euroleague",
    league_id=LEAGUE_IDS["EUROLEAGUE"],
    resolver_key="basketball_euroleague",
    base_url=API_SPORTS_BASE_URLS["basketball"],
    games_endpoint="/games",
    h2h_endpoint="/games",
    statistics_endpoint="/statistics",
    two_year_season=False,
)

NHL_CONFIG = AdapterConfig(
    sport=Sport.HOCKEY,
    league_name="NHL",
    league_id=LEAGUE_IDS["NHL"],
    resolver_key="hockey",
    base_url=API_SPORTS_BASE_URLS["hockey"],
    games_endpoint="/games",
    h2h_endpoint="/games",
    statistics_endpoint="/teams/statistics",
    status_map=HOCKEY_STATUS_MAP,
)

NFL_CONFIG = AdapterConfig(
    sport=Sport.AMERICAN_FOOTBALL,
    league_name="NFL",
    league_id=LEAGUE_IDS["NFL"],
    resolver_key="american_football",
    base_url=API_SPORTS_BASE_URLS["american_football"],
    games_endpoint="/games",
    h2h_endpoint="/games",
    statistics_endpoint=None,  # No statistics endpoint, standings only
    stats_season_fallback=True,
)
