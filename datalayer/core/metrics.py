"""
Prometheus metrics for the data layer.

Metrics exposed:
- Upstream provider request counters (by provider and outcome)
- Cache hit/miss counters (by cache name)
- Team resolution counters (by resolution tier)
- The Odds API quota gauges
- Circuit breaker state gauge

The embedding process decides whether and how to expose the default
registry; this module only records.
"""
from prometheus_client import Counter, Gauge

# Provider Metrics
provider_requests_total = Counter(
    "datalayer_provider_requests_total",
    "Upstream provider requests",
    ["provider", "outcome"]
)

# Cache Metrics
cache_hits_total = Counter(
    "datalayer_cache_hits_total",
    "Cache hits",
    ["cache"]
)

cache_misses_total = Counter(
    "datalayer_cache_misses_total",
    "Cache misses (including expired entries)",
    ["cache"]
)

# Resolution Metrics
team_resolutions_total = Counter(
    "datalayer_team_resolutions_total",
    "Team name resolutions by tier",
    ["sport", "tier"]
)

# The Odds API quota
odds_api_quota_remaining = Gauge(
    "datalayer_odds_api_quota_remaining",
    "Remaining Odds API requests for current billing period"
)

odds_api_quota_used = Gauge(
    "datalayer_odds_api_quota_used",
    "Used Odds API requests in current billing period"
)

# Circuit breakers
circuit_breaker_state = Gauge(
    "datalayer_circuit_breaker_state",
    "Circuit breaker state (0=closed, 1=open, 2=half_open)",
    ["service"]
)

_BREAKER_STATE_VALUES = {"closed": 0, "open": 1, "half-open": 2, "half_open": 2}


def record_provider_request(provider: str, outcome: str) -> None:
    """
    Record one upstream request.

    Args:
        provider: Provider name ('api-sports', 'the-odds-api', 'espn')
        outcome: 'success' or an error code such as 'HTTP_500'
    """
    provider_requests_total.labels(provider=provider, outcome=outcome).inc()


def record_cache_hit(cache: str) -> None:
    """Record a cache hit."""
    cache_hits_total.labels(cache=cache).inc()


def record_cache_miss(cache: str) -> None:
    """Record a cache miss."""
    cache_misses_total.labels(cache=cache).inc()


def record_team_resolution(sport: str, tier: str) -> None:
    """Record which tier answered a team name resolution."""
    team_resolutions_total.labels(sport=sport, tier=tier).inc()


def update_odds_api_quota(remaining: int, used: int) -> None:
    """Update Odds API quota gauges."""
    odds_api_quota_remaining.set(remaining)
    odds_api_quota_used.set(used)


def update_breaker_state(service: str, state: str) -> None:
    """Publish a circuit breaker state change."""
    circuit_breaker_state.labels(service=service).set(_BREAKER_STATE_VALUES.get(state, 0))
