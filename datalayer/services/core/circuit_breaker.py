"""
Circuit breakers for upstream providers.

Uses pybreaker. When a breaker is open, calls fail immediately with
CircuitBreakerError and the caller turns that into a CIRCUIT_OPEN envelope
(or a fallback value) instead of waiting on a provider that is down.

Circuit Breakers:
- api_sports_breaker: API-Sports (soccer, basketball, hockey, american football)
- odds_api_breaker: The Odds API
- espn_api_breaker: ESPN injuries feed
"""
import asyncio
from functools import wraps
from typing import Any, Callable

from pybreaker import CircuitBreaker, CircuitBreakerError, CircuitBreakerListener

from datalayer.core.logging import get_logger
from datalayer.core.metrics import update_breaker_state

logger = get_logger(__name__)

DEFAULT_FAIL_MAX = 5  # Failures before opening
DEFAULT_RESET_TIMEOUT = 60  # Seconds before a half-open probe

__all__ = [
    "CircuitBreakerError",
    "api_sports_breaker",
    "espn_api_breaker",
    "get_all_breaker_states",
    "odds_api_breaker",
    "reset_breaker",
    "with_circuit_breaker",
]


class _StateLogger(CircuitBreakerListener):
    """Log and publish every breaker state transition."""

    def state_change(self, cb, old_state, new_state):
        old_name = old_state.name if old_state else "none"
        logger.warning(f"Circuit breaker '{cb.name}' {old_name} -> {new_state.name}")
        update_breaker_state(cb.name, new_state.name)


def _make_breaker(name: str) -> CircuitBreaker:
    return CircuitBreaker(
        fail_max=DEFAULT_FAIL_MAX,
        reset_timeout=DEFAULT_RESET_TIMEOUT,
        name=name,
        listeners=[_StateLogger()],
    )


api_sports_breaker = _make_breaker("api_sports")
odds_api_breaker = _make_breaker("odds_api")
espn_api_breaker = _make_breaker("espn_api")

_ALL_BREAKERS = (api_sports_breaker, odds_api_breaker, espn_api_breaker)


def get_all_breaker_states() -> dict[str, str]:
    """Map of breaker name to 'closed', 'open' or 'half-open'."""
    return {breaker.name: breaker.current_state for breaker in _ALL_BREAKERS}


def reset_breaker(breaker: CircuitBreaker) -> None:
    """
    Force a breaker back to closed.

    Only do this once the upstream is known to have recovered.
    """
    breaker.close()
    logger.warning(f"Circuit breaker '{breaker.name}' manually reset to CLOSED state")


def with_circuit_breaker(
    breaker: CircuitBreaker,
    fallback: Any = None,
    fallback_func: Callable | None = None,
):
    """
    Decorator that routes a call through ``breaker`` and returns a fallback
    while the breaker is open.

    Args:
        breaker: The circuit breaker to use
        fallback: Value to return when the circuit is open
        fallback_func: Called with the original arguments when the circuit
                       is open (takes precedence over ``fallback``)

    Example:
        @with_circuit_breaker(espn_api_breaker, fallback={})
        async def fetch_feed(url):
            ...
    """

    def decorator(func: Callable) -> Callable:
        def _on_open(*args, **kwargs):
            logger.warning(
                f"Circuit breaker '{breaker.name}' is OPEN - using fallback for {func.__name__}"
            )
            if fallback_func:
                return fallback_func(*args, **kwargs)
            return fallback

        @wraps(func)
        async def async_wrapper(*args, **kwargs):
            try:
                return await breaker.call(func, *args, **kwargs)
            except CircuitBreakerError:
                return _on_open(*args, **kwargs)

        @wraps(func)
        def sync_wrapper(*args, **kwargs):
            try:
                return breaker.call(func, *args, **kwargs)
            except CircuitBreakerError:
                return _on_open(*args, **kwargs)

        if asyncio.iscoroutinefunction(func):
            return async_wrapper
        return sync_wrapper

    return decorator
