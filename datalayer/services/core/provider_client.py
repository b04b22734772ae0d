"""
API-Sports provider client.

One authenticated request wrapper shared by every sport adapter. Each sport
lives on its own API-Sports host; the adapter passes the base URL, the client
adds the credential and normalizes every outcome into a ProviderResult.

The client never raises for upstream problems:
- no credential          -> NOT_CONFIGURED (no request is made)
- transport failure      -> NETWORK_ERROR
- non-2xx status         -> HTTP_<status>
- body is not JSON       -> INVALID_RESPONSE
- body carries "errors"  -> API_ERROR
- breaker open           -> CIRCUIT_OPEN

There are no retries at this layer. Cancellation propagates untouched so a
caller deadline aborts the underlying HTTP call.
"""
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import httpx

from datalayer.core.logging import get_logger
from datalayer.core.metrics import record_provider_request
from datalayer.models.envelope import ErrorCode, ErrorInfo
from datalayer.models.enums import DataProvider
from datalayer.services.core.circuit_breaker import CircuitBreakerError, api_sports_breaker

logger = get_logger(__name__)

# API-Sports hosts, one per sport
API_SPORTS_BASE_URLS = {
    "soccer": "https://v3.football.api-sports.io",
    "basketball": "https://v1.basketball.api-sports.io",
    "hockey": "https://v1.hockey.api-sports.io",
    "american_football": "https://v1.american-football.api-sports.io",
}

# API-Sports league ids
LEAGUE_IDS = {
    "PREMIER_LEAGUE": 39,
    "LA_LIGA": 140,
    "BUNDESLIGA": 78,
    "SERIE_A": 135,
    "LIGUE_1": 61,
    "MLS": 253,
    "CHAMPIONS_LEAGUE": 2,
    "NBA": 12,
    "EUROLEAGUE": 120,
    "NHL": 57,
    "NFL": 1,
}


@dataclass(frozen=True)
class ProviderResult:
    """Outcome of one provider request."""
    success: bool
    data: Any = None
    error: Optional[ErrorInfo] = None

    @classmethod
    def failure(cls, code: str, message: str) -> "ProviderResult":
        return cls(success=False, error=ErrorInfo(code=code, message=message, provider=DataProvider.API_SPORTS))

    @property
    def error_code(self) -> Optional[str]:
        return self.error.code if self.error else None

    @property
    def error_message(self) -> str:
        return self.error.message if self.error else ""


class ApiSportsClient:
    """
    Authenticated API-Sports client.

    Args:
        api_key: API-Sports key; empty means every request returns NOT_CONFIGURED
        timeout: Request timeout in seconds
        client: Optional pre-built httpx.AsyncClient (tests inject one backed
                by httpx.MockTransport)
        logger: Optional logger (defaults to this module's logger)
    """

    def __init__(
        self,
        api_key: str,
        timeout: float = 30.0,
        client: Optional[httpx.AsyncClient] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.api_key = api_key
        self.timeout = timeout
        self._client = client
        self._owns_client = client is None
        self.logger = logger or globals()["logger"]

    def is_configured(self) -> bool:
        return bool(self.api_key)

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self.timeout),
                limits=httpx.Limits(max_keepalive_connections=5, max_connections=10),
                headers={"Accept": "application/json"},
            )
            self._owns_client = True
        return self._client

    async def close(self):
        """Close the HTTP client if this instance created it."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    @api_sports_breaker
    async def _send(self, url: str, params: Dict[str, Any]) -> httpx.Response:
        """Issue the GET; wrapped with the API-Sports circuit breaker."""
        client = await self._get_client()
        return await client.get(url, params=params, headers={"x-apisports-key": self.api_key})

    async def request(
        self,
        base_url: str,
        endpoint: str,
        params: Optional[Dict[str, Any]] = None,
    ) -> ProviderResult:
        """
        GET ``base_url + endpoint`` and normalize the outcome.

        Args:
            base_url: API-Sports host for the sport
            endpoint: Path such as "/teams" or "/games"
            params: Query parameters; None values are dropped

        Returns:
            ProviderResult with the body's ``response`` payload on success
        """
        if not self.is_configured():
            return ProviderResult.failure(
                ErrorCode.NOT_CONFIGURED, "API-Sports key is not configured"
            )

        url = f"{base_url}{endpoint}"
        query = {k: v for k, v in (params or {}).items() if v is not None}

        try:
            response = await self._send(url, query)
        except CircuitBreakerError:
            self.logger.warning(f"API-Sports circuit breaker is OPEN - skipping {endpoint}")
            record_provider_request(DataProvider.API_SPORTS.value, ErrorCode.CIRCUIT_OPEN)
            return ProviderResult.failure(ErrorCode.CIRCUIT_OPEN, "API-Sports circuit breaker is open")
        except httpx.HTTPError as e:
            self.logger.error(f"API-Sports network error on {endpoint}: {e}")
            record_provider_request(DataProvider.API_SPORTS.value, ErrorCode.NETWORK_ERROR)
            return ProviderResult.failure(ErrorCode.NETWORK_ERROR, str(e) or type(e).__name__)

        if not response.is_success:
            code = ErrorCode.http(response.status_code)
            self.logger.warning(f"API-Sports {endpoint} returned {response.status_code}")
            record_provider_request(DataProvider.API_SPORTS.value, code)
            return ProviderResult.failure(
                code, f"API request failed: {response.status_code} {response.reason_phrase}"
            )

        try:
            body = response.json()
        except ValueError as e:
            self.logger.warning(f"API-Sports {endpoint} returned a non-JSON body: {e}")
            record_provider_request(DataProvider.API_SPORTS.value, ErrorCode.INVALID_RESPONSE)
            return ProviderResult.failure(ErrorCode.INVALID_RESPONSE, "Response body is not valid JSON")

        vendor_errors = body.get("errors") if isinstance(body, dict) else None
        if vendor_errors:
            message = _join_vendor_errors(vendor_errors)
            self.logger.warning(f"API-Sports {endpoint} vendor error: {message}")
            record_provider_request(DataProvider.API_SPORTS.value, ErrorCode.API_ERROR)
            return ProviderResult.failure(ErrorCode.API_ERROR, message)

        record_provider_request(DataProvider.API_SPORTS.value, "success")
        data = body.get("response", []) if isinstance(body, dict) else body
        return ProviderResult(success=True, data=data if data is not None else [])


def _join_vendor_errors(errors: Any) -> str:
    """API-Sports reports errors as either a dict (field -> message) or a list."""
    if isinstance(errors, dict):
        return "; ".join(f"{k}: {v}" for k, v in errors.items())
    if isinstance(errors, list):
        return "; ".join(str(e) for e in errors)
    return str(errors)
