"""
Uniform response envelope returned by every public data layer operation.

Failures are values, not exceptions: an operation that cannot produce data
returns ``success=False`` with an ``ErrorInfo`` carrying one of the
``ErrorCode`` values below.
"""
import dataclasses
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Generic, Mapping, Optional, TypeVar

from datalayer.models.enums import DataProvider

T = TypeVar("T")


class ErrorCode:
    """Error taxonomy shared by the provider client, adapters and orchestrator."""
    NOT_CONFIGURED = "NOT_CONFIGURED"
    SPORT_NOT_SUPPORTED = "SPORT_NOT_SUPPORTED"
    TEAM_NOT_FOUND = "TEAM_NOT_FOUND"
    STATS_NOT_FOUND = "STATS_NOT_FOUND"
    FETCH_ERROR = "FETCH_ERROR"
    NETWORK_ERROR = "NETWORK_ERROR"
    NOT_SUPPORTED = "NOT_SUPPORTED"
    INVALID_QUERY = "INVALID_QUERY"
    API_ERROR = "API_ERROR"
    INVALID_RESPONSE = "INVALID_RESPONSE"
    CIRCUIT_OPEN = "CIRCUIT_OPEN"
    NO_ODDS_FOUND = "NO_ODDS_FOUND"

    @staticmethod
    def http(status_code: int) -> str:
        return f"HTTP_{status_code}"


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class ErrorInfo:
    code: str
    message: str
    provider: Optional[DataProvider] = None


@dataclass(frozen=True)
class ResponseMetadata:
    provider: DataProvider
    cached: bool = False
    fetched_at: datetime = field(default_factory=utcnow)
    cache_expiry: Optional[datetime] = None


@dataclass(frozen=True)
class DataLayerResponse(Generic[T]):
    success: bool
    metadata: ResponseMetadata
    data: Optional[T] = None
    error: Optional[ErrorInfo] = None

    @classmethod
    def ok(cls, data: T, provider: DataProvider, cached: bool = False) -> "DataLayerResponse[T]":
        return cls(
            success=True,
            data=data,
            metadata=ResponseMetadata(provider=provider, cached=cached),
        )

    @classmethod
    def fail(cls, code: str, message: str, provider: DataProvider) -> "DataLayerResponse[T]":
        return cls(
            success=False,
            error=ErrorInfo(code=code, message=message, provider=provider),
            metadata=ResponseMetadata(provider=provider),
        )

    @property
    def error_code(self) -> Optional[str]:
        return self.error.code if self.error else None

    def as_cached(self, expiry: Optional[datetime] = None) -> "DataLayerResponse[T]":
        """Copy of this response flagged as served from cache."""
        metadata = dataclasses.replace(self.metadata, cached=True, cache_expiry=expiry)
        return dataclasses.replace(self, metadata=metadata)

    def to_dict(self) -> dict:
        return to_primitive(self)


def to_primitive(value: Any) -> Any:
    """
    Convert entities and envelopes into JSON-friendly structures.

    Dataclasses become dicts, enums their values, datetimes ISO strings,
    and tuples lists.
    """
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: to_primitive(getattr(value, f.name)) for f in dataclasses.fields(value)}
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, Mapping):
        return {str(k): to_primitive(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_primitive(v) for v in value]
    return value
