"""Result models for flight lookups."""

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field

from flightcal.core.constants import ResponseKeys
from flightcal.models.quota import QuotaInfo


class PayloadKind(StrEnum):
    """Shape of a fetch result's payload."""

    LIST = "list"
    OBJECT = "object"
    ERROR = "error"


class FetchResult(BaseModel):
    """Outcome of a flight lookup, cached or live."""

    kind: PayloadKind
    data: Any = None
    quota: QuotaInfo | None = None
    error: str | None = None
    from_cache: bool = False

    @classmethod
    def from_payload(cls, data: Any, quota: QuotaInfo | None = None, from_cache: bool = False) -> "FetchResult":
        """Wrap a raw response body, recording whether it is a list or an object."""
        kind = PayloadKind.LIST if isinstance(data, list) else PayloadKind.OBJECT
        return cls(kind=kind, data=data, quota=quota, from_cache=from_cache)

    @classmethod
    def failure(cls, message: str) -> "FetchResult":
        return cls(kind=PayloadKind.ERROR, error=message)

    @property
    def ok(self) -> bool:
        return self.kind != PayloadKind.ERROR

    def to_wire(self) -> Any:
        """Render the legacy ``_data``/``_quotaInfo`` wrapper shape.

        Cached results carry no quota and are returned as the bare payload.
        """
        if self.kind == PayloadKind.ERROR:
            return {ResponseKeys.ERROR.value: self.error}
        if self.quota is None:
            return self.data

        quota = self.quota.to_wire()
        if self.kind == PayloadKind.LIST:
            return {ResponseKeys.DATA.value: self.data, ResponseKeys.QUOTA_INFO.value: quota}
        return {**(self.data or {}), ResponseKeys.QUOTA_INFO.value: quota}


class NormalizedResult(BaseModel):
    """Flights recovered from a fetch result, plus any quota information."""

    quota_info: QuotaInfo | None = None
    flights: list[Any] = Field(default_factory=list)
    error: str | None = None
