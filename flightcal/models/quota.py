"""API quota models."""

from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, field_validator

from flightcal.core.constants import UNKNOWN, QuotaConstants


class QuotaInfo(BaseModel):
    """Rate-limit accounting reported by the upstream API."""

    remaining: int | float | str = UNKNOWN
    limit: int | float | str = UNKNOWN
    reset: int | float | str = UNKNOWN

    @field_validator("remaining", "limit", "reset", mode="before")
    @classmethod
    def default_unknown(cls, v: Any) -> Any:
        """Missing values collapse to the ``Unknown`` sentinel."""
        if v is None:
            return UNKNOWN
        return v

    @property
    def is_known(self) -> bool:
        return self.remaining != UNKNOWN

    @property
    def reset_at(self) -> datetime | None:
        """Reset instant, when the reset value is a plausible epoch timestamp."""
        try:
            value = int(self.reset)
        except (TypeError, ValueError):
            return None

        if value > QuotaConstants.MIN_EPOCH_MILLISECONDS:
            return datetime.fromtimestamp(value / 1000, tz=UTC)
        if value > QuotaConstants.MIN_EPOCH_SECONDS:
            return datetime.fromtimestamp(value, tz=UTC)
        return None

    def to_wire(self) -> dict[str, int | float | str]:
        return self.model_dump()
