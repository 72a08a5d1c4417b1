"""Cache-related data models."""

from typing import Any

from pydantic import BaseModel


class CacheEntry(BaseModel):
    """A cached upstream response for one flight query."""

    key: str
    payload: Any  # Raw response body from the API
    cached_at: float
    expires_at: float

    def is_expired(self, now: float) -> bool:
        return now >= self.expires_at

    def age_hours(self, now: float) -> float:
        return (now - self.cached_at) / 3600


class CacheStatusInfo(BaseModel):
    """Model for cache status information."""

    cache_path: str
    total_entries: int = 0
    live_entries: int = 0
    expired_entries: int = 0
    oldest_entry_hours: float | None = None
