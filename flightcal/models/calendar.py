"""Calendar event models."""

from datetime import datetime

from pydantic import BaseModel


class CalendarEvent(BaseModel):
    """A calendar event derived from a single flight record."""

    title: str
    description: str
    location: str
    start_utc: datetime
    end_utc: datetime
    is_delayed: bool = False
    duration: str = ""


class CalendarResult(BaseModel):
    """Outcome of an add-to-calendar action."""

    success: bool
    error: str | None = None
    url: str | None = None
