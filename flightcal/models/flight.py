"""Flight-related data models for the AeroDataBox API."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from flightcal.core.constants import UNKNOWN, UNKNOWN_AIRLINE


class _UpstreamModel(BaseModel):
    """Base for upstream payload models: camelCase aliases, unknown fields kept."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)


def _as_text(v: Any) -> str | None:
    """Upstream scalars are sometimes numeric where text is expected."""
    if v is None or isinstance(v, str):
        return v
    return str(v)


class Airport(_UpstreamModel):
    """Airport reference on one side of a flight."""

    iata: str | None = None
    icao: str | None = None
    name: str | None = None

    @field_validator("iata", "icao", "name", mode="before")
    @classmethod
    def coerce_text(cls, v: Any) -> Any:
        return _as_text(v)

    @property
    def code(self) -> str:
        """IATA code, falling back to ICAO."""
        return self.iata or self.icao or ""


class TimePair(_UpstreamModel):
    """A timestamp reported both in UTC and in the airport's local zone."""

    utc: str | None = None
    local: str | None = None


class FlightEndpoint(_UpstreamModel):
    """Departure or arrival side of a flight."""

    airport: Airport | None = None
    scheduled_time: TimePair | None = Field(default=None, alias="scheduledTime")
    predicted_time: TimePair | None = Field(default=None, alias="predictedTime")
    estimated_time: TimePair | None = Field(default=None, alias="estimatedTime")
    time: TimePair | str | None = None
    terminal: str | None = None

    @field_validator("terminal", mode="before")
    @classmethod
    def coerce_terminal(cls, v: Any) -> str | None:
        """Terminals are sometimes numeric in upstream payloads."""
        if v == "":
            return None
        return _as_text(v)

    @property
    def airport_name(self) -> str:
        return (self.airport.name if self.airport else None) or UNKNOWN

    @property
    def airport_code(self) -> str:
        return self.airport.code if self.airport else ""

    @property
    def scheduled_local(self) -> str | None:
        """Local scheduled time, used for display only."""
        if self.scheduled_time and self.scheduled_time.local:
            return self.scheduled_time.local
        if isinstance(self.time, TimePair):
            return self.time.local
        return None

    @property
    def predicted_local(self) -> str | None:
        """Local predicted (or estimated) time, used for display only."""
        if self.predicted_time and self.predicted_time.local:
            return self.predicted_time.local
        if self.estimated_time:
            return self.estimated_time.local
        return None


class Airline(_UpstreamModel):
    """Operating airline."""

    name: str | None = None
    iata: str | None = None
    icao: str | None = None

    @field_validator("name", "iata", "icao", mode="before")
    @classmethod
    def coerce_text(cls, v: Any) -> Any:
        return _as_text(v)


class GreatCircleDistance(_UpstreamModel):
    """Distance between the two airports."""

    km: int | float | None = None
    mile: int | float | None = None

    def describe(self) -> str:
        """Render as ``1234 km (767 miles)`` or ``767 miles``."""
        if self.km:
            return f"{self.km} km ({self.mile} miles)"
        if self.mile:
            return f"{self.mile} miles"
        return ""


class FlightRecord(_UpstreamModel):
    """One flight leg as returned by ``/flights/number``."""

    number: str | None = None
    departure: FlightEndpoint | None = None
    arrival: FlightEndpoint | None = None
    airline: Airline | None = None
    great_circle_distance: GreatCircleDistance | None = Field(default=None, alias="greatCircleDistance")
    status: str | None = None

    @field_validator("number", "status", mode="before")
    @classmethod
    def coerce_text(cls, v: Any) -> Any:
        return _as_text(v)

    @property
    def display_number(self) -> str:
        return self.number or UNKNOWN

    @property
    def airline_name(self) -> str:
        return (self.airline.name if self.airline else None) or UNKNOWN_AIRLINE

    @property
    def airline_code(self) -> str:
        """Airline code for display, IATA preferred."""
        if not self.airline:
            return ""
        return self.airline.iata or self.airline.icao or ""

    @property
    def tracking_code(self) -> str:
        """Airline code for FlightAware, ICAO preferred."""
        if not self.airline:
            return ""
        return self.airline.icao or self.airline.iata or ""
