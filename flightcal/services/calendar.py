"""Calendar event generation for Google Calendar."""

import logging
import re
import uuid
from collections.abc import Callable
from datetime import UTC, datetime
from typing import Any
from urllib.parse import urlencode

import typer
from icalendar import Calendar, Event
from pydantic import ValidationError

from flightcal.core.constants import FLIGHTAWARE_URL, GOOGLE_CALENDAR_URL, TIME_NOT_AVAILABLE
from flightcal.core.timeutils import format_duration, format_gcal_timestamp, format_local_time, parse_instant
from flightcal.exceptions import InvalidFlightDataError, LinkOpenError
from flightcal.models.calendar import CalendarEvent, CalendarResult
from flightcal.models.flight import FlightEndpoint, FlightRecord, TimePair

logger = logging.getLogger(__name__)

# Opens a URL in the user's browser, raising on failure.
LinkOpener = Callable[[str], None]


def launch_in_browser(url: str) -> None:
    """Open a URL with the system's default handler."""
    exit_code = typer.launch(url)
    if exit_code != 0:
        raise LinkOpenError(url, f"launcher exited with status {exit_code}")


def resolve_scheduled_time(endpoint: FlightEndpoint) -> str | None:
    """Pick the scheduled timestamp of one side of a flight.

    Tries ``scheduledTime.utc``, ``scheduledTime.local``, ``time.utc``,
    ``time.local``, then a bare ``time`` string. A bare string only counts if
    it parses as a timestamp.
    """
    candidates: list[str | None] = []
    if endpoint.scheduled_time:
        candidates += [endpoint.scheduled_time.utc, endpoint.scheduled_time.local]
    if isinstance(endpoint.time, TimePair):
        candidates += [endpoint.time.utc, endpoint.time.local]

    for candidate in candidates:
        if candidate:
            return candidate

    if isinstance(endpoint.time, str) and parse_instant(endpoint.time):
        return endpoint.time
    return None


def resolve_predicted_time(endpoint: FlightEndpoint) -> str | None:
    """Pick the predicted (or estimated) timestamp of one side of a flight."""
    for pair in (endpoint.predicted_time, endpoint.estimated_time):
        if pair is None:
            continue
        if pair.utc:
            return pair.utc
        if pair.local:
            return pair.local
    return None


def _is_later(predicted: str | None, scheduled: str) -> bool:
    if not predicted:
        return False
    predicted_at = parse_instant(predicted)
    scheduled_at = parse_instant(scheduled)
    if predicted_at is None or scheduled_at is None:
        return False
    return predicted_at > scheduled_at


def is_flight_delayed(
    scheduled_departure: str,
    scheduled_arrival: str,
    predicted_departure: str | None = None,
    predicted_arrival: str | None = None,
) -> bool:
    """A flight is delayed if either predicted time is later than scheduled."""
    return _is_later(predicted_departure, scheduled_departure) or _is_later(predicted_arrival, scheduled_arrival)


def _endpoint_line(endpoint: FlightEndpoint, display_time: str, prefix: str = "") -> str:
    line = f"{prefix}{endpoint.airport_name} {endpoint.airport_code}"
    if endpoint.terminal:
        line += f" Terminal {endpoint.terminal}"
    return f"{line} {display_time} (local time)"


def build_event_description(flight: FlightRecord, is_delayed: bool, duration: str) -> str:
    """Build the multi-line event description.

    Args:
        flight: Flight record with departure and arrival
        is_delayed: Whether the flight runs late
        duration: Rendered flight duration

    Returns:
        Description text
    """
    departure = flight.departure or FlightEndpoint()
    arrival = flight.arrival or FlightEndpoint()

    scheduled_departure_local = format_local_time(departure.scheduled_local)
    scheduled_arrival_local = format_local_time(arrival.scheduled_local)
    predicted_departure_local = format_local_time(departure.predicted_local)
    predicted_arrival_local = format_local_time(arrival.predicted_local)

    departure_local = scheduled_departure_local
    if is_delayed and predicted_departure_local != TIME_NOT_AVAILABLE:
        departure_local = predicted_departure_local
    arrival_local = scheduled_arrival_local
    if is_delayed and predicted_arrival_local != TIME_NOT_AVAILABLE:
        arrival_local = predicted_arrival_local

    parts = [
        f"{flight.airline_name} flight {flight.display_number}",
        "",
        _endpoint_line(departure, departure_local),
        _endpoint_line(arrival, arrival_local, prefix="- "),
    ]

    if is_delayed:
        parts += [
            "",
            "⚠️ FLIGHT DELAYED",
            "",
            "Original Scheduled Times:",
            f"  Departure: {scheduled_departure_local} (local time)",
            f"  Arrival: {scheduled_arrival_local} (local time)",
            "",
            "Updated Times:",
        ]
        if predicted_departure_local != TIME_NOT_AVAILABLE:
            parts.append(f"  Departure: {predicted_departure_local} (local time) - Predicted/Estimated")
        if predicted_arrival_local != TIME_NOT_AVAILABLE:
            parts.append(f"  Arrival: {predicted_arrival_local} (local time) - Predicted/Estimated")

    parts += ["", "Flight Details:"]
    if duration:
        parts.append(f"Duration: {duration}")
    distance = flight.great_circle_distance.describe() if flight.great_circle_distance else ""
    if distance:
        parts.append(f"Distance: {distance}")
    if departure.terminal:
        parts.append(f"Departure Terminal: {departure.terminal}")
    if arrival.terminal:
        parts.append(f"Arrival Terminal: {arrival.terminal}")
    if flight.airline_code:
        parts.append(f"Airline Code: {flight.airline_code}")

    tracking_url = flightaware_url(flight)
    if tracking_url:
        parts += ["", "Live Flight Tracking:", tracking_url]

    return "\n".join(parts)


def flightaware_url(flight: FlightRecord) -> str:
    """FlightAware tracking link, or an empty string without an airline code."""
    code = flight.tracking_code
    if not code:
        return ""
    number = re.sub(r"\s+", "", flight.display_number)
    return f"{FLIGHTAWARE_URL}{code}{number}"


def _as_record(flight: FlightRecord | dict[str, Any]) -> FlightRecord:
    if isinstance(flight, FlightRecord):
        return flight
    try:
        return FlightRecord.model_validate(flight)
    except ValidationError as e:
        raise InvalidFlightDataError("malformed flight record", {"errors": e.errors()}) from e


def build_calendar_event(flight: FlightRecord | dict[str, Any]) -> CalendarEvent:
    """Turn a flight record into a calendar event.

    When the flight is delayed, the event is placed at the predicted times
    where they are known.

    Args:
        flight: Flight record, as a model or a raw API dict

    Returns:
        Calendar event

    Raises:
        InvalidFlightDataError: If the record lacks usable departure/arrival times
    """
    record = _as_record(flight)
    departure, arrival = record.departure, record.arrival

    if departure is None or arrival is None:
        raise InvalidFlightDataError("missing departure or arrival information")

    scheduled_departure = resolve_scheduled_time(departure)
    scheduled_arrival = resolve_scheduled_time(arrival)
    if not scheduled_departure or not scheduled_arrival:
        raise InvalidFlightDataError(
            "missing time information. "
            f"Departure time: {'found' if scheduled_departure else 'missing'}, "
            f"Arrival time: {'found' if scheduled_arrival else 'missing'}"
        )

    predicted_departure = resolve_predicted_time(departure)
    predicted_arrival = resolve_predicted_time(arrival)
    delayed = is_flight_delayed(scheduled_departure, scheduled_arrival, predicted_departure, predicted_arrival)
    logger.debug(f"Flight {record.display_number} delayed: {delayed}")

    effective_departure = predicted_departure if delayed and predicted_departure else scheduled_departure
    effective_arrival = predicted_arrival if delayed and predicted_arrival else scheduled_arrival

    start = parse_instant(effective_departure)
    end = parse_instant(effective_arrival)
    if start is None or end is None:
        raise InvalidFlightDataError("could not parse dates")

    duration = format_duration(end - start)
    title = f"{record.airline_name} flight {record.display_number}"
    if delayed:
        title = f"[DELAYED] {title}"

    return CalendarEvent(
        title=title,
        description=build_event_description(record, delayed, duration),
        location=f"{departure.airport_name} {departure.airport_code}",
        start_utc=start.astimezone(UTC),
        end_utc=end.astimezone(UTC),
        is_delayed=delayed,
        duration=duration,
    )


def build_google_calendar_url(event: CalendarEvent) -> str:
    """Build a pre-filled Google Calendar "create event" link."""
    params = {
        "action": "TEMPLATE",
        "text": event.title,
        "dates": f"{format_gcal_timestamp(event.start_utc)}/{format_gcal_timestamp(event.end_utc)}",
        "details": event.description,
        "location": event.location,
    }
    return f"{GOOGLE_CALENDAR_URL}?{urlencode(params)}"


def build_ics(event: CalendarEvent, now: datetime | None = None) -> str:
    """Render the event as an iCalendar document."""
    vevent = Event()
    vevent.add("uid", f"{uuid.uuid4()}@flightcal")
    vevent.add("dtstamp", (now or datetime.now(UTC)).astimezone(UTC))
    vevent.add("dtstart", event.start_utc)
    vevent.add("dtend", event.end_utc)
    vevent.add("summary", event.title)
    vevent.add("description", event.description)
    vevent.add("location", event.location)

    calendar = Calendar()
    calendar.add("prodid", "-//flightcal//EN")
    calendar.add("version", "2.0")
    calendar.add("calscale", "GREGORIAN")
    calendar.add_component(vevent)
    return calendar.to_ical().decode("utf-8")


def add_to_calendar(flight: FlightRecord | dict[str, Any], opener: LinkOpener = launch_in_browser) -> CalendarResult:
    """Build a Google Calendar link for a flight and open it.

    Args:
        flight: Flight record, as a model or a raw API dict
        opener: Handle used to open the link in the browser

    Returns:
        Result with ``success`` and, on failure, a human-readable ``error``
    """
    try:
        event = build_calendar_event(flight)
    except InvalidFlightDataError as e:
        logger.error(f"Cannot build calendar event: {e.message}")
        return CalendarResult(success=False, error=e.message)

    url = build_google_calendar_url(event)
    logger.debug(f"Google Calendar URL: {url}")

    try:
        opener(url)
    except LinkOpenError as e:
        logger.error(e.message)
        return CalendarResult(success=False, error=e.message, url=url)
    except Exception as e:
        logger.error(f"Error opening Google Calendar: {e}")
        return CalendarResult(success=False, error=LinkOpenError(url, str(e)).message, url=url)

    logger.info(f"Opened Google Calendar for {event.title}")
    return CalendarResult(success=True, url=url)
