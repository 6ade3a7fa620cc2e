"""Utility functions for deskbird-spatial package."""

import json
import re
from datetime import date, datetime, time
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import ValidationError as PydanticValidationError

from .exceptions import ParseError, ValidationError
from .models import TimeWindow

DEFAULT_TIMEZONE = "Europe/Amsterdam"

# Window used for whole-day zone availability queries (local time)
DAY_START_HOUR = 7
DAY_END_HOUR = 23

_DESK_NUMBER_RE = re.compile(r"(\d+)")


def parse_json(payload: str | bytes | dict, error_cls: type[ParseError] = ParseError) -> Any:
    """Parse a JSON payload, passing already-parsed objects through.

    Args:
        payload: JSON text, bytes, or an already-decoded object
        error_cls: ParseError subclass to raise on failure

    Returns:
        Decoded JSON value

    Raises:
        ParseError: If the text is not valid JSON (as ``error_cls``)
    """
    if not isinstance(payload, (str, bytes, bytearray)):
        return payload
    try:
        return json.loads(payload)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise error_cls(f"Failed to parse JSON: {e}") from e


def extract_desk_number(title: str | None) -> int | None:
    """Extract the first run of digits from a desk title.

    Args:
        title: Desk display title (e.g., "Desk 57")

    Returns:
        Desk number, or None if the title has no digits
    """
    if not title or not isinstance(title, str):
        return None
    match = _DESK_NUMBER_RE.search(title)
    return int(match.group(1)) if match else None


def desk_sort_key(desk) -> tuple:
    """Sort key for the canonical desk presentation order.

    Numbered desks come first by number, unnumbered desks follow by title.
    """
    if desk.desk_number is not None:
        return (0, desk.desk_number, "")
    return (1, 0, desk.title or "")


def sort_desks(desks) -> list:
    """Return desks in canonical presentation order."""
    return sorted(desks, key=desk_sort_key)


def _bounds(interval) -> tuple[int, int]:
    if isinstance(interval, tuple):
        return interval
    if hasattr(interval, "start") and hasattr(interval, "end"):
        return interval.start, interval.end
    if hasattr(interval, "start_time") and hasattr(interval, "end_time"):
        return interval.start_time, interval.end_time
    raise TypeError(f"Cannot read interval bounds from {type(interval).__name__}")


def overlaps(a, b) -> bool:
    """Check if two time intervals overlap.

    Intervals are half-open, so a booking ending exactly when another starts
    does not overlap it.

    Args:
        a: TimeWindow, Occupant, or (start, end) tuple
        b: TimeWindow, Occupant, or (start, end) tuple

    Returns:
        True if the intervals share any instant
    """
    a_start, a_end = _bounds(a)
    b_start, b_end = _bounds(b)
    return a_start < b_end and b_start < a_end


def validate_time_slot(window: TimeWindow | tuple[int, int]) -> TimeWindow:
    """Validate a candidate booking window (start < end).

    Args:
        window: TimeWindow or (start, end) tuple in epoch milliseconds

    Returns:
        TimeWindow for the same interval

    Raises:
        ValidationError: If the window is empty or inverted
    """
    if isinstance(window, TimeWindow):
        return window
    try:
        start, end = window
        return TimeWindow(start=start, end=end)
    except (TypeError, ValueError, PydanticValidationError) as e:
        raise ValidationError(f"Invalid time window: {window}") from e


def get_timezone(name: str = DEFAULT_TIMEZONE) -> ZoneInfo:
    """Look up a timezone by IANA name.

    Raises:
        ValidationError: If the timezone is unknown
    """
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ValidationError(f"Unknown timezone: {name}") from e


def parse_date(date_str: str, fmt: str = "%Y-%m-%d") -> date:
    """Parse date string.

    Args:
        date_str: Date string
        fmt: Date format (default: YYYY-MM-DD)

    Returns:
        date object

    Raises:
        ValueError: If date format is invalid
    """
    try:
        return datetime.strptime(date_str.strip(), fmt).date()
    except ValueError as e:
        raise ValueError(f"Invalid date format: {date_str}. Expected {fmt}") from e


def to_timestamp(dt: datetime) -> int:
    """Convert an aware datetime to epoch milliseconds."""
    return int(dt.timestamp() * 1000)


def from_timestamp(timestamp: int, tz: str = DEFAULT_TIMEZONE) -> datetime:
    """Convert epoch milliseconds to an aware datetime in ``tz``."""
    return datetime.fromtimestamp(timestamp / 1000, tz=get_timezone(tz))


def day_time_range(day: date | str, tz: str = DEFAULT_TIMEZONE) -> tuple[int, int]:
    """Whole-day window used for zone availability queries.

    Args:
        day: Date or YYYY-MM-DD string
        tz: IANA timezone the office runs in

    Returns:
        (start, end) in epoch milliseconds, 07:00 to 23:00 local time
    """
    if isinstance(day, str):
        day = parse_date(day)
    zone = get_timezone(tz)
    start = datetime.combine(day, time(DAY_START_HOUR), tzinfo=zone)
    end = datetime.combine(day, time(DAY_END_HOUR), tzinfo=zone)
    return to_timestamp(start), to_timestamp(end)
