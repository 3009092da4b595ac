"""
Time helpers for ESPN timestamps and display formatting.

ESPN reports event times in UTC, usually without seconds
(``2024-10-20T17:00Z``). Parsing keeps them timezone-aware; formatting
converts to the viewer's local zone.
"""

from datetime import date, datetime, timedelta, timezone
from typing import Optional


def now_utc() -> datetime:
    """Current wall-clock time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def parse_event_date(value: Optional[str]) -> Optional[datetime]:
    """
    Parse an ESPN event timestamp.

    Args:
        value: ISO-8601 string, with or without seconds, ``Z`` or offset suffix

    Returns:
        Aware UTC datetime, or None if the value is missing or unparseable
    """
    if not value or not isinstance(value, str):
        return None

    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"

    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)

    return parsed.astimezone(timezone.utc)


def _hour_12(ts: datetime) -> str:
    hour = ts.hour % 12 or 12
    return f"{hour}:{ts.minute:02d} {'AM' if ts.hour < 12 else 'PM'}"


def format_game_time(ts: Optional[datetime], tz: Optional[timezone] = None) -> str:
    """
    Format an event time like ``Mon Jan 2, 3:04 PM`` in local time.

    Args:
        ts: Event timestamp (aware)
        tz: Target zone, defaults to the system local zone

    Returns:
        Display string, ``TBD`` when the time is unknown
    """
    if ts is None:
        return "TBD"

    local = ts.astimezone(tz)
    return f"{local.strftime('%a %b')} {local.day}, {_hour_12(local)}"


def format_clock_time(ts: datetime, tz: Optional[timezone] = None) -> str:
    """Format a time of day like ``3:04 PM`` in local time."""
    return _hour_12(ts.astimezone(tz))


def scoreboard_date_range(start: date, days: int) -> str:
    """
    Build the ESPN ``dates`` query value covering ``days`` days after start.

    Args:
        start: First calendar day of the window
        days: Number of days after start to include

    Returns:
        ``YYYYMMDD-YYYYMMDD`` range string
    """
    end = start + timedelta(days=days)
    return f"{start.strftime('%Y%m%d')}-{end.strftime('%Y%m%d')}"

