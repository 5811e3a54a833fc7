"""Date parsing and formatting utilities.

Centralizes all date handling so API timestamps, snapshot timestamps and
terminal output agree on timezones and formats.
"""

import logging
from datetime import datetime

import pendulum

logger = logging.getLogger(__name__)

# Format used when showing times to the user
DISPLAY_FORMAT = "ddd D MMM YYYY, HH:mm"


def parse_iso_datetime(
    datetime_str: str, timezone: str = "UTC"
) -> pendulum.DateTime:
    """Parse ISO 8601 datetime into pendulum datetime.

    Used by PandaScore `scheduled_at` fields and snapshot `fetched_at`
    timestamps.

    Args:
        datetime_str: ISO 8601 string (e.g., "2025-11-29T18:00:00Z")
        timezone: Target timezone (default: UTC)

    Returns:
        Timezone-aware pendulum datetime in specified timezone

    Raises:
        ValueError: If datetime_str is invalid
    """
    try:
        clean_str = datetime_str.replace("Z", "+00:00")
        dt = datetime.fromisoformat(clean_str)
        if dt.tzinfo is None:
            raise ValueError("timestamp has no UTC offset")
        return pendulum.instance(dt).in_timezone(timezone)
    except (ValueError, AttributeError, TypeError) as e:
        logger.error(f"ISO parse error: '{datetime_str}': {e}")
        raise ValueError(f"Invalid ISO datetime: '{datetime_str}'") from e


def format_local_datetime(
    dt: pendulum.DateTime | None, timezone: str | None = None
) -> str:
    """Format a datetime for display in the user's timezone.

    Args:
        dt: Datetime to format, or None for unscheduled matches.
        timezone: Timezone name; defaults to the machine's local timezone.

    Returns:
        Human-readable date and time, or "TBD" when dt is None.
    """
    if dt is None:
        return "TBD"
    tz = timezone or pendulum.local_timezone()
    return dt.in_timezone(tz).format(DISPLAY_FORMAT)


def format_remaining_time(seconds: int) -> str:
    """Format remaining seconds into human-readable time.

    Args:
        seconds: Remaining seconds.

    Returns:
        Formatted time string (e.g., "2h", "45m", "30s").
    """
    if seconds >= 3600:
        hours = seconds // 3600
        return f"{hours}h"
    elif seconds >= 60:
        minutes = seconds // 60
        return f"{minutes}m"
    else:
        return f"{seconds}s"
