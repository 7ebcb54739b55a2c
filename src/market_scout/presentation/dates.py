"""Human-readable date labels relative to an evaluation instant."""

from datetime import datetime, timedelta, timezone
from typing import Optional, Union

from market_scout.retrieval.parsers import parse_timestamp

NOT_AVAILABLE = "N/A"

# Fixed English abbreviations; strftime("%b") follows the process locale
_MONTH_ABBR = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

_DAY = timedelta(hours=24)


def short_date(value: datetime) -> str:
    """e.g. 'Jan 5, 2024'."""
    return f"{_MONTH_ABBR[value.month - 1]} {value.day}, {value.year}"


def format_date(
    value: Union[datetime, str, None],
    now: Optional[datetime] = None,
) -> str:
    """
    Label a timestamp:
    - absent/unparsable -> "N/A"
    - under 24 hours old -> "<N> hours ago" (N truncated)
    - under 48 hours old -> "Yesterday"
    - otherwise, and for future dates -> "Mon D, YYYY" in now's timezone
    """
    dt = parse_timestamp(value)
    if dt is None:
        return NOT_AVAILABLE

    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)

    elapsed = now - dt
    if timedelta(0) <= elapsed < _DAY:
        hours = int(elapsed.total_seconds() // 3600)
        return f"{hours} hours ago"
    if timedelta(0) <= elapsed < 2 * _DAY:
        return "Yesterday"
    return short_date(dt.astimezone(now.tzinfo))
