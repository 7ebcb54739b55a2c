"""Time-window filter: All / Today / This Month / This Year."""

from datetime import datetime, timezone
from enum import Enum
from typing import Optional, Sequence

from market_scout.models.opportunity import OpportunityRecord


class WindowSelector(str, Enum):
    """Active temporal filter."""

    ALL = "all"
    DAY = "day"
    MONTH = "month"
    YEAR = "year"

    @property
    def label(self) -> str:
        """Display label used in summaries and the empty state."""
        return _LABELS[self]

    @property
    def button_label(self) -> str:
        return _BUTTON_LABELS[self]

    @classmethod
    def parse(cls, value: "str | WindowSelector") -> "WindowSelector":
        """Accept enum values plus 'today' (case-insensitive)."""
        if isinstance(value, WindowSelector):
            return value
        key = value.strip().lower()
        if key == "today":
            return cls.DAY
        try:
            return cls(key)
        except ValueError:
            raise ValueError(
                f"Unknown window: {value}. Use one of: all, day, month, year"
            ) from None


_LABELS = {
    WindowSelector.ALL: "All Time",
    WindowSelector.DAY: "Today",
    WindowSelector.MONTH: "This Month",
    WindowSelector.YEAR: "This Year",
}

_BUTTON_LABELS = {
    WindowSelector.ALL: "All",
    WindowSelector.DAY: "Today",
    WindowSelector.MONTH: "This Month",
    WindowSelector.YEAR: "This Year",
}


def _in_zone_of(value: datetime, now: datetime) -> datetime:
    """Express value in now's calendar. Naive datetimes are UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    if now.tzinfo is None:
        return value.astimezone(timezone.utc)
    return value.astimezone(now.tzinfo)


def matches_window(date: Optional[datetime], window: WindowSelector, now: datetime) -> bool:
    """
    True if a record dated `date` belongs to `window` as of `now`.
    Missing dates only match ALL.
    """
    if window is WindowSelector.ALL:
        return True
    if date is None:
        return False

    local = _in_zone_of(date, now)
    if window is WindowSelector.YEAR:
        return local.year == now.year
    if window is WindowSelector.MONTH:
        return (local.year, local.month) == (now.year, now.month)
    return local.date() == now.date()


def filter_by_window(
    records: Sequence[OpportunityRecord],
    window: WindowSelector,
    now: datetime,
) -> list[OpportunityRecord]:
    """Filter records to the window; input order is preserved."""
    if window is WindowSelector.ALL:
        return list(records)
    return [r for r in records if matches_window(r.date, window, now)]
