"""Unit tests for the time-window filter."""

from datetime import datetime, timedelta, timezone

import pytest

from market_scout.filtering.window import WindowSelector, filter_by_window, matches_window
from market_scout.models.opportunity import OpportunityRecord
from market_scout.retrieval.parsers import parse_timestamp


def _rec(title: str, date: str | None = None) -> OpportunityRecord:
    return OpportunityRecord(title=title, date=parse_timestamp(date), raw_date=date)


@pytest.fixture
def records() -> list[OpportunityRecord]:
    return [
        _rec("today-early", "2024-06-15T02:00:00Z"),
        _rec("undated"),
        _rec("yesterday-late", "2024-06-14T23:00:00Z"),
        _rec("earlier-this-month", "2024-06-01T08:00:00Z"),
        _rec("garbled", "sometime in june"),
        _rec("earlier-this-year", "2024-02-10T12:00:00Z"),
        _rec("last-year", "2023-06-15T09:00:00Z"),
    ]


def _titles(records: list[OpportunityRecord]) -> list[str]:
    return [r.title for r in records]


class TestFilterByWindow:
    """Tests for filter_by_window."""

    def test_all_is_identity(self, records, now) -> None:
        """ALL returns every record, undated ones included, in order."""
        assert filter_by_window(records, WindowSelector.ALL, now) == records

    def test_all_returns_new_list(self, records, now) -> None:
        """ALL returns a copy, not the input list."""
        result = filter_by_window(records, WindowSelector.ALL, now)
        assert result is not records

    def test_day_scenario(self, now) -> None:
        """Only the record on now's calendar date survives."""
        records = [
            _rec("a", "2024-06-15T02:00:00Z"),
            _rec("b", "2024-06-14T23:00:00Z"),
        ]
        assert _titles(filter_by_window(records, WindowSelector.DAY, now)) == ["a"]

    def test_month(self, records, now) -> None:
        """MONTH keeps records from now's year and month."""
        assert _titles(filter_by_window(records, WindowSelector.MONTH, now)) == [
            "today-early",
            "yesterday-late",
            "earlier-this-month",
        ]

    def test_year(self, records, now) -> None:
        """YEAR keeps records from now's year."""
        assert _titles(filter_by_window(records, WindowSelector.YEAR, now)) == [
            "today-early",
            "yesterday-late",
            "earlier-this-month",
            "earlier-this-year",
        ]

    @pytest.mark.parametrize("window", [WindowSelector.DAY, WindowSelector.MONTH, WindowSelector.YEAR])
    def test_undated_and_unparsable_excluded(self, records, now, window) -> None:
        """Undated records only survive under ALL."""
        titles = _titles(filter_by_window(records, window, now))
        assert "undated" not in titles
        assert "garbled" not in titles

    @pytest.mark.parametrize("window", list(WindowSelector))
    def test_order_preserved(self, records, now, window) -> None:
        """Filtering never reorders records."""
        result = filter_by_window(records, window, now)
        positions = [records.index(r) for r in result]
        assert positions == sorted(positions)

    def test_empty_input(self, now) -> None:
        """Empty input yields empty output."""
        assert filter_by_window([], WindowSelector.DAY, now) == []

    @pytest.mark.parametrize("window", [WindowSelector.DAY, WindowSelector.MONTH, WindowSelector.YEAR])
    def test_out_of_range_date_excluded(self, now, window) -> None:
        """Records dated at the edge of the datetime range are treated as undated."""
        records = [_rec("edge", "0001-01-01T00:00:00+01:00"), _rec("a", "2024-06-15T02:00:00Z")]
        assert _titles(filter_by_window(records, window, now)) == ["a"]
        assert len(filter_by_window(records, WindowSelector.ALL, now)) == 2


class TestMatchesWindowTimezones:
    """Calendar comparisons use now's timezone."""

    def test_day_in_now_zone(self) -> None:
        """03:00Z on the 15th is still the 14th at UTC-5."""
        est = timezone(timedelta(hours=-5))
        now = datetime(2024, 6, 15, 1, 0, tzinfo=est)
        date = datetime(2024, 6, 15, 3, 0, tzinfo=timezone.utc)
        assert not matches_window(date, WindowSelector.DAY, now)
        assert matches_window(date, WindowSelector.MONTH, now)

    def test_year_boundary(self) -> None:
        """Year is taken from now's calendar, not UTC."""
        tz = timezone(timedelta(hours=9))
        now = datetime(2025, 1, 1, 8, 0, tzinfo=tz)
        date = datetime(2024, 12, 31, 23, 30, tzinfo=timezone.utc)
        assert matches_window(date, WindowSelector.YEAR, now)

    def test_naive_values_are_utc(self) -> None:
        """Naive record and now values compare as UTC."""
        now = datetime(2024, 6, 15, 10, 0)
        assert matches_window(datetime(2024, 6, 15, 0, 0), WindowSelector.DAY, now)


class TestWindowSelector:
    """Tests for WindowSelector labels and parsing."""

    def test_labels(self) -> None:
        """Display labels used by summaries and empty states."""
        assert WindowSelector.ALL.label == "All Time"
        assert WindowSelector.DAY.label == "Today"
        assert WindowSelector.MONTH.label == "This Month"
        assert WindowSelector.YEAR.label == "This Year"

    def test_button_labels(self) -> None:
        """Button labels for the window controls."""
        assert [w.button_label for w in WindowSelector] == ["All", "Today", "This Month", "This Year"]

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("all", WindowSelector.ALL),
            ("Today", WindowSelector.DAY),
            ("DAY", WindowSelector.DAY),
            (" month ", WindowSelector.MONTH),
            ("year", WindowSelector.YEAR),
        ],
    )
    def test_parse(self, value, expected) -> None:
        """parse accepts values, 'today' and mixed case."""
        assert WindowSelector.parse(value) is expected

    def test_parse_unknown(self) -> None:
        """parse rejects unknown windows."""
        with pytest.raises(ValueError, match="Unknown window: week"):
            WindowSelector.parse("week")
