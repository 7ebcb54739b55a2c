"""Temporal window filtering of opportunity records."""

from market_scout.filtering.window import WindowSelector, filter_by_window, matches_window

__all__ = ["WindowSelector", "filter_by_window", "matches_window"]
