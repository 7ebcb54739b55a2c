"""Date labels and view models."""

from market_scout.presentation.dates import format_date
from market_scout.presentation.views import ViewModel, loading_view, render, render_text

__all__ = ["ViewModel", "format_date", "loading_view", "render", "render_text"]
