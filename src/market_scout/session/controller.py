"""Async orchestrator driving SessionState from user actions."""

import asyncio
import functools
import itertools
import logging
from datetime import datetime
from typing import Callable, Optional

from market_scout.categories.registry import CategoryRegistry
from market_scout.config import Settings
from market_scout.filtering.window import WindowSelector
from market_scout.presentation.views import ViewModel, loading_view, render
from market_scout.retrieval.client import RetrievalClient, RetrievalResult

from .state import (
    CategorySelected,
    FetchFailed,
    FetchStarted,
    FetchSucceeded,
    SessionEvent,
    SessionState,
    WindowSelected,
    initial_state,
    reduce,
)

logger = logging.getLogger(__name__)


class DashboardSession:
    """
    Holds the current SessionState and applies transitions for:
    category selection, window selection and manual refresh.
    Runs on a single event loop; the fetch is the only await point.
    """

    def __init__(
        self,
        client: RetrievalClient,
        registry: Optional[CategoryRegistry] = None,
        *,
        initial_category: Optional[str] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self._client = client
        self._registry = registry or CategoryRegistry()
        if clock is None:
            clock = functools.partial(datetime.now, Settings.from_env().tz())
        self._clock = clock

        category = (
            self._registry.get(initial_category)
            if initial_category
            else self._registry.default()
        )
        self._state = initial_state(category)
        self._tokens = itertools.count(1)
        self._inflight: Optional[asyncio.Task] = None

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def registry(self) -> CategoryRegistry:
        return self._registry

    @property
    def refresh_label(self) -> str:
        return "Refreshing..." if self._state.is_loading else "Refresh"

    def _dispatch(self, event: SessionEvent) -> SessionState:
        self._state = reduce(self._state, event, self._clock())
        return self._state

    def select_window(self, window: "WindowSelector | str") -> SessionState:
        """Recompute visible records for a new window (no fetch)."""
        return self._dispatch(WindowSelected(window=WindowSelector.parse(window)))

    async def select_category(self, name: str) -> SessionState:
        """Switch category and fetch its records. Raises UnknownCategoryError."""
        category = self._registry.get(name)
        self._dispatch(CategorySelected(category=category))
        return await self._fetch()

    async def refresh(self) -> SessionState:
        """Re-fetch the current category. Ignored while a fetch is in flight."""
        if self._state.is_loading:
            logger.debug("Refresh ignored: fetch already in flight")
            return self._state
        return await self._fetch()

    async def _fetch(self) -> SessionState:
        token = next(self._tokens)
        category = self._state.category_name
        self._dispatch(FetchStarted(token=token))

        previous = self._inflight
        if previous is not None and not previous.done():
            logger.debug("Cancelling superseded fetch for %s", category)
            previous.cancel()

        task = asyncio.ensure_future(self._client.fetch_opportunities(category))
        self._inflight = task
        try:
            result: RetrievalResult = await task
        except asyncio.CancelledError:
            if self._inflight is not task:
                logger.debug("Discarded superseded fetch %d", token)
                return self._state
            self._dispatch(FetchFailed(token=token, message="cancelled"))
            raise
        finally:
            if self._inflight is task:
                self._inflight = None

        if result.ok:
            try:
                return self._dispatch(FetchSucceeded(token=token, records=result.records))
            except Exception as e:
                # The token must still settle, or the session stays loading
                logger.warning("Could not apply records for %s: %s", category, e)
                return self._dispatch(FetchFailed(token=token, message=f"invalid records: {e}"))
        return self._dispatch(FetchFailed(token=token, message=str(result.error)))

    def view(self) -> ViewModel:
        """View model for the current state."""
        state = self._state
        if state.is_loading:
            return loading_view(state.category, state.window)
        return render(state.category, state.visible, state.window, self._clock())
