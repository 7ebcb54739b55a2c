"""Session state and its pure transition function.

    (state, event, now) -> state

Fetch settle events carry the request token they were issued with; a
settle event whose token is not the latest issued one is stale and leaves
the state untouched.
"""

from datetime import datetime
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from market_scout.filtering.window import WindowSelector, filter_by_window
from market_scout.models.category import Category
from market_scout.models.opportunity import OpportunityRecord


class SessionState(BaseModel):
    """Immutable snapshot of the dashboard session."""

    model_config = ConfigDict(frozen=True)

    category: Category
    window: WindowSelector = WindowSelector.ALL
    records: list[OpportunityRecord] = Field(default_factory=list)
    visible: list[OpportunityRecord] = Field(default_factory=list)
    is_loading: bool = False
    request_token: int = 0
    last_error: Optional[str] = None

    @property
    def category_name(self) -> str:
        return self.category.name


class CategorySelected(BaseModel):
    category: Category


class WindowSelected(BaseModel):
    window: WindowSelector


class FetchStarted(BaseModel):
    token: int


class FetchSucceeded(BaseModel):
    token: int
    records: list[OpportunityRecord] = Field(default_factory=list)


class FetchFailed(BaseModel):
    token: int
    message: str = ""


SessionEvent = Union[CategorySelected, WindowSelected, FetchStarted, FetchSucceeded, FetchFailed]


def initial_state(category: Category) -> SessionState:
    return SessionState(category=category)


def reduce(state: SessionState, event: SessionEvent, now: datetime) -> SessionState:
    """Apply one event. `now` is the instant time windows are evaluated against."""
    if isinstance(event, CategorySelected):
        window = state.window
        if not event.category.variant.has_window_controls:
            window = WindowSelector.ALL
        return state.model_copy(
            update={
                "category": event.category,
                "window": window,
                "records": [],
                "visible": [],
                "last_error": None,
            }
        )

    if isinstance(event, WindowSelected):
        if not state.category.variant.has_window_controls:
            return state
        return state.model_copy(
            update={
                "window": event.window,
                "visible": filter_by_window(state.records, event.window, now),
            }
        )

    if isinstance(event, FetchStarted):
        # Tokens only move forward
        if event.token <= state.request_token:
            return state
        return state.model_copy(
            update={"request_token": event.token, "is_loading": True, "last_error": None}
        )

    if isinstance(event, FetchSucceeded):
        if event.token != state.request_token:
            return state
        records = list(event.records)
        return state.model_copy(
            update={
                "records": records,
                "visible": filter_by_window(records, state.window, now),
                "is_loading": False,
            }
        )

    if isinstance(event, FetchFailed):
        if event.token != state.request_token:
            return state
        return state.model_copy(
            update={
                "records": [],
                "visible": [],
                "is_loading": False,
                "last_error": event.message or "fetch failed",
            }
        )

    raise TypeError(f"Unknown session event: {type(event).__name__}")
