"""Session state container and its async orchestrator."""

from market_scout.session.controller import DashboardSession
from market_scout.session.state import (
    CategorySelected,
    FetchFailed,
    FetchStarted,
    FetchSucceeded,
    SessionState,
    WindowSelected,
    initial_state,
    reduce,
)

__all__ = [
    "CategorySelected",
    "DashboardSession",
    "FetchFailed",
    "FetchStarted",
    "FetchSucceeded",
    "SessionState",
    "WindowSelected",
    "initial_state",
    "reduce",
]
