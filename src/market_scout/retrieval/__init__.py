"""Retrieval of opportunity records from the provider."""

from market_scout.retrieval.client import RetrievalClient, RetrievalError, RetrievalResult
from market_scout.retrieval.parsers import normalize_payload, parse_timestamp

__all__ = [
    "RetrievalClient",
    "RetrievalError",
    "RetrievalResult",
    "normalize_payload",
    "parse_timestamp",
]
