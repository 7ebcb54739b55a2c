"""Pytest fixtures for market-scout tests."""

from datetime import datetime, timezone
from typing import Callable

import httpx
import pytest

from market_scout.retrieval.client import RetrievalClient

BASE_URL = "http://provider.test"


@pytest.fixture
def now() -> datetime:
    """Fixed evaluation instant."""
    return datetime(2024, 6, 15, 10, 0, tzinfo=timezone.utc)


@pytest.fixture
def sample_news_payload() -> list[dict]:
    """Standard provider items for a product category."""
    return [
        {
            "id": 101,
            "title": "EPA finalizes PFAS drinking water limits",
            "summary": "New national limits for six PFAS compounds.",
            "source": "EPA",
            "date": "2024-06-15T02:00:00Z",
            "link": "https://example.com/epa-pfas",
        },
        {
            "id": "102",
            "title": "Utilities expand GAC capacity",
            "description": "Granular activated carbon demand rises.",
            "source": "Water World",
            "pub_date": "2024-06-14T23:00:00Z",
            "link": "https://example.com/gac",
        },
        {
            "title": "Undated market note",
            "summary": "No publication date on this one.",
            "source": "Newsletter",
            "link": "https://example.com/note",
        },
    ]


@pytest.fixture
def sample_profile_payload() -> dict:
    """Single company object returned for profile categories."""
    return {
        "company_name": "Haycarb PLC",
        "founded": "1973",
        "product_range": ["Activated carbon", "Water purification systems"],
        "website": "https://www.haycarb.com",
        "address": "400 Deans Road, Colombo 10, Sri Lanka",
    }


@pytest.fixture
def make_client() -> Callable[..., RetrievalClient]:
    """Build a RetrievalClient whose transport is the given handler."""

    def _make(handler: Callable[[httpx.Request], httpx.Response]) -> RetrievalClient:
        transport = httpx.MockTransport(handler)
        return RetrievalClient(BASE_URL, client=httpx.AsyncClient(transport=transport))

    return _make
