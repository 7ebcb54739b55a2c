"""Provider client: category-parameterized fetch with response normalization.

The provider exposes a single endpoint:

    GET {base_url}/opportunities?product={category}

The body is JSON, either an array of opportunity objects or, for profile
categories, one bare object. Every failure mode (transport, status, decode)
is absorbed here and reported as an empty result carrying a RetrievalError.
"""

import asyncio
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

import httpx

from market_scout.config import Settings
from market_scout.models.opportunity import OpportunityRecord

from .parsers import MalformedPayloadError, normalize_payload

logger = logging.getLogger(__name__)


class RetrievalErrorKind(str, Enum):
    NETWORK = "network"
    STATUS = "status"
    DECODE = "decode"


class RetrievalError(Exception):
    """Fetch failed; callers treat it as zero results."""

    def __init__(self, kind: RetrievalErrorKind, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message

    def __str__(self) -> str:
        return f"{self.kind.value}: {self.message}"


@dataclass
class RetrievalResult:
    """Outcome of one fetch. On failure records is always empty."""

    category: str
    records: list[OpportunityRecord] = field(default_factory=list)
    error: Optional[RetrievalError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class RetrievalClient:
    """
    Async client for the opportunities endpoint.
    No caching: each call re-reads the provider.
    """

    OPPORTUNITIES_PATH = "/opportunities"

    DEFAULT_HEADERS = {
        "User-Agent": "market-scout/0.1",
        "Accept": "application/json",
    }

    def __init__(
        self,
        base_url: Optional[str] = None,
        *,
        client: Optional[httpx.AsyncClient] = None,
        timeout: Optional[float] = None,
    ):
        """
        Args:
            base_url: Provider base URL (default: MARKET_SCOUT_BASE_URL or localhost:8000)
            client: Optional httpx async client (tests inject a MockTransport)
            timeout: Transport timeout in seconds
        """
        needs_env = not base_url or (client is None and timeout is None)
        settings = Settings.from_env() if needs_env else None
        self.base_url = (base_url or settings.base_url).rstrip("/")
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            timeout=timeout if timeout is not None else settings.timeout,
            follow_redirects=True,
            headers=self.DEFAULT_HEADERS,
        )

    @property
    def endpoint(self) -> str:
        return self.base_url + self.OPPORTUNITIES_PATH

    async def __aenter__(self) -> "RetrievalClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying client if this instance created it."""
        if self._owns_client:
            await self._client.aclose()

    async def _get_json(self, category: str):
        """GET the endpoint and decode the body. Raises RetrievalError."""
        # httpx URL-escapes query params; the name is sent verbatim otherwise
        params = {"product": category}
        logger.debug("GET %s product=%r", self.endpoint, category)
        try:
            resp = await self._client.get(self.endpoint, params=params)
            resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise RetrievalError(
                RetrievalErrorKind.STATUS, f"HTTP {e.response.status_code}"
            ) from e
        except httpx.RequestError as e:
            raise RetrievalError(RetrievalErrorKind.NETWORK, str(e) or type(e).__name__) from e

        try:
            return resp.json()
        except ValueError as e:
            raise RetrievalError(RetrievalErrorKind.DECODE, f"Invalid JSON body: {e}") from e

    async def fetch_opportunities(self, category: str) -> RetrievalResult:
        """
        Fetch and normalize records for a category.
        Never raises for provider failures; see RetrievalResult.error.
        """
        try:
            payload = await self._get_json(category)
            records = normalize_payload(payload)
        except MalformedPayloadError as e:
            error = RetrievalError(RetrievalErrorKind.DECODE, str(e))
            logger.warning("Fetch failed for %s: %s", category, error)
            return RetrievalResult(category=category, error=error)
        except RetrievalError as e:
            logger.warning("Fetch failed for %s: %s", category, e)
            return RetrievalResult(category=category, error=e)

        logger.debug("Fetched %d records for %s", len(records), category)
        return RetrievalResult(category=category, records=records)

    def fetch_opportunities_sync(self, category: str) -> RetrievalResult:
        """Blocking wrapper for scripts; closes an owned client afterwards."""

        async def _run() -> RetrievalResult:
            try:
                return await self.fetch_opportunities(category)
            finally:
                await self.aclose()

        return asyncio.run(_run())
