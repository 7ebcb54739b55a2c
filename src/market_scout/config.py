"""Runtime settings read from the environment."""

import os
from dataclasses import dataclass
from datetime import timezone, tzinfo
from pathlib import Path
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

DEFAULT_BASE_URL = "http://localhost:8000"
DEFAULT_TIMEOUT = 30.0


@dataclass(frozen=True)
class Settings:
    """
    Environment-dependent settings.
    MARKET_SCOUT_BASE_URL   provider base URL
    MARKET_SCOUT_TIMEOUT    transport timeout, seconds
    MARKET_SCOUT_TIMEZONE   IANA zone for calendar windows (default UTC)
    MARKET_SCOUT_CATEGORIES optional YAML category catalog
    """

    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    timezone_name: Optional[str] = None
    categories_path: Optional[Path] = None

    @classmethod
    def from_env(cls) -> "Settings":
        base_url = (os.environ.get("MARKET_SCOUT_BASE_URL") or "").strip() or DEFAULT_BASE_URL

        timeout_raw = os.environ.get("MARKET_SCOUT_TIMEOUT")
        try:
            timeout = float(timeout_raw) if timeout_raw else DEFAULT_TIMEOUT
        except ValueError:
            raise ValueError(f"Invalid MARKET_SCOUT_TIMEOUT: {timeout_raw!r}") from None

        categories = os.environ.get("MARKET_SCOUT_CATEGORIES")
        return cls(
            base_url=base_url.rstrip("/"),
            timeout=timeout,
            timezone_name=(os.environ.get("MARKET_SCOUT_TIMEZONE") or "").strip() or None,
            categories_path=Path(categories) if categories else None,
        )

    def tz(self) -> tzinfo:
        """Zone used as the evaluation clock for time windows."""
        if not self.timezone_name or self.timezone_name.upper() == "UTC":
            return timezone.utc
        try:
            return ZoneInfo(self.timezone_name)
        except ZoneInfoNotFoundError:
            raise ValueError(f"Unknown timezone: {self.timezone_name}") from None
