"""Canonical opportunity record produced at the retrieval boundary."""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class RecordVariant(str, Enum):
    """Shape of the provider object a record was built from."""

    STANDARD = "standard"
    LINK_ONLY = "link_only"
    PROFILE = "profile"


class OpportunityRecord(BaseModel):
    """
    Uniform record for every provider shape.
    Standard items carry summary/source/date; link-only items carry just
    title and link; profile items carry the company fields.
    """

    id: Optional[str] = None
    kind: RecordVariant = RecordVariant.STANDARD

    title: str = "Untitled"
    summary: Optional[str] = None
    source: Optional[str] = None
    date: Optional[datetime] = Field(default=None, description="Parsed, timezone-aware")
    raw_date: Optional[str] = Field(default=None, description="Date string as sent by the provider")
    link: Optional[str] = None

    company_name: Optional[str] = None
    founded: Optional[str] = None
    product_range: list[str] = Field(default_factory=list)
    website: Optional[str] = None
    address: Optional[str] = None

    def key(self, index: int) -> str:
        """Stable list identity; positional fallback when the provider sent no id."""
        return self.id if self.id else f"#{index}"
