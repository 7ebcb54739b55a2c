"""Raw provider record before normalization."""

from typing import Any

from pydantic import BaseModel, Field


class RawOpportunity(BaseModel):
    """
    One JSON object as returned by the provider.
    Field names vary by category (date vs pub_date, summary vs description).
    """

    data: dict[str, Any] = Field(default_factory=dict)

    def first(self, *keys: str) -> Any:
        """Return the first non-empty value among keys, or None."""
        for key in keys:
            value = self.data.get(key)
            if value is not None and value != "":
                return value
        return None
