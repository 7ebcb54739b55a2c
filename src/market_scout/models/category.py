"""Category model: a selectable product/topic and its rendering variant."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class RenderVariant(str, Enum):
    """Layout strategy used to render a category's records."""

    DEFAULT = "default"
    LINK_LIST = "link-list"
    PROFILE = "profile"

    @property
    def has_window_controls(self) -> bool:
        """Time filtering only applies to the card grid."""
        return self is RenderVariant.DEFAULT


class Category(BaseModel):
    """Selectable product category. Immutable once defined."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Unique within the registry")
    reference_url: Optional[str] = None
    variant: RenderVariant = RenderVariant.DEFAULT
