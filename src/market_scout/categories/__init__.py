"""Category catalog and registry."""

from market_scout.categories.registry import (
    CategoryConfigError,
    CategoryRegistry,
    UnknownCategoryError,
)

__all__ = ["CategoryConfigError", "CategoryRegistry", "UnknownCategoryError"]
