"""Registry of selectable categories."""

from pathlib import Path
from typing import Iterable, Optional

import yaml
from pydantic import ValidationError

from market_scout.categories.catalog import DEFAULT_CATEGORIES
from market_scout.models.category import Category


class CategoryConfigError(ValueError):
    """Authored catalog is invalid (duplicate or malformed entries)."""


class UnknownCategoryError(KeyError):
    """Lookup of a category name that is not registered."""


class CategoryRegistry:
    """Static, ordered catalog of categories. No mutation after construction."""

    def __init__(self, categories: Optional[Iterable[Category]] = None):
        entries = tuple(DEFAULT_CATEGORIES if categories is None else categories)
        if not entries:
            raise CategoryConfigError("Category catalog is empty")

        by_name: dict[str, Category] = {}
        for category in entries:
            if category.name in by_name:
                raise CategoryConfigError(f"Duplicate category name: {category.name}")
            by_name[category.name] = category

        self._categories = entries
        self._by_name = by_name

    def find(self, name: str) -> Optional[Category]:
        """Exact-name lookup; None if absent."""
        return self._by_name.get(name)

    def get(self, name: str) -> Category:
        """Like find, but raises UnknownCategoryError when absent."""
        category = self.find(name)
        if category is None:
            raise UnknownCategoryError(
                f"Unknown category: {name}. Available: {self.names()}"
            )
        return category

    def default(self) -> Category:
        """First catalog entry; the initial selection."""
        return self._categories[0]

    def names(self) -> list[str]:
        return [c.name for c in self._categories]

    def __len__(self) -> int:
        return len(self._categories)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    @classmethod
    def from_yaml(cls, path: str | Path) -> "CategoryRegistry":
        """
        Load an authored catalog. Accepts a top-level list or a mapping with a
        `categories` list; each entry is a name string or a mapping with
        name / reference_url / variant.
        """
        data = yaml.safe_load(Path(path).read_text()) or []
        if isinstance(data, dict):
            data = data.get("categories") or []
        if not isinstance(data, list):
            raise CategoryConfigError(f"Expected a list of categories in {path}")

        categories: list[Category] = []
        for entry in data:
            if isinstance(entry, str):
                entry = {"name": entry}
            try:
                categories.append(Category.model_validate(entry))
            except ValidationError as e:
                raise CategoryConfigError(f"Invalid category entry {entry!r}: {e}") from e
        return cls(categories)

    # Defined last: the name shadows the builtin inside the class body.
    def list(self) -> list[Category]:
        """Return the catalog in display order."""
        return [c for c in self._categories]
