"""Unit tests for CategoryRegistry."""

from pathlib import Path

import pytest

from market_scout.categories.registry import (
    CategoryConfigError,
    CategoryRegistry,
    UnknownCategoryError,
)
from market_scout.models.category import Category, RenderVariant


class TestCategoryRegistry:
    """Tests for the built-in catalog."""

    def test_default_is_pfas(self) -> None:
        """The first catalog entry is the initial selection."""
        registry = CategoryRegistry()
        assert registry.default().name == "PFAS"
        assert registry.list()[0].name == "PFAS"

    def test_list_preserves_display_order(self) -> None:
        """Catalog order is the selector's display order."""
        names = CategoryRegistry().names()
        assert names.index("Soil Remediation") < names.index("Nuclear Applications")
        assert names[:3] == ["PFAS", "Soil Remediation", "Mining"]

    def test_list_returns_copy(self) -> None:
        """Mutating the returned list does not change the registry."""
        registry = CategoryRegistry()
        listed = registry.list()
        listed.clear()
        assert len(registry) > 0

    def test_find_known_and_unknown(self) -> None:
        """find is exact and case-sensitive; misses return None."""
        registry = CategoryRegistry()
        assert registry.find("Mining") == Category(name="Mining")
        assert registry.find("mining") is None
        assert registry.find("Quantum Widgets") is None

    def test_get_unknown_raises(self) -> None:
        """get raises UnknownCategoryError naming the missing category."""
        with pytest.raises(UnknownCategoryError, match="Quantum Widgets"):
            CategoryRegistry().get("Quantum Widgets")

    def test_variants_on_catalog(self) -> None:
        """Profile and link-list categories carry their variant tag."""
        registry = CategoryRegistry()
        assert registry.get("Company Profile").variant == RenderVariant.PROFILE
        assert registry.get("Company Profile").reference_url
        assert registry.get("Industry Headlines").variant == RenderVariant.LINK_LIST
        assert registry.get("Drinking Water").variant == RenderVariant.DEFAULT

    def test_duplicate_names_rejected(self) -> None:
        """Duplicate names are a configuration error."""
        with pytest.raises(CategoryConfigError, match="Duplicate category name: PFAS"):
            CategoryRegistry([Category(name="PFAS"), Category(name="PFAS")])

    def test_empty_catalog_rejected(self) -> None:
        """An empty catalog is rejected."""
        with pytest.raises(CategoryConfigError):
            CategoryRegistry([])

    def test_contains(self) -> None:
        """Membership test uses exact names."""
        registry = CategoryRegistry()
        assert "PFAS" in registry
        assert "pfas" not in registry


class TestCategoryRegistryFromYaml:
    """Tests for loading an authored catalog."""

    def test_loads_list_of_entries(self, tmp_path: Path) -> None:
        """YAML list accepts plain names and full mappings."""
        path = tmp_path / "categories.yaml"
        path.write_text(
            "- PFAS\n"
            "- name: Headlines\n"
            "  variant: link-list\n"
            "- name: Profile\n"
            "  variant: profile\n"
            "  reference_url: https://example.com\n"
        )
        registry = CategoryRegistry.from_yaml(path)
        assert registry.names() == ["PFAS", "Headlines", "Profile"]
        assert registry.get("Headlines").variant == RenderVariant.LINK_LIST
        assert registry.get("Profile").reference_url == "https://example.com"

    def test_loads_nested_mapping(self, tmp_path: Path) -> None:
        """YAML may nest the list under a categories key."""
        path = tmp_path / "categories.yaml"
        path.write_text("categories:\n  - Mining\n  - Gold Recovery\n")
        assert CategoryRegistry.from_yaml(path).names() == ["Mining", "Gold Recovery"]

    def test_invalid_variant_rejected(self, tmp_path: Path) -> None:
        """Unknown variant tags fail validation."""
        path = tmp_path / "categories.yaml"
        path.write_text("- name: X\n  variant: carousel\n")
        with pytest.raises(CategoryConfigError, match="Invalid category entry"):
            CategoryRegistry.from_yaml(path)

    def test_duplicates_in_yaml_rejected(self, tmp_path: Path) -> None:
        """Duplicate names in YAML raise CategoryConfigError."""
        path = tmp_path / "categories.yaml"
        path.write_text("- Mining\n- Mining\n")
        with pytest.raises(CategoryConfigError):
            CategoryRegistry.from_yaml(path)
