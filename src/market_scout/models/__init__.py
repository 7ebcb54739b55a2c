"""Data models for categories and normalized opportunity records."""

from market_scout.models.category import Category, RenderVariant
from market_scout.models.opportunity import OpportunityRecord, RecordVariant
from market_scout.models.raw import RawOpportunity

__all__ = ["Category", "OpportunityRecord", "RawOpportunity", "RecordVariant", "RenderVariant"]
