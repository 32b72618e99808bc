"""Domain policies package."""

from .asset_sources import (
    filter_sources_for_category,
    source_matches_category,
)

__all__ = ["filter_sources_for_category", "source_matches_category"]
