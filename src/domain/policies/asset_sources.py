"""Rules tying asset sources to their category."""

from collections.abc import Iterable

from src.domain.models.records import AssetSource


def filter_sources_for_category(
    sources: Iterable[AssetSource],
    category_id: str | None,
) -> list[AssetSource]:
    """Return the sources selectable for a category.

    Args:
        sources: All known sources.
        category_id: Selected category, or None when nothing is selected.

    Returns:
        list[AssetSource]: Every source when no category is selected,
        otherwise only the sources of that category.
    """
    if not category_id:
        return list(sources)
    return [source for source in sources if source.category_id == category_id]


def source_matches_category(
    source: AssetSource | None,
    category_id: str,
) -> bool:
    return source is not None and source.category_id == category_id


__all__ = ["filter_sources_for_category", "source_matches_category"]
