"""Stores for asset categories, sources and assets."""

from src.application.ports.asset_repository import (
    AssetCategoryRepositoryPort,
    AssetRepositoryPort,
    AssetSourceRepositoryPort,
)
from src.application.stores.base import RecordStore
from src.domain.models import (
    Asset,
    AssetCategory,
    AssetCategoryInput,
    AssetInput,
    AssetSource,
    AssetSourceInput,
)


class AssetCategoryStore(RecordStore[AssetCategory, AssetCategoryInput]):
    """Asset categories in display order."""

    record_label = "asset_categories"

    def __init__(
        self,
        repository: AssetCategoryRepositoryPort,
        logger=None,
    ) -> None:
        super().__init__(repository, logger=logger)


class AssetSourceStore(RecordStore[AssetSource, AssetSourceInput]):
    """Asset sources, optionally restricted to one category."""

    record_label = "asset_sources"

    def __init__(
        self,
        repository: AssetSourceRepositoryPort,
        logger=None,
        category_id: str | None = None,
    ) -> None:
        """Initialize the store.

        Args:
            repository: Port providing access to asset sources.
            logger: Optional logger compatible with logging.Logger-like API.
            category_id: Optional category filter applied on every fetch.
        """
        super().__init__(repository, logger=logger)
        self._source_repository = repository
        self._category_id = category_id

    @property
    def category_id(self) -> str | None:
        return self._category_id

    def set_category(self, category_id: str | None) -> list[AssetSource]:
        """Change the category filter and re-fetch."""
        self._category_id = category_id
        return self.refresh()

    def _fetch(self) -> list[AssetSource]:
        return self._source_repository.fetch_all(category_id=self._category_id)


class AssetStore(RecordStore[Asset, AssetInput]):
    """Assets joined with category and source, newest first."""

    record_label = "assets"

    def __init__(self, repository: AssetRepositoryPort, logger=None) -> None:
        super().__init__(repository, logger=logger)


__all__ = ["AssetCategoryStore", "AssetSourceStore", "AssetStore"]
