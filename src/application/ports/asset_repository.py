"""Ports for asset categories, asset sources and assets."""

from typing import Protocol

from src.application.ports.record_repository import RecordRepositoryPort
from src.domain.models import (
    Asset,
    AssetCategory,
    AssetCategoryInput,
    AssetInput,
    AssetSource,
    AssetSourceInput,
)


class AssetCategoryRepositoryPort(
    RecordRepositoryPort[AssetCategory, AssetCategoryInput],
    Protocol,
):
    """Asset categories ordered by display order."""


class AssetSourceRepositoryPort(
    RecordRepositoryPort[AssetSource, AssetSourceInput],
    Protocol,
):
    """Asset sources joined with their category, ordered by name."""

    def fetch_all(self, category_id: str | None = None) -> list[AssetSource]:
        """Return sources, restricted to one category when given."""


class AssetRepositoryPort(RecordRepositoryPort[Asset, AssetInput], Protocol):
    """Assets joined with category and source, newest first."""


__all__ = [
    "AssetCategoryRepositoryPort",
    "AssetSourceRepositoryPort",
    "AssetRepositoryPort",
]
