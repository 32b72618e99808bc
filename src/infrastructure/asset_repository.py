"""SQLAlchemy-backed repositories for asset categories, sources and assets."""

from collections.abc import Mapping
from dataclasses import asdict
from typing import Any

from sqlalchemy import Select, select

from src.application.ports.asset_repository import (
    AssetCategoryRepositoryPort,
    AssetRepositoryPort,
    AssetSourceRepositoryPort,
)
from src.domain.models import (
    Asset,
    AssetCategory,
    AssetCategoryInput,
    AssetInput,
    AssetSource,
    AssetSourceInput,
)
from src.infrastructure.record_repository import (
    SqlAlchemyRecordRepository,
    prefixed_columns,
    unprefix,
)
from src.infrastructure.repository_utils import blank_to_none
from src.infrastructure.schema import asset_categories, asset_sources, assets
from src.utils.date_utils import coerce_datetime
from src.utils.decimal_utils import coerce_decimal


def category_from_row(row: Mapping[str, Any]) -> AssetCategory:
    return AssetCategory(
        id=row["id"],
        name=row["name"],
        type=row["type"],
        display_order=row["display_order"] or 0,
        icon=row["icon"],
        created_at=coerce_datetime(row["created_at"]),
        updated_at=coerce_datetime(row["updated_at"]),
    )


def source_from_row(
    row: Mapping[str, Any],
    category: AssetCategory | None = None,
) -> AssetSource:
    return AssetSource(
        id=row["id"],
        name=row["name"],
        category_id=row["category_id"],
        description=row["description"],
        created_at=coerce_datetime(row["created_at"]),
        updated_at=coerce_datetime(row["updated_at"]),
        category=category,
    )


class SqlAlchemyAssetCategoryRepository(
    SqlAlchemyRecordRepository[AssetCategory, AssetCategoryInput],
    AssetCategoryRepositoryPort,
):
    """Asset categories ordered by display order, then name."""

    table = asset_categories
    plural_label = "categories"
    singular_label = "category"

    def _order_by(self) -> list[Any]:
        return [asset_categories.c.display_order, asset_categories.c.name]

    def _values(self, data: AssetCategoryInput) -> dict[str, Any]:
        values = asdict(data)
        values["icon"] = blank_to_none(data.icon)
        return values

    def _to_record(self, row: Mapping[str, Any]) -> AssetCategory:
        return category_from_row(row)


class SqlAlchemyAssetSourceRepository(
    SqlAlchemyRecordRepository[AssetSource, AssetSourceInput],
    AssetSourceRepositoryPort,
):
    """Asset sources joined with their category."""

    table = asset_sources
    plural_label = "sources"
    singular_label = "source"

    def fetch_all(self, category_id: str | None = None) -> list[AssetSource]:
        """Return sources, restricted to one category when given.

        Args:
            category_id: Optional equality filter on ``category_id``.

        Returns:
            list[AssetSource]: Sources ordered by name.
        """
        conditions = []
        if category_id:
            conditions.append(asset_sources.c.category_id == category_id)
        return self._fetch_where(conditions)

    def _select(self) -> Select:
        return select(
            asset_sources,
            *prefixed_columns(asset_categories, "category"),
        ).select_from(
            asset_sources.outerjoin(
                asset_categories,
                asset_categories.c.id == asset_sources.c.category_id,
            )
        )

    def _order_by(self) -> list[Any]:
        return [asset_sources.c.name, asset_sources.c.id]

    def _values(self, data: AssetSourceInput) -> dict[str, Any]:
        values = asdict(data)
        values["description"] = blank_to_none(data.description)
        return values

    def _to_record(self, row: Mapping[str, Any]) -> AssetSource:
        category_row = unprefix(row, "category")
        category = (
            category_from_row(category_row) if category_row else None
        )
        return source_from_row(row, category=category)


class SqlAlchemyAssetRepository(
    SqlAlchemyRecordRepository[Asset, AssetInput],
    AssetRepositoryPort,
):
    """Assets joined with category and source, newest first."""

    table = assets
    plural_label = "assets"
    singular_label = "asset"

    def _select(self) -> Select:
        return select(
            assets,
            *prefixed_columns(asset_categories, "category"),
            *prefixed_columns(asset_sources, "source"),
        ).select_from(
            assets.outerjoin(
                asset_categories,
                asset_categories.c.id == assets.c.category_id,
            ).outerjoin(
                asset_sources,
                asset_sources.c.id == assets.c.source_id,
            )
        )

    def _order_by(self) -> list[Any]:
        return [assets.c.created_at.desc(), assets.c.name]

    def _values(self, data: AssetInput) -> dict[str, Any]:
        values = asdict(data)
        values["currency"] = data.currency.strip().upper()
        values["notes"] = blank_to_none(data.notes)
        return values

    def _to_record(self, row: Mapping[str, Any]) -> Asset:
        category_row = unprefix(row, "category")
        source_row = unprefix(row, "source")
        return Asset(
            id=row["id"],
            name=row["name"],
            category_id=row["category_id"],
            source_id=row["source_id"],
            current_value=coerce_decimal(row["current_value"]),
            currency=row["currency"],
            notes=row["notes"],
            created_at=coerce_datetime(row["created_at"]),
            updated_at=coerce_datetime(row["updated_at"]),
            category=(
                category_from_row(category_row) if category_row else None
            ),
            source=source_from_row(source_row) if source_row else None,
        )


__all__ = [
    "SqlAlchemyAssetCategoryRepository",
    "SqlAlchemyAssetSourceRepository",
    "SqlAlchemyAssetRepository",
    "category_from_row",
    "source_from_row",
]
