"""CLI adapter to create the finance schema and seed default categories.

This module wires the schema creation and the seeding use case to the
concrete database adapter. Running it twice is harmless: existing tables
and categories are left untouched.
"""

from src.application.use_cases.seed_asset_categories import (
    SeedAssetCategoriesUseCase,
)
from src.infrastructure.container import (
    build_asset_category_repository,
    build_database_adapter,
)
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.schema import create_schema


def main() -> None:
    """Create missing tables and seed the default asset categories."""
    logger = get_app_logger()
    db_adapter = build_database_adapter()
    engine = db_adapter.get_engine()

    create_schema(engine)
    logger.info(f"Schema ready on {engine.url}")

    use_case = SeedAssetCategoriesUseCase(
        build_asset_category_repository(db_adapter),
        logger=logger,
    )
    created = use_case.execute()

    print(f"Database initialized; {created} asset categories created.")


if __name__ == "__main__":  # pragma: no cover
    main()
