"""Use case seeding the default asset categories into an empty database."""

from src.application.ports.asset_repository import AssetCategoryRepositoryPort
from src.domain.constants import DEFAULT_ASSET_CATEGORIES
from src.domain.models import AssetCategoryInput
from src.infrastructure.logging.logger import get_app_logger


class SeedAssetCategoriesUseCase:
    """Create the default asset categories when none exist."""

    def __init__(
        self,
        category_repository: AssetCategoryRepositoryPort,
        logger=None,
    ) -> None:
        self._category_repository = category_repository
        self._logger = logger or get_app_logger()

    def execute(self) -> int:
        """Insert the defaults into an empty table.

        Returns:
            int: Number of categories created, 0 when some already existed.
        """
        existing = self._category_repository.fetch_all()
        if existing:
            self._logger.info(
                f"Skipping seed: {len(existing)} asset categories exist"
            )
            return 0
        for name, category_type, display_order in DEFAULT_ASSET_CATEGORIES:
            self._category_repository.create(
                AssetCategoryInput(
                    name=name,
                    type=category_type,
                    display_order=display_order,
                )
            )
        self._logger.info(
            f"Seeded {len(DEFAULT_ASSET_CATEGORIES)} asset categories"
        )
        return len(DEFAULT_ASSET_CATEGORIES)


__all__ = ["SeedAssetCategoriesUseCase"]
