"""Use case to compute the net worth breakdown by category and source."""

from src.application.ports.asset_repository import AssetRepositoryPort
from src.domain.models import NetWorthBreakdown
from src.domain.services.finance import compute_net_worth_breakdown
from src.domain.services.validation import find_mixed_currencies
from src.infrastructure.logging.logger import get_app_logger


class GetNetWorthBreakdownUseCase:
    """Aggregate every asset into category and source buckets."""

    def __init__(
        self,
        asset_repository: AssetRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            asset_repository: Port providing assets joined with category and
                source.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._asset_repository = asset_repository
        self._logger = logger or get_app_logger()

    def execute(self) -> NetWorthBreakdown:
        """Return the breakdown of the current asset values.

        Returns:
            NetWorthBreakdown: Category and source buckets with totals.
        """
        assets = self._asset_repository.fetch_all()
        currencies = find_mixed_currencies(assets)
        if currencies:
            self._logger.warning(
                "Summing asset values without conversion across currencies: "
                f"{', '.join(currencies)}"
            )
        breakdown = compute_net_worth_breakdown(assets, logger=self._logger)
        self._logger.info(
            f"Net worth computed: assets={breakdown.total_assets}, "
            f"liabilities={breakdown.total_liabilities}"
        )
        return breakdown


__all__ = ["GetNetWorthBreakdownUseCase"]
