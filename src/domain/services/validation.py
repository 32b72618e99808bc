"""Domain validation helpers."""

from collections.abc import Iterable
from decimal import Decimal
from logging import Logger

from src.domain.models.records import Asset


def validate_asset_value_sign(asset: Asset, logger: Logger) -> None:
    """Warn when an asset value violates the sign convention.

    Liabilities are stored as positive amounts and subtracted from net
    worth, so every stored value is expected to be non-negative.

    Args:
        asset: Asset joined with its category.
        logger: Logger used for warnings.
    """
    if asset.current_value >= 0:
        return
    kind = (
        "Liability"
        if asset.category is not None and asset.category.is_liability
        else "Asset"
    )
    logger.warning(
        f"{kind} value is negative for asset={asset.name}: "
        f"{asset.current_value}"
    )


def find_mixed_currencies(assets: Iterable[Asset]) -> list[str]:
    """Return the sorted currency codes when more than one is in use.

    Values are summed without conversion, so callers warn the user when
    this list is not empty.
    """
    currencies = {asset.currency for asset in assets if asset.currency}
    if len(currencies) <= 1:
        return []
    return sorted(currencies)


def is_positive_amount(value: Decimal | None) -> bool:
    return value is not None and value > 0


__all__ = [
    "validate_asset_value_sign",
    "find_mixed_currencies",
    "is_positive_amount",
]
