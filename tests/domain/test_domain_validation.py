"""Tests for domain validation helpers and asset source policies."""

from decimal import Decimal
from unittest.mock import MagicMock

from src.domain.models import Asset, AssetCategory, AssetSource
from src.domain.policies import (
    filter_sources_for_category,
    source_matches_category,
)
from src.domain.services.validation import (
    find_mixed_currencies,
    is_positive_amount,
    validate_asset_value_sign,
)


def _asset(value, currency="SGD", category=None):
    return Asset(
        id="a",
        name="Loan",
        category_id="c",
        source_id="s",
        current_value=Decimal(value),
        currency=currency,
        category=category,
    )


def test_validate_asset_value_sign_warns_for_negative_liability():
    logger = MagicMock()
    loans = AssetCategory(id="c", name="Loans", type="liability")

    validate_asset_value_sign(_asset("-10", category=loans), logger)
    validate_asset_value_sign(_asset("10", category=loans), logger)

    logger.warning.assert_called_once()
    assert "Liability" in logger.warning.call_args.args[0]


def test_find_mixed_currencies():
    assert find_mixed_currencies([_asset("1"), _asset("2")]) == []
    assert find_mixed_currencies(
        [_asset("1", "USD"), _asset("2", "SGD"), _asset("3", "USD")]
    ) == ["SGD", "USD"]


def test_is_positive_amount():
    assert is_positive_amount(Decimal("0.01"))
    assert not is_positive_amount(Decimal("0"))
    assert not is_positive_amount(None)


def test_sources_are_filtered_by_category():
    dbs = AssetSource(id="s1", name="DBS", category_id="cash")
    ibkr = AssetSource(id="s2", name="IBKR", category_id="stocks")

    assert filter_sources_for_category([dbs, ibkr], "cash") == [dbs]
    assert filter_sources_for_category([dbs, ibkr], None) == [dbs, ibkr]
    assert source_matches_category(ibkr, "stocks")
    assert not source_matches_category(ibkr, "cash")
    assert not source_matches_category(None, "cash")
