"""Tests for the Streamlit form payload builders."""

from datetime import date
from decimal import Decimal

import pytest

from src.adapters.interface.streamlit import forms
from src.domain.errors import ValidationError
from src.domain.models import AssetSource


DBS = AssetSource(id="s1", name="DBS", category_id="cash")
IBKR = AssetSource(id="s2", name="IBKR", category_id="stocks")


def test_asset_category_requires_name_and_type():
    with pytest.raises(ValidationError, match="category name"):
        forms.build_asset_category_input("  ", "cash")
    with pytest.raises(ValidationError, match="type"):
        forms.build_asset_category_input("Cash", "crypto")
    with pytest.raises(ValidationError, match="whole number"):
        forms.build_asset_category_input("Cash", "cash", "first")

    payload = forms.build_asset_category_input(" Cash ", "cash", "", " ")

    assert payload.name == "Cash"
    assert payload.display_order == 0
    assert payload.icon is None


def test_asset_source_requires_name_and_category():
    with pytest.raises(ValidationError, match="required fields"):
        forms.build_asset_source_input("DBS", None)

    payload = forms.build_asset_source_input("DBS", "cash", " Bank ")

    assert payload.description == "Bank"


def test_asset_input_parses_value_and_defaults_currency():
    payload = forms.build_asset_input(
        "Savings",
        "cash",
        "s1",
        "12,500.75",
        [DBS, IBKR],
        currency="",
        default_currency="SGD",
    )

    assert payload.current_value == Decimal("12500.75")
    assert payload.currency == "SGD"
    assert payload.notes is None


@pytest.mark.parametrize(
    ("kwargs", "message"),
    [
        ({"name": ""}, "required fields"),
        ({"raw_value": " "}, "required fields"),
        ({"raw_value": "abc"}, "valid value"),
        ({"source_id": "s2"}, "does not belong"),
        ({"currency": "dollars"}, "three-letter"),
    ],
)
def test_asset_input_rejects_invalid_fields(kwargs, message):
    values = {
        "name": "Savings",
        "category_id": "cash",
        "source_id": "s1",
        "raw_value": "10",
        "sources": [DBS, IBKR],
        "currency": "SGD",
    }
    values.update(kwargs)

    with pytest.raises(ValidationError, match=message):
        forms.build_asset_input(**values)


def test_spending_category_validates_color_and_budget():
    with pytest.raises(ValidationError, match="valid color"):
        forms.build_spending_category_input("Food", "red")
    with pytest.raises(ValidationError, match="budget"):
        forms.build_spending_category_input("Food", "#EF4444", "-5")

    payload = forms.build_spending_category_input("Food", "#EF4444", "")
    budgeted = forms.build_spending_category_input("Food", None, "200")

    assert payload.color == "#ef4444"
    assert payload.budget_amount is None
    assert budgeted.color == "#3b82f6"
    assert budgeted.budget_amount == Decimal("200")


def test_transaction_requires_amount_and_defaults_date():
    with pytest.raises(ValidationError, match="enter an amount"):
        forms.build_transaction_input("")
    with pytest.raises(ValidationError, match="valid amount"):
        forms.build_transaction_input("1..2")

    payload = forms.build_transaction_input(
        "12.30",
        None,
        "",
        " Lunch ",
        today=date(2024, 3, 5),
    )

    assert payload.amount == Decimal("12.30")
    assert payload.transaction_date == date(2024, 3, 5)
    assert payload.category_id is None
    assert payload.description == "Lunch"
