"""Form payload builders for the Streamlit pages.

Each builder turns raw widget values into a typed input record, or raises
``ValidationError`` with the message shown to the user.
"""

from collections.abc import Sequence
from datetime import date
import re

from src.domain.constants import (
    ASSET_TYPES,
    DEFAULT_CURRENCY,
    DEFAULT_SPENDING_COLOR,
)
from src.domain.errors import ValidationError
from src.domain.models import (
    AssetCategoryInput,
    AssetInput,
    AssetSource,
    AssetSourceInput,
    SpendingCategoryInput,
    TransactionInput,
)
from src.domain.policies import source_matches_category
from src.utils.decimal_utils import parse_decimal


REQUIRED_FIELDS_MESSAGE = "Please fill in all required fields"

HEX_COLOR_PATTERN = re.compile(r"^#[0-9a-fA-F]{6}$")
CURRENCY_PATTERN = re.compile(r"^[A-Z]{3}$")


def _clean(value: str | None) -> str:
    return (value or "").strip()


def build_asset_category_input(
    name: str | None,
    category_type: str | None,
    display_order: int | str | None = 0,
    icon: str | None = None,
) -> AssetCategoryInput:
    """Validate the asset category form.

    Args:
        name: Category name, required.
        category_type: One of the asset types.
        display_order: Position in lists; blank means 0.
        icon: Optional icon text.

    Returns:
        AssetCategoryInput: Payload for the repository.

    Raises:
        ValidationError: If a field is missing or malformed.
    """
    cleaned_name = _clean(name)
    if not cleaned_name:
        raise ValidationError("Please enter a category name")
    if category_type not in ASSET_TYPES:
        raise ValidationError("Please choose a category type")
    raw_order = _clean(str(display_order)) if display_order is not None else ""
    try:
        order = int(raw_order) if raw_order else 0
    except ValueError as exc:
        raise ValidationError("Display order must be a whole number") from exc
    return AssetCategoryInput(
        name=cleaned_name,
        type=category_type,
        display_order=order,
        icon=_clean(icon) or None,
    )


def build_asset_source_input(
    name: str | None,
    category_id: str | None,
    description: str | None = None,
) -> AssetSourceInput:
    cleaned_name = _clean(name)
    if not cleaned_name or not category_id:
        raise ValidationError(REQUIRED_FIELDS_MESSAGE)
    return AssetSourceInput(
        name=cleaned_name,
        category_id=category_id,
        description=_clean(description) or None,
    )


def build_asset_input(
    name: str | None,
    category_id: str | None,
    source_id: str | None,
    raw_value: str | None,
    sources: Sequence[AssetSource],
    currency: str | None = None,
    notes: str | None = None,
    default_currency: str = DEFAULT_CURRENCY,
) -> AssetInput:
    """Validate the asset form.

    The selected source must belong to the selected category; the category
    select filters the sources, and this check catches a stale selection.

    Args:
        name: Asset name, required.
        category_id: Selected category id, required.
        source_id: Selected source id, required.
        raw_value: Value as typed, required and numeric.
        sources: Known sources used to check the category pairing.
        currency: Optional ISO code, defaults to ``default_currency``.
        notes: Optional free text.
        default_currency: Currency used when none is given.

    Returns:
        AssetInput: Payload for the repository.

    Raises:
        ValidationError: If a field is missing or malformed.
    """
    cleaned_name = _clean(name)
    if not cleaned_name or not category_id or not source_id:
        raise ValidationError(REQUIRED_FIELDS_MESSAGE)
    if not _clean(raw_value):
        raise ValidationError(REQUIRED_FIELDS_MESSAGE)
    value = parse_decimal(raw_value)
    if value is None:
        raise ValidationError("Please enter a valid value")
    source = next((item for item in sources if item.id == source_id), None)
    if not source_matches_category(source, category_id):
        raise ValidationError(
            "The selected source does not belong to the selected category"
        )
    code = _clean(currency).upper() or default_currency
    if not CURRENCY_PATTERN.match(code):
        raise ValidationError("Currency must be a three-letter code")
    return AssetInput(
        name=cleaned_name,
        category_id=category_id,
        source_id=source_id,
        current_value=value,
        currency=code,
        notes=_clean(notes) or None,
    )


def build_spending_category_input(
    name: str | None,
    color: str | None = DEFAULT_SPENDING_COLOR,
    raw_budget: str | None = None,
    icon: str | None = None,
) -> SpendingCategoryInput:
    """Validate the spending category form.

    A blank budget means the category has no monthly budget.
    """
    cleaned_name = _clean(name)
    if not cleaned_name:
        raise ValidationError("Please enter a category name")
    cleaned_color = _clean(color) or DEFAULT_SPENDING_COLOR
    if not HEX_COLOR_PATTERN.match(cleaned_color):
        raise ValidationError("Please choose a valid color")
    budget = None
    if _clean(raw_budget):
        budget = parse_decimal(raw_budget)
        if budget is None or budget < 0:
            raise ValidationError("Please enter a valid budget amount")
    return SpendingCategoryInput(
        name=cleaned_name,
        color=cleaned_color.lower(),
        budget_amount=budget,
        icon=_clean(icon) or None,
    )


def build_transaction_input(
    raw_amount: str | None,
    transaction_date: date | None = None,
    category_id: str | None = None,
    description: str | None = None,
    today: date | None = None,
) -> TransactionInput:
    """Validate the transaction form.

    Args:
        raw_amount: Amount as typed, required.
        transaction_date: Date of the expense, defaults to ``today``.
        category_id: Optional spending category.
        description: Optional free text.
        today: Reference date, defaults to the current date.

    Returns:
        TransactionInput: Payload for the repository.

    Raises:
        ValidationError: If the amount is missing or not a number.
    """
    if not _clean(raw_amount):
        raise ValidationError("Please enter an amount")
    amount = parse_decimal(raw_amount)
    if amount is None:
        raise ValidationError("Please enter a valid amount")
    return TransactionInput(
        amount=amount,
        transaction_date=transaction_date or today or date.today(),
        category_id=category_id or None,
        description=_clean(description) or None,
    )


__all__ = [
    "REQUIRED_FIELDS_MESSAGE",
    "build_asset_category_input",
    "build_asset_source_input",
    "build_asset_input",
    "build_spending_category_input",
    "build_transaction_input",
]
