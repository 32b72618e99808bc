"""Domain constants for the finance tracker."""

ASSET_TYPE_INVESTMENT = "investment"
ASSET_TYPE_CASH = "cash"
ASSET_TYPE_PROPERTY = "property"
ASSET_TYPE_LIABILITY = "liability"

ASSET_TYPES = (
    ASSET_TYPE_INVESTMENT,
    ASSET_TYPE_CASH,
    ASSET_TYPE_PROPERTY,
    ASSET_TYPE_LIABILITY,
)

LIABILITY_TYPES = (ASSET_TYPE_LIABILITY,)

ASSET_TYPE_COLORS = {
    ASSET_TYPE_INVESTMENT: "#22c55e",
    ASSET_TYPE_CASH: "#3b82f6",
    ASSET_TYPE_PROPERTY: "#f97316",
    ASSET_TYPE_LIABILITY: "#ef4444",
}

DEFAULT_COLOR = "#6b7280"
DEFAULT_SPENDING_COLOR = "#3b82f6"
DEFAULT_CURRENCY = "SGD"

SPENDING_COLOR_PRESETS = (
    "#ef4444",
    "#f97316",
    "#eab308",
    "#22c55e",
    "#14b8a6",
    "#3b82f6",
    "#8b5cf6",
    "#ec4899",
    DEFAULT_COLOR,
)

UNCATEGORIZED_LABEL = "Uncategorized"
UNKNOWN_SOURCE_LABEL = "Unknown"

DEFAULT_ASSET_CATEGORIES = (
    ("Investments", ASSET_TYPE_INVESTMENT, 1),
    ("Cash", ASSET_TYPE_CASH, 2),
    ("Property", ASSET_TYPE_PROPERTY, 3),
    ("Liabilities", ASSET_TYPE_LIABILITY, 4),
)


__all__ = [
    "ASSET_TYPE_INVESTMENT",
    "ASSET_TYPE_CASH",
    "ASSET_TYPE_PROPERTY",
    "ASSET_TYPE_LIABILITY",
    "ASSET_TYPES",
    "LIABILITY_TYPES",
    "ASSET_TYPE_COLORS",
    "DEFAULT_COLOR",
    "DEFAULT_SPENDING_COLOR",
    "DEFAULT_CURRENCY",
    "SPENDING_COLOR_PRESETS",
    "UNCATEGORIZED_LABEL",
    "UNKNOWN_SOURCE_LABEL",
    "DEFAULT_ASSET_CATEGORIES",
]
