"""SQLAlchemy table definitions for the finance database.

Cascades live in the schema: deleting an asset category removes its sources
and assets, deleting a source removes its assets, deleting a spending
category leaves its transactions uncategorized, and deleting a history row
removes its asset snapshots.
"""

from sqlalchemy import (
    Column,
    Date,
    DateTime,
    ForeignKey,
    Integer,
    MetaData,
    Numeric,
    String,
    Table,
    Text,
)
from sqlalchemy.engine import Engine


AMOUNT = Numeric(14, 2)

metadata = MetaData()

asset_categories = Table(
    "asset_categories",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("name", Text, nullable=False),
    Column("type", String(20), nullable=False),
    Column("icon", Text, nullable=True),
    Column("display_order", Integer, nullable=False, default=0),
    Column("created_at", DateTime(timezone=True), nullable=False),
    Column("updated_at", DateTime(timezone=True), nullable=False),
)

asset_sources = Table(
    "asset_sources",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("name", Text, nullable=False),
    Column(
        "category_id",
        String(36),
        ForeignKey("asset_categories.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("description", Text, nullable=True),
    Column("created_at", DateTime(timezone=True), nullable=False),
    Column("updated_at", DateTime(timezone=True), nullable=False),
)

assets = Table(
    "assets",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("name", Text, nullable=False),
    Column(
        "source_id",
        String(36),
        ForeignKey("asset_sources.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "category_id",
        String(36),
        ForeignKey("asset_categories.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("current_value", AMOUNT, nullable=False),
    Column("currency", String(3), nullable=False),
    Column("notes", Text, nullable=True),
    Column("created_at", DateTime(timezone=True), nullable=False),
    Column("updated_at", DateTime(timezone=True), nullable=False),
)

spending_categories = Table(
    "spending_categories",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("name", Text, nullable=False),
    Column("color", String(7), nullable=False),
    Column("icon", Text, nullable=True),
    Column("budget_amount", AMOUNT, nullable=True),
    Column("created_at", DateTime(timezone=True), nullable=False),
    Column("updated_at", DateTime(timezone=True), nullable=False),
)

transactions = Table(
    "transactions",
    metadata,
    Column("id", String(36), primary_key=True),
    Column(
        "category_id",
        String(36),
        ForeignKey("spending_categories.id", ondelete="SET NULL"),
        nullable=True,
    ),
    Column("amount", AMOUNT, nullable=False),
    Column("description", Text, nullable=True),
    Column("transaction_date", Date, nullable=False),
    Column("created_at", DateTime(timezone=True), nullable=False),
    Column("updated_at", DateTime(timezone=True), nullable=False),
)

net_worth_history = Table(
    "net_worth_history",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("total_assets", AMOUNT, nullable=False),
    Column("total_liabilities", AMOUNT, nullable=False),
    Column("net_worth", AMOUNT, nullable=False),
    Column("snapshot_date", Date, nullable=False),
    Column("created_at", DateTime(timezone=True), nullable=False),
)

asset_snapshots = Table(
    "asset_snapshots",
    metadata,
    Column("id", String(36), primary_key=True),
    Column(
        "history_id",
        String(36),
        ForeignKey("net_worth_history.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "asset_id",
        String(36),
        ForeignKey("assets.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("value", AMOUNT, nullable=False),
    Column("created_at", DateTime(timezone=True), nullable=False),
)


def create_schema(engine: Engine) -> None:
    """Create every finance table that does not exist yet."""
    metadata.create_all(engine)


__all__ = [
    "metadata",
    "asset_categories",
    "asset_sources",
    "assets",
    "spending_categories",
    "transactions",
    "net_worth_history",
    "asset_snapshots",
    "create_schema",
]
