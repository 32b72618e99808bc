"""Chart presentation logic for the Streamlit UI.

Pure transformations from domain aggregates to chart-ready rows, plus the
Altair and Plotly builders that render them. No IO happens here.
"""

from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal
from typing import TYPE_CHECKING

import altair as alt

from src.domain.constants import DEFAULT_COLOR
from src.domain.models import (
    NetWorthBreakdownItem,
    NetWorthHistory,
    SourceBreakdownItem,
    SpendingSummary,
)

if TYPE_CHECKING:  # pragma: no cover
    import plotly.graph_objects as go


OTHER_LABEL = "Other"


def format_currency(value: Decimal, symbol: str) -> str:
    """Format an amount with its currency symbol, sign in front."""
    sign = "-" if value < 0 else ""
    return f"{sign}{symbol}{abs(value):,.2f}"


def prepare_donut_chart_data(
    items: Sequence[NetWorthBreakdownItem],
    symbol: str,
    max_categories: int = 6,
) -> tuple[list[dict[str, str | float]], Decimal]:
    """Prepare donut chart data with a Top-N + Other grouping.

    Categories whose value is zero or negative are left out: an arc
    cannot have a negative angle. Their amounts are not in the total.

    Args:
        items: Category buckets of the breakdown.
        symbol: Currency symbol for labels.
        max_categories: Maximum categories to keep before grouping into Other.

    Returns:
        Tuple with Altair-ready chart data and the total amount.
    """
    positive_items = [item for item in items if item.value > 0]
    sorted_items = sorted(
        positive_items,
        key=lambda item: item.value,
        reverse=True,
    )
    top_items = [
        (item.category, item.value, item.color)
        for item in sorted_items[:max_categories]
    ]
    other_amount = sum(
        (item.value for item in sorted_items[max_categories:]),
        start=Decimal("0"),
    )
    if other_amount != 0:
        top_items.append((OTHER_LABEL, other_amount, DEFAULT_COLOR))
    total_amount = sum(
        (item.value for item in sorted_items),
        start=Decimal("0"),
    )
    data: list[dict[str, str | float]] = []
    for category, amount, color in top_items:
        share = (
            (amount / total_amount) * Decimal("100")
            if total_amount
            else Decimal("0")
        )
        data.append(
            {
                "category": category,
                "amount": float(amount),
                "color": color,
                "amount_label": format_currency(amount, symbol),
                "share_label": f"{share:.1f}%",
            }
        )
    return data, total_amount


def build_donut_chart(
    data: list[dict[str, str | float]],
    chart_size: int = 300,
    show_legend: bool = True,
    legend_columns: int = 2,
) -> alt.LayerChart:
    """Build a donut chart colored by each row's ``color`` field.

    Args:
        data: Rows from ``prepare_donut_chart_data``.
        chart_size: Width/height for the chart canvas.
        show_legend: Whether to display the legend.
        legend_columns: Column count when legend is shown.
    """
    legend = (
        alt.Legend(
            orient="bottom",
            title=None,
            direction="horizontal",
            columns=legend_columns,
            labelLimit=180,
        )
        if show_legend
        else None
    )
    hover = alt.selection_point(
        name="hover",
        fields=["category"],
        on="pointerover",
        clear="pointerout",
        empty=False,
    )
    base = alt.Chart(alt.Data(values=data)).mark_arc(
        innerRadius=chart_size * 0.3,
        cornerRadius=6,
        padAngle=0.02,
    ).encode(
        theta=alt.Theta("amount:Q"),
        color=alt.Color(
            "category:N",
            scale=alt.Scale(
                domain=[row["category"] for row in data],
                range=[row["color"] for row in data],
            ),
            legend=legend,
        ),
        opacity=alt.condition(hover, alt.value(1.0), alt.value(0.6)),
        order=alt.Order("amount:Q", sort="descending"),
        tooltip=[
            alt.Tooltip("category:N", title="Category"),
            alt.Tooltip("amount_label:N", title="Value"),
            alt.Tooltip("share_label:N", title="Share"),
        ],
    )
    hover_text = alt.Chart(alt.Data(values=data)).transform_filter(
        hover
    ).mark_text(
        align="center",
        baseline="middle",
        fontSize=16,
        fontWeight="bold",
    ).encode(
        text="amount_label:N"
    )
    return alt.layer(base, hover_text).add_params(hover).properties(
        width=chart_size,
        height=chart_size,
    )


def prepare_spending_chart_data(
    summary: SpendingSummary,
    symbol: str,
) -> list[dict[str, str | float | int]]:
    return [
        {
            "category": item.category,
            "total": float(item.total),
            "color": item.color,
            "count": item.count,
            "total_label": format_currency(item.total, symbol),
        }
        for item in summary.items
    ]


def build_spending_bar_chart(
    data: list[dict[str, str | float | int]],
) -> alt.Chart:
    """Build a horizontal bar chart of spending per category."""
    return alt.Chart(alt.Data(values=data)).mark_bar(
        cornerRadiusEnd=4,
    ).encode(
        x=alt.X("total:Q", title=None),
        y=alt.Y("category:N", sort="-x", title=None),
        color=alt.Color(
            "category:N",
            scale=alt.Scale(
                domain=[row["category"] for row in data],
                range=[row["color"] for row in data],
            ),
            legend=None,
        ),
        tooltip=[
            alt.Tooltip("category:N", title="Category"),
            alt.Tooltip("total_label:N", title="Spent"),
            alt.Tooltip("count:Q", title="Transactions"),
        ],
    )


def prepare_history_chart_data(
    history: Sequence[NetWorthHistory],
    symbol: str,
) -> list[dict[str, str | float]]:
    """Flatten snapshots into one row per (date, series) for a line chart."""
    rows: list[dict[str, str | float]] = []
    for entry in history:
        for series, value in (
            ("Net worth", entry.net_worth),
            ("Assets", entry.total_assets),
            ("Liabilities", entry.total_liabilities),
        ):
            rows.append(
                {
                    "date": entry.snapshot_date.isoformat(),
                    "series": series,
                    "value": float(value),
                    "value_label": format_currency(value, symbol),
                }
            )
    return rows


def build_history_chart(data: list[dict[str, str | float]]) -> alt.Chart:
    return alt.Chart(alt.Data(values=data)).mark_line(point=True).encode(
        x=alt.X("date:T", title=None),
        y=alt.Y("value:Q", title=None),
        color=alt.Color(
            "series:N",
            scale=alt.Scale(
                domain=["Net worth", "Assets", "Liabilities"],
                range=["#6366f1", "#22c55e", "#ef4444"],
            ),
            legend=alt.Legend(orient="bottom", title=None),
        ),
        tooltip=[
            alt.Tooltip("date:T", title="Date"),
            alt.Tooltip("series:N", title="Series"),
            alt.Tooltip("value_label:N", title="Value"),
        ],
    )


def prepare_sunburst_data(
    category: str,
    sources: Sequence[SourceBreakdownItem],
) -> dict[str, list]:
    """Build the id/parent hierarchy category -> source -> asset.

    Branch values are summed from their children in float so that Plotly's
    ``branchvalues="total"`` never sees a parent smaller than its children.
    Assets with a zero or negative value are skipped since a sunburst
    wedge cannot be negative.

    Args:
        category: Category name at the root.
        sources: Source buckets of the category.

    Returns:
        dict: ``ids``, ``labels``, ``parents`` and ``values`` lists.
    """
    ids = [category]
    labels = [category]
    parents = [""]
    values = [0.0]
    for item in sources:
        source_id = f"{category}/{item.source}"
        source_index = len(ids)
        ids.append(source_id)
        labels.append(item.source)
        parents.append(category)
        values.append(0.0)
        for asset in item.assets:
            if asset.current_value <= 0:
                continue
            asset_value = float(asset.current_value)
            ids.append(f"{source_id}/{asset.id}")
            labels.append(asset.name)
            parents.append(source_id)
            values.append(asset_value)
            values[source_index] += asset_value
        values[0] += values[source_index]
    return {"ids": ids, "labels": labels, "parents": parents, "values": values}


def build_source_sunburst(
    category: str,
    sources: Sequence[SourceBreakdownItem],
    color: str,
) -> "go.Figure":
    """Build a Plotly sunburst of a category split by source and asset."""
    import plotly.graph_objects as go

    data = prepare_sunburst_data(category, sources)
    fig = go.Figure(
        go.Sunburst(
            ids=data["ids"],
            labels=data["labels"],
            parents=data["parents"],
            values=data["values"],
            branchvalues="total",
            marker=dict(colors=[color] * len(data["ids"])),
            hovertemplate="%{label}<br>%{value:,.2f}<extra></extra>",
        )
    )
    fig.update_layout(margin=dict(l=8, r=8, t=8, b=8), height=420)
    return fig


__all__ = [
    "OTHER_LABEL",
    "format_currency",
    "prepare_donut_chart_data",
    "build_donut_chart",
    "prepare_spending_chart_data",
    "build_spending_bar_chart",
    "prepare_history_chart_data",
    "build_history_chart",
    "prepare_sunburst_data",
    "build_source_sunburst",
]
