"""Streamlit dashboard entry point."""

from collections.abc import Callable, Sequence
from datetime import date
from decimal import Decimal

import streamlit as st

from src.adapters.interface.streamlit.charts import (
    build_donut_chart,
    build_history_chart,
    build_source_sunburst,
    build_spending_bar_chart,
    format_currency,
    prepare_donut_chart_data,
    prepare_history_chart_data,
    prepare_spending_chart_data,
)
from src.adapters.interface.streamlit.forms import (
    build_asset_category_input,
    build_asset_input,
    build_asset_source_input,
    build_spending_category_input,
    build_transaction_input,
)
from src.application.stores import (
    AssetCategoryStore,
    AssetSourceStore,
    AssetStore,
    NetWorthHistoryStore,
    SpendingCategoryStore,
    TransactionStore,
)
from src.domain.constants import (
    ASSET_TYPES,
    DEFAULT_SPENDING_COLOR,
    SPENDING_COLOR_PRESETS,
    UNCATEGORIZED_LABEL,
)
from src.domain.errors import FinanceError, ValidationError
from src.domain.models import (
    BudgetReport,
    NetWorthBreakdown,
    NetWorthChange,
    SpendingSummary,
    Transaction,
)
from src.domain.policies import filter_sources_for_category
from src.domain.services.finance import (
    compute_spending_summary,
    group_transactions_by_date,
    sum_transactions,
)
from src.domain.services.periods import month_range, shift_month
from src.infrastructure.container import (
    build_asset_category_store,
    build_asset_source_store,
    build_asset_store,
    build_budget_status_use_case,
    build_net_worth_breakdown_use_case,
    build_net_worth_history_store,
    build_settings,
    build_sign_out_use_case,
    build_spending_category_store,
    build_spending_summary_use_case,
    build_transaction_store,
)
from src.infrastructure.logging.logger import get_usage_logger
from src.infrastructure.settings import FinanceSettings


PAGES = ("Dashboard", "Assets", "Spending", "Categories")

PENDING_DELETE_KEY = "pending_delete"
FLASH_KEY = "flash_message"
SPENDING_MONTH_KEY = "spending_month"

ASSET_CATEGORY_DELETE_WARNING = (
    "All sources and assets in this category will also be deleted."
)
ASSET_SOURCE_DELETE_WARNING = (
    "All assets using this source will also be deleted."
)
SPENDING_CATEGORY_DELETE_WARNING = (
    "Transactions with this category will become uncategorized."
)


def _check_altair_dependencies() -> tuple[bool, str | None]:
    """Check that the array libraries Altair renders with are usable.

    Returns:
        Tuple of (ok, message) where message explains a failure.
    """
    try:
        import numpy
        import pandas
    except ImportError as exc:
        return False, f"Charts are unavailable: {exc}"
    if not hasattr(numpy, "ndarray"):
        return False, (
            "Charts are unavailable: the numpy installation is incomplete "
            "(numpy.ndarray is missing)."
        )
    if not hasattr(pandas, "Timestamp"):
        return False, (
            "Charts are unavailable: the pandas installation is incomplete "
            "(pandas.Timestamp is missing)."
        )
    return True, None


def _fetch_settings() -> FinanceSettings:
    return build_settings()


@st.cache_data(show_spinner=False)
def _load_settings() -> FinanceSettings:
    """Cached wrapper around _fetch_settings for Streamlit sessions."""
    return _fetch_settings()


def _fetch_net_worth_breakdown() -> NetWorthBreakdown:
    """Fetch the net worth breakdown from the finance database."""
    return build_net_worth_breakdown_use_case().execute()


@st.cache_data(show_spinner=False)
def _load_net_worth_breakdown(schema_version: int = 1) -> NetWorthBreakdown:
    """Cached wrapper around _fetch_net_worth_breakdown."""
    _ = schema_version
    return _fetch_net_worth_breakdown()


def _fetch_budget_report(today: date) -> BudgetReport:
    return build_budget_status_use_case().execute(today=today)


@st.cache_data(show_spinner=False)
def _load_budget_report(today: date, schema_version: int = 1) -> BudgetReport:
    """Cached wrapper around _fetch_budget_report."""
    _ = schema_version
    return _fetch_budget_report(today)


def _fetch_spending_summary(months: int, today: date) -> SpendingSummary:
    return build_spending_summary_use_case().execute(
        months=months,
        today=today,
    )


@st.cache_data(show_spinner=False)
def _load_spending_summary(
    months: int,
    today: date,
    schema_version: int = 1,
) -> SpendingSummary:
    """Cached wrapper around _fetch_spending_summary."""
    _ = schema_version
    return _fetch_spending_summary(months, today)


def _invalidate_caches() -> None:
    """Drop cached aggregates after a write."""
    _load_net_worth_breakdown.clear()
    _load_budget_report.clear()
    _load_spending_summary.clear()


def _get_store(key: str, builder: Callable[[], object]):
    """Return the session's store, building it on first use."""
    if key not in st.session_state:
        st.session_state[key] = builder()
    return st.session_state[key]


def _format_delta(value: Decimal, symbol: str) -> str:
    """Format delta values for display."""
    sign = "+" if value >= 0 else ""
    return f"{sign}{format_currency(value, symbol)}"


def _format_delta_with_percent(
    change: NetWorthChange | None,
    symbol: str,
) -> str | None:
    """Format a month-over-month change with its percentage."""
    if change is None:
        return None
    delta = _format_delta(change.change, symbol)
    if change.change_percent is None:
        return delta
    sign = "+" if change.change_percent >= 0 else ""
    return f"{delta} ({sign}{change.change_percent:.2f}%)"


def _show_flash() -> None:
    message = st.session_state.pop(FLASH_KEY, None)
    if message:
        st.toast(message)


def _editing_key(kind: str) -> str:
    return f"editing_{kind}"


def _editing_record(kind: str, store):
    record_id = st.session_state.get(_editing_key(kind))
    if not record_id:
        return None
    return store.get(record_id)


def _run_mutation(
    action: Callable[[], object],
    success_message: str,
    kind: str | None = None,
) -> bool:
    """Run a write, report failures as a toast and rerun on success.

    Args:
        action: Callable performing the validation and the write.
        success_message: Toast shown after the rerun.
        kind: Record kind whose edit state is cleared on success.

    Returns:
        False when the write failed; on success the script reruns.
    """
    try:
        action()
    except ValidationError as exc:
        st.toast(str(exc))
        return False
    except FinanceError as exc:
        st.toast(str(exc))
        return False
    get_usage_logger().info(f"action={success_message}")
    _invalidate_caches()
    if kind is not None:
        st.session_state.pop(_editing_key(kind), None)
    st.session_state[FLASH_KEY] = success_message
    st.rerun()
    return True


def _render_record_actions(kind: str, record_id: str, label: str) -> None:
    edit_col, delete_col = st.columns(2)
    if edit_col.button("Edit", key=f"edit_{kind}_{record_id}"):
        st.session_state[_editing_key(kind)] = record_id
        st.rerun()
    if delete_col.button("Delete", key=f"delete_{kind}_{record_id}"):
        st.session_state[PENDING_DELETE_KEY] = (kind, record_id, label)
        st.rerun()


def _render_delete_confirmation(
    kind: str,
    warning: str | None,
    on_confirm: Callable[[str], None],
) -> None:
    """Ask for confirmation before a pending delete of ``kind`` runs."""
    pending = st.session_state.get(PENDING_DELETE_KEY)
    if not pending or pending[0] != kind:
        return
    _, record_id, label = pending
    message = f"Delete {label}?"
    if warning:
        message = f"{message} {warning}"
    st.warning(message)
    confirm_col, cancel_col = st.columns(2)
    if confirm_col.button("Confirm delete", key=f"confirm_delete_{kind}"):
        st.session_state.pop(PENDING_DELETE_KEY, None)
        _run_mutation(
            lambda: on_confirm(record_id),
            f"Deleted {label}",
            kind=kind,
        )
    if cancel_col.button("Cancel", key=f"cancel_delete_{kind}"):
        st.session_state.pop(PENDING_DELETE_KEY, None)
        st.rerun()


def _form_title(editing, noun: str) -> str:
    return f"**Edit {editing.name}**" if editing else f"**Add {noun}**"


def _render_cancel_edit(kind: str, editing) -> None:
    if editing is not None and st.button(
        "Cancel edit",
        key=f"cancel_edit_{kind}",
    ):
        st.session_state.pop(_editing_key(kind), None)
        st.rerun()


def _refresh_with_spinner(store, label: str) -> None:
    with st.spinner(f"Loading {label}..."):
        store.refresh()
    if store.error:
        st.error(f"Failed to load {label}: {store.error}")


def _render_dashboard(settings: FinanceSettings) -> None:
    """Render totals, history, breakdown charts and budgets."""
    symbol = settings.currency_symbol
    today = date.today()
    loaded = False
    try:
        with st.spinner("Loading dashboard..."):
            breakdown = _load_net_worth_breakdown(schema_version=1)
            report = _load_budget_report(today, schema_version=1)
            summary = _load_spending_summary(
                settings.spending_months,
                today,
                schema_version=1,
            )
        loaded = True
    except FinanceError as exc:
        st.error(str(exc))

    history_store: NetWorthHistoryStore = _get_store(
        "net_worth_history_store",
        build_net_worth_history_store,
    )
    _refresh_with_spinner(history_store, "history")
    change = history_store.change()

    if loaded:
        net_col, assets_col, liabilities_col, spending_col = st.columns(4)
        net_col.metric(
            "Net Worth",
            format_currency(breakdown.net_worth, symbol),
            _format_delta_with_percent(change, symbol),
        )
        assets_col.metric(
            "Total Assets",
            format_currency(breakdown.total_assets, symbol),
        )
        liabilities_col.metric(
            "Total Liabilities",
            format_currency(breakdown.total_liabilities, symbol),
        )
        spending_col.metric(
            "This Month's Spending",
            format_currency(report.total_spent, symbol),
        )

    charts_ok, charts_message = _check_altair_dependencies()
    if not charts_ok:
        st.warning(charts_message)

    st.subheader("Net worth history")
    if st.button("Take snapshot", key="take_snapshot"):
        _run_mutation(history_store.take_snapshot, "Snapshot saved")
    if not history_store.history:
        st.info("No snapshots yet. Take one to start tracking.")
    elif charts_ok:
        st.altair_chart(
            build_history_chart(
                prepare_history_chart_data(history_store.history, symbol)
            ),
            width="stretch",
        )

    # History stays visible when the aggregates failed to load.
    if not loaded:
        return

    if charts_ok:
        _render_breakdown_charts(breakdown, symbol)
    _render_source_breakdown(breakdown)

    st.subheader("Spending by category")
    if settings.spending_months > 1:
        st.caption(f"Last {settings.spending_months} months")
    if not summary.items:
        st.info("No spending recorded for this period.")
    elif charts_ok:
        st.altair_chart(
            build_spending_bar_chart(
                prepare_spending_chart_data(summary, symbol)
            ),
            width="stretch",
        )
    st.caption(f"Total: {format_currency(summary.total, symbol)}")

    _render_budget_status(report, symbol)


def _render_breakdown_charts(
    breakdown: NetWorthBreakdown,
    symbol: str,
) -> None:
    assets_col, liabilities_col = st.columns(2)
    for column, title, items in (
        (assets_col, "Assets", breakdown.asset_items),
        (liabilities_col, "Liabilities", breakdown.liability_items),
    ):
        with column:
            st.subheader(title)
            if not items:
                st.info(f"No {title.lower()} recorded.")
                continue
            data, _total = prepare_donut_chart_data(items, symbol)
            if not data:
                st.info(f"No positive {title.lower()} to chart.")
                continue
            st.altair_chart(build_donut_chart(data), width="stretch")


def _render_source_breakdown(breakdown: NetWorthBreakdown) -> None:
    if not breakdown.items:
        return
    st.subheader("Breakdown by source")
    names = [item.category for item in breakdown.items]
    selected = st.selectbox("Category", names, key="breakdown_category")
    item = next(
        entry for entry in breakdown.items if entry.category == selected
    )
    st.plotly_chart(
        build_source_sunburst(
            selected,
            breakdown.sources.get(selected, []),
            item.color,
        ),
        width="stretch",
    )


def _progress_value(percent_used: Decimal) -> float:
    """Map a budget percentage onto the [0, 1] range of ``st.progress``.

    Refunds can push spending below zero and overspending past 100%, so
    the bar is clamped on both ends.
    """
    return max(0.0, min(float(percent_used) / 100, 1.0))


def _render_budget_status(report: BudgetReport, symbol: str) -> None:
    st.subheader("Budget status")
    budgeted = [
        status for status in report.statuses if status.percent_used is not None
    ]
    if not budgeted:
        st.info("No budgets set. Add one on the Categories page.")
    for status in budgeted:
        text = (
            f"{status.category_name}: "
            f"{format_currency(status.spent, symbol)} of "
            f"{format_currency(status.budget_amount, symbol)}"
        )
        if status.over_budget:
            over = format_currency(-status.remaining, symbol)
            text = f"{text} (over by {over})"
        st.progress(_progress_value(status.percent_used), text=text)
    if report.uncategorized_spent:
        st.caption(
            f"{UNCATEGORIZED_LABEL}: "
            f"{format_currency(report.uncategorized_spent, symbol)}"
        )


def _render_assets_page(settings: FinanceSettings) -> None:
    """Render asset categories, sources and assets with their forms."""
    category_store: AssetCategoryStore = _get_store(
        "asset_category_store",
        build_asset_category_store,
    )
    source_store: AssetSourceStore = _get_store(
        "asset_source_store",
        build_asset_source_store,
    )
    asset_store: AssetStore = _get_store("asset_store", build_asset_store)
    _refresh_with_spinner(category_store, "categories")
    _refresh_with_spinner(source_store, "sources")
    _refresh_with_spinner(asset_store, "assets")

    categories_tab, sources_tab, assets_tab = st.tabs(
        ["Categories", "Sources", "Assets"]
    )
    with categories_tab:
        _render_asset_categories(category_store)
    with sources_tab:
        _render_asset_sources(source_store, category_store)
    with assets_tab:
        _render_assets(asset_store, source_store, category_store, settings)


def _render_asset_categories(store: AssetCategoryStore) -> None:
    kind = "asset_category"
    _render_delete_confirmation(
        kind,
        ASSET_CATEGORY_DELETE_WARNING,
        store.delete,
    )
    if not store.items:
        st.info("No asset categories yet.")
    for category in store.items:
        info_col, actions_col = st.columns([4, 1])
        icon = f"{category.icon} " if category.icon else ""
        info_col.markdown(
            f"{icon}**{category.name}** · {category.type.title()}"
        )
        with actions_col:
            _render_record_actions(kind, category.id, category.name)

    editing = _editing_record(kind, store)
    form_key = f"{kind}_form_{editing.id if editing else 'new'}"
    with st.form(form_key, clear_on_submit=editing is None):
        st.markdown(_form_title(editing, "category"))
        name = st.text_input(
            "Name",
            value=editing.name if editing else "",
            key=f"{form_key}_name",
        )
        category_type = st.selectbox(
            "Type",
            ASSET_TYPES,
            index=ASSET_TYPES.index(editing.type) if editing else 0,
            format_func=str.title,
            key=f"{form_key}_type",
        )
        display_order = st.number_input(
            "Display order",
            value=editing.display_order if editing else len(store.items) + 1,
            step=1,
            key=f"{form_key}_order",
        )
        icon = st.text_input(
            "Icon",
            value=(editing.icon or "") if editing else "",
            key=f"{form_key}_icon",
        )
        submitted = st.form_submit_button("Save" if editing else "Add")
    if submitted:
        def action():
            payload = build_asset_category_input(
                name,
                category_type,
                int(display_order),
                icon,
            )
            if editing:
                return store.update(editing.id, payload)
            return store.create(payload)

        _run_mutation(
            action,
            "Category updated" if editing else "Category added",
            kind=kind,
        )
    _render_cancel_edit(kind, editing)


def _render_asset_sources(
    store: AssetSourceStore,
    category_store: AssetCategoryStore,
) -> None:
    kind = "asset_source"
    _render_delete_confirmation(
        kind,
        ASSET_SOURCE_DELETE_WARNING,
        store.delete,
    )
    if not store.items:
        st.info("No sources yet.")
    for source in store.items:
        info_col, actions_col = st.columns([4, 1])
        category_name = source.category.name if source.category else "—"
        description = f" · {source.description}" if source.description else ""
        info_col.markdown(f"**{source.name}** · {category_name}{description}")
        with actions_col:
            _render_record_actions(kind, source.id, source.name)

    categories = category_store.items
    if not categories:
        st.info("Add an asset category before adding sources.")
        return
    category_names = {category.id: category.name for category in categories}
    category_ids = list(category_names)
    editing = _editing_record(kind, store)
    form_key = f"{kind}_form_{editing.id if editing else 'new'}"
    with st.form(form_key, clear_on_submit=editing is None):
        st.markdown(_form_title(editing, "source"))
        name = st.text_input(
            "Name",
            value=editing.name if editing else "",
            key=f"{form_key}_name",
        )
        category_id = st.selectbox(
            "Category",
            category_ids,
            index=(
                category_ids.index(editing.category_id)
                if editing and editing.category_id in category_ids
                else 0
            ),
            format_func=category_names.get,
            key=f"{form_key}_category",
        )
        description = st.text_input(
            "Description",
            value=(editing.description or "") if editing else "",
            key=f"{form_key}_description",
        )
        submitted = st.form_submit_button("Save" if editing else "Add")
    if submitted:
        def action():
            payload = build_asset_source_input(name, category_id, description)
            if editing:
                return store.update(editing.id, payload)
            return store.create(payload)

        _run_mutation(
            action,
            "Source updated" if editing else "Source added",
            kind=kind,
        )
    _render_cancel_edit(kind, editing)


def _render_assets(
    store: AssetStore,
    source_store: AssetSourceStore,
    category_store: AssetCategoryStore,
    settings: FinanceSettings,
) -> None:
    kind = "asset"
    _render_delete_confirmation(kind, None, store.delete)
    if not store.items:
        st.info("No assets yet.")
    for asset in store.items:
        info_col, actions_col = st.columns([4, 1])
        category_name = asset.category.name if asset.category else "—"
        source_name = asset.source.name if asset.source else "—"
        info_col.markdown(
            f"**{asset.name}** · {category_name} / {source_name} · "
            f"{asset.current_value:,.2f} {asset.currency}"
        )
        with actions_col:
            _render_record_actions(kind, asset.id, asset.name)

    categories = category_store.items
    if not categories:
        st.info("Add an asset category before adding assets.")
        return
    editing = _editing_record(kind, store)
    form_key = f"{kind}_form_{editing.id if editing else 'new'}"
    category_names = {category.id: category.name for category in categories}
    category_ids = list(category_names)
    st.markdown(_form_title(editing, "asset"))
    category_id = st.selectbox(
        "Category",
        category_ids,
        index=(
            category_ids.index(editing.category_id)
            if editing and editing.category_id in category_ids
            else 0
        ),
        format_func=category_names.get,
        key=f"{form_key}_category",
    )
    sources = filter_sources_for_category(source_store.items, category_id)
    source_names = {source.id: source.name for source in sources}
    source_ids = list(source_names)
    with st.form(form_key, clear_on_submit=editing is None):
        name = st.text_input(
            "Name",
            value=editing.name if editing else "",
            key=f"{form_key}_name",
        )
        source_id = st.selectbox(
            "Source",
            source_ids,
            index=(
                source_ids.index(editing.source_id)
                if editing and editing.source_id in source_ids
                else 0
            ),
            format_func=source_names.get,
            key=f"{form_key}_source",
        )
        raw_value = st.text_input(
            "Current value",
            value=str(editing.current_value) if editing else "",
            key=f"{form_key}_value",
        )
        currency = st.text_input(
            "Currency",
            value=editing.currency if editing else settings.currency,
            key=f"{form_key}_currency",
        )
        notes = st.text_area(
            "Notes",
            value=(editing.notes or "") if editing else "",
            key=f"{form_key}_notes",
        )
        submitted = st.form_submit_button("Save" if editing else "Add")
    if submitted:
        def action():
            payload = build_asset_input(
                name,
                category_id,
                source_id,
                raw_value,
                source_store.items,
                currency=currency,
                notes=notes,
                default_currency=settings.currency,
            )
            if editing:
                return store.update(editing.id, payload)
            return store.create(payload)

        _run_mutation(
            action,
            "Asset updated" if editing else "Asset added",
            kind=kind,
        )
    _render_cancel_edit(kind, editing)


def _render_spending_page(settings: FinanceSettings) -> None:
    """Render one month of transactions with month navigation."""
    symbol = settings.currency_symbol
    today = date.today()
    month = (
        st.session_state.get(SPENDING_MONTH_KEY) or month_range(today).start
    )

    prev_col, label_col, current_col, next_col = st.columns([1, 3, 1, 1])
    if prev_col.button("Previous", key="spending_prev"):
        st.session_state[SPENDING_MONTH_KEY] = shift_month(month, -1)
        st.rerun()
    label_col.markdown(f"### {month:%B %Y}")
    if current_col.button("Current", key="spending_current"):
        st.session_state[SPENDING_MONTH_KEY] = month_range(today).start
        st.rerun()
    if next_col.button("Next", key="spending_next"):
        st.session_state[SPENDING_MONTH_KEY] = shift_month(month, 1)
        st.rerun()

    store: TransactionStore = _get_store(
        "transaction_store",
        build_transaction_store,
    )
    category_store: SpendingCategoryStore = _get_store(
        "spending_category_store",
        build_spending_category_store,
    )
    with st.spinner("Loading transactions..."):
        store.set_month(month)
    if store.error:
        st.error(f"Failed to load transactions: {store.error}")
    _refresh_with_spinner(category_store, "categories")

    transactions = store.items
    st.metric(
        "Total spent",
        format_currency(sum_transactions(transactions), symbol),
    )

    summary = compute_spending_summary(transactions, month_range(month))
    charts_ok, charts_message = _check_altair_dependencies()
    if summary.items and charts_ok:
        st.altair_chart(
            build_spending_bar_chart(
                prepare_spending_chart_data(summary, symbol)
            ),
            width="stretch",
        )
    elif not charts_ok:
        st.warning(charts_message)

    _render_transactions(store, category_store, symbol, transactions)


def _render_transactions(
    store: TransactionStore,
    category_store: SpendingCategoryStore,
    symbol: str,
    transactions: Sequence[Transaction],
) -> None:
    kind = "transaction"
    _render_delete_confirmation(kind, None, store.delete)
    if not transactions:
        st.info("No transactions this month.")
    for day, entries in group_transactions_by_date(transactions).items():
        st.markdown(
            f"**{day:%a %d %b}** · "
            f"{format_currency(sum_transactions(entries), symbol)}"
        )
        for transaction in entries:
            info_col, actions_col = st.columns([4, 1])
            category_name = (
                transaction.category.name
                if transaction.category
                else UNCATEGORIZED_LABEL
            )
            description = (
                f" · {transaction.description}"
                if transaction.description
                else ""
            )
            info_col.markdown(
                f"{format_currency(transaction.amount, symbol)} · "
                f"{category_name}{description}"
            )
            with actions_col:
                amount = format_currency(transaction.amount, symbol)
                _render_record_actions(
                    kind,
                    transaction.id,
                    f"transaction of {amount}",
                )

    category_names = {"": UNCATEGORIZED_LABEL}
    category_names.update(
        {category.id: category.name for category in category_store.items}
    )
    category_ids = list(category_names)
    editing = _editing_record(kind, store)
    form_key = f"{kind}_form_{editing.id if editing else 'new'}"
    with st.form(form_key, clear_on_submit=editing is None):
        st.markdown(
            "**Edit transaction**" if editing else "**Add transaction**"
        )
        raw_amount = st.text_input(
            "Amount",
            value=str(editing.amount) if editing else "",
            key=f"{form_key}_amount",
        )
        transaction_date = st.date_input(
            "Date",
            value=editing.transaction_date if editing else date.today(),
            key=f"{form_key}_date",
        )
        current_category = (editing.category_id or "") if editing else ""
        category_id = st.selectbox(
            "Category",
            category_ids,
            index=(
                category_ids.index(current_category)
                if current_category in category_ids
                else 0
            ),
            format_func=category_names.get,
            key=f"{form_key}_category",
        )
        description = st.text_input(
            "Description",
            value=(editing.description or "") if editing else "",
            key=f"{form_key}_description",
        )
        submitted = st.form_submit_button("Save" if editing else "Add")
    if submitted:
        def action():
            payload = build_transaction_input(
                raw_amount,
                transaction_date,
                category_id,
                description,
            )
            if editing:
                return store.update(editing.id, payload)
            return store.create(payload)

        _run_mutation(
            action,
            "Transaction updated" if editing else "Transaction added",
            kind=kind,
        )
    _render_cancel_edit(kind, editing)


def _render_categories_page(settings: FinanceSettings) -> None:
    """Render spending categories with their monthly budget."""
    symbol = settings.currency_symbol
    kind = "spending_category"
    store: SpendingCategoryStore = _get_store(
        "spending_category_store",
        build_spending_category_store,
    )
    _refresh_with_spinner(store, "categories")
    _render_delete_confirmation(
        kind,
        SPENDING_CATEGORY_DELETE_WARNING,
        store.delete,
    )
    if not store.items:
        st.info("No spending categories yet.")
    for category in store.items:
        info_col, actions_col = st.columns([4, 1])
        icon = f"{category.icon} " if category.icon else ""
        budget = (
            f"Budget {format_currency(category.budget_amount, symbol)}"
            if category.budget_amount
            else "No budget"
        )
        info_col.markdown(
            f":material/circle: {icon}**{category.name}** · "
            f"`{category.color}` · {budget}"
        )
        with actions_col:
            _render_record_actions(kind, category.id, category.name)

    editing = _editing_record(kind, store)
    form_key = f"{kind}_form_{editing.id if editing else 'new'}"
    with st.form(form_key, clear_on_submit=editing is None):
        st.markdown(_form_title(editing, "category"))
        name = st.text_input(
            "Name",
            value=editing.name if editing else "",
            key=f"{form_key}_name",
        )
        color = st.color_picker(
            "Color",
            value=editing.color if editing else DEFAULT_SPENDING_COLOR,
            key=f"{form_key}_color",
        )
        st.caption("Presets: " + " ".join(SPENDING_COLOR_PRESETS))
        raw_budget = st.text_input(
            "Monthly budget",
            value=(
                str(editing.budget_amount)
                if editing and editing.budget_amount is not None
                else ""
            ),
            key=f"{form_key}_budget",
        )
        icon = st.text_input(
            "Icon",
            value=(editing.icon or "") if editing else "",
            key=f"{form_key}_icon",
        )
        submitted = st.form_submit_button("Save" if editing else "Add")
    if submitted:
        def action():
            payload = build_spending_category_input(
                name,
                color,
                raw_budget,
                icon,
            )
            if editing:
                return store.update(editing.id, payload)
            return store.create(payload)

        _run_mutation(
            action,
            "Category updated" if editing else "Category added",
            kind=kind,
        )
    _render_cancel_edit(kind, editing)


def _redirect(url: str) -> None:
    """Send the browser to ``url`` and stop the current run."""
    st.markdown(
        f'<meta http-equiv="refresh" content="0; url={url}">',
        unsafe_allow_html=True,
    )
    st.stop()


def _render_sign_out(settings: FinanceSettings) -> None:
    if st.sidebar.button("Sign out", key="sign_out"):
        get_usage_logger().info("action=sign_out")
        login_url = build_sign_out_use_case(
            st.session_state,
            settings=settings,
        ).execute()
        _redirect(login_url)


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Finance Tracker", layout="wide")
    settings = _load_settings()
    _show_flash()

    page = st.sidebar.radio("Page", PAGES)
    _render_sign_out(settings)
    get_usage_logger().info(f"page_view page={page}")
    st.title(page)

    if page == "Dashboard":
        _render_dashboard(settings)
    elif page == "Assets":
        _render_assets_page(settings)
    elif page == "Spending":
        _render_spending_page(settings)
    else:
        _render_categories_page(settings)


if __name__ == "__main__":  # pragma: no cover
    main()
