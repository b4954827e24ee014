"""
Selectable transaction table.

Columns come from the shared COLUMNS declaration. Each checkbox reports a
single toggle; the session turns it into the page's checked-rows report,
so selections on other pages are never touched.
"""

import reflex as rx

from gift_aid_ui.models.transaction import COLUMNS
from gift_aid_ui.state import GiftAidState


def _header() -> rx.Component:
    return rx.table.header(
        rx.table.row(
            rx.table.column_header_cell(
                rx.checkbox(
                    checked=GiftAidState.is_page_selected,
                    on_change=GiftAidState.toggle_page,
                ),
            ),
            *[
                rx.table.column_header_cell(
                    column.label, min_width=f"{column.initial_width}px"
                )
                for column in COLUMNS
            ],
        ),
    )


def _row(row: rx.Var) -> rx.Component:
    return rx.table.row(
        rx.table.cell(
            rx.checkbox(
                checked=GiftAidState.page_selected_ids.contains(row["id"]),
                on_change=lambda checked: GiftAidState.toggle_row(row["id"], checked),
            ),
        ),
        *[rx.table.cell(row[column.field_name]) for column in COLUMNS],
        key=row["id"],
    )


def _empty() -> rx.Component:
    """Build the empty state when no transactions match."""
    return rx.box(
        rx.icon("file-x", class_name="empty-icon", size=60),
        rx.heading("No transactions found", size="3", as_="h3"),
        rx.text("Adjust the filters and try again.", class_name="muted"),
        class_name="card empty-state",
    )


def transaction_table() -> rx.Component:
    return rx.cond(
        GiftAidState.is_empty,
        _empty(),
        rx.box(
            rx.table.root(
                _header(),
                rx.table.body(rx.foreach(GiftAidState.rows, _row)),
                variant="surface",
                size="1",
            ),
            class_name="table-scroll",
        ),
    )
