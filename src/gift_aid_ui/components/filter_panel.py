"""
Filter panel component.

Date range inputs plus product, status and company pickers. Values are
pushed to the state on change and only queried on "Filter".
"""

import reflex as rx

from gift_aid_ui.state import GiftAidState


def _field(label: str, control: rx.Component) -> rx.Component:
    return rx.box(
        rx.text(label, class_name="field-label"),
        control,
        class_name="field",
    )


def _date_input(label: str, value: rx.Var, on_change) -> rx.Component:
    return _field(
        label,
        rx.input(type="date", value=value, on_change=on_change, class_name="field-input"),
    )


def _picker(
    label: str,
    options: rx.Var,
    value: rx.Var,
    on_change,
    placeholder: str | None = None,
) -> rx.Component:
    """Native select; an option with value "" means no constraint."""
    leading = [rx.el.option(placeholder, value="")] if placeholder else []
    return _field(
        label,
        rx.el.select(
            *leading,
            rx.foreach(
                options,
                lambda option: rx.el.option(option["label"], value=option["value"]),
            ),
            value=value,
            on_change=on_change,
            class_name="field-select",
        ),
    )


def filter_panel() -> rx.Component:
    """
    Build the filter card.

    Returns:
        The filter panel component.
    """
    return rx.box(
        rx.box(
            _date_input("Start Date", GiftAidState.start_date, GiftAidState.set_start_date),
            _date_input("End Date", GiftAidState.end_date, GiftAidState.set_end_date),
            _picker(
                "Product",
                GiftAidState.product_options,
                GiftAidState.selected_product,
                GiftAidState.set_product,
                placeholder="Select product",
            ),
            _picker(
                "Gift Aid Status",
                GiftAidState.status_options,
                GiftAidState.selected_status,
                GiftAidState.set_status,
            ),
            _picker(
                "Company",
                GiftAidState.company_options,
                GiftAidState.selected_company,
                GiftAidState.set_company,
            ),
            class_name="filter-grid",
        ),
        rx.box(
            rx.button(
                rx.icon("filter", size=16),
                "Filter",
                on_click=GiftAidState.apply_filter,
                loading=GiftAidState.is_loading,
            ),
            rx.button(
                "Reset",
                variant="outline",
                on_click=GiftAidState.reset_filters,
                disabled=GiftAidState.is_loading,
            ),
            class_name="filter-actions",
        ),
        class_name="card filter-card",
    )
