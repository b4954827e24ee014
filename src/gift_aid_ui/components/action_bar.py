"""Selected badge with Submit and Export actions."""

import reflex as rx

from gift_aid_ui.state import GiftAidState


def action_bar() -> rx.Component:
    return rx.box(
        rx.badge(GiftAidState.selected_badge_label, size="2"),
        rx.spacer(),
        rx.button(
            rx.icon("download", size=16),
            "Export",
            variant="outline",
            on_click=GiftAidState.export,
            disabled=GiftAidState.is_loading,
        ),
        rx.button(
            rx.icon("send", size=16),
            "Submit",
            on_click=GiftAidState.submit,
            loading=GiftAidState.is_loading,
        ),
        class_name="action-bar",
    )
