"""Previous/next page navigation."""

import reflex as rx

from gift_aid_ui.state import GiftAidState


def pagination_bar() -> rx.Component:
    return rx.box(
        rx.button(
            rx.icon("chevron-left", size=16),
            "Previous",
            variant="soft",
            on_click=GiftAidState.prev_page,
            disabled=GiftAidState.is_prev_disabled,
        ),
        rx.text(GiftAidState.page_label, class_name="muted"),
        rx.button(
            "Next",
            rx.icon("chevron-right", size=16),
            variant="soft",
            on_click=GiftAidState.next_page,
            disabled=GiftAidState.is_next_disabled,
        ),
        class_name="pagination-bar",
    )
