"""
Reflex entry point for the Gift Aid Submission UI.

One page: filters on top, then the selection/action bar, the transaction
table for the visible page and the pager.
"""

import reflex as rx

from gift_aid_ui import settings
from gift_aid_ui.components import (
    action_bar,
    filter_panel,
    pagination_bar,
    transaction_table,
)
from gift_aid_ui.lib import logs
from gift_aid_ui.state import APP_SUBTITLE, APP_TITLE, GiftAidState

LOG = logs.logger(__file__)

LOG.info(
    "Starting %s - service:%s page_size:%s",
    APP_TITLE,
    settings.SERVICE_KIND,
    settings.PAGE_SIZE,
)


def _title_block() -> rx.Component:
    return rx.vstack(
        rx.heading(APP_TITLE, size="6", as_="h1"),
        rx.text(APP_SUBTITLE, class_name="muted"),
        spacing="1",
        class_name="page-header",
    )


def _results_heading() -> rx.Component:
    """Record count for the current result set, with a spinner while loading."""
    return rx.hstack(
        rx.text(GiftAidState.total_records, " transactions", weight="medium"),
        rx.cond(GiftAidState.is_loading, rx.spinner(size="2")),
        align="center",
        spacing="2",
    )


def index() -> rx.Component:
    return rx.box(
        rx.vstack(
            _title_block(),
            filter_panel(),
            rx.box(
                _results_heading(),
                action_bar(),
                transaction_table(),
                pagination_bar(),
                class_name="card results-card",
            ),
            spacing="4",
            align="stretch",
            class_name="app-container",
        ),
        class_name="app-shell",
    )


app = rx.App(
    theme=rx.theme(appearance="light", accent_color="teal", radius="medium"),
    stylesheets=["/styles.css"],
)
app.add_page(index, route="/", title=APP_TITLE, on_load=GiftAidState.on_load)


def main() -> None:
    """Run the development server (`gift-aid-ui`); deployments call `reflex run`."""
    import subprocess
    import sys

    subprocess.run(
        [sys.executable, "-m", "reflex", "run", "--frontend-port", str(settings.APP_PORT)],
        check=False,
    )


if __name__ == "__main__":
    main()
