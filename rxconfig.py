"""Reflex configuration for the Gift Aid Submission UI."""

import reflex as rx

config = rx.Config(
    app_name="gift_aid_ui",
    # Use the src directory structure
    app_module_import="gift_aid_ui.app",
)
