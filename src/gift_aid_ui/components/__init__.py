"""
Reflex UI components for the Gift Aid Submission page.

- filter_panel: Date range and picker filters with Filter/Reset actions
- action_bar: Selected badge, Submit and Export actions
- transaction_table: Selectable transaction table for the visible page
- pagination_bar: Previous/next navigation
"""

from gift_aid_ui.components.action_bar import action_bar
from gift_aid_ui.components.filter_panel import filter_panel
from gift_aid_ui.components.pagination_bar import pagination_bar
from gift_aid_ui.components.transaction_table import transaction_table

__all__ = ["action_bar", "filter_panel", "pagination_bar", "transaction_table"]
