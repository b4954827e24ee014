"""
Session state engine for reviewing and submitting transactions.

Components, leaves first:
- RecordStore: the loaded result set
- SelectionRegistry: id-keyed selection reconciled per page
- Paginator: visible slice and navigation bounds
- FilterState: filter values and validation
- QueryCoordinator: request building, normalization and result application
- SubmissionCoordinator: submit-then-refresh
- ExportFormatter: CSV export
- ReviewSession: owns all of the above for one UI session
"""

from gift_aid_ui.review.export import ExportFile, ExportFormatter, build_export
from gift_aid_ui.review.filters import FilterState
from gift_aid_ui.review.paginator import Paginator
from gift_aid_ui.review.query import (
    QueryCoordinator,
    ScopeResolution,
    normalize_row,
    normalize_rows,
)
from gift_aid_ui.review.records import RecordStore
from gift_aid_ui.review.selection import SelectionRegistry
from gift_aid_ui.review.session import ReviewSession
from gift_aid_ui.review.submission import SubmissionCoordinator, SubmissionResult

__all__ = [
    "ExportFile",
    "ExportFormatter",
    "FilterState",
    "Paginator",
    "QueryCoordinator",
    "RecordStore",
    "ReviewSession",
    "ScopeResolution",
    "SelectionRegistry",
    "SubmissionCoordinator",
    "SubmissionResult",
    "build_export",
    "normalize_row",
    "normalize_rows",
]
