"""
Gift Aid Submission UI: a Reflex application for reviewing sales invoice
transactions and submitting them for Gift Aid.

This package provides a filterable, paginated transaction list with a
selection that survives page changes, a one-way "submit for Gift Aid"
action and CSV export of the loaded result set.

Subpackages:
- review: Session state engine (records, selection, pagination, filters,
  query/submission coordination, export)
- models: Transaction records, filter criteria and shared state models
- services: Data access layer (demo and production implementations)
- components: Reflex UI components
- data: Static demo fixtures
- lib: Logging, caching and Databricks client helpers

Main entry points:
- app.main(): Start the development server
- app.app: The Reflex application instance
"""

__all__ = ["__version__"]

__version__ = "0.1.0"
