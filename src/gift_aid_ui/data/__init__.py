"""
Static and demo data for the Gift Aid Submission UI.

This package contains fixture data used by DemoTransactionService for
development, testing, and demonstrations without Databricks connectivity.

Modules:
- demo_transactions: Raw transaction rows, products and companies
"""
