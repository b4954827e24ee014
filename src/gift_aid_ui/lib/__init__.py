"""
Local library modules shared across the Gift Aid Submission UI.

Modules:
    logs: Logger factory
    objects: Stable hashing and JSON serialization
    paths: Temporary and cache directory helpers
    caches: Disk-based caching with TTL support
    clients: Databricks client factories (Spark, Workspace)
"""

from gift_aid_ui.lib import caches, logs, objects, paths

__all__ = ["caches", "logs", "objects", "paths"]
