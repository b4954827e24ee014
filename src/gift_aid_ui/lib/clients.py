"""
Databricks client factories for the live transaction service.

Provides process-wide singletons for:
- a Spark session (Databricks Connect, serverless unless a cluster is set)
- a WorkspaceClient (databricks-sdk), used to identify the current user

Authentication follows the standard Databricks unified auth environment
(DATABRICKS_HOST, DATABRICKS_TOKEN, OAuth, or a config profile named by
GIFT_AID_DATABRICKS_PROFILE).
"""

import functools
import os

from databricks.connect import DatabricksSession
from databricks.sdk import WorkspaceClient
from databricks.sdk.core import Config


def _config() -> Config:
    profile = os.getenv("GIFT_AID_DATABRICKS_PROFILE") or None
    config = Config(profile=profile) if profile else Config()
    if not config.cluster_id and not config.serverless_compute_id:
        config.serverless_compute_id = "auto"
    return config


@functools.cache
def spark() -> DatabricksSession:
    """Return the shared Spark session, creating it on first use."""
    return DatabricksSession.builder.sdkConfig(_config()).getOrCreate()


@functools.cache
def workspace_client() -> WorkspaceClient:
    """Return the shared WorkspaceClient."""
    return WorkspaceClient(config=_config())


def current_user_name() -> str | None:
    """Return the user name of the authenticated principal, if any."""
    me = workspace_client().current_user.me()
    return getattr(me, "user_name", None) or None
