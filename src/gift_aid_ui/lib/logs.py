"""
Logger factory for the Gift Aid Submission UI.

Every module logger is a child of the "gift_aid_ui" logger, which owns the
only handler. The level comes from GIFT_AID_LOG_LEVEL, then LOG_LEVEL,
then INFO.
"""

import logging
import os
from pathlib import Path

ROOT_NAME = "gift_aid_ui"

_LEVEL = (os.getenv("GIFT_AID_LOG_LEVEL") or os.getenv("LOG_LEVEL") or "INFO").upper()
_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _root() -> logging.Logger:
    root = logging.getLogger(ROOT_NAME)
    if not root.handlers:
        root.setLevel(getattr(logging, _LEVEL, logging.INFO))
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATE_FORMAT))
        root.addHandler(handler)
    return root


def logger(name: str) -> logging.Logger:
    """
    Return the logger for a module.

    Args:
        name: Module name or a __file__ path; paths are reduced to the
            file stem, so "review/query.py" logs as "gift_aid_ui.query".
    """
    if "/" in name or "\\" in name:
        name = Path(name).stem
    _root()
    return logging.getLogger(f"{ROOT_NAME}.{name}")
