"""Path helpers for locating temporary and cache directories."""

import tempfile
from pathlib import Path


def temp_dir() -> Path:
    """Return the system temporary directory as a Path."""
    return Path(tempfile.gettempdir())


def cache_dir(name: str) -> Path:
    """
    Return a named cache directory under the temp directory.

    The directory is not created; the cache library creates it on first use.
    """
    return temp_dir() / "gift_aid_ui" / name
