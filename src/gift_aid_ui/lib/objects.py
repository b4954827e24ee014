"""
Object utilities for hashing and JSON serialization.

Used to build stable cache keys and to log request payloads.
"""

import hashlib
import json
from dataclasses import asdict, is_dataclass
from datetime import date
from typing import Any


def hash_key(obj: Any) -> str:
    """
    Return a stable SHA-256 hex digest of a JSON-serializable object.

    Keys are sorted so equal mappings hash identically across sessions.
    """
    payload = json.dumps(obj, sort_keys=True, default=_default_serializer)
    return hashlib.sha256(payload.encode("utf-8")).hexdigest()


def to_json(obj: Any, indent: int | None = None) -> str:
    """
    Serialize an object to a JSON string.

    Dataclasses become dictionaries, dates become ISO strings and anything
    else falls back to str().
    """
    if is_dataclass(obj) and not isinstance(obj, type):
        obj = asdict(obj)
    return json.dumps(obj, default=_default_serializer, indent=indent)


def _default_serializer(obj: Any) -> Any:
    if is_dataclass(obj) and not isinstance(obj, type):
        return asdict(obj)
    if isinstance(obj, date):
        return obj.isoformat()
    if hasattr(obj, "to_dict"):
        return obj.to_dict()
    return str(obj)
