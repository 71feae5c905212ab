"""Shape-tolerant field access for SDK objects and plain mappings.

Streaming payloads arrive either as SDK model instances or as decoded JSON
dicts; both are read through ``read_field``.
"""
from __future__ import annotations

from typing import Any, Mapping


def read_field(obj: Any, key: str) -> Any:
    """Read ``key`` from ``obj`` by attribute, tolerating mappings.

    Returns ``None`` when ``obj`` is ``None`` or the key is missing.
    """
    if isinstance(obj, Mapping):
        return obj.get(key)
    return getattr(obj, key, None)


__all__ = ["read_field"]
