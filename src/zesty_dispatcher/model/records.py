"""Accessors for host-owned bootstrap records.

Records arrive as bare path strings, ``{"path", "content"}`` mappings, or
objects with ``path``/``content`` attributes. They are read here, never edited.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


def record_path(record: Any) -> str:
    """Return the record's path, or ``""`` when it has none."""
    if isinstance(record, str):
        return record
    value = record.get("path") if isinstance(record, Mapping) else getattr(record, "path", None)
    return value if isinstance(value, str) else ""


def record_content(record: Any) -> str | None:
    """Return inline content carried by the record, if any."""
    if isinstance(record, str):
        return None
    value = record.get("content") if isinstance(record, Mapping) else getattr(record, "content", None)
    return value if isinstance(value, str) else None
