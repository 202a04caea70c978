"""Root exception type."""

from __future__ import annotations


class DispatcherError(Exception):
    """Base class for all Zesty Dispatcher errors."""
