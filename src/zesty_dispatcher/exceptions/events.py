"""Inbound event exceptions."""

from __future__ import annotations

from zesty_dispatcher.exceptions.base import DispatcherError


class EventError(DispatcherError, ValueError):
    """Raised when a bootstrap event does not have the expected shape."""
