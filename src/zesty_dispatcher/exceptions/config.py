"""Configuration-related exceptions."""

from __future__ import annotations

from zesty_dispatcher.exceptions.base import DispatcherError


class ConfigError(DispatcherError, ValueError):
    """Raised when dispatcher configuration is invalid."""
