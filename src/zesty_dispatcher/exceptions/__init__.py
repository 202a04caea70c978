"""Shared exception hierarchy for Zesty Dispatcher."""

from __future__ import annotations

from .base import DispatcherError
from .config import ConfigError
from .events import EventError
from .generation import GenerationError

__all__ = [
    "ConfigError",
    "DispatcherError",
    "EventError",
    "GenerationError",
]
