"""Text-generation client exceptions."""

from __future__ import annotations

from zesty_dispatcher.exceptions.base import DispatcherError


class GenerationError(DispatcherError, RuntimeError):
    """Raised when the text-generation endpoint fails or returns garbage."""
