"""Typed view of the host's ``agent:bootstrap`` event."""

from __future__ import annotations

import logging
from collections.abc import Mapping, MutableSequence
from dataclasses import dataclass, field
from typing import Any

from zesty_dispatcher.constants.manifest import (
    EVENT_CONTEXT_KEY,
    EVENT_FILES_KEY,
    EVENT_HISTORY_KEY,
    USER_ROLE,
)
from zesty_dispatcher.exceptions import EventError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Turn:
    """One prior conversation turn."""

    role: str
    content: str


@dataclass(frozen=True)
class BootstrapEvent:
    """Conversation history plus the host-owned list of bootstrap records.

    ``bootstrap_files`` is the host's own list object. It is never copied here
    because the host keeps a reference to it and expects rewrites in place.
    """

    history: tuple[Turn, ...]
    bootstrap_files: MutableSequence[Any] = field(compare=False)

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> BootstrapEvent:
        """Validate the raw event once and build the typed view."""
        if not isinstance(raw, Mapping):
            raise EventError("bootstrap event must be a mapping")

        context = raw.get(EVENT_CONTEXT_KEY, raw)
        if not isinstance(context, Mapping):
            raise EventError(f"{EVENT_CONTEXT_KEY} must be a mapping")

        files = context.get(EVENT_FILES_KEY)
        if not isinstance(files, MutableSequence) or isinstance(files, (str, bytes, bytearray)):
            raise EventError(f"{EVENT_FILES_KEY} must be a mutable list of records")

        history_raw = context.get(EVENT_HISTORY_KEY) or []
        if not isinstance(history_raw, (list, tuple)):
            raise EventError(f"{EVENT_HISTORY_KEY} must be a list of turns")

        history = tuple(turn for turn in (_coerce_turn(item) for item in history_raw) if turn is not None)
        return cls(history=history, bootstrap_files=files)

    def latest_user_query(self) -> str:
        """Return the content of the most recent user turn, or ``""``."""
        for turn in reversed(self.history):
            if turn.role == USER_ROLE:
                return turn.content
        return ""


def _coerce_turn(item: Any) -> Turn | None:
    if not isinstance(item, Mapping):
        logger.debug("Ignoring non-mapping history entry: %r", type(item).__name__)
        return None
    role = item.get("role")
    if not isinstance(role, str):
        return None
    return Turn(role=role, content=_content_text(item.get("content")))


def _content_text(content: Any) -> str:
    """Flatten string or content-block turn content into plain text."""
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        parts = [
            block["text"]
            for block in content
            if isinstance(block, Mapping) and block.get("type") == "text" and isinstance(block.get("text"), str)
        ]
        return "\n".join(parts)
    return ""
