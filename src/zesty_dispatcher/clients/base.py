"""Protocol and reply type for text-generation collaborators."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Protocol

type ChatMessage = dict[str, str]


@dataclass(frozen=True)
class GenerationReply:
    """Reply from a text generator; either field may carry the text."""

    text: str | None = None
    content: str | None = None

    @property
    def body(self) -> str:
        """``text`` when non-empty, else ``content``, else ``""``."""
        return self.text or self.content or ""


class TextGenerator(Protocol):
    """Anything that can answer a single-turn chat request."""

    def generate_text(
        self,
        *,
        model: str,
        messages: list[ChatMessage],
        temperature: float,
    ) -> GenerationReply | Mapping[str, Any]: ...


def coerce_reply(raw: Any) -> GenerationReply:
    """Normalize a generator's return value into a :class:`GenerationReply`."""
    if isinstance(raw, GenerationReply):
        return raw
    if isinstance(raw, str):
        return GenerationReply(text=raw)
    if isinstance(raw, Mapping):
        return GenerationReply(text=_str_or_none(raw.get("text")), content=_str_or_none(raw.get("content")))
    return GenerationReply(
        text=_str_or_none(getattr(raw, "text", None)),
        content=_str_or_none(getattr(raw, "content", None)),
    )


def _str_or_none(value: Any) -> str | None:
    return value if isinstance(value, str) else None
