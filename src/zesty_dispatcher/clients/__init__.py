"""Text-generation collaborators used for semantic recommendations."""

from __future__ import annotations

from .base import GenerationReply, TextGenerator, coerce_reply
from .openai_compat import OpenAICompatibleGenerator

__all__ = ["GenerationReply", "OpenAICompatibleGenerator", "TextGenerator", "coerce_reply"]
