"""Config data model for dispatcher runs."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from zesty_dispatcher.constants.config import (
    DEFAULT_ENABLE_TOOL,
    DEFAULT_EXEMPTIONS,
    DEFAULT_ROUTER_MODEL,
    DEFAULT_SEMANTIC_TIMEOUT_SECONDS,
    DEFAULT_SKILLS_DIR,
)


@dataclass(frozen=True)
class DispatcherConfig:
    """Resolved dispatcher config."""

    exemptions: tuple[str, ...] = DEFAULT_EXEMPTIONS
    router_model: str = DEFAULT_ROUTER_MODEL
    enable_tool: bool = DEFAULT_ENABLE_TOOL
    skills_dir: str = DEFAULT_SKILLS_DIR
    semantic_timeout_seconds: float = DEFAULT_SEMANTIC_TIMEOUT_SECONDS
    router_endpoint: str | None = None

    @property
    def resolved_skills_dir(self) -> Path:
        """Skills directory with ``~`` expanded."""
        return Path(self.skills_dir).expanduser()
