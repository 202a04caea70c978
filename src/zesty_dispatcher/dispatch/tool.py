"""Manual dispatch over every skill installed in a skills directory."""

from __future__ import annotations

import logging
from pathlib import Path

from zesty_dispatcher.clients.base import TextGenerator
from zesty_dispatcher.config import DispatcherConfig
from zesty_dispatcher.constants.parsing import SKILL_DESCRIPTOR_FILENAME
from zesty_dispatcher.dispatch.selector import select_relevant_skills
from zesty_dispatcher.exceptions import ConfigError
from zesty_dispatcher.model import SkillMetadata
from zesty_dispatcher.parsers import read_skill_metadata
from zesty_dispatcher.reporting.dispatch_report import build_dispatch_report
from zesty_dispatcher.types import JsonObject

logger = logging.getLogger(__name__)


def discover_skill_names(skills_dir: Path) -> list[str]:
    """Return sorted names of visible sub-directories of *skills_dir*."""
    try:
        entries = list(skills_dir.iterdir())
    except OSError as exc:
        raise ConfigError(f"Could not access skills directory: {skills_dir} ({exc})") from exc
    return sorted(entry.name for entry in entries if entry.is_dir() and not entry.name.startswith("."))


def dispatch_skills(
    query: str,
    *,
    config: DispatcherConfig,
    generator: TextGenerator | None = None,
    skills_dir: Path | None = None,
) -> JsonObject:
    """Rank every installed skill against *query* and return the report payload."""
    root = skills_dir if skills_dir is not None else config.resolved_skills_dir
    names = discover_skill_names(root)
    logger.debug("Discovered %d skills under %s", len(names), root)

    def load_metadata(skill_name: str) -> SkillMetadata:
        return read_skill_metadata(root / skill_name / SKILL_DESCRIPTOR_FILENAME)

    selection = select_relevant_skills(
        query,
        names,
        exemptions=config.exemptions,
        generator=generator,
        router_model=config.router_model,
        metadata_loader=load_metadata,
        semantic_timeout=config.semantic_timeout_seconds,
    )
    return build_dispatch_report(query, selection)
