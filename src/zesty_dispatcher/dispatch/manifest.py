"""Reduce a host's bootstrap record list to the selected skills.

The rewrite is split into a pure plan (:func:`plan_manifest`) and one in-place
swap (:func:`apply_manifest`). The host keeps a reference to its list, so the
list object itself must survive the rewrite with new contents.
"""

from __future__ import annotations

import re
from collections.abc import MutableSequence, Sequence
from dataclasses import dataclass
from typing import Any

from zesty_dispatcher.clients.base import TextGenerator
from zesty_dispatcher.config import DispatcherConfig
from zesty_dispatcher.constants.manifest import SKILL_PATH_PATTERN
from zesty_dispatcher.constants.parsing import SKILL_DESCRIPTOR_FILENAME
from zesty_dispatcher.dispatch.selector import select_relevant_skills
from zesty_dispatcher.model import RewriteOutcome, SelectionResult, SkillMetadata
from zesty_dispatcher.model.records import record_path
from zesty_dispatcher.parsers import metadata_from_record
from zesty_dispatcher.reporting.diagnostic import build_report_record

_PATH_SEPARATORS = re.compile(r"[\\/]")


@dataclass(frozen=True)
class RecordGroups:
    """Bootstrap records split into non-skill records and per-skill groups."""

    non_skill: tuple[Any, ...]
    by_skill: dict[str, tuple[Any, ...]]
    candidates: tuple[str, ...]

    def descriptor(self, skill_name: str) -> Any | None:
        """The skill's ``SKILL.md`` record, if the host passed one."""
        for record in self.by_skill.get(skill_name, ()):
            if _PATH_SEPARATORS.split(record_path(record))[-1] == SKILL_DESCRIPTOR_FILENAME:
                return record
        return None


def skill_name_for_path(path: str) -> str | None:
    """Return ``<name>`` for paths shaped like ``.../skills/<name>/...``."""
    match = SKILL_PATH_PATTERN.search(path)
    return match.group(1) if match else None


def group_records(records: Sequence[Any]) -> RecordGroups:
    """Group records by inferred skill name, keeping original relative order."""
    non_skill: list[Any] = []
    by_skill: dict[str, list[Any]] = {}

    for record in records:
        skill_name = skill_name_for_path(record_path(record))
        if skill_name is None:
            non_skill.append(record)
        else:
            by_skill.setdefault(skill_name, []).append(record)

    return RecordGroups(
        non_skill=tuple(non_skill),
        by_skill={name: tuple(group) for name, group in by_skill.items()},
        candidates=tuple(by_skill),
    )


def plan_manifest(groups: RecordGroups, selection: SelectionResult) -> list[Any]:
    """Build the new record list: non-skill records, selected skills, then the report."""
    selected = selection.selected_set
    planned = list(groups.non_skill)
    for name in groups.candidates:
        if name in selected:
            planned.extend(groups.by_skill[name])
    if selection.selected:
        planned.append(build_report_record(selection))
    return planned


def apply_manifest(records: MutableSequence[Any], planned: Sequence[Any]) -> None:
    """Replace the contents of *records* with *planned*, keeping the list object."""
    records.clear()
    records.extend(planned)


def rewrite_manifest(
    records: MutableSequence[Any],
    query: str,
    *,
    config: DispatcherConfig,
    generator: TextGenerator | None = None,
) -> RewriteOutcome:
    """Run selection for the skills referenced by *records* and rewrite them in place."""
    groups = group_records(records)
    if not groups.candidates:
        return RewriteOutcome(
            status="skipped",
            query=query,
            kept_files=len(records),
            reason="no skill records in manifest",
        )

    def load_metadata(skill_name: str) -> SkillMetadata:
        descriptor = groups.descriptor(skill_name)
        return metadata_from_record(descriptor) if descriptor is not None else SkillMetadata()

    selection = select_relevant_skills(
        query,
        groups.candidates,
        exemptions=config.exemptions,
        generator=generator,
        router_model=config.router_model,
        metadata_loader=load_metadata,
        semantic_timeout=config.semantic_timeout_seconds,
    )
    planned = plan_manifest(groups, selection)
    removed = sum(len(group) for name, group in groups.by_skill.items() if name not in selection.selected_set)

    apply_manifest(records, planned)
    return RewriteOutcome(
        status="rewritten",
        query=query,
        selection=selection,
        kept_files=len(planned),
        removed_files=removed,
    )
