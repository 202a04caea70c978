"""Lightweight header reader for SKILL.md descriptors.

Only the first :data:`METADATA_READ_LIMIT_BYTES` of a descriptor are read. The
header block is split into ``key: value`` lines; ``name`` and ``description``
are the only recognized keys.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from zesty_dispatcher.constants.parsing import (
    FRONTMATTER_BLOCK_PATTERN,
    METADATA_KEY_DESCRIPTION,
    METADATA_KEY_NAME,
    METADATA_READ_LIMIT_BYTES,
    QUOTE_CHARS,
)
from zesty_dispatcher.model import SkillMetadata
from zesty_dispatcher.model.records import record_content, record_path

logger = logging.getLogger(__name__)


def read_skill_metadata(path: Path) -> SkillMetadata:
    """Read a bounded prefix of *path* and parse its header block.

    Any read failure yields empty metadata.
    """
    try:
        with path.open("rb") as handle:
            prefix = handle.read(METADATA_READ_LIMIT_BYTES)
    except OSError as exc:
        logger.debug("Cannot read skill descriptor %s: %s", path, exc)
        return SkillMetadata()
    return parse_skill_metadata(_decode_prefix(prefix))


def parse_skill_metadata(text: str) -> SkillMetadata:
    """Parse ``name``/``description`` from the first ``---`` delimited block in *text*."""
    match = FRONTMATTER_BLOCK_PATTERN.search(text.lstrip("\ufeff"))
    if match is None:
        return SkillMetadata()

    values: dict[str, str] = {}
    for line in match.group(1).splitlines():
        if not line.strip() or ":" not in line:
            continue
        key, value = line.split(":", 1)
        key = key.strip().lower()
        if key in (METADATA_KEY_NAME, METADATA_KEY_DESCRIPTION):
            # Later lines overwrite earlier ones.
            values[key] = _unquote(value.strip())

    return SkillMetadata(
        name=values.get(METADATA_KEY_NAME, ""),
        description=values.get(METADATA_KEY_DESCRIPTION, ""),
    )


def metadata_from_record(record: Any) -> SkillMetadata:
    """Metadata for a descriptor record, preferring inline ``content`` over disk."""
    content = record_content(record)
    if content:
        return parse_skill_metadata(_decode_prefix(content.encode("utf-8")))

    path = record_path(record)
    if not path:
        return SkillMetadata()
    return read_skill_metadata(Path(path))


def _decode_prefix(data: bytes) -> str:
    return data[:METADATA_READ_LIMIT_BYTES].decode("utf-8", errors="ignore")


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in QUOTE_CHARS:
        return value[1:-1]
    return value
