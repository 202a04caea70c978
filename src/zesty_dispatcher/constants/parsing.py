"""Patterns and limits for skill descriptor parsing."""

from __future__ import annotations

import re

SKILL_DESCRIPTOR_FILENAME: str = "SKILL.md"
METADATA_READ_LIMIT_BYTES: int = 1024

FRONTMATTER_BLOCK_PATTERN: re.Pattern[str] = re.compile(
    r"^---[ \t]*\r?\n(.*?)\r?\n---[ \t]*$",
    re.MULTILINE | re.DOTALL,
)
QUOTE_CHARS: frozenset[str] = frozenset({'"', "'"})

METADATA_KEY_NAME: str = "name"
METADATA_KEY_DESCRIPTION: str = "description"
