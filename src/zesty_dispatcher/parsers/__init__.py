"""Parsers for skill descriptor files."""

from __future__ import annotations

from .skill_metadata import metadata_from_record, parse_skill_metadata, read_skill_metadata

__all__ = ["metadata_from_record", "parse_skill_metadata", "read_skill_metadata"]
