"""Tests for the bounded SKILL.md header reader."""

from __future__ import annotations

from pathlib import Path

from zesty_dispatcher.model import SkillMetadata
from zesty_dispatcher.parsers import metadata_from_record, parse_skill_metadata, read_skill_metadata


def test_read_fixture_descriptor_strips_double_quotes(skills_root: Path) -> None:
    metadata = read_skill_metadata(skills_root / "pdf" / "SKILL.md")

    assert metadata == SkillMetadata(
        name="pdf",
        description="Extract text and tables from PDF documents and fill forms",
    )


def test_read_fixture_descriptor_strips_single_quotes(skills_root: Path) -> None:
    metadata = read_skill_metadata(skills_root / "zesty-notes" / "SKILL.md")

    assert metadata.description == "Personal scratchpad notes"


def test_missing_file_yields_empty_metadata(tmp_path: Path) -> None:
    metadata = read_skill_metadata(tmp_path / "SKILL.md")

    assert metadata.is_empty


def test_no_header_block_yields_empty_metadata() -> None:
    assert parse_skill_metadata("# Title\n\nname: not-a-header\n").is_empty


def test_header_block_need_not_start_the_file() -> None:
    text = "<!-- generated -->\n---\nname: late\ndescription: still found\n---\n"

    assert parse_skill_metadata(text) == SkillMetadata(name="late", description="still found")


def test_keys_are_case_insensitive_and_last_occurrence_wins() -> None:
    text = "---\nName: first\nDESCRIPTION: one\nname: second\n---\n"

    assert parse_skill_metadata(text) == SkillMetadata(name="second", description="one")


def test_value_keeps_text_after_first_colon() -> None:
    text = "---\nname: clock\ndescription: Time: zones and alarms\n---\n"

    assert parse_skill_metadata(text).description == "Time: zones and alarms"


def test_mismatched_quotes_are_kept() -> None:
    text = "---\nname: \"odd'\ndescription: 'open only\n---\n"

    metadata = parse_skill_metadata(text)

    assert metadata.name == "\"odd'"
    assert metadata.description == "'open only"


def test_unknown_keys_and_junk_lines_are_ignored() -> None:
    text = "---\nversion: 2\njust some words\n\nname: tidy\n---\n"

    assert parse_skill_metadata(text) == SkillMetadata(name="tidy", description="")


def test_leading_bom_is_ignored() -> None:
    assert parse_skill_metadata("\ufeff---\nname: bom\n---\n").name == "bom"


def test_header_beyond_read_limit_is_not_seen(tmp_path: Path) -> None:
    path = tmp_path / "SKILL.md"
    path.write_text("x" * 2048 + "\n---\nname: hidden\n---\n", encoding="utf-8")

    assert read_skill_metadata(path).is_empty


def test_header_closing_beyond_read_limit_is_not_seen(tmp_path: Path) -> None:
    path = tmp_path / "SKILL.md"
    path.write_text("---\nname: long\ndescription: " + "y" * 2048 + "\n---\n", encoding="utf-8")

    assert read_skill_metadata(path).is_empty


def test_undecodable_bytes_are_dropped(tmp_path: Path) -> None:
    path = tmp_path / "SKILL.md"
    path.write_bytes(b"---\nname: caf\xff\ndescription: ok\n---\n")

    assert read_skill_metadata(path) == SkillMetadata(name="caf", description="ok")


def test_metadata_from_record_prefers_inline_content(skills_root: Path) -> None:
    record = {"path": str(skills_root / "pdf" / "SKILL.md"), "content": "---\nname: inline\n---\n"}

    assert metadata_from_record(record).name == "inline"


def test_metadata_from_record_falls_back_to_disk(skills_root: Path) -> None:
    metadata = metadata_from_record(str(skills_root / "weather" / "SKILL.md"))

    assert metadata.description == "Current conditions and forecasts for any city"


def test_metadata_from_record_without_path() -> None:
    assert metadata_from_record({"content": ""}).is_empty


def test_inline_content_is_bounded_by_bytes_like_disk(tmp_path: Path) -> None:
    text = "é" * 600 + "\n---\nname: deep\ndescription: deep\n---\n"
    path = tmp_path / "SKILL.md"
    path.write_text(text, encoding="utf-8")

    inline = metadata_from_record({"path": str(path), "content": text})

    assert inline.is_empty
    assert inline == read_skill_metadata(path)


def test_inline_content_split_multibyte_char_is_dropped() -> None:
    text = "---\nname: edge\ndescription: x\n---\n"
    padded = text + "a" * (1023 - len(text)) + "é"

    assert metadata_from_record({"content": padded}) == SkillMetadata(name="edge", description="x")
