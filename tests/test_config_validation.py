"""Tests for config file validation (error codes, messages, ordering)."""

from __future__ import annotations

from pathlib import Path

import pytest

from zesty_dispatcher.config import validate_config_file
from zesty_dispatcher.config.validator import _suggest_key
from zesty_dispatcher.constants.config import ALLOWED_CONFIG_KEYS
from zesty_dispatcher.constants.validation import CFG001, CFG002, CFG003, CFG004, CFG005, CFG006
from zesty_dispatcher.exceptions.validation import ValidationError, format_errors


def _write_config(tmp_path: Path, content: str) -> Path:
    config_path = tmp_path / "zesty-dispatcher.yaml"
    config_path.write_text(content, encoding="utf-8")
    return config_path


def test_missing_default_config_is_valid(tmp_path: Path) -> None:
    assert validate_config_file(tmp_path) == []


def test_missing_explicit_config_reports_cfg001(tmp_path: Path) -> None:
    errors = validate_config_file(tmp_path, tmp_path / "custom.yaml", config_explicit=True)

    assert [error.code for error in errors] == [CFG001]
    assert "config file not found" in errors[0].message


def test_invalid_yaml_reports_cfg002(tmp_path: Path) -> None:
    _write_config(tmp_path, "exemptions: [a\n")

    errors = validate_config_file(tmp_path)

    assert [error.code for error in errors] == [CFG002]


def test_non_mapping_reports_cfg003(tmp_path: Path) -> None:
    _write_config(tmp_path, "just a string\n")

    errors = validate_config_file(tmp_path)

    assert [error.code for error in errors] == [CFG003]
    assert "got str" in errors[0].message


def test_unknown_key_suggests_close_match(tmp_path: Path) -> None:
    _write_config(tmp_path, "routermodel: x\n")

    errors = validate_config_file(tmp_path)

    assert len(errors) == 1
    assert errors[0].code == CFG004
    assert errors[0].field == "routermodel"
    assert errors[0].hint == "did you mean `routerModel`?"


def test_all_problems_are_collected(tmp_path: Path) -> None:
    _write_config(
        tmp_path,
        "exemptions: [1, 2]\n"
        "routerModel: 7\n"
        "enableTool: yes please\n"
        "semanticTimeoutSeconds: -1\n"
        "bogus: 1\n",
    )

    errors = validate_config_file(tmp_path)

    assert sorted((error.code, error.field) for error in errors) == [
        (CFG004, "bogus"),
        (CFG005, "enableTool"),
        (CFG005, "exemptions"),
        (CFG005, "routerModel"),
        (CFG006, "semanticTimeoutSeconds"),
    ]


@pytest.mark.parametrize("value", ["true", "'fast'"], ids=["bool", "string"])
def test_non_numeric_timeout_is_type_error(tmp_path: Path, value: str) -> None:
    _write_config(tmp_path, f"semanticTimeoutSeconds: {value}\n")

    errors = validate_config_file(tmp_path)

    assert [error.code for error in errors] == [CFG005]


def test_valid_config_has_no_errors(tmp_path: Path) -> None:
    _write_config(tmp_path, "exemptions: [qmd]\nenableTool: false\nsemanticTimeoutSeconds: 2.5\n")

    assert validate_config_file(tmp_path) == []


def test_suggest_key_without_close_match() -> None:
    assert _suggest_key("zzzzzz", ALLOWED_CONFIG_KEYS) == ""


def test_format_errors_orders_by_code_then_field() -> None:
    errors = [
        ValidationError(code=CFG005, path="cfg.yaml", field="routerModel", message="invalid type"),
        ValidationError(code=CFG004, path="cfg.yaml", field="zeta", message="unknown key", hint="did you mean?"),
        ValidationError(code=CFG005, path="cfg.yaml", field="enableTool", message="invalid type"),
    ]

    assert format_errors(errors).splitlines() == [
        "[CFG004] cfg.yaml (zeta): unknown key (did you mean?)",
        "[CFG005] cfg.yaml (enableTool): invalid type",
        "[CFG005] cfg.yaml (routerModel): invalid type",
    ]


def test_format_without_field() -> None:
    error = ValidationError(code=CFG002, path="cfg.yaml", field="", message="invalid YAML")

    assert error.format() == "[CFG002] cfg.yaml: invalid YAML"
