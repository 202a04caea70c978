"""Config file validation for dispatcher runs."""

from __future__ import annotations

import difflib
from pathlib import Path
from typing import Any

import yaml

from zesty_dispatcher.constants.config import (
    ALLOWED_CONFIG_KEYS,
    CONFIG_FILENAME,
    KEY_ENABLE_TOOL,
    KEY_EXEMPTIONS,
    KEY_ROUTER_ENDPOINT,
    KEY_ROUTER_MODEL,
    KEY_SEMANTIC_TIMEOUT,
    KEY_SKILLS_DIR,
)
from zesty_dispatcher.constants.validation import CFG001, CFG002, CFG003, CFG004, CFG005, CFG006
from zesty_dispatcher.exceptions.validation import ValidationError

_STRING_KEYS: tuple[str, ...] = (KEY_ROUTER_MODEL, KEY_SKILLS_DIR, KEY_ROUTER_ENDPOINT)


def validate_config_file(
    root: Path,
    config_path: Path | None = None,
    *,
    config_explicit: bool = False,
) -> list[ValidationError]:
    """Validate a ``zesty-dispatcher.yaml`` file and return every problem found.

    Never raises; used by ``zesty-dispatcher validate-config`` and as CLI
    preflight before a dispatch run.
    """
    errors: list[ValidationError] = []
    path = config_path.resolve() if config_path else (root.resolve() / CONFIG_FILENAME)
    path_str = str(path)

    if not path.exists():
        if config_explicit:
            errors.append(
                ValidationError(code=CFG001, path=path_str, field="", message=f"config file not found: {path}")
            )
        return errors

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        errors.append(ValidationError(code=CFG002, path=path_str, field="", message=f"invalid YAML: {exc}"))
        return errors

    if raw is None:
        return errors

    if not isinstance(raw, dict):
        errors.append(
            ValidationError(
                code=CFG003,
                path=path_str,
                field="",
                message=f"config must be a YAML mapping, got {type(raw).__name__}",
            )
        )
        return errors

    for key in sorted(str(key) for key in raw):
        if key not in ALLOWED_CONFIG_KEYS:
            errors.append(
                ValidationError(
                    code=CFG004,
                    path=path_str,
                    field=key,
                    message=f"unknown key `{key}`",
                    hint=_suggest_key(key, ALLOWED_CONFIG_KEYS),
                )
            )

    exemptions = raw.get(KEY_EXEMPTIONS)
    if exemptions is not None and (
        not isinstance(exemptions, list) or not all(isinstance(item, str) for item in exemptions)
    ):
        errors.append(_type_error(path_str, KEY_EXEMPTIONS, "expected a list of strings"))

    for key in _STRING_KEYS:
        value = raw.get(key)
        if value is not None and not isinstance(value, str):
            errors.append(_type_error(path_str, key, "expected a string"))

    if KEY_ENABLE_TOOL in raw and not isinstance(raw[KEY_ENABLE_TOOL], bool):
        errors.append(_type_error(path_str, KEY_ENABLE_TOOL, "expected a boolean"))

    if KEY_SEMANTIC_TIMEOUT in raw:
        _validate_timeout(raw[KEY_SEMANTIC_TIMEOUT], path_str, errors)

    return errors


def _validate_timeout(value: Any, path_str: str, errors: list[ValidationError]) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        errors.append(_type_error(path_str, KEY_SEMANTIC_TIMEOUT, "expected a positive number"))
    elif value <= 0:
        errors.append(
            ValidationError(
                code=CFG006,
                path=path_str,
                field=KEY_SEMANTIC_TIMEOUT,
                message=f"`{KEY_SEMANTIC_TIMEOUT}` must be positive, got {value}",
            )
        )


def _type_error(path_str: str, key: str, hint: str) -> ValidationError:
    return ValidationError(code=CFG005, path=path_str, field=key, message=f"invalid type for `{key}`", hint=hint)


def _suggest_key(unknown: str, allowed: frozenset[str]) -> str:
    """Return a 'did you mean ...' hint for a close key match, or empty string."""
    matches = difflib.get_close_matches(unknown, sorted(allowed), n=1, cutoff=0.6)
    if matches:
        return f"did you mean `{matches[0]}`?"
    return ""
