"""Config loading and normalization for dispatcher runs."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from zesty_dispatcher.config.model import DispatcherConfig
from zesty_dispatcher.constants.config import (
    CONFIG_FILENAME,
    DEFAULT_ENABLE_TOOL,
    DEFAULT_EXEMPTIONS,
    DEFAULT_ROUTER_MODEL,
    DEFAULT_SEMANTIC_TIMEOUT_SECONDS,
    DEFAULT_SKILLS_DIR,
    KEY_ENABLE_TOOL,
    KEY_EXEMPTIONS,
    KEY_ROUTER_ENDPOINT,
    KEY_ROUTER_MODEL,
    KEY_SEMANTIC_TIMEOUT,
    KEY_SKILLS_DIR,
)
from zesty_dispatcher.exceptions import ConfigError


def load_config(root: Path, config_path: Path | None = None) -> DispatcherConfig:
    """Load config from ``zesty-dispatcher.yaml`` under *root* or an explicit path."""
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        return DispatcherConfig()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")
    return config_from_mapping(raw)


def config_from_mapping(raw: Mapping[str, Any] | None) -> DispatcherConfig:
    """Build a config from host plugin settings, applying defaults for absent keys.

    Unknown keys are ignored here; ``validate_config_file`` reports them for
    file-based configs.
    """
    if raw is None:
        return DispatcherConfig()
    if not isinstance(raw, Mapping):
        raise ConfigError("plugin config must be a mapping")

    exemptions_raw = raw.get(KEY_EXEMPTIONS)
    exemptions = (
        DEFAULT_EXEMPTIONS
        if exemptions_raw is None
        else tuple(pattern for pattern in _ensure_string_list(exemptions_raw, KEY_EXEMPTIONS) if pattern)
    )

    return DispatcherConfig(
        exemptions=exemptions,
        router_model=_ensure_string(raw.get(KEY_ROUTER_MODEL), KEY_ROUTER_MODEL) or DEFAULT_ROUTER_MODEL,
        enable_tool=_ensure_bool(raw.get(KEY_ENABLE_TOOL, DEFAULT_ENABLE_TOOL), KEY_ENABLE_TOOL),
        skills_dir=_ensure_string(raw.get(KEY_SKILLS_DIR), KEY_SKILLS_DIR) or DEFAULT_SKILLS_DIR,
        semantic_timeout_seconds=_ensure_timeout(raw.get(KEY_SEMANTIC_TIMEOUT, DEFAULT_SEMANTIC_TIMEOUT_SECONDS)),
        router_endpoint=_ensure_string(raw.get(KEY_ROUTER_ENDPOINT), KEY_ROUTER_ENDPOINT) or None,
    )


def _ensure_string_list(value: Any, key_name: str) -> list[str]:
    """Coerce a value to a list of strings, raising ConfigError on type mismatch."""
    if not isinstance(value, (list, tuple)) or not all(isinstance(item, str) for item in value):
        raise ConfigError(f"{key_name} must be a list of strings")
    return [item.strip() for item in value]


def _ensure_string(value: Any, key_name: str) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ConfigError(f"{key_name} must be a string")
    return value.strip()


def _ensure_bool(value: Any, key_name: str) -> bool:
    if not isinstance(value, bool):
        raise ConfigError(f"{key_name} must be a boolean")
    return value


def _ensure_timeout(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigError(f"{KEY_SEMANTIC_TIMEOUT} must be a positive number")
    if value <= 0:
        raise ConfigError(f"{KEY_SEMANTIC_TIMEOUT} must be a positive number, got {value}")
    return float(value)
