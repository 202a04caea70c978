"""Configuration loading, validation, and normalization for Zesty Dispatcher.

``config_from_mapping`` is used for host-supplied plugin config; ``load_config``
reads ``zesty-dispatcher.yaml`` for CLI runs.
"""

from __future__ import annotations

from zesty_dispatcher.config.loader import config_from_mapping, load_config
from zesty_dispatcher.config.model import DispatcherConfig
from zesty_dispatcher.config.validator import validate_config_file

__all__ = [
    "DispatcherConfig",
    "config_from_mapping",
    "load_config",
    "validate_config_file",
]
