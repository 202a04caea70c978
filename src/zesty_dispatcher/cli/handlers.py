"""CLI subcommand handlers."""

from __future__ import annotations

import argparse
import json
import os
import sys
from pathlib import Path

from zesty_dispatcher.clients import OpenAICompatibleGenerator, TextGenerator
from zesty_dispatcher.config import DispatcherConfig, load_config, validate_config_file
from zesty_dispatcher.constants.config import ROUTER_API_KEY_ENV
from zesty_dispatcher.constants.manifest import EVENT_FILES_KEY
from zesty_dispatcher.dispatch import dispatch_skills, handle_bootstrap
from zesty_dispatcher.exceptions import ConfigError, DispatcherError
from zesty_dispatcher.exceptions.validation import format_errors
from zesty_dispatcher.io import dump_json, load_json_file, write_json_atomic
from zesty_dispatcher.model import BootstrapEvent


def handle_validate_config(args: argparse.Namespace) -> int:
    """Validate the config file and report every problem."""
    errors = validate_config_file(args.root, args.config, config_explicit=args.config is not None)
    if errors:
        print(format_errors(errors), file=sys.stderr)
        return 2

    print("Configuration is valid.")
    return 0


def handle_dispatch(args: argparse.Namespace) -> int:
    """Rank every installed skill against ``--query`` and print the report."""
    config = _load_checked_config(args)
    if config is None:
        return 2

    if not (config.enable_tool or args.enable_tool):
        print(
            "Configuration error: the dispatch tool is disabled (set enableTool: true or pass --enable-tool)",
            file=sys.stderr,
        )
        return 2

    try:
        payload = dispatch_skills(
            args.query,
            config=config,
            generator=build_generator(config, args.router_endpoint),
            skills_dir=args.skills_dir.expanduser() if args.skills_dir is not None else None,
        )
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    except DispatcherError as exc:
        print(f"Dispatch error: {exc}", file=sys.stderr)
        return 1

    if args.output is not None:
        write_json_atomic(args.output, payload)
        print(f"Wrote report to {args.output}")
    else:
        print(dump_json(payload))
    return 0


def handle_rewrite(args: argparse.Namespace) -> int:
    """Run the bootstrap filter on an event file and print the rewritten manifest."""
    config = _load_checked_config(args)
    if config is None:
        return 2

    try:
        raw = json.load(sys.stdin) if args.event == "-" else load_json_file(Path(args.event).expanduser())
    except (OSError, ValueError) as exc:
        print(f"Event error: cannot load {args.event}: {exc}", file=sys.stderr)
        return 2

    try:
        event = BootstrapEvent.from_mapping(raw)
    except DispatcherError as exc:
        print(f"Event error: {exc}", file=sys.stderr)
        return 2

    outcome = handle_bootstrap(event, config=config, generator=build_generator(config, args.router_endpoint))
    print(
        dump_json(
            {
                "status": outcome.status,
                "reason": outcome.reason,
                "removed_files": outcome.removed_files,
                EVENT_FILES_KEY: list(event.bootstrap_files),
            }
        )
    )
    return 1 if outcome.status == "failed" else 0


def build_generator(config: DispatcherConfig, endpoint_override: str | None = None) -> TextGenerator | None:
    """HTTP generator for the configured router endpoint, or None when none is set."""
    endpoint = endpoint_override or config.router_endpoint
    if not endpoint:
        return None
    return OpenAICompatibleGenerator(
        endpoint,
        api_key=os.environ.get(ROUTER_API_KEY_ENV),
        timeout=config.semantic_timeout_seconds,
    )


def _load_checked_config(args: argparse.Namespace) -> DispatcherConfig | None:
    errors = validate_config_file(args.root, args.config, config_explicit=args.config is not None)
    if errors:
        print(format_errors(errors), file=sys.stderr)
        return None
    try:
        return load_config(args.root, args.config)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return None
