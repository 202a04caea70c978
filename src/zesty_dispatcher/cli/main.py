"""CLI entrypoint for Zesty Dispatcher."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from zesty_dispatcher import __version__
from zesty_dispatcher.cli.handlers import handle_dispatch, handle_rewrite, handle_validate_config
from zesty_dispatcher.constants.branding import CLI_DESCRIPTION


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="zesty-dispatcher",
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    dispatch = subparsers.add_parser("dispatch", help="Rank installed skills against a query")
    dispatch.add_argument("-q", "--query", required=True, help="The user's query or intent")
    dispatch.add_argument("-d", "--skills-dir", type=Path, default=None, help="Skills directory to scan")
    _add_config_arguments(dispatch)
    dispatch.add_argument(
        "--enable-tool",
        action="store_true",
        help="Run even when enableTool is false in the config",
    )
    dispatch.add_argument("-o", "--output", type=Path, default=None, help="Write the JSON report to this file")

    rewrite = subparsers.add_parser("rewrite", help="Apply the bootstrap filter to a host event JSON file")
    rewrite.add_argument("-e", "--event", required=True, help="Event JSON file, or - for stdin")
    _add_config_arguments(rewrite)

    validate = subparsers.add_parser("validate-config", help="Validate configuration without dispatching")
    validate.add_argument("-r", "--root", type=Path, default=Path("."), help="Directory holding the config file")
    validate.add_argument("-c", "--config", type=Path, help="Explicit config file")

    return parser


def _add_config_arguments(subparser: argparse.ArgumentParser) -> None:
    subparser.add_argument("-r", "--root", type=Path, default=Path("."), help="Directory holding the config file")
    subparser.add_argument("-c", "--config", type=Path, help="Explicit config file")
    subparser.add_argument(
        "--router-endpoint",
        default=None,
        help="OpenAI-compatible chat completions URL for semantic recommendations",
    )
    subparser.add_argument("-v", "--verbose", action="store_true", help="Show debug diagnostics")


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    level = logging.DEBUG if getattr(args, "verbose", False) else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s %(message)s")

    if args.command == "validate-config":
        return handle_validate_config(args)
    if args.command == "dispatch":
        return handle_dispatch(args)
    if args.command == "rewrite":
        return handle_rewrite(args)

    parser.error(f"Unsupported command: {args.command}")
    return 2
