"""``agent:bootstrap`` boundary: query extraction and the outermost error guard."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

from zesty_dispatcher.clients.base import TextGenerator
from zesty_dispatcher.config import DispatcherConfig, config_from_mapping
from zesty_dispatcher.constants.manifest import QUERY_LOG_PREVIEW_CHARS
from zesty_dispatcher.dispatch.manifest import rewrite_manifest
from zesty_dispatcher.exceptions import EventError
from zesty_dispatcher.model import BootstrapEvent, RewriteOutcome

logger = logging.getLogger(__name__)

type BootstrapHook = Callable[[Mapping[str, Any]], RewriteOutcome]


def handle_bootstrap(
    event: BootstrapEvent | Mapping[str, Any],
    *,
    config: DispatcherConfig | None = None,
    generator: TextGenerator | None = None,
) -> RewriteOutcome:
    """Filter the event's bootstrap files down to the skills relevant to the last user turn.

    Never raises. Without a user query the file list is left untouched; on any
    unexpected failure the list is also left untouched and the outcome is
    ``"failed"``.
    """
    config = config or DispatcherConfig()
    try:
        parsed = event if isinstance(event, BootstrapEvent) else BootstrapEvent.from_mapping(event)
    except EventError as exc:
        logger.error("Bootstrap hook received a malformed event: %s", exc)
        return RewriteOutcome(status="failed", reason=str(exc))

    query = parsed.latest_user_query()
    if not query.strip():
        return RewriteOutcome(
            status="skipped",
            kept_files=len(parsed.bootstrap_files),
            reason="no user query in session history",
        )

    try:
        outcome = rewrite_manifest(parsed.bootstrap_files, query, config=config, generator=generator)
    except Exception as exc:
        logger.exception("Bootstrap hook error: %s", exc)
        return RewriteOutcome(status="failed", query=query, kept_files=len(parsed.bootstrap_files), reason=str(exc))

    if outcome.removed_files > 0 and outcome.selection is not None:
        logger.info(
            'Auto-filter: "%s..." -> Kept %d skills, Removed %d files.',
            query[:QUERY_LOG_PREVIEW_CHARS],
            len(outcome.selection.selected),
            outcome.removed_files,
        )
    return outcome


def make_bootstrap_hook(
    plugin_config: Mapping[str, Any] | None = None,
    *,
    generator: TextGenerator | None = None,
) -> BootstrapHook:
    """Resolve host plugin config once and return a hook bound to it."""
    config = config_from_mapping(plugin_config)

    def hook(event: Mapping[str, Any]) -> RewriteOutcome:
        return handle_bootstrap(event, config=config, generator=generator)

    return hook
