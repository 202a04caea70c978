"""Constants for bootstrap manifest rewriting."""

from __future__ import annotations

import re

SKILL_PATH_PATTERN: re.Pattern[str] = re.compile(r"(?:^|[\\/])skills[\\/]([^\\/]+)[\\/]")

REPORT_RECORD_PATH: str = "zesty-dispatcher-report.md"
REPORT_TITLE: str = "# Zesty Dispatcher"

QUERY_LOG_PREVIEW_CHARS: int = 30

EVENT_CONTEXT_KEY: str = "context"
EVENT_HISTORY_KEY: str = "sessionEntry"
EVENT_FILES_KEY: str = "bootstrapFiles"
USER_ROLE: str = "user"
