"""Constants for dispatch reports and JSON output."""

from __future__ import annotations

REPORT_TEMP_PREFIX: str = ".zesty-report-"
REPORT_TEMP_SUFFIX: str = ".json"
JSON_INDENT: int = 2
