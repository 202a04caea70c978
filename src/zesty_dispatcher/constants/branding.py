"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "ZESTY DISPATCHER"
ASCII_LOGO_LINES: tuple[str, ...] = (
    ">_ ZESTY",
    "     // query-aware skill dispatch",
)
CLI_DESCRIPTION: str = "\n".join((*ASCII_LOGO_LINES, "", f"{BRAND_NAME} skill router"))
