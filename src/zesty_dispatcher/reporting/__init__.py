"""Diagnostic record and dispatch report rendering."""

from __future__ import annotations

from .diagnostic import build_report_record, render_report_content
from .dispatch_report import build_dispatch_report

__all__ = ["build_dispatch_report", "build_report_record", "render_report_content"]
