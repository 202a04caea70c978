"""Synthetic diagnostic record appended to a rewritten manifest."""

from __future__ import annotations

from zesty_dispatcher.constants.manifest import REPORT_RECORD_PATH, REPORT_TITLE
from zesty_dispatcher.constants.scoring import SELECTION_THRESHOLD
from zesty_dispatcher.model import SelectionResult


def render_report_content(selection: SelectionResult) -> str:
    """Markdown summary of the selected skills and the threshold applied."""
    lines = [
        REPORT_TITLE,
        "",
        f"Selection threshold: {SELECTION_THRESHOLD}",
        f"Selected skills ({len(selection.selected)}):",
    ]
    for name in selection.selected:
        breakdown = selection.scores.get(name)
        detail = f" (score {breakdown.score}: {'; '.join(breakdown.reasons)})" if breakdown else ""
        lines.append(f"- {name}{detail}")
    return "\n".join(lines) + "\n"


def build_report_record(selection: SelectionResult) -> dict[str, str]:
    return {"path": REPORT_RECORD_PATH, "content": render_report_content(selection)}
