"""JSON payload returned by the manual dispatch path."""

from __future__ import annotations

from zesty_dispatcher.constants.scoring import SELECTION_THRESHOLD
from zesty_dispatcher.model import SelectionResult
from zesty_dispatcher.types import JsonObject


def build_dispatch_report(query: str, selection: SelectionResult) -> JsonObject:
    """Render a selection as the dispatch report payload.

    The shape is described by ``schemas/dispatch-report.schema.json``.
    """
    return {
        "query": query,
        "strategies": selection.strategies(),
        "recommended_skills": list(selection.selected),
        "count": len(selection.selected),
        "threshold": SELECTION_THRESHOLD,
        "scores": {name: breakdown.to_dict() for name, breakdown in selection.scores.items()},
        "semantic": {
            "status": selection.recommendation.status,
            "reason": selection.recommendation.reason,
        },
    }
