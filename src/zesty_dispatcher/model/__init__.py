"""Core data models for Zesty Dispatcher."""

from .entities import (
    Recommendation,
    RewriteOutcome,
    ScoreBreakdown,
    SelectionResult,
    SkillMetadata,
)
from .events import BootstrapEvent, Turn

__all__ = [
    "BootstrapEvent",
    "Recommendation",
    "RewriteOutcome",
    "ScoreBreakdown",
    "SelectionResult",
    "SkillMetadata",
    "Turn",
]
