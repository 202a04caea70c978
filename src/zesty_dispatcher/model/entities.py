"""Request-scoped entities produced while ranking skills."""

from __future__ import annotations

from dataclasses import dataclass, field

from zesty_dispatcher.constants.recommender import (
    RECOMMENDATION_FAILED,
    RECOMMENDATION_RECOMMENDED,
    RECOMMENDATION_UNAVAILABLE,
)
from zesty_dispatcher.types import JsonObject, RecommendationStatus, RewriteStatus


@dataclass(frozen=True)
class SkillMetadata:
    """Declared name and description from a skill descriptor header."""

    name: str = ""
    description: str = ""

    @property
    def is_empty(self) -> bool:
        return not self.name and not self.description


@dataclass(frozen=True)
class ScoreBreakdown:
    """Score of one candidate plus the reasons that add up to it."""

    score: int
    reasons: tuple[str, ...] = ()

    def to_dict(self) -> JsonObject:
        return {"score": self.score, "reasons": list(self.reasons)}


@dataclass(frozen=True)
class Recommendation:
    """Outcome of the batched semantic recommendation call.

    ``names`` is only populated when ``status`` is ``"recommended"``; the other
    two states carry an empty set so callers can always use ``names`` directly.
    """

    status: RecommendationStatus
    names: frozenset[str] = frozenset()
    reason: str | None = None

    @classmethod
    def recommended(cls, names: frozenset[str]) -> Recommendation:
        return cls(status=RECOMMENDATION_RECOMMENDED, names=names)

    @classmethod
    def unavailable(cls, reason: str) -> Recommendation:
        return cls(status=RECOMMENDATION_UNAVAILABLE, reason=reason)

    @classmethod
    def failed(cls, reason: str) -> Recommendation:
        return cls(status=RECOMMENDATION_FAILED, reason=reason)

    @property
    def degraded(self) -> bool:
        return self.status != RECOMMENDATION_RECOMMENDED

    def to_dict(self) -> JsonObject:
        return {
            "status": self.status,
            "names": sorted(self.names),
            "reason": self.reason,
        }


@dataclass(frozen=True)
class SelectionResult:
    """Selected skills for one query with the full per-candidate breakdown."""

    selected: tuple[str, ...]
    scores: dict[str, ScoreBreakdown]
    exemptions: tuple[str, ...] = ()
    name_matches: tuple[str, ...] = ()
    semantic_matches: tuple[str, ...] = ()
    recommendation: Recommendation = field(
        default_factory=lambda: Recommendation.unavailable("no candidates to recommend")
    )

    @property
    def selected_set(self) -> frozenset[str]:
        return frozenset(self.selected)

    def strategies(self) -> JsonObject:
        """Which signal put each selected skill over the line, grouped by signal."""
        return {
            "exemptions": list(self.exemptions),
            "name_matches": list(self.name_matches),
            "semantic_matches": list(self.semantic_matches),
        }


@dataclass(frozen=True)
class RewriteOutcome:
    """What a bootstrap rewrite did to the caller's record list."""

    status: RewriteStatus
    query: str = ""
    selection: SelectionResult | None = None
    kept_files: int = 0
    removed_files: int = 0
    reason: str | None = None
