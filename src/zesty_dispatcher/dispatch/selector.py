"""Skill selection: exemptions, one semantic batch, scoring, threshold."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence

from zesty_dispatcher.clients.base import TextGenerator
from zesty_dispatcher.constants.config import (
    DEFAULT_EXEMPTIONS,
    DEFAULT_ROUTER_MODEL,
    DEFAULT_SEMANTIC_TIMEOUT_SECONDS,
)
from zesty_dispatcher.constants.scoring import EXEMPT_REASON, EXEMPT_SENTINEL_SCORE, SELECTION_THRESHOLD
from zesty_dispatcher.dispatch.exemptions import is_exempt
from zesty_dispatcher.dispatch.recommender import recommend
from zesty_dispatcher.dispatch.scoring import name_matches_query, score_candidate
from zesty_dispatcher.model import Recommendation, ScoreBreakdown, SelectionResult, SkillMetadata

logger = logging.getLogger(__name__)

type MetadataLoader = Callable[[str], SkillMetadata]


def select_relevant_skills(
    query: str,
    candidates: Iterable[str],
    *,
    exemptions: Sequence[str] = DEFAULT_EXEMPTIONS,
    generator: TextGenerator | None = None,
    router_model: str = DEFAULT_ROUTER_MODEL,
    metadata_loader: MetadataLoader | None = None,
    semantic_timeout: float | None = DEFAULT_SEMANTIC_TIMEOUT_SECONDS,
) -> SelectionResult:
    """Select the skills relevant to *query* from *candidates*.

    Exempt skills are selected unconditionally with the sentinel score. The
    remaining skills share a single semantic recommendation call and are then
    scored one by one; a skill is selected when its score reaches
    ``SELECTION_THRESHOLD``. ``selected`` keeps the input order.
    """
    ordered = list(dict.fromkeys(candidates))
    exempt = [name for name in ordered if is_exempt(name, exemptions)]
    exempt_set = set(exempt)
    remaining = [name for name in ordered if name not in exempt_set]

    scores: dict[str, ScoreBreakdown] = {
        name: ScoreBreakdown(score=EXEMPT_SENTINEL_SCORE, reasons=(EXEMPT_REASON,)) for name in exempt
    }

    if remaining:
        recommendation = recommend(
            query,
            remaining,
            generator=generator,
            model=router_model,
            timeout=semantic_timeout,
        )
    else:
        recommendation = Recommendation.unavailable("no candidates to recommend")

    passing: set[str] = set()
    for name in remaining:
        metadata = metadata_loader(name) if metadata_loader is not None else SkillMetadata()
        breakdown = score_candidate(name, query, metadata, recommendation.names)
        scores[name] = breakdown
        if breakdown.score >= SELECTION_THRESHOLD:
            passing.add(name)

    selected = tuple(name for name in ordered if name in exempt_set or name in passing)
    logger.debug(
        "Selected %d of %d skills (%d exempt, semantic %s)",
        len(selected),
        len(ordered),
        len(exempt),
        recommendation.status,
    )
    return SelectionResult(
        selected=selected,
        scores=scores,
        exemptions=tuple(exempt),
        name_matches=tuple(name for name in remaining if name_matches_query(name, query)),
        semantic_matches=tuple(name for name in remaining if name in recommendation.names),
        recommendation=recommendation,
    )
