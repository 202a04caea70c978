"""Per-candidate relevance scoring from lexical and semantic signals."""

from __future__ import annotations

import re
from collections.abc import Collection

from zesty_dispatcher.constants.scoring import (
    DESCRIPTION_POINTS_CAP,
    DESCRIPTION_POINTS_PER_TOKEN,
    MIN_QUERY_TOKEN_LENGTH,
    NAME_MATCH_POINTS,
    SEMANTIC_MATCH_POINTS,
)
from zesty_dispatcher.model import ScoreBreakdown, SkillMetadata


def score_candidate(
    skill_name: str,
    query: str,
    metadata: SkillMetadata,
    recommended: Collection[str],
) -> ScoreBreakdown:
    """Score one skill against *query*.

    Three independent signals are summed:

    * the skill name appears in the query as a whole word (``NAME_MATCH_POINTS``)
    * the semantic recommender returned the skill (``SEMANTIC_MATCH_POINTS``)
    * query keywords appear in the declared description, ``DESCRIPTION_POINTS_PER_TOKEN``
      per keyword, capped at ``DESCRIPTION_POINTS_CAP``

    Each reason string names the points it contributed.
    """
    query_lower = query.lower()
    score = 0
    reasons: list[str] = []

    if name_matches_query(skill_name, query_lower):
        score += NAME_MATCH_POINTS
        reasons.append(f"Name match (+{NAME_MATCH_POINTS})")

    if skill_name in recommended:
        score += SEMANTIC_MATCH_POINTS
        reasons.append(f"Semantic recommendation (+{SEMANTIC_MATCH_POINTS})")

    matched = description_keyword_matches(query_lower, metadata.description)
    if matched:
        points = min(DESCRIPTION_POINTS_CAP, DESCRIPTION_POINTS_PER_TOKEN * len(matched))
        score += points
        reasons.append(f"Description keywords (+{points}): {', '.join(matched)}")

    return ScoreBreakdown(score=score, reasons=tuple(reasons))


def name_matches_query(skill_name: str, query: str) -> bool:
    """Whole-word, case-insensitive search for the literal skill name."""
    pattern = rf"\b{re.escape(skill_name)}\b"
    return re.search(pattern, query.lower(), re.IGNORECASE) is not None


def description_keyword_matches(query: str, description: str) -> list[str]:
    """Return query tokens (length > 2, duplicates kept) found as words in *description*."""
    if not description:
        return []
    description_lower = description.lower()
    return [
        token
        for token in query.lower().split()
        if len(token) >= MIN_QUERY_TOKEN_LENGTH
        and re.search(rf"\b{re.escape(token)}\b", description_lower, re.IGNORECASE) is not None
    ]
