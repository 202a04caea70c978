"""Signal weights and the selection threshold."""

from __future__ import annotations

# Either full-weight signal alone reaches the threshold; description density
# alone never does.
NAME_MATCH_POINTS: int = 60
SEMANTIC_MATCH_POINTS: int = 60
DESCRIPTION_POINTS_PER_TOKEN: int = 10
DESCRIPTION_POINTS_CAP: int = 30
SELECTION_THRESHOLD: int = 60

MIN_QUERY_TOKEN_LENGTH: int = 3

EXEMPT_SENTINEL_SCORE: int = 999
EXEMPT_REASON: str = "Exemption"
