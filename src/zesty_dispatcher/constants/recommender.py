"""Prompt template and reply parsing for semantic recommendations."""

from __future__ import annotations

import re

ROUTER_TEMPERATURE: float = 0.1

JSON_ARRAY_PATTERN: re.Pattern[str] = re.compile(r"\[.*\]", re.DOTALL)

ROUTER_PROMPT_TEMPLATE: str = """\
You are a smart skill dispatcher for an AI agent.
User Query: "{query}"

Available Skills:
{candidates}

Task:
Select the skills from the list above that are highly relevant to handling the user's query.
Return ONLY a JSON array of strings (e.g. ["skill-a", "skill-b"]).
If none are relevant, return [].
Do not explain."""

RECOMMENDATION_RECOMMENDED: str = "recommended"
RECOMMENDATION_UNAVAILABLE: str = "unavailable"
RECOMMENDATION_FAILED: str = "failed"
