"""Always-include rules for skills."""

from __future__ import annotations

from collections.abc import Iterable


def is_exempt(skill_name: str, patterns: Iterable[str]) -> bool:
    """Return True when *skill_name* matches an exact name or a ``prefix*`` pattern."""
    for pattern in patterns:
        if pattern.endswith("*"):
            if skill_name.startswith(pattern[:-1]):
                return True
        elif skill_name == pattern:
            return True
    return False
