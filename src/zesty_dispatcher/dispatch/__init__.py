"""Skill ranking, selection, and bootstrap manifest rewriting."""

from __future__ import annotations

from .exemptions import is_exempt
from .hook import handle_bootstrap, make_bootstrap_hook
from .manifest import apply_manifest, group_records, plan_manifest, rewrite_manifest, skill_name_for_path
from .recommender import recommend
from .scoring import score_candidate
from .selector import select_relevant_skills
from .tool import discover_skill_names, dispatch_skills

__all__ = [
    "apply_manifest",
    "discover_skill_names",
    "dispatch_skills",
    "group_records",
    "handle_bootstrap",
    "is_exempt",
    "make_bootstrap_hook",
    "plan_manifest",
    "recommend",
    "rewrite_manifest",
    "score_candidate",
    "select_relevant_skills",
    "skill_name_for_path",
]
