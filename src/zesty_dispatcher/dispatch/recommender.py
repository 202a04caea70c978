"""Batched semantic recommendation through an external text generator.

One prompt covers every candidate, so a selector run makes at most one
external call regardless of how many skills are installed. Every failure mode
collapses into a degraded :class:`Recommendation` instead of an exception.
"""

from __future__ import annotations

import json
import logging
import threading
from collections.abc import Sequence
from typing import Any

from zesty_dispatcher.clients.base import TextGenerator, coerce_reply
from zesty_dispatcher.constants.config import DEFAULT_ROUTER_MODEL, DEFAULT_SEMANTIC_TIMEOUT_SECONDS
from zesty_dispatcher.constants.recommender import (
    JSON_ARRAY_PATTERN,
    ROUTER_PROMPT_TEMPLATE,
    ROUTER_TEMPERATURE,
)
from zesty_dispatcher.model import Recommendation

logger = logging.getLogger(__name__)


def build_router_prompt(query: str, candidates: Sequence[str]) -> str:
    """Render the single instruction sent to the router model."""
    return ROUTER_PROMPT_TEMPLATE.format(query=query, candidates=json.dumps(list(candidates)))


def parse_recommended_names(text: str) -> list[str]:
    """Extract the first JSON array from *text* and return its string entries.

    Raises ``ValueError`` when no array is present or it is not valid JSON.
    """
    match = JSON_ARRAY_PATTERN.search(text)
    if match is None:
        raise ValueError("response did not contain a JSON array")
    parsed = json.loads(match.group(0))
    if not isinstance(parsed, list):
        raise ValueError("response array is not a JSON list")
    return [item for item in parsed if isinstance(item, str)]


def recommend(
    query: str,
    candidates: Sequence[str],
    *,
    generator: TextGenerator | None,
    model: str = DEFAULT_ROUTER_MODEL,
    timeout: float | None = DEFAULT_SEMANTIC_TIMEOUT_SECONDS,
) -> Recommendation:
    """Ask *generator* which of *candidates* fit *query*.

    Names the generator invents (absent from *candidates*) are dropped.
    """
    if not candidates:
        return Recommendation.unavailable("no candidates to recommend")
    if generator is None:
        return Recommendation.unavailable("no text generator configured")

    prompt = build_router_prompt(query, candidates)
    try:
        raw_reply = _generate_with_timeout(generator, model=model, prompt=prompt, timeout=timeout)
    except TimeoutError:
        logger.warning("Semantic dispatch timed out after %ss", timeout)
        return Recommendation.failed(f"router call timed out after {timeout}s")
    except Exception as exc:
        logger.warning("Semantic dispatch check failed: %s", exc)
        return Recommendation.failed(f"router call failed: {exc}")

    try:
        names = parse_recommended_names(coerce_reply(raw_reply).body)
    except ValueError as exc:
        logger.warning("Semantic dispatch reply was unusable: %s", exc)
        return Recommendation.failed(f"unparsable router reply: {exc}")

    allowed = set(candidates)
    unknown = sorted(set(names) - allowed)
    if unknown:
        logger.debug("Dropping recommended names outside the candidate set: %s", ", ".join(unknown))
    return Recommendation.recommended(frozenset(name for name in names if name in allowed))


def _generate_with_timeout(
    generator: TextGenerator,
    *,
    model: str,
    prompt: str,
    timeout: float | None,
) -> Any:
    """Run the generator on a daemon thread and wait at most *timeout* seconds.

    A call that outlives the timeout keeps running in the background but does
    not hold up interpreter exit.
    """
    outcome: dict[str, Any] = {}

    def run() -> None:
        try:
            outcome["reply"] = generator.generate_text(
                model=model,
                messages=[{"role": "user", "content": prompt}],
                temperature=ROUTER_TEMPERATURE,
            )
        except Exception as exc:
            outcome["error"] = exc

    worker = threading.Thread(target=run, name="zesty-router", daemon=True)
    worker.start()
    worker.join(timeout)
    if worker.is_alive():
        raise TimeoutError(f"router call still running after {timeout}s")
    if "error" in outcome:
        raise outcome["error"]
    return outcome.get("reply")
