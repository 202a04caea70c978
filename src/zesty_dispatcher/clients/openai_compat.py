"""Text generator backed by an OpenAI-compatible chat-completions endpoint."""

from __future__ import annotations

import logging
from typing import Any

import requests

from zesty_dispatcher.clients.base import ChatMessage, GenerationReply
from zesty_dispatcher.exceptions import GenerationError

logger = logging.getLogger(__name__)


class OpenAICompatibleGenerator:
    """POSTs chat requests to *endpoint* and returns the first choice's text."""

    def __init__(self, endpoint: str, api_key: str | None = None, timeout: float = 60) -> None:
        self.endpoint = endpoint
        self.api_key = api_key
        self.timeout = timeout

    def generate_text(
        self,
        *,
        model: str,
        messages: list[ChatMessage],
        temperature: float,
    ) -> GenerationReply:
        payload = {"model": model, "messages": messages, "temperature": temperature}
        headers = {"Content-Type": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"

        logger.debug("Router request to %s with model %s", self.endpoint, model)
        try:
            response = requests.post(self.endpoint, headers=headers, json=payload, timeout=self.timeout)
            response.raise_for_status()
            body = response.json()
        except requests.Timeout as exc:
            raise GenerationError(f"router request to {self.endpoint} timed out") from exc
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else "unknown"
            raise GenerationError(f"router request failed with HTTP {status}") from exc
        except (requests.RequestException, ValueError) as exc:
            raise GenerationError(f"router request failed: {exc}") from exc

        return GenerationReply(text=_first_choice_text(body))


def _first_choice_text(body: Any) -> str:
    if not isinstance(body, dict):
        raise GenerationError("router response must be a JSON object")
    choices = body.get("choices")
    if not isinstance(choices, list) or not choices:
        raise GenerationError("router response has no choices")
    message = choices[0].get("message") if isinstance(choices[0], dict) else None
    content = message.get("content") if isinstance(message, dict) else None
    if not isinstance(content, str):
        raise GenerationError("router response choice has no text content")
    return content
