"""Tests for the HTTP text generator and reply normalization."""

from __future__ import annotations

from types import SimpleNamespace
from typing import Any
from unittest.mock import MagicMock, patch

import pytest
import requests

from zesty_dispatcher.clients import GenerationReply, OpenAICompatibleGenerator, coerce_reply
from zesty_dispatcher.exceptions import GenerationError

ENDPOINT = "http://router.local/v1/chat/completions"
MESSAGES = [{"role": "user", "content": "pick skills"}]


def _response(body: Any, status_code: int = 200) -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    response.json.return_value = body
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(response=response)
    return response


@patch("zesty_dispatcher.clients.openai_compat.requests.post")
def test_generate_text_posts_chat_request(mock_post: MagicMock) -> None:
    mock_post.return_value = _response({"choices": [{"message": {"content": '["pdf"]'}}]})
    generator = OpenAICompatibleGenerator(ENDPOINT, api_key="secret", timeout=5)

    reply = generator.generate_text(model="local/router", messages=MESSAGES, temperature=0.1)

    assert reply == GenerationReply(text='["pdf"]')
    mock_post.assert_called_once()
    args, kwargs = mock_post.call_args
    assert args == (ENDPOINT,)
    assert kwargs["json"] == {"model": "local/router", "messages": MESSAGES, "temperature": 0.1}
    assert kwargs["headers"]["Authorization"] == "Bearer secret"
    assert kwargs["timeout"] == 5


@patch("zesty_dispatcher.clients.openai_compat.requests.post")
def test_generate_text_without_api_key_sends_no_auth(mock_post: MagicMock) -> None:
    mock_post.return_value = _response({"choices": [{"message": {"content": "[]"}}]})

    OpenAICompatibleGenerator(ENDPOINT).generate_text(model="m", messages=MESSAGES, temperature=0.1)

    assert "Authorization" not in mock_post.call_args.kwargs["headers"]


@patch("zesty_dispatcher.clients.openai_compat.requests.post")
def test_http_error_becomes_generation_error(mock_post: MagicMock) -> None:
    mock_post.return_value = _response({}, status_code=503)

    with pytest.raises(GenerationError, match="HTTP 503"):
        OpenAICompatibleGenerator(ENDPOINT).generate_text(model="m", messages=MESSAGES, temperature=0.1)


@patch("zesty_dispatcher.clients.openai_compat.requests.post")
def test_timeout_becomes_generation_error(mock_post: MagicMock) -> None:
    mock_post.side_effect = requests.Timeout("slow")

    with pytest.raises(GenerationError, match="timed out"):
        OpenAICompatibleGenerator(ENDPOINT).generate_text(model="m", messages=MESSAGES, temperature=0.1)


@patch("zesty_dispatcher.clients.openai_compat.requests.post")
def test_connection_error_becomes_generation_error(mock_post: MagicMock) -> None:
    mock_post.side_effect = requests.ConnectionError("refused")

    with pytest.raises(GenerationError, match="refused"):
        OpenAICompatibleGenerator(ENDPOINT).generate_text(model="m", messages=MESSAGES, temperature=0.1)


@pytest.mark.parametrize(
    "body",
    [[], {"choices": []}, {"choices": [{"message": {}}]}, {"choices": ["text"]}],
    ids=["list_body", "no_choices", "no_content", "bare_choice"],
)
@patch("zesty_dispatcher.clients.openai_compat.requests.post")
def test_malformed_body_becomes_generation_error(mock_post: MagicMock, body: Any) -> None:
    mock_post.return_value = _response(body)

    with pytest.raises(GenerationError):
        OpenAICompatibleGenerator(ENDPOINT).generate_text(model="m", messages=MESSAGES, temperature=0.1)


def test_coerce_reply_shapes() -> None:
    assert coerce_reply('["a"]') == GenerationReply(text='["a"]')
    assert coerce_reply({"content": "[]"}).body == "[]"
    assert coerce_reply({"text": "", "content": "fallback"}).body == "fallback"
    assert coerce_reply(SimpleNamespace(text=None, content="attr")).body == "attr"
    assert coerce_reply(None).body == ""
    assert coerce_reply({"text": 5}).body == ""
