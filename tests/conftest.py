"""Shared pytest fixtures for repository-local test data."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest


class StubGenerator:
    """Text generator double that records calls and replays a canned reply."""

    def __init__(self, reply: Any = None, *, error: Exception | None = None) -> None:
        self.reply = reply
        self.error = error
        self.calls: list[dict[str, Any]] = []

    def generate_text(self, *, model: str, messages: list[dict[str, str]], temperature: float) -> Any:
        self.calls.append({"model": model, "messages": messages, "temperature": temperature})
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture(scope="session")
def fixtures_root() -> Path:
    """Return root directory for test fixtures."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture(scope="session")
def skills_root(fixtures_root: Path) -> Path:
    """Return the fixture skills directory."""
    return fixtures_root / "skills"


@pytest.fixture()
def stub_generator() -> Callable[..., StubGenerator]:
    """Factory for :class:`StubGenerator` instances."""

    def factory(reply: Any = None, *, error: Exception | None = None) -> StubGenerator:
        return StubGenerator(reply, error=error)

    return factory
