"""Collect-all validation records for dispatcher config files."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ValidationError:
    """One config problem, keyed by a stable code and the offending key."""

    code: str
    path: str
    field: str
    message: str
    hint: str = ""

    def format(self) -> str:
        """Render as ``[CODE] path (field): message (hint)``."""
        location = f"{self.path} ({self.field})" if self.field else self.path
        rendered = f"[{self.code}] {location}: {self.message}"
        if self.hint:
            rendered = f"{rendered} ({self.hint})"
        return rendered


def format_errors(errors: list[ValidationError]) -> str:
    """Format errors one per line, ordered by code then field."""
    ordered = sorted(errors, key=lambda error: (error.code, error.field, error.path))
    return "\n".join(error.format() for error in ordered)
