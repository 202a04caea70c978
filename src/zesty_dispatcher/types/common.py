"""Cross-module type aliases."""

from __future__ import annotations

from typing import Literal

type RecommendationStatus = Literal["recommended", "unavailable", "failed"]
type RewriteStatus = Literal["skipped", "rewritten", "failed"]

type JsonScalar = str | int | float | bool | None
type JsonValue = JsonScalar | list["JsonValue"] | dict[str, "JsonValue"]
type JsonObject = dict[str, JsonValue]
