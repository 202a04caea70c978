"""Shared type aliases for Zesty Dispatcher."""

from .common import JsonObject, JsonScalar, JsonValue, RecommendationStatus, RewriteStatus

__all__ = [
    "JsonObject",
    "JsonScalar",
    "JsonValue",
    "RecommendationStatus",
    "RewriteStatus",
]
