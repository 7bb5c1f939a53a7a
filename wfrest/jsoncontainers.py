"""Convenience constructors for JSON objects and arrays."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from .jsonvalue import Json


class JsonObject(Json):
    """A JSON object built from key/value pairs or a mapping.

    Members are added in order. A repeated key replaces the earlier value
    and keeps its first position.
    """

    def __init__(self, pairs: Mapping[str, Any] | Iterable[tuple[str, Any]] | None = None) -> None:
        super().__init__({})
        if pairs is None:
            return
        entries = pairs.items() if isinstance(pairs, Mapping) else pairs
        for key, value in entries:
            self.push_back(key, value)


class JsonArray(Json):
    """A JSON array built from a sequence of values.

    Each item becomes exactly one element; a list item becomes a nested array.
    """

    def __init__(self, items: Iterable[Any] | None = None) -> None:
        super().__init__([])
        if items is None:
            return
        for item in items:
            self.push_back(Json(item))