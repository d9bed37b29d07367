"""Opaque pass-through value produced by httpget."""

from __future__ import annotations

import json
from typing import Any


class Structured:
    """Wraps a decoded response body (nested dicts/lists/scalars or text).

    The evaluator never looks inside; the value only travels through
    bindings, lists and function arguments.
    """

    __slots__ = ("data",)

    def __init__(self, data: Any):
        self.data = data

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Structured) and self.data == other.data

    # mutable payload, equality by value
    __hash__ = None

    def __repr__(self) -> str:
        return f"Structured({self.data!r})"

    def __str__(self) -> str:
        return json.dumps(self.data, indent=2, ensure_ascii=False)
