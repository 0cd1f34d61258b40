"""Thin JSON helpers around the standard ``json`` module."""

from __future__ import annotations

import dataclasses
import json
from typing import Any

__all__ = ["get_json", "parse_json"]


def _default(value: Any) -> Any:
    # Imported lazily: prototype depends on this module.
    from selectorkit.objects.prototype import TypedValue, data_of

    if isinstance(value, TypedValue):
        return data_of(value)
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def get_json(value: Any, indent: int | None = None) -> str:
    """Return the JSON text of *value*.

    Output is compact unless *indent* is given. Keys keep the order of the
    underlying mapping; dataclass instances serialise as their fields.

    Example::

        get_json([1, 2, 3])                  # '[1,2,3]'
        get_json(Rectangle(10, 20))          # '{"width":10,"height":20}'
    """
    separators = (",", ":") if indent is None else None
    return json.dumps(value, indent=indent, separators=separators, default=_default)


def parse_json(text: str) -> Any:
    """Parse JSON *text* into plain Python values.

    Raises ``json.JSONDecodeError`` on malformed input.
    """
    return json.loads(text)
