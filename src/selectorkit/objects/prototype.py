"""Typed values: parsed JSON data paired with a behavior set.

A behavior set is either a class, whose methods, properties, static and
class methods become available on the value, or a mapping of names to
callables that receive the value as their first argument. The data itself
is kept as parsed and is never copied into the behavior set.

The wrapper exposes no public attributes of its own, so every data field is
reachable by name. Use :func:`data_of`, :func:`behavior_of` and
:func:`is_instance` to inspect the wrapper itself.

Example::

    class Circle:
        def get_area(self):
            return 3.14159 * self.radius ** 2

    c = from_json(Circle, '{"radius": 10}')
    c.radius          # 10
    c.get_area()      # 314.159
"""

from __future__ import annotations

import inspect
import logging
import types
from collections.abc import Callable, Mapping
from typing import Any

from selectorkit.objects.serialization import parse_json

__all__ = [
    "Behavior",
    "TypedValue",
    "attach_behavior",
    "behavior_of",
    "data_of",
    "from_json",
    "is_instance",
]

log = logging.getLogger("selectorkit.objects")

Behavior = type | Mapping[str, Callable[..., Any]]

_MISSING = object()


class TypedValue:
    """Plain data wrapped together with a reference to its behavior set.

    Attribute lookup checks the data fields first, then the behavior set.
    Assigning an attribute writes the field into the data mapping.
    """

    __slots__ = ("_data", "_behavior")

    def __init__(self, data: Any, behavior: Behavior) -> None:
        object.__setattr__(self, "_data", data)
        object.__setattr__(self, "_behavior", behavior)

    # --- attribute protocol ---------------------------------------------------

    def __getattr__(self, name: str) -> Any:
        if name in TypedValue.__slots__ or (name.startswith("__") and name.endswith("__")):
            raise AttributeError(name)
        data = self._data
        if isinstance(data, dict) and name in data:
            return data[name]
        member = _lookup(self, name)
        if member is _MISSING:
            raise AttributeError(
                f"{_behavior_name(self._behavior)!r} value has no attribute {name!r}"
            )
        return member

    def __setattr__(self, name: str, value: Any) -> None:
        # copy/pickle restore slot state through setattr
        if name in TypedValue.__slots__:
            object.__setattr__(self, name, value)
            return
        if not isinstance(self._data, dict):
            raise AttributeError(f"cannot set {name!r} on non-object data")
        self._data[name] = value

    def __getitem__(self, key: Any) -> Any:
        return self._data[key]

    # --- dunder helpers -------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TypedValue):
            return NotImplemented
        return self._behavior is other._behavior and self._data == other._data

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"TypedValue({_behavior_name(self._behavior)}, {self._data!r})"


def _behavior_name(behavior: Behavior) -> str:
    if isinstance(behavior, type):
        return behavior.__name__
    return "mapping"


def _lookup(value: TypedValue, name: str) -> Any:
    behavior = behavior_of(value)
    if isinstance(behavior, type):
        try:
            raw = inspect.getattr_static(behavior, name)
        except AttributeError:
            return _MISSING
        if hasattr(raw, "__get__"):
            return raw.__get__(value, behavior)
        return raw
    func = behavior.get(name, _MISSING)
    if func is _MISSING:
        return _MISSING
    return types.MethodType(func, value)


# --- public helpers -----------------------------------------------------------


def data_of(value: TypedValue) -> Any:
    """Return the parsed data held by *value* (not a copy)."""
    return object.__getattribute__(value, "_data")


def behavior_of(value: TypedValue) -> Behavior:
    """Return the behavior set attached to *value*."""
    return object.__getattribute__(value, "_behavior")


def is_instance(value: Any, behavior: Behavior) -> bool:
    """Return True if *value* carries *behavior* or a subclass of it."""
    if not isinstance(value, TypedValue):
        return False
    attached = behavior_of(value)
    if attached is behavior:
        return True
    return (
        isinstance(attached, type)
        and isinstance(behavior, type)
        and issubclass(attached, behavior)
    )


def attach_behavior(value: Any, behavior: Behavior) -> TypedValue:
    """Give a plain parsed *value* the operations defined by *behavior*."""
    return TypedValue(value, behavior)


def from_json(behavior: Behavior, text: str) -> TypedValue:
    """Parse JSON *text* and attach *behavior* to the resulting value.

    Malformed JSON propagates as ``json.JSONDecodeError``.
    """
    typed = attach_behavior(parse_json(text), behavior)
    log.debug("Parsed %s value from JSON", _behavior_name(behavior))
    return typed
