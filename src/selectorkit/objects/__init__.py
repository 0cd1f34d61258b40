"""Object utilities: rectangle factory, JSON helpers and typed values."""

from selectorkit.objects.prototype import (
    Behavior,
    TypedValue,
    attach_behavior,
    behavior_of,
    data_of,
    from_json,
    is_instance,
)
from selectorkit.objects.rectangle import Rectangle
from selectorkit.objects.serialization import get_json, parse_json

__all__ = [
    "Rectangle",
    "get_json",
    "parse_json",
    "Behavior",
    "TypedValue",
    "attach_behavior",
    "behavior_of",
    "data_of",
    "from_json",
    "is_instance",
]
