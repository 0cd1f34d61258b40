"""selectorkit: CSS selector builder and small object utilities."""

from __future__ import annotations

__version__ = "0.1.0"

from selectorkit.config import SelectorkitConfig
from selectorkit.objects import (
    Behavior,
    Rectangle,
    TypedValue,
    attach_behavior,
    behavior_of,
    data_of,
    from_json,
    get_json,
    is_instance,
    parse_json,
)
from selectorkit.selector import (
    CombinedSelector,
    Combinator,
    CssSelectorBuilder,
    DuplicateFragmentError,
    FragmentKind,
    OrderViolationError,
    Renderable,
    SelectorBuilder,
    SelectorError,
    combine,
    css_selector_builder,
)

__all__ = [
    "__version__",
    "SelectorkitConfig",
    # objects
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
    # selector
    "Renderable",
    "FragmentKind",
    "SelectorBuilder",
    "Combinator",
    "CombinedSelector",
    "combine",
    "CssSelectorBuilder",
    "css_selector_builder",
    "SelectorError",
    "DuplicateFragmentError",
    "OrderViolationError",
]
