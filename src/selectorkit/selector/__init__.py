from selectorkit.selector.base import Renderable
from selectorkit.selector.combinator import Combinator, CombinedSelector, combine
from selectorkit.selector.errors import (
    DuplicateFragmentError,
    OrderViolationError,
    SelectorError,
)
from selectorkit.selector.facade import CssSelectorBuilder, css_selector_builder
from selectorkit.selector.model import FragmentKind, SelectorBuilder

__all__ = [
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
