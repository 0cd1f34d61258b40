"""Error hierarchy for the selector builder."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from selectorkit.selector.model import FragmentKind

DUPLICATE_MESSAGE = (
    "Element, id and pseudo-element should not occur more then one time "
    "inside the selector"
)
ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: element, id, "
    "class, attribute, pseudo-class, pseudo-element"
)


class SelectorError(Exception):
    """Base error for all selector building errors."""

    def __init__(self, message: str, *, kind: FragmentKind | None = None) -> None:
        super().__init__(message)
        self.kind = kind


class DuplicateFragmentError(SelectorError):
    """An element, id or pseudo-element was given twice for one selector."""

    def __init__(self, kind: FragmentKind) -> None:
        super().__init__(DUPLICATE_MESSAGE, kind=kind)


class OrderViolationError(SelectorError):
    """A fragment was added after a fragment of a later category.

    Attributes:
        kind: The category of the rejected fragment.
        previous: The highest category already present in the selector.
    """

    def __init__(self, kind: FragmentKind, previous: FragmentKind) -> None:
        super().__init__(ORDER_MESSAGE, kind=kind)
        self.previous = previous
