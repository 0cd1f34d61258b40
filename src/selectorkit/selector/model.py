"""Selector model: fragment categories and the compound selector builder.

A compound selector is written as::

    element#id.class[attr]:pseudo-class::pseudo-element

Classes, attributes and pseudo-classes may occur several times; element, id
and pseudo-element at most once. Fragments must be added in category order.
"""

from __future__ import annotations

import logging
from enum import IntEnum

from selectorkit.selector.errors import DuplicateFragmentError, OrderViolationError

__all__ = ["FragmentKind", "SelectorBuilder"]

log = logging.getLogger("selectorkit.selector")


class FragmentKind(IntEnum):
    """Fragment category; the value is its rank in the required CSS order."""

    ELEMENT = 1
    ID = 2
    CLASS = 3
    ATTRIBUTE = 4
    PSEUDO_CLASS = 5
    PSEUDO_ELEMENT = 6


class SelectorBuilder:
    """Mutable accumulator for one compound CSS selector.

    Every fragment method validates before mutating and returns ``self`` so
    calls can be chained. A call that raises leaves the builder untouched.
    """

    def __init__(self) -> None:
        self._element = ""
        self._id = ""
        self._classes: list[str] = []
        self._attributes: list[str] = []
        self._pseudo_classes: list[str] = []
        self._pseudo_element = ""
        self._order: list[FragmentKind] = []
        self._highest: FragmentKind | None = None

    # --- fragments ------------------------------------------------------------

    def element(self, value: str) -> SelectorBuilder:
        """Set the type selector, e.g. ``div``."""
        self._check(FragmentKind.ELEMENT, taken=bool(self._element))
        self._element = value
        return self._record(FragmentKind.ELEMENT, value)

    def id(self, value: str) -> SelectorBuilder:
        """Set the id selector (``#value``)."""
        self._check(FragmentKind.ID, taken=bool(self._id))
        self._id = f"#{value}"
        return self._record(FragmentKind.ID, value)

    def class_(self, value: str) -> SelectorBuilder:
        """Append a class selector (``.value``)."""
        self._check(FragmentKind.CLASS)
        self._classes.append(f".{value}")
        return self._record(FragmentKind.CLASS, value)

    def attr(self, value: str) -> SelectorBuilder:
        """Append an attribute selector; *value* is used verbatim inside brackets."""
        self._check(FragmentKind.ATTRIBUTE)
        self._attributes.append(f"[{value}]")
        return self._record(FragmentKind.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> SelectorBuilder:
        """Append a pseudo-class (``:value``)."""
        self._check(FragmentKind.PSEUDO_CLASS)
        self._pseudo_classes.append(f":{value}")
        return self._record(FragmentKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        """Set the pseudo-element (``::value``)."""
        self._check(FragmentKind.PSEUDO_ELEMENT, taken=bool(self._pseudo_element))
        self._pseudo_element = f"::{value}"
        return self._record(FragmentKind.PSEUDO_ELEMENT, value)

    # --- rendering ------------------------------------------------------------

    def stringify(self) -> str:
        """Render the selector with fragments in category order."""
        parts = [self._element, self._id]
        parts.extend(self._classes)
        parts.extend(self._attributes)
        parts.extend(self._pseudo_classes)
        parts.append(self._pseudo_element)
        return "".join(parts)

    def __str__(self) -> str:
        return self.stringify()

    def __repr__(self) -> str:
        return f"SelectorBuilder({self.stringify()!r})"

    # --- introspection --------------------------------------------------------

    @property
    def order(self) -> tuple[FragmentKind, ...]:
        """Categories of every accepted fragment, in call order."""
        return tuple(self._order)

    @property
    def is_empty(self) -> bool:
        return not self._order

    # --- validation -----------------------------------------------------------

    def _check(self, kind: FragmentKind, taken: bool = False) -> None:
        if taken:
            log.warning("Rejected duplicate %s fragment", kind.name.lower())
            raise DuplicateFragmentError(kind)
        if self._highest is not None and kind < self._highest:
            log.warning(
                "Rejected %s fragment after %s",
                kind.name.lower(),
                self._highest.name.lower(),
            )
            raise OrderViolationError(kind, self._highest)

    def _record(self, kind: FragmentKind, value: str) -> SelectorBuilder:
        self._order.append(kind)
        if self._highest is None or kind > self._highest:
            self._highest = kind
        log.debug("Added %s fragment %r", kind.name.lower(), value)
        return self
