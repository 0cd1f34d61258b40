"""Combination of two selectors with a combinator token."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum

from selectorkit.selector.base import Renderable

__all__ = ["Combinator", "CombinedSelector", "combine"]

log = logging.getLogger("selectorkit.selector")


class Combinator(StrEnum):
    """Standard CSS combinator tokens."""

    DESCENDANT = " "
    CHILD = ">"
    GENERAL_SIBLING = "~"
    ADJACENT_SIBLING = "+"


@dataclass(frozen=True)
class CombinedSelector:
    """Two rendered selectors joined by a combinator.

    The combinator is always padded with one space on each side, so a
    descendant combinator renders as three spaces.
    """

    left: str
    combinator: str
    right: str

    def stringify(self) -> str:
        return f"{self.left} {self.combinator} {self.right}"

    def __str__(self) -> str:
        return self.stringify()


def combine(left: Renderable, combinator: str, right: Renderable) -> CombinedSelector:
    """Render *left* and *right* and join them with *combinator*.

    Either side may be a compound selector or an earlier combination. The
    combinator string is not validated.
    """
    combined = CombinedSelector(
        left=left.stringify(),
        combinator=str(combinator),
        right=right.stringify(),
    )
    log.debug("Combined selector %r", combined.stringify())
    return combined
