"""Base protocol for anything that renders to selector text."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Renderable(Protocol):
    """A selector (compound or combined) that can produce its final string."""

    def stringify(self) -> str: ...
