"""Tests for the top-level package surface."""

from __future__ import annotations

import selectorkit
from selectorkit import objects, selector


class TestPublicAPI:
    def test_objects_exports_reexported(self) -> None:
        for name in objects.__all__:
            assert getattr(selectorkit, name) is getattr(objects, name)
            assert name in selectorkit.__all__

    def test_selector_exports_reexported(self) -> None:
        for name in selector.__all__:
            assert getattr(selectorkit, name) is getattr(selector, name)
            assert name in selectorkit.__all__

    def test_top_level_round_trip(self) -> None:
        typed = selectorkit.attach_behavior(
            selectorkit.parse_json(selectorkit.get_json(selectorkit.Rectangle(2, 5))),
            selectorkit.Rectangle,
        )
        assert typed.get_area() == 10
