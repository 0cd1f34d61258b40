"""Tests for combining selectors with combinator tokens."""

from __future__ import annotations

import dataclasses

import pytest

from selectorkit.selector import (
    Combinator,
    CombinedSelector,
    Renderable,
    SelectorBuilder,
    combine,
)


class TestCombine:
    def test_adjacent_sibling(self) -> None:
        a = SelectorBuilder().element("div").id("main")
        b = SelectorBuilder().element("table").id("data")
        assert combine(a, "+", b).stringify() == "div#main + table#data"

    @pytest.mark.parametrize("symbol", [">", "~", "+", "||"])
    def test_symbol_padded_with_single_spaces(self, symbol: str) -> None:
        a = SelectorBuilder().element("ul")
        b = SelectorBuilder().element("li")
        assert combine(a, symbol, b).stringify() == f"ul {symbol} li"

    def test_descendant_space_gives_three_spaces(self) -> None:
        a = SelectorBuilder().element("tr")
        b = SelectorBuilder().element("td")
        assert combine(a, " ", b).stringify() == "tr   td"

    def test_enum_tokens(self) -> None:
        a = SelectorBuilder().element("ul")
        b = SelectorBuilder().element("li")
        assert combine(a, Combinator.CHILD, b).stringify() == "ul > li"
        assert combine(a, Combinator.DESCENDANT, b).stringify() == "ul   li"
        assert combine(a, Combinator.GENERAL_SIBLING, b).combinator == "~"

    def test_nested_combinations(self) -> None:
        result = combine(
            SelectorBuilder().element("div").id("main").class_("container").class_("draggable"),
            "+",
            combine(
                SelectorBuilder().element("table").id("data"),
                "~",
                combine(
                    SelectorBuilder().element("tr").pseudo_class("nth-of-type(even)"),
                    " ",
                    SelectorBuilder().element("td").pseudo_class("nth-of-type(even)"),
                ),
            ),
        )
        assert result.stringify() == (
            "div#main.container.draggable + table#data ~ "
            "tr:nth-of-type(even)   td:nth-of-type(even)"
        )

    def test_operands_rendered_at_combine_time(self) -> None:
        a = SelectorBuilder().element("a")
        result = combine(a, ">", SelectorBuilder().element("b"))
        a.class_("late")
        assert result.stringify() == "a > b"


class TestCombinedSelector:
    def test_fields(self) -> None:
        result = combine(SelectorBuilder().id("x"), ">", SelectorBuilder().class_("y"))
        assert result == CombinedSelector(left="#x", combinator=">", right=".y")

    def test_frozen(self) -> None:
        result = CombinedSelector(left="a", combinator="+", right="b")
        with pytest.raises(dataclasses.FrozenInstanceError):
            result.left = "c"  # type: ignore[misc]

    def test_str(self) -> None:
        assert str(CombinedSelector(left="a", combinator="~", right="b")) == "a ~ b"

    def test_is_renderable(self) -> None:
        assert isinstance(CombinedSelector(left="a", combinator="+", right="b"), Renderable)
        assert isinstance(SelectorBuilder(), Renderable)

    def test_has_no_fragment_methods(self) -> None:
        result = CombinedSelector(left="a", combinator="+", right="b")
        assert not hasattr(result, "class_")
