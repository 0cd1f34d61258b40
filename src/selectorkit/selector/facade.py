"""Stateless entry points that start a new selector per call.

Usage::

    from selectorkit.selector.facade import css_selector_builder as builder

    builder.element("a").attr('href$=".png"').pseudo_class("focus").stringify()
    # 'a[href$=".png"]:focus'
"""

from __future__ import annotations

from selectorkit.selector.base import Renderable
from selectorkit.selector.combinator import CombinedSelector, combine as _combine
from selectorkit.selector.model import SelectorBuilder

__all__ = [
    "CssSelectorBuilder",
    "css_selector_builder",
    "element",
    "id_",
    "class_",
    "attr",
    "pseudo_class",
    "pseudo_element",
    "combine",
]


class CssSelectorBuilder:
    """Facade creating a fresh SelectorBuilder for every fragment call."""

    def element(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().element(value)

    def id(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().id(value)

    def class_(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().class_(value)

    def attr(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().attr(value)

    def pseudo_class(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().pseudo_class(value)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().pseudo_element(value)

    def combine(
        self, selector1: Renderable, combinator: str, selector2: Renderable
    ) -> CombinedSelector:
        return _combine(selector1, combinator, selector2)


css_selector_builder = CssSelectorBuilder()

element = css_selector_builder.element
id_ = css_selector_builder.id
class_ = css_selector_builder.class_
attr = css_selector_builder.attr
pseudo_class = css_selector_builder.pseudo_class
pseudo_element = css_selector_builder.pseudo_element
combine = css_selector_builder.combine
