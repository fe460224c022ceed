"""Facade that starts a fresh SelectorBuilder for every call."""

from __future__ import annotations

from selectorkit.builder.selector import SelectorBuilder
from selectorkit.model.category import Combinator

__all__ = ["CssSelectorBuilder", "css_selector_builder"]


class CssSelectorBuilder:
    """Entry point for building selectors.

    Example::

        builder = css_selector_builder
        builder.id("main").class_("container").class_("editable").stringify()
        # '#main.container.editable'
    """

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
        self,
        selector1: SelectorBuilder,
        combinator: str | Combinator,
        selector2: SelectorBuilder,
    ) -> SelectorBuilder:
        return selector1.combine(selector2, combinator)

    def stringify(self) -> str:
        return SelectorBuilder().stringify()


css_selector_builder = CssSelectorBuilder()
