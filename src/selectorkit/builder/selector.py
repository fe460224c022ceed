"""Fluent builder for compound and combined CSS selectors.

Parts must be added in category order::

    element#id.class[attr]:pseudo-class::pseudo-element

Element, id and pseudo-element may appear once; the other categories can
repeat. Two builders are joined with ``combine`` into a new builder that
holds the rendered expression as its prefix.
"""

from __future__ import annotations

import logging

from selectorkit.errors import DuplicatePartError, PartOrderError
from selectorkit.model.category import Category, Combinator
from selectorkit.model.state import SelectorState

__all__ = ["SelectorBuilder"]

_log = logging.getLogger(__name__)


class SelectorBuilder:
    """Accumulates validated selector parts and renders them on demand."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._state = SelectorState()
        self._touched: set[Category] = set()
        self._log = logger or _log

    # --- parts ----------------------------------------------------------------

    def element(self, name: str) -> SelectorBuilder:
        self._check(Category.ELEMENT)
        self._state.element = name
        return self._advance(Category.ELEMENT)

    def id(self, name: str) -> SelectorBuilder:
        self._check(Category.ID)
        self._state.id = f"#{name}"
        return self._advance(Category.ID)

    def class_(self, name: str) -> SelectorBuilder:
        self._check(Category.CLASS)
        self._state.classes.append(f".{name}")
        return self._advance(Category.CLASS)

    def attr(self, expr: str) -> SelectorBuilder:
        self._check(Category.ATTRIBUTE)
        self._state.attributes.append(f"[{expr}]")
        return self._advance(Category.ATTRIBUTE)

    def pseudo_class(self, name: str) -> SelectorBuilder:
        self._check(Category.PSEUDO_CLASS)
        self._state.pseudo_classes.append(f":{name}")
        return self._advance(Category.PSEUDO_CLASS)

    def pseudo_element(self, name: str) -> SelectorBuilder:
        self._check(Category.PSEUDO_ELEMENT)
        self._state.pseudo_element = f"::{name}"
        return self._advance(Category.PSEUDO_ELEMENT)

    def prefix(self, text: str) -> SelectorBuilder:
        """Append raw, already rendered text ahead of the compound parts."""
        self._state.prefix = f"{self._state.prefix}{text}"
        return self

    # --- composition ----------------------------------------------------------

    def combine(
        self, other: SelectorBuilder, combinator: str | Combinator
    ) -> SelectorBuilder:
        """Return a new builder joining this selector and *other*.

        The combinator is surrounded by single spaces, so the descendant
        combinator renders as three spaces.
        """
        symbol = Combinator.parse(combinator)
        text = f"{self.render()} {symbol.value} {other.render()}"
        self._log.debug("Combined selector: %r", text)
        return SelectorBuilder(logger=self._log).prefix(text)

    # --- output ---------------------------------------------------------------

    def render(self) -> str:
        return self._state.render()

    def stringify(self) -> str:
        return self.render()

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"SelectorBuilder({self.render()!r})"

    @property
    def touched(self) -> tuple[Category, ...]:
        """Categories that received at least one part, in category order."""
        return tuple(sorted(self._touched))

    # --- validation -----------------------------------------------------------

    def _check(self, category: Category) -> None:
        if category.singular and category in self._touched:
            self._log.debug("Rejected duplicate %s part", category.name.lower())
            raise DuplicatePartError(category)
        latest = max(self._touched, default=None)
        if latest is not None and latest > category:
            self._log.debug(
                "Rejected %s part after %s",
                category.name.lower(),
                latest.name.lower(),
            )
            raise PartOrderError(category)

    def _advance(self, category: Category) -> SelectorBuilder:
        self._touched.add(category)
        return self
