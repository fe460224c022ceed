"""Selector part categories and combinator symbols."""

from __future__ import annotations

from enum import IntEnum, StrEnum

from selectorkit.errors import InvalidCombinatorError


class Category(IntEnum):
    """Kinds of compound selector parts, in the order they must appear.

        element#id.class[attr]:pseudo-class::pseudo-element
    """

    ELEMENT = 0
    ID = 1
    CLASS = 2
    ATTRIBUTE = 3
    PSEUDO_CLASS = 4
    PSEUDO_ELEMENT = 5

    @property
    def singular(self) -> bool:
        """True for categories that may occur at most once per selector."""
        return self in _SINGULAR


_SINGULAR = frozenset({Category.ELEMENT, Category.ID, Category.PSEUDO_ELEMENT})


class Combinator(StrEnum):
    """Symbols that join two selectors."""

    DESCENDANT = " "
    ADJACENT_SIBLING = "+"
    GENERAL_SIBLING = "~"
    CHILD = ">"

    @classmethod
    def parse(cls, symbol: str | Combinator) -> Combinator:
        """Return the combinator for *symbol* or raise InvalidCombinatorError."""
        try:
            return cls(symbol)
        except ValueError as exc:
            raise InvalidCombinatorError(str(symbol)) from exc
