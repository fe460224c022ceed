"""Error hierarchy for the selector builder and JSON helpers."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from selectorkit.model.category import Category

DUPLICATE_PART_MESSAGE = (
    "Element, id and pseudo-element should not occur more then one time "
    "inside the selector"
)
PART_ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: element, id, "
    "class, attribute, pseudo-class, pseudo-element"
)


class SelectorError(Exception):
    """Base error for all selector builder errors."""


class OrderOrUniquenessError(SelectorError):
    """A selector part was added twice or out of category order."""

    def __init__(self, message: str, *, category: Category | None = None) -> None:
        super().__init__(message)
        self.category = category


class DuplicatePartError(OrderOrUniquenessError):
    """Element, id or pseudo-element was set more than once."""

    def __init__(self, category: Category | None = None) -> None:
        super().__init__(DUPLICATE_PART_MESSAGE, category=category)


class PartOrderError(OrderOrUniquenessError):
    """A part arrived after a part from a later category."""

    def __init__(self, category: Category | None = None) -> None:
        super().__init__(PART_ORDER_MESSAGE, category=category)


class InvalidCombinatorError(SelectorError, ValueError):
    """Combinator is not one of ' ', '+', '~', '>'."""

    def __init__(self, symbol: str) -> None:
        super().__init__(f"Invalid combinator: {symbol!r}")
        self.symbol = symbol


class DeserializationError(ValueError):
    """JSON text could not be turned into an instance."""
