"""selectorkit model layer -- public type re-exports."""

from selectorkit.model.category import Category, Combinator
from selectorkit.model.rectangle import Rectangle
from selectorkit.model.state import SelectorState

__all__ = [
    # selector
    "Category",
    "Combinator",
    "SelectorState",
    # shapes
    "Rectangle",
]
