"""selectorkit: fluent CSS selector builder plus small object helpers."""

from __future__ import annotations

from selectorkit.builder import CssSelectorBuilder, SelectorBuilder, css_selector_builder
from selectorkit.config import JsonConfig
from selectorkit.errors import (
    DeserializationError,
    DuplicatePartError,
    InvalidCombinatorError,
    OrderOrUniquenessError,
    PartOrderError,
    SelectorError,
)
from selectorkit.model import Category, Combinator, Rectangle, SelectorState
from selectorkit.serialization import from_json, get_json

__version__ = "0.1.0"

__all__ = [
    # builder
    "SelectorBuilder",
    "CssSelectorBuilder",
    "css_selector_builder",
    # model
    "Category",
    "Combinator",
    "SelectorState",
    "Rectangle",
    # json
    "JsonConfig",
    "get_json",
    "from_json",
    # errors
    "SelectorError",
    "OrderOrUniquenessError",
    "DuplicatePartError",
    "PartOrderError",
    "InvalidCombinatorError",
    "DeserializationError",
]
