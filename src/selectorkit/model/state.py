"""Selector state: the fragments accumulated by one builder."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class SelectorState:
    """Rendered fragments of a compound selector, grouped by category.

    Singular parts are ``None`` until set. Repeatable parts keep insertion
    order. ``prefix`` holds an already rendered combinator expression.
    """

    element: str | None = None
    id: str | None = None  # "#name"
    classes: list[str] = field(default_factory=list)  # ".name"
    attributes: list[str] = field(default_factory=list)  # "[expr]"
    pseudo_classes: list[str] = field(default_factory=list)  # ":name"
    pseudo_element: str | None = None  # "::name"
    prefix: str = ""

    def render(self) -> str:
        """Concatenate the prefix and all fragments in category order."""
        parts = [self.prefix, self.element or "", self.id or ""]
        parts.extend(self.classes)
        parts.extend(self.attributes)
        parts.extend(self.pseudo_classes)
        parts.append(self.pseudo_element or "")
        return "".join(parts)
