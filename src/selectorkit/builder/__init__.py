from selectorkit.builder.facade import CssSelectorBuilder, css_selector_builder
from selectorkit.builder.selector import SelectorBuilder

__all__ = ["SelectorBuilder", "CssSelectorBuilder", "css_selector_builder"]
