from css_selector_builder.builder import CssSelectorBuilder, css_selector_builder
from css_selector_builder.json_utils import Rectangle, from_json, get_json
from css_selector_builder.logging_utils import configure_logging
from css_selector_builder.selector import CssSelector, ValidationError

__all__ = [
    "CssSelector",
    "CssSelectorBuilder",
    "Rectangle",
    "ValidationError",
    "configure_logging",
    "css_selector_builder",
    "from_json",
    "get_json",
]
