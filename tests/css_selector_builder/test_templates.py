import pytest

from css_selector_builder.selector import CssSelector
from css_selector_builder.templates import HtmlValidator, selector_from_template


# ==================== TEST HTML VALIDATOR ====================

class TestHtmlValidator:
    """Tests for HtmlValidator utility class"""

    @pytest.mark.parametrize("tag,expected", [
        ("div", True),
        ("span", True),
        ("h1", True),
        ("DIV", True),
        ("SpAn", True),
        ("invalid", False),
        ("custom-element", False),
        ("", False),
    ])
    def test_is_valid_html_tag_parametrized(self, tag, expected):
        assert HtmlValidator.is_valid_html_tag(tag) == expected

    def test_is_valid_html_tag_with_non_string_input(self):
        """Should return False for non-string inputs"""
        assert HtmlValidator.is_valid_html_tag(123) is False
        assert HtmlValidator.is_valid_html_tag(None) is False
        assert HtmlValidator.is_valid_html_tag([]) is False


# ==================== TEST TEMPLATE SELECTORS ====================

class TestSelectorFromTemplate:
    """Tests for selector_from_template"""

    def test_tag_only(self):
        selector = selector_from_template({"tag": "button"})
        assert isinstance(selector, CssSelector)
        assert selector.stringify() == "button"

    def test_tag_with_classes_and_id(self):
        template = {"tag": "div", "classes": ["card", "item"], "attrs": {"id": "main"}}
        assert selector_from_template(template).stringify() == "div#main.card.item"

    def test_other_attributes_are_sorted(self):
        template = {"tag": "input", "classes": ["form-control"], "attrs": {"type": "text", "name": "user"}}
        assert selector_from_template(template).stringify() == 'input.form-control[name="user"][type="text"]'

    def test_template_is_not_modified(self):
        template = {"tag": "div", "attrs": {"id": "main"}}
        selector_from_template(template)
        assert template == {"tag": "div", "attrs": {"id": "main"}}

    @pytest.mark.parametrize("template", [
        {},
        {"tag": ""},
        {"tag": "notarealtag"},
    ])
    def test_invalid_tag_raises(self, template):
        with pytest.raises(ValueError):
            selector_from_template(template)

    def test_result_can_be_combined(self):
        parent = selector_from_template({"tag": "ul", "classes": ["menu"]})
        child = selector_from_template({"tag": "li"})
        assert parent.combine(">", child).stringify() == "ul.menu > li"
