from typing import Dict

from css_selector_builder.selector import CssSelector


VALID_HTML_TAGS = {
    "html", "head", "body", "title", "meta", "link", "base", "style",
    "header", "nav", "main", "section", "article", "aside", "footer",
    "div", "span",
    "p", "h1", "h2", "h3", "h4", "h5", "h6",
    "br", "hr", "pre", "blockquote",
    "ol", "ul", "li", "dl", "dt", "dd",
    "figure", "figcaption",
    "a", "em", "strong", "small", "s", "cite", "q", "abbr", "time",
    "code", "var", "samp", "kbd", "sub", "sup", "i", "b", "u", "mark",
    "img", "audio", "video", "source", "track", "picture",
    "iframe", "embed", "object", "param",
    "canvas", "svg", "math",
    "table", "caption", "thead", "tbody", "tfoot",
    "tr", "th", "td", "colgroup", "col",
    "form", "input", "textarea", "button", "select",
    "option", "optgroup", "label", "fieldset", "legend",
    "datalist", "output", "progress", "meter",
    "details", "summary", "dialog",
    "script", "noscript", "template", "slot"
}


class HtmlValidator:
    """Utility class for HTML validation"""

    @staticmethod
    def is_valid_html_tag(tag: str) -> bool:
        """
        Input: tag (str)
        Functionality: Verify if a specific tag is a valid HTML tag
        Output: bool
        """
        return isinstance(tag, str) and tag.lower() in VALID_HTML_TAGS


def selector_from_template(template: Dict) -> CssSelector:
    """
    Forms a CSS selector from an element template
    Input: template (dict) - {"tag": "div", "classes": ["card"], "attrs": {"id": "main", "type": "x"}}
    Output: CssSelector - e.g. div#main.card[type="x"]
    """
    tag = template.get("tag", "")
    if not tag or not HtmlValidator.is_valid_html_tag(tag):
        raise ValueError(f"Invalid or missing tag in template: {tag!r}")

    selector = CssSelector().element(tag)

    attrs = dict(template.get("attrs") or {})
    if "id" in attrs:
        selector = selector.id(attrs.pop("id"))

    for cls in template.get("classes") or []:
        selector = selector.class_(cls)

    for key, value in sorted(attrs.items()):
        selector = selector.attr(f'{key}="{value}"')

    return selector
