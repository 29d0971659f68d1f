from css_selector_builder.selector import CssSelector


class CssSelectorBuilder:
    """Facade that starts a fresh selector chain for every call"""

    @staticmethod
    def element(name: str) -> CssSelector:
        return CssSelector().element(name)

    @staticmethod
    def id(name: str) -> CssSelector:
        return CssSelector().id(name)

    @staticmethod
    def class_(name: str) -> CssSelector:
        return CssSelector().class_(name)

    @staticmethod
    def attr(content: str) -> CssSelector:
        return CssSelector().attr(content)

    @staticmethod
    def pseudo_class(name: str) -> CssSelector:
        return CssSelector().pseudo_class(name)

    @staticmethod
    def pseudo_element(name: str) -> CssSelector:
        return CssSelector().pseudo_element(name)

    @staticmethod
    def combine(first: CssSelector, combinator: str, second: CssSelector) -> CssSelector:
        return first.combine(combinator, second)


css_selector_builder = CssSelectorBuilder()

element = css_selector_builder.element
id = css_selector_builder.id
class_ = css_selector_builder.class_
attr = css_selector_builder.attr
pseudo_class = css_selector_builder.pseudo_class
pseudo_element = css_selector_builder.pseudo_element
combine = css_selector_builder.combine
