from typing import List, Optional, Protocol, Tuple, Union

from selenium.common.exceptions import NoSuchElementException, WebDriverException
from selenium.webdriver.common.by import By

from css_selector_builder.logging_utils import get_logger
from css_selector_builder.selector import CssSelector

logger = get_logger(__name__)

SelectorLike = Union[CssSelector, str]


class WebElementInterface(Protocol):
    """Protocol for web element operations - doesn't require Selenium"""

    def find_element(self, by: str, selector: str) -> 'WebElementInterface':
        ...

    def find_elements(self, by: str, selector: str) -> List['WebElementInterface']:
        ...


def _selector_text(selector: SelectorLike) -> str:
    if isinstance(selector, CssSelector):
        # raises ValidationError, callers should see it
        return selector.stringify()
    return selector


def to_locator(selector: SelectorLike) -> Tuple[str, str]:
    """Return a Selenium locator tuple, usable with find_element(*locator) or expected_conditions."""
    return By.CSS_SELECTOR, _selector_text(selector)


class SelectorFinder:
    """Looks up elements for built selectors under a WebDriver or WebElement"""

    def find_single(self, parent: WebElementInterface, selector: SelectorLike) -> Optional[WebElementInterface]:
        by, value = to_locator(selector)
        try:
            return parent.find_element(by, value)
        except NoSuchElementException:
            logger.debug(f"No element matches {value!r}")
            return None

    def find_multiple(self, parent: WebElementInterface, selector: SelectorLike) -> List[WebElementInterface]:
        by, value = to_locator(selector)
        elements = parent.find_elements(by, value)
        if not elements:
            logger.debug(f"No elements match {value!r}")
        return elements


def matches(element, selector: SelectorLike) -> bool:
    """
    Check if a WebElement matches a CSS selector.
    Handles complex selectors like: div#id.class1.class2[attr='value']
    """
    value = _selector_text(selector)
    try:
        driver = element.parent
        result = driver.execute_script(
            "return arguments[0].matches(arguments[1]);",
            element,
            value
        )
        return bool(result)
    except WebDriverException as e:
        logger.warning(f"Could not match {value!r}: {e}")
        return False
