"""
Immutable CSS selector value.

    element#id.class[attr]:pseudo-class::pseudo-element
              \\----/\\----/\\----------/
              Can be several occurrences

Element, id and pseudo-element may occur only once per compound selector.
That rule is checked when the selector is stringified, never while it is
being built, so partial selectors can be combined freely.
"""

from dataclasses import dataclass, field, replace
from typing import Tuple

from css_selector_builder.logging_utils import get_logger

logger = get_logger(__name__)

REPETITION_MESSAGE = (
    "Element, id and pseudo-element should not occur more than once inside the selector."
)


class ValidationError(Exception):
    """Simple validation error with message"""

    def __init__(self, message: str = REPETITION_MESSAGE):
        self.message = message
        super().__init__(self.message)


@dataclass(frozen=True)
class FragmentCounts:
    """Unique-fragment counts of one compound selector (the part between two combinators)."""
    elements: int = 0
    ids: int = 0
    pseudo_elements: int = 0

    def has_repetition(self) -> bool:
        return self.elements > 1 or self.ids > 1 or self.pseudo_elements > 1


@dataclass(frozen=True)
class CssSelector:
    text: str = ""
    has_element: bool = False
    has_id: bool = False
    has_pseudo_element: bool = False
    compounds: Tuple[FragmentCounts, ...] = field(
        default=(FragmentCounts(),), repr=False
    )

    # ==================== FRAGMENTS ====================

    def _append(self, fragment: str, **flags) -> "CssSelector":
        return replace(self, text=self.text + fragment, **flags)

    def _count(self, **increments) -> Tuple[FragmentCounts, ...]:
        current = self.compounds[-1]
        updated = replace(
            current,
            **{key: getattr(current, key) + value for key, value in increments.items()}
        )
        return self.compounds[:-1] + (updated,)

    def element(self, name: str) -> "CssSelector":
        return self._append(name, has_element=True, compounds=self._count(elements=1))

    def id(self, name: str) -> "CssSelector":
        return self._append(f"#{name}", has_id=True, compounds=self._count(ids=1))

    def class_(self, name: str) -> "CssSelector":
        return self._append(f".{name}")

    def attr(self, content: str) -> "CssSelector":
        """Append an attribute selector; `content` is stored as given, e.g. 'href$=".png"'."""
        return self._append(f"[{content}]")

    def pseudo_class(self, name: str) -> "CssSelector":
        return self._append(f":{name}")

    def pseudo_element(self, name: str) -> "CssSelector":
        return self._append(
            f"::{name}",
            has_pseudo_element=True,
            compounds=self._count(pseudo_elements=1),
        )

    # ==================== COMBINATORS ====================

    def combine(self, combinator: str, other: "CssSelector") -> "CssSelector":
        """
        Input:
            - combinator (str) - usually ' ', '+', '~' or '>', not checked
            - other (CssSelector) - right-hand selector
        Functionality: Join both selectors as `self <combinator> other`
        Output: CssSelector - flags are the OR of both operands
        """
        return CssSelector(
            text=f"{self.text} {combinator} {other.text}",
            has_element=self.has_element or other.has_element,
            has_id=self.has_id or other.has_id,
            has_pseudo_element=self.has_pseudo_element or other.has_pseudo_element,
            compounds=self.compounds + other.compounds,
        )

    # ==================== OUTPUT ====================

    def validate(self) -> None:
        """Raise ValidationError if a compound repeats an element, id or pseudo-element."""
        if not (self.has_element or self.has_id or self.has_pseudo_element):
            return
        if any(compound.has_repetition() for compound in self.compounds):
            logger.debug(f"Rejected selector with repeated fragments: {self.text!r}")
            raise ValidationError(REPETITION_MESSAGE)

    def stringify(self) -> str:
        self.validate()
        return self.text

    def __str__(self) -> str:
        return self.stringify()
