from enum import Enum
from typing import Any, Dict, Sequence
import logging

from .exceptions import DuplicateSelectorPartError, InvalidSelectorOrderError

logger = logging.getLogger(__name__)

class SelectorPart(Enum):
    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attr"
    PSEUDO_CLASS = "pseudoClass"
    PSEUDO_ELEMENT = "pseudoElement"

    @property
    def rank(self) -> int:
        return PART_RANKS[self]

PART_RANKS: Dict[SelectorPart, int] = {
    SelectorPart.ELEMENT: 1,
    SelectorPart.ID: 2,
    SelectorPart.CLASS: 3,
    SelectorPart.ATTRIBUTE: 4,
    SelectorPart.PSEUDO_CLASS: 5,
    SelectorPart.PSEUDO_ELEMENT: 6,
}

SINGLE_PARTS = frozenset({
    SelectorPart.ELEMENT,
    SelectorPart.ID,
    SelectorPart.PSEUDO_ELEMENT,
})

DUPLICATE_PART_MESSAGE = (
    "Element, id and pseudo-element should not occur more than one time "
    "inside the selector"
)

INVALID_ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: element, id, "
    "class, attribute, pseudo-class, pseudo-element"
)

def ensure_single(part: SelectorPart, current_value: Any) -> None:
    """Reject a second element, id or pseudo-element."""
    if current_value is not None:
        logger.debug(f"Rejected duplicate {part.value}: already set to {current_value!r}")
        raise DuplicateSelectorPartError(DUPLICATE_PART_MESSAGE)

def check_order(order: Sequence[SelectorPart], part: SelectorPart) -> None:
    """
    Validate that ``part`` may follow the parts already added.

    Args:
        order: Parts added so far, oldest first
        part: The part about to be added

    Raises:
        InvalidSelectorOrderError: If the last added part outranks ``part``
    """
    if order and order[-1].rank > part.rank:
        logger.debug(f"Rejected {part.value} after {order[-1].value}")
        raise InvalidSelectorOrderError(INVALID_ORDER_MESSAGE)
