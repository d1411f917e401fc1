from dataclasses import dataclass, replace
from typing import Optional, Tuple, Union

from .validators import SelectorPart, check_order, ensure_single

@dataclass(frozen=True)
class Selector:
    """
    One compound selector: ``element#id.class[attr]:pseudo-class::pseudo-element``.

    Every ``with_*`` call validates the new part against the parts added so
    far and returns a new Selector; the receiver is never modified, so one
    intermediate selector can be extended in several directions.
    """
    element_name: Optional[str] = None
    id_name: Optional[str] = None
    classes: Tuple[str, ...] = ()
    attributes: Tuple[str, ...] = ()
    pseudo_classes: Tuple[str, ...] = ()
    pseudo_element_name: Optional[str] = None
    fragment_order: Tuple[SelectorPart, ...] = ()

    def _extend(self, part: SelectorPart, **changes) -> "Selector":
        check_order(self.fragment_order, part)
        return replace(self, fragment_order=self.fragment_order + (part,), **changes)

    def with_element(self, name: str) -> "Selector":
        ensure_single(SelectorPart.ELEMENT, self.element_name)
        return self._extend(SelectorPart.ELEMENT, element_name=name)

    def with_id(self, name: str) -> "Selector":
        ensure_single(SelectorPart.ID, self.id_name)
        return self._extend(SelectorPart.ID, id_name=name)

    def with_class(self, name: str) -> "Selector":
        return self._extend(SelectorPart.CLASS, classes=self.classes + (name,))

    def with_attribute(self, text: str) -> "Selector":
        """Append raw attribute text, given without the brackets (``href$=".png"``)."""
        return self._extend(SelectorPart.ATTRIBUTE, attributes=self.attributes + (text,))

    def with_pseudo_class(self, name: str) -> "Selector":
        return self._extend(
            SelectorPart.PSEUDO_CLASS,
            pseudo_classes=self.pseudo_classes + (name,),
        )

    def with_pseudo_element(self, name: str) -> "Selector":
        ensure_single(SelectorPart.PSEUDO_ELEMENT, self.pseudo_element_name)
        return self._extend(SelectorPart.PSEUDO_ELEMENT, pseudo_element_name=name)

    # Fluent names matching the builder entry points
    element = with_element
    id = with_id
    class_ = with_class
    attr = with_attribute
    pseudo_class = with_pseudo_class
    pseudo_element = with_pseudo_element

    def serialize(self) -> str:
        """Render the parts in CSS order, whatever order they were added in."""
        return "".join([
            self.element_name or "",
            f"#{self.id_name}" if self.id_name else "",
            "".join(f".{name}" for name in self.classes),
            "".join(f"[{text}]" for text in self.attributes),
            "".join(f":{name}" for name in self.pseudo_classes),
            f"::{self.pseudo_element_name}" if self.pseudo_element_name else "",
        ])

    def specificity(self) -> tuple:
        """
        Calculate the specificity of the selector.
        Returns tuple of (id_count, class_count, element_count).
        """
        id_count = 1 if self.id_name else 0
        class_count = len(self.classes) + len(self.attributes) + len(self.pseudo_classes)
        element_count = (1 if self.element_name else 0) + (1 if self.pseudo_element_name else 0)
        return (id_count, class_count, element_count)

    def __str__(self) -> str:
        return self.serialize()

@dataclass(frozen=True)
class CombinedSelector:
    """Two selector-like values joined by a combinator (`` ``, ``>``, ``+`` or ``~``)."""
    left: "SelectorLike"
    combinator: str
    right: "SelectorLike"

    def serialize(self) -> str:
        # The combinator is always padded with one space on each side, so the
        # descendant combinator renders as three spaces.
        return f"{self.left.serialize()} {self.combinator} {self.right.serialize()}"

    def specificity(self) -> tuple:
        left = self.left.specificity()
        right = self.right.specificity()
        return tuple(a + b for a, b in zip(left, right))

    def __str__(self) -> str:
        return self.serialize()

SelectorLike = Union[Selector, CombinedSelector]
