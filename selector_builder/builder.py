from .selector import CombinedSelector, Selector, SelectorLike

class CssSelectorBuilder:
    """
    Entry points for building CSS selectors.

    Each fragment method starts a new one-part Selector that can be
    extended by chaining; ``combine`` joins two selector-like values.

    Example:
        builder.element("a").attr('href$=".png"').pseudo_class("focus").serialize()
        => 'a[href$=".png"]:focus'
    """

    def element(self, name: str) -> Selector:
        return Selector().with_element(name)

    def id(self, name: str) -> Selector:
        return Selector().with_id(name)

    def class_(self, name: str) -> Selector:
        return Selector().with_class(name)

    def attr(self, text: str) -> Selector:
        return Selector().with_attribute(text)

    def pseudo_class(self, name: str) -> Selector:
        return Selector().with_pseudo_class(name)

    def pseudo_element(self, name: str) -> Selector:
        return Selector().with_pseudo_element(name)

    def combine(
        self,
        left: SelectorLike,
        combinator: str,
        right: SelectorLike
    ) -> CombinedSelector:
        """
        Join two selectors with a combinator.

        Args:
            left: Selector or CombinedSelector on the left
            combinator: One of ' ', '>', '+', '~'; not validated
            right: Selector or CombinedSelector on the right

        Returns:
            CombinedSelector referencing both sides without copying them
        """
        return CombinedSelector(left, combinator, right)

css_selector_builder = CssSelectorBuilder()
