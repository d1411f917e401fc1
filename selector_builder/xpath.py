import logging

from cssselect import GenericTranslator, SelectorError

from .exceptions import SelectorTranslationError
from .selector import SelectorLike

logger = logging.getLogger(__name__)

_translator = GenericTranslator()

def to_xpath(selector: SelectorLike, prefix: str = "descendant-or-self::") -> str:
    """
    Translate a built selector to an XPath expression.

    Args:
        selector: Selector or CombinedSelector to translate
        prefix: XPath prefix, as accepted by cssselect

    Returns:
        XPath expression string

    Raises:
        SelectorTranslationError: If cssselect rejects the serialized selector,
            e.g. a pseudo-element or an unsupported pseudo-class
    """
    css = selector.serialize()
    try:
        return _translator.css_to_xpath(css, prefix=prefix)
    except SelectorError as e:
        logger.debug(f"Cannot translate {css!r}: {str(e)}")
        raise SelectorTranslationError(f"Cannot translate selector {css!r} to XPath: {str(e)}") from e
