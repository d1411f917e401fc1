class ValidationError(Exception):
    """Base validation error."""
    pass

class ParseError(Exception):
    """Error parsing input data."""
    pass

class InvalidSelectorError(ValidationError):
    """Invalid selector construction."""
    pass

class DuplicateSelectorPartError(InvalidSelectorError):
    """Element, id or pseudo-element added twice to the same selector."""
    pass

class InvalidSelectorOrderError(InvalidSelectorError):
    """Selector part added after a part of higher rank."""
    pass

class SelectorTranslationError(InvalidSelectorError):
    """Selector cannot be translated to XPath."""
    pass

class InvalidBillError(ValidationError):
    """Bill value not accepted by the ticket seller."""
    pass
