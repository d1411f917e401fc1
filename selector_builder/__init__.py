# selector_builder/__init__.py
from .selector import Selector, CombinedSelector, SelectorLike
from .builder import CssSelectorBuilder, css_selector_builder
from .validators import SelectorPart
from .xpath import to_xpath
from .models import Rectangle, GeoEntity
from .tickets import sell_tickets
from .exceptions import (
    ValidationError,
    ParseError,
    InvalidSelectorError,
    DuplicateSelectorPartError,
    InvalidSelectorOrderError,
    SelectorTranslationError,
    InvalidBillError
)
from .utils import (
    shallow_copy,
    merge_objects,
    remove_properties,
    compare_objects,
    is_empty_object,
    make_immutable,
    make_word,
    get_json,
    from_json,
    sort_cities_array,
    group
)

__version__ = "0.1.0"

__all__ = [
    # Selector builder
    "Selector",
    "CombinedSelector",
    "SelectorLike",
    "SelectorPart",
    "CssSelectorBuilder",
    "css_selector_builder",
    "to_xpath",

    # Models
    "Rectangle",
    "GeoEntity",

    # Exceptions
    "ValidationError",
    "ParseError",
    "InvalidSelectorError",
    "DuplicateSelectorPartError",
    "InvalidSelectorOrderError",
    "SelectorTranslationError",
    "InvalidBillError",

    # Utility functions
    "shallow_copy",
    "merge_objects",
    "remove_properties",
    "compare_objects",
    "is_empty_object",
    "make_immutable",
    "make_word",
    "get_json",
    "from_json",
    "sort_cities_array",
    "group",
    "sell_tickets"
]
