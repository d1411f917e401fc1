from typing import Any, Callable, Dict, Hashable, Iterable, List, Mapping, Type, TypeVar
from types import MappingProxyType
import json

from pydantic import BaseModel, ValidationError as ModelValidationError

from .exceptions import ParseError
from .models import GeoEntity

T = TypeVar("T")
M = TypeVar("M", bound=BaseModel)

def shallow_copy(obj: Mapping[str, Any]) -> Dict[str, Any]:
    """Return a new dict with the same keys; nested values are shared."""
    return dict(obj)

def merge_objects(objects: Iterable[Mapping[str, Any]]) -> Dict[str, Any]:
    """
    Merge mappings into one dict, summing the values of overlapping keys.

    Example:
        merge_objects([{"a": 1, "b": 2}, {"b": 3, "c": 5}]) => {"a": 1, "b": 5, "c": 5}
    """
    merged: Dict[str, Any] = {}
    for obj in objects:
        for key, value in obj.items():
            if key in merged:
                merged[key] = merged[key] + value
            else:
                merged[key] = value
    return merged

def remove_properties(obj: Dict[str, Any], keys: Iterable[str]) -> Dict[str, Any]:
    """Delete ``keys`` from ``obj`` in place and return it. Missing keys are ignored."""
    for key in keys:
        obj.pop(key, None)
    return obj

_SCALARS = (str, bytes, int, float, type(None))

def _same_value(first: Any, second: Any) -> bool:
    # Scalars compare by value; containers and other objects by identity
    if first is second:
        return True
    if isinstance(first, bool) or isinstance(second, bool):
        return False
    if isinstance(first, (int, float)) and isinstance(second, (int, float)):
        return first == second
    if isinstance(first, _SCALARS) and type(first) is type(second):
        return first == second
    return False

def compare_objects(first: Mapping[str, Any], second: Mapping[str, Any]) -> bool:
    """
    Shallow comparison: same keys in the same order, with strictly equal values.

    Nested dicts and lists are equal only when they are the same object,
    and ``True`` is not equal to ``1``.
    """
    if len(first) != len(second):
        return False
    return all(
        key1 == key2 and _same_value(value1, value2)
        for (key1, value1), (key2, value2) in zip(first.items(), second.items())
    )

def is_empty_object(obj: Mapping[str, Any]) -> bool:
    return len(obj) == 0

def make_immutable(obj: Mapping[str, Any]) -> Mapping[str, Any]:
    """Return a read-only snapshot of ``obj``; assignment and deletion raise TypeError."""
    return MappingProxyType(dict(obj))

def make_word(letters: Mapping[str, Iterable[int]]) -> str:
    """
    Build a word from letters mapped to their positions.

    Example:
        make_word({"a": [0, 1], "b": [2, 3], "c": [4, 5]}) => "aabbcc"
    """
    placed: Dict[int, str] = {}
    for letter, positions in letters.items():
        for position in positions:
            placed[position] = letter
    return "".join(placed[position] for position in sorted(placed))

def get_json(obj: Any) -> str:
    """Compact JSON representation, e.g. '{"height":10,"width":20}'."""
    if isinstance(obj, BaseModel):
        return obj.model_dump_json()
    return json.dumps(obj, separators=(",", ":"))

def from_json(model: Type[M], json_string: str) -> M:
    """
    Build an instance of ``model`` from its JSON representation.

    Raises:
        ParseError: If the JSON is malformed or does not fit the model
    """
    try:
        return model.model_validate_json(json_string)
    except ModelValidationError as e:
        raise ParseError(f"Invalid {model.__name__} JSON: {str(e)}") from e

def sort_cities_array(items: Iterable[GeoEntity]) -> List[GeoEntity]:
    """
    Sort by country, then by city, ignoring case. Returns a new list.

    Names that differ only by case put the lowercase spelling first.
    """
    return sorted(items, key=lambda item: (
        item.country.casefold(),
        item.city.casefold(),
        item.country.swapcase(),
        item.city.swapcase(),
    ))

def group(
    items: Iterable[T],
    key_selector: Callable[[T], Hashable],
    value_selector: Callable[[T], Any]
) -> Dict[Hashable, List[Any]]:
    """
    Group values into a multimap keyed by ``key_selector``.

    Keys keep the order in which they were first seen, values keep the
    order of ``items``.
    """
    groups: Dict[Hashable, List[Any]] = {}
    for item in items:
        groups.setdefault(key_selector(item), []).append(value_selector(item))
    return groups
