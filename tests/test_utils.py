import pytest
from selector_builder import (
    GeoEntity,
    Rectangle,
    ParseError,
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

def test_shallow_copy():
    nested = {"a": [1, 2, 3]}
    original = {"a": 2, "b": nested}
    copy = shallow_copy(original)
    assert copy == original
    assert copy is not original
    assert copy["b"] is nested
    assert shallow_copy({}) == {}

def test_merge_objects():
    assert merge_objects([{"a": 1, "b": 2}, {"b": 3, "c": 5}]) == {"a": 1, "b": 5, "c": 5}
    assert merge_objects([{"a": 1}, {"a": 1}, {"a": 1}]) == {"a": 3}
    assert merge_objects([]) == {}

def test_merge_objects_does_not_modify_inputs():
    first = {"a": 1}
    merge_objects([first, {"a": 2}])
    assert first == {"a": 1}

def test_merge_objects_does_not_modify_list_values():
    first = {"a": [1]}
    second = {"a": [2]}
    merged = merge_objects([first, second])
    assert merged == {"a": [1, 2]}
    assert first == {"a": [1]}
    assert second == {"a": [2]}

def test_remove_properties():
    obj = {"a": 1, "b": 2, "c": 3}
    result = remove_properties(obj, ["b", "c"])
    assert result == {"a": 1}
    assert result is obj
    assert remove_properties({"a": 1, "b": 2}, ["d", "e"]) == {"a": 1, "b": 2}

def test_compare_objects():
    assert compare_objects({"a": 1, "b": 2}, {"a": 1, "b": 2}) is True
    assert compare_objects({"a": 1, "b": 2}, {"a": 1, "b": 3}) is False
    assert compare_objects({"a": 1}, {"a": 1, "b": 2}) is False
    assert compare_objects({}, {}) is True

def test_compare_objects_is_order_sensitive():
    assert compare_objects({"a": 1, "b": 2}, {"b": 2, "a": 1}) is False

def test_compare_objects_is_shallow():
    nested = {"x": 1}
    assert compare_objects({"a": nested}, {"a": nested}) is True
    assert compare_objects({"a": {}}, {"a": {}}) is False
    assert compare_objects({"a": [1]}, {"a": [1]}) is False

def test_compare_objects_is_strict_about_types():
    assert compare_objects({"a": 1}, {"a": True}) is False
    assert compare_objects({"a": 1}, {"a": "1"}) is False
    assert compare_objects({"a": 1}, {"a": 1.0}) is True
    assert compare_objects({"a": "x"}, {"a": "x"}) is True
    assert compare_objects({"a": None}, {"a": None}) is True

def test_is_empty_object():
    assert is_empty_object({}) is True
    assert is_empty_object({"a": 1}) is False

def test_make_immutable():
    obj = {"a": 1, "b": 2}
    frozen = make_immutable(obj)
    with pytest.raises(TypeError):
        frozen["a"] = 5
    with pytest.raises(TypeError):
        del frozen["a"]
    with pytest.raises(TypeError):
        frozen["new"] = "new"
    obj["a"] = 10
    assert dict(frozen) == {"a": 1, "b": 2}

def test_make_word():
    assert make_word({"a": [0, 1], "b": [2, 3], "c": [4, 5]}) == "aabbcc"
    letters = {"H": [0], "e": [1], "l": [2, 3, 8], "o": [4, 6], "W": [5], "r": [7], "d": [9]}
    assert make_word(letters) == "HelloWorld"
    assert make_word({}) == ""

def test_get_json():
    assert get_json([1, 2, 3]) == "[1,2,3]"
    assert get_json({"height": 10, "width": 20}) == '{"height":10,"width":20}'

def test_get_json_model():
    assert get_json(Rectangle(width=10, height=20)) == '{"width":10.0,"height":20.0}'
    assert get_json(GeoEntity(country="Poland", city="Lodz")) == '{"country":"Poland","city":"Lodz"}'

def test_rectangle():
    rectangle = Rectangle(width=10, height=20)
    assert rectangle.width == 10
    assert rectangle.height == 20
    assert rectangle.get_area() == 200

def test_from_json():
    rectangle = from_json(Rectangle, '{"width": 10, "height": 20}')
    assert isinstance(rectangle, Rectangle)
    assert rectangle.get_area() == 200

def test_from_json_invalid():
    with pytest.raises(ParseError):
        from_json(Rectangle, "invalid json")
    with pytest.raises(ParseError, match="Rectangle"):
        from_json(Rectangle, '{"width": 10}')

def test_sort_cities_array():
    cities = [
        GeoEntity(country="Russia", city="Moscow"),
        GeoEntity(country="Belarus", city="Minsk"),
        GeoEntity(country="Poland", city="Warsaw"),
        GeoEntity(country="Russia", city="Saint Petersburg"),
        GeoEntity(country="Poland", city="Krakow"),
        GeoEntity(country="Belarus", city="Brest"),
    ]
    result = sort_cities_array(cities)
    assert [(c.country, c.city) for c in result] == [
        ("Belarus", "Brest"),
        ("Belarus", "Minsk"),
        ("Poland", "Krakow"),
        ("Poland", "Warsaw"),
        ("Russia", "Moscow"),
        ("Russia", "Saint Petersburg"),
    ]
    assert cities[0].city == "Moscow"

def test_sort_cities_ignores_case():
    cities = [GeoEntity(country="b", city="x"), GeoEntity(country="A", city="y")]
    assert [c.country for c in sort_cities_array(cities)] == ["A", "b"]

def test_sort_cities_puts_lowercase_first_on_case_ties():
    cities = [
        GeoEntity(country="Poland", city="Lodz"),
        GeoEntity(country="Poland", city="lodz"),
    ]
    assert [c.city for c in sort_cities_array(cities)] == ["lodz", "Lodz"]

def test_group():
    items = [
        GeoEntity(country="Belarus", city="Brest"),
        GeoEntity(country="Russia", city="Omsk"),
        GeoEntity(country="Russia", city="Samara"),
        GeoEntity(country="Belarus", city="Grodno"),
        GeoEntity(country="Belarus", city="Minsk"),
        GeoEntity(country="Poland", city="Lodz"),
    ]
    result = group(items, lambda item: item.country, lambda item: item.city)
    assert result == {
        "Belarus": ["Brest", "Grodno", "Minsk"],
        "Russia": ["Omsk", "Samara"],
        "Poland": ["Lodz"],
    }
    assert list(result) == ["Belarus", "Russia", "Poland"]
