import json

import pytest

from css_selector_builder.json_utils import Rectangle, from_json, get_json


class Circle:
    def __init__(self, radius):
        raise AssertionError("from_json must not call __init__")

    def get_circumference(self):
        return 2 * 3 * self.radius


class TestRectangle:

    def test_get_area(self):
        r = Rectangle(10, 20)
        assert r.width == 10
        assert r.height == 20
        assert r.get_area() == 200


class TestGetJson:
    """Tests for get_json"""

    @pytest.mark.parametrize("value,expected", [
        ([1, 2, 3], "[1,2,3]"),
        ({"width": 10, "height": 20}, '{"width":10,"height":20}'),
        ("text", '"text"'),
        (True, "true"),
        (None, "null"),
        (1.5, "1.5"),
    ])
    def test_plain_values(self, value, expected):
        assert get_json(value) == expected

    def test_object_is_serialized_through_attributes(self):
        assert get_json(Rectangle(10, 20)) == '{"width":10,"height":20}'

    def test_unserializable_value_raises(self):
        with pytest.raises(TypeError):
            get_json({1, 2})


class TestFromJson:
    """Tests for from_json"""

    def test_copies_keys_and_exposes_methods(self):
        r = from_json(Rectangle, '{"width":10,"height":20}')
        assert isinstance(r, Rectangle)
        assert r.get_area() == 200

    def test_does_not_call_init(self):
        c = from_json(Circle, '{"radius":10}')
        assert c.radius == 10
        assert c.get_circumference() == 60

    def test_extra_keys_are_copied(self):
        r = from_json(Rectangle, '{"width":1,"height":2,"color":"red"}')
        assert r.color == "red"

    def test_round_trip(self):
        original = Rectangle(3, 4)
        restored = from_json(Rectangle, get_json(original))
        assert restored == original

    def test_non_object_payload_raises(self):
        with pytest.raises(TypeError):
            from_json(Rectangle, "[1,2,3]")

    def test_malformed_json_raises(self):
        with pytest.raises(json.JSONDecodeError):
            from_json(Rectangle, "{width: 10}")
