import math

import pytest
from css_selector_builder import objects
from css_selector_builder import (
    Rectangle,
    get_json,
    from_json,
    register_factory,
    ParseError,
    SerializationError
)

@pytest.fixture
def registry(monkeypatch):
    """Isolate the factory registry for a single test."""
    factories = dict(objects._FACTORIES)
    monkeypatch.setattr(objects, "_FACTORIES", factories)
    return factories

class Circle:
    def __init__(self, radius):
        self.radius = radius

def test_rectangle():
    r = Rectangle(10, 20)
    assert r.width == 10
    assert r.height == 20
    assert r.area() == 200

def test_rectangle_keywords():
    r = Rectangle(width=2.5, height=4)
    assert r.area() == 10.0

def test_get_json():
    assert get_json([1, 2, 3]) == "[1,2,3]"
    assert get_json({"width": 10, "height": 20}) == '{"width":10,"height":20}'
    assert get_json(Rectangle(10, 20)) == '{"width":10,"height":20}'

def test_get_json_list_of_models():
    rectangles = [Rectangle(1, 2), Rectangle(3, 4)]
    assert get_json(rectangles) == '[{"width":1,"height":2},{"width":3,"height":4}]'

def test_get_json_dict_with_model():
    data = {"name": "box", "shape": Rectangle(10, 20)}
    assert get_json(data) == '{"name":"box","shape":{"width":10,"height":20}}'

def test_get_json_non_finite_numbers():
    assert get_json(math.nan) == "null"
    assert get_json([1, math.inf, -math.inf]) == "[1,null,null]"

def test_get_json_unserializable():
    with pytest.raises(SerializationError):
        get_json({"key": object()})

def test_from_json_with_class():
    circle = from_json(Circle, '{"radius":10}')
    assert isinstance(circle, Circle)
    assert circle.radius == 10

def test_from_json_rectangle_round_trip():
    r = from_json(Rectangle, get_json(Rectangle(10, 20)))
    assert isinstance(r, Rectangle)
    assert r.area() == 200

def test_from_json_uses_value_order():
    r = from_json(Rectangle, '{"height":3,"width":7}')
    assert r.width == 3
    assert r.height == 7

def test_from_json_array():
    r = from_json(Rectangle, "[4, 5]")
    assert r.area() == 20

def test_from_json_registered_name():
    r = from_json("Rectangle", '{"width":1,"height":2}')
    assert isinstance(r, Rectangle)

def test_register_factory_decorator(registry):
    @register_factory("Point")
    class Point:
        def __init__(self, x, y):
            self.x, self.y = x, y

    point = from_json("Point", '{"x":1,"y":2}')
    assert (point.x, point.y) == (1, 2)
    assert registry["Point"] is Point

def test_register_factory_call(registry):
    register_factory("pair", lambda a, b: (a, b))
    assert from_json("pair", '["a","b"]') == ("a", "b")
    assert "pair" in registry

def test_registered_names_do_not_leak():
    assert "Point" not in objects._FACTORIES
    assert "pair" not in objects._FACTORIES
    assert objects._FACTORIES["Rectangle"] is Rectangle

@pytest.mark.parametrize("proto,json_string,message", [
    (Circle, "not json", "Invalid JSON string"),
    (Circle, "42", "Expected a JSON object or array"),
    (Circle, '{"radius":1,"extra":2}', "Cannot construct object"),
    (Rectangle, '{"width":"wide","height":2}', "Cannot construct object"),
    ("Unknown", "{}", "No factory registered"),
    (42, "{}", "Cannot construct objects from"),
])
def test_from_json_errors(proto, json_string, message):
    with pytest.raises(ParseError, match=message):
        from_json(proto, json_string)
