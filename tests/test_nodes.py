import pytest

from lunikit.nodes import (
    Lambda,
    LazyObject,
    find_node,
    get_token,
    has_token,
    is_node_empty,
    render_value,
)
from lunikit.template_token import set_escape_function


class Person(LazyObject):
    def __init__(self, name):
        super().__init__()
        self.calls = 0
        self._name = name
        self.register_methods({"name": self.get_name})

    def get_name(self):
        self.calls += 1
        return self._name


@pytest.mark.parametrize(
    "node",
    [None, False, 0, 0.0, "", []],
)
def test_empty_nodes(node):
    assert is_node_empty(node) is True


@pytest.mark.parametrize(
    "node",
    [True, 1, -3, 0.5, "x", [0], {}, {"a": 1}, LazyObject(), Lambda(lambda: "")],
)
def test_non_empty_nodes(node):
    assert is_node_empty(node) is False


def test_has_token_on_dict():
    data = {"a": 1}
    assert has_token(data, "a") is True
    assert has_token(data, "b") is False


def test_has_token_on_scalar_only_dot():
    assert has_token(5, ".") is True
    assert has_token(5, "a") is False
    assert has_token([1, 2], ".") is True


def test_get_token_dict_and_scalar():
    assert get_token({"a": "v"}, "a") == "v"
    assert get_token(7, ".") == 7
    with pytest.raises(KeyError):
        get_token({"a": 1}, "b")


def test_lazy_object_has_and_at():
    calls = []

    def compute_name():
        calls.append(1)
        return "alice"

    obj = LazyObject()
    obj.register_methods({"name": compute_name})
    assert obj.has("name") is True
    assert obj.has("age") is False
    assert obj.at("name") == "alice"
    assert obj.at("name") == "alice"
    assert len(calls) == 2
    with pytest.raises(KeyError):
        obj.at("age")


def test_register_methods_keeps_first():
    obj = LazyObject()
    obj.register_methods({"x": lambda: 1})
    obj.register_methods({"x": lambda: 2})
    assert obj.at("x") == 1


def test_get_token_lazy_object():
    person = Person("bob")
    assert get_token(person, "name") == "bob"
    assert has_token(person, "name") is True
    assert person.calls == 1


def test_find_node_innermost_first():
    inner = {"a": "inner"}
    outer = {"a": "outer", "b": "outer-b"}
    assert find_node("a", [inner, outer]) == "inner"
    assert find_node("b", [inner, outer]) == "outer-b"


def test_find_node_missing_is_none():
    assert find_node("zzz", [{"a": 1}]) is None


def test_find_node_dot_returns_first():
    assert find_node(".", ["first", "second"]) == "first"


def test_find_node_dotted_path():
    data = {"a": {"b": {"c": "deep"}}}
    assert find_node("a.b.c", [data]) == "deep"
    assert find_node("a.x.c", [data]) is None


def test_find_node_dotted_through_lazy_object():
    data = {"owner": Person("carol")}
    assert find_node("owner.name", [data]) == "carol"


def test_lambda_without_args():
    fn = Lambda(lambda: 12)
    assert fn.takes_text is False
    assert fn(lambda node: f"<{node}>") == "<12>"


def test_lambda_with_text():
    fn = Lambda(lambda text: text.upper())
    assert fn.takes_text is True
    assert fn(lambda node: node, "hello") == "HELLO"


def test_lambda_with_bound_method():
    class Shouter:
        def shout(self, text):
            return text + "!"

        def constant(self):
            return "fixed"

    shouter = Shouter()
    assert Lambda(shouter.shout)(lambda node: node, "hey") == "hey!"
    assert Lambda(shouter.constant)(lambda node: node, "ignored") == "fixed"


def test_render_value_bools_and_none():
    assert render_value(True) == "true"
    assert render_value(False) == "false"
    assert render_value(None) == ""


def test_render_value_numbers_round_trip():
    for value in (0, 42, -7, 2**64):
        assert int(render_value(value)) == value
    assert float(render_value(1.5)) == 1.5


def test_render_value_containers_are_blank():
    assert render_value({"a": 1}) == ""
    assert render_value([1, 2]) == ""
    assert render_value(LazyObject()) == ""


def test_render_value_escapes_strings_only_when_asked():
    assert render_value("<a & b>") == "<a & b>"
    assert render_value("<a & b>", True) == "&lt;a &amp; b&gt;"


def test_render_value_lambda_escaped():
    fn = Lambda(lambda: "<x>")
    assert render_value(fn) == "<x>"
    assert render_value(fn, True) == "&lt;x&gt;"


def test_render_value_lambda_renders_nested_value():
    assert render_value(Lambda(lambda: True)) == "true"


def test_render_value_uses_custom_escape():
    set_escape_function(lambda text: text[::-1])
    try:
        assert render_value("abc", True) == "cba"
    finally:
        set_escape_function(None)
    assert render_value("/", True) == "&#x2F;"