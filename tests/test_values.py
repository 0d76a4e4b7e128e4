import pytest

from specargs.values import (
    BoolValue,
    Float64Value,
    Floats64Value,
    IntsValue,
    IntValue,
    StringsValue,
    StringValue,
    default_value,
    is_bool,
    is_multi_valued,
    set_from_env,
)


def test_bool_is_bool_flag():
    assert BoolValue(False).is_bool_flag() is True


@pytest.mark.parametrize(
    "text, result, shown",
    [("true", True, "true"), ("false", False, "false")],
)
def test_bool_set(text, result, shown):
    param = BoolValue(False)
    param.set(text)
    assert param.value is result
    assert str(param) == shown


@pytest.mark.parametrize("text", ["123", ""])
def test_bool_set_invalid(text):
    param = BoolValue(False)
    with pytest.raises(ValueError):
        param.set(text)
    assert param.value is False


@pytest.mark.parametrize("value, is_default", [(False, True), (True, False)])
def test_bool_is_default(value, is_default):
    assert BoolValue(value).is_default() is is_default


@pytest.mark.parametrize("text, shown", [("a", '"a"'), ("", '""')])
def test_string_set(text, shown):
    param = StringValue("")
    param.set(text)
    assert param.value == text
    assert str(param) == shown


@pytest.mark.parametrize("value, is_default", [("", True), ("a", False)])
def test_string_is_default(value, is_default):
    assert StringValue(value).is_default() is is_default


@pytest.mark.parametrize(
    "text, result, shown", [("12", 12, "12"), ("0", 0, "0"), ("01", 1, "1")]
)
def test_int_set(text, result, shown):
    param = IntValue(0)
    param.set(text)
    assert param.value == result
    assert str(param) == shown


@pytest.mark.parametrize("text", ["", "abc"])
def test_int_set_invalid(text):
    param = IntValue(0)
    with pytest.raises(ValueError):
        param.set(text)
    assert param.value == 0


def test_int_default_value_is_always_shown():
    assert default_value(IntValue(0)) == "0"


@pytest.mark.parametrize(
    "text, result, shown",
    [
        ("12", 12, "12"),
        ("0", 0, "0"),
        ("01", 1, "1"),
        ("3.14", 3.14, "3.14"),
        ("00.123456789", 0.123456789, "0.123456789"),
    ],
)
def test_float_set(text, result, shown):
    param = Float64Value(0)
    param.set(text)
    assert param.value == result
    assert str(param) == shown


@pytest.mark.parametrize("text", ["", "abc"])
def test_float_set_invalid(text):
    param = Float64Value(0)
    with pytest.raises(ValueError):
        param.set(text)
    assert param.value == 0


def test_float_default_value_is_always_shown():
    assert default_value(Float64Value(0)) == "0"


def test_float_exponent_format():
    assert str(Float64Value(1e-05)) == "1e-05"
    assert str(Float64Value(1234567.0)) == "1.234567e+06"


def test_strings_param():
    param = StringsValue(None)
    param.set("a")
    param.set("b")
    assert param.value == ["a", "b"]
    assert str(param) == '["a", "b"]'
    param.clear()
    assert param.value == []
    assert str(param) == "[]"


@pytest.mark.parametrize(
    "value, is_default",
    [(None, True), ([], True), ([""], False), (["a"], False), (["a", "b"], False)],
)
def test_strings_is_default(value, is_default):
    assert StringsValue(value).is_default() is is_default


def test_ints_param():
    param = IntsValue(None)
    param.set("1")
    param.set("2")
    assert param.value == [1, 2]
    assert str(param) == "[1, 2]"
    with pytest.raises(ValueError):
        param.set("c")
    assert param.value == [1, 2]
    param.clear()
    assert param.value == []
    assert str(param) == "[]"


@pytest.mark.parametrize(
    "value, is_default",
    [(None, True), ([], True), ([0], False), ([1], False), ([1, 2], False)],
)
def test_ints_is_default(value, is_default):
    assert IntsValue(value).is_default() is is_default


def test_floats_param():
    param = Floats64Value(None)
    param.set("1.1")
    param.set("2.2")
    assert param.value == [1.1, 2.2]
    assert str(param) == "[1.1, 2.2]"
    with pytest.raises(ValueError):
        param.set("c")
    assert param.value == [1.1, 2.2]
    param.clear()
    assert param.value == []
    assert str(param) == "[]"


@pytest.mark.parametrize(
    "value, is_default",
    [(None, True), ([], True), ([0], False), ([1], False), ([1, 2], False)],
)
def test_floats_is_default(value, is_default):
    assert Floats64Value(value).is_default() is is_default


def test_is_bool():
    assert is_bool(BoolValue(False)) is True
    assert is_bool(StringValue("")) is False
    assert is_bool(IntValue(0)) is False
    assert is_bool(StringsValue(None)) is False
    assert is_bool(IntsValue(None)) is False


def test_is_multi_valued():
    assert is_multi_valued(StringsValue(None)) is True
    assert is_multi_valued(IntsValue(None)) is True
    assert is_multi_valued(StringValue("")) is False


def test_default_value():
    assert default_value(BoolValue(False)) == ""
    assert default_value(BoolValue(True)) == "true"
    assert default_value(StringValue("a")) == '"a"'
    assert default_value(IntValue(12)) == "12"
    assert default_value(IntsValue([1, 2])) == "[1, 2]"


@pytest.mark.parametrize(
    "env, env_vars, make, expected, value",
    [
        ({"A": "DoDo"}, "", lambda: StringValue("default"), False, "default"),
        ({"A": "DoDo"}, "A", lambda: StringValue("default"), True, "DoDo"),
        ({"A": ""}, "A", lambda: StringValue("default"), False, "default"),
        ({"A": "Aval", "B": "Bval"}, "A B", lambda: StringValue("default"), True, "Aval"),
        ({"A": "", "B": "Bval"}, "A B", lambda: StringValue("default"), True, "Bval"),
        ({"A": "XXX"}, "A", lambda: IntValue(12), False, 12),
        ({"A": "XXX", "B": "16"}, "A B", lambda: IntValue(0), True, 16),
        ({"A": "XXX", "B": "16", "C": "YYY"}, "A B C", lambda: IntValue(0), True, 16),
        ({"A": "XXX", "B": "16", "C": "32"}, "A B C", lambda: IntValue(0), True, 16),
        ({"A": ""}, "A", lambda: IntsValue([1, 2]), False, [1, 2]),
        ({"A": "7"}, "A", lambda: IntsValue([1, 2]), True, [7]),
        ({"A": "7, 8, 9"}, "A", lambda: IntsValue([1, 2]), True, [7, 8, 9]),
        ({"A": "", "B": "7, 8, 9"}, "A B", lambda: IntsValue([1, 2]), True, [7, 8, 9]),
        (
            {"A": "10, 11, b", "B": "7, 8, 9"},
            "A B",
            lambda: IntsValue([1, 2]),
            True,
            [7, 8, 9],
        ),
    ],
)
def test_set_from_env(monkeypatch, env, env_vars, make, expected, value):
    for name, text in env.items():
        monkeypatch.setenv(name, text)
    target = make()
    assert set_from_env(target, env_vars) is expected
    assert target.value == value