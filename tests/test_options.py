import pytest

from specargs.options import (
    BoolOpt,
    Float64Opt,
    HelpRequested,
    IntOpt,
    IntsOpt,
    StringOpt,
    StringsOpt,
    VarOpt,
    VersionRequested,
    make_option_container,
    mk_opt_strs,
    register_option,
)
from specargs.values import StringValue, is_bool


def test_errors_messages():
    assert str(HelpRequested()) == "help requested"
    assert str(VersionRequested()) == "version requested"


def test_mk_opt_strs():
    assert mk_opt_strs("f force") == ["-f", "--force"]
    assert mk_opt_strs("R recursive") == ["-R", "--recursive"]


def test_bool_make_value():
    value = BoolOpt(name="f", value=True).make_value()
    assert value.value is True
    assert is_bool(value)


def test_strings_make_value_copies_initial_list():
    initial = ["a"]
    value = StringsOpt(name="e", value=initial).make_value()
    value.set("b")
    assert initial == ["a"]
    assert value.value == ["a", "b"]


def test_var_opt_returns_given_value():
    custom = StringValue("x")
    assert VarOpt(name="v", value=custom).make_value() is custom


def test_container_from_option(monkeypatch):
    monkeypatch.delenv("SPECARGS_UNSET_VAR", raising=False)
    container = make_option_container(
        StringOpt(name="m memory", value="1g", desc="memory", env_var="SPECARGS_UNSET_VAR")
    )
    assert container.names == ["-m", "--memory"]
    assert container.value.value == "1g"
    assert container.default_value == str(StringValue("1g"))
    assert container.value_set_from_env is False


def test_container_default_hidden_for_zero_value():
    container = make_option_container(BoolOpt(name="d", value=False))
    assert container.default_value == ""


def test_container_reads_env(monkeypatch):
    monkeypatch.setenv("SPECARGS_COUNT", "42")
    container = make_option_container(IntOpt(name="n", value=7, env_var="SPECARGS_COUNT"))
    assert container.value.value == 42
    assert container.value_set_from_env is True
    assert container.default_value == "7"


def test_container_reads_multi_env(monkeypatch):
    monkeypatch.setenv("SPECARGS_INTS", "7, 8, 9")
    container = make_option_container(IntsOpt(name="i", value=[1], env_var="SPECARGS_INTS"))
    assert container.value.value == [7, 8, 9]
    assert container.value_set_from_env is True


def test_float_container(monkeypatch):
    container = make_option_container(Float64Opt(name="ratio", value=3.14))
    assert container.names == ["--ratio"]
    assert container.default_value == "3.14"


def test_register_option_indexes_names():
    options, index = [], {}
    container = make_option_container(BoolOpt(name="f force"))
    register_option(options, index, container)
    assert options == [container]
    assert index["-f"] is container
    assert index["--force"] is container


def test_register_option_rejects_duplicates():
    options, index = [], {}
    register_option(options, index, make_option_container(BoolOpt(name="f force")))
    with pytest.raises(ValueError, match="duplicate option name"):
        register_option(options, index, make_option_container(StringOpt(name="f")))
    assert len(options) == 1