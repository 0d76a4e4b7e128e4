"""Option declarations and the containers built from them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any

from specargs.container import Container
from specargs.values import (
    BoolValue,
    Float64Value,
    Floats64Value,
    IntsValue,
    IntValue,
    StringsValue,
    StringValue,
    default_value,
    set_from_env,
)


class HelpRequested(Exception):
    """The user asked for help."""

    def __init__(self) -> None:
        super().__init__("help requested")


class VersionRequested(Exception):
    """The user asked for the version."""

    def __init__(self) -> None:
        super().__init__("version requested")


@dataclass
class _Opt(ABC):
    # ``name`` is a space separated list of names without dashes, e.g. ``f force``.
    name: str = ""
    desc: str = ""
    env_var: str = ""
    hide_value: bool = False

    @abstractmethod
    def make_value(self) -> Any:
        """A fresh value holding the option's initial value."""


@dataclass
class BoolOpt(_Opt):
    """A boolean option."""

    value: bool = False

    def make_value(self) -> BoolValue:
        return BoolValue(bool(self.value))


@dataclass
class StringOpt(_Opt):
    """A string option."""

    value: str = ""

    def make_value(self) -> StringValue:
        return StringValue(self.value)


@dataclass
class IntOpt(_Opt):
    """An integer option."""

    value: int = 0

    def make_value(self) -> IntValue:
        return IntValue(int(self.value))


@dataclass
class Float64Opt(_Opt):
    """A floating point option."""

    value: float = 0.0

    def make_value(self) -> Float64Value:
        return Float64Value(float(self.value))


@dataclass
class StringsOpt(_Opt):
    """A repeatable string option; the env variable holds a comma separated list."""

    value: list = field(default_factory=list)

    def make_value(self) -> StringsValue:
        return StringsValue(list(self.value or []))


@dataclass
class IntsOpt(_Opt):
    """A repeatable integer option; the env variable holds a comma separated list."""

    value: list = field(default_factory=list)

    def make_value(self) -> IntsValue:
        return IntsValue(list(self.value or []))


@dataclass
class Floats64Opt(_Opt):
    """A repeatable float option; the env variable holds a comma separated list."""

    value: list = field(default_factory=list)

    def make_value(self) -> Floats64Value:
        return Floats64Value(list(self.value or []))


@dataclass
class VarOpt(_Opt):
    """An option whose value type is supplied by the caller."""

    value: Any = None

    def make_value(self) -> Any:
        return self.value


def mk_opt_strs(opt_name: str) -> list[str]:
    """Dashed names: one dash for one-letter names, two for the others."""
    return [("-" if len(name) == 1 else "--") + name for name in opt_name.split()]


def make_option_container(opt: _Opt) -> Container:
    """Build the container of an option, reading its environment variables."""
    value = opt.make_value()
    container = Container(
        name=opt.name,
        desc=opt.desc,
        env_var=opt.env_var,
        hide_value=opt.hide_value,
        value=value,
    )
    container.default_value = default_value(value)
    container.value_set_from_env = set_from_env(value, opt.env_var)
    container.names = mk_opt_strs(opt.name)
    return container


def register_option(options: list, index: dict, container: Container) -> None:
    """Add an option container to a list and index it by each of its names.

    Raises ValueError when one of its names is already taken.
    """
    for name in container.names:
        if name in index:
            raise ValueError(f'duplicate option name "{name}"')
    options.append(container)
    for name in container.names:
        index[name] = container