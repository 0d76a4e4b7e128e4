"""A plain description of an application, its commands, options and arguments."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Option:
    """An option as shown in help messages."""

    short_names: list[str] = field(default_factory=list)
    long_names: list[str] = field(default_factory=list)
    desc: str = ""
    env_var: str = ""
    hide_value: bool = False
    default_value: str = ""


@dataclass
class Argument:
    """A positional argument as shown in help messages."""

    name: str = ""
    desc: str = ""
    env_var: str = ""
    hide_value: bool = False
    default_value: str = ""


@dataclass
class Command:
    """A command with its options, arguments and sub-commands."""

    name: str = ""
    aliases: list[str] = field(default_factory=list)
    spec: str = ""
    desc: str = ""
    long_desc: str = ""
    hidden: bool = False
    options: list[Option] = field(default_factory=list)
    arguments: list[Argument] = field(default_factory=list)
    commands: list["Command"] = field(default_factory=list)


@dataclass
class App(Command):
    """The top level command, with a version."""

    version: str = ""