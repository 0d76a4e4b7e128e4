"""Helpers that build matchers from names alone, for tests of the parse machinery."""

from __future__ import annotations

from specargs.container import Container
from specargs.matcher import (
    ArgMatcher,
    OptionsMatcher,
    OptMatcher,
)
from specargs.matcher import new_arg as _matcher_new_arg
from specargs.matcher import new_opt as _matcher_new_opt
from specargs.matcher import new_options as _matcher_new_options
from specargs.values import StringValue


def new_arg(name: str) -> ArgMatcher:
    """A positional argument matcher for an argument called ``name``, e.g. SRC."""
    container = Container(name=name, names=[name], value=StringValue())
    return _matcher_new_arg(container)


def new_opt(name: str) -> OptMatcher:
    """A string option matcher from space separated names, e.g. ``-f --force``."""
    names = name.split()
    container = Container(name=name, names=names, value=StringValue())
    index = {n: container for n in names}
    return _matcher_new_opt(container, index)


def new_options(names: str) -> OptionsMatcher:
    """A matcher over string options, one per letter, e.g. ``-abc``."""
    containers = []
    index = {}
    for letter in names.removeprefix("-"):
        full_name = "-" + letter
        container = Container(name=full_name, names=[full_name], value=StringValue())
        containers.append(container)
        index[full_name] = container
    return _matcher_new_options(containers, index)