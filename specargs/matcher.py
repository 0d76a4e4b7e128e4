"""Matchers that consume command line arguments while walking the parse FSM."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional

from specargs.container import Container
from specargs.values import is_bool


@dataclass
class ParseContext:
    """The state of a parse: values seen for options and arguments, and flags."""

    args: dict = field(default_factory=dict)
    opts: dict = field(default_factory=dict)
    excluded_opts: set = field(default_factory=set)
    reject_options: bool = False

    def merge(self, other: "ParseContext") -> None:
        """Append the option and argument values of ``other`` to this context."""
        for key, found in other.args.items():
            self.args.setdefault(key, []).extend(found)
        for key, found in other.opts.items():
            self.opts.setdefault(key, []).extend(found)


def _remove_at(idx: int, arr: list[str]) -> list[str]:
    return arr[:idx] + arr[idx + 1 :]


def _remove_between(start: int, end: int, arr: list[str]) -> list[str]:
    return arr[:start] + arr[end + 1 :]


def _replace_at(idx: int, with_: str, arr: list[str]) -> list[str]:
    return arr[:idx] + [with_] + arr[idx + 1 :]


class Matcher(ABC):
    """Examines the arguments, fills the parse context and returns what is left."""

    @abstractmethod
    def match(self, args: list[str], context: ParseContext) -> tuple[bool, list[str]]:
        """Return whether the arguments matched and the ones not consumed."""

    @abstractmethod
    def priority(self) -> int:
        """Sorting key: the lower the number, the earlier the matcher is tried."""


class ShortcutMatcher(Matcher):
    """Always matches without consuming anything."""

    def match(self, args: list[str], context: ParseContext) -> tuple[bool, list[str]]:
        return True, args

    def priority(self) -> int:
        return 10

    def __str__(self) -> str:
        return "*"


class OptsEndMatcher(Matcher):
    """Matches the ``--`` operator: every later argument is positional."""

    def match(self, args: list[str], context: ParseContext) -> tuple[bool, list[str]]:
        context.reject_options = True
        return True, args

    def priority(self) -> int:
        return 9

    def __str__(self) -> str:
        return "--"


_SHORTCUT = ShortcutMatcher()
_OPTS_END = OptsEndMatcher()


class ArgMatcher(Matcher):
    """Matches one positional argument."""

    def __init__(self, container: Optional[Container]) -> None:
        self.container = container

    def match(self, args: list[str], context: ParseContext) -> tuple[bool, list[str]]:
        if not args:
            return False, args
        first = args[0]
        if not context.reject_options and first.startswith("-") and first != "-":
            return False, args
        context.args.setdefault(self.container, []).append(first)
        return True, args[1:]

    def priority(self) -> int:
        return 8

    def __str__(self) -> str:
        return self.container.name


class OptMatcher(Matcher):
    """Matches one option, in short or long form, anywhere among the options."""

    def __init__(self, container: Optional[Container], index: Optional[dict]) -> None:
        self.container = container
        self.index = index if index is not None else {}

    def priority(self) -> int:
        return 1

    def __str__(self) -> str:
        return self.container.names[0]

    def _record(self, context: ParseContext, value: str) -> None:
        context.opts.setdefault(self.container, []).append(value)

    def match(self, args: list[str], context: ParseContext) -> tuple[bool, list[str]]:
        from_env = self.container.value_set_from_env
        if not args or context.reject_options:
            return from_env, args

        idx = 0
        while idx < len(args):
            arg = args[idx]
            if arg == "-":
                idx += 1
                continue
            if arg == "--":
                return from_env, args
            if arg.startswith("--"):
                matched, consumed, nargs = self._match_long(args, idx, context)
            elif arg.startswith("-"):
                matched, consumed, nargs = self._match_short(args, idx, context)
            else:
                return from_env, args
            if matched:
                return True, nargs
            if consumed == 0:
                return from_env, args
            idx += consumed
        return from_env, args

    def _match_long(
        self, args: list[str], idx: int, context: ParseContext
    ) -> tuple[bool, int, list[str]]:
        name, sep, value = args[idx].partition("=")
        opt = self.index.get(name)
        if opt is None:
            return False, 0, args

        if sep:
            if opt is not self.container:
                return False, 1, args
            if value == "":
                return False, 0, args
            self._record(context, value)
            return True, 1, _remove_at(idx, args)

        if is_bool(opt.value):
            if opt is not self.container:
                return False, 1, args
            self._record(context, "true")
            return True, 1, _remove_at(idx, args)

        if len(args) - idx < 2:
            return False, 0, args
        if opt is not self.container:
            return False, 2, args
        value = args[idx + 1]
        if value.startswith("-"):
            return False, 0, args
        self._record(context, value)
        return True, 2, _remove_between(idx, idx + 1, args)

    def _match_short(
        self, args: list[str], idx: int, context: ParseContext
    ) -> tuple[bool, int, list[str]]:
        arg = args[idx]
        if len(arg) < 2:
            return False, 0, args

        if arg[2:].startswith("="):
            opt = self.index.get(arg[:2])
            if opt is not self.container:
                return False, 1, args
            value = arg[3:]
            if value == "":
                return False, 0, args
            self._record(context, value)
            return True, 1, _remove_at(idx, args)

        rem = arg[1:]
        rem_idx = 0
        while rem_idx < len(rem):
            opt = self.index.get("-" + rem[rem_idx])
            if opt is None:
                return False, 0, args

            if is_bool(opt.value):
                if opt is not self.container:
                    rem_idx += 1
                    continue
                self._record(context, "true")
                new_rem = rem[:rem_idx] + rem[rem_idx + 1 :]
                if not new_rem:
                    return True, 1, _remove_at(idx, args)
                return True, 0, _replace_at(idx, "-" + new_rem, args)

            value = rem[rem_idx + 1 :]
            if not value:
                if idx + 1 >= len(args):
                    return False, 0, args
                if opt is not self.container:
                    return False, 2, args
                value = args[idx + 1]
                if value.startswith("-"):
                    return False, 0, args
                self._record(context, value)
                new_rem = rem[:rem_idx]
                if not new_rem:
                    return True, 2, _remove_between(idx, idx + 1, args)
                nargs = _replace_at(idx, "-" + new_rem, args)
                return True, 1, _remove_at(idx + 1, nargs)

            if opt is not self.container:
                return False, 1, args
            self._record(context, value)
            new_rem = rem[:rem_idx]
            if not new_rem:
                return True, 1, _remove_at(idx, args)
            return True, 0, _replace_at(idx, "-" + new_rem, args)

        return False, 1, args


class OptionsMatcher(Matcher):
    """Matches one or more options out of a group, in any order."""

    def __init__(self, options: Optional[list], index: Optional[dict]) -> None:
        self.options = list(options or [])
        self.index = index if index is not None else {}

    def priority(self) -> int:
        return 2

    def match(self, args: list[str], context: ParseContext) -> tuple[bool, list[str]]:
        ok, nargs = self._try(args, context)
        if not ok:
            return False, args
        while True:
            ok, rest = self._try(nargs, context)
            if not ok:
                return True, nargs
            nargs = rest

    def _try(self, args: list[str], context: ParseContext) -> tuple[bool, list[str]]:
        if not args or context.reject_options:
            return False, args
        for option in self.options:
            if option in context.excluded_opts:
                continue
            ok, nargs = OptMatcher(option, self.index).match(args, context)
            if ok:
                if option.value_set_from_env:
                    context.excluded_opts.add(option)
                return True, nargs
        return False, args

    def __str__(self) -> str:
        return "-" + "".join(opt.names[0].removeprefix("-") for opt in self.options)


def new_shortcut() -> ShortcutMatcher:
    """The matcher that always matches and consumes nothing."""
    return _SHORTCUT


def new_opts_end() -> OptsEndMatcher:
    """The matcher of the ``--`` operator."""
    return _OPTS_END


def new_arg(container: Optional[Container]) -> ArgMatcher:
    """A positional argument matcher."""
    return ArgMatcher(container)


def new_opt(container: Optional[Container], index: Optional[dict]) -> OptMatcher:
    """A matcher for one option, given the index of all option names."""
    return OptMatcher(container, index)


def new_options(options: Optional[list], index: Optional[dict]) -> OptionsMatcher:
    """A matcher for a group of options."""
    return OptionsMatcher(options, index)


def is_shortcut(matcher: Matcher) -> bool:
    """Tell whether a matcher is the always-matching shortcut."""
    return isinstance(matcher, ShortcutMatcher)