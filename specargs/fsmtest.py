"""Helpers to build and print state machines, for tests of the parse machinery."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from specargs.fsm import State, Transition
from specargs.matcher import Matcher, ParseContext


@dataclass(frozen=True)
class NopeMatcher(Matcher):
    """A matcher that never matches."""

    def match(self, args: list[str], context: ParseContext) -> tuple[bool, list[str]]:
        return False, args

    def priority(self) -> int:
        return 666

    def __str__(self) -> str:
        return "<nope>"


@dataclass(frozen=True)
class YepMatcher(Matcher):
    """A matcher that always matches without consuming anything."""

    def match(self, args: list[str], context: ParseContext) -> tuple[bool, list[str]]:
        return True, args

    def priority(self) -> int:
        return 666

    def __str__(self) -> str:
        return "<yep>"


@dataclass(eq=False)
class FuncMatcher(Matcher):
    """A matcher that delegates to a function and has a chosen priority."""

    match_func: Callable[[list[str], ParseContext], tuple[bool, list[str]]]
    test_priority: int = 0

    def match(self, args: list[str], context: ParseContext) -> tuple[bool, list[str]]:
        return self.match_func(args, context)

    def priority(self) -> int:
        return self.test_priority


def _state_name_term(name: str) -> tuple[str, bool]:
    if name.startswith("("):
        if name.endswith(")"):
            return name[1:-1], True
        raise ValueError(f"Invalid state name {name!r}")
    return name, False


def new_fsm(spec: str, matchers: dict) -> Optional[State]:
    """Build a machine from lines ``START MATCHER END``; ``(S)`` marks a terminal state.

    Returns the state named first, or None when the spec has no lines.
    """
    states: dict[str, State] = {}
    result: Optional[State] = None

    for line in spec.splitlines():
        if not line.strip():
            continue
        parts = line.split()
        if len(parts) != 3:
            raise ValueError(f"Invalid line {line!r}: syntax: START TR END")
        start_name, tr_name, end_name = parts
        start_name, start_term = _state_name_term(start_name)
        end_name, end_term = _state_name_term(end_name)

        start = states.setdefault(start_name, State())
        start.terminal = start.terminal or start_term
        if result is None:
            result = start

        end = states.setdefault(end_name, State())
        end.terminal = end.terminal or end_term

        if tr_name not in matchers:
            raise ValueError(f"Unknown matcher {tr_name!r} in line {line!r}")
        start.t(matchers[tr_name], end)
    return result


def transition_strs(transitions: list[Transition]) -> list[str]:
    """The textual form of each transition's matcher."""
    return [str(tr.matcher) for tr in transitions]


class _StateNames:
    def __init__(self) -> None:
        self._ids: dict[State, int] = {}

    def name(self, state: State) -> str:
        number = self._ids.setdefault(state, len(self._ids) + 1)
        return f"(S{number})" if state.terminal else f"S{number}"


def _lines(state: State, names: _StateNames, visited: set) -> list[str]:
    if state in visited:
        return []
    visited.add(state)
    result = []
    for tr in state.transitions:
        result.append(f"{names.name(state)} {tr.matcher} {names.name(tr.next)}")
        result.extend(_lines(tr.next, names, visited))
    return result


def fsm_str(state: State) -> str:
    """A sorted, line per transition description of a machine."""
    lines = _lines(state, _StateNames(), set())
    lines.sort(key=lambda line: line.strip("()"))
    return "\n".join(lines)