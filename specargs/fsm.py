"""The finite state machine that command line arguments are parsed with."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from specargs.matcher import Matcher, ParseContext, is_shortcut
from specargs.values import is_multi_valued


class UsageError(Exception):
    """The arguments do not follow the expected usage."""


@dataclass(eq=False)
class Transition:
    """A link to the next state, taken when its matcher matches."""

    matcher: Matcher
    next: "State"


class State:
    """A state of the machine: terminal or not, with outgoing transitions."""

    def __init__(self, terminal: bool = False) -> None:
        self.terminal = terminal
        self.transitions: list[Transition] = []

    def __repr__(self) -> str:
        return f"State(terminal={self.terminal}, transitions={len(self.transitions)})"

    def t(self, matcher: Matcher, next_state: "State") -> "State":
        """Add a transition to ``next_state`` and return ``next_state``."""
        self.transitions.append(Transition(matcher, next_state))
        return next_state

    def prepare(self) -> None:
        """Remove shortcut transitions and sort transitions by priority."""
        self._simplify(set())
        self._sort_transitions(set())

    def _sort_transitions(self, visited: set) -> None:
        if self in visited:
            return
        visited.add(self)
        self.transitions.sort(key=lambda tr: tr.matcher.priority())
        for tr in self.transitions:
            tr.next._sort_transitions(visited)

    def _simplify(self, visited: set) -> None:
        if self in visited:
            return
        visited.add(self)
        for tr in list(self.transitions):
            tr.next._simplify(visited)
        while self._simplify_self():
            pass

    def _simplify_self(self) -> bool:
        for idx, tr in enumerate(self.transitions):
            if not is_shortcut(tr.matcher):
                continue
            target = tr.next
            self.transitions = self.transitions[:idx] + self.transitions[idx + 1 :]
            for other in list(target.transitions):
                if not self._has(other):
                    self.transitions.append(other)
            if target.terminal:
                self.terminal = True
            return True
        return False

    def _has(self, tr: Transition) -> bool:
        return any(
            t.next is tr.next and t.matcher == tr.matcher for t in self.transitions
        )

    def parse(self, args: Optional[list[str]]) -> None:
        """Walk the machine over ``args`` and fill the matched containers.

        Raises UsageError when no path accepts the arguments, and ValueError
        when a matched value cannot be parsed.
        """
        context = ParseContext()
        if not self._apply(list(args or []), context):
            raise UsageError("incorrect usage")
        _fill_containers(context.opts)
        _fill_containers(context.args)

    def _apply(self, args: list[str], context: ParseContext) -> bool:
        if self.terminal and not args:
            return True

        reject = context.reject_options
        if args and not reject and args[0] == "--":
            reject = True
            args = args[1:]

        matches = []
        for tr in self.transitions:
            fresh = ParseContext(reject_options=reject)
            ok, rest = tr.matcher.match(args, fresh)
            if ok:
                matches.append((tr, rest, fresh))

        for tr, rest, fresh in matches:
            if tr.next._apply(rest, fresh):
                context.merge(fresh)
                return True
        return False


def _fill_containers(containers: dict) -> None:
    for container, found in containers.items():
        if is_multi_valued(container.value):
            container.value.clear()
        for text in found:
            container.value.set(text)
        container.value_set_from_env = False
        container.value_set_by_user = True