"""Graphviz dot rendering of a parse state machine."""

from __future__ import annotations

from specargs.fsm import State


class _StateIds:
    def __init__(self) -> None:
        self._ids: dict[State, int] = {}

    def id(self, state: State) -> int:
        return self._ids.setdefault(state, len(self._ids) + 1)


def _lines(state: State, ids: _StateIds, visited: set) -> list[str]:
    if state in visited:
        return []
    state_id = ids.id(state)
    visited.add(state)

    attrs = " [peripheries=2]" if state.terminal else ""
    result = [f"\tS{state_id}{attrs}"]
    for tr in state.transitions:
        result.append(f'\tS{state_id} -> S{ids.id(tr.next)} [label="{tr.matcher}"]')
        result.extend(_lines(tr.next, ids, visited))
    return result


def dot(state: State) -> str:
    """A graphviz dot document describing the machine that starts at ``state``."""
    body = "\n".join(_lines(state, _StateIds(), set()))
    return f"digraph G {{\n\trankdir=LR\n{body}\n}}\n"