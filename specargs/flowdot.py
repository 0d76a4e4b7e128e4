"""Graphviz dot rendering of an execution flow."""

from __future__ import annotations

from specargs.flow import Step


def _lines(step: Step, visited: set) -> list[str]:
    if step in visited:
        return []
    visited.add(step)

    result = []
    if step.success is not None:
        result.append(f'\t"{step.desc}" -> "{step.success.desc}" [label="ok"]')
        result.extend(_lines(step.success, visited))
    if step.error is not None:
        result.append(f'\t"{step.desc}" -> "{step.error.desc}" [label="ko"]')
        result.extend(_lines(step.error, visited))
    return result


def dot(step: Step) -> str:
    """A graphviz dot document describing the flow that starts at ``step``."""
    body = "\n".join(_lines(step, set()))
    return f"digraph G {{\n\trankdir=LR\n{body}\n}}\n"