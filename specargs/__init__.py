"""Spec-string driven command line parsing built on a backtracking state machine."""

__version__ = "0.1.0"

__all__ = [
    "container",
    "flow",
    "flowdot",
    "fsm",
    "fsmdot",
    "fsmtest",
    "lexer",
    "matcher",
    "matchertest",
    "model",
    "options",
    "parser",
    "values",
]