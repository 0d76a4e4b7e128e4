"""The record that holds everything known about one option or argument."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(eq=False)
class Container:
    """Holds an option's or an argument's declaration and its value.

    Containers compare and hash by identity, so they can key parse results.
    """

    name: str = ""
    desc: str = ""
    env_var: str = ""
    names: list[str] = field(default_factory=list)
    hide_value: bool = False
    value_set_from_env: bool = False
    value_set_by_user: bool = False
    value: Any = None
    default_value: str = ""