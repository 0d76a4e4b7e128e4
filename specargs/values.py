"""Typed values that options and arguments parse their text into."""

from __future__ import annotations

import json
import math
import os
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from decimal import Decimal

_TRUE_WORDS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_WORDS = frozenset({"0", "f", "F", "FALSE", "false", "False"})
_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_INF_PATTERN = re.compile(r"[+-]?(inf|infinity)", re.IGNORECASE)
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


class FlagValue(ABC):
    """A value that can be set from its textual form.

    Optional capabilities are discovered by duck typing:
    ``is_bool_flag()`` marks a value that needs no argument on the command line,
    ``clear()`` marks a multi-valued one and ``is_default()`` hides the current
    value from help messages when it returns true.
    """

    @abstractmethod
    def set(self, s: str) -> None:
        """Parse ``s`` and store it, raising ValueError when it is invalid."""


def _parse_bool(s: str) -> bool:
    if s in _TRUE_WORDS:
        return True
    if s in _FALSE_WORDS:
        return False
    raise ValueError(f"invalid boolean value {s!r}")


def _parse_int(s: str) -> int:
    if not _INT_PATTERN.fullmatch(s):
        raise ValueError(f"invalid integer value {s!r}")
    number = int(s)
    if not _INT64_MIN <= number <= _INT64_MAX:
        raise ValueError(f"integer value {s!r} out of range")
    return number


def _parse_float(s: str) -> float:
    if not s or s != s.strip() or "_" in s:
        raise ValueError(f"invalid float value {s!r}")
    try:
        number = float(s)
    except ValueError:
        raise ValueError(f"invalid float value {s!r}") from None
    if math.isinf(number) and not _INF_PATTERN.fullmatch(s):
        raise ValueError(f"float value {s!r} out of range")
    return number


def _format_float(number: float) -> str:
    """Format a float using the shortest representation, %g style."""
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "+Inf" if number > 0 else "-Inf"
    if number == 0:
        return "-0" if math.copysign(1.0, number) < 0 else "0"
    sign, digit_tuple, exponent = Decimal(repr(number)).as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    point = len(digits) + exponent
    digits = digits.rstrip("0")
    prefix = "-" if sign else ""
    exp10 = point - 1
    if exp10 < -4 or exp10 >= 6:
        mantissa = digits[0] + ("." + digits[1:] if len(digits) > 1 else "")
        exp_sign = "+" if exp10 >= 0 else "-"
        return f"{prefix}{mantissa}e{exp_sign}{abs(exp10):02d}"
    if point <= 0:
        body = "0." + "0" * (-point) + digits
    elif point >= len(digits):
        body = digits + "0" * (point - len(digits))
    else:
        body = digits[:point] + "." + digits[point:]
    return prefix + body


def _quote(s: str) -> str:
    return json.dumps(s, ensure_ascii=False)


@dataclass
class BoolValue(FlagValue):
    """A boolean value; it can be set without an explicit argument."""

    value: bool = False

    def set(self, s: str) -> None:
        self.value = _parse_bool(s)

    def is_bool_flag(self) -> bool:
        return True

    def is_default(self) -> bool:
        return not self.value

    def __str__(self) -> str:
        return "true" if self.value else "false"


@dataclass
class StringValue(FlagValue):
    """A string value."""

    value: str = ""

    def set(self, s: str) -> None:
        self.value = s

    def is_default(self) -> bool:
        return self.value == ""

    def __str__(self) -> str:
        return _quote(self.value)


@dataclass
class IntValue(FlagValue):
    """A decimal integer value."""

    value: int = 0

    def set(self, s: str) -> None:
        self.value = _parse_int(s)

    def __str__(self) -> str:
        return str(self.value)


@dataclass
class Float64Value(FlagValue):
    """A floating point value."""

    value: float = 0.0

    def set(self, s: str) -> None:
        self.value = _parse_float(s)

    def __str__(self) -> str:
        return _format_float(self.value)


@dataclass
class StringsValue(FlagValue):
    """A list of strings; every set appends."""

    value: list = field(default_factory=list)

    def __post_init__(self) -> None:
        self.value = list(self.value or [])

    def set(self, s: str) -> None:
        self.value.append(s)

    def clear(self) -> None:
        self.value = []

    def is_default(self) -> bool:
        return not self.value

    def __str__(self) -> str:
        return "[" + ", ".join(_quote(s) for s in self.value) + "]"


@dataclass
class IntsValue(FlagValue):
    """A list of integers; every set appends."""

    value: list = field(default_factory=list)

    def __post_init__(self) -> None:
        self.value = list(self.value or [])

    def set(self, s: str) -> None:
        self.value.append(_parse_int(s))

    def clear(self) -> None:
        self.value = []

    def is_default(self) -> bool:
        return not self.value

    def __str__(self) -> str:
        return "[" + ", ".join(str(n) for n in self.value) + "]"


@dataclass
class Floats64Value(FlagValue):
    """A list of floats; every set appends."""

    value: list = field(default_factory=list)

    def __post_init__(self) -> None:
        self.value = list(self.value or [])

    def set(self, s: str) -> None:
        self.value.append(_parse_float(s))

    def clear(self) -> None:
        self.value = []

    def is_default(self) -> bool:
        return not self.value

    def __str__(self) -> str:
        return "[" + ", ".join(_format_float(n) for n in self.value) + "]"


def is_bool(value) -> bool:
    """Tell whether a value behaves as a boolean flag."""
    check = getattr(value, "is_bool_flag", None)
    return bool(check()) if callable(check) else False


def is_multi_valued(value) -> bool:
    """Tell whether a value accumulates several entries."""
    return callable(getattr(value, "clear", None))


def _set_multi_valued(into, entries: list[str]) -> bool:
    into.clear()
    try:
        for entry in entries:
            into.set(entry.strip())
    except (ValueError, TypeError):
        into.clear()
        return False
    return True


def set_from_env(into, env_vars: str) -> bool:
    """Fill ``into`` from the first usable variable of a space separated list.

    Multi-valued targets read a comma separated list. Returns whether a value
    was taken from the environment.
    """
    multi = is_multi_valued(into)
    for name in env_vars.split():
        raw = os.environ.get(name, "")
        if not raw:
            continue
        if multi:
            if _set_multi_valued(into, raw.split(",")):
                return True
            continue
        try:
            into.set(raw)
        except (ValueError, TypeError):
            continue
        return True
    return False


def default_value(value) -> str:
    """The text shown as a value's default, empty when it is the zero value."""
    check = getattr(value, "is_default", None)
    if callable(check) and check():
        return ""
    return str(value)