"""Tokenizer for usage spec strings."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TokenType(str, Enum):
    """The kinds of tokens a spec string is made of."""

    ARG = "Arg"
    OPEN_PAR = "OpenPar"
    CLOSE_PAR = "ClosePar"
    OPEN_SQ = "OpenSq"
    CLOSE_SQ = "CloseSq"
    CHOICE = "Choice"
    OPTIONS = "Options"
    REP = "Rep"
    SHORT_OPT = "ShortOpt"
    LONG_OPT = "LongOpt"
    OPT_SEQ = "OptSeq"
    OPT_VALUE = "OptValue"
    DOUBLE_DASH = "DblDash"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Token:
    """A token: its type, its text and its position in the input."""

    typ: TokenType
    val: str
    pos: int

    def __str__(self) -> str:
        return f"{self.typ}('{self.val}')@{self.pos}"


class ParseError(Exception):
    """An error in a spec string, located by position."""

    def __init__(self, input: str, msg: str, pos: int) -> None:
        super().__init__(msg)
        self.input = input
        self.msg = msg
        self.pos = pos

    def _indent(self) -> str:
        return "".join("\t" if c == "\t" else " " for c in self.input[: self.pos])

    def __str__(self) -> str:
        return (
            f"Parse error at position {self.pos}:\n"
            f"{self.input}\n{self._indent()}^ {self.msg}"
        )


_SINGLE_CHAR_TOKENS = {
    "[": TokenType.OPEN_SQ,
    "]": TokenType.CLOSE_SQ,
    "(": TokenType.OPEN_PAR,
    ")": TokenType.CLOSE_PAR,
    "|": TokenType.CHOICE,
}


def _is_lowercase(c: str) -> bool:
    return "a" <= c <= "z"


def _is_uppercase(c: str) -> bool:
    return "A" <= c <= "Z"


def _is_digit(c: str) -> bool:
    return "0" <= c <= "9"


def _is_letter(c: str) -> bool:
    return _is_lowercase(c) or _is_uppercase(c)


def _is_ok_in_arg(c: str) -> bool:
    return _is_uppercase(c) or _is_digit(c) or c == "_"


def _is_ok_long_opt(c: str, first: bool) -> bool:
    return _is_letter(c) or _is_digit(c) or c == "_" or (not first and c == "-")


def tokenize(usage: str) -> list[Token]:
    """Split a spec string into tokens, raising ParseError on bad input."""
    tokens: list[Token] = []
    pos = 0
    eof = len(usage)

    while pos < eof:
        c = usage[pos]
        if c in (" ", "\t"):
            pos += 1
        elif c in _SINGLE_CHAR_TOKENS:
            tokens.append(Token(_SINGLE_CHAR_TOKENS[c], c, pos))
            pos += 1
        elif c == ".":
            start = pos
            pos += 1
            if pos >= eof or usage[pos] != ".":
                raise ParseError(usage, "Unexpected end of usage, was expecting '..'", pos)
            pos += 1
            if pos >= eof or usage[pos] != ".":
                raise ParseError(usage, "Unexpected end of usage, was expecting '.'", pos)
            tokens.append(Token(TokenType.REP, "...", start))
            pos += 1
        elif c == "-":
            start = pos
            pos += 1
            if pos >= eof:
                raise ParseError(
                    usage, "Unexpected end of usage, was expecting an option name", pos
                )
            o = usage[pos]
            if _is_letter(o):
                pos += 1
                while pos < eof and _is_letter(usage[pos]):
                    pos += 1
                typ = TokenType.SHORT_OPT
                opt = usage[start:pos]
                if pos - start > 2:
                    typ = TokenType.OPT_SEQ
                    opt = opt[1:]
                tokens.append(Token(typ, opt, start))
                if pos < eof and usage[pos] == "-":
                    raise ParseError(usage, "Invalid syntax", pos)
            elif o == "-":
                pos += 1
                if pos == eof or usage[pos] == " ":
                    tokens.append(Token(TokenType.DOUBLE_DASH, "--", start))
                    continue
                first = pos
                while pos < eof and _is_ok_long_opt(usage[pos], pos == first):
                    pos += 1
                opt = usage[start:pos]
                if len(opt) == 2:
                    raise ParseError(usage, "Was expecting a long option name", pos)
                tokens.append(Token(TokenType.LONG_OPT, opt, start))
        elif c == "=":
            start = pos
            pos += 1
            if pos >= eof or usage[pos] != "<":
                raise ParseError(usage, "Unexpected end of usage, was expecting '=<'", pos)
            closed = False
            while pos < eof:
                closed = usage[pos] == ">"
                if closed:
                    break
                pos += 1
            if not closed:
                raise ParseError(usage, "Unclosed option value", pos)
            if pos - start == 2:
                raise ParseError(usage, "Was expecting an option value", pos)
            pos += 1
            tokens.append(Token(TokenType.OPT_VALUE, usage[start:pos], start))
        elif _is_uppercase(c):
            start = pos
            pos += 1
            while pos < eof and _is_ok_in_arg(usage[pos]):
                pos += 1
            text = usage[start:pos]
            typ = TokenType.OPTIONS if text == "OPTIONS" else TokenType.ARG
            tokens.append(Token(typ, text, start))
        else:
            raise ParseError(usage, "Unexpected input", pos)

    return tokens