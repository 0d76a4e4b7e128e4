"""Turns spec string tokens into a prepared parse state machine."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from specargs.container import Container
from specargs.fsm import State
from specargs.lexer import ParseError, Token, TokenType
from specargs.matcher import (
    new_arg,
    new_opt,
    new_options,
    new_opts_end,
    new_shortcut,
)


@dataclass
class Params:
    """What the parser needs: the spec text and the declared options and arguments."""

    spec: str = ""
    options: list[Container] = field(default_factory=list)
    options_idx: dict[str, Container] = field(default_factory=dict)
    args: list[Container] = field(default_factory=list)
    args_idx: dict[str, Container] = field(default_factory=dict)


class _SpecError(Exception):
    pass


_ATOM_STARTS = frozenset(
    {
        TokenType.ARG,
        TokenType.OPTIONS,
        TokenType.SHORT_OPT,
        TokenType.LONG_OPT,
        TokenType.OPT_SEQ,
        TokenType.OPEN_PAR,
        TokenType.OPEN_SQ,
        TokenType.DOUBLE_DASH,
    }
)


def parse(tokens: list[Token], params: Params) -> State:
    """Build the state machine for ``tokens``, raising ParseError on bad syntax."""
    return _Parser(tokens, params).parse()


class _Parser:
    def __init__(self, tokens: list[Token], params: Params) -> None:
        self.spec = params.spec
        self.options = params.options
        self.options_idx = params.options_idx
        self.args_idx = params.args_idx
        self.tokens = list(tokens)
        self.pos = 0
        self.matched: Optional[Token] = None
        self.reject_options = False

    def parse(self) -> State:
        try:
            start, end = self._seq(required=False)
        except _SpecError as exc:
            pos = len(self.spec) if self._eof() else self._token().pos
            raise ParseError(self.spec, str(exc), pos) from None
        if not self._eof():
            raise ParseError(self.spec, "Unexpected input", self._token().pos)
        end.terminal = True
        start.prepare()
        return start

    def _seq(self, required: bool) -> tuple[State, State]:
        start = State()
        end = start

        def append(s: State, e: State) -> None:
            nonlocal end
            for tr in list(s.transitions):
                end.t(tr.matcher, tr.next)
            end = e

        if required:
            append(*self._choice())
        while self._can_atom():
            append(*self._choice())
        return start, end

    def _choice(self) -> tuple[State, State]:
        start, end = State(), State()

        def add(s: State, e: State) -> None:
            start.t(new_shortcut(), s)
            e.t(new_shortcut(), end)

        add(*self._atom())
        while self._found(TokenType.CHOICE):
            add(*self._atom())
        return start, end

    def _check_options_allowed(self) -> None:
        if self.reject_options:
            self._back()
            raise _SpecError("No options after --")

    def _declared_option(self, name: str, shown: str) -> Container:
        opt = self.options_idx.get(name)
        if opt is None:
            self._back()
            raise _SpecError(f"Undeclared option {shown}")
        return opt

    def _atom(self) -> tuple[State, State]:
        start = State()
        if self._eof():
            raise _SpecError("Unexpected end of input")

        if self._found(TokenType.ARG):
            name = self.matched.val
            arg = self.args_idx.get(name)
            if arg is None:
                self._back()
                raise _SpecError(f"Undeclared arg {name}")
            end = start.t(new_arg(arg), State())
        elif self._found(TokenType.OPTIONS):
            self._check_options_allowed()
            end = start.t(new_options(self.options, self.options_idx), State())
        elif self._found(TokenType.SHORT_OPT) or self._found(TokenType.LONG_OPT):
            self._check_options_allowed()
            name = self.matched.val
            opt = self._declared_option(name, name)
            end = start.t(new_opt(opt, self.options_idx), State())
            self._found(TokenType.OPT_VALUE)
        elif self._found(TokenType.OPT_SEQ):
            self._check_options_allowed()
            opts = [
                self._declared_option("-" + letter, "-" + letter)
                for letter in self.matched.val
            ]
            end = start.t(new_options(opts, self.options_idx), State())
        elif self._found(TokenType.OPEN_PAR):
            start, end = self._seq(required=True)
            self._expect(TokenType.CLOSE_PAR)
        elif self._found(TokenType.OPEN_SQ):
            start, end = self._seq(required=True)
            start.t(new_shortcut(), end)
            self._expect(TokenType.CLOSE_SQ)
        elif self._found(TokenType.DOUBLE_DASH):
            self.reject_options = True
            end = start.t(new_opts_end(), State())
            return start, end
        else:
            raise _SpecError(
                "Unexpected input: was expecting a command or a positional argument"
                " or an option"
            )

        if self._found(TokenType.REP):
            end.t(new_shortcut(), start)
        return start, end

    def _can_atom(self) -> bool:
        return not self._eof() and self._token().typ in _ATOM_STARTS

    def _found(self, typ: TokenType) -> bool:
        if self._is(typ):
            self.matched = self._token()
            self.pos += 1
            return True
        return False

    def _is(self, typ: TokenType) -> bool:
        return not self._eof() and self._token().typ == typ

    def _expect(self, typ: TokenType) -> None:
        if not self._found(typ):
            raise _SpecError(f"Was expecting {typ}")

    def _back(self) -> None:
        self.pos -= 1

    def _eof(self) -> bool:
        return self.pos >= len(self.tokens)

    def _token(self) -> Optional[Token]:
        return None if self._eof() else self.tokens[self.pos]