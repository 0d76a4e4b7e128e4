"""Execution steps chained by success and error paths."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional


class ExitCode(Exception):
    """Raised to stop execution, run the pending hooks and exit with a code."""

    def __init__(self, code: int) -> None:
        super().__init__(code)
        self.code = code


@dataclass(eq=False)
class Step:
    """A block of code with a step to go to on success and one on error."""

    do: Optional[Callable[[], None]] = None
    success: Optional["Step"] = None
    error: Optional["Step"] = None
    desc: str = ""
    exiter: Optional[Callable[[int], None]] = None

    def run(self, p: Optional[BaseException] = None) -> None:
        """Run this step, carrying ``p``, the exception pending so far."""
        self._call_do(p)

        if self.success is not None:
            self.success.run(p)
        elif p is None:
            return
        elif isinstance(p, ExitCode):
            if self.exiter is not None:
                self.exiter(p.code)
        else:
            raise p

    def _call_do(self, p: Optional[BaseException]) -> None:
        if self.do is None:
            return
        try:
            self.do()
        except Exception as exc:
            if self.error is None:
                if p is not None:
                    raise p from exc
                raise
            failure = exc
        else:
            return
        self.error.run(failure)