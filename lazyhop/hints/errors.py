"""Exceptions raised by the hint engine.

Only activation failures are meant to reach the user; keystroke mismatches
are absorbed by the input automaton and never raised.
"""

from __future__ import annotations


class HintError(Exception):
    """Base class for hint-navigation failures shown in the status row."""


class InvalidSymbol(HintError, ValueError):
    """A label contains a symbol outside the active alphabet."""

    def __init__(self, symbol: str, alphabet: tuple[str, ...] | str) -> None:
        self.symbol = symbol
        self.alphabet = tuple(alphabet)
        super().__init__(f"Symbol {symbol!r} is not a hint key.")


class NoUsableAlphabet(HintError):
    """Reserved command keys consumed every candidate hint key."""

    def __init__(self, reserved: tuple[str, ...] = ()) -> None:
        self.reserved = reserved
        super().__init__("No hint keys left after removing command keys.")


class NoParserAvailable(HintError):
    """The current buffer has no Tree-sitter parser."""

    def __init__(self, reason: str = "No Tree-sitter parser available for this buffer.") -> None:
        self.reason = reason
        super().__init__(reason)
