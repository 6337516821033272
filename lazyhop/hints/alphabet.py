"""Hint-key alphabet assembly.

Keyboard rows are concatenated in priority order, then every key already
bound to a hint-mode command is removed so typed hint keys never collide
with commands.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from .errors import NoUsableAlphabet

DEFAULT_HINT_ROWS: dict[str, str] = {
    "home": "asdfghjkl",
    "top": "qwertyuiop",
    "bottom": "zxcvbnm",
}
DEFAULT_ROW_ORDER: tuple[str, ...] = ("home", "top", "bottom")


def concat_rows(rows: Mapping[str, str], order: Iterable[str]) -> tuple[str, ...]:
    """Join configured rows in priority order, keeping first occurrences.

    Row names missing from ``rows`` are skipped.
    """
    symbols: list[str] = []
    seen: set[str] = set()
    for name in order:
        for symbol in rows.get(name, ""):
            if symbol in seen or symbol.isspace():
                continue
            seen.add(symbol)
            symbols.append(symbol)
    return tuple(symbols)


def build_alphabet(candidates: Iterable[str], reserved: Iterable[str]) -> tuple[str, ...]:
    """Return ``candidates`` without reserved command keys, order preserved."""
    reserved_keys = set(reserved)
    alphabet = tuple(symbol for symbol in candidates if symbol not in reserved_keys)
    if not alphabet:
        raise NoUsableAlphabet(tuple(sorted(reserved_keys)))
    return alphabet
