"""Bijective index <-> label numeral system over a hint alphabet.

The alphabet is the digit set: its first symbol is zero. Labels of one
generation share a width and are left-padded with the zero symbol.
"""

from __future__ import annotations

from collections.abc import Sequence

from .errors import InvalidSymbol


def encode(index: int, alphabet: Sequence[str]) -> str:
    """Return ``index`` written in base ``len(alphabet)``, most significant first."""
    if index < 0:
        raise ValueError(f"hint index must be non-negative: {index}")
    radix = len(alphabet)
    if radix == 0:
        raise ValueError("hint alphabet is empty")
    if radix == 1:
        # A single key can only ever address the first hint.
        if index > 0:
            raise ValueError("a one-key alphabet addresses a single hint")
        return alphabet[0]

    digits: list[str] = []
    while True:
        index, digit = divmod(index, radix)
        digits.append(alphabet[digit])
        if index == 0:
            break
    return "".join(reversed(digits))


def decode(label: str, alphabet: Sequence[str]) -> int:
    """Return the index a label encodes; raises ``InvalidSymbol`` on stray symbols."""
    radix = len(alphabet)
    positions = {symbol: position for position, symbol in enumerate(alphabet)}
    value = 0
    for symbol in label:
        digit = positions.get(symbol)
        if digit is None:
            raise InvalidSymbol(symbol, tuple(alphabet))
        value = value * radix + digit
    return value


def addressable_count(radix: int, width: int) -> int:
    """Number of distinct labels of ``width`` symbols."""
    return radix**width


def label_width(count: int, radix: int) -> int:
    """Minimum label width able to address ``count`` hints (at least 1)."""
    if radix < 1:
        raise ValueError("hint alphabet is empty")
    if radix == 1:
        return 1
    width = 1
    while addressable_count(radix, width) < count:
        width += 1
    return width


def pad_label(label: str, width: int, alphabet: Sequence[str]) -> str:
    """Left-pad ``label`` with the zero symbol up to ``width``."""
    missing = width - len(label)
    if missing <= 0:
        return label
    return alphabet[0] * missing + label


def labels_for(count: int, alphabet: Sequence[str]) -> list[str]:
    """Return the padded labels for indices ``0..count-1``."""
    width = label_width(count, len(alphabet))
    return [pad_label(encode(index, alphabet), width, alphabet) for index in range(count)]
