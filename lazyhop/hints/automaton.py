"""Per-level dispatch tables resolving typed hint keys to registry indices.

Level ``w`` handles the first key of a ``w``-wide label: each key maps to
its digit plus the level below, and level 1 keys complete the label. Levels
are built once and reused; growing the automaton only adds levels on top.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Transition:
    """Result of one key at one level: its digit and the next table (``None`` resolves)."""

    digit: int
    next_table: DispatchTable | None


@dataclass(frozen=True)
class DispatchTable:
    """Key -> transition map for one label position."""

    level: int
    radix: int
    transitions: dict[str, Transition] = field(default_factory=dict)

    def lookup(self, key: str) -> Transition | None:
        return self.transitions.get(key)

    def keys(self) -> tuple[str, ...]:
        return tuple(self.transitions)


class InputAutomaton:
    """Lazily grown stack of dispatch tables for one alphabet."""

    def __init__(self, alphabet: Sequence[str]) -> None:
        if not alphabet:
            raise ValueError("hint alphabet is empty")
        self.alphabet = tuple(alphabet)
        self._levels: list[DispatchTable] = []

    @property
    def width(self) -> int:
        """Widest label currently supported."""
        return len(self._levels)

    def _build_level(self, below: DispatchTable | None) -> DispatchTable:
        level = 1 if below is None else below.level + 1
        transitions = {
            symbol: Transition(digit=digit, next_table=below)
            for digit, symbol in enumerate(self.alphabet)
        }
        return DispatchTable(level=level, radix=len(self.alphabet), transitions=transitions)

    def ensure_width(self, width: int) -> None:
        """Add missing levels up to ``width``; existing levels are kept as-is."""
        while len(self._levels) < max(1, width):
            below = self._levels[-1] if self._levels else None
            self._levels.append(self._build_level(below))

    def dispatch(self, level: int) -> DispatchTable:
        """Return the table that handles the first key of a ``level``-wide label."""
        self.ensure_width(level)
        return self._levels[level - 1]

    def resolve(self, keys: Iterable[str], width: int | None = None) -> int | None:
        """Resolve a full key sequence to an index.

        Returns ``None`` while the sequence is incomplete or when a key is not
        recognized at its level.
        """
        cursor = HintInput(self.dispatch(width or max(1, self.width)))
        result = None
        for key in keys:
            if result is not None:
                return None
            result = cursor.feed(key)
            if cursor.rejected:
                return None
        return result


class HintInput:
    """Incremental reader over an installed dispatch table, O(1) per key."""

    def __init__(self, top: DispatchTable) -> None:
        self.top = top
        self.table = top
        self.value = 0
        self.typed = ""
        self.rejected = False

    def reset(self) -> None:
        self.table = self.top
        self.value = 0
        self.typed = ""

    def feed(self, key: str) -> int | None:
        """Consume one key; returns the resolved index when a label completes.

        An unknown key drops the partial input and sets ``rejected``.
        """
        transition = self.table.lookup(key)
        if transition is None:
            self.reset()
            self.rejected = True
            return None

        self.rejected = False
        self.value = self.value * self.table.radix + transition.digit
        if transition.next_table is None:
            index = self.value
            self.reset()
            return index

        self.typed += key
        self.table = transition.next_table
        return None
