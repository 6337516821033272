"""Tunable options for hint navigation and their defaults."""

from __future__ import annotations

from dataclasses import dataclass, field

from .alphabet import DEFAULT_HINT_ROWS, DEFAULT_ROW_ORDER, build_alphabet, concat_rows
from .colors import DEFAULT_COLOR_SEED, HSL, ColorCoefficients
from .search import DEFAULT_DEPTH_LIMIT, DEFAULT_MAX_HINTS


@dataclass(frozen=True)
class KeyBindings:
    """Key tokens for each command. Hint-mode commands are reserved from the hint alphabet."""

    activate: tuple[str, ...] = ("f",)
    ascend: tuple[str, ...] = ("u",)
    suspend: tuple[str, ...] = ("q", "ESC", "CTRL_C")
    scroll_down: tuple[str, ...] = ("DOWN",)
    scroll_up: tuple[str, ...] = ("UP",)
    page_down: tuple[str, ...] = ("CTRL_D", " ")
    page_up: tuple[str, ...] = ("CTRL_U",)
    quit: tuple[str, ...] = ("q", "CTRL_C")

    def hint_mode_keys(self) -> tuple[str, ...]:
        """Every key that acts as a command while hints are shown."""
        return (
            self.ascend
            + self.suspend
            + self.scroll_down
            + self.scroll_up
            + self.page_down
            + self.page_up
        )


@dataclass(frozen=True)
class HintSettings:
    """Hint-navigation configuration; read again on every recomputation."""

    hint_rows: dict[str, str] = field(default_factory=lambda: dict(DEFAULT_HINT_ROWS))
    hint_row_order: tuple[str, ...] = DEFAULT_ROW_ORDER
    max_hints: int = DEFAULT_MAX_HINTS
    depth_limit: int = DEFAULT_DEPTH_LIMIT
    require_field: bool = True
    color_seed: str = DEFAULT_COLOR_SEED
    anchor: HSL | None = None
    coefficients: ColorCoefficients = ColorCoefficients()
    keys: KeyBindings = KeyBindings()

    def alphabet(self) -> tuple[str, ...]:
        """Hint keys in priority order, minus hint-mode command keys."""
        candidates = concat_rows(self.hint_rows, self.hint_row_order)
        return build_alphabet(candidates, self.keys.hint_mode_keys())
