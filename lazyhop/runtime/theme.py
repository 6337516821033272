"""Screen chrome palettes.

Hint label colors come from the color table; themes only style the text
around them (dimmed source, cursor, status row).
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ScreenTheme:
    """Semantic ANSI fragments used by the screen compositor."""

    name: str
    reset: str
    dim: str
    cursor: str
    status: str
    status_mode: str
    status_error: str


DEFAULT_THEME = ScreenTheme(
    name="default",
    reset="\033[0m",
    dim="\033[2;38;5;245m",
    cursor="\033[7m",
    status="\033[38;5;250;48;5;236m",
    status_mode="\033[1;38;5;81;48;5;236m",
    status_error="\033[1;38;5;203;48;5;236m",
)

PLAIN_THEME = ScreenTheme(
    name="plain",
    reset="",
    dim="",
    cursor="",
    status="",
    status_mode="",
    status_error="",
)


def resolve_theme(*, no_color: bool = False) -> ScreenTheme:
    return PLAIN_THEME if no_color else DEFAULT_THEME
