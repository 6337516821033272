"""Non-destructive hint markers for the terminal screen."""

from __future__ import annotations

from dataclasses import dataclass

from ..hints.colors import HSL, hsl_to_rgb


@dataclass(frozen=True)
class HintMarker:
    """One drawn hint: label text shown at a source offset."""

    handle: int
    offset: int
    label: str
    color: HSL
    node_type: str = ""

    def sgr(self) -> str:
        """Truecolor bold escape code for this marker's color."""
        red, green, blue = hsl_to_rgb(self.color)
        return f"\033[1;38;2;{red};{green};{blue}m"

    def ansi(self, no_color: bool = False) -> str:
        """Label wrapped in its color escape codes."""
        if no_color:
            return self.label
        return f"{self.sgr()}{self.label}\033[0m"


class AnsiHintRenderer:
    """Collects hint markers for the screen compositor.

    ``tree`` supplies node offsets and types; source text is never modified.
    """

    def __init__(self, tree) -> None:
        self.tree = tree
        self.markers: list[HintMarker] = []
        self._next_handle = 0

    def clear_all(self) -> None:
        self.markers = []

    def draw(self, node, label: str, color: HSL) -> int:
        handle = self._next_handle
        self._next_handle += 1
        node_type = self.tree.node_type(node) if hasattr(self.tree, "node_type") else ""
        self.markers.append(
            HintMarker(
                handle=handle,
                offset=self.tree.start(node),
                label=label,
                color=color,
                node_type=node_type,
            )
        )
        return handle
