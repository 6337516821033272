"""Screen composition: source rows, hint overlays, cursor, and status row.

Composition is side-effect free; callers write the returned text.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ..syntax.text import display_text
from .ansi import clip_ansi_line
from .overlay import HintMarker
from .theme import DEFAULT_THEME, ScreenTheme
from .view import SourceView


@dataclass
class ScreenContext:
    """Everything needed to draw one frame."""

    view: SourceView
    highlighted: list[str]
    width: int
    markers: list[HintMarker] = field(default_factory=list)
    hints_active: bool = False
    show_cursor: bool = True
    status_left: str = ""
    status_right: str = ""
    status_is_error: bool = False
    theme: ScreenTheme = DEFAULT_THEME
    no_color: bool = False


def _styled_cells(
    text: str,
    width: int,
    base_style: str,
    overlays: list[tuple[int, str, str]],
    reset: str,
) -> str:
    """Render ``text`` with ``(column, text, style)`` overlays written over it.

    Later overlays win where they overlap. Overlays past the end of the text
    pad the row with spaces.
    """
    cells = list(text[:width])
    styles = [base_style] * len(cells)
    for column, overlay_text, style in overlays:
        for offset, ch in enumerate(overlay_text):
            pos = column + offset
            if pos >= width:
                break
            while len(cells) <= pos:
                cells.append(" ")
                styles.append(base_style)
            cells[pos] = ch
            styles[pos] = style

    out: list[str] = []
    current = None
    for ch, style in zip(cells, styles):
        if style != current:
            if current:
                out.append(reset)
            if style:
                out.append(style)
            current = style
        out.append(ch)
    if current:
        out.append(reset)
    return "".join(out)


def _markers_by_line(view: SourceView, markers: list[HintMarker]) -> dict[int, list[tuple[int, HintMarker]]]:
    by_line: dict[int, list[tuple[int, HintMarker]]] = {}
    for marker in markers:
        line, column = view.position_of(marker.offset)
        by_line.setdefault(line, []).append((column, marker))
    return by_line


def compose_rows(context: ScreenContext) -> list[str]:
    """Return one rendered string per visible source row."""
    view = context.view
    theme = context.theme
    width = max(1, context.width)
    cursor_line, cursor_column = view.position_of(view.cursor)
    markers = _markers_by_line(view, context.markers) if context.hints_active else {}

    rows: list[str] = []
    for line in view.visible_rows():
        overlays: list[tuple[int, str, str]] = []
        for column, marker in sorted(markers.get(line, []), key=lambda item: item[0]):
            style = "" if context.no_color else marker.sgr()
            overlays.append((column, marker.label, style))
        if context.show_cursor and line == cursor_line:
            plain = display_text(view.lines[line])
            cursor_char = plain[cursor_column] if cursor_column < len(plain) else " "
            overlays.append((cursor_column, cursor_char, theme.cursor))

        if context.hints_active:
            rows.append(
                _styled_cells(display_text(view.lines[line]), width, theme.dim, overlays, theme.reset)
            )
        elif overlays:
            rows.append(_styled_cells(display_text(view.lines[line]), width, "", overlays, theme.reset))
        else:
            highlighted = context.highlighted[line] if line < len(context.highlighted) else ""
            clipped = clip_ansi_line(highlighted, width)
            rows.append(clipped + theme.reset if "\033" in clipped else clipped)

    while len(rows) < view.height:
        rows.append("~")
    return rows


def build_status_line(left_text: str, width: int, right_text: str = "") -> str:
    """Left/right aligned status text fitted to ``width`` columns."""
    usable = max(1, width - 1)
    if usable <= len(right_text):
        return right_text[-usable:]
    left_limit = max(0, usable - len(right_text) - 1)
    left = left_text[:left_limit]
    gap = " " * (usable - len(left) - len(right_text))
    return f"{left}{gap}{right_text}"


def compose_status(context: ScreenContext) -> str:
    theme = context.theme
    text = build_status_line(context.status_left, context.width, context.status_right)
    style = theme.status_error if context.status_is_error else (
        theme.status_mode if context.hints_active else theme.status
    )
    if not style:
        return text
    return f"{style}{text}{theme.reset}"


def compose_frame(context: ScreenContext) -> str:
    """Full-screen frame: home + clear, source rows, status row."""
    rows = compose_rows(context)
    rows.append(compose_status(context))
    return "\033[H\033[J" + "\r\n".join(rows)
