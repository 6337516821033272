"""Pygments highlighting of source lines for the idle (non-hint) view."""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from pygments import highlight
from pygments.formatters import Terminal256Formatter
from pygments.lexers import TextLexer, get_lexer_for_filename
from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound

from .text import display_text

logger = logging.getLogger(__name__)

DEFAULT_STYLE = "monokai"


def normalize_style(style: str) -> str:
    """Return ``style`` when Pygments knows it, else the default style."""
    try:
        get_style_by_name(style)
    except ClassNotFound:
        logger.info("unknown Pygments style %r, using %s", style, DEFAULT_STYLE)
        return DEFAULT_STYLE
    return style


@lru_cache(maxsize=8)
def _formatter_for_style(style: str) -> Terminal256Formatter:
    return Terminal256Formatter(style=normalize_style(style))


def _lexer_for(path: Path, source: str):
    try:
        return get_lexer_for_filename(path.name, source, stripnl=False, ensurenl=False)
    except ClassNotFound:
        return TextLexer(stripnl=False, ensurenl=False)


def highlight_lines(source: str, path: Path, style: str = DEFAULT_STYLE) -> list[str]:
    """Return one ANSI-colored display line per source line.

    Highlighting runs on display text (tabs expanded, control bytes
    replaced), so visible columns match the uncolored rendering.
    """
    plain_lines = source.split("\n")
    display_source = "\n".join(display_text(line) for line in plain_lines)
    rendered = highlight(display_source, _lexer_for(path, source), _formatter_for_style(style))
    lines = rendered.split("\n")
    if len(lines) < len(plain_lines):
        lines.extend(display_text(line) for line in plain_lines[len(lines) :])
    return lines[: len(plain_lines)]
