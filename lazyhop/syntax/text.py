"""Source loading and terminal-safe display text."""

from __future__ import annotations

import re
from pathlib import Path

TAB_SIZE = 4
_CONTROL_RE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f-\x9f]")


def read_text(path: Path) -> str:
    """Read text using tolerant encoding fallback order.

    Attempts UTF-8, UTF-8 with BOM, then latin-1; as a final fallback decodes
    raw bytes with UTF-8 replacement semantics.
    """
    for encoding in ("utf-8", "utf-8-sig", "latin-1"):
        try:
            return path.read_text(encoding=encoding)
        except UnicodeDecodeError:
            continue
    return path.read_bytes().decode("utf-8", errors="replace")


def display_text(line: str) -> str:
    """Expand tabs and replace control bytes one-for-one so columns stay aligned."""
    expanded = line.expandtabs(TAB_SIZE)
    if _CONTROL_RE.search(expanded) is None:
        return expanded
    return _CONTROL_RE.sub("?", expanded)


def display_column(line: str, char_index: int) -> int:
    """Screen column of character ``char_index`` in ``line``."""
    return len(line[:char_index].expandtabs(TAB_SIZE))
