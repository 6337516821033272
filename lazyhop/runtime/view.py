"""Source view: cursor, viewport rows, and byte-offset geometry.

Offsets are UTF-8 byte offsets so they line up with Tree-sitter node ranges.
"""

from __future__ import annotations

from bisect import bisect_right

from ..syntax.text import display_column


class SourceView:
    """Scrollable window of ``height`` rows over one source buffer."""

    def __init__(self, source: str, height: int = 24, top: int = 0) -> None:
        self.source = source
        self.data = source.encode("utf-8", errors="replace")
        self.lines = source.split("\n")
        self.line_starts: list[int] = []
        offset = 0
        for line in self.lines:
            self.line_starts.append(offset)
            offset += len(line.encode("utf-8", errors="replace")) + 1
        self.height = max(1, height)
        self.top = 0
        self.cursor = 0
        self.scroll_to(top)

    @property
    def line_count(self) -> int:
        return len(self.lines)

    def max_top(self) -> int:
        return max(0, self.line_count - self.height)

    def page_rows(self) -> int:
        return max(1, self.height - 1)

    def resize(self, height: int) -> None:
        self.height = max(1, height)
        self.scroll_to(self.top)

    def scroll_to(self, top: int) -> bool:
        """Move the first visible line; returns whether it changed."""
        clamped = min(max(0, top), self.max_top())
        if clamped == self.top:
            return False
        self.top = clamped
        return True

    def scroll(self, delta: int) -> bool:
        return self.scroll_to(self.top + delta)

    def visible_rows(self) -> range:
        return range(self.top, min(self.line_count, self.top + self.height))

    def visible_range(self) -> tuple[int, int]:
        """Byte range ``[start, end)`` of the visible lines, trailing newline included."""
        rows = self.visible_rows()
        start = self.line_starts[self.top]
        last = rows[-1] if rows else self.top
        end = self.line_starts[last] + len(self.lines[last].encode("utf-8", errors="replace")) + 1
        return start, end

    def line_of(self, offset: int) -> int:
        """Line index containing byte ``offset``."""
        return max(0, bisect_right(self.line_starts, offset) - 1)

    def position_of(self, offset: int) -> tuple[int, int]:
        """``(line, screen column)`` of byte ``offset``."""
        line = self.line_of(offset)
        prefix = self.data[self.line_starts[line] : max(self.line_starts[line], offset)]
        chars = len(prefix.decode("utf-8", errors="replace"))
        return line, display_column(self.lines[line], chars)

    def move_cursor(self, offset: int) -> None:
        """Place the cursor at byte ``offset`` and keep it on screen."""
        self.cursor = min(max(0, offset), len(self.data))
        line = self.line_of(self.cursor)
        if line < self.top:
            self.scroll_to(line)
        elif line >= self.top + self.height:
            self.scroll_to(line - self.height + 1)
