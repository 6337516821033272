"""One viewing session: buffer, tree, hint controller, and screen state.

Wires the hint controller to its collaborators: the parsed tree, the source
view (viewport and cursor), the marker renderer, and the input surface.
"""

from __future__ import annotations

import logging
from pathlib import Path

from ..hints.colors import anchor_for_style
from ..hints.controller import NavigationController
from ..hints.errors import HintError, NoParserAvailable
from ..hints.settings import HintSettings
from ..input.key_normal import NormalKeyContext, handle_normal_key
from ..input.surface import InputSurface
from ..syntax.highlight import highlight_lines, normalize_style
from ..syntax.text import display_text
from ..syntax.tree import TreeSitterTree
from .overlay import AnsiHintRenderer
from .screen import ScreenContext
from .theme import resolve_theme
from .view import SourceView

logger = logging.getLogger(__name__)


class HopSession:
    """State shared by the interactive loop and the one-shot CLI modes."""

    def __init__(
        self,
        path: Path,
        source: str,
        settings: HintSettings | None = None,
        *,
        style: str = "monokai",
        no_color: bool = False,
        height: int = 24,
        top_line: int = 0,
        tree=None,
    ) -> None:
        self.path = path
        self.source = source
        self.style = normalize_style(style)
        self.no_color = no_color
        self.theme = resolve_theme(no_color=no_color)
        self.view = SourceView(source, height=height, top=top_line)
        self.message = ""
        self.message_is_error = False
        self.parse_error: str | None = None

        self.tree = tree
        if self.tree is None:
            try:
                self.tree = TreeSitterTree.parse(path, source)
            except NoParserAvailable as exc:
                logger.info("hints unavailable for %s: %s", path, exc)
                self.parse_error = str(exc)
                self.message = self.parse_error

        self.renderer = AnsiHintRenderer(self.tree)
        self.surface = InputSurface()
        self.controller = NavigationController(
            self.tree,
            self.view,
            self.renderer,
            self.surface,
            settings,
            anchor=anchor_for_style(self.style),
        )
        if no_color:
            self.highlighted = [display_text(line) for line in self.view.lines]
        else:
            self.highlighted = highlight_lines(source, path, self.style)

    @property
    def settings(self) -> HintSettings:
        return self.controller.settings

    def _set_message(self, text: str, *, error: bool = False) -> None:
        self.message = text
        self.message_is_error = error

    def activate_hints(self) -> bool:
        """Enter hint mode, reporting activation failures in the status row."""
        try:
            self.controller.activate()
        except HintError as exc:
            logger.warning("hint activation refused: %s", exc)
            text = str(exc)
            if isinstance(exc, NoParserAvailable) and self.parse_error:
                text = self.parse_error
            self._set_message(text, error=True)
            return False
        self._set_message("")
        return True

    def _report_hint_error(self, action) -> None:
        """Run a hint-mode action; failures end up in the status row."""
        try:
            action()
        except HintError as exc:
            logger.warning("hint mode left: %s", exc)
            self._set_message(str(exc), error=True)

    def scroll(self, delta: int) -> bool:
        """Scroll the view, re-running the hint search when it moved."""
        changed = self.view.scroll(delta)
        if changed:
            self._report_hint_error(self.controller.on_scroll)
        return changed

    def resize(self, height: int) -> None:
        if max(1, height) == self.view.height:
            return
        self.view.resize(height)
        self._report_hint_error(self.controller.on_scroll)

    def handle_key(self, key: str) -> bool:
        """Route one key to hint mode or normal mode; returns ``True`` to quit."""
        if self.surface.hint_mode:
            self._set_message("")
            self._report_hint_error(lambda: self.controller.handle_key(key))
            return False

        context = NormalKeyContext(
            keys=self.settings.keys,
            scroll=self.scroll,
            page_rows=self.view.page_rows,
            activate_hints=self.activate_hints,
        )
        return handle_normal_key(key, context)

    def status_left(self) -> str:
        if self.message:
            return self.message
        if self.controller.active:
            registry = self.controller.registry
            count = f"{len(registry)}+" if registry.truncated else str(len(registry))
            typed = self.controller.typed
            return f"HINT  {count} targets  {typed}".rstrip()
        line, column = self.view.position_of(self.view.cursor)
        return f"{self.path.name}  {line + 1}:{column + 1}"

    def status_right(self) -> str:
        if self.controller.active:
            return "u up  q done"
        keys = self.settings.keys
        return f"{'/'.join(keys.activate)} hints  q quit"

    def screen_context(self, width: int, *, show_cursor: bool = True) -> ScreenContext:
        return ScreenContext(
            view=self.view,
            highlighted=self.highlighted,
            width=width,
            markers=list(self.renderer.markers),
            hints_active=self.controller.active,
            show_cursor=show_cursor,
            status_left=self.status_left(),
            status_right=self.status_right(),
            status_is_error=self.message_is_error and bool(self.message),
            theme=self.theme,
            no_color=self.no_color,
        )
