"""Main interactive event loop.

Single-threaded: draw a frame, read one key, dispatch it, repeat. Every
recomputation finishes before the next key is read.
"""

from __future__ import annotations

import logging
import shutil

from ..input.reader import read_key
from .screen import compose_frame
from .session import HopSession
from .terminal import TerminalController

logger = logging.getLogger(__name__)

IDLE_TIMEOUT_MS = 250


def run_main_loop(session: HopSession, terminal: TerminalController, stdin_fd: int) -> None:
    """Run until a quit key is pressed."""
    dirty = True
    last_size = None
    while True:
        term = shutil.get_terminal_size((80, 24))
        size = (term.columns, term.lines)
        if size != last_size:
            session.resize(max(1, term.lines - 1))
            last_size = size
            dirty = True

        if dirty:
            terminal.write(compose_frame(session.screen_context(term.columns)))
            dirty = False

        key = read_key(stdin_fd, timeout_ms=IDLE_TIMEOUT_MS)
        if not key:
            continue
        logger.debug("key %r", key)
        if session.handle_key(key):
            return
        dirty = True


def run_viewer(session: HopSession, stdin_fd: int, stdout_fd: int) -> None:
    """Open the terminal UI for ``session`` and restore the terminal on exit."""
    terminal = TerminalController(stdin_fd, stdout_fd)
    with terminal.raw_mode():
        run_main_loop(session, terminal, stdin_fd)
