"""Input surface: which handler receives the next key."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


class InputSurface:
    """Holds the installed hint dispatch table.

    While a table is installed keys go to hint mode; ``install(None)``
    restores normal-mode commands. The event loop is single-threaded, so a
    swap takes effect for the very next key.
    """

    def __init__(self) -> None:
        self.table = None
        self.installs = 0

    @property
    def hint_mode(self) -> bool:
        return self.table is not None

    def install(self, table) -> None:
        self.table = table
        self.installs += 1
        if table is None:
            logger.debug("normal-mode input restored")
