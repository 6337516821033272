"""Terminal host for hint navigation: view, screen, config, and event loop."""

from .session import HopSession
from .view import SourceView

__all__ = ["HopSession", "SourceView"]
