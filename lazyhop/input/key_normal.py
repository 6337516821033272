"""Normal-mode keyboard handling."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from ..hints.settings import KeyBindings
from .key_registry import KeyComboBinding, KeyComboRegistry


@dataclass(frozen=True)
class NormalKeyContext:
    """Bound operations available while no hints are shown."""

    keys: KeyBindings
    scroll: Callable[[int], bool]
    page_rows: Callable[[], int]
    activate_hints: Callable[[], None]


def handle_normal_key(key: str, context: NormalKeyContext) -> bool:
    """Handle one normal-mode key and return ``True`` when the app should quit."""
    keys = context.keys

    def quit_action() -> bool:
        return True

    def activate_action() -> bool:
        context.activate_hints()
        return False

    def scroll_action(delta: int) -> Callable[[], bool]:
        def run() -> bool:
            context.scroll(delta)
            return False

        return run

    def page_action(direction: int) -> Callable[[], bool]:
        def run() -> bool:
            context.scroll(direction * context.page_rows())
            return False

        return run

    bindings = KeyComboRegistry().register_bindings(
        KeyComboBinding(keys.scroll_down + ("j",), scroll_action(1)),
        KeyComboBinding(keys.scroll_up + ("k",), scroll_action(-1)),
        KeyComboBinding(keys.page_down + ("PAGE_DOWN",), page_action(1)),
        KeyComboBinding(keys.page_up + ("PAGE_UP",), page_action(-1)),
        KeyComboBinding(keys.quit, quit_action),
        KeyComboBinding(keys.activate, activate_action),
    )
    return bool(bindings.dispatch(key))
