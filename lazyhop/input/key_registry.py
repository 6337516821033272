"""Command-key dispatch tables shared by normal and hint modes."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class KeyComboBinding:
    """One command bound to every key token in ``combos``."""

    combos: tuple[str, ...]
    handler: Callable[[], bool | None]


class KeyComboRegistry:
    """Exact-match key -> command table."""

    def __init__(self, bindings: Iterable[KeyComboBinding] = ()) -> None:
        self._handlers: dict[str, Callable[[], bool | None]] = {}
        self.register_bindings(*bindings)

    def register_bindings(self, *bindings: KeyComboBinding) -> KeyComboRegistry:
        """Register bindings; later bindings win on shared keys. Returns ``self``."""
        for binding in bindings:
            for combo in binding.combos:
                self._handlers[combo] = binding.handler
        return self

    def bound_keys(self) -> frozenset[str]:
        return frozenset(self._handlers)

    def dispatch(self, key: str) -> bool | None:
        """Run the command bound to ``key``; ``None`` when nothing is bound."""
        handler = self._handlers.get(key)
        if handler is None:
            return None
        return handler()
