"""Hint-mode state machine.

The controller owns the focus node, the current registry, the input
automaton and the color table. Collaborators are plain objects:

- ``tree``: syntax-tree provider with ``root()``, ``children(node, named_only)``,
  ``parent(node)``, ``start(node)``, ``end(node)`` and ``field_name(node)``,
  or ``None`` when the buffer has no parser.
- ``view``: text surface with ``visible_range()``, ``move_cursor(offset)``,
  ``scroll(delta)`` and ``page_rows()``.
- ``renderer``: ``clear_all()`` and ``draw(node, label, color)``.
- ``surface``: ``install(table)``; ``None`` restores normal-mode input.
"""

from __future__ import annotations

import logging
from dataclasses import replace

from ..input.key_registry import KeyComboBinding, KeyComboRegistry
from .automaton import DispatchTable, HintInput, InputAutomaton
from .colors import DEFAULT_ANCHOR_HEX, HSL, build_color_table, hex_to_hsl
from .errors import NoParserAvailable, NoUsableAlphabet
from .labels import label_width, labels_for
from .search import Registry, Viewport, search
from .settings import HintSettings

logger = logging.getLogger(__name__)


class NavigationController:
    """Activation, refocus, ascend, and scroll handling for hint navigation."""

    def __init__(
        self,
        tree,
        view,
        renderer,
        surface,
        settings: HintSettings | None = None,
        *,
        anchor: HSL | None = None,
    ) -> None:
        self.tree = tree
        self.view = view
        self.renderer = renderer
        self.surface = surface
        self.settings = settings if settings is not None else HintSettings()
        self.default_anchor = anchor if anchor is not None else hex_to_hsl(DEFAULT_ANCHOR_HEX)

        self.active = False
        self.focus = None
        self.registry = Registry(capacity=self.settings.max_hints)
        self.labels: list[str] = []
        self.width = 1
        self.handles: list[object] = []

        self._automaton: InputAutomaton | None = None
        self._input: HintInput | None = None
        self._colors: tuple[HSL, ...] = ()
        self._colors_key: tuple | None = None
        self._commands = KeyComboRegistry()

    @property
    def typed(self) -> str:
        """Keys typed so far toward the current label."""
        return self._input.typed if self._input is not None else ""

    @property
    def colors(self) -> tuple[HSL, ...]:
        return self._colors

    @property
    def automaton(self) -> InputAutomaton | None:
        return self._automaton

    def update_settings(self, **changes) -> HintSettings:
        """Replace settings fields; the next recomputation uses them."""
        self.settings = replace(self.settings, **changes)
        return self.settings

    def activate(self) -> None:
        """Enter hint mode focused on the tree root.

        Raises ``NoParserAvailable`` or ``NoUsableAlphabet`` and stays
        inactive when hints cannot be shown.
        """
        if self.tree is None:
            raise NoParserAvailable()
        self._prepare_alphabet()
        self.active = True
        self.focus = self.tree.root()
        logger.info("hint mode activated")
        self.refresh()

    def suspend(self) -> bool:
        """Leave hint mode, removing every drawn hint."""
        if not self.active:
            return False
        self.renderer.clear_all()
        self.handles = []
        self.active = False
        self.focus = None
        self.registry = Registry(capacity=self.settings.max_hints)
        self.labels = []
        self._input = None
        self.surface.install(None)
        logger.info("hint mode suspended")
        return True

    def select(self, index: int) -> bool:
        """Jump to the node labeled ``index`` and refocus on its parent."""
        if not self.active:
            return False
        node = self.registry.get(index)
        if node is None:
            logger.debug("no hint target at index %d", index)
            return False
        self.view.move_cursor(self.tree.start(node))
        parent = self.tree.parent(node)
        self.focus = parent if parent is not None else self.tree.root()
        logger.debug("jumped to index %d, refocusing on parent", index)
        self.refresh()
        return True

    def ascend(self) -> bool:
        """Refocus on the top-level ancestor of the focus node, or on the root."""
        if not self.active:
            return False
        self.focus = self._top_level_ancestor(self.focus)
        logger.debug("ascended to top-level ancestor")
        self.refresh()
        return True

    def on_scroll(self) -> bool:
        """Re-evaluate the whole visible tree after the viewport moved."""
        if not self.active:
            return False
        self.focus = self.tree.root()
        self.refresh()
        return True

    def handle_key(self, key: str) -> bool:
        """Handle one key in hint mode; returns whether the key was used."""
        if not self.active or self._input is None:
            return False
        if self._commands.dispatch(key) is not None:
            return True

        index = self._input.feed(key)
        if self._input.rejected:
            self.surface.install(self._input.top)
            return False
        if index is None:
            self.surface.install(self._input.table)
            return True
        if not self.select(index):
            self.surface.install(self._input.top)
        return True

    def refresh(self) -> None:
        """Rebuild registry, labels, automaton and hints for the current focus.

        When the current settings leave no hint keys, hint mode is suspended
        and ``NoUsableAlphabet`` is raised to the caller.
        """
        settings = self.settings
        try:
            alphabet = self._prepare_alphabet()
        except NoUsableAlphabet:
            self.suspend()
            raise
        start, end = self.view.visible_range()
        capacity = settings.max_hints if len(alphabet) > 1 else 1
        registry = search(
            self.tree,
            self.focus,
            Viewport(start, end),
            settings.depth_limit,
            capacity,
            require_field=settings.require_field,
        )

        self.renderer.clear_all()
        self.handles = []
        self.registry = registry
        self.width = label_width(len(self.registry), len(alphabet))
        self._automaton.ensure_width(self.width)
        self.labels = labels_for(len(self.registry), alphabet)
        colors = self._color_table(alphabet)

        for index, node in self.registry.items():
            self.handles.append(self.renderer.draw(node, self.labels[index], colors[index]))

        table = self._automaton.dispatch(self.width)
        self._input = HintInput(table)
        self._commands = self._build_commands()
        self.surface.install(table)
        logger.debug("drew %d hints at width %d", len(self.registry), self.width)

    @property
    def active_table(self) -> DispatchTable | None:
        """Table currently expected to receive keys, if hint mode is active."""
        return self._input.table if self._input is not None else None

    def _prepare_alphabet(self) -> tuple[str, ...]:
        alphabet = self.settings.alphabet()
        if self._automaton is None or self._automaton.alphabet != alphabet:
            self._automaton = InputAutomaton(alphabet)
        return alphabet

    def _color_table(self, alphabet: tuple[str, ...]) -> tuple[HSL, ...]:
        settings = self.settings
        anchor = settings.anchor if settings.anchor is not None else self.default_anchor
        key = (anchor, settings.color_seed, settings.coefficients, alphabet, settings.max_hints)
        if key != self._colors_key:
            self._colors = build_color_table(
                settings.max_hints,
                alphabet,
                anchor,
                settings.color_seed,
                settings.coefficients,
            )
            self._colors_key = key
        return self._colors

    def _top_level_ancestor(self, node):
        root = self.tree.root()
        if node is None or node == root:
            return root
        parent = self.tree.parent(node)
        if parent is None or parent == root:
            return root
        while True:
            above = self.tree.parent(parent)
            if above is None or above == root:
                return parent
            parent = above

    def _scroll(self, delta: int) -> bool:
        if self.view.scroll(delta):
            self.on_scroll()
        return True

    def _build_commands(self) -> KeyComboRegistry:
        keys = self.settings.keys
        return KeyComboRegistry(
            (
                KeyComboBinding(keys.ascend, self.ascend),
                KeyComboBinding(keys.suspend, self.suspend),
                KeyComboBinding(keys.scroll_down, lambda: self._scroll(1)),
                KeyComboBinding(keys.scroll_up, lambda: self._scroll(-1)),
                KeyComboBinding(keys.page_down, lambda: self._scroll(self.view.page_rows())),
                KeyComboBinding(keys.page_up, lambda: self._scroll(-self.view.page_rows())),
            )
        )
