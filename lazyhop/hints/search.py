"""Breadth-first candidate search over the visible part of a syntax tree.

A node is a hint target when it lies strictly inside the viewport, hangs off
its parent through a named field, and has no named children. Nodes with
named children that overlap the viewport are walked through to reach
targets further down. Discovery order assigns registry indices.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any

logger = logging.getLogger(__name__)

DEFAULT_MAX_HINTS = 300
DEFAULT_DEPTH_LIMIT = 30


@dataclass(frozen=True)
class Viewport:
    """Half-open offset range ``[start, end)`` currently on screen."""

    start: int
    end: int

    def contains(self, start: int, end: int) -> bool:
        """Return whether ``[start, end)`` lies strictly inside the viewport."""
        return start > self.start and end < self.end

    def overlaps(self, start: int, end: int) -> bool:
        return start < self.end and end > self.start


@dataclass
class Registry:
    """Dense index -> node table for one hint generation."""

    capacity: int = DEFAULT_MAX_HINTS
    nodes: list[Any] = field(default_factory=list)
    truncated: bool = False

    def __len__(self) -> int:
        return len(self.nodes)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.nodes)

    def get(self, index: int) -> Any | None:
        """Return the node at ``index`` or ``None`` when no node has it."""
        if 0 <= index < len(self.nodes):
            return self.nodes[index]
        return None

    def items(self) -> Iterator[tuple[int, Any]]:
        return enumerate(self.nodes)

    @property
    def full(self) -> bool:
        return len(self.nodes) >= self.capacity

    def add(self, node: Any) -> bool:
        """Append ``node``; returns ``False`` (and marks truncation) once full."""
        if self.full:
            self.truncated = True
            return False
        self.nodes.append(node)
        return True


def search(
    tree,
    focus,
    viewport: Viewport,
    depth_limit: int = DEFAULT_DEPTH_LIMIT,
    max_hints: int = DEFAULT_MAX_HINTS,
    *,
    require_field: bool = True,
) -> Registry:
    """Collect hint targets under ``focus`` in breadth-first order.

    ``tree`` is the syntax-tree provider; ``focus`` itself sits at depth 0 and
    is never labeled. Children deeper than ``depth_limit`` are not visited.
    When more than ``max_hints`` targets are visible the registry keeps the
    first ones found and is flagged as truncated.
    """
    registry = Registry(capacity=max(1, max_hints))
    queue: deque[tuple[Any, int]] = deque([(focus, 0)])
    visited = 0

    while queue:
        node, depth = queue.popleft()
        if depth >= depth_limit:
            continue
        for child in tree.children(node, named_only=True):
            visited += 1
            start = tree.start(child)
            end = tree.end(child)
            if not viewport.overlaps(start, end):
                continue
            grandchildren = tree.children(child, named_only=True)
            if grandchildren:
                queue.append((child, depth + 1))
                continue
            if not viewport.contains(start, end):
                continue
            if require_field and tree.field_name(child) is None:
                continue
            if not registry.add(child):
                logger.warning(
                    "hint search truncated at %d targets (max_hints=%d)",
                    len(registry),
                    registry.capacity,
                )
                return registry

    logger.debug("hint search visited %d nodes, found %d targets", visited, len(registry))
    return registry
