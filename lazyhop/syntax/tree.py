"""Syntax-tree provider backed by a parsed Tree-sitter tree.

Offsets are UTF-8 byte offsets into the parsed source, the same unit the
source view uses for its cursor and viewport.
"""

from __future__ import annotations

import logging
from pathlib import Path

from .parsers import parser_for_path

logger = logging.getLogger(__name__)


class TreeSitterTree:
    """Read-only node accessors over one parse of one buffer."""

    def __init__(self, tree, source_bytes: bytes) -> None:
        self._tree = tree
        self.source_bytes = source_bytes
        self._child_fields: dict[int, dict[int, str | None]] = {}

    @classmethod
    def parse(cls, path: Path, source: str) -> TreeSitterTree:
        """Parse ``source`` with the grammar for ``path``.

        Raises ``NoParserAvailable`` when no grammar or parser is available.
        """
        parser = parser_for_path(path)
        source_bytes = source.encode("utf-8", errors="replace")
        tree = parser.parse(source_bytes)
        logger.debug("parsed %s (%d bytes)", path, len(source_bytes))
        return cls(tree, source_bytes)

    def root(self):
        return self._tree.root_node

    def children(self, node, named_only: bool = False) -> list:
        return list(node.named_children if named_only else node.children)

    def parent(self, node):
        return node.parent

    def start(self, node) -> int:
        return int(node.start_byte)

    def end(self, node) -> int:
        return int(node.end_byte)

    def field_name(self, node) -> str | None:
        """Name of the parent field holding ``node``, if any.

        Field names of all siblings are read in one pass the first time a
        parent is asked about, so each later lookup is a dict hit.
        """
        parent = node.parent
        if parent is None:
            return None
        fields = self._child_fields.get(parent.id)
        if fields is None:
            fields = {
                child.id: parent.field_name_for_child(index)
                for index, child in enumerate(parent.children)
            }
            self._child_fields[parent.id] = fields
        return fields.get(node.id)

    def node_type(self, node) -> str:
        return str(node.type)

    def text(self, node) -> str:
        return self.source_bytes[node.start_byte : node.end_byte].decode("utf-8", errors="replace")
