"""Tree-sitter grammar lookup and parser loading."""

from __future__ import annotations

import logging
from functools import lru_cache
from importlib import import_module
from pathlib import Path

from ..hints.errors import NoParserAvailable

logger = logging.getLogger(__name__)

MISSING_PARSER_ERROR = (
    "Tree-sitter parser unavailable. Install `tree-sitter-language-pack` "
    "(or `tree-sitter-languages`)."
)

PARSER_PROVIDERS: tuple[str, ...] = ("tree_sitter_languages", "tree_sitter_language_pack")

LANGUAGE_BY_SUFFIX: dict[str, str] = {
    ".py": "python",
    ".pyi": "python",
    ".pyw": "python",
    ".js": "javascript",
    ".mjs": "javascript",
    ".cjs": "javascript",
    ".jsx": "javascript",
    ".ts": "typescript",
    ".tsx": "tsx",
    ".go": "go",
    ".rs": "rust",
    ".java": "java",
    ".c": "c",
    ".h": "c",
    ".cc": "cpp",
    ".cpp": "cpp",
    ".hpp": "cpp",
    ".rb": "ruby",
    ".lua": "lua",
    ".sh": "bash",
    ".bash": "bash",
    ".json": "json",
    ".toml": "toml",
    ".yaml": "yaml",
    ".yml": "yaml",
}


def language_for_path(path: Path) -> str | None:
    """Map a file suffix to its Tree-sitter language name."""
    return LANGUAGE_BY_SUFFIX.get(path.suffix.lower())


@lru_cache(maxsize=32)
def load_parser(language_name: str):
    """Return a cached parser for ``language_name``.

    Providers in ``PARSER_PROVIDERS`` are asked in order; the first one that
    is installed and knows the grammar wins. Raises ``NoParserAvailable``
    with the last provider failure, or with install advice when none of
    them is importable.
    """
    reason = MISSING_PARSER_ERROR
    for provider in PARSER_PROVIDERS:
        try:
            module = import_module(provider)
        except ModuleNotFoundError:
            continue
        try:
            return module.get_parser(language_name)
        except Exception as exc:
            reason = f"{provider} cannot load the {language_name} grammar: {exc}"
            logger.warning(reason)
    raise NoParserAvailable(reason)


def parser_for_path(path: Path):
    """Return a parser for ``path`` or raise ``NoParserAvailable`` with the reason."""
    language_name = language_for_path(path)
    if language_name is None:
        suffix = path.suffix or "<no extension>"
        raise NoParserAvailable(f"No Tree-sitter grammar configured for {suffix}.")
    return load_parser(language_name)
