"""Tree-sitter tree provider, source loading, and highlighting."""

from .parsers import LANGUAGE_BY_SUFFIX, language_for_path, load_parser, parser_for_path
from .text import read_text
from .tree import TreeSitterTree

__all__ = [
    "LANGUAGE_BY_SUFFIX",
    "TreeSitterTree",
    "language_for_path",
    "load_parser",
    "parser_for_path",
    "read_text",
]
