"""Hint navigation engine: labels, candidate search, colors, and key automaton."""

from .alphabet import DEFAULT_HINT_ROWS, DEFAULT_ROW_ORDER, build_alphabet, concat_rows
from .automaton import DispatchTable, HintInput, InputAutomaton, Transition
from .colors import HSL, ColorCoefficients, build_color_table, color_for
from .controller import NavigationController
from .errors import HintError, InvalidSymbol, NoParserAvailable, NoUsableAlphabet
from .labels import decode, encode, label_width, labels_for
from .search import Registry, Viewport, search
from .settings import HintSettings, KeyBindings

__all__ = [
    "DEFAULT_HINT_ROWS",
    "DEFAULT_ROW_ORDER",
    "ColorCoefficients",
    "DispatchTable",
    "HSL",
    "HintError",
    "HintInput",
    "HintSettings",
    "InputAutomaton",
    "InvalidSymbol",
    "KeyBindings",
    "NavigationController",
    "NoParserAvailable",
    "NoUsableAlphabet",
    "Registry",
    "Transition",
    "Viewport",
    "build_alphabet",
    "build_color_table",
    "color_for",
    "concat_rows",
    "decode",
    "encode",
    "label_width",
    "labels_for",
    "search",
]
