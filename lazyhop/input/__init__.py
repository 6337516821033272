"""Input layer: key decoding, command registries, and the input surface."""

from .key_normal import NormalKeyContext, handle_normal_key
from .key_registry import KeyComboBinding, KeyComboRegistry
from .reader import ESC_SEQUENCE_TIMEOUT_MS, read_key
from .surface import InputSurface

__all__ = [
    "ESC_SEQUENCE_TIMEOUT_MS",
    "InputSurface",
    "KeyComboBinding",
    "KeyComboRegistry",
    "NormalKeyContext",
    "handle_normal_key",
    "read_key",
]
