"""Deterministic per-hint colors derived from the background color.

Every hint index owns one color for as long as the anchor, seed, and
coefficients stay the same, so a slot keeps its color across searches even
though the node behind it changes.
"""

from __future__ import annotations

import colorsys
import math
import random
from collections.abc import Sequence
from dataclasses import dataclass
from functools import lru_cache

from .labels import encode

DEFAULT_ANCHOR_HEX = "#272822"
DEFAULT_COLOR_SEED = "lazyhop"


@dataclass(frozen=True)
class HSL:
    """Color as hue, saturation, luminance, each in ``[0, 1]``."""

    hue: float
    saturation: float
    luminance: float


@dataclass(frozen=True)
class ColorCoefficients:
    """Offsets (``*_base``) and random spreads (``*_coef``) applied to the anchor.

    Hue spans the whole wheel; saturation and luminance are pushed up so
    hints stand out against dark backgrounds.
    """

    hue_base: float = 0.0
    hue_coef: float = 1.0
    sat_base: float = 0.45
    sat_coef: float = 0.3
    lum_base: float = 0.45
    lum_coef: float = 0.2


def wrap01(value: float) -> float:
    """Wrap a cyclic value into ``[0, 1)``."""
    if 0.0 <= value < 1.0:
        return value
    return value - math.floor(value)


def clamp01(value: float) -> float:
    return min(1.0, max(0.0, value))


def seeded_unit(text: str) -> float:
    """Reproducible pseudo-random value in ``[0, 1)`` for ``text``."""
    return random.Random(text).random()


def color_for(
    label: str,
    anchor: HSL,
    seed: str = DEFAULT_COLOR_SEED,
    coefficients: ColorCoefficients = ColorCoefficients(),
) -> HSL:
    """Return the hint color for ``label`` against ``anchor``."""
    rand = seeded_unit(label + seed)
    c = coefficients
    return HSL(
        hue=wrap01(anchor.hue + c.hue_base + rand * c.hue_coef),
        saturation=clamp01(anchor.saturation + c.sat_base + rand * c.sat_coef),
        luminance=clamp01(anchor.luminance + c.lum_base + rand * c.lum_coef),
    )


def build_color_table(
    max_hints: int,
    alphabet: Sequence[str],
    anchor: HSL,
    seed: str = DEFAULT_COLOR_SEED,
    coefficients: ColorCoefficients = ColorCoefficients(),
) -> tuple[HSL, ...]:
    """Colors for every index below ``max_hints``.

    Colors are keyed by the unpadded label, so they do not depend on the
    label width of a particular generation.
    """
    count = max_hints if len(alphabet) > 1 else min(1, max_hints)
    return tuple(
        color_for(encode(index, alphabet), anchor, seed, coefficients)
        for index in range(count)
    )


def hsl_to_rgb(color: HSL) -> tuple[int, int, int]:
    red, green, blue = colorsys.hls_to_rgb(color.hue, color.luminance, color.saturation)
    return (round(red * 255), round(green * 255), round(blue * 255))


def rgb_to_hsl(red: int, green: int, blue: int) -> HSL:
    hue, luminance, saturation = colorsys.rgb_to_hls(red / 255.0, green / 255.0, blue / 255.0)
    return HSL(hue=hue, saturation=saturation, luminance=luminance)


def hsl_to_hex(color: HSL) -> str:
    red, green, blue = hsl_to_rgb(color)
    return f"#{red:02x}{green:02x}{blue:02x}"


def hex_to_hsl(value: str) -> HSL:
    """Parse ``#rrggbb`` (or ``#rgb``) into HSL; raises ``ValueError`` when malformed."""
    text = value.strip().lstrip("#")
    if len(text) == 3:
        text = "".join(ch * 2 for ch in text)
    if len(text) != 6:
        raise ValueError(f"invalid hex color: {value!r}")
    red, green, blue = (int(text[pos : pos + 2], 16) for pos in (0, 2, 4))
    return rgb_to_hsl(red, green, blue)


@lru_cache(maxsize=16)
def anchor_for_style(style_name: str) -> HSL:
    """Background color of a Pygments style, used as the hint anchor."""
    from pygments.styles import get_style_by_name
    from pygments.util import ClassNotFound

    try:
        background = get_style_by_name(style_name).background_color
    except ClassNotFound:
        background = DEFAULT_ANCHOR_HEX
    try:
        return hex_to_hsl(background or DEFAULT_ANCHOR_HEX)
    except ValueError:
        return hex_to_hsl(DEFAULT_ANCHOR_HEX)
