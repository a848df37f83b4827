# Copyright (c) 2026 Tincture
# SPDX-License-Identifier: MIT

"""
Color engine for Tincture.

Pure functions over immutable ColorValues: parsing, rendering, space
conversion, manipulation, analysis and generation. No I/O, no shared
mutable state.
"""

from tincture.engine.analyze import (
    chroma,
    compare,
    contrast,
    is_valid_color,
    luminance,
    name,
    opacity,
    text_color,
)
from tincture.engine.colorspace import convert, convert_like, delta_e_oklab
from tincture.engine.generate import palette, random_color, scheme, swatch
from tincture.engine.manipulate import (
    darken,
    desaturate,
    invert,
    lighten,
    rotate,
    saturate,
)
from tincture.engine.named import NAMED_COLORS
from tincture.engine.parse import parse
from tincture.engine.render import format_color

__all__ = [
    # Text boundary
    "parse",
    "format_color",
    # Conversion
    "convert",
    "convert_like",
    "delta_e_oklab",
    # Manipulation
    "lighten",
    "darken",
    "saturate",
    "desaturate",
    "rotate",
    "invert",
    # Analysis
    "luminance",
    "chroma",
    "opacity",
    "contrast",
    "compare",
    "text_color",
    "name",
    "is_valid_color",
    # Generation
    "palette",
    "scheme",
    "swatch",
    "random_color",
    # Data
    "NAMED_COLORS",
]
