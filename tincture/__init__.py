# Copyright (c) 2026 Tincture
# SPDX-License-Identifier: MIT

"""
Tincture -- color-science engine.

Parses CSS-style color text, converts between RGB, HSL, OKLab and OKLCH,
manipulates and analyzes colors, generates palettes and swatches, and
computes WCAG accessibility metrics.

Quick start::

    from tincture import parse, format_color, lighten, compare

    c = parse("#3366CC")
    format_color(lighten(c, 10))            # '#5C85D6'
    format_color(c, "oklch")                # 'oklch(...)'
    compare(parse("#777"), parse("white"))  # ContrastReport(ratio=4.48, ...)
"""

from __future__ import annotations

__version__ = "1.0.0"

from tincture.engine import (
    chroma,
    compare,
    contrast,
    convert,
    darken,
    desaturate,
    format_color,
    invert,
    is_valid_color,
    lighten,
    luminance,
    name,
    opacity,
    palette,
    parse,
    random_color,
    rotate,
    saturate,
    scheme,
    swatch,
    text_color,
)
from tincture.errors import (
    ColorError,
    InvalidColorSyntax,
    InvalidParameter,
    UnsupportedFormat,
)
from tincture.schema import (
    ColorValue,
    ComplianceTier,
    ContrastReport,
    Notation,
    Space,
)

__all__ = [
    # Text boundary
    "parse",
    "format_color",
    "convert",
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
    # Types
    "ColorValue",
    "Space",
    "Notation",
    "ComplianceTier",
    "ContrastReport",
    # Errors
    "ColorError",
    "InvalidColorSyntax",
    "UnsupportedFormat",
    "InvalidParameter",
    # Version
    "__version__",
]
