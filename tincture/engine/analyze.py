# Copyright (c) 2026 Tincture
# SPDX-License-Identifier: MIT

"""
Color analysis and WCAG accessibility metrics.

Luminance and contrast follow WCAG 2.x:

    L = 0.2126·R + 0.7152·G + 0.0722·B      (R, G, B linear, 0-1)
    ratio = (L_lighter + 0.05) / (L_darker + 0.05)

The ratio is reported rounded to 2 decimals and compliance tiers are judged
on that same rounded value, so a reported 4.5 always passes AA.
"""

from __future__ import annotations

import numpy as np

from tincture.engine.colorspace import convert, to_linear_rgb
from tincture.engine.named import NAMED_KEYS, NAMED_RGB
from tincture.engine.parse import parse
from tincture.engine.render import format_color
from tincture.errors import ColorError
from tincture.schema import (
    ColorValue,
    ComplianceTier,
    ContrastReport,
    Notation,
    Space,
    clamp,
)

# WCAG 2.x relative luminance weights (Rec. 709 primaries)
LUMINANCE_WEIGHTS = np.array([0.2126, 0.7152, 0.0722], dtype=np.float64)

# Practical ceiling of OKLCH chroma; sRGB colors peak near 0.32
MAX_CHROMA = 0.4

_BLACK = ColorValue.of(Space.RGB, 0, 0, 0)
_WHITE = ColorValue.of(Space.RGB, 255, 255, 255)


def luminance(color: ColorValue) -> float:
    """WCAG relative luminance in [0, 1]. Alpha is ignored."""
    value = float(np.dot(to_linear_rgb(color), LUMINANCE_WEIGHTS))
    return clamp(value, 0.0, 1.0)


def chroma(color: ColorValue) -> float:
    """OKLCH chroma scaled to [0, 1] by ``MAX_CHROMA``."""
    C = convert(color, Space.OKLCH).channels[1]
    return clamp(C / MAX_CHROMA, 0.0, 1.0)


def opacity(color: ColorValue) -> float:
    return color.alpha


def _ratio(first: ColorValue, second: ColorValue) -> float:
    l1 = luminance(first)
    l2 = luminance(second)
    lighter, darker = max(l1, l2), min(l1, l2)
    return (lighter + 0.05) / (darker + 0.05)


def contrast(foreground: ColorValue, background: ColorValue) -> float:
    """WCAG contrast ratio in [1, 21], rounded to 2 decimals. Symmetric."""
    return round(_ratio(foreground, background), 2)


def compare(foreground: ColorValue, background: ColorValue) -> ContrastReport:
    """
    Contrast ratio plus the WCAG tiers the pair passes.

    Tiers are judged on the rounded ratio that ``contrast`` reports.

    Tiers:
        AAA       normal text, ratio >= 7
        AA        normal text, ratio >= 4.5
        AAA-large large text,  ratio >= 4.5
        AA-large  large text,  ratio >= 3
    """
    ratio = contrast(foreground, background)
    tiers = frozenset(t for t in ComplianceTier if ratio >= t.threshold)
    return ContrastReport(ratio=ratio, tiers=tiers)


def text_color(background: ColorValue) -> str:
    """
    "black" or "white", whichever contrasts more with ``background``.

    Ties go to black.
    """
    on_black = _ratio(background, _BLACK)
    on_white = _ratio(background, _WHITE)
    return "black" if on_black >= on_white else "white"


def name(color: ColorValue) -> str:
    """
    CSS keyword for the color if it is an exact match, else its hex.

    The nearest table entry by RGB Euclidean distance is found first; only
    a distance of zero counts as a name. Alpha is ignored for matching but
    kept in the hex fallback.
    """
    rgb = np.array(convert(color, Space.RGB).channels, dtype=np.float64)
    rgb = np.floor(rgb + 0.5)
    distances = np.sqrt(np.sum((NAMED_RGB - rgb) ** 2, axis=-1))
    nearest = int(np.argmin(distances))
    if distances[nearest] == 0.0:
        return NAMED_KEYS[nearest]
    return format_color(color, Notation.HEX)


def is_valid_color(text: str) -> bool:
    """True if ``text`` parses as a color. Never raises."""
    try:
        parse(text)
    except ColorError:
        return False
    return True
