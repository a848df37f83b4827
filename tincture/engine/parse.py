# Copyright (c) 2026 Tincture
# SPDX-License-Identifier: MIT

"""
Color text parsing with format auto-detection.

Grammars are tried in a fixed order and the first full match wins:

    1. hex        #RGB, #RGBA, #RRGGBB, #RRGGBBAA
    2. rgb/rgba   rgb(255, 0, 0), rgba(255 0 0 / 50%)
    3. hsl/hsla   hsl(0, 100%, 50%), hsla(0deg 100% 50% / 0.5)
    4. oklch      oklch(62.8% 0.2577 29.23 / 0.5)
    5. oklab      oklab(0.628 0.2249 0.1258 / 0.5)
    6. keyword    red, RebeccaPurple, transparent

Commas and whitespace are both accepted between components. Alpha may be a
number in [0, 1] or a percentage. Out-of-range RGB/HSL channels and alpha
are clamped, following CSS.
"""

from __future__ import annotations

import math
import re
from typing import Callable, Optional

from tincture.engine.named import lookup_name
from tincture.errors import InvalidColorSyntax
from tincture.schema import ColorValue, Notation, Space, clamp

# CSS maps 100% to 0.4 for OKLCH chroma and OKLab a/b
_OK_PERCENT_REFERENCE = 0.4

# Regular expression pieces
ws = r"\s*"
num = r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:e[+-]?\d+)?"
perc = f"{num}%"
angle = f"{num}(?:deg|grad|rad|turn)?"
sep = r"(?:\s*,\s*|\s+)"
alpha_sep = r"\s*[,/]\s*"
slash = r"\s*/\s*"


def pct(x: str) -> float:
    """Convert percentage string to a fraction."""
    return float(x.rstrip("%")) / 100


def angle_to_deg(s: str) -> float:
    """Convert angle string to degrees."""
    m = re.match(f"^({num})(deg|grad|rad|turn)?$", s, re.IGNORECASE)
    if not m:
        raise InvalidColorSyntax(s)
    v = float(m.group(1))
    unit = (m.group(2) or "deg").lower()
    if unit == "grad":
        return v * 9 / 10
    if unit == "rad":
        return math.degrees(v)
    if unit == "turn":
        return v * 360
    return v


def parse_alpha(token: Optional[str]) -> float:
    """Alpha component: number or percentage, clamped to [0, 1]."""
    if token is None:
        return 1.0
    value = pct(token) if token.endswith("%") else float(token)
    return clamp(value, 0.0, 1.0)


# HEX -------------------------------------------------------------

HEX_RE = re.compile(r"^#([0-9a-f]{3,4}|[0-9a-f]{6}|[0-9a-f]{8})$", re.IGNORECASE)


def parse_hex(s: str) -> Optional[ColorValue]:
    """Parse hex color string; 3/4-digit forms duplicate each digit."""
    m = HEX_RE.match(s)
    if not m:
        return None
    h = m.group(1)
    if len(h) <= 4:
        h = "".join(ch * 2 for ch in h)
    r, g, b = (int(h[i:i + 2], 16) for i in (0, 2, 4))
    a = int(h[6:8], 16) / 255 if len(h) == 8 else 1.0
    return ColorValue.of(Space.RGB, r, g, b, alpha=a, notation=Notation.HEX)


# RGB -------------------------------------------------------------

RGB_RE = re.compile(
    f"^rgba?{ws}\\({ws}({num}%?){sep}({num}%?){sep}({num}%?)"
    f"(?:{alpha_sep}({num}%?))?{ws}\\)$",
    re.IGNORECASE,
)


def parse_rgb(s: str) -> Optional[ColorValue]:
    """Parse rgb()/rgba(); channels are 0-255 numbers or percentages."""
    m = RGB_RE.match(s)
    if not m:
        return None
    R, G, B, A = m.groups()

    def cv(t: str) -> float:
        return pct(t) * 255 if t.endswith("%") else float(t)

    return ColorValue.of(
        Space.RGB, cv(R), cv(G), cv(B), alpha=parse_alpha(A), notation=Notation.RGB
    )


# HSL -------------------------------------------------------------

HSL_RE = re.compile(
    f"^hsla?{ws}\\({ws}({angle}){sep}({num}%?){sep}({num}%?)"
    f"(?:{alpha_sep}({num}%?))?{ws}\\)$",
    re.IGNORECASE,
)


def parse_hsl(s: str) -> Optional[ColorValue]:
    """Parse hsl()/hsla(); saturation and lightness are percentage points."""
    m = HSL_RE.match(s)
    if not m:
        return None
    H, S, L, A = m.groups()
    return ColorValue.of(
        Space.HSL,
        angle_to_deg(H),
        float(S.rstrip("%")),
        float(L.rstrip("%")),
        alpha=parse_alpha(A),
        notation=Notation.HSL,
    )


# OKLCH / OKLAB ---------------------------------------------------

OKLCH_RE = re.compile(
    f"^oklch{ws}\\({ws}({num}%?){sep}({num}%?){sep}({angle})"
    f"(?:{slash}({num}%?))?{ws}\\)$",
    re.IGNORECASE,
)

OKLAB_RE = re.compile(
    f"^oklab{ws}\\({ws}({num}%?){sep}({num}%?){sep}({num}%?)"
    f"(?:{slash}({num}%?))?{ws}\\)$",
    re.IGNORECASE,
)


def _ok_lightness(t: str) -> float:
    return pct(t) if t.endswith("%") else float(t)


def _ok_component(t: str) -> float:
    return pct(t) * _OK_PERCENT_REFERENCE if t.endswith("%") else float(t)


def parse_oklch(s: str) -> Optional[ColorValue]:
    """Parse oklch(); lightness as percentage or [0, 1], chroma raw."""
    m = OKLCH_RE.match(s)
    if not m:
        return None
    L, C, H, A = m.groups()
    return ColorValue.of(
        Space.OKLCH,
        _ok_lightness(L),
        _ok_component(C),
        angle_to_deg(H),
        alpha=parse_alpha(A),
        notation=Notation.OKLCH,
    )


def parse_oklab(s: str) -> Optional[ColorValue]:
    """Parse oklab(); components are raw floats."""
    m = OKLAB_RE.match(s)
    if not m:
        return None
    L, a, b, A = m.groups()
    return ColorValue.of(
        Space.OKLAB,
        _ok_lightness(L),
        _ok_component(a),
        _ok_component(b),
        alpha=parse_alpha(A),
        notation=Notation.OKLAB,
    )


# Named -----------------------------------------------------------


def parse_named(s: str) -> Optional[ColorValue]:
    """Look up a CSS keyword; renders back as hex."""
    if s.lower() == "transparent":
        return ColorValue.of(Space.RGB, 0, 0, 0, alpha=0.0, notation=Notation.HEX)
    rgb = lookup_name(s)
    if rgb is None:
        return None
    return ColorValue.of(Space.RGB, *rgb, notation=Notation.HEX)


# Main parser -----------------------------------------------------

_PARSERS: tuple[Callable[[str], Optional[ColorValue]], ...] = (
    parse_hex,
    parse_rgb,
    parse_hsl,
    parse_oklch,
    parse_oklab,
    parse_named,
)


def parse(text: str) -> ColorValue:
    """
    Parse color text into a ColorValue.

    Args:
        text: Any supported notation (see module docstring)

    Returns:
        ColorValue tagged with the notation it was written in

    Raises:
        InvalidColorSyntax: if no grammar matches the whole string
    """
    if not isinstance(text, str):
        raise InvalidColorSyntax(repr(text))
    s = text.strip()
    for parser in _PARSERS:
        color = parser(s)
        if color is not None:
            return color
    raise InvalidColorSyntax(text)
