# Copyright (c) 2026 Tincture
# SPDX-License-Identifier: MIT

"""
Color rendering: ColorValue → text in a target notation.

Canonical output per notation:

    hex     #FF0000           #FF000080 when alpha < 1
    rgb     rgb(255, 0, 0)    rgba(255, 0, 0, 0.5)
    hsl     hsl(0, 100%, 50%) hsla(0, 100%, 50%, 0.5)
    oklch   oklch(62.8% 0.2577 29.23)   ... / 0.5
    oklab   oklab(0.628 0.2249 0.1258)  ... / 0.5

Alpha is written only when it is below 1.
"""

from __future__ import annotations

from typing import Union

from tincture.engine.colorspace import convert
from tincture.schema import ColorValue, Notation


def _num(value: float, digits: int) -> str:
    """Round to ``digits`` decimals and strip trailing zeros."""
    text = f"{value:.{digits}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text in ("-0", ""):
        text = "0"
    return text


def _byte(value: float) -> int:
    """Round a [0, 255] channel half-up to an integer byte."""
    return int(min(255.0, max(0.0, value)) + 0.5)


def _alpha(alpha: float) -> str:
    return _num(alpha, 3)


def _hue(hue: float) -> str:
    """Hue to 2 decimals, kept in [0, 360) after rounding."""
    # Rounding can push 359.996 up to 360
    text = _num(hue, 2)
    return "0" if text == "360" else text


def to_hex(color: ColorValue) -> str:
    """#RRGGBB, or #RRGGBBAA for translucent colors."""
    r, g, b = (_byte(v) for v in convert(color, Notation.HEX.space).channels)
    text = f"#{r:02X}{g:02X}{b:02X}"
    if color.alpha < 1.0:
        text += f"{_byte(color.alpha * 255):02X}"
    return text


def to_rgb(color: ColorValue) -> str:
    r, g, b = (_byte(v) for v in convert(color, Notation.RGB.space).channels)
    if color.alpha < 1.0:
        return f"rgba({r}, {g}, {b}, {_alpha(color.alpha)})"
    return f"rgb({r}, {g}, {b})"


def to_hsl(color: ColorValue) -> str:
    h, s, l = convert(color, Notation.HSL.space).channels
    body = f"{_hue(h)}, {_num(s, 2)}%, {_num(l, 2)}%"
    if color.alpha < 1.0:
        return f"hsla({body}, {_alpha(color.alpha)})"
    return f"hsl({body})"


def to_oklch(color: ColorValue) -> str:
    L, C, H = convert(color, Notation.OKLCH.space).channels
    body = f"{_num(L * 100, 2)}% {_num(C, 4)} {_hue(H)}"
    if color.alpha < 1.0:
        return f"oklch({body} / {_alpha(color.alpha)})"
    return f"oklch({body})"


def to_oklab(color: ColorValue) -> str:
    L, a, b = convert(color, Notation.OKLAB.space).channels
    body = f"{_num(L, 4)} {_num(a, 4)} {_num(b, 4)}"
    if color.alpha < 1.0:
        return f"oklab({body} / {_alpha(color.alpha)})"
    return f"oklab({body})"


_RENDERERS = {
    Notation.HEX: to_hex,
    Notation.RGB: to_rgb,
    Notation.HSL: to_hsl,
    Notation.OKLCH: to_oklch,
    Notation.OKLAB: to_oklab,
}


def format_color(color: ColorValue, notation: Union[Notation, str, None] = None) -> str:
    """
    Render a ColorValue as text.

    Args:
        color: Value to render
        notation: Target notation, either a Notation or its name
            ("hex", "rgb", "rgba", "hsl", "hsla", "oklab", "oklch").
            Defaults to the value's preferred notation.

    Returns:
        Canonical text for the notation

    Raises:
        UnsupportedFormat: if a notation name is not recognized
    """
    if notation is None:
        notation = color.preferred_notation
    elif not isinstance(notation, Notation):
        notation = Notation.from_name(notation)
    return _RENDERERS[notation](color)
