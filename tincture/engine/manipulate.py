# Copyright (c) 2026 Tincture
# SPDX-License-Identifier: MIT

"""
Color manipulation: lighten, darken, saturate, desaturate, rotate, invert.

Every operation works in a fixed working space (HSL, or RGB for invert),
then converts back so the result stays in the caller's space and notation.
Alpha is never touched.

Amounts are percentage points. Anything beyond ±100 cannot change the
result further, so it is clamped rather than rejected.
"""

from __future__ import annotations

import logging

from tincture.engine.colorspace import convert, convert_like
from tincture.schema import ColorValue, Space, clamp, require_finite

logger = logging.getLogger(__name__)

_MAX_AMOUNT = 100.0


def _amount(value: float, what: str = "amount") -> float:
    """Validate a percentage-point amount and clamp it to ±100."""
    amount = require_finite(value, what)
    clamped = clamp(amount, -_MAX_AMOUNT, _MAX_AMOUNT)
    if clamped != amount:
        logger.debug("%s %s out of range, clamped to %s", what, amount, clamped)
    return clamped


def _adjust_hsl(color: ColorValue, *, ds: float = 0.0, dl: float = 0.0, dh: float = 0.0) -> ColorValue:
    h, s, l = convert(color, Space.HSL).channels
    adjusted = ColorValue.of(Space.HSL, h + dh, s + ds, l + dl, alpha=color.alpha)
    return convert_like(adjusted, color)


def lighten(color: ColorValue, amount: float) -> ColorValue:
    """Raise HSL lightness by ``amount`` points (negative darkens)."""
    return _adjust_hsl(color, dl=_amount(amount))


def darken(color: ColorValue, amount: float) -> ColorValue:
    """Lower HSL lightness by ``amount`` points (negative lightens)."""
    return _adjust_hsl(color, dl=-_amount(amount))


def saturate(color: ColorValue, amount: float) -> ColorValue:
    """Raise HSL saturation by ``amount`` points."""
    return _adjust_hsl(color, ds=_amount(amount))


def desaturate(color: ColorValue, amount: float) -> ColorValue:
    """Lower HSL saturation by ``amount`` points."""
    return _adjust_hsl(color, ds=-_amount(amount))


def rotate(color: ColorValue, degrees: float) -> ColorValue:
    """
    Rotate the HSL hue by ``degrees``.

    Rotation is cyclic: any angle is valid and wraps modulo 360.
    """
    return _adjust_hsl(color, dh=require_finite(degrees, "degrees") % 360.0)


def invert(color: ColorValue) -> ColorValue:
    """Replace each RGB channel ``v`` with ``255 - v``."""
    r, g, b = convert(color, Space.RGB).channels
    inverted = ColorValue.of(Space.RGB, 255.0 - r, 255.0 - g, 255.0 - b, alpha=color.alpha)
    return convert_like(inverted, color)
