# Copyright (c) 2026 Tincture
# SPDX-License-Identifier: MIT

"""
Derived color sets: palettes, harmonic schemes, tonal swatches, random colors.

Palettes, schemes and swatches are built in HSL from a base color and
returned in the base color's space and notation, with its alpha.

Random colors draw from an injected ``numpy.random.Generator`` so callers
(and tests) control determinism; nothing here touches global random state.
"""

from __future__ import annotations

from typing import Optional

import numpy as np

from tincture.engine.colorspace import convert, convert_like
from tincture.errors import InvalidParameter
from tincture.schema import (
    SHADE_KEYS,
    ColorValue,
    Notation,
    Space,
    clamp,
    require_finite,
)


# =============================================================================
# Palettes and Schemes
# =============================================================================

PALETTE_SIZE = 6

PALETTE_TYPES = ("default", "monochromatic")

# Hue offsets in degrees from the base hue
SCHEME_OFFSETS: dict[str, tuple[float, ...]] = {
    "complementary": (0.0, 180.0),
    "triadic": (0.0, 120.0, 240.0),
    "tetradic": (0.0, 90.0, 180.0, 270.0),
    "analogous": (-30.0, 0.0, 30.0),
    "split-complementary": (0.0, 150.0, 210.0),
}


def _from_hsl(h: float, s: float, l: float, base: ColorValue) -> ColorValue:
    hsl = ColorValue.of(Space.HSL, h, s, l, alpha=base.alpha)
    return convert_like(hsl, base)


def palette(color: ColorValue, kind: Optional[str] = None) -> list[ColorValue]:
    """
    Six colors derived from a base color.

    Args:
        color: Base color
        kind: "default" (hues every 60°, same saturation and lightness) or
            "monochromatic" (same hue and saturation, lightness spread evenly
            over [0.3·l, 1.7·l]). None means "default".

    Raises:
        InvalidParameter: for any other type
    """
    kind = "default" if kind is None else str(kind).strip().lower()
    h, s, l = convert(color, Space.HSL).channels

    if kind == "default":
        return [_from_hsl(h + 60.0 * i, s, l, color) for i in range(PALETTE_SIZE)]

    if kind == "monochromatic":
        lo = clamp(l * 0.3, 0.0, 100.0)
        hi = clamp(l * 1.7, 0.0, 100.0)
        steps = np.linspace(lo, hi, PALETTE_SIZE)
        return [_from_hsl(h, s, float(step), color) for step in steps]

    raise InvalidParameter(
        f"Unknown palette type {kind!r}; expected one of {', '.join(PALETTE_TYPES)}"
    )


def scheme(color: ColorValue, kind: str) -> list[ColorValue]:
    """
    Classic color-wheel harmony from a base color.

    Saturation and lightness are held; hue offsets per type are listed in
    ``SCHEME_OFFSETS``. The base color is always one of the results.

    Raises:
        InvalidParameter: for an unknown scheme type
    """
    key = str(kind).strip().lower() if kind is not None else ""
    offsets = SCHEME_OFFSETS.get(key)
    if offsets is None:
        raise InvalidParameter(
            f"Unknown scheme type {kind!r}; expected one of {', '.join(SCHEME_OFFSETS)}"
        )
    h, s, l = convert(color, Space.HSL).channels
    return [_from_hsl(h + offset, s, l, color) for offset in offsets]


# =============================================================================
# Swatches
# =============================================================================


def swatch_lightness(
    base_lightness: float,
    *,
    lightness_factor: float = 1.0,
    max_lightness: float = 0.95,
    min_lightness: float = 0.05,
) -> list[float]:
    """
    Target lightness (0-1) for each shade in ``SHADE_KEYS``, lightest first.

    Each shade's rank t = i/10 picks a point on the line from
    ``max_lightness`` down to ``min_lightness``. That point is then scaled
    by ``lightness_factor`` around the base lightness and clamped back into
    [min_lightness, max_lightness].

    Raises:
        InvalidParameter: for non-finite values, bounds outside [0, 1],
            min >= max, or a non-positive factor
    """
    factor = require_finite(lightness_factor, "lightnessFactor")
    hi = require_finite(max_lightness, "maxLightness")
    lo = require_finite(min_lightness, "minLightness")
    base = require_finite(base_lightness, "lightness")

    if not (0.0 <= lo < hi <= 1.0):
        raise InvalidParameter(
            f"Lightness bounds must satisfy 0 <= min < max <= 1, got min={lo}, max={hi}"
        )
    if factor <= 0.0:
        raise InvalidParameter(f"lightnessFactor must be > 0, got {factor}")

    last = len(SHADE_KEYS) - 1
    targets = []
    for i in range(len(SHADE_KEYS)):
        raw = hi - (i / last) * (hi - lo)
        targets.append(clamp(base + (raw - base) * factor, lo, hi))
    return targets


def swatch(
    color: ColorValue,
    *,
    lightness_factor: float = 1.0,
    max_lightness: float = 0.95,
    min_lightness: float = 0.05,
) -> dict[int, ColorValue]:
    """
    Eleven tonal shades keyed 50, 100, 200, ..., 900, 950.

    Hue and saturation come from the base color; lightness comes from
    ``swatch_lightness``. Shade 50 is the lightest, 950 the darkest.
    """
    h, s, l = convert(color, Space.HSL).channels
    targets = swatch_lightness(
        l / 100.0,
        lightness_factor=lightness_factor,
        max_lightness=max_lightness,
        min_lightness=min_lightness,
    )
    return {
        key: _from_hsl(h, s, target * 100.0, color)
        for key, target in zip(SHADE_KEYS, targets)
    }


# =============================================================================
# Random Colors
# =============================================================================

# Sampling bounds for OKLCH; matches the chroma ceiling used by analysis
_RANDOM_MAX_CHROMA = 0.4


def random_color(
    notation: Notation = Notation.HEX,
    rng: Optional[np.random.Generator] = None,
) -> ColorValue:
    """
    Draw a uniformly random color for a notation.

    - hex/rgb: three independent integers in [0, 255]
    - hsl:     h in [0, 360), s and l in [0, 100]
    - oklch:   L in [0, 1], C in [0, 0.4], H in [0, 360)
    - oklab:   sampled as oklch, then converted

    OKLCH samples are not gamut mapped; they are clamped only when rendered
    to an RGB-based notation.

    Args:
        notation: Notation the result is tagged with
        rng: Random source. A fresh unseeded generator is used if omitted.
    """
    if rng is None:
        rng = np.random.default_rng()

    if notation in (Notation.HEX, Notation.RGB):
        r, g, b = (int(v) for v in rng.integers(0, 256, size=3))
        return ColorValue.of(Space.RGB, r, g, b, notation=notation)

    if notation is Notation.HSL:
        h = float(rng.uniform(0.0, 360.0))
        s, l = (float(v) for v in rng.uniform(0.0, 100.0, size=2))
        return ColorValue.of(Space.HSL, h, s, l, notation=notation)

    L = float(rng.uniform(0.0, 1.0))
    C = float(rng.uniform(0.0, _RANDOM_MAX_CHROMA))
    H = float(rng.uniform(0.0, 360.0))
    lch = ColorValue.of(Space.OKLCH, L, C, H, notation=Notation.OKLCH)
    if notation is Notation.OKLAB:
        lab = convert(lch, Space.OKLAB)
        return ColorValue(space=lab.space, channels=lab.channels, notation=Notation.OKLAB)
    return lch
