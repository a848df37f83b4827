# Copyright (c) 2026 Tincture
# SPDX-License-Identifier: MIT

"""
Color space conversions.

Conversion chains:
    HSL ↔ sRGB ↔ Linear RGB ↔ OKLab ↔ OKLCH

Linear RGB is the physical pivot and OKLab the perceptual one. No pair of
spaces has its own hand-written converter: every conversion is a walk along
the chain above. OKLab ↔ OKLCH converts directly, without passing through
RGB, so out-of-gamut perceptual values survive.

References:
- sRGB transfer function: IEC 61966-2-1
- OKLab: https://bottosson.github.io/posts/oklab/
- OKLCH: Cylindrical form of OKLab (Lightness, Chroma, Hue)

Array functions are pure NumPy and operate on shape (..., 3).
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from tincture.schema import ColorValue, Space


# Chroma below this is numerical noise from the matrices; hue is reported as 0
ACHROMATIC_EPSILON = 1e-6


# =============================================================================
# sRGB ↔ Linear RGB
# =============================================================================


def srgb_to_linear(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert sRGB values [0,1] to linear RGB.

    sRGB uses a piecewise gamma curve:
    - For values <= 0.04045: linear/12.92
    - For values > 0.04045: ((value + 0.055) / 1.055) ^ 2.4
    """
    srgb = np.asarray(srgb, dtype=np.float64)
    linear = np.where(
        srgb <= 0.04045,
        srgb / 12.92,
        np.power((np.maximum(srgb, 0.04045) + 0.055) / 1.055, 2.4)
    )
    return linear


def linear_to_srgb(linear: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert linear RGB to sRGB values [0,1].

    Inverse of srgb_to_linear. Out-of-gamut results are clipped.
    """
    linear = np.asarray(linear, dtype=np.float64)
    # Clip negative values to avoid NaN in power function
    linear_safe = np.maximum(linear, 0.0)
    srgb = np.where(
        linear_safe <= 0.0031308,
        linear_safe * 12.92,
        1.055 * np.power(linear_safe, 1.0 / 2.4) - 0.055
    )
    return np.clip(srgb, 0.0, 1.0)


# =============================================================================
# Linear RGB ↔ OKLab
# =============================================================================

# Matrices from https://bottosson.github.io/posts/oklab/

# Linear sRGB to LMS (cone responses)
_M1 = np.array([
    [0.4122214708, 0.5363325363, 0.0514459929],
    [0.2119034982, 0.6806995451, 0.1073969566],
    [0.0883024619, 0.2817188376, 0.6299787005],
], dtype=np.float64)

# LMS to OKLab
_M2 = np.array([
    [0.2104542553, 0.7936177850, -0.0040720468],
    [1.9779984951, -2.4285922050, 0.4505937099],
    [0.0259040371, 0.7827717662, -0.8086757660],
], dtype=np.float64)

# Inverse matrices
_M1_INV = np.linalg.inv(_M1)
_M2_INV = np.linalg.inv(_M2)


def linear_rgb_to_oklab(rgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert linear RGB to OKLab.

    Args:
        rgb: Array of shape (..., 3) with linear RGB values

    Returns:
        Array of shape (..., 3) with OKLab values (L, a, b)
    """
    rgb = np.asarray(rgb, dtype=np.float64)
    lms = np.einsum('...j,ij->...i', rgb, _M1)
    # Signed cube root keeps out-of-gamut inputs real
    lms_cbrt = np.cbrt(lms)
    return np.einsum('...j,ij->...i', lms_cbrt, _M2)


def oklab_to_linear_rgb(lab: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert OKLab to linear RGB.

    Args:
        lab: Array of shape (..., 3) with OKLab values (L, a, b)

    Returns:
        Array of shape (..., 3) with linear RGB values (not clipped)
    """
    lab = np.asarray(lab, dtype=np.float64)
    lms_cbrt = np.einsum('...j,ij->...i', lab, _M2_INV)
    lms = lms_cbrt ** 3
    return np.einsum('...j,ij->...i', lms, _M1_INV)


# =============================================================================
# OKLab ↔ OKLCH
# =============================================================================


def oklab_to_oklch(lab: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert OKLab to OKLCH (cylindrical coordinates).

    Args:
        lab: Array of shape (..., 3) with OKLab values (L, a, b)

    Returns:
        Array of shape (..., 3) with OKLCH values (L, C, H).
        H is in degrees [0, 360), and 0 for achromatic colors.
    """
    lab = np.asarray(lab, dtype=np.float64)

    L = lab[..., 0]
    a = lab[..., 1]
    b = lab[..., 2]

    C = np.hypot(a, b)
    H = np.degrees(np.arctan2(b, a)) % 360.0
    H = np.where((H >= 360.0) | (C < ACHROMATIC_EPSILON), 0.0, H)

    return np.stack([L, C, H], axis=-1)


def oklch_to_oklab(lch: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert OKLCH to OKLab.

    Args:
        lch: Array of shape (..., 3) with OKLCH values (L, C, H)
        H is in degrees

    Returns:
        Array of shape (..., 3) with OKLab values (L, a, b)
    """
    lch = np.asarray(lch, dtype=np.float64)

    L = lch[..., 0]
    C = lch[..., 1]
    H_rad = np.radians(lch[..., 2])

    a = C * np.cos(H_rad)
    b = C * np.sin(H_rad)

    return np.stack([L, a, b], axis=-1)


# =============================================================================
# sRGB ↔ HSL
# =============================================================================


def rgb_to_hsl(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert sRGB [0,1] to HSL.

    Args:
        srgb: Array of shape (..., 3) with sRGB values [0, 1]

    Returns:
        Array of shape (..., 3) with (H degrees [0, 360), S [0, 1], L [0, 1]).
        Achromatic colors get H = 0 and S = 0.
    """
    srgb = np.asarray(srgb, dtype=np.float64)
    r = srgb[..., 0]
    g = srgb[..., 1]
    b = srgb[..., 2]

    mx = np.max(srgb, axis=-1)
    mn = np.min(srgb, axis=-1)
    delta = mx - mn
    light = (mx + mn) / 2.0

    chromatic = delta > 0.0
    safe_delta = np.where(chromatic, delta, 1.0)
    denom = 1.0 - np.abs(2.0 * light - 1.0)
    safe_denom = np.where(denom > 0.0, denom, 1.0)
    sat = np.where(chromatic, delta / safe_denom, 0.0)

    hue = np.where(
        mx == r,
        ((g - b) / safe_delta) % 6.0,
        np.where(
            mx == g,
            (b - r) / safe_delta + 2.0,
            (r - g) / safe_delta + 4.0,
        ),
    )
    hue = np.where(chromatic, hue * 60.0, 0.0) % 360.0

    return np.stack([hue, np.clip(sat, 0.0, 1.0), light], axis=-1)


def hsl_to_rgb(hsl: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert HSL to sRGB [0,1].

    Args:
        hsl: Array of shape (..., 3) with (H degrees, S [0, 1], L [0, 1])

    Returns:
        Array of shape (..., 3) with sRGB values [0, 1]
    """
    hsl = np.asarray(hsl, dtype=np.float64)
    h = hsl[..., 0] % 360.0
    s = hsl[..., 1]
    light = hsl[..., 2]

    a = s * np.minimum(light, 1.0 - light)

    def channel(n: float) -> NDArray[np.float64]:
        k = (n + h / 30.0) % 12.0
        return light - a * np.maximum(-1.0, np.minimum(np.minimum(k - 3.0, 9.0 - k), 1.0))

    rgb = np.stack([channel(0.0), channel(8.0), channel(4.0)], axis=-1)
    return np.clip(rgb, 0.0, 1.0)


# =============================================================================
# Convenience: sRGB ↔ OKLCH (full chain)
# =============================================================================


def srgb_to_oklch(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert sRGB [0,1] to OKLCH.

    Full chain: sRGB → Linear RGB → OKLab → OKLCH

    Args:
        srgb: Array of shape (..., 3) with sRGB values [0, 1]

    Returns:
        Array of shape (..., 3) with OKLCH values (L, C, H)
        - L: Lightness [0, 1]
        - C: Chroma [0, ~0.4 for sRGB gamut]
        - H: Hue in degrees [0, 360)
    """
    return oklab_to_oklch(linear_rgb_to_oklab(srgb_to_linear(srgb)))


def oklch_to_srgb(lch: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert OKLCH to sRGB [0,1].

    Full chain: OKLCH → OKLab → Linear RGB → sRGB

    Values are clipped to [0, 1] (gamut mapped by clamping).
    """
    return linear_to_srgb(oklab_to_linear_rgb(oklch_to_oklab(lch)))


# =============================================================================
# ColorValue conversion
# =============================================================================


def _to_srgb_unit(color: ColorValue) -> NDArray[np.float64]:
    """Walk a value down the chain to gamma-encoded sRGB in [0, 1]."""
    c = np.array(color.channels, dtype=np.float64)
    if color.space is Space.RGB:
        return c / 255.0
    if color.space is Space.HSL:
        return hsl_to_rgb(c * np.array([1.0, 0.01, 0.01]))
    if color.space is Space.OKLAB:
        return linear_to_srgb(oklab_to_linear_rgb(c))
    return oklch_to_srgb(c)


def _from_srgb_unit(srgb: NDArray[np.float64], space: Space) -> NDArray[np.float64]:
    """Walk gamma-encoded sRGB in [0, 1] up the chain to ``space`` channels."""
    if space is Space.RGB:
        return srgb * 255.0
    if space is Space.HSL:
        return rgb_to_hsl(srgb) * np.array([1.0, 100.0, 100.0])
    if space is Space.OKLAB:
        return linear_rgb_to_oklab(srgb_to_linear(srgb))
    return srgb_to_oklch(srgb)


def to_linear_rgb(color: ColorValue) -> NDArray[np.float64]:
    """Linear-light RGB in [0, 1] for a value in any space (gamut clamped)."""
    return srgb_to_linear(_to_srgb_unit(color))


def convert(color: ColorValue, space: Space) -> ColorValue:
    """
    Convert a ColorValue into another space.

    Alpha is preserved. The recorded notation is kept only when it still
    describes the target space. Converting into RGB or HSL from OKLab/OKLCH
    clamps silently into gamut.

    Args:
        color: Source value
        space: Target space

    Returns:
        New ColorValue in ``space``
    """
    if color.space is space:
        return color

    notation = color.notation if color.notation and color.notation.space is space else None
    perceptual = (Space.OKLAB, Space.OKLCH)

    if color.space in perceptual and space in perceptual:
        c = np.array(color.channels, dtype=np.float64)
        out = oklab_to_oklch(c) if space is Space.OKLCH else oklch_to_oklab(c)
    else:
        out = _from_srgb_unit(_to_srgb_unit(color), space)

    return ColorValue.of(space, *(float(v) for v in out), alpha=color.alpha, notation=notation)


# =============================================================================
# ΔE Distance (Perceptual Color Difference)
# =============================================================================


def delta_e_oklab(first: ColorValue, second: ColorValue) -> float:
    """
    Perceptual color difference (ΔE) as Euclidean distance in OKLab.

    Reference thresholds (OKLab Euclidean, 0-1 scale):
    - ΔE ≈ 0.02: barely perceptible (expert eye)
    - ΔE ≈ 0.04: noticeable difference
    - ΔE ≈ 0.08+: clearly different colors

    Alpha is ignored.
    """
    lab1 = np.array(convert(first, Space.OKLAB).channels, dtype=np.float64)
    lab2 = np.array(convert(second, Space.OKLAB).channels, dtype=np.float64)
    return float(np.sqrt(np.sum((lab1 - lab2) ** 2)))


def convert_like(color: ColorValue, template: ColorValue) -> ColorValue:
    """
    Convert ``color`` into the space of ``template`` and tag it with the
    template's notation, so derived colors answer in the caller's notation.
    """
    out = convert(color, template.space)
    return ColorValue(
        space=out.space, channels=out.channels, alpha=out.alpha,
        notation=template.notation,
    )
