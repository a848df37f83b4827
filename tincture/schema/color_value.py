# Copyright (c) 2026 Tincture
# SPDX-License-Identifier: MIT

"""
ColorValue -- canonical in-memory color representation.

Design principles:
- Immutable: all types are frozen dataclasses
- Normalized: hue wraps into [0, 360), RGB/HSL channels and alpha are clamped
- Space-tagged: channel meaning is carried by ``space``, never guessed

Channel semantics per space:
- RGB:   r, g, b in [0, 255] (sRGB encoded, floats, not rounded)
- HSL:   h in [0, 360), s, l in [0, 100]
- OKLAB: L in [0, 1], a, b roughly [-0.4, 0.4] (unclamped)
- OKLCH: L in [0, 1], C in [0, ~0.4], H in [0, 360)

OKLab/OKLCH values may sit outside the sRGB gamut. They are only clamped
when converted back to RGB or HSL.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from tincture.errors import InvalidParameter, UnsupportedFormat


# =============================================================================
# Spaces and Notations
# =============================================================================


class Space(Enum):
    """Internal color spaces a ColorValue can live in."""

    RGB = "rgb"
    HSL = "hsl"
    OKLAB = "oklab"
    OKLCH = "oklch"

    @property
    def default_notation(self) -> Notation:
        """Notation used to render a value of this space when none was recorded."""
        return {
            Space.RGB: Notation.HEX,
            Space.HSL: Notation.HSL,
            Space.OKLAB: Notation.OKLAB,
            Space.OKLCH: Notation.OKLCH,
        }[self]


class Notation(Enum):
    """
    Textual notations the engine reads and writes.

    Hex and named colors are notations over the RGB space. ``rgba`` and
    ``hsla`` are accepted as aliases of ``rgb`` and ``hsl``: the alpha form
    is chosen from the value, not the name.
    """

    HEX = "hex"
    RGB = "rgb"
    HSL = "hsl"
    OKLAB = "oklab"
    OKLCH = "oklch"

    @property
    def space(self) -> Space:
        """Internal space a value must be converted to before rendering."""
        return {
            Notation.HEX: Space.RGB,
            Notation.RGB: Space.RGB,
            Notation.HSL: Space.HSL,
            Notation.OKLAB: Space.OKLAB,
            Notation.OKLCH: Space.OKLCH,
        }[self]

    @classmethod
    def from_name(cls, name: str) -> Notation:
        """
        Resolve a user-supplied notation name.

        Raises:
            UnsupportedFormat: for anything outside the closed set.
        """
        if not isinstance(name, str):
            raise UnsupportedFormat(repr(name))
        key = name.strip().lower()
        try:
            return _NOTATION_ALIASES[key]
        except KeyError:
            raise UnsupportedFormat(name) from None


_NOTATION_ALIASES = {
    "hex": Notation.HEX,
    "rgb": Notation.RGB,
    "rgba": Notation.RGB,
    "hsl": Notation.HSL,
    "hsla": Notation.HSL,
    "oklab": Notation.OKLAB,
    "oklch": Notation.OKLCH,
}


# =============================================================================
# Channel Helpers
# =============================================================================


def clamp(value: float, lo: float, hi: float) -> float:
    """Clamp value between lo and hi."""
    return max(lo, min(hi, value))


def normalize_hue(degrees: float) -> float:
    """Wrap an angle into [0, 360)."""
    h = degrees % 360.0
    # -1e-17 % 360.0 == 360.0 in IEEE arithmetic
    if h >= 360.0:
        h = 0.0
    return h


def require_finite(value: float, what: str) -> float:
    """Return value as float, raising InvalidParameter if it is NaN/inf."""
    try:
        f = float(value)
    except (TypeError, ValueError):
        raise InvalidParameter(f"{what} must be a number, got {value!r}") from None
    if not math.isfinite(f):
        raise InvalidParameter(f"{what} must be finite, got {value!r}")
    return f


# =============================================================================
# Core Color Type
# =============================================================================


@dataclass(frozen=True, slots=True)
class ColorValue:
    """
    A single color in one of the internal spaces.

    Construct through ``ColorValue.of`` to get normalization (hue wrap,
    clamping). Direct construction validates and rejects out-of-range
    channels instead.

    Attributes:
        space: Which channel semantics apply
        channels: The three channel values, ordered as the space names them
        alpha: Opacity in [0, 1]
        notation: Notation the value was written in, if it came from text.
            Manipulations carry it through so results render the way the
            caller wrote the input.
    """
    space: Space
    channels: tuple[float, float, float]
    alpha: float = 1.0
    notation: Optional[Notation] = None

    def __post_init__(self) -> None:
        """Validate channel values are finite and within range for the space."""
        if len(self.channels) != 3:
            raise ValueError(f"Expected 3 channels, got {len(self.channels)}")
        for v in self.channels:
            require_finite(v, "Channel")
        require_finite(self.alpha, "Alpha")
        if not 0.0 <= self.alpha <= 1.0:
            raise ValueError(f"Alpha must be 0-1, got {self.alpha}")

        c1, c2, c3 = self.channels
        if self.space is Space.RGB:
            if not all(0.0 <= v <= 255.0 for v in self.channels):
                raise ValueError(f"RGB channels must be 0-255, got {self.channels}")
        elif self.space is Space.HSL:
            if not 0.0 <= c1 < 360.0:
                raise ValueError(f"Hue must be 0-360, got {c1}")
            if not (0.0 <= c2 <= 100.0 and 0.0 <= c3 <= 100.0):
                raise ValueError(
                    f"Saturation and lightness must be 0-100, got {c2}, {c3}"
                )
        elif self.space is Space.OKLCH:
            if c2 < 0.0:
                raise ValueError(f"Chroma must be >= 0, got {c2}")
            if not 0.0 <= c3 < 360.0:
                raise ValueError(f"Hue must be 0-360, got {c3}")

    @classmethod
    def of(
        cls,
        space: Space,
        c1: float,
        c2: float,
        c3: float,
        alpha: float = 1.0,
        notation: Optional[Notation] = None,
    ) -> ColorValue:
        """
        Build a normalized ColorValue.

        Hue channels wrap modulo 360, RGB/HSL channels clamp to their bounds,
        alpha clamps to [0, 1]. OKLab/OKLCH lightness and chroma are left as
        given (chroma is floored at 0 since it is a magnitude).

        Raises:
            InvalidParameter: if any channel or alpha is not finite.
        """
        c1 = require_finite(c1, "Channel")
        c2 = require_finite(c2, "Channel")
        c3 = require_finite(c3, "Channel")
        alpha = clamp(require_finite(alpha, "Alpha"), 0.0, 1.0)

        if space is Space.RGB:
            c1, c2, c3 = (clamp(v, 0.0, 255.0) for v in (c1, c2, c3))
        elif space is Space.HSL:
            c1 = normalize_hue(c1)
            c2 = clamp(c2, 0.0, 100.0)
            c3 = clamp(c3, 0.0, 100.0)
        elif space is Space.OKLCH:
            c2 = max(c2, 0.0)
            c3 = normalize_hue(c3)

        return cls(space=space, channels=(c1, c2, c3), alpha=alpha, notation=notation)

    @property
    def preferred_notation(self) -> Notation:
        """Notation results derived from this value should be rendered in."""
        if self.notation is not None:
            return self.notation
        return self.space.default_notation

    def with_channels(self, c1: float, c2: float, c3: float) -> ColorValue:
        """New value in the same space with alpha and notation carried over."""
        return ColorValue.of(
            self.space, c1, c2, c3, alpha=self.alpha, notation=self.notation
        )

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        d = {
            "space": self.space.value,
            "channels": list(self.channels),
            "alpha": self.alpha,
        }
        if self.notation is not None:
            d["notation"] = self.notation.value
        return d

    @classmethod
    def from_dict(cls, data: dict) -> ColorValue:
        """Deserialize from dictionary."""
        notation = data.get("notation")
        return cls.of(
            Space(data["space"]),
            *data["channels"],
            alpha=data.get("alpha", 1.0),
            notation=Notation(notation) if notation is not None else None,
        )


# =============================================================================
# Accessibility Results
# =============================================================================


class ComplianceTier(Enum):
    """
    WCAG 2.x contrast compliance levels.

    "normal" applies to body text, "large" to text at least 18pt
    (or 14pt bold).
    """
    AAA_NORMAL = "AAA"
    AA_NORMAL = "AA"
    AAA_LARGE = "AAA-large"
    AA_LARGE = "AA-large"

    @property
    def threshold(self) -> float:
        """Minimum contrast ratio required for this tier."""
        return _TIER_THRESHOLDS[self]


_TIER_THRESHOLDS = {
    ComplianceTier.AAA_NORMAL: 7.0,
    ComplianceTier.AA_NORMAL: 4.5,
    ComplianceTier.AAA_LARGE: 4.5,
    ComplianceTier.AA_LARGE: 3.0,
}


@dataclass(frozen=True, slots=True)
class ContrastReport:
    """
    Result of a foreground/background contrast comparison.

    Attributes:
        ratio: WCAG contrast ratio in [1, 21], rounded to 2 decimals
        tiers: Compliance tiers the pair passes
    """
    ratio: float
    tiers: frozenset[ComplianceTier]

    def __post_init__(self) -> None:
        """Validate ratio is within the WCAG range."""
        if not 1.0 <= self.ratio <= 21.0:
            raise ValueError(f"Contrast ratio must be 1-21, got {self.ratio}")

    @property
    def passes_aa(self) -> bool:
        """True if normal text meets AA (4.5:1)."""
        return ComplianceTier.AA_NORMAL in self.tiers

    @property
    def passes_aaa(self) -> bool:
        """True if normal text meets AAA (7:1)."""
        return ComplianceTier.AAA_NORMAL in self.tiers

    @property
    def passes_aa_large(self) -> bool:
        return ComplianceTier.AA_LARGE in self.tiers

    @property
    def passes_aaa_large(self) -> bool:
        return ComplianceTier.AAA_LARGE in self.tiers

    def to_dict(self) -> dict:
        """Serialize to the tool-facing dictionary shape."""
        return {
            "ratio": self.ratio,
            "passesAA": self.passes_aa,
            "passesAAA": self.passes_aaa,
        }


# Tailwind-style shade keys, lightest first
SHADE_KEYS = (50, 100, 200, 300, 400, 500, 600, 700, 800, 900, 950)
