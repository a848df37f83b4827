# Copyright (c) 2026 Tincture
# SPDX-License-Identifier: MIT

"""
Schema definitions for colors and analysis results.

All types in this module are immutable (frozen dataclasses).
Every engine operation returns new values rather than altering its input.
"""

from tincture.schema.color_value import (
    SHADE_KEYS,
    ColorValue,
    ComplianceTier,
    ContrastReport,
    Notation,
    Space,
    clamp,
    normalize_hue,
    require_finite,
)

__all__ = [
    # Core types
    "ColorValue",
    "Space",
    "Notation",
    # Accessibility results
    "ComplianceTier",
    "ContrastReport",
    # Swatch keys
    "SHADE_KEYS",
    # Channel helpers
    "clamp",
    "normalize_hue",
    "require_finite",
]
