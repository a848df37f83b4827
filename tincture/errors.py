# Copyright (c) 2026 Tincture
# SPDX-License-Identifier: MIT

"""
Error types raised by the color engine.

All engine errors derive from ``ColorError`` (itself a ``ValueError``), so
callers that only care about "bad input" can catch one type. Failures are
deterministic for a given input and are never retried.

Out-of-range manipulation amounts are not errors: they are clamped and
logged at debug level.
"""

from __future__ import annotations


class ColorError(ValueError):
    """Base class for every failure the engine reports."""


class InvalidColorSyntax(ColorError):
    """Color text matched none of the recognized grammars."""

    def __init__(self, text: str) -> None:
        super().__init__(f"Unrecognized color syntax: {text!r}")
        self.text = text


class UnsupportedFormat(ColorError):
    """Target notation name is not one of the supported notations."""

    def __init__(self, name: str) -> None:
        super().__init__(
            f"Unsupported format {name!r}; expected one of "
            "'hex', 'rgb', 'rgba', 'hsl', 'hsla', 'oklab', 'oklch'"
        )
        self.name = name


class InvalidParameter(ColorError):
    """Out-of-domain option (palette/scheme type) or non-finite number."""
