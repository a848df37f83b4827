# Copyright (c) 2026 Tincture
# SPDX-License-Identifier: MIT

"""
Tool surface for protocol servers.

Each engine capability is exposed as one method taking primitive arguments
(color text, numbers, option names) and returning primitives or plain
dicts/lists. A protocol layer registers these as remotely invocable tools
and frames the results however its transport requires.

Every engine failure is translated to a single ``ToolError`` carrying the
fixed code ``TOOL_ERROR_CODE`` and the engine's message. No partial results
are returned for a failing call.

Example::

    tools = ColorTools()
    tools.convert("#FF0000", "hsl")          # 'hsl(0, 100%, 50%)'
    tools.call("text_color", background="#1E3278")   # 'white'
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Iterator, Optional

import numpy as np

from tincture import engine
from tincture.errors import ColorError, InvalidColorSyntax
from tincture.runtime.config import ToolConfig, configure_logging
from tincture.schema import ColorValue, Notation

logger = logging.getLogger(__name__)

# JSON-RPC implementation-defined server error, used for every engine failure
TOOL_ERROR_CODE = -32000

# Tool name -> ColorTools method name
TOOL_NAMES = (
    "convert",
    "hex_to_oklch",
    "rgb_to_oklch",
    "hsl_to_oklch",
    "oklch_to_hex",
    "lighten",
    "darken",
    "saturate",
    "desaturate",
    "rotate",
    "invert",
    "luminance",
    "chroma",
    "opacity",
    "name",
    "palette",
    "scheme",
    "swatch",
    "random",
    "contrast",
    "compare",
    "text_color",
    "is_valid_color",
)

# Analysis scalars are reported at this precision
_SCALAR_DIGITS = 4


class ToolError(Exception):
    """A failed tool call, carrying a protocol error code and message."""

    def __init__(self, message: str, code: int = TOOL_ERROR_CODE) -> None:
        super().__init__(message)
        self.code = code
        self.message = message

    def to_dict(self) -> dict:
        """Serialize to a JSON-RPC style error object."""
        return {"code": self.code, "message": self.message}


@contextmanager
def _translate(context: str) -> Iterator[None]:
    """Re-raise engine errors as ToolError with ``context`` prefixed."""
    try:
        yield
    except ColorError as exc:
        logger.debug("%s: %s", context, exc)
        raise ToolError(f"{context}: {exc}") from exc


def _parse_as(text: str, notation: Notation) -> ColorValue:
    """Parse ``text`` and require it to be written in ``notation``."""
    color = engine.parse(text)
    if color.notation is not notation:
        raise InvalidColorSyntax(text)
    return color


class ColorTools:
    """
    One method per tool; all inputs and outputs are primitives.

    Args:
        config: Tool configuration (defaults to ``ToolConfig()``)
        rng: Random source for ``random``. Defaults to a generator seeded
            from ``config.seed``.
    """

    def __init__(
        self,
        config: Optional[ToolConfig] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        self.config = config if config is not None else ToolConfig()
        if self.config.debug:
            configure_logging(self.config)
        self._rng = rng if rng is not None else np.random.default_rng(self.config.seed)

    # -- dispatch -----------------------------------------------------------

    def call(self, tool: str, **arguments: Any) -> Any:
        """
        Invoke a tool by name with keyword arguments.

        Raises:
            ToolError: unknown tool, bad arguments, or any engine failure
        """
        if tool not in TOOL_NAMES:
            raise ToolError(f"Unknown tool: {tool!r}")
        logger.debug("tool %s called with %s", tool, arguments)
        try:
            return getattr(self, tool)(**arguments)
        except TypeError as exc:
            raise ToolError(f"Invalid arguments for {tool}: {exc}") from exc

    # -- conversion ---------------------------------------------------------

    def convert(self, color: str, format: str) -> str:
        with _translate("Invalid color or format"):
            return engine.format_color(engine.parse(color), format)

    def hex_to_oklch(self, hex: str) -> str:
        with _translate("Invalid hex color"):
            return engine.format_color(_parse_as(hex, Notation.HEX), Notation.OKLCH)

    def rgb_to_oklch(self, rgb: str) -> str:
        with _translate("Invalid RGB color"):
            return engine.format_color(_parse_as(rgb, Notation.RGB), Notation.OKLCH)

    def hsl_to_oklch(self, hsl: str) -> str:
        with _translate("Invalid HSL color"):
            return engine.format_color(_parse_as(hsl, Notation.HSL), Notation.OKLCH)

    def oklch_to_hex(self, oklch: str) -> str:
        with _translate("Invalid OkLCH color"):
            return engine.format_color(_parse_as(oklch, Notation.OKLCH), Notation.HEX)

    # -- manipulation -------------------------------------------------------

    def lighten(self, color: str, amount: float) -> str:
        with _translate("Invalid color or amount"):
            return engine.format_color(engine.lighten(engine.parse(color), amount))

    def darken(self, color: str, amount: float) -> str:
        with _translate("Invalid color or amount"):
            return engine.format_color(engine.darken(engine.parse(color), amount))

    def saturate(self, color: str, amount: float) -> str:
        with _translate("Invalid color or amount"):
            return engine.format_color(engine.saturate(engine.parse(color), amount))

    def desaturate(self, color: str, amount: float) -> str:
        with _translate("Invalid color or amount"):
            return engine.format_color(engine.desaturate(engine.parse(color), amount))

    def rotate(self, color: str, degrees: float) -> str:
        with _translate("Invalid color or degrees"):
            return engine.format_color(engine.rotate(engine.parse(color), degrees))

    def invert(self, color: str) -> str:
        with _translate("Invalid color"):
            return engine.format_color(engine.invert(engine.parse(color)))

    # -- analysis -----------------------------------------------------------

    def luminance(self, color: str) -> float:
        with _translate("Invalid color"):
            return round(engine.luminance(engine.parse(color)), _SCALAR_DIGITS)

    def chroma(self, color: str) -> float:
        with _translate("Invalid color"):
            return round(engine.chroma(engine.parse(color)), _SCALAR_DIGITS)

    def opacity(self, color: str) -> float:
        with _translate("Invalid color"):
            return round(engine.opacity(engine.parse(color)), _SCALAR_DIGITS)

    def name(self, color: str) -> str:
        with _translate("Invalid color"):
            return engine.name(engine.parse(color))

    # -- generation ---------------------------------------------------------

    def palette(self, color: str, type: Optional[str] = None) -> list[str]:
        with _translate("Invalid color or type"):
            return [engine.format_color(c) for c in engine.palette(engine.parse(color), type)]

    def scheme(self, color: str, type: str) -> list[str]:
        with _translate("Invalid color or scheme type"):
            return [engine.format_color(c) for c in engine.scheme(engine.parse(color), type)]

    def swatch(
        self,
        color: str,
        lightnessFactor: Optional[float] = None,
        maxLightness: Optional[float] = None,
        minLightness: Optional[float] = None,
    ) -> dict[str, str]:
        options = {}
        if lightnessFactor is not None:
            options["lightness_factor"] = lightnessFactor
        if maxLightness is not None:
            options["max_lightness"] = maxLightness
        if minLightness is not None:
            options["min_lightness"] = minLightness
        with _translate("Invalid color or options"):
            shades = engine.swatch(engine.parse(color), **options)
            return {str(key): engine.format_color(c) for key, c in shades.items()}

    def random(self, format: Optional[str] = None) -> str:
        with _translate("Invalid format"):
            notation = Notation.from_name(format or self.config.default_random_format)
            return engine.format_color(engine.random_color(notation, self._rng), notation)

    # -- accessibility ------------------------------------------------------

    def contrast(self, foreground: str, background: str) -> float:
        with _translate("Invalid colors"):
            return engine.contrast(engine.parse(foreground), engine.parse(background))

    def compare(self, foreground: str, background: str) -> dict:
        with _translate("Invalid colors"):
            report = engine.compare(engine.parse(foreground), engine.parse(background))
            return report.to_dict()

    def text_color(self, background: str) -> str:
        with _translate("Invalid background color"):
            return engine.text_color(engine.parse(background))

    def is_valid_color(self, color: str) -> bool:
        return engine.is_valid_color(color)
