# Copyright (c) 2026 Tincture
# SPDX-License-Identifier: MIT

"""
Tool runtime for Tincture.

Exposes every engine capability as a primitive-in, primitive-out tool for
protocol servers, with configuration and a single error type.

The runtime never changes engine results; it only parses, renders and
translates errors.
"""

from tincture.runtime.config import ToolConfig, configure_logging
from tincture.runtime.tools import TOOL_ERROR_CODE, TOOL_NAMES, ColorTools, ToolError

__all__ = [
    "ColorTools",
    "ToolError",
    "ToolConfig",
    "configure_logging",
    "TOOL_ERROR_CODE",
    "TOOL_NAMES",
]
