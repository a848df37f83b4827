# Copyright (c) 2026 Tincture
# SPDX-License-Identifier: MIT

"""Configuration for the tool surface."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from tincture.errors import InvalidParameter
from tincture.schema import Notation

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class ToolConfig:
    """Configuration for ColorTools."""

    # Enable DEBUG logging for the tincture logger
    debug: bool = False

    # Notation used by `random` when the caller gives none
    default_random_format: str = "hex"

    # Seed for the tool surface's random generator; None draws OS entropy
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate the random format names a supported notation."""
        Notation.from_name(self.default_random_format)
        if self.seed is not None and self.seed < 0:
            raise InvalidParameter(f"Seed must be >= 0, got {self.seed}")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> ToolConfig:
        """
        Build a config from environment variables.

        TINCTURE_DEBUG          "1"/"true"/"yes"/"on" enables debug logging
        TINCTURE_RANDOM_FORMAT  default notation for random colors
        TINCTURE_SEED           integer seed for random colors
        """
        env = os.environ if environ is None else environ
        seed = env.get("TINCTURE_SEED")
        try:
            parsed_seed = int(seed) if seed not in (None, "") else None
        except ValueError:
            raise InvalidParameter(f"TINCTURE_SEED must be an integer, got {seed!r}") from None
        return cls(
            debug=env.get("TINCTURE_DEBUG", "").strip().lower() in _TRUTHY,
            default_random_format=env.get("TINCTURE_RANDOM_FORMAT", "hex") or "hex",
            seed=parsed_seed,
        )


def configure_logging(config: ToolConfig) -> logging.Logger:
    """
    Set the level of the package logger from ``config``.

    Handlers are left to the application; this only adjusts the level.
    """
    logger = logging.getLogger("tincture")
    logger.setLevel(logging.DEBUG if config.debug else logging.WARNING)
    return logger
