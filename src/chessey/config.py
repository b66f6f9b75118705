"""Application settings with environment and command-line overrides."""

from __future__ import annotations

import argparse
import os
from collections.abc import Mapping
from dataclasses import dataclass, replace

_ENV_PREFIX = "CHESSEY_"
_FALSE_WORDS = frozenset({"0", "false", "no", "off"})

LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass(frozen=True, slots=True)
class AppSettings:
    """All user-configurable settings."""

    # Game
    history: str = ""

    # Output
    with_notation: bool = True

    # Diagnostics
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> AppSettings:
        """Defaults overridden by ``CHESSEY_*`` environment variables."""
        env = os.environ if environ is None else environ
        settings = cls()
        if (history := env.get(f"{_ENV_PREFIX}HISTORY")) is not None:
            settings = replace(settings, history=history)
        # Unknown level names keep the default.
        level = env.get(f"{_ENV_PREFIX}LOG_LEVEL", "").strip().upper()
        if level in LOG_LEVELS:
            settings = replace(settings, log_level=level)
        if (notation := env.get(f"{_ENV_PREFIX}NOTATION")) is not None:
            settings = replace(
                settings, with_notation=notation.strip().lower() not in _FALSE_WORDS
            )
        return settings

    @classmethod
    def from_args(
        cls,
        args: argparse.Namespace,
        environ: Mapping[str, str] | None = None,
    ) -> AppSettings:
        """Environment settings overridden by parsed command-line *args*."""
        settings = cls.from_env(environ)
        if args.history is not None:
            settings = replace(settings, history=args.history)
        if args.no_notation:
            settings = replace(settings, with_notation=False)
        if args.log_level is not None:
            settings = replace(settings, log_level=args.log_level.upper())
        return settings
