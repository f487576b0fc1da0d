"""
Render configuration.

The only setting that changes output is ``verbose``: concise output is meant
for users, verbose output exposes internal identities (inference variables,
region kinds, every generic argument) for debugging the compiler itself.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

VERBOSE_ENV = "TYRENDER_VERBOSE"
LOG_LEVEL_ENV = "TYRENDER_LOG"

_TRUTHY = frozenset({"1", "true", "yes", "on"})
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """
    Session-wide settings.

    Attributes:
        verbose: Render every value in its fully explicit form
        log_level: Level for the ``tyrender`` loggers
    """

    verbose: bool = False
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.log_level.upper() not in _LOG_LEVELS:
            raise ValueError(
                f"invalid log level {self.log_level!r}; expected one of {', '.join(_LOG_LEVELS)}"
            )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> RenderConfig:
        """Build a configuration from ``TYRENDER_VERBOSE`` and ``TYRENDER_LOG``."""
        env = os.environ if environ is None else environ
        verbose = env.get(VERBOSE_ENV, "").strip().lower() in _TRUTHY
        log_level = env.get(LOG_LEVEL_ENV, "WARNING").strip().upper() or "WARNING"
        return cls(verbose=verbose, log_level=log_level)

    def override(
        self, verbose: Optional[bool] = None, log_level: Optional[str] = None
    ) -> RenderConfig:
        """Return a copy with the given settings replaced; None keeps the current value."""
        return replace(
            self,
            verbose=self.verbose if verbose is None else verbose,
            log_level=self.log_level if log_level is None else log_level.upper(),
        )

    @property
    def logging_level(self) -> int:
        return getattr(logging, self.log_level.upper())
