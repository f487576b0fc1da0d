"""
Render sessions.

A session bundles the type context with the verbosity flag. It is immutable
and passed explicitly to every renderer, so the flag cannot change while a
value is being rendered.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

from tyrender.config import RenderConfig
from tyrender.ty.context import TypeContext


class Mode(Enum):
    """Which rendering of a value to produce."""

    CONCISE = "concise"
    EXPLICIT = "explicit"


@dataclass(frozen=True, slots=True)
class RenderSession:
    ctx: TypeContext
    verbose: bool = False

    @classmethod
    def from_config(cls, ctx: TypeContext, config: RenderConfig) -> RenderSession:
        return cls(ctx=ctx, verbose=config.verbose)

    def with_verbose(self, verbose: bool) -> RenderSession:
        return replace(self, verbose=verbose)
