"""
Region (lifetime) values.

Late-bound regions are addressed by binder depth (de Bruijn style, 1 is the
innermost enclosing binder) plus a bound-region identity; they have no name
that is stable outside their binder.
"""

from __future__ import annotations

from abc import ABC
from dataclasses import dataclass

from tyrender.ty.ids import DefId
from tyrender.ty.subst import ParamSpace


# -----------------------------------------------------------------------------
# Bound region identities
# -----------------------------------------------------------------------------


class BoundRegion(ABC):
    """Identity of a region bound by some binder."""

    pass


@dataclass(frozen=True, slots=True)
class AnonBound(BoundRegion):
    """An anonymous region, e.g. the elided lifetime in ``fn(&u8)``."""

    index: int


@dataclass(frozen=True, slots=True)
class NamedBound(BoundRegion):
    """A region the user named, e.g. ``'a`` in ``for<'a> fn(&'a u8)``."""

    def_id: DefId
    name: str


@dataclass(frozen=True, slots=True)
class FreshBound(BoundRegion):
    """A region generated fresh during inference."""

    index: int


@dataclass(frozen=True, slots=True)
class EnvBound(BoundRegion):
    """The implicit region of a closure environment."""

    pass


# -----------------------------------------------------------------------------
# Regions
# -----------------------------------------------------------------------------


class Region(ABC):
    """Base class for all region values."""

    pass


@dataclass(frozen=True, slots=True)
class EarlyBoundRegion(Region):
    """A region parameter declared on an item, e.g. ``'a`` in ``struct Foo<'a>``."""

    space: ParamSpace
    index: int
    name: str


@dataclass(frozen=True, slots=True)
class LateBoundRegion(Region):
    """A region bound by an enclosing binder ``depth`` levels out."""

    depth: int
    bound: BoundRegion


@dataclass(frozen=True, slots=True)
class FreeRegion(Region):
    """A late-bound region seen from inside the body that binds it."""

    scope: int
    bound: BoundRegion


@dataclass(frozen=True, slots=True)
class ScopeRegion(Region):
    """The region of a block or expression inside a function body."""

    extent: int


@dataclass(frozen=True, slots=True)
class VarRegion(Region):
    """A region inference variable."""

    index: int


@dataclass(frozen=True, slots=True)
class SkolemizedRegion(Region):
    """A placeholder standing in for a bound region during higher-ranked checks."""

    index: int
    bound: BoundRegion


@dataclass(frozen=True, slots=True)
class StaticRegion(Region):
    """The ``'static`` region."""

    pass


@dataclass(frozen=True, slots=True)
class EmptyRegion(Region):
    """The empty region, contained in every other region."""

    pass


STATIC_REGION = StaticRegion()
EMPTY_REGION = EmptyRegion()
ENV_BOUND = EnvBound()
