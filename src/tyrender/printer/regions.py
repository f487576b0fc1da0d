"""
Region rendering.

Concise output shows only what a user could have written: a named region
prints its name, ``'static`` prints as such, and regions that only exist
inside the compiler (scopes, inference variables, anonymous bound regions)
print as nothing at all. Explicit output names every region kind.
"""

from __future__ import annotations

from tyrender.ty.regions import (
    AnonBound,
    BoundRegion,
    EarlyBoundRegion,
    EmptyRegion,
    EnvBound,
    FreeRegion,
    FreshBound,
    LateBoundRegion,
    NamedBound,
    Region,
    ScopeRegion,
    SkolemizedRegion,
    StaticRegion,
    VarRegion,
)


def bound_region_display(bound: BoundRegion, verbose: bool) -> str:
    if verbose:
        return bound_region_debug(bound)
    if isinstance(bound, NamedBound):
        return bound.name
    return ""


def bound_region_debug(bound: BoundRegion) -> str:
    if isinstance(bound, AnonBound):
        return f"BrAnon({bound.index})"
    if isinstance(bound, FreshBound):
        return f"BrFresh({bound.index})"
    if isinstance(bound, NamedBound):
        return f"BrNamed({bound.def_id.krate}:{bound.def_id.index}, {bound.name})"
    if isinstance(bound, EnvBound):
        return "BrEnv"
    raise TypeError(f"not a bound region: {bound!r}")


def region_display(region: Region, verbose: bool) -> str:
    """
    Render a region as it would appear in source.

    Returns an empty string for regions that have no source-level name.
    """
    if verbose:
        return region_debug(region)

    if isinstance(region, EarlyBoundRegion):
        return region.name
    if isinstance(region, (LateBoundRegion, FreeRegion, SkolemizedRegion)):
        return bound_region_display(region.bound, verbose)
    if isinstance(region, (ScopeRegion, VarRegion)):
        return ""
    if isinstance(region, StaticRegion):
        return "'static"
    if isinstance(region, EmptyRegion):
        return "'<empty>"
    raise TypeError(f"not a region: {region!r}")


def region_debug(region: Region) -> str:
    if isinstance(region, EarlyBoundRegion):
        return f"ReEarlyBound({region.space.value}, {region.index}, {region.name})"
    if isinstance(region, LateBoundRegion):
        return f"ReLateBound(DebruijnIndex({region.depth}), {bound_region_debug(region.bound)})"
    if isinstance(region, FreeRegion):
        return f"ReFree(Scope({region.scope}), {bound_region_debug(region.bound)})"
    if isinstance(region, ScopeRegion):
        return f"ReScope(Scope({region.extent}))"
    if isinstance(region, VarRegion):
        return f"'_#{region.index}r"
    if isinstance(region, SkolemizedRegion):
        return f"ReSkolemized({region.index}, {bound_region_debug(region.bound)})"
    if isinstance(region, StaticRegion):
        return "ReStatic"
    if isinstance(region, EmptyRegion):
        return "ReEmpty"
    raise TypeError(f"not a region: {region!r}")
