"""
Generic traversal and rewriting of type-system values.

Every value in ``tyrender.ty`` is a frozen dataclass (or a tuple of them), so
a single structural folder can rebuild any of them. Subclasses override
``fold_type`` and ``fold_region`` to rewrite the leaves they care about; the
folder tracks how many binders it has entered so that late-bound regions can
be matched against the binder that owns them.
"""

from __future__ import annotations

from dataclasses import fields, is_dataclass, replace
from typing import Any, Callable, Iterator, TypeVar

from tyrender.ty.predicates import Binder
from tyrender.ty.regions import BoundRegion, EarlyBoundRegion, LateBoundRegion, Region
from tyrender.ty.subst import ParamSpace, Substs
from tyrender.ty.types import ParamType, Type
from tyrender.utils.errors import SubstitutionError

T = TypeVar("T")


class TypeFolder:
    """
    Structural rewriter over types, regions and everything containing them.

    ``current_depth`` is 1 outside of any binder entered by this folder and
    grows by one for each ``Binder`` it descends into.
    """

    def __init__(self) -> None:
        self.current_depth = 1

    def fold(self, value: T) -> T:
        if isinstance(value, Type):
            return self.fold_type(value)
        if isinstance(value, Region):
            return self.fold_region(value)
        if isinstance(value, Binder):
            return self.fold_binder(value)
        return self.super_fold(value)

    def fold_type(self, ty: Type) -> Type:
        return self.super_fold(ty)

    def fold_region(self, region: Region) -> Region:
        return region

    def fold_binder(self, binder: Binder) -> Binder:
        self.current_depth += 1
        try:
            value = self.fold(binder.value)
        finally:
            self.current_depth -= 1
        if value is binder.value:
            return binder
        return Binder(value)

    def super_fold(self, value: T) -> T:
        """Fold the children of ``value`` and rebuild it if any changed."""
        if isinstance(value, tuple):
            folded = tuple(self.fold(item) for item in value)
            if all(new is old for new, old in zip(folded, value)):
                return value
            return folded
        if is_dataclass(value) and not isinstance(value, type):
            changes = {}
            for f in fields(value):
                old = getattr(value, f.name)
                new = self.fold(old)
                if new is not old:
                    changes[f.name] = new
            return replace(value, **changes) if changes else value
        return value


def walk(value: Any) -> Iterator[Any]:
    """Yield ``value`` and every value nested inside it, depth first."""
    stack = [value]
    while stack:
        current = stack.pop()
        yield current
        if isinstance(current, tuple):
            stack.extend(reversed(current))
        elif is_dataclass(current) and not isinstance(current, type):
            stack.extend(reversed([getattr(current, f.name) for f in fields(current)]))


def walk_types(value: Any) -> Iterator[Type]:
    """Yield every type nested inside ``value``, including ``value`` itself."""
    for node in walk(value):
        if isinstance(node, Type):
            yield node


def has_self_ty(value: Any) -> bool:
    """Check whether ``value`` mentions the implicit receiver type ``Self``."""
    return any(
        isinstance(ty, ParamType) and ty.space is ParamSpace.SELF for ty in walk_types(value)
    )


# -----------------------------------------------------------------------------
# Region shifting
# -----------------------------------------------------------------------------


class RegionShifter(TypeFolder):
    """Moves every late-bound region that escapes the folded value ``amount`` binders out."""

    def __init__(self, amount: int) -> None:
        super().__init__()
        self.amount = amount

    def fold_region(self, region: Region) -> Region:
        if isinstance(region, LateBoundRegion) and region.depth >= self.current_depth:
            return replace(region, depth=region.depth + self.amount)
        return region


def shift_regions(value: T, amount: int) -> T:
    if amount == 0:
        return value
    return RegionShifter(amount).fold(value)


# -----------------------------------------------------------------------------
# Substitution
# -----------------------------------------------------------------------------


class SubstFolder(TypeFolder):
    """Replaces type parameters and early-bound regions with their arguments."""

    def __init__(self, substs: Substs) -> None:
        super().__init__()
        self.substs = substs

    def fold_type(self, ty: Type) -> Type:
        if isinstance(ty, ParamType):
            try:
                replacement = self.substs.types.get(ty.space, ty.index)
            except IndexError as e:
                raise SubstitutionError(
                    f"type parameter `{ty.name}` ({ty.space.value}/{ty.index}) has no argument"
                ) from e
            return shift_regions(replacement, self.current_depth - 1)
        return self.super_fold(ty)

    def fold_region(self, region: Region) -> Region:
        if isinstance(region, EarlyBoundRegion):
            try:
                replacement = self.substs.regions.get(region.space, region.index)
            except IndexError as e:
                raise SubstitutionError(
                    f"region parameter `{region.name}` "
                    f"({region.space.value}/{region.index}) has no argument"
                ) from e
            return shift_regions(replacement, self.current_depth - 1)
        return region


def subst(value: T, substs: Substs) -> T:
    """
    Substitute ``substs`` into ``value``.

    Raises:
        SubstitutionError: If ``value`` mentions a parameter ``substs`` has no slot for
    """
    return SubstFolder(substs).fold(value)


# -----------------------------------------------------------------------------
# Late-bound region replacement
# -----------------------------------------------------------------------------


class BoundRegionReplacer(TypeFolder):
    """
    Replaces the regions bound by one binder.

    ``fld_r`` is called once per distinct bound region, in the order the
    regions are first encountered.
    """

    def __init__(self, fld_r: Callable[[BoundRegion], Region]) -> None:
        super().__init__()
        self.fld_r = fld_r
        self.region_map: dict[BoundRegion, Region] = {}

    def fold_region(self, region: Region) -> Region:
        if isinstance(region, LateBoundRegion) and region.depth == self.current_depth:
            if region.bound not in self.region_map:
                self.region_map[region.bound] = self.fld_r(region.bound)
            replacement = self.region_map[region.bound]
            if isinstance(replacement, LateBoundRegion):
                return replace(replacement, depth=self.current_depth)
            return replacement
        return region


def replace_late_bound_regions(
    binder: Binder[T], fld_r: Callable[[BoundRegion], Region]
) -> tuple[T, dict[BoundRegion, Region]]:
    """
    Strip ``binder``, replacing the regions it binds with ``fld_r(bound)``.

    Returns:
        The rewritten value and the map from bound region to replacement
    """
    replacer = BoundRegionReplacer(fld_r)
    value = replacer.fold(binder.value)
    return value, replacer.region_map
