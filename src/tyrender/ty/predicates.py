"""
Trait references, projections, binders and predicates.
"""

from __future__ import annotations

from abc import ABC
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Generic, Optional, TypeVar, Union

from tyrender.ty.ids import DefId
from tyrender.ty.subst import Substs

if TYPE_CHECKING:
    from tyrender.ty.regions import Region
    from tyrender.ty.types import Type

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Binder(Generic[T]):
    """
    Marks the late-bound regions inside ``value`` as universally quantified.

    A region bound by this binder appears inside ``value`` as a
    ``LateBoundRegion`` whose depth counts the binders between it and here.
    """

    value: T


class ClosureKind(Enum):
    """The call trait a closure implements."""

    FN = "Fn"
    FN_MUT = "FnMut"
    FN_ONCE = "FnOnce"


@dataclass(frozen=True, slots=True)
class TraitRef:
    """
    A reference to a trait with its arguments, e.g. ``<T as Iterator>``.

    The implementing type, when known, is the receiver slot of ``substs``.
    """

    def_id: DefId
    substs: Substs

    def self_ty(self) -> Optional[Type]:
        return self.substs.self_ty()


@dataclass(frozen=True, slots=True)
class Projection:
    """An associated type of a trait reference, e.g. ``<T as Iterator>::Item``."""

    trait_ref: TraitRef
    item_name: str


@dataclass(frozen=True, slots=True)
class ProjectionPredicate:
    """Asserts that a projection equals ``ty``, e.g. ``Item=u8``."""

    projection: Projection
    ty: Type

    @property
    def item_name(self) -> str:
        return self.projection.item_name


@dataclass(frozen=True, slots=True)
class TraitPredicate:
    """Asserts that the receiver of ``trait_ref`` implements the trait."""

    trait_ref: TraitRef

    def self_ty(self) -> Optional[Type]:
        return self.trait_ref.self_ty()

    @property
    def def_id(self) -> DefId:
        return self.trait_ref.def_id


@dataclass(frozen=True, slots=True)
class EquatePredicate:
    """Asserts that two types are equal."""

    a: Type
    b: Type


@dataclass(frozen=True, slots=True)
class OutlivesPredicate:
    """Asserts that ``a`` (a type or region) outlives region ``b``."""

    a: Union[Type, Region]
    b: Region


# -----------------------------------------------------------------------------
# Predicates (where-clauses and obligations)
# -----------------------------------------------------------------------------


class Predicate(ABC):
    """Base class for all predicates."""

    pass


@dataclass(frozen=True, slots=True)
class TraitClause(Predicate):
    binder: Binder[TraitPredicate]


@dataclass(frozen=True, slots=True)
class CompatClause(Predicate):
    """A predicate whose failure only warns, kept for backwards compatibility."""

    predicate: Predicate


@dataclass(frozen=True, slots=True)
class EquateClause(Predicate):
    binder: Binder[EquatePredicate]


@dataclass(frozen=True, slots=True)
class RegionOutlivesClause(Predicate):
    binder: Binder[OutlivesPredicate]


@dataclass(frozen=True, slots=True)
class TypeOutlivesClause(Predicate):
    binder: Binder[OutlivesPredicate]


@dataclass(frozen=True, slots=True)
class ProjectionClause(Predicate):
    binder: Binder[ProjectionPredicate]


@dataclass(frozen=True, slots=True)
class WellFormedClause(Predicate):
    ty: Type


@dataclass(frozen=True, slots=True)
class ObjectSafeClause(Predicate):
    trait_def_id: DefId


@dataclass(frozen=True, slots=True)
class ClosureKindClause(Predicate):
    closure_def_id: DefId
    kind: ClosureKind
