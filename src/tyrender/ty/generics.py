"""
Generic parameter declarations and other per-item metadata.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from tyrender.ty.ids import DefId
from tyrender.ty.predicates import Predicate, TraitRef
from tyrender.ty.regions import Region
from tyrender.ty.subst import ParamSpace, ParamSpaceVec
from tyrender.ty.types import Mutability, Type


@dataclass(frozen=True, slots=True)
class TypeParameterDef:
    """
    Declaration of a type parameter.

    Examples:
        T           - no default
        A = Global  - default used when the argument is omitted
    """

    name: str
    def_id: DefId
    space: ParamSpace
    index: int
    default: Optional[Type] = None


@dataclass(frozen=True, slots=True)
class RegionParameterDef:
    """Declaration of a region parameter, with the regions it must outlive."""

    name: str
    def_id: DefId
    space: ParamSpace
    index: int
    bounds: tuple[Region, ...] = ()


@dataclass(frozen=True, slots=True)
class Generics:
    """All generic parameters declared by an item, per parameter space."""

    types: ParamSpaceVec[TypeParameterDef] = field(default_factory=ParamSpaceVec)
    regions: ParamSpaceVec[RegionParameterDef] = field(default_factory=ParamSpaceVec)


EMPTY_GENERICS = Generics()


@dataclass(frozen=True, slots=True)
class TraitDef:
    generics: Generics
    trait_ref: TraitRef


class Variance(Enum):
    COVARIANT = "+"
    CONTRAVARIANT = "-"
    INVARIANT = "o"
    BIVARIANT = "*"


@dataclass(frozen=True, slots=True)
class ItemVariances:
    types: ParamSpaceVec[Variance]
    regions: ParamSpaceVec[Variance]


@dataclass(frozen=True, slots=True)
class GenericPredicates:
    """Where-clauses as declared, still referring to the item's own parameters."""

    predicates: ParamSpaceVec[Predicate]


@dataclass(frozen=True, slots=True)
class InstantiatedPredicates:
    """Where-clauses after substituting concrete arguments."""

    predicates: ParamSpaceVec[Predicate]


class SelfKind(Enum):
    STATIC = "static"
    BY_VALUE = "by-value"
    BY_REFERENCE = "by-reference"
    BY_BOX = "by-box"


@dataclass(frozen=True, slots=True)
class ExplicitSelfCategory:
    """How a method takes its receiver: ``self``, ``&self``, ``&mut self``, ``Box<self>`` or not at all."""

    kind: SelfKind
    mutbl: Mutability = Mutability.IMMUTABLE
    region: Optional[Region] = None


class LifetimeDefaultKind(Enum):
    AMBIGUOUS = "Ambiguous"
    BASE_DEFAULT = "BaseDefault"
    SPECIFIC = "Specific"


@dataclass(frozen=True, slots=True)
class ObjectLifetimeDefault:
    """The region a trait object in this position defaults to."""

    kind: LifetimeDefaultKind
    region: Optional[Region] = None
