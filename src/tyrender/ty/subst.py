"""
Substitution records.

A substitution maps every generic slot of an item to a concrete type or
region. Slots are partitioned into parameter spaces: the item's own type
parameters, the implicit receiver (``Self``), and the parameters of a
method declared inside the item.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Generic, Optional, TypeVar

if TYPE_CHECKING:
    from tyrender.ty.regions import Region
    from tyrender.ty.types import Type

T = TypeVar("T")


class ParamSpace(Enum):
    """Parameter space of a generic slot."""

    TYPE = "TypeSpace"
    SELF = "SelfSpace"
    FN = "FnSpace"

    @classmethod
    def all(cls) -> tuple[ParamSpace, ...]:
        return (cls.TYPE, cls.SELF, cls.FN)


@dataclass(frozen=True, slots=True)
class ParamSpaceVec(Generic[T]):
    """
    A sequence of values partitioned by parameter space.

    Example:
        ParamSpaceVec(type_space=(K, V), self_space=(), fn_space=(U,))
    """

    type_space: tuple[T, ...] = ()
    self_space: tuple[T, ...] = ()
    fn_space: tuple[T, ...] = ()

    def get_slice(self, space: ParamSpace) -> tuple[T, ...]:
        """Get all values of one space, in declaration order."""
        if space is ParamSpace.TYPE:
            return self.type_space
        if space is ParamSpace.SELF:
            return self.self_space
        return self.fn_space

    def get(self, space: ParamSpace, index: int) -> T:
        """
        Get a single value.

        Raises:
            IndexError: If the space has no slot at ``index``
        """
        values = self.get_slice(space)
        if index < 0 or index >= len(values):
            raise IndexError(f"no slot {index} in {space.value} (len {len(values)})")
        return values[index]

    def is_empty(self) -> bool:
        return not (self.type_space or self.self_space or self.fn_space)

    def __len__(self) -> int:
        return len(self.type_space) + len(self.self_space) + len(self.fn_space)


@dataclass(frozen=True, slots=True)
class Substs:
    """
    The types and regions substituted for an item's generic parameters.
    """

    types: ParamSpaceVec[Type]
    regions: ParamSpaceVec[Region]

    def self_ty(self) -> Optional[Type]:
        """Get the receiver type, or None if there is none (e.g. in a trait object)."""
        receiver = self.types.self_space
        return receiver[0] if receiver else None

    @classmethod
    def build(
        cls,
        types: tuple[Type, ...] = (),
        self_ty: Optional[Type] = None,
        fn_types: tuple[Type, ...] = (),
        regions: tuple[Region, ...] = (),
        fn_regions: tuple[Region, ...] = (),
    ) -> Substs:
        """Build a substitution record from per-space argument lists."""
        return cls(
            types=ParamSpaceVec(
                type_space=tuple(types),
                self_space=(self_ty,) if self_ty is not None else (),
                fn_space=tuple(fn_types),
            ),
            regions=ParamSpaceVec(type_space=tuple(regions), fn_space=tuple(fn_regions)),
        )

    def with_self_ty(self, self_ty: Type) -> Substs:
        """Return a copy with the receiver slot filled in."""
        return Substs(
            types=ParamSpaceVec(
                type_space=self.types.type_space,
                self_space=(self_ty,),
                fn_space=self.types.fn_space,
            ),
            regions=self.regions,
        )


EMPTY_SUBSTS = Substs.build()


@dataclass(frozen=True, slots=True)
class ItemSubsts:
    """The substitutions recorded for a path expression referring to a generic item."""

    substs: Substs = EMPTY_SUBSTS

    def is_noop(self) -> bool:
        return self.substs.types.is_empty() and self.substs.regions.is_empty()
