"""
Naming of regions bound by a binder.

Late-bound regions have no stable name outside the binder that introduces
them. When a binder is printed, each distinct region it binds is given a
name and listed in a ``for<...>`` prefix:

    for<'a, 'r> fn(&'a u8, &'r u8)

Regions the user named keep their name; every anonymous region is called
``'r``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Optional

from tyrender.ty.fold import replace_late_bound_regions
from tyrender.ty.ids import CRATE_ROOT
from tyrender.ty.predicates import Binder, ProjectionPredicate, TraitRef
from tyrender.ty.regions import BoundRegion, LateBoundRegion, NamedBound, Region

if TYPE_CHECKING:
    from tyrender.printer.printer import TypePrinter

ANON_REGION_NAME = "'r"


@dataclass(frozen=True, slots=True)
class TraitAndProjections:
    """
    A trait reference printed together with its associated-type bindings.

    Trait objects print their principal trait and its projections under a
    single binder, so one ``for<...>`` prefix covers both.
    """

    trait_ref: TraitRef
    projections: tuple[ProjectionPredicate, ...] = ()
    allow_call_sugar: bool = True


def in_binder(printer: TypePrinter, original: Binder[Any], lifted: Optional[Binder[Any]]) -> str:
    """
    Render a bound value, naming the regions the binder introduces.

    Args:
        printer: Printer used for the body
        original: The binder as supplied by the caller
        lifted: The same binder lifted into the global arena, or None if
            lifting failed; the body is then printed as is
    """
    if lifted is None:
        return printer.display(original.value)

    names: list[str] = []

    def name_region(bound: BoundRegion) -> Region:
        if isinstance(bound, NamedBound):
            names.append(bound.name)
            return LateBoundRegion(1, bound)
        names.append(ANON_REGION_NAME)
        return LateBoundRegion(1, NamedBound(CRATE_ROOT, ANON_REGION_NAME))

    value, _ = replace_late_bound_regions(lifted, name_region)
    body = printer.display(value)
    if not names:
        return body
    return f"for<{', '.join(names)}> {body}"
