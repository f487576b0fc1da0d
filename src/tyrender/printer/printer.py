"""
The printer facade.

``TypePrinter`` is the single entry point every renderer recurses through.
It picks the concise (display) or explicit (debug) rendering of a value by
its class and carries the render session along.
"""

from __future__ import annotations

from typing import Any

from tyrender.printer.binder import TraitAndProjections, in_binder
from tyrender.printer import debug as dbg
from tyrender.printer.paths import resolve_path
from tyrender.printer.predicates import (
    equate_debug,
    equate_display,
    outlives_debug,
    outlives_display,
    predicate_debug,
    predicate_display,
    projection_display,
    projection_predicate_debug,
    projection_predicate_display,
    trait_and_projections_display,
    trait_predicate_debug,
    trait_predicate_display,
    trait_ref_debug,
    trait_ref_display,
)
from tyrender.printer.regions import (
    bound_region_debug,
    bound_region_display,
    region_debug,
    region_display,
)
from tyrender.printer.session import Mode, RenderSession
from tyrender.printer.shapes import ShapeRenderer
from tyrender.printer.signature import fn_sig
from tyrender.ty.generics import (
    ExplicitSelfCategory,
    GenericPredicates,
    Generics,
    InstantiatedPredicates,
    ItemVariances,
    ObjectLifetimeDefault,
    RegionParameterDef,
    TraitDef,
    TypeParameterDef,
    Variance,
)
from tyrender.ty.ids import DefId
from tyrender.ty.predicates import (
    Binder,
    ClosureKind,
    EquatePredicate,
    OutlivesPredicate,
    Predicate,
    Projection,
    ProjectionPredicate,
    TraitPredicate,
    TraitRef,
)
from tyrender.ty.regions import BoundRegion, Region
from tyrender.ty.subst import ItemSubsts, ParamSpace, ParamSpaceVec, Substs
from tyrender.ty.types import (
    AdtDef,
    BareFnTy,
    BuiltinBound,
    ExistentialBounds,
    FnOutput,
    FnSig,
    Mutability,
    Type,
    TypeAndMut,
)


class TypePrinter:
    """
    Renders type-system values to text.

    Example:
        printer = TypePrinter(RenderSession(ctx))
        printer.display(vec_of_u8)   # "Vec<u8>"
        printer.debug(vec_of_u8.substs)
    """

    def __init__(self, session: RenderSession) -> None:
        self.session = session

    def render(self, value: Any, mode: Mode = Mode.CONCISE) -> str:
        if mode is Mode.EXPLICIT:
            return self.debug(value)
        return self.display(value)

    def item_path(self, def_id: DefId) -> str:
        return resolve_path(self.session.ctx, def_id)

    # -------------------------------------------------------------------------
    # Concise rendering
    # -------------------------------------------------------------------------

    def display(self, value: Any) -> str:
        """
        Render ``value`` the way it reads in a user-facing message.

        Values that have no concise form (substitution records, parameter
        declarations and the like) fall back to their explicit rendering.
        """
        if isinstance(value, str):
            return value
        if isinstance(value, Type):
            return ShapeRenderer(self).visit(value)
        if isinstance(value, Region):
            return region_display(value, self.session.verbose)
        if isinstance(value, BoundRegion):
            return bound_region_display(value, self.session.verbose)
        if isinstance(value, Binder):
            return in_binder(self, value, self.session.ctx.lift(value))
        if isinstance(value, TraitAndProjections):
            return trait_and_projections_display(self, value)
        if isinstance(value, TraitRef):
            return trait_ref_display(self, value)
        if isinstance(value, Projection):
            return projection_display(self, value)
        if isinstance(value, ProjectionPredicate):
            return projection_predicate_display(self, value)
        if isinstance(value, TraitPredicate):
            return trait_predicate_display(self, value)
        if isinstance(value, EquatePredicate):
            return equate_display(self, value)
        if isinstance(value, OutlivesPredicate):
            return outlives_display(self, value)
        if isinstance(value, Predicate):
            return predicate_display(self, value)
        if isinstance(value, FnSig):
            return "fn" + fn_sig(self, value.inputs, value.variadic, value.output)
        if isinstance(value, TypeAndMut):
            return dbg.type_and_mut(self, value, explicit=False)
        if isinstance(value, ExplicitSelfCategory):
            return dbg.explicit_self_display(value)
        if isinstance(value, (ClosureKind, BuiltinBound)):
            return value.value
        return self.debug(value)

    # -------------------------------------------------------------------------
    # Explicit rendering
    # -------------------------------------------------------------------------

    def debug(self, value: Any) -> str:
        """
        Render ``value`` with every field spelled out.

        Raises:
            TypeError: If ``value`` is not a type-system value
        """
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (str, int)):
            return str(value)
        if isinstance(value, Type):
            # Types have a single rendering; verbose sessions make it explicit.
            return ShapeRenderer(self).visit(value)
        if isinstance(value, Region):
            return region_debug(value)
        if isinstance(value, BoundRegion):
            return bound_region_debug(value)
        if isinstance(value, Binder):
            return f"Binder({self.debug(value.value)})"
        if isinstance(value, TraitAndProjections):
            return (
                f"TraitAndProjections({trait_ref_debug(self, value.trait_ref)}, "
                f"{dbg.debug_list(self, value.projections)})"
            )
        if isinstance(value, TraitRef):
            return trait_ref_debug(self, value)
        if isinstance(value, Projection):
            return projection_display(self, value)
        if isinstance(value, ProjectionPredicate):
            return projection_predicate_debug(self, value)
        if isinstance(value, TraitPredicate):
            return trait_predicate_debug(self, value)
        if isinstance(value, EquatePredicate):
            return equate_debug(self, value)
        if isinstance(value, OutlivesPredicate):
            return outlives_debug(self, value)
        if isinstance(value, Predicate):
            return predicate_debug(self, value)
        if isinstance(value, Substs):
            return dbg.substs_debug(self, value)
        if isinstance(value, ItemSubsts):
            return dbg.item_substs_debug(self, value)
        if isinstance(value, ParamSpaceVec):
            return dbg.param_space_vec_debug(self, value)
        if isinstance(value, TypeParameterDef):
            return dbg.type_param_def_debug(value)
        if isinstance(value, RegionParameterDef):
            return dbg.region_param_def_debug(self, value)
        if isinstance(value, Generics):
            return dbg.generics_debug(self, value)
        if isinstance(value, TraitDef):
            return dbg.trait_def_debug(self, value)
        if isinstance(value, AdtDef):
            return dbg.adt_def_debug(self, value)
        if isinstance(value, ItemVariances):
            return dbg.variances_debug(self, value)
        if isinstance(value, (GenericPredicates, InstantiatedPredicates)):
            return dbg.generic_predicates_debug(self, value)
        if isinstance(value, FnSig):
            return dbg.fn_sig_debug(self, value)
        if isinstance(value, FnOutput):
            return dbg.fn_output_debug(self, value)
        if isinstance(value, BareFnTy):
            return dbg.bare_fn_debug(self, value)
        if isinstance(value, TypeAndMut):
            return dbg.type_and_mut(self, value, explicit=True)
        if isinstance(value, ExistentialBounds):
            return dbg.existential_bounds_debug(self, value)
        if isinstance(value, ObjectLifetimeDefault):
            return dbg.object_lifetime_default_debug(self, value)
        if isinstance(value, ExplicitSelfCategory):
            return dbg.explicit_self_debug(self, value)
        if isinstance(value, DefId):
            return dbg.def_id_debug(value)
        if isinstance(value, (Variance, ClosureKind, BuiltinBound, Mutability, ParamSpace)):
            return value.value
        if isinstance(value, (tuple, list)):
            return dbg.debug_list(self, value)
        raise TypeError(f"cannot render {type(value).__name__}")
