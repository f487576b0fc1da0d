"""
Rendering of trait references, projections and predicates.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from tyrender.printer.binder import TraitAndProjections
from tyrender.printer.paths import Namespace, parameterized
from tyrender.ty.predicates import (
    ClosureKindClause,
    CompatClause,
    EquateClause,
    EquatePredicate,
    ObjectSafeClause,
    OutlivesPredicate,
    Predicate,
    Projection,
    ProjectionClause,
    ProjectionPredicate,
    RegionOutlivesClause,
    TraitClause,
    TraitPredicate,
    TraitRef,
    TypeOutlivesClause,
    WellFormedClause,
)

if TYPE_CHECKING:
    from tyrender.printer.printer import TypePrinter


# -----------------------------------------------------------------------------
# Trait references and projections
# -----------------------------------------------------------------------------


def trait_ref_display(printer: TypePrinter, trait_ref: TraitRef) -> str:
    """Render a trait reference in the type namespace, e.g. ``Iterator`` or ``Add<i32>``."""
    return parameterized(
        printer,
        trait_ref.substs,
        trait_ref.def_id,
        Namespace.TYPE,
        (),
        lambda ctx: ctx.trait_generics(trait_ref.def_id),
    )


def trait_ref_debug(printer: TypePrinter, trait_ref: TraitRef) -> str:
    """
    Render a trait reference together with its receiver, e.g. ``<T as Iterator>``.

    Bound regions are not named here: their depth already says which binder
    they belong to.
    """
    self_ty = trait_ref.self_ty()
    if self_ty is None:
        return trait_ref_display(printer, trait_ref)
    return f"<{printer.debug(self_ty)} as {trait_ref_display(printer, trait_ref)}>"


def trait_and_projections_display(printer: TypePrinter, value: TraitAndProjections) -> str:
    trait_ref = value.trait_ref
    return parameterized(
        printer,
        trait_ref.substs,
        trait_ref.def_id,
        Namespace.TYPE,
        value.projections,
        lambda ctx: ctx.trait_generics(trait_ref.def_id),
        allow_call_sugar=value.allow_call_sugar,
    )


def projection_display(printer: TypePrinter, projection: Projection) -> str:
    """Render an associated type, e.g. ``<T as Iterator>::Item``."""
    return f"{trait_ref_debug(printer, projection.trait_ref)}::{projection.item_name}"


# -----------------------------------------------------------------------------
# Predicate records
# -----------------------------------------------------------------------------


def trait_predicate_display(printer: TypePrinter, predicate: TraitPredicate) -> str:
    self_ty = predicate.self_ty()
    receiver = printer.display(self_ty) if self_ty is not None else "Self"
    return f"{receiver}: {trait_ref_display(printer, predicate.trait_ref)}"


def trait_predicate_debug(printer: TypePrinter, predicate: TraitPredicate) -> str:
    return f"TraitPredicate({trait_ref_debug(printer, predicate.trait_ref)})"


def projection_predicate_display(printer: TypePrinter, predicate: ProjectionPredicate) -> str:
    return f"{projection_display(printer, predicate.projection)} == {printer.display(predicate.ty)}"


def projection_predicate_debug(printer: TypePrinter, predicate: ProjectionPredicate) -> str:
    return (
        f"ProjectionPredicate({projection_display(printer, predicate.projection)}, "
        f"{printer.debug(predicate.ty)})"
    )


def equate_display(printer: TypePrinter, predicate: EquatePredicate) -> str:
    return f"{printer.display(predicate.a)} == {printer.display(predicate.b)}"


def equate_debug(printer: TypePrinter, predicate: EquatePredicate) -> str:
    return f"EquatePredicate({printer.debug(predicate.a)}, {printer.debug(predicate.b)})"


def outlives_display(printer: TypePrinter, predicate: OutlivesPredicate) -> str:
    return f"{printer.display(predicate.a)} : {printer.display(predicate.b)}"


def outlives_debug(printer: TypePrinter, predicate: OutlivesPredicate) -> str:
    return f"OutlivesPredicate({printer.debug(predicate.a)}, {printer.debug(predicate.b)})"


# -----------------------------------------------------------------------------
# Predicates
# -----------------------------------------------------------------------------


def predicate_display(printer: TypePrinter, predicate: Predicate) -> str:
    """
    Render a predicate as it reads in an error message.

    Examples:
        T: Clone
        for<'r> <T as Fn<(&'r u8,)>>::Output == bool
        [u8] well-formed
        the trait `Iterator` is object-safe
    """
    if isinstance(predicate, CompatClause):
        return predicate_display(printer, predicate.predicate)
    if isinstance(
        predicate,
        (TraitClause, EquateClause, RegionOutlivesClause, TypeOutlivesClause, ProjectionClause),
    ):
        return printer.display(predicate.binder)
    if isinstance(predicate, WellFormedClause):
        return f"{printer.display(predicate.ty)} well-formed"
    if isinstance(predicate, ObjectSafeClause):
        path = printer.item_path(predicate.trait_def_id)
        return f"the trait `{path}` is object-safe"
    if isinstance(predicate, ClosureKindClause):
        path = printer.item_path(predicate.closure_def_id)
        return f"the closure `{path}` implements the trait `{predicate.kind.value}`"
    raise TypeError(f"not a predicate: {predicate!r}")


def predicate_debug(printer: TypePrinter, predicate: Predicate) -> str:
    if isinstance(predicate, CompatClause):
        return f"RFC1592({predicate_debug(printer, predicate.predicate)})"
    if isinstance(
        predicate,
        (TraitClause, EquateClause, RegionOutlivesClause, TypeOutlivesClause, ProjectionClause),
    ):
        return printer.debug(predicate.binder)
    if isinstance(predicate, WellFormedClause):
        return f"WF({printer.debug(predicate.ty)})"
    if isinstance(predicate, ObjectSafeClause):
        return f"ObjectSafe({printer.debug(predicate.trait_def_id)})"
    if isinstance(predicate, ClosureKindClause):
        return f"ClosureKind({printer.debug(predicate.closure_def_id)}, {predicate.kind.value})"
    raise TypeError(f"not a predicate: {predicate!r}")
