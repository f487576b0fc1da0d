"""
Explicit (debug) renderings of supporting records.

These forms are meant for compiler developers: they name every field and
never hide information. Types themselves have no separate debug form; their
explicit rendering is their display in verbose mode.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterable

from tyrender.ty.generics import (
    ExplicitSelfCategory,
    Generics,
    GenericPredicates,
    InstantiatedPredicates,
    ItemVariances,
    LifetimeDefaultKind,
    ObjectLifetimeDefault,
    RegionParameterDef,
    SelfKind,
    TraitDef,
    TypeParameterDef,
)
from tyrender.ty.ids import DefId
from tyrender.ty.subst import ItemSubsts, ParamSpace, ParamSpaceVec, Substs
from tyrender.ty.types import (
    AdtDef,
    BareFnTy,
    BuiltinBound,
    ExistentialBounds,
    FnConverging,
    FnOutput,
    FnSig,
    InferKind,
    InferType,
    Mutability,
    ParamType,
    TypeAndMut,
)

if TYPE_CHECKING:
    from tyrender.printer.printer import TypePrinter


_VAR_SUFFIX = {
    InferKind.TY_VAR: "t",
    InferKind.INT_VAR: "i",
    InferKind.FLOAT_VAR: "f",
}


def debug_list(printer: TypePrinter, values: Iterable[Any]) -> str:
    return "[" + ", ".join(printer.debug(value) for value in values) + "]"


# -----------------------------------------------------------------------------
# Identifiers and placeholders
# -----------------------------------------------------------------------------


def def_id_debug(def_id: DefId) -> str:
    return f"DefId({def_id})"


def infer_debug(ty: InferType) -> str:
    """Render an inference variable by identity, e.g. ``_#3t`` or ``FreshTy(3)``."""
    if ty.kind.is_fresh():
        return f"{ty.kind.value}({ty.index})"
    return f"_#{ty.index}{_VAR_SUFFIX[ty.kind]}"


def infer_display(ty: InferType, verbose: bool) -> str:
    """
    Render an inference variable for users.

    Ordinary variables print as ``_`` unless verbose; fresh placeholders
    always print their identity.
    """
    if ty.kind.is_fresh() or verbose:
        return infer_debug(ty)
    return "_"


def param_debug(ty: ParamType) -> str:
    """Render a type parameter with its slot, e.g. ``T/TypeSpace.0``."""
    return f"{ty.name}/{ty.space.value}.{ty.index}"


# -----------------------------------------------------------------------------
# Substitutions and generics
# -----------------------------------------------------------------------------


def param_space_vec_debug(printer: TypePrinter, vec: ParamSpaceVec[Any]) -> str:
    """Render all three spaces in order, e.g. ``[[i32]; []; [u8]]``."""
    spaces = (debug_list(printer, vec.get_slice(space)) for space in ParamSpace.all())
    return "[" + "; ".join(spaces) + "]"


def substs_debug(printer: TypePrinter, substs: Substs) -> str:
    return (
        f"Substs[types={param_space_vec_debug(printer, substs.types)}, "
        f"regions={param_space_vec_debug(printer, substs.regions)}]"
    )


def item_substs_debug(printer: TypePrinter, item_substs: ItemSubsts) -> str:
    return f"ItemSubsts({substs_debug(printer, item_substs.substs)})"


def type_param_def_debug(param: TypeParameterDef) -> str:
    return (
        f"TypeParameterDef({param.name}, {def_id_debug(param.def_id)}, "
        f"{param.space.value}/{param.index})"
    )


def region_param_def_debug(printer: TypePrinter, param: RegionParameterDef) -> str:
    return (
        f"RegionParameterDef({param.name}, {def_id_debug(param.def_id)}, "
        f"{param.space.value}/{param.index}, {debug_list(printer, param.bounds)})"
    )


def generics_debug(printer: TypePrinter, generics: Generics) -> str:
    return (
        f"Generics(types={param_space_vec_debug(printer, generics.types)}, "
        f"regions={param_space_vec_debug(printer, generics.regions)})"
    )


def trait_def_debug(printer: TypePrinter, trait_def: TraitDef) -> str:
    return (
        f"TraitDef(generics={generics_debug(printer, trait_def.generics)}, "
        f"trait_ref={printer.debug(trait_def.trait_ref)})"
    )


def adt_def_debug(printer: TypePrinter, adt: AdtDef) -> str:
    return printer.item_path(adt.did)


def variances_debug(printer: TypePrinter, variances: ItemVariances) -> str:
    return (
        f"ItemVariances(types={param_space_vec_debug(printer, variances.types)}, "
        f"regions={param_space_vec_debug(printer, variances.regions)})"
    )


def generic_predicates_debug(
    printer: TypePrinter, predicates: GenericPredicates | InstantiatedPredicates
) -> str:
    name = type(predicates).__name__
    return f"{name}({param_space_vec_debug(printer, predicates.predicates)})"


# -----------------------------------------------------------------------------
# Functions
# -----------------------------------------------------------------------------


def fn_output_debug(printer: TypePrinter, output: FnOutput) -> str:
    if isinstance(output, FnConverging):
        return f"FnConverging({printer.debug(output.ty)})"
    return "FnDiverging"


def fn_sig_debug(printer: TypePrinter, sig: FnSig) -> str:
    """Render a signature field by field, e.g. ``([i32]; variadic: false)->FnConverging(i32)``."""
    variadic = "true" if sig.variadic else "false"
    return (
        f"({debug_list(printer, sig.inputs)}; variadic: {variadic})"
        f"->{fn_output_debug(printer, sig.output)}"
    )


def bare_fn_debug(printer: TypePrinter, bare_fn: BareFnTy) -> str:
    return (
        f"BareFnTy(unsafety: {bare_fn.unsafety.value}, abi: {bare_fn.abi.value}, "
        f"sig: {printer.debug(bare_fn.sig)})"
    )


# -----------------------------------------------------------------------------
# Bounds and mutability
# -----------------------------------------------------------------------------


def type_and_mut(printer: TypePrinter, tm: TypeAndMut, explicit: bool) -> str:
    prefix = "mut " if tm.mutbl is Mutability.MUTABLE else ""
    inner = printer.debug(tm.ty) if explicit else printer.display(tm.ty)
    return prefix + inner


def builtin_bounds_display(bounds: Iterable[BuiltinBound]) -> str:
    """Render marker bounds joined with ``+``, e.g. ``Send + Sync``."""
    return " + ".join(bound.value for bound in bounds)


def existential_bounds_debug(printer: TypePrinter, bounds: ExistentialBounds) -> str:
    parts = []
    region = printer.debug(bounds.region_bound)
    if region:
        parts.append(region)
    parts.extend(bound.value for bound in bounds.ordered_builtin_bounds())
    parts.extend(printer.debug(projection) for projection in bounds.projection_bounds)
    return " + ".join(parts)


def object_lifetime_default_debug(printer: TypePrinter, default: ObjectLifetimeDefault) -> str:
    if default.kind is LifetimeDefaultKind.SPECIFIC and default.region is not None:
        return printer.debug(default.region)
    return default.kind.value


# -----------------------------------------------------------------------------
# Method receivers
# -----------------------------------------------------------------------------


def explicit_self_display(category: ExplicitSelfCategory) -> str:
    """Render how a method takes its receiver: ``static``, ``self``, ``&self``, ..."""
    if category.kind is SelfKind.STATIC:
        return "static"
    if category.kind is SelfKind.BY_VALUE:
        return "self"
    if category.kind is SelfKind.BY_REFERENCE:
        return "&mut self" if category.mutbl is Mutability.MUTABLE else "&self"
    return "Box<self>"


def explicit_self_debug(printer: TypePrinter, category: ExplicitSelfCategory) -> str:
    if category.kind is SelfKind.STATIC:
        return "Static"
    if category.kind is SelfKind.BY_VALUE:
        return "ByValue"
    if category.kind is SelfKind.BY_BOX:
        return "ByBox"
    region = printer.debug(category.region) if category.region is not None else "ReStatic"
    return f"ByReference({region}, {category.mutbl.value})"
