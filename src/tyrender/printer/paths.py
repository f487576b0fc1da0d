"""
Path rendering for items with generic arguments.

Paths are printed differently depending on the namespace they are used in:

    Type namespace:   HashMap<K, V>
                      Iterator<Item=u8>
                      Fn(i32) -> i32          (call-trait sugar)
    Value namespace:  <Foo as Clone>::clone
                      Vec<u8>::with_capacity::<'a, T>
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING, Optional, Sequence

from tyrender.printer.defaults import GenericsAccessor, number_of_supplied_defaults
from tyrender.printer.signature import fn_sig
from tyrender.ty.context import TypeContext
from tyrender.ty.ids import DefId
from tyrender.ty.predicates import ClosureKind, ProjectionPredicate
from tyrender.ty.regions import Region
from tyrender.ty.subst import ParamSpace, Substs
from tyrender.ty.types import FnConverging, TupleType
from tyrender.utils.errors import ItemLookupError

if TYPE_CHECKING:
    from tyrender.printer.printer import TypePrinter

logger = logging.getLogger(__name__)

ERROR_MARKER = "[type error]"


class Namespace(Enum):
    """Namespace of the path being printed."""

    TYPE = "type"
    VALUE = "value"


class GenericList:
    """
    Accumulates a delimited argument list that disappears when empty.

    Example:
        GenericList("<", ", ", ">") with pushes "A", "B" renders "<A, B>";
        with no pushes it renders "".
    """

    def __init__(self, start: str, separator: str, end: str) -> None:
        self.start = start
        self.separator = separator
        self.end = end
        self.items: list[str] = []

    def push(self, item: str) -> None:
        self.items.append(item)

    def __bool__(self) -> bool:
        return bool(self.items)

    def render(self) -> str:
        if not self.items:
            return ""
        return f"{self.start}{self.separator.join(self.items)}{self.end}"


def parameterized(
    printer: TypePrinter,
    substs: Substs,
    did: DefId,
    ns: Namespace,
    projections: Sequence[ProjectionPredicate],
    get_generics: GenericsAccessor,
    allow_call_sugar: bool = True,
) -> str:
    """
    Render the path of ``did`` followed by its generic arguments.

    Args:
        printer: Printer used for nested types and regions
        substs: Arguments for the item's generic parameters
        did: The item to print
        ns: Namespace the path appears in
        projections: Associated-type assignments to list after the arguments
        get_generics: Lazily fetches the item's generics for default elision
        allow_call_sugar: Whether Fn-family traits may print as ``Fn(A) -> R``
    """
    session = printer.session
    ctx = session.ctx
    verbose = session.verbose
    parts: list[str] = []

    self_ty = substs.self_ty()
    if ns is Namespace.VALUE and self_ty is not None:
        parts.append(f"<{printer.display(self_ty)} as ")

    item_name: Optional[str] = None
    if ns is Namespace.VALUE:
        # Associated values (methods and constants) print through their
        # trait or impl, with their own name as a suffix.
        owner = _associated_owner(ctx, did)
        if owner is not None:
            item_name = _item_name(ctx, did)
            did = owner

    parts.append(resolve_path(ctx, did))

    if not verbose and allow_call_sugar and len(projections) == 1:
        if _fn_trait_kind(ctx, did) is not None:
            type_args = substs.types.get_slice(ParamSpace.TYPE)
            if type_args and isinstance(type_args[0], TupleType):
                parts.append(
                    fn_sig(printer, type_args[0].elements, False, FnConverging(projections[0].ty))
                )
                return "".join(parts)

    args = GenericList("<", ", ", ">")
    for region in substs.regions.get_slice(ParamSpace.TYPE):
        args.push(_region_arg(printer, region))

    # Verbose output never looks up generics.
    num_supplied_defaults = 0
    if not verbose:
        num_supplied_defaults = number_of_supplied_defaults(
            ctx, substs, ParamSpace.TYPE, get_generics
        )

    tps = substs.types.get_slice(ParamSpace.TYPE)
    for ty in tps[: len(tps) - num_supplied_defaults]:
        args.push(printer.display(ty))

    for projection in projections:
        args.push(f"{projection.item_name}={printer.display(projection.ty)}")

    parts.append(args.render())

    if ns is Namespace.VALUE:
        if self_ty is not None:
            parts.append(">")

        if item_name is not None:
            parts.append(f"::{item_name}")

        # TODO: elide defaulted method-level arguments too once method
        # generics carry defaults.
        method_args = GenericList("::<", ", ", ">")
        for region in substs.regions.get_slice(ParamSpace.FN):
            method_args.push(_region_arg(printer, region))
        for ty in substs.types.get_slice(ParamSpace.FN):
            method_args.push(printer.display(ty))
        parts.append(method_args.render())

    return "".join(parts)


def _region_arg(printer: TypePrinter, region: Region) -> str:
    if printer.session.verbose:
        return printer.debug(region)
    text = printer.display(region)
    # Regions with no printable name (inference variables, code scopes,
    # anonymous bound regions) still occupy an argument slot.
    return text or "'_"


def resolve_path(ctx: TypeContext, did: DefId) -> str:
    """Get the path of ``did``, or the error marker if the context does not know it."""
    try:
        return ctx.item_path_str(did)
    except ItemLookupError as e:
        logger.debug("cannot resolve path: %s", e)
        return ERROR_MARKER


def _item_name(ctx: TypeContext, did: DefId) -> Optional[str]:
    try:
        return ctx.item_name(did)
    except ItemLookupError as e:
        logger.debug("cannot resolve item name: %s", e)
        return None


def _associated_owner(ctx: TypeContext, did: DefId) -> Optional[DefId]:
    try:
        owner = ctx.trait_of_item(did)
        if owner is None:
            owner = ctx.impl_of_method(did)
    except ItemLookupError as e:
        logger.debug("cannot resolve owner: %s", e)
        return None
    return owner


def _fn_trait_kind(ctx: TypeContext, did: DefId) -> Optional[ClosureKind]:
    try:
        return ctx.fn_trait_kind(did)
    except ItemLookupError:
        return None
