"""
Shape dispatch: one rendering rule per type shape.

Examples of the output:
    bool, i32, str
    Box<i32>, *const u8, &'a mut T
    (i32,), (i32, bool), ()
    fn(i32) -> bool, unsafe extern "C" fn(u8, ...)
    fn(i32) -> bool {foo::bar}
    Vec<u8>, HashMap<K, V>
    Iterator<Item=u8> + Send + 'static
    <T as Iterator>::Item
    [closure@src/main.rs:3:13 x:i32]
    [u8; 4], [u8]
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from tyrender.printer.binder import TraitAndProjections, in_binder
from tyrender.printer.debug import infer_display, type_and_mut
from tyrender.printer.paths import ERROR_MARKER, Namespace, parameterized
from tyrender.printer.predicates import projection_display
from tyrender.printer.signature import fn_sig
from tyrender.ty.predicates import Binder
from tyrender.ty.types import (
    Abi,
    AdtType,
    ArrayType,
    BareFnTy,
    BoolType,
    BoxType,
    CharType,
    ClosureType,
    ErrorType,
    FloatType,
    FnDefType,
    FnPtrType,
    InferType,
    IntType,
    Mutability,
    ParamType,
    ProjectionType,
    RawPtrType,
    RefType,
    SliceType,
    StrType,
    TraitObjectType,
    TupleType,
    TypeVisitor,
    UintType,
    Unsafety,
)
from tyrender.utils.errors import InternalConsistencyError, ItemLookupError

if TYPE_CHECKING:
    from tyrender.printer.printer import TypePrinter

logger = logging.getLogger(__name__)


class ShapeRenderer(TypeVisitor):
    """
    Renders a type in its concise form (or, in verbose sessions, with every
    inference variable and region spelled out).

    Nested types are rendered back through the printer so that every level
    sees the same session.
    """

    def __init__(self, printer: TypePrinter) -> None:
        self.printer = printer
        self.session = printer.session
        self.ctx = printer.session.ctx

    # -------------------------------------------------------------------------
    # Scalars
    # -------------------------------------------------------------------------

    def visit_bool(self, ty: BoolType) -> str:
        return "bool"

    def visit_char(self, ty: CharType) -> str:
        return "char"

    def visit_int(self, ty: IntType) -> str:
        return ty.kind.value

    def visit_uint(self, ty: UintType) -> str:
        return ty.kind.value

    def visit_float(self, ty: FloatType) -> str:
        return ty.kind.value

    def visit_str(self, ty: StrType) -> str:
        return "str"

    # -------------------------------------------------------------------------
    # Pointers
    # -------------------------------------------------------------------------

    def visit_box(self, ty: BoxType) -> str:
        return f"Box<{self.printer.display(ty.inner)}>"

    def visit_raw_ptr(self, ty: RawPtrType) -> str:
        qualifier = "mut" if ty.pointee.mutbl is Mutability.MUTABLE else "const"
        return f"*{qualifier} {self.printer.display(ty.pointee.ty)}"

    def visit_ref(self, ty: RefType) -> str:
        region = self.printer.display(ty.region)
        if region:
            region += " "
        return f"&{region}{type_and_mut(self.printer, ty.pointee, explicit=False)}"

    # -------------------------------------------------------------------------
    # Aggregates
    # -------------------------------------------------------------------------

    def visit_tuple(self, ty: TupleType) -> str:
        elements = [self.printer.display(element) for element in ty.elements]
        if len(elements) == 1:
            return f"({elements[0]},)"
        return f"({', '.join(elements)})"

    def visit_array(self, ty: ArrayType) -> str:
        return f"[{self.printer.display(ty.element)}; {ty.size}]"

    def visit_slice(self, ty: SliceType) -> str:
        return f"[{self.printer.display(ty.element)}]"

    # -------------------------------------------------------------------------
    # Callables
    # -------------------------------------------------------------------------

    def _fn_header(self, bare_fn: BareFnTy) -> str:
        # The signature's own binder is not printed: late-bound regions of a
        # function type show up under their plain names.
        sig = bare_fn.sig.value
        parts = []
        if bare_fn.unsafety is Unsafety.UNSAFE:
            parts.append("unsafe ")
        if bare_fn.abi is not Abi.RUST:
            parts.append(f'extern "{bare_fn.abi.value}" ')
        parts.append("fn")
        parts.append(fn_sig(self.printer, sig.inputs, sig.variadic, sig.output))
        return "".join(parts)

    def visit_fn_def(self, ty: FnDefType) -> str:
        path = parameterized(
            self.printer,
            ty.substs,
            ty.def_id,
            Namespace.VALUE,
            (),
            lambda ctx: ctx.item_generics(ty.def_id),
        )
        return f"{self._fn_header(ty.fn_ty)} {{{path}}}"

    def visit_fn_ptr(self, ty: FnPtrType) -> str:
        return self._fn_header(ty.fn_ty)

    def visit_closure(self, ty: ClosureType) -> str:
        upvars = [self.printer.display(upvar) for upvar in ty.substs.upvar_tys]
        span = self.ctx.closure_span(ty.def_id)
        if span is not None:
            names = self._freevar_names(ty)
            head = f"[closure@{span}"
        else:
            names = None
            head = f"[closure@{self.printer.debug(ty.def_id)}"
        if names is None:
            captures = [f"{index}:{upvar}" for index, upvar in enumerate(upvars)]
        else:
            captures = [f"{name}:{upvar}" for name, upvar in zip(names, upvars)]
        if captures:
            return f"{head} {', '.join(captures)}]"
        return f"{head}]"

    def _freevar_names(self, ty: ClosureType) -> Optional[tuple[str, ...]]:
        try:
            return self.ctx.closure_freevar_names(ty.def_id)
        except ItemLookupError as e:
            logger.debug("no capture names for closure: %s", e)
            return None

    # -------------------------------------------------------------------------
    # Nominal types, trait objects and projections
    # -------------------------------------------------------------------------

    def visit_adt(self, ty: AdtType) -> str:
        did = ty.adt.did
        if did.is_local() and not self.ctx.has_item_type(did):
            # Generics are not known before the item type is collected.
            return f"{self.printer.item_path(did)}<..>"
        return parameterized(
            self.printer,
            ty.substs,
            did,
            Namespace.TYPE,
            (),
            lambda ctx: ctx.item_generics(did),
        )

    def visit_trait_object(self, ty: TraitObjectType) -> str:
        bounds = ty.bounds
        principal = self.ctx.lift(ty.principal.value)
        if principal is None:
            raise InternalConsistencyError("could not lift TraitRef for printing")
        projections = self.ctx.lift(bounds.projection_bounds)
        if projections is None:
            raise InternalConsistencyError("could not lift projections for printing")

        builtin_bounds = bounds.ordered_builtin_bounds()
        tap = Binder(
            TraitAndProjections(
                principal,
                tuple(projection.value for projection in projections),
                # Marker bounds disable the Fn(..) -> R sugar.
                allow_call_sugar=not builtin_bounds,
            )
        )
        parts = [in_binder(self.printer, Binder(""), tap)]

        for bound in builtin_bounds:
            parts.append(f" + {bound.value}")

        region = self.printer.display(bounds.region_bound)
        if region:
            parts.append(f" + {region}")
        return "".join(parts)

    def visit_projection(self, ty: ProjectionType) -> str:
        return projection_display(self.printer, ty.projection)

    # -------------------------------------------------------------------------
    # Placeholders
    # -------------------------------------------------------------------------

    def visit_param(self, ty: ParamType) -> str:
        return ty.name

    def visit_infer(self, ty: InferType) -> str:
        return infer_display(ty, self.session.verbose)

    def visit_error(self, ty: ErrorType) -> str:
        return ERROR_MARKER
