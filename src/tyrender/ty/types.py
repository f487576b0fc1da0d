"""
Type values.

This module defines every shape a type can take. Types are immutable and
compare structurally, so two equal values are interchangeable the way two
pointers to the same interned type are.

The shapes:
- Scalars: bool, char, signed/unsigned integers, floats
- Pointers: Box<T>, *const/*mut T, &'a [mut] T
- Aggregates: tuples, arrays, slices, str
- Nominal instances: structs and enums with their substitutions
- Callables: function items, function pointers, closures
- Trait objects and associated-type projections
- Generic parameters, inference variables and the error type
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any

from tyrender.ty.ids import DefId
from tyrender.ty.predicates import Binder, Projection, ProjectionPredicate, TraitRef
from tyrender.ty.regions import Region
from tyrender.ty.subst import ParamSpace, Substs


# =============================================================================
# Type System Representation
# =============================================================================


class Type(ABC):
    """
    Base class for all types.

    Types are immutable and support structural equality.
    """

    @abstractmethod
    def accept(self, visitor: TypeVisitor) -> Any:
        """Accept a visitor for shape dispatch."""
        pass

    def is_nil(self) -> bool:
        """Check if this is the unit type ``()``."""
        return False


class TypeVisitor(ABC):
    """
    Visitor over type shapes.

    Every shape has an abstract ``visit_*`` method, so a subclass that
    forgets one cannot be instantiated.
    """

    def visit(self, ty: Type) -> Any:
        """Dispatch to the appropriate visit method."""
        return ty.accept(self)

    @abstractmethod
    def visit_bool(self, ty: BoolType) -> Any: ...

    @abstractmethod
    def visit_char(self, ty: CharType) -> Any: ...

    @abstractmethod
    def visit_int(self, ty: IntType) -> Any: ...

    @abstractmethod
    def visit_uint(self, ty: UintType) -> Any: ...

    @abstractmethod
    def visit_float(self, ty: FloatType) -> Any: ...

    @abstractmethod
    def visit_box(self, ty: BoxType) -> Any: ...

    @abstractmethod
    def visit_raw_ptr(self, ty: RawPtrType) -> Any: ...

    @abstractmethod
    def visit_ref(self, ty: RefType) -> Any: ...

    @abstractmethod
    def visit_tuple(self, ty: TupleType) -> Any: ...

    @abstractmethod
    def visit_fn_def(self, ty: FnDefType) -> Any: ...

    @abstractmethod
    def visit_fn_ptr(self, ty: FnPtrType) -> Any: ...

    @abstractmethod
    def visit_infer(self, ty: InferType) -> Any: ...

    @abstractmethod
    def visit_error(self, ty: ErrorType) -> Any: ...

    @abstractmethod
    def visit_param(self, ty: ParamType) -> Any: ...

    @abstractmethod
    def visit_adt(self, ty: AdtType) -> Any: ...

    @abstractmethod
    def visit_trait_object(self, ty: TraitObjectType) -> Any: ...

    @abstractmethod
    def visit_projection(self, ty: ProjectionType) -> Any: ...

    @abstractmethod
    def visit_str(self, ty: StrType) -> Any: ...

    @abstractmethod
    def visit_closure(self, ty: ClosureType) -> Any: ...

    @abstractmethod
    def visit_array(self, ty: ArrayType) -> Any: ...

    @abstractmethod
    def visit_slice(self, ty: SliceType) -> Any: ...


# -----------------------------------------------------------------------------
# Supporting enums
# -----------------------------------------------------------------------------


class IntKind(Enum):
    ISIZE = "isize"
    I8 = "i8"
    I16 = "i16"
    I32 = "i32"
    I64 = "i64"


class UintKind(Enum):
    USIZE = "usize"
    U8 = "u8"
    U16 = "u16"
    U32 = "u32"
    U64 = "u64"


class FloatKind(Enum):
    F32 = "f32"
    F64 = "f64"


class Mutability(Enum):
    IMMUTABLE = "MutImmutable"
    MUTABLE = "MutMutable"


class Unsafety(Enum):
    NORMAL = "normal"
    UNSAFE = "unsafe"


class Abi(Enum):
    """Calling convention of a function; RUST is the default and is never printed."""

    RUST = "Rust"
    C = "C"
    CDECL = "cdecl"
    STDCALL = "stdcall"
    FASTCALL = "fastcall"
    VECTORCALL = "vectorcall"
    AAPCS = "aapcs"
    WIN64 = "win64"
    SYSV64 = "sysv64"
    SYSTEM = "system"
    RUST_INTRINSIC = "rust-intrinsic"
    RUST_CALL = "rust-call"
    PLATFORM_INTRINSIC = "platform-intrinsic"


class InferKind(Enum):
    """Kind of an inference variable."""

    TY_VAR = "TyVar"
    INT_VAR = "IntVar"
    FLOAT_VAR = "FloatVar"
    FRESH_TY = "FreshTy"
    FRESH_INT_TY = "FreshIntTy"
    FRESH_FLOAT_TY = "FreshFloatTy"

    def is_fresh(self) -> bool:
        return self in (InferKind.FRESH_TY, InferKind.FRESH_INT_TY, InferKind.FRESH_FLOAT_TY)


class AdtKind(Enum):
    STRUCT = "struct"
    ENUM = "enum"


class BuiltinBound(Enum):
    """Language-defined marker bounds that may be attached to a trait object."""

    SEND = "Send"
    SIZED = "Sized"
    COPY = "Copy"
    SYNC = "Sync"


# Builtin bounds always print in declaration order.
BUILTIN_BOUND_ORDER: tuple[BuiltinBound, ...] = tuple(BuiltinBound)


# -----------------------------------------------------------------------------
# Supporting records
# -----------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class TypeAndMut:
    ty: Type
    mutbl: Mutability = Mutability.IMMUTABLE


class FnOutput(ABC):
    """Return descriptor of a function signature."""

    pass


@dataclass(frozen=True, slots=True)
class FnConverging(FnOutput):
    """The function returns a value of ``ty``."""

    ty: Type


@dataclass(frozen=True, slots=True)
class FnDiverging(FnOutput):
    """The function never returns."""

    pass


@dataclass(frozen=True, slots=True)
class FnSig:
    """
    A function signature.

    Example: (i32, bool) -> i32
    """

    inputs: tuple[Type, ...]
    output: FnOutput
    variadic: bool = False


@dataclass(frozen=True, slots=True)
class BareFnTy:
    """A signature together with its safety and calling convention."""

    sig: Binder[FnSig]
    unsafety: Unsafety = Unsafety.NORMAL
    abi: Abi = Abi.RUST


@dataclass(frozen=True, slots=True)
class AdtDef:
    """Definition of a struct or enum."""

    did: DefId
    kind: AdtKind = AdtKind.STRUCT


@dataclass(frozen=True, slots=True)
class ClosureSubsts:
    """Substitutions of the enclosing function plus the captured variable types."""

    func_substs: Substs
    upvar_tys: tuple[Type, ...] = ()


@dataclass(frozen=True, slots=True)
class ExistentialBounds:
    """
    Everything a trait object promises besides its principal trait.

    Attributes:
        region_bound: Region the hidden type outlives
        builtin_bounds: Marker bounds such as Send
        projection_bounds: Associated-type assignments on the principal trait
    """

    region_bound: Region
    builtin_bounds: tuple[BuiltinBound, ...] = ()
    projection_bounds: tuple[Binder[ProjectionPredicate], ...] = ()

    def ordered_builtin_bounds(self) -> tuple[BuiltinBound, ...]:
        """Get the distinct builtin bounds in their canonical order."""
        present = set(self.builtin_bounds)
        return tuple(bound for bound in BUILTIN_BOUND_ORDER if bound in present)


# -----------------------------------------------------------------------------
# Scalar shapes
# -----------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class BoolType(Type):
    def accept(self, visitor: TypeVisitor) -> Any:
        return visitor.visit_bool(self)


@dataclass(frozen=True, slots=True)
class CharType(Type):
    def accept(self, visitor: TypeVisitor) -> Any:
        return visitor.visit_char(self)


@dataclass(frozen=True, slots=True)
class IntType(Type):
    kind: IntKind

    def accept(self, visitor: TypeVisitor) -> Any:
        return visitor.visit_int(self)


@dataclass(frozen=True, slots=True)
class UintType(Type):
    kind: UintKind

    def accept(self, visitor: TypeVisitor) -> Any:
        return visitor.visit_uint(self)


@dataclass(frozen=True, slots=True)
class FloatType(Type):
    kind: FloatKind

    def accept(self, visitor: TypeVisitor) -> Any:
        return visitor.visit_float(self)


# -----------------------------------------------------------------------------
# Pointer shapes
# -----------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class BoxType(Type):
    """An owned heap pointer, e.g. Box<i32>."""

    inner: Type

    def accept(self, visitor: TypeVisitor) -> Any:
        return visitor.visit_box(self)


@dataclass(frozen=True, slots=True)
class RawPtrType(Type):
    """A raw pointer, e.g. *const u8."""

    pointee: TypeAndMut

    def accept(self, visitor: TypeVisitor) -> Any:
        return visitor.visit_raw_ptr(self)


@dataclass(frozen=True, slots=True)
class RefType(Type):
    """A reference, e.g. &'a mut T."""

    region: Region
    pointee: TypeAndMut

    def accept(self, visitor: TypeVisitor) -> Any:
        return visitor.visit_ref(self)


# -----------------------------------------------------------------------------
# Aggregate shapes
# -----------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class TupleType(Type):
    """
    A tuple type.

    Examples: (i32, bool), (u8,), ()
    """

    elements: tuple[Type, ...]

    def accept(self, visitor: TypeVisitor) -> Any:
        return visitor.visit_tuple(self)

    def is_nil(self) -> bool:
        return not self.elements


@dataclass(frozen=True, slots=True)
class StrType(Type):
    def accept(self, visitor: TypeVisitor) -> Any:
        return visitor.visit_str(self)


@dataclass(frozen=True, slots=True)
class ArrayType(Type):
    """A fixed-size array, e.g. [u8; 4]."""

    element: Type
    size: int

    def accept(self, visitor: TypeVisitor) -> Any:
        return visitor.visit_array(self)


@dataclass(frozen=True, slots=True)
class SliceType(Type):
    """A dynamically sized slice, e.g. [u8]."""

    element: Type

    def accept(self, visitor: TypeVisitor) -> Any:
        return visitor.visit_slice(self)


# -----------------------------------------------------------------------------
# Nominal and callable shapes
# -----------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class AdtType(Type):
    """A struct or enum instantiated with ``substs``, e.g. Vec<i32>."""

    adt: AdtDef
    substs: Substs

    def accept(self, visitor: TypeVisitor) -> Any:
        return visitor.visit_adt(self)


@dataclass(frozen=True, slots=True)
class FnDefType(Type):
    """The zero-sized type of one particular function item."""

    def_id: DefId
    substs: Substs
    fn_ty: BareFnTy

    def accept(self, visitor: TypeVisitor) -> Any:
        return visitor.visit_fn_def(self)


@dataclass(frozen=True, slots=True)
class FnPtrType(Type):
    """A function pointer, e.g. fn(i32) -> i32."""

    fn_ty: BareFnTy

    def accept(self, visitor: TypeVisitor) -> Any:
        return visitor.visit_fn_ptr(self)


@dataclass(frozen=True, slots=True)
class ClosureType(Type):
    """The unique type of a closure expression."""

    def_id: DefId
    substs: ClosureSubsts

    def accept(self, visitor: TypeVisitor) -> Any:
        return visitor.visit_closure(self)


@dataclass(frozen=True, slots=True)
class TraitObjectType(Type):
    """
    A trait object, e.g. Iterator<Item=u8> + Send + 'static.

    The principal trait reference has no receiver: the concrete type is
    hidden.
    """

    principal: Binder[TraitRef]
    bounds: ExistentialBounds

    def accept(self, visitor: TypeVisitor) -> Any:
        return visitor.visit_trait_object(self)


@dataclass(frozen=True, slots=True)
class ProjectionType(Type):
    """An associated type projection, e.g. <T as Iterator>::Item."""

    projection: Projection

    def accept(self, visitor: TypeVisitor) -> Any:
        return visitor.visit_projection(self)


# -----------------------------------------------------------------------------
# Placeholder shapes
# -----------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class ParamType(Type):
    """
    A generic type parameter.

    Examples:
        T in fn identity<T>(x: T) -> T
        Self in trait Shape
    """

    space: ParamSpace
    index: int
    name: str

    def accept(self, visitor: TypeVisitor) -> Any:
        return visitor.visit_param(self)


@dataclass(frozen=True, slots=True)
class InferType(Type):
    """An inference variable, or a fresh placeholder replacing one."""

    kind: InferKind
    index: int

    def accept(self, visitor: TypeVisitor) -> Any:
        return visitor.visit_infer(self)


@dataclass(frozen=True, slots=True)
class ErrorType(Type):
    """Stands in for a type whose checking already failed."""

    def accept(self, visitor: TypeVisitor) -> Any:
        return visitor.visit_error(self)


# Singleton instances
BOOL_TYPE = BoolType()
CHAR_TYPE = CharType()
STR_TYPE = StrType()
ERROR_TYPE = ErrorType()
UNIT_TYPE = TupleType(())

ISIZE_TYPE = IntType(IntKind.ISIZE)
I8_TYPE = IntType(IntKind.I8)
I16_TYPE = IntType(IntKind.I16)
I32_TYPE = IntType(IntKind.I32)
I64_TYPE = IntType(IntKind.I64)
USIZE_TYPE = UintType(UintKind.USIZE)
U8_TYPE = UintType(UintKind.U8)
U16_TYPE = UintType(UintKind.U16)
U32_TYPE = UintType(UintKind.U32)
U64_TYPE = UintType(UintKind.U64)
F32_TYPE = FloatType(FloatKind.F32)
F64_TYPE = FloatType(FloatKind.F64)

SELF_PARAM = ParamType(ParamSpace.SELF, 0, "Self")

# Scalar types by their canonical name
SCALAR_TYPES: dict[str, Type] = {
    "bool": BOOL_TYPE,
    "char": CHAR_TYPE,
    **{kind.value: IntType(kind) for kind in IntKind},
    **{kind.value: UintType(kind) for kind in UintKind},
    **{kind.value: FloatType(kind) for kind in FloatKind},
}
