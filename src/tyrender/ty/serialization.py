"""JSON decoding of type documents.

A type document declares the items a set of values refers to, then the
values themselves:

    {
      "items": [
        {"path": "std::vec::Vec", "kind": "struct", "crate": 1,
         "generics": {"types": ["T", {"name": "A", "default": {"kind": "adt", "def": "Global"}}]}},
        {"path": "Global", "kind": "struct", "crate": 1}
      ],
      "values": [
        {"label": "v", "type": {"kind": "adt", "def": "std::vec::Vec", "substs": {"types": ["u8"]}}}
      ]
    }

Items are referenced by path or by an explicit ``"krate:index"`` id. Types
may be written as a bare scalar name (``"i32"``, ``"str"``, ``"()"``).
Every value object carries a ``"kind"`` discriminator. Errors raise
``DecodeError`` with a pointer to the offending part of the document.
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional, Union

from tyrender.ty.context import ItemKind, ItemTable
from tyrender.ty.generics import Generics, RegionParameterDef, TypeParameterDef
from tyrender.ty.ids import CRATE_ROOT, LOCAL_CRATE, DefId
from tyrender.ty.predicates import (
    Binder,
    ClosureKind,
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
from tyrender.ty.regions import (
    ENV_BOUND,
    EMPTY_REGION,
    STATIC_REGION,
    AnonBound,
    BoundRegion,
    EarlyBoundRegion,
    FreeRegion,
    FreshBound,
    LateBoundRegion,
    NamedBound,
    Region,
    ScopeRegion,
    SkolemizedRegion,
    VarRegion,
)
from tyrender.ty.subst import ParamSpace, ParamSpaceVec, Substs
from tyrender.ty.types import (
    ERROR_TYPE,
    SCALAR_TYPES,
    STR_TYPE,
    UNIT_TYPE,
    Abi,
    AdtDef,
    AdtKind,
    AdtType,
    ArrayType,
    BareFnTy,
    BoxType,
    BuiltinBound,
    ClosureSubsts,
    ClosureType,
    ExistentialBounds,
    FnConverging,
    FnDefType,
    FnDiverging,
    FnOutput,
    FnPtrType,
    FnSig,
    InferKind,
    InferType,
    Mutability,
    ParamType,
    ProjectionType,
    RawPtrType,
    RefType,
    SliceType,
    TraitObjectType,
    TupleType,
    Type,
    TypeAndMut,
    Unsafety,
)
from tyrender.utils.errors import DecodeError, SourceLocation

_DEF_ID_RE = re.compile(r"^(\d+):(\d+)$")

_SPACES = {
    "type": ParamSpace.TYPE,
    "self": ParamSpace.SELF,
    "fn": ParamSpace.FN,
}

_INFER_KINDS = {
    "ty": InferKind.TY_VAR,
    "int": InferKind.INT_VAR,
    "float": InferKind.FLOAT_VAR,
    "fresh_ty": InferKind.FRESH_TY,
    "fresh_int": InferKind.FRESH_INT_TY,
    "fresh_float": InferKind.FRESH_FLOAT_TY,
}

# Value categories a document may carry, by their key in a value object.
VALUE_CATEGORIES = ("type", "region", "trait_ref", "predicate", "substs", "sig")


@dataclass(frozen=True, slots=True)
class LabeledValue:
    """A decoded value with the label it was given in the document."""

    label: str
    category: str
    value: Any


@dataclass(slots=True)
class TypeDocument:
    """The item table and the values a document declared."""

    table: ItemTable
    values: list[LabeledValue] = field(default_factory=list)

    def get(self, label: str) -> Optional[LabeledValue]:
        for value in self.values:
            if value.label == label:
                return value
        return None


# ---------------------------------------------------------------------------
# Entry points
# ---------------------------------------------------------------------------


def load_document(source: Union[str, dict[str, Any]]) -> TypeDocument:
    """
    Decode a type document from JSON text or an already-parsed mapping.

    Raises:
        DecodeError: If the text is not JSON or the document is malformed
    """
    if isinstance(source, str):
        try:
            data = json.loads(source)
        except json.JSONDecodeError as e:
            raise DecodeError(
                f"invalid JSON: {e.msg}",
                location=SourceLocation(e.lineno, e.colno, e.pos),
            ) from e
    else:
        data = source
    return _Decoder().document(data)


def load_document_file(path: Union[str, Path]) -> TypeDocument:
    """Read and decode a type document from ``path``."""
    text = Path(path).read_text(encoding="utf-8")
    return load_document(text)


def decode_type(data: Any, table: Optional[ItemTable] = None) -> Type:
    """Decode a single type against ``table`` (an empty table if omitted)."""
    return _Decoder(table).type(data, "type")


# ---------------------------------------------------------------------------
# Decoder
# ---------------------------------------------------------------------------


class _Decoder:
    def __init__(self, table: Optional[ItemTable] = None) -> None:
        self.table = table if table is not None else ItemTable()
        self.paths: dict[str, DefId] = {}
        for info in self.table.items():
            self.paths.setdefault(info.path, info.def_id)

    # -- helpers ------------------------------------------------------------

    @staticmethod
    def _object(data: Any, pointer: str) -> dict[str, Any]:
        if not isinstance(data, dict):
            raise DecodeError(f"expected an object, got {type(data).__name__}", pointer)
        return data

    @staticmethod
    def _list(data: Any, pointer: str) -> list[Any]:
        if not isinstance(data, list):
            raise DecodeError(f"expected a list, got {type(data).__name__}", pointer)
        return data

    @staticmethod
    def _field(data: dict[str, Any], key: str, pointer: str) -> Any:
        if key not in data:
            raise DecodeError(f"missing field '{key}'", pointer)
        return data[key]

    @staticmethod
    def _int(data: Any, pointer: str) -> int:
        if not isinstance(data, int) or isinstance(data, bool):
            raise DecodeError(f"expected an integer, got {data!r}", pointer)
        return data

    @staticmethod
    def _str(data: Any, pointer: str) -> str:
        if not isinstance(data, str):
            raise DecodeError(f"expected a string, got {data!r}", pointer)
        return data

    @staticmethod
    def _enum(mapping: dict[str, Any], name: Any, pointer: str) -> Any:
        try:
            return mapping[name]
        except (KeyError, TypeError):
            raise DecodeError(
                f"unknown value {name!r}; expected one of {', '.join(mapping)}", pointer
            ) from None

    def _kind(self, data: dict[str, Any], pointer: str) -> str:
        return self._str(self._field(data, "kind", pointer), f"{pointer}.kind")

    def def_id(self, data: Any, pointer: str) -> DefId:
        text = self._str(data, pointer)
        match = _DEF_ID_RE.match(text)
        if match:
            return DefId(int(match.group(1)), int(match.group(2)))
        if text in self.paths:
            return self.paths[text]
        raise DecodeError(f"unknown item '{text}'", pointer)

    def _tuple(self, data: Any, pointer: str, decode: Any) -> tuple[Any, ...]:
        items = self._list(data, pointer)
        return tuple(decode(item, f"{pointer}[{i}]") for i, item in enumerate(items))

    # -- document -----------------------------------------------------------

    def document(self, data: Any) -> TypeDocument:
        data = self._object(data, "$")
        items = self._list(data.get("items", []), "items")

        # Items are registered before anything is decoded so that generics
        # and parents may refer to items declared later in the list.
        pending = []
        for i, item in enumerate(items):
            pointer = f"items[{i}]"
            item = self._object(item, pointer)
            pending.append((self._register_item(item, pointer), item, pointer))
        for def_id, item, pointer in pending:
            self._complete_item(def_id, item, pointer)

        document = TypeDocument(self.table)
        for i, value in enumerate(self._list(data.get("values", []), "values")):
            document.values.append(self.labeled_value(value, f"values[{i}]"))
        return document

    def _register_item(self, item: dict[str, Any], pointer: str) -> DefId:
        path = self._str(self._field(item, "path", pointer), f"{pointer}.path")
        kind = self._enum({k.value: k for k in ItemKind}, item.get("kind", "struct"), f"{pointer}.kind")
        def_id = None
        if "id" in item:
            def_id = self.def_id(item["id"], f"{pointer}.id")
        krate = self._int(item.get("crate", LOCAL_CRATE), f"{pointer}.crate")

        fn_trait = None
        if item.get("fn_trait") is not None:
            fn_trait = self._enum(
                {k.value: k for k in ClosureKind}, item["fn_trait"], f"{pointer}.fn_trait"
            )

        span = None
        if item.get("span") is not None:
            span = self.span(item["span"], f"{pointer}.span")

        captures = tuple(
            self._str(name, f"{pointer}.captures[{i}]")
            for i, name in enumerate(self._list(item.get("captures", []), f"{pointer}.captures"))
        )

        try:
            def_id = self.table.add_item(
                path,
                kind,
                krate=krate if def_id is None else def_id.krate,
                def_id=def_id,
                fn_trait=fn_trait,
                has_type=bool(item.get("has_type", True)),
                span=span,
                captures=captures,
            )
        except ValueError as e:
            raise DecodeError(str(e), pointer) from e
        self.paths.setdefault(path, def_id)
        return def_id

    def _complete_item(self, def_id: DefId, item: dict[str, Any], pointer: str) -> None:
        info = self.table.item(def_id)
        if item.get("parent") is not None:
            info.parent = self.def_id(item["parent"], f"{pointer}.parent")
        if item.get("generics") is not None:
            info.generics = self.generics(item["generics"], f"{pointer}.generics")

    def span(self, data: Any, pointer: str) -> SourceLocation:
        data = self._object(data, pointer)
        return SourceLocation(
            line=self._int(self._field(data, "line", pointer), f"{pointer}.line"),
            column=self._int(self._field(data, "column", pointer), f"{pointer}.column"),
            filename=data.get("file"),
        )

    def generics(self, data: Any, pointer: str) -> Generics:
        """
        Decode generics; ``types`` and ``regions`` are the item's own
        parameters, ``fn_types`` and ``fn_regions`` a method's.

        A type parameter is a name or ``{"name": ..., "default": TYPE}``.
        """
        data = self._object(data, pointer)
        types: dict[ParamSpace, tuple[TypeParameterDef, ...]] = {}
        regions: dict[ParamSpace, tuple[RegionParameterDef, ...]] = {}
        for space, type_key, region_key in (
            (ParamSpace.TYPE, "types", "regions"),
            (ParamSpace.FN, "fn_types", "fn_regions"),
        ):
            type_params = self._list(data.get(type_key, []), f"{pointer}.{type_key}")
            types[space] = tuple(
                self.type_param(param, space, index, f"{pointer}.{type_key}[{index}]")
                for index, param in enumerate(type_params)
            )
            region_params = self._list(data.get(region_key, []), f"{pointer}.{region_key}")
            regions[space] = tuple(
                RegionParameterDef(
                    name=self._str(name, f"{pointer}.{region_key}[{index}]"),
                    def_id=self.table.reserve_def_id(),
                    space=space,
                    index=index,
                )
                for index, name in enumerate(region_params)
            )
        return Generics(
            types=ParamSpaceVec(type_space=types[ParamSpace.TYPE], fn_space=types[ParamSpace.FN]),
            regions=ParamSpaceVec(
                type_space=regions[ParamSpace.TYPE], fn_space=regions[ParamSpace.FN]
            ),
        )

    def type_param(self, data: Any, space: ParamSpace, index: int, pointer: str) -> TypeParameterDef:
        if isinstance(data, str):
            return TypeParameterDef(data, self.table.reserve_def_id(), space, index)
        data = self._object(data, pointer)
        default = None
        if data.get("default") is not None:
            default = self.type(data["default"], f"{pointer}.default")
        return TypeParameterDef(
            name=self._str(self._field(data, "name", pointer), f"{pointer}.name"),
            def_id=self.table.reserve_def_id(),
            space=space,
            index=index,
            default=default,
        )

    def labeled_value(self, data: Any, pointer: str) -> LabeledValue:
        data = self._object(data, pointer)
        label = self._str(self._field(data, "label", pointer), f"{pointer}.label")
        present = [key for key in VALUE_CATEGORIES if key in data]
        if len(present) != 1:
            raise DecodeError(
                f"expected exactly one of {', '.join(VALUE_CATEGORIES)}", pointer
            )
        category = present[0]
        decode = getattr(self, category)
        value = decode(data[category], f"{pointer}.{category}")
        if category == "type" and data.get("local"):
            self.table.intern_local(value)
        return LabeledValue(label, category, value)

    # -- types --------------------------------------------------------------

    def type(self, data: Any, pointer: str) -> Type:
        if isinstance(data, str):
            return self._named_type(data, pointer)
        data = self._object(data, pointer)
        kind = self._kind(data, pointer)
        handler = getattr(self, f"_type_{kind}", None)
        if handler is None:
            raise DecodeError(f"unknown type kind '{kind}'", f"{pointer}.kind")
        return handler(data, pointer)

    def _named_type(self, name: str, pointer: str) -> Type:
        if name in SCALAR_TYPES:
            return SCALAR_TYPES[name]
        if name == "str":
            return STR_TYPE
        if name == "()":
            return UNIT_TYPE
        if name == "error":
            return ERROR_TYPE
        raise DecodeError(f"unknown type name '{name}'", pointer)

    def _type_scalar(self, data: dict[str, Any], pointer: str) -> Type:
        name = self._str(self._field(data, "name", pointer), f"{pointer}.name")
        if name not in SCALAR_TYPES:
            raise DecodeError(f"unknown scalar type '{name}'", f"{pointer}.name")
        return SCALAR_TYPES[name]

    def _type_box(self, data: dict[str, Any], pointer: str) -> Type:
        return BoxType(self.type(self._field(data, "inner", pointer), f"{pointer}.inner"))

    def _pointee(self, data: dict[str, Any], pointer: str) -> TypeAndMut:
        ty = self.type(self._field(data, "pointee", pointer), f"{pointer}.pointee")
        mutbl = Mutability.MUTABLE if data.get("mut") else Mutability.IMMUTABLE
        return TypeAndMut(ty, mutbl)

    def _type_ptr(self, data: dict[str, Any], pointer: str) -> Type:
        return RawPtrType(self._pointee(data, pointer))

    def _type_ref(self, data: dict[str, Any], pointer: str) -> Type:
        region: Region = ScopeRegion(0)
        if data.get("region") is not None:
            region = self.region(data["region"], f"{pointer}.region")
        return RefType(region, self._pointee(data, pointer))

    def _type_tuple(self, data: dict[str, Any], pointer: str) -> Type:
        return TupleType(self._tuple(data.get("elements", []), f"{pointer}.elements", self.type))

    def _type_array(self, data: dict[str, Any], pointer: str) -> Type:
        element = self.type(self._field(data, "element", pointer), f"{pointer}.element")
        size = self._int(self._field(data, "size", pointer), f"{pointer}.size")
        return ArrayType(element, size)

    def _type_slice(self, data: dict[str, Any], pointer: str) -> Type:
        return SliceType(self.type(self._field(data, "element", pointer), f"{pointer}.element"))

    def _type_adt(self, data: dict[str, Any], pointer: str) -> Type:
        did = self.def_id(self._field(data, "def", pointer), f"{pointer}.def")
        adt_kind = AdtKind.STRUCT
        if did in self.table and self.table.item(did).kind is ItemKind.ENUM:
            adt_kind = AdtKind.ENUM
        return AdtType(AdtDef(did, adt_kind), self.substs(data.get("substs", {}), f"{pointer}.substs"))

    def _bare_fn(self, data: dict[str, Any], pointer: str) -> BareFnTy:
        sig = self.sig(self._field(data, "sig", pointer), f"{pointer}.sig")
        unsafety = Unsafety.UNSAFE if data.get("unsafe") else Unsafety.NORMAL
        abi = self._enum({a.value: a for a in Abi}, data.get("abi", "Rust"), f"{pointer}.abi")
        return BareFnTy(Binder(sig), unsafety, abi)

    def _type_fn_def(self, data: dict[str, Any], pointer: str) -> Type:
        did = self.def_id(self._field(data, "def", pointer), f"{pointer}.def")
        substs = self.substs(data.get("substs", {}), f"{pointer}.substs")
        return FnDefType(did, substs, self._bare_fn(data, pointer))

    def _type_fn_ptr(self, data: dict[str, Any], pointer: str) -> Type:
        return FnPtrType(self._bare_fn(data, pointer))

    def _type_infer(self, data: dict[str, Any], pointer: str) -> Type:
        kind = self._enum(_INFER_KINDS, data.get("var", "ty"), f"{pointer}.var")
        return InferType(kind, self._int(self._field(data, "index", pointer), f"{pointer}.index"))

    def _type_param(self, data: dict[str, Any], pointer: str) -> Type:
        name = self._str(self._field(data, "name", pointer), f"{pointer}.name")
        default_space = "self" if name == "Self" else "type"
        space = self._enum(_SPACES, data.get("space", default_space), f"{pointer}.space")
        return ParamType(space, self._int(data.get("index", 0), f"{pointer}.index"), name)

    def _type_dyn(self, data: dict[str, Any], pointer: str) -> Type:
        principal = self.trait_ref(self._field(data, "principal", pointer), f"{pointer}.principal")
        projections = []
        for i, proj in enumerate(self._list(data.get("projections", []), f"{pointer}.projections")):
            proj_pointer = f"{pointer}.projections[{i}]"
            proj = self._object(proj, proj_pointer)
            name = self._str(self._field(proj, "name", proj_pointer), f"{proj_pointer}.name")
            ty = self.type(self._field(proj, "ty", proj_pointer), f"{proj_pointer}.ty")
            projections.append(Binder(ProjectionPredicate(Projection(principal, name), ty)))
        bound_names = self._list(data.get("builtin_bounds", []), f"{pointer}.builtin_bounds")
        builtin_bounds = tuple(
            self._enum({b.value: b for b in BuiltinBound}, bound, f"{pointer}.builtin_bounds[{i}]")
            for i, bound in enumerate(bound_names)
        )
        region: Region = ScopeRegion(0)
        if data.get("region") is not None:
            region = self.region(data["region"], f"{pointer}.region")
        bounds = ExistentialBounds(region, builtin_bounds, tuple(projections))
        return TraitObjectType(Binder(principal), bounds)

    def _type_projection(self, data: dict[str, Any], pointer: str) -> Type:
        trait_ref = self.trait_ref(self._field(data, "trait_ref", pointer), f"{pointer}.trait_ref")
        name = self._str(self._field(data, "name", pointer), f"{pointer}.name")
        return ProjectionType(Projection(trait_ref, name))

    def _type_closure(self, data: dict[str, Any], pointer: str) -> Type:
        did = self.def_id(self._field(data, "def", pointer), f"{pointer}.def")
        substs = self.substs(data.get("substs", {}), f"{pointer}.substs")
        upvars = self._tuple(data.get("upvars", []), f"{pointer}.upvars", self.type)
        return ClosureType(did, ClosureSubsts(substs, upvars))

    # -- signatures and substitutions ------------------------------------

    def sig(self, data: Any, pointer: str) -> FnSig:
        """Decode ``{"inputs": [...], "output": TYPE | "!", "variadic": bool}``; no output means ``()``."""
        data = self._object(data, pointer)
        inputs = self._tuple(data.get("inputs", []), f"{pointer}.inputs", self.type)
        output: FnOutput = FnConverging(UNIT_TYPE)
        if data.get("output") == "!":
            output = FnDiverging()
        elif data.get("output") is not None:
            output = FnConverging(self.type(data["output"], f"{pointer}.output"))
        return FnSig(inputs, output, bool(data.get("variadic", False)))

    def substs(self, data: Any, pointer: str) -> Substs:
        data = self._object(data, pointer)
        self_ty = None
        if data.get("self") is not None:
            self_ty = self.type(data["self"], f"{pointer}.self")
        return Substs.build(
            types=self._tuple(data.get("types", []), f"{pointer}.types", self.type),
            self_ty=self_ty,
            fn_types=self._tuple(data.get("fn_types", []), f"{pointer}.fn_types", self.type),
            regions=self._tuple(data.get("regions", []), f"{pointer}.regions", self.region),
            fn_regions=self._tuple(data.get("fn_regions", []), f"{pointer}.fn_regions", self.region),
        )

    def trait_ref(self, data: Any, pointer: str) -> TraitRef:
        data = self._object(data, pointer)
        did = self.def_id(self._field(data, "def", pointer), f"{pointer}.def")
        substs = self.substs(data.get("substs", {}), f"{pointer}.substs")
        if data.get("self") is not None:
            substs = substs.with_self_ty(self.type(data["self"], f"{pointer}.self"))
        return TraitRef(did, substs)

    # -- regions ------------------------------------------------------------

    def region(self, data: Any, pointer: str) -> Region:
        if data in ("static", "'static"):
            return STATIC_REGION
        if data == "empty":
            return EMPTY_REGION
        data = self._object(data, pointer)
        kind = self._kind(data, pointer)
        if kind == "early":
            return EarlyBoundRegion(
                self._enum(_SPACES, data.get("space", "type"), f"{pointer}.space"),
                self._int(data.get("index", 0), f"{pointer}.index"),
                self._str(self._field(data, "name", pointer), f"{pointer}.name"),
            )
        if kind == "late":
            return LateBoundRegion(
                self._int(data.get("depth", 1), f"{pointer}.depth"),
                self.bound_region(self._field(data, "bound", pointer), f"{pointer}.bound"),
            )
        if kind == "free":
            return FreeRegion(
                self._int(data.get("scope", 0), f"{pointer}.scope"),
                self.bound_region(self._field(data, "bound", pointer), f"{pointer}.bound"),
            )
        if kind == "scope":
            return ScopeRegion(self._int(data.get("extent", 0), f"{pointer}.extent"))
        if kind == "var":
            return VarRegion(self._int(self._field(data, "index", pointer), f"{pointer}.index"))
        if kind == "skolemized":
            return SkolemizedRegion(
                self._int(self._field(data, "index", pointer), f"{pointer}.index"),
                self.bound_region(self._field(data, "bound", pointer), f"{pointer}.bound"),
            )
        raise DecodeError(f"unknown region kind '{kind}'", f"{pointer}.kind")

    def bound_region(self, data: Any, pointer: str) -> BoundRegion:
        if data == "env":
            return ENV_BOUND
        data = self._object(data, pointer)
        kind = self._kind(data, pointer)
        if kind == "anon":
            return AnonBound(self._int(data.get("index", 0), f"{pointer}.index"))
        if kind == "fresh":
            return FreshBound(self._int(data.get("index", 0), f"{pointer}.index"))
        if kind == "named":
            did = CRATE_ROOT
            if data.get("def") is not None:
                did = self.def_id(data["def"], f"{pointer}.def")
            return NamedBound(did, self._str(self._field(data, "name", pointer), f"{pointer}.name"))
        raise DecodeError(f"unknown bound region kind '{kind}'", f"{pointer}.kind")

    # -- predicates ---------------------------------------------------------

    def predicate(self, data: Any, pointer: str) -> Predicate:
        data = self._object(data, pointer)
        kind = self._kind(data, pointer)

        def ty(key: str) -> Type:
            return self.type(self._field(data, key, pointer), f"{pointer}.{key}")

        def region(key: str) -> Region:
            return self.region(self._field(data, key, pointer), f"{pointer}.{key}")

        if kind == "trait":
            trait_ref = self.trait_ref(self._field(data, "trait_ref", pointer), f"{pointer}.trait_ref")
            return TraitClause(Binder(TraitPredicate(trait_ref)))
        if kind == "equate":
            return EquateClause(Binder(EquatePredicate(ty("a"), ty("b"))))
        if kind == "region_outlives":
            return RegionOutlivesClause(Binder(OutlivesPredicate(region("a"), region("b"))))
        if kind == "type_outlives":
            return TypeOutlivesClause(Binder(OutlivesPredicate(ty("a"), region("b"))))
        if kind == "projection":
            trait_ref = self.trait_ref(self._field(data, "trait_ref", pointer), f"{pointer}.trait_ref")
            name = self._str(self._field(data, "name", pointer), f"{pointer}.name")
            return ProjectionClause(Binder(ProjectionPredicate(Projection(trait_ref, name), ty("ty"))))
        if kind == "well_formed":
            return WellFormedClause(ty("ty"))
        if kind == "object_safe":
            return ObjectSafeClause(self.def_id(self._field(data, "def", pointer), f"{pointer}.def"))
        if kind == "closure_kind":
            return ClosureKindClause(
                self.def_id(self._field(data, "def", pointer), f"{pointer}.def"),
                self._enum(
                    {k.value: k for k in ClosureKind},
                    self._field(data, "closure_kind", pointer),
                    f"{pointer}.closure_kind",
                ),
            )
        if kind == "compat":
            return CompatClause(
                self.predicate(self._field(data, "predicate", pointer), f"{pointer}.predicate")
            )
        raise DecodeError(f"unknown predicate kind '{kind}'", f"{pointer}.kind")
