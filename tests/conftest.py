"""
Pytest configuration and shared fixtures for tyrender tests.
"""

from dataclasses import dataclass

import pytest

from tyrender.config import RenderConfig
from tyrender.printer import RenderSession, TypePrinter
from tyrender.ty.context import ItemKind, ItemTable
from tyrender.ty.generics import Generics, TypeParameterDef
from tyrender.ty.ids import DefId
from tyrender.ty.predicates import ClosureKind
from tyrender.ty.subst import EMPTY_SUBSTS, ParamSpace, ParamSpaceVec, Substs
from tyrender.ty.types import SELF_PARAM, AdtDef, AdtKind, AdtType, Type
from tyrender.utils.errors import SourceLocation

STD = 1


@dataclass
class StdItems:
    """A small standard library plus a few local items."""

    table: ItemTable
    global_alloc: DefId
    vec: DefId
    vec_impl: DefId
    vec_with_capacity: DefId
    random_state: DefId
    hash_map: DefId
    option: DefId
    fn_trait: DefId
    fn_mut_trait: DefId
    fn_once_trait: DefId
    iterator: DefId
    clone: DefId
    clone_method: DefId
    add: DefId
    main: DefId
    identity: DefId
    point: DefId
    holder: DefId
    pending: DefId
    closure: DefId
    extern_closure: DefId

    def adt(self, did: DefId, *types: Type, regions=()) -> AdtType:
        """Instantiate a struct or enum with the given arguments."""
        kind = AdtKind.ENUM if self.table.item(did).kind is ItemKind.ENUM else AdtKind.STRUCT
        return AdtType(AdtDef(did, kind), Substs.build(types=types, regions=regions))

    @property
    def global_ty(self) -> AdtType:
        return AdtType(AdtDef(self.global_alloc), EMPTY_SUBSTS)

    @property
    def random_state_ty(self) -> AdtType:
        return AdtType(AdtDef(self.random_state), EMPTY_SUBSTS)


def _type_params(table: ItemTable, *params, space=ParamSpace.TYPE) -> tuple[TypeParameterDef, ...]:
    defs = []
    for index, param in enumerate(params):
        name, default = param if isinstance(param, tuple) else (param, None)
        defs.append(TypeParameterDef(name, table.reserve_def_id(), space, index, default))
    return tuple(defs)


def _generics(table: ItemTable, *params, regions=(), fn_params=()) -> Generics:
    from tyrender.ty.generics import RegionParameterDef

    region_defs = tuple(
        RegionParameterDef(name, table.reserve_def_id(), ParamSpace.TYPE, index)
        for index, name in enumerate(regions)
    )
    return Generics(
        types=ParamSpaceVec(
            type_space=_type_params(table, *params),
            fn_space=_type_params(table, *fn_params, space=ParamSpace.FN),
        ),
        regions=ParamSpaceVec(type_space=region_defs),
    )


def build_std_items() -> StdItems:
    table = ItemTable()

    global_alloc = table.add_item("alloc::Global", ItemKind.STRUCT, krate=STD)
    global_ty = AdtType(AdtDef(global_alloc), EMPTY_SUBSTS)
    vec = table.add_item(
        "std::vec::Vec",
        ItemKind.STRUCT,
        krate=STD,
        generics=_generics(table, "T", ("A", global_ty)),
    )
    vec_impl = table.add_item("std::vec::Vec", ItemKind.IMPL, krate=STD)
    vec_with_capacity = table.add_item(
        "std::vec::Vec::with_capacity", ItemKind.METHOD, krate=STD, parent=vec_impl
    )

    random_state = table.add_item(
        "std::collections::hash_map::RandomState", ItemKind.STRUCT, krate=STD
    )
    random_state_ty = AdtType(AdtDef(random_state), EMPTY_SUBSTS)
    hash_map = table.add_item(
        "std::collections::HashMap",
        ItemKind.STRUCT,
        krate=STD,
        generics=_generics(table, "K", "V", ("S", random_state_ty)),
    )
    option = table.add_item(
        "std::option::Option", ItemKind.ENUM, krate=STD, generics=_generics(table, "T")
    )

    fn_trait = table.add_item(
        "std::ops::Fn", ItemKind.TRAIT, krate=STD,
        generics=_generics(table, "Args"), fn_trait=ClosureKind.FN,
    )
    fn_mut_trait = table.add_item(
        "std::ops::FnMut", ItemKind.TRAIT, krate=STD,
        generics=_generics(table, "Args"), fn_trait=ClosureKind.FN_MUT,
    )
    fn_once_trait = table.add_item(
        "std::ops::FnOnce", ItemKind.TRAIT, krate=STD,
        generics=_generics(table, "Args"), fn_trait=ClosureKind.FN_ONCE,
    )
    iterator = table.add_item("std::iter::Iterator", ItemKind.TRAIT, krate=STD)
    clone = table.add_item("std::clone::Clone", ItemKind.TRAIT, krate=STD)
    clone_method = table.add_item(
        "std::clone::Clone::clone", ItemKind.METHOD, krate=STD, parent=clone
    )
    add = table.add_item(
        "std::ops::Add", ItemKind.TRAIT, krate=STD, generics=_generics(table, ("Rhs", SELF_PARAM))
    )
    extern_closure = table.add_item("std::thread::spawn::{{closure}}", ItemKind.CLOSURE, krate=STD)

    main = table.add_item("main", ItemKind.FN)
    identity = table.add_item("identity", ItemKind.FN, generics=_generics(table, fn_params=("T",)))
    point = table.add_item("Point", ItemKind.STRUCT)
    holder = table.add_item(
        "Holder", ItemKind.STRUCT, generics=_generics(table, "T", regions=("'a",))
    )
    pending = table.add_item("Pending", ItemKind.STRUCT, has_type=False)
    closure = table.add_item(
        "main::{{closure}}",
        ItemKind.CLOSURE,
        parent=main,
        span=SourceLocation(3, 13, filename="src/main.rs"),
        captures=("x", "y"),
    )

    return StdItems(
        table=table,
        global_alloc=global_alloc,
        vec=vec,
        vec_impl=vec_impl,
        vec_with_capacity=vec_with_capacity,
        random_state=random_state,
        hash_map=hash_map,
        option=option,
        fn_trait=fn_trait,
        fn_mut_trait=fn_mut_trait,
        fn_once_trait=fn_once_trait,
        iterator=iterator,
        clone=clone,
        clone_method=clone_method,
        add=add,
        main=main,
        identity=identity,
        point=point,
        holder=holder,
        pending=pending,
        closure=closure,
        extern_closure=extern_closure,
    )


@pytest.fixture
def std_items() -> StdItems:
    """Fresh item table with std-like items."""
    return build_std_items()


@pytest.fixture
def printer_factory(std_items):
    """Factory fixture for creating printers over the std item table."""

    def _create_printer(verbose: bool = False, ctx=None) -> TypePrinter:
        table = ctx if ctx is not None else std_items.table
        return TypePrinter(RenderSession.from_config(table, RenderConfig(verbose=verbose)))

    return _create_printer


@pytest.fixture
def printer(printer_factory) -> TypePrinter:
    """Concise printer."""
    return printer_factory()


@pytest.fixture
def verbose_printer(printer_factory) -> TypePrinter:
    """Verbose printer."""
    return printer_factory(verbose=True)
