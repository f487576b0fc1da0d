"""
Unit tests for default argument elision.

Tests for:
- Trailing arguments equal to their declared defaults
- Defaults written in terms of other parameters
- Defaults that mention Self
- Lookup, lifting and substitution failures
"""

import pytest

from tyrender.printer import number_of_supplied_defaults
from tyrender.ty.context import ItemKind
from tyrender.ty.generics import Generics, TypeParameterDef
from tyrender.ty.ids import DefId
from tyrender.ty.subst import ParamSpace, ParamSpaceVec, Substs
from tyrender.ty.types import (
    BOOL_TYPE,
    I32_TYPE,
    U8_TYPE,
    InferKind,
    InferType,
    ParamType,
)


def _count(std_items, did, substs, trait=False):
    table = std_items.table
    if trait:
        return number_of_supplied_defaults(
            table, substs, ParamSpace.TYPE, lambda ctx: ctx.trait_generics(did)
        )
    return number_of_supplied_defaults(
        table, substs, ParamSpace.TYPE, lambda ctx: ctx.item_generics(did)
    )


@pytest.fixture
def wrapper(std_items):
    """struct Wrapper<T, U = T>"""
    table = std_items.table
    did = table.reserve_def_id()
    generics = Generics(
        types=ParamSpaceVec(
            type_space=(
                TypeParameterDef("T", table.reserve_def_id(), ParamSpace.TYPE, 0),
                TypeParameterDef(
                    "U",
                    table.reserve_def_id(),
                    ParamSpace.TYPE,
                    1,
                    ParamType(ParamSpace.TYPE, 0, "T"),
                ),
            )
        )
    )
    return table.add_item("Wrapper", ItemKind.STRUCT, def_id=did, generics=generics)


class TestSuppliedDefaults:
    """Tests for counting elidable arguments."""

    def test_default_argument(self, std_items):
        """Test that Vec<u8, Global> has one elidable argument."""
        substs = Substs.build(types=(U8_TYPE, std_items.global_ty))
        assert _count(std_items, std_items.vec, substs) == 1

    def test_non_default_argument(self, std_items):
        """Test that an argument differing from the default is kept."""
        substs = Substs.build(types=(U8_TYPE, BOOL_TYPE))
        assert _count(std_items, std_items.vec, substs) == 0

    def test_scan_stops_at_parameter_without_default(self, std_items):
        """Test that elision never reaches past a parameter with no default."""
        substs = Substs.build(types=(I32_TYPE, BOOL_TYPE, std_items.random_state_ty))
        assert _count(std_items, std_items.hash_map, substs) == 1

    def test_last_parameter_without_default(self, std_items):
        """Test that nothing is elided when the last parameter has no default."""
        substs = Substs.build(types=(I32_TYPE,))
        assert _count(std_items, std_items.option, substs) == 0

    def test_default_referring_to_parameter(self, std_items, wrapper):
        """Test that defaults are substituted before comparison."""
        assert _count(std_items, wrapper, Substs.build(types=(I32_TYPE, I32_TYPE))) == 1
        assert _count(std_items, wrapper, Substs.build(types=(I32_TYPE, U8_TYPE))) == 0


class TestSelfDefaults:
    """Tests for defaults that mention Self."""

    def test_no_receiver_keeps_argument(self, std_items):
        """Test that Add<i32> without a receiver keeps its argument."""
        substs = Substs.build(types=(I32_TYPE,))
        assert _count(std_items, std_items.add, substs, trait=True) == 0

    def test_receiver_matching_default(self, std_items):
        """Test that <i32 as Add<i32>> elides Rhs = Self."""
        substs = Substs.build(types=(I32_TYPE,), self_ty=I32_TYPE)
        assert _count(std_items, std_items.add, substs, trait=True) == 1

    def test_receiver_not_matching_default(self, std_items):
        """Test that <i32 as Add<u8>> keeps its argument."""
        substs = Substs.build(types=(U8_TYPE,), self_ty=I32_TYPE)
        assert _count(std_items, std_items.add, substs, trait=True) == 0


class TestElisionFailures:
    """Tests for failures that disable elision."""

    def test_unknown_item(self, std_items):
        """Test that a failed generics lookup elides nothing."""
        substs = Substs.build(types=(U8_TYPE, std_items.global_ty))
        assert _count(std_items, DefId(9, 99), substs) == 0

    def test_unliftable_arguments(self, std_items):
        """Test that arguments from a local arena are never elided."""
        local = std_items.table.intern_local(InferType(InferKind.TY_VAR, 0))
        substs = Substs.build(types=(local, std_items.global_ty))
        assert _count(std_items, std_items.vec, substs) == 0

    def test_unsubstitutable_default(self, std_items):
        """Test that a default naming a missing parameter elides nothing."""
        table = std_items.table
        did = table.add_item(
            "Broken",
            ItemKind.STRUCT,
            generics=Generics(
                types=ParamSpaceVec(
                    type_space=(
                        TypeParameterDef(
                            "A",
                            table.reserve_def_id(),
                            ParamSpace.TYPE,
                            0,
                            ParamType(ParamSpace.TYPE, 5, "Z"),
                        ),
                    )
                )
            ),
        )
        assert _count(std_items, did, Substs.build(types=(I32_TYPE,))) == 0
