"""
Unit tests for bound region naming.

Tests for:
- for<...> prefixes with anonymous and named regions
- Regions shared between several positions
- Regions bound by an outer binder
- Values that cannot be lifted
"""

from tyrender.printer import ANON_REGION_NAME, in_binder
from tyrender.ty.ids import CRATE_ROOT
from tyrender.ty.predicates import Binder
from tyrender.ty.regions import AnonBound, LateBoundRegion, NamedBound, ScopeRegion
from tyrender.ty.types import (
    U8_TYPE,
    UNIT_TYPE,
    BareFnTy,
    FnConverging,
    FnPtrType,
    FnSig,
    RefType,
    TypeAndMut,
)


def _ref(region):
    return RefType(region, TypeAndMut(U8_TYPE))


def _sig(*inputs):
    return FnSig(tuple(inputs), FnConverging(UNIT_TYPE))


def _anon(index, depth=1):
    return LateBoundRegion(depth, AnonBound(index))


def _named(name, depth=1):
    return LateBoundRegion(depth, NamedBound(CRATE_ROOT, name))


class TestRegionNaming:
    """Tests for naming regions introduced by a binder."""

    def test_anon_region_name(self):
        """Test the name given to anonymous regions."""
        assert ANON_REGION_NAME == "'r"

    def test_single_anon_region(self, printer):
        """Test for<'r> fn(&'r u8)."""
        binder = Binder(_sig(_ref(_anon(0))))
        assert printer.display(binder) == "for<'r> fn(&'r u8)"

    def test_distinct_anon_regions(self, printer):
        """Test that every anonymous region is listed, all named 'r."""
        binder = Binder(_sig(_ref(_anon(0)), _ref(_anon(1))))
        assert printer.display(binder) == "for<'r, 'r> fn(&'r u8, &'r u8)"

    def test_shared_region_listed_once(self, printer):
        """Test that a region used twice is named once."""
        binder = Binder(_sig(_ref(_anon(0)), _ref(_anon(0))))
        assert printer.display(binder) == "for<'r> fn(&'r u8, &'r u8)"

    def test_named_region_keeps_name(self, printer):
        """Test that named regions keep their name, in encounter order."""
        binder = Binder(_sig(_ref(_named("'a")), _ref(_anon(0))))
        assert printer.display(binder) == "for<'a, 'r> fn(&'a u8, &'r u8)"

    def test_no_bound_regions(self, printer):
        """Test that no prefix is printed when nothing is bound."""
        binder = Binder(_sig(_ref(ScopeRegion(0))))
        assert printer.display(binder) == "fn(&u8)"


class TestBinderDepth:
    """Tests for regions that belong to other binders."""

    def test_outer_region_not_named(self, printer):
        """Test that a region bound further out is left alone."""
        binder = Binder(_sig(_ref(_anon(0, depth=2))))
        assert printer.display(binder) == "fn(&u8)"

    def test_region_seen_through_nested_binder(self, printer):
        """Test that depth is counted through nested signature binders."""
        inner = FnPtrType(
            BareFnTy(Binder(_sig(_ref(_anon(0, depth=2)), _ref(_anon(0, depth=1)))))
        )
        binder = Binder(_sig(inner))
        assert printer.display(binder) == "for<'r> fn(fn(&'r u8, &u8))"


class TestUnliftable:
    """Tests for binders whose contents cannot be lifted."""

    def test_prints_body_unchanged(self, printer):
        """Test that an unliftable binder prints its body without naming."""
        binder = Binder(_sig(_ref(_named("'a")), _ref(_anon(0))))
        assert in_binder(printer, binder, None) == "fn(&'a u8, &u8)"

    def test_local_value_through_printer(self, printer, std_items):
        """Test that the printer falls back when lifting fails."""
        local = std_items.table.intern_local(_ref(_anon(0)))
        assert printer.display(Binder(_sig(local))) == "fn(&u8)"
