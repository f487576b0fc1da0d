"""
Unit tests for region rendering.

Tests for:
- Concise region names
- Explicit region forms
- Bound region identities
"""

import pytest

from tyrender.ty.ids import DefId
from tyrender.ty.regions import (
    EMPTY_REGION,
    ENV_BOUND,
    STATIC_REGION,
    AnonBound,
    EarlyBoundRegion,
    FreeRegion,
    FreshBound,
    LateBoundRegion,
    NamedBound,
    ScopeRegion,
    SkolemizedRegion,
    VarRegion,
)
from tyrender.ty.subst import ParamSpace

NAMED = NamedBound(DefId(0, 4), "'a")


class TestRegionDisplay:
    """Tests for concise region rendering."""

    @pytest.mark.parametrize(
        "region,expected",
        [
            (EarlyBoundRegion(ParamSpace.TYPE, 0, "'a"), "'a"),
            (LateBoundRegion(1, NAMED), "'a"),
            (LateBoundRegion(1, AnonBound(0)), ""),
            (FreeRegion(3, NAMED), "'a"),
            (FreeRegion(3, ENV_BOUND), ""),
            (SkolemizedRegion(2, NAMED), "'a"),
            (ScopeRegion(5), ""),
            (VarRegion(2), ""),
            (STATIC_REGION, "'static"),
            (EMPTY_REGION, "'<empty>"),
        ],
    )
    def test_display(self, printer, region, expected):
        """Test the user-facing name of each region kind."""
        assert printer.display(region) == expected

    def test_verbose_display_is_explicit(self, verbose_printer):
        """Test that verbose display shows the region kind."""
        assert verbose_printer.display(VarRegion(2)) == "'_#2r"
        assert verbose_printer.display(STATIC_REGION) == "ReStatic"


class TestRegionDebug:
    """Tests for explicit region rendering."""

    @pytest.mark.parametrize(
        "region,expected",
        [
            (EarlyBoundRegion(ParamSpace.TYPE, 0, "'a"), "ReEarlyBound(TypeSpace, 0, 'a)"),
            (EarlyBoundRegion(ParamSpace.FN, 1, "'b"), "ReEarlyBound(FnSpace, 1, 'b)"),
            (LateBoundRegion(2, AnonBound(1)), "ReLateBound(DebruijnIndex(2), BrAnon(1))"),
            (FreeRegion(3, NAMED), "ReFree(Scope(3), BrNamed(0:4, 'a))"),
            (ScopeRegion(5), "ReScope(Scope(5))"),
            (VarRegion(2), "'_#2r"),
            (SkolemizedRegion(1, FreshBound(7)), "ReSkolemized(1, BrFresh(7))"),
            (STATIC_REGION, "ReStatic"),
            (EMPTY_REGION, "ReEmpty"),
        ],
    )
    def test_debug(self, printer, region, expected):
        """Test the explicit form of each region kind."""
        assert printer.debug(region) == expected


class TestBoundRegions:
    """Tests for bound region identities."""

    def test_display(self, printer):
        """Test that only named bound regions have a concise form."""
        assert printer.display(NAMED) == "'a"
        assert printer.display(AnonBound(0)) == ""
        assert printer.display(ENV_BOUND) == ""

    def test_debug(self, printer):
        """Test the explicit forms."""
        assert printer.debug(AnonBound(0)) == "BrAnon(0)"
        assert printer.debug(FreshBound(3)) == "BrFresh(3)"
        assert printer.debug(NAMED) == "BrNamed(0:4, 'a)"
        assert printer.debug(ENV_BOUND) == "BrEnv"

    def test_verbose_display(self, verbose_printer):
        """Test that verbose display of a bound region is explicit."""
        assert verbose_printer.display(NAMED) == "BrNamed(0:4, 'a)"
