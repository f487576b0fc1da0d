"""
Unit tests for explicit renderings of supporting records.

Tests for:
- Substitutions and parameter-space vectors
- Generic parameter declarations, trait and ADT definitions
- Signatures, function types and bounds
- Method receivers and object lifetime defaults
- The render entry point and its modes
"""

import pytest

import tyrender
from tyrender.printer import Mode, RenderSession, infer_debug, param_debug
from tyrender.ty.generics import (
    EMPTY_GENERICS,
    ExplicitSelfCategory,
    GenericPredicates,
    InstantiatedPredicates,
    ItemVariances,
    LifetimeDefaultKind,
    ObjectLifetimeDefault,
    RegionParameterDef,
    SelfKind,
    TraitDef,
    TypeParameterDef,
    Variance,
)
from tyrender.ty.ids import DefId
from tyrender.ty.predicates import Binder, Projection, ProjectionPredicate, TraitRef, WellFormedClause
from tyrender.ty.regions import STATIC_REGION, ScopeRegion
from tyrender.ty.subst import EMPTY_SUBSTS, ItemSubsts, ParamSpace, ParamSpaceVec, Substs
from tyrender.ty.types import (
    I32_TYPE,
    SELF_PARAM,
    U8_TYPE,
    UNIT_TYPE,
    AdtDef,
    BareFnTy,
    BuiltinBound,
    ExistentialBounds,
    FnConverging,
    FnDiverging,
    FnSig,
    InferKind,
    InferType,
    Mutability,
    ParamType,
    TypeAndMut,
)


# =============================================================================
# Substitutions
# =============================================================================


class TestSubstsDebug:
    """Tests for substitution records."""

    def test_substs(self, printer):
        """Test that every space of both lists is shown."""
        substs = Substs.build(types=(I32_TYPE,), self_ty=U8_TYPE, regions=(STATIC_REGION,))
        expected = "Substs[types=[[i32]; [u8]; []], regions=[[ReStatic]; []; []]]"
        assert printer.debug(substs) == expected

    def test_display_falls_back_to_debug(self, printer):
        """Test that a substitution record has no separate concise form."""
        substs = Substs.build(fn_types=(I32_TYPE,))
        assert printer.display(substs) == printer.debug(substs)

    def test_item_substs(self, printer):
        """Test the wrapper recorded for path expressions."""
        expected = "ItemSubsts(Substs[types=[[]; []; []], regions=[[]; []; []]])"
        assert printer.debug(ItemSubsts()) == expected
        assert ItemSubsts().is_noop()
        assert not ItemSubsts(Substs.build(types=(I32_TYPE,))).is_noop()

    def test_param_space_vec(self, printer):
        """Test a vector with every space populated."""
        vec = ParamSpaceVec(type_space=(I32_TYPE,), self_space=(U8_TYPE,), fn_space=(UNIT_TYPE,))
        assert printer.debug(vec) == "[[i32]; [u8]; [()]]"


# =============================================================================
# Declarations
# =============================================================================


class TestDeclarationsDebug:
    """Tests for parameter declarations and definitions."""

    def test_type_parameter(self, printer):
        """Test TypeParameterDef(name, id, space/index)."""
        param = TypeParameterDef("T", DefId(0, 4), ParamSpace.TYPE, 0)
        assert printer.debug(param) == "TypeParameterDef(T, DefId(0:4), TypeSpace/0)"

    def test_region_parameter(self, printer):
        """Test RegionParameterDef with bounds."""
        param = RegionParameterDef("'a", DefId(0, 5), ParamSpace.FN, 1, (STATIC_REGION,))
        assert printer.debug(param) == "RegionParameterDef('a, DefId(0:5), FnSpace/1, [ReStatic])"

    def test_generics(self, printer):
        """Test a generics record."""
        expected = "Generics(types=[[]; []; []], regions=[[]; []; []])"
        assert printer.debug(EMPTY_GENERICS) == expected

    def test_trait_def(self, printer, std_items):
        """Test a trait definition with its Self reference."""
        trait_def = TraitDef(EMPTY_GENERICS, TraitRef(std_items.clone, Substs.build(self_ty=SELF_PARAM)))
        expected = (
            "TraitDef(generics=Generics(types=[[]; []; []], regions=[[]; []; []]), "
            "trait_ref=<Self as std::clone::Clone>)"
        )
        assert printer.debug(trait_def) == expected

    def test_adt_def(self, printer, std_items):
        """Test that an ADT definition prints its path."""
        assert printer.debug(AdtDef(std_items.vec)) == "std::vec::Vec"

    def test_variances(self, printer):
        """Test variance symbols."""
        variances = ItemVariances(
            ParamSpaceVec(type_space=(Variance.COVARIANT, Variance.INVARIANT)),
            ParamSpaceVec(fn_space=(Variance.CONTRAVARIANT, Variance.BIVARIANT)),
        )
        expected = "ItemVariances(types=[[+, o]; []; []], regions=[[]; []; [-, *]])"
        assert printer.debug(variances) == expected

    def test_predicates(self, printer):
        """Test that predicate lists are named by their kind."""
        predicates = ParamSpaceVec(type_space=(WellFormedClause(I32_TYPE),))
        assert printer.debug(GenericPredicates(predicates)) == "GenericPredicates([[WF(i32)]; []; []])"
        assert (
            printer.debug(InstantiatedPredicates(predicates))
            == "InstantiatedPredicates([[WF(i32)]; []; []])"
        )

    def test_def_id(self, printer):
        """Test DefId(krate:index) in both modes."""
        assert printer.debug(DefId(1, 2)) == "DefId(1:2)"
        assert printer.display(DefId(1, 2)) == "DefId(1:2)"


# =============================================================================
# Functions and Bounds
# =============================================================================


class TestFunctionDebug:
    """Tests for signatures and function types."""

    def test_fn_sig(self, printer):
        """Test the field-by-field signature form."""
        sig = FnSig((I32_TYPE,), FnConverging(I32_TYPE))
        assert printer.debug(sig) == "([i32]; variadic: false)->FnConverging(i32)"

    def test_diverging_variadic(self, printer):
        """Test a diverging variadic signature."""
        sig = FnSig((), FnDiverging(), variadic=True)
        assert printer.debug(sig) == "([]; variadic: true)->FnDiverging"

    def test_bare_fn(self, printer):
        """Test a function type with its safety and ABI."""
        bare_fn = BareFnTy(Binder(FnSig((I32_TYPE,), FnConverging(UNIT_TYPE))))
        expected = (
            "BareFnTy(unsafety: normal, abi: Rust, "
            "sig: Binder(([i32]; variadic: false)->FnConverging(())))"
        )
        assert printer.debug(bare_fn) == expected

    def test_type_and_mut(self, printer):
        """Test mutability prefixes."""
        assert printer.display(TypeAndMut(I32_TYPE, Mutability.MUTABLE)) == "mut i32"
        assert printer.debug(TypeAndMut(I32_TYPE)) == "i32"

    def test_existential_bounds(self, printer, std_items):
        """Test region, builtin and projection bounds joined with +."""
        principal = TraitRef(std_items.iterator, EMPTY_SUBSTS)
        projection = Binder(ProjectionPredicate(Projection(principal, "Item"), U8_TYPE))
        bounds = ExistentialBounds(STATIC_REGION, (BuiltinBound.SYNC, BuiltinBound.SEND), (projection,))
        expected = (
            "ReStatic + Send + Sync + "
            "Binder(ProjectionPredicate(std::iter::Iterator::Item, u8))"
        )
        assert printer.debug(bounds) == expected

    def test_existential_bounds_scope_region(self, printer):
        """Test that the region bound is always present in explicit form."""
        bounds = ExistentialBounds(ScopeRegion(2))
        assert printer.debug(bounds) == "ReScope(Scope(2))"


class TestReceiversAndDefaults:
    """Tests for method receivers and object lifetime defaults."""

    @pytest.mark.parametrize(
        "category,expected",
        [
            (ExplicitSelfCategory(SelfKind.STATIC), "static"),
            (ExplicitSelfCategory(SelfKind.BY_VALUE), "self"),
            (ExplicitSelfCategory(SelfKind.BY_REFERENCE, region=STATIC_REGION), "&self"),
            (
                ExplicitSelfCategory(SelfKind.BY_REFERENCE, Mutability.MUTABLE, STATIC_REGION),
                "&mut self",
            ),
            (ExplicitSelfCategory(SelfKind.BY_BOX), "Box<self>"),
        ],
    )
    def test_receiver_display(self, printer, category, expected):
        """Test the concise receiver forms."""
        assert printer.display(category) == expected

    def test_receiver_debug(self, printer):
        """Test the explicit receiver forms."""
        assert printer.debug(ExplicitSelfCategory(SelfKind.STATIC)) == "Static"
        assert printer.debug(ExplicitSelfCategory(SelfKind.BY_BOX)) == "ByBox"
        category = ExplicitSelfCategory(SelfKind.BY_REFERENCE, Mutability.MUTABLE, STATIC_REGION)
        assert printer.debug(category) == "ByReference(ReStatic, MutMutable)"

    def test_object_lifetime_default(self, printer):
        """Test ambiguous, base and specific defaults."""
        assert printer.debug(ObjectLifetimeDefault(LifetimeDefaultKind.AMBIGUOUS)) == "Ambiguous"
        assert printer.debug(ObjectLifetimeDefault(LifetimeDefaultKind.BASE_DEFAULT)) == "BaseDefault"
        specific = ObjectLifetimeDefault(LifetimeDefaultKind.SPECIFIC, STATIC_REGION)
        assert printer.debug(specific) == "ReStatic"


# =============================================================================
# Placeholders and Entry Point
# =============================================================================


class TestPlaceholderDebug:
    """Tests for inference variables and parameters."""

    def test_infer_debug(self):
        """Test variable identities."""
        assert infer_debug(InferType(InferKind.INT_VAR, 2)) == "_#2i"
        assert infer_debug(InferType(InferKind.FRESH_INT_TY, 2)) == "FreshIntTy(2)"

    def test_param_debug(self):
        """Test the parameter slot form."""
        assert param_debug(ParamType(ParamSpace.TYPE, 0, "T")) == "T/TypeSpace.0"
        assert param_debug(ParamType(ParamSpace.SELF, 0, "Self")) == "Self/SelfSpace.0"

    def test_scalars_and_enums(self, printer):
        """Test primitive leaves."""
        assert printer.debug(True) == "true"
        assert printer.debug(3) == "3"
        assert printer.debug(BuiltinBound.COPY) == "Copy"
        assert printer.debug([I32_TYPE, U8_TYPE]) == "[i32, u8]"

    def test_unknown_value(self, printer):
        """Test that a foreign object cannot be rendered."""
        with pytest.raises(TypeError, match="cannot render"):
            printer.debug(object())


class TestRenderEntryPoint:
    """Tests for tyrender.render."""

    def test_concise(self, std_items):
        """Test the default mode."""
        session = RenderSession(std_items.table)
        value = Binder(FnSig((I32_TYPE,), FnConverging(UNIT_TYPE)))
        assert tyrender.render(value, session=session) == "fn(i32)"

    def test_explicit(self, std_items):
        """Test the explicit mode."""
        session = RenderSession(std_items.table)
        value = Binder(FnSig((I32_TYPE,), FnConverging(UNIT_TYPE)))
        expected = "Binder(([i32]; variadic: false)->FnConverging(()))"
        assert tyrender.render(value, Mode.EXPLICIT, session=session) == expected

    def test_session_verbosity(self, std_items):
        """Test that verbosity comes from the session."""
        session = RenderSession(std_items.table)
        var = InferType(InferKind.TY_VAR, 0)
        assert tyrender.render(var, session=session) == "_"
        assert tyrender.render(var, session=session.with_verbose(True)) == "_#0t"
