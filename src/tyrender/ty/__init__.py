"""
Type-system values consumed by the printer.

This package contains the data model:
- ids: Global item identifiers
- types: Every type shape, plus the TypeVisitor used for shape dispatch
- regions: Regions and bound-region identities
- subst: Parameter spaces and substitution records
- generics: Generic parameter declarations and item metadata
- predicates: Binders, trait references, projections and predicates
- fold: Structural folding (substitution, region shifting and replacement)
- context: The TypeContext lookup interface and the in-memory ItemTable
- serialization: Decoding JSON type documents
"""

from tyrender.ty.context import ItemKind, ItemTable, TypeContext
from tyrender.ty.fold import TypeFolder, has_self_ty, replace_late_bound_regions, subst
from tyrender.ty.generics import Generics, RegionParameterDef, TypeParameterDef
from tyrender.ty.ids import CRATE_ROOT, LOCAL_CRATE, DefId
from tyrender.ty.predicates import (
    Binder,
    ClosureKind,
    Projection,
    ProjectionPredicate,
    TraitRef,
)
from tyrender.ty.regions import Region
from tyrender.ty.serialization import LabeledValue, TypeDocument, load_document, load_document_file
from tyrender.ty.subst import EMPTY_SUBSTS, ParamSpace, ParamSpaceVec, Substs
from tyrender.ty.types import Type, TypeVisitor

__all__ = [
    "DefId",
    "LOCAL_CRATE",
    "CRATE_ROOT",
    "Type",
    "TypeVisitor",
    "Region",
    "ParamSpace",
    "ParamSpaceVec",
    "Substs",
    "EMPTY_SUBSTS",
    "Generics",
    "TypeParameterDef",
    "RegionParameterDef",
    "Binder",
    "ClosureKind",
    "TraitRef",
    "Projection",
    "ProjectionPredicate",
    "TypeFolder",
    "subst",
    "has_self_ty",
    "replace_late_bound_regions",
    "TypeContext",
    "ItemTable",
    "ItemKind",
    "TypeDocument",
    "LabeledValue",
    "load_document",
    "load_document_file",
]
