"""
tyrender Utilities Package.

Common utilities for error handling and source locations.
"""

from tyrender.utils.errors import (
    DecodeError,
    InternalConsistencyError,
    ItemLookupError,
    SourceLocation,
    SubstitutionError,
    TyRenderError,
)

__all__ = [
    "TyRenderError",
    "ItemLookupError",
    "SubstitutionError",
    "InternalConsistencyError",
    "DecodeError",
    "SourceLocation",
]
