"""
tyrender - A deterministic text renderer for type-system values.

tyrender turns resolved types, regions, trait references and predicates into
the text a compiler shows in its diagnostics: generic arguments equal to
their defaults are elided, bound regions are named consistently, and the
Fn-family traits print with call syntax.
"""

from typing import Any

from tyrender.config import RenderConfig
from tyrender.printer import Mode, RenderSession, TypePrinter
from tyrender.ty import ItemTable, TypeContext, load_document

__version__ = "0.1.0"
__all__ = [
    "render",
    "Mode",
    "RenderConfig",
    "RenderSession",
    "TypePrinter",
    "TypeContext",
    "ItemTable",
    "load_document",
]


def render(value: Any, mode: Mode = Mode.CONCISE, *, session: RenderSession) -> str:
    """
    Render a type-system value.

    Args:
        value: A type, region, trait reference, predicate or supporting record
        mode: Concise (user-facing) or explicit (debug) output
        session: Context and verbosity to render with

    Returns:
        The rendered text
    """
    return TypePrinter(session).render(value, mode)
