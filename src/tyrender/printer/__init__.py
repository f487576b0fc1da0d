"""
Rendering of type-system values to text.

This package contains:
- session: The render session (type context plus verbosity)
- printer: The TypePrinter facade every renderer recurses through
- shapes: One rendering rule per type shape
- paths: Item paths with generic arguments, in type or value namespace
- binder: Naming of regions bound by a binder
- signature: Parameter lists and return types
- defaults: Elision of generic arguments equal to their defaults
- regions, predicates, debug: Renderings of the supporting records
"""

from tyrender.printer.binder import ANON_REGION_NAME, TraitAndProjections, in_binder
from tyrender.printer.debug import infer_debug, infer_display, param_debug
from tyrender.printer.defaults import number_of_supplied_defaults
from tyrender.printer.paths import ERROR_MARKER, Namespace, parameterized
from tyrender.printer.printer import TypePrinter
from tyrender.printer.session import Mode, RenderSession
from tyrender.printer.shapes import ShapeRenderer
from tyrender.printer.signature import fn_sig

__all__ = [
    "TypePrinter",
    "RenderSession",
    "Mode",
    "ShapeRenderer",
    "Namespace",
    "parameterized",
    "ERROR_MARKER",
    "in_binder",
    "TraitAndProjections",
    "ANON_REGION_NAME",
    "fn_sig",
    "number_of_supplied_defaults",
    "infer_debug",
    "infer_display",
    "param_debug",
]
