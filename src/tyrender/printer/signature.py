"""
Function signature rendering.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from tyrender.ty.types import FnConverging, FnOutput, Type

if TYPE_CHECKING:
    from tyrender.printer.printer import TypePrinter


def fn_sig(
    printer: TypePrinter,
    inputs: Sequence[Type],
    variadic: bool,
    output: FnOutput,
) -> str:
    """
    Render a parameter list and return type.

    Examples:
        (i32, bool)
        (i32, bool) -> i32
        (i32, bool) -> !
        (i32, ...)
    """
    parts = ["("]
    if inputs:
        parts.append(", ".join(printer.display(ty) for ty in inputs))
        # A variadic marker needs at least one fixed parameter before it.
        if variadic:
            parts.append(", ...")
    parts.append(")")

    if isinstance(output, FnConverging):
        if not output.ty.is_nil():
            parts.append(f" -> {printer.display(output.ty)}")
    else:
        parts.append(" -> !")

    return "".join(parts)
