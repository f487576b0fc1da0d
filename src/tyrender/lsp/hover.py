"""
Hover content for rendered values.
"""

from __future__ import annotations

from typing import Any, Optional

from lsprotocol import types

from tyrender.printer import Mode, TypePrinter


def type_hover(
    printer: TypePrinter,
    value: Any,
    *,
    label: Optional[str] = None,
    mode: Mode = Mode.CONCISE,
    range_: Optional[types.Range] = None,
    language: str = "rust",
) -> types.Hover:
    """
    Create a Markdown hover showing ``value`` as a code block.

    Args:
        printer: Printer to render with
        value: The value to show
        label: Name shown before the rendered value, e.g. ``x: Vec<u8>``
        mode: Concise or explicit rendering
        range_: Range the hover applies to
        language: Code block language used for highlighting
    """
    text = printer.render(value, mode)
    if label is not None:
        text = f"{label}: {text}"
    parts = [f"```{language}\n{text}\n```"]
    if mode is Mode.CONCISE and printer.session.verbose:
        parts.append("*verbose*")

    return types.Hover(
        contents=types.MarkupContent(
            kind=types.MarkupKind.Markdown,
            value="\n\n".join(parts),
        ),
        range=range_,
    )
