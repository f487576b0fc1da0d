"""Tests for tyrender hover content."""

from lsprotocol import types

from tyrender.lsp import type_hover
from tyrender.printer import Mode
from tyrender.ty.types import I32_TYPE, U8_TYPE, InferKind, InferType, TupleType


class TestTypeHover:
    """Test suite for type_hover."""

    def test_markdown_code_block(self, printer) -> None:
        """Test that the rendered value is shown in a rust code block."""
        hover = type_hover(printer, TupleType((I32_TYPE, U8_TYPE)))

        assert isinstance(hover.contents, types.MarkupContent)
        assert hover.contents.kind == types.MarkupKind.Markdown
        assert hover.contents.value == "```rust\n(i32, u8)\n```"

    def test_label_prefix(self, printer) -> None:
        """Test that a label is shown before the value."""
        hover = type_hover(printer, I32_TYPE, label="x")
        assert hover.contents.value == "```rust\nx: i32\n```"

    def test_explicit_mode(self, printer) -> None:
        """Test hover in explicit mode."""
        hover = type_hover(printer, (I32_TYPE,), mode=Mode.EXPLICIT)
        assert "[i32]" in hover.contents.value

    def test_verbose_note(self, verbose_printer) -> None:
        """Test that verbose sessions are marked."""
        hover = type_hover(verbose_printer, InferType(InferKind.TY_VAR, 1))
        assert "_#1t" in hover.contents.value
        assert hover.contents.value.endswith("*verbose*")

    def test_range(self, printer) -> None:
        """Test that the given range is attached."""
        range_ = types.Range(
            start=types.Position(line=1, character=2),
            end=types.Position(line=1, character=5),
        )
        hover = type_hover(printer, I32_TYPE, range_=range_)
        assert hover.range == range_
