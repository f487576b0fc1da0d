"""
Per-document analysis for the type document language server.

A document is decoded once per change; decoding errors become diagnostics
and hovering over a value label shows the rendered value.
"""

from __future__ import annotations

import logging
import re
from typing import Optional

from lsprotocol import types

from tyrender.config import RenderConfig
from tyrender.lsp.hover import type_hover
from tyrender.printer import Mode, RenderSession, TypePrinter
from tyrender.ty.serialization import TypeDocument, load_document
from tyrender.utils.errors import DecodeError, TyRenderError

logger = logging.getLogger(__name__)

_WORD_RE = re.compile(r"[A-Za-z0-9_]+")


class DocumentAnalyzer:
    """
    Decodes one type document and answers hover requests for it.

    Attributes:
        document: The decoded document, or None if decoding failed
        diagnostics: Problems found while decoding
    """

    def __init__(self, source: str, uri: str, config: Optional[RenderConfig] = None) -> None:
        self.source = source
        self.uri = uri
        self.config = config if config is not None else RenderConfig()
        self.lines = source.splitlines()
        self.document: Optional[TypeDocument] = None
        self.diagnostics: list[types.Diagnostic] = []

    def analyze(self) -> None:
        """Decode the document, collecting diagnostics."""
        self.document = None
        self.diagnostics = []
        try:
            self.document = load_document(self.source)
        except DecodeError as e:
            logger.debug("%s does not decode: %s", self.uri, e)
            self.diagnostics.append(self._decode_diagnostic(e))

    def _decode_diagnostic(self, error: DecodeError) -> types.Diagnostic:
        if error.location is not None:
            line = max(error.location.line - 1, 0)
            column = max(error.location.column - 1, 0)
            range_ = types.Range(
                start=types.Position(line=line, character=column),
                end=types.Position(line=line, character=column + 1),
            )
        else:
            first_line = self.lines[0] if self.lines else ""
            range_ = types.Range(
                start=types.Position(line=0, character=0),
                end=types.Position(line=0, character=len(first_line)),
            )
        message = error.message
        if error.pointer:
            message = f"{error.pointer}: {message}"
        return types.Diagnostic(
            range=range_,
            message=message,
            severity=types.DiagnosticSeverity.Error,
            source="tyrender",
        )

    def get_hover(self, line: int, character: int) -> types.Hover | None:
        """
        Get hover information at a position.

        Args:
            line: 0-indexed line number
            character: 0-indexed character position

        Returns:
            The rendered value whose label is under the cursor, or None
        """
        if self.document is None:
            return None

        word, word_range = self._get_word_at_position(line, character)
        if not word:
            return None

        value = self.document.get(word)
        if value is None:
            return None

        printer = TypePrinter(RenderSession.from_config(self.document.table, self.config))
        try:
            return type_hover(printer, value.value, label=word, mode=Mode.CONCISE, range_=word_range)
        except TyRenderError as e:
            logger.warning("cannot render %s in %s: %s", word, self.uri, e)
            return None

    def _get_word_at_position(
        self, line: int, character: int
    ) -> tuple[str, Optional[types.Range]]:
        if not 0 <= line < len(self.lines):
            return "", None
        for match in _WORD_RE.finditer(self.lines[line]):
            if match.start() <= character <= match.end():
                return match.group(), types.Range(
                    start=types.Position(line=line, character=match.start()),
                    end=types.Position(line=line, character=match.end()),
                )
        return "", None
