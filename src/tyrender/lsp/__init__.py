"""
Editor integration for tyrender.

This package contains:
- hover: Hover content for rendered values
- analyzer: Per-document decoding and hover lookup
- server: The pygls language server for JSON type documents
"""

from tyrender.lsp.analyzer import DocumentAnalyzer
from tyrender.lsp.hover import type_hover

__all__ = ["DocumentAnalyzer", "type_hover"]
