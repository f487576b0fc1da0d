"""
tyrender Language Server Protocol (LSP) Server.

Serves JSON type documents to editors using pygls:

- Document synchronization (open, change, save, close)
- Diagnostics for documents that do not decode
- Hover over a value label to see the rendered value

Usage:
    # Start the server in stdio mode (for IDE integration)
    tyrender-lsp

    # Start in TCP mode (for debugging)
    tyrender-lsp --tcp --port 2088
"""

import logging

from lsprotocol import types
from pygls.lsp.server import LanguageServer

from tyrender import __version__
from tyrender.config import RenderConfig
from tyrender.lsp.analyzer import DocumentAnalyzer

logger = logging.getLogger("tyrender-lsp")


class TyRenderLanguageServer(LanguageServer):
    """
    Language server for type documents.

    Each open document has an analyzer holding its decoded values.
    """

    def __init__(self, config: RenderConfig | None = None) -> None:
        super().__init__(
            name="tyrender-lsp",
            version=f"v{__version__}",
        )
        self.config = config if config is not None else RenderConfig.from_env()

        # Document analyzers cache (uri -> analyzer)
        self._analyzers: dict[str, DocumentAnalyzer] = {}

        self._register_handlers()

    def _register_handlers(self) -> None:
        """Register all LSP request and notification handlers.

        pygls tags each handler with attributes, so bound methods are wrapped
        in plain functions.
        """

        @self.feature(types.TEXT_DOCUMENT_DID_OPEN)
        def did_open(ls: TyRenderLanguageServer, params: types.DidOpenTextDocumentParams) -> None:
            self._on_did_open(params)

        @self.feature(types.TEXT_DOCUMENT_DID_CHANGE)
        def did_change(ls: TyRenderLanguageServer, params: types.DidChangeTextDocumentParams) -> None:
            self._on_did_change(params)

        @self.feature(types.TEXT_DOCUMENT_DID_SAVE)
        def did_save(ls: TyRenderLanguageServer, params: types.DidSaveTextDocumentParams) -> None:
            self._on_did_save(params)

        @self.feature(types.TEXT_DOCUMENT_DID_CLOSE)
        def did_close(ls: TyRenderLanguageServer, params: types.DidCloseTextDocumentParams) -> None:
            self._on_did_close(params)

        @self.feature(types.TEXT_DOCUMENT_HOVER)
        def hover(ls: TyRenderLanguageServer, params: types.HoverParams) -> types.Hover | None:
            return self._on_hover(params)

    def analyze_document(self, uri: str, text: str) -> DocumentAnalyzer:
        """Analyze a document and cache the result."""
        analyzer = DocumentAnalyzer(text, uri, self.config)
        analyzer.analyze()
        self._analyzers[uri] = analyzer
        return analyzer

    def _publish_diagnostics(self, uri: str, diagnostics: list[types.Diagnostic]) -> None:
        self.text_document_publish_diagnostics(
            types.PublishDiagnosticsParams(uri=uri, diagnostics=diagnostics)
        )

    # =========================================================================
    # Document Synchronization
    # =========================================================================

    def _on_did_open(self, params: types.DidOpenTextDocumentParams) -> None:
        document = params.text_document
        logger.info("Document opened: %s", document.uri)

        analyzer = self.analyze_document(document.uri, document.text)
        self._publish_diagnostics(document.uri, analyzer.diagnostics)

    def _on_did_change(self, params: types.DidChangeTextDocumentParams) -> None:
        uri = params.text_document.uri
        doc = self.workspace.get_text_document(uri)
        logger.debug("Document changed: %s", uri)

        analyzer = self.analyze_document(uri, doc.source)
        self._publish_diagnostics(uri, analyzer.diagnostics)

    def _on_did_save(self, params: types.DidSaveTextDocumentParams) -> None:
        uri = params.text_document.uri
        logger.info("Document saved: %s", uri)

        doc = self.workspace.get_text_document(uri)
        analyzer = self.analyze_document(uri, doc.source)
        self._publish_diagnostics(uri, analyzer.diagnostics)

    def _on_did_close(self, params: types.DidCloseTextDocumentParams) -> None:
        uri = params.text_document.uri
        logger.info("Document closed: %s", uri)

        self._analyzers.pop(uri, None)
        self._publish_diagnostics(uri, [])

    # =========================================================================
    # Hover
    # =========================================================================

    def _on_hover(self, params: types.HoverParams) -> types.Hover | None:
        analyzer = self._analyzers.get(params.text_document.uri)
        if analyzer is None:
            return None
        return analyzer.get_hover(params.position.line, params.position.character)


def create_server(config: RenderConfig | None = None) -> TyRenderLanguageServer:
    """Create a tyrender language server instance."""
    return TyRenderLanguageServer(config)


def main() -> None:
    """
    Main entry point for the tyrender language server.

    Starts the server in stdio mode for IDE integration.
    """
    import argparse

    parser = argparse.ArgumentParser(
        description="tyrender Language Server",
        prog="tyrender-lsp",
    )
    parser.add_argument(
        "--tcp",
        action="store_true",
        help="Start server in TCP mode instead of stdio",
    )
    parser.add_argument(
        "--host",
        default="127.0.0.1",
        help="Host to bind to in TCP mode (default: 127.0.0.1)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=2088,
        help="Port to listen on in TCP mode (default: 2088)",
    )
    parser.add_argument(
        "--log-level",
        choices=["debug", "info", "warning", "error"],
        default="info",
        help="Logging level (default: info)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        default=None,
        help="Render hovers in verbose mode",
    )

    args = parser.parse_args()

    config = RenderConfig.from_env().override(verbose=args.verbose, log_level=args.log_level)
    logging.basicConfig(
        level=config.logging_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    server = create_server(config)

    if args.tcp:
        logger.info("Starting tyrender LSP in TCP mode on %s:%s", args.host, args.port)
        server.start_tcp(args.host, args.port)
    else:
        logger.info("Starting tyrender LSP in stdio mode")
        server.start_io()


if __name__ == "__main__":
    main()
