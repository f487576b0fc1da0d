"""
Entry point for running the tyrender LSP server as a module.

Usage:
    python -m tyrender.lsp
    python -m tyrender.lsp --tcp --port 2088
"""

from tyrender.lsp.server import main

if __name__ == "__main__":
    main()
