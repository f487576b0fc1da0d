"""
Entry point for running tyrender as a module.

Usage:
    python -m tyrender render types.json
"""

import sys

from tyrender.cli import main

if __name__ == "__main__":
    sys.exit(main())
