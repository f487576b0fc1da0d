"""
tyrender Command-Line Interface.

Renders the values of a JSON type document.

Usage:
    tyrender render types.json               # Concise rendering
    tyrender render types.json --verbose     # Show inference variables and regions
    tyrender render types.json --debug       # Explicit (debug) forms
    tyrender render types.json --json        # Machine-readable output
    tyrender check types.json                # Validate a document
    tyrender info                            # Show renderer information
"""

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import Optional

from tyrender import __version__
from tyrender.config import RenderConfig
from tyrender.printer import Mode, RenderSession, TypePrinter
from tyrender.ty.serialization import TypeDocument, load_document_file
from tyrender.utils.errors import DecodeError, TyRenderError

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

logger = logging.getLogger("tyrender")


# =============================================================================
# ANSI Color Codes for Terminal Output
# =============================================================================


class Colors:
    """ANSI escape codes for colored terminal output."""

    RED = "\033[91m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    CYAN = "\033[96m"
    GRAY = "\033[90m"

    BOLD = "\033[1m"
    DIM = "\033[2m"

    RESET = "\033[0m"

    @classmethod
    def disable(cls) -> None:
        """Disable all colors (for non-TTY output)."""
        cls.RED = ""
        cls.GREEN = ""
        cls.YELLOW = ""
        cls.CYAN = ""
        cls.GRAY = ""
        cls.BOLD = ""
        cls.DIM = ""
        cls.RESET = ""


def _init_colors() -> None:
    """Initialize colors based on terminal capabilities."""
    # Disable colors if not a TTY or if NO_COLOR is set
    if not sys.stdout.isatty() or os.environ.get("NO_COLOR"):
        Colors.disable()


_init_colors()


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="tyrender",
        description="tyrender - Render type-system values as compiler diagnostics show them",
    )

    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--log-level",
        choices=["debug", "info", "warning", "error"],
        default=None,
        help="Logging level (default: $TYRENDER_LOG or warning)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Render command
    render_parser = subparsers.add_parser(
        "render",
        aliases=["r"],
        help="Render the values of a type document",
    )
    render_parser.add_argument(
        "input",
        type=Path,
        help="Input type document (.json)",
    )
    render_parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=None,
        help="Print inference variables, region kinds and every generic argument",
    )
    render_parser.add_argument(
        "-d",
        "--debug",
        action="store_true",
        help="Print the explicit (debug) form of each value",
    )
    render_parser.add_argument(
        "--json",
        action="store_true",
        help="Output results as JSON",
    )
    render_parser.add_argument(
        "-l",
        "--label",
        action="append",
        default=None,
        help="Only render the value with this label (repeatable)",
    )

    # Check command
    check_parser = subparsers.add_parser(
        "check",
        help="Check that a type document decodes",
    )
    check_parser.add_argument(
        "input",
        type=Path,
        help="Input type document (.json)",
    )

    # Info command
    subparsers.add_parser(
        "info",
        help="Show renderer information",
    )

    return parser


def configure_logging(config: RenderConfig) -> None:
    logging.basicConfig(level=config.logging_level, format=LOG_FORMAT)
    logging.getLogger("tyrender").setLevel(config.logging_level)


def _load(input_path: Path) -> Optional[TypeDocument]:
    if not input_path.exists():
        print(f"Error: File not found: {input_path}", file=sys.stderr)
        return None
    try:
        return load_document_file(input_path)
    except DecodeError as e:
        print(f"{Colors.RED}Error:{Colors.RESET} {input_path}: {e}", file=sys.stderr)
        return None


def cmd_render(args: argparse.Namespace, config: RenderConfig) -> int:
    """Handle the render command."""
    document = _load(args.input)
    if document is None:
        return 1

    config = config.override(verbose=args.verbose)
    printer = TypePrinter(RenderSession.from_config(document.table, config))
    mode = Mode.EXPLICIT if args.debug else Mode.CONCISE

    values = document.values
    if args.label:
        values = [value for value in values if value.label in args.label]
        missing = sorted(set(args.label) - {value.label for value in values})
        if missing:
            print(f"Error: No value labelled {', '.join(missing)}", file=sys.stderr)
            return 1

    results = []
    try:
        for value in values:
            results.append((value, printer.render(value.value, mode)))
    except TyRenderError as e:
        print(f"{Colors.RED}Internal error:{Colors.RESET} {e}", file=sys.stderr)
        return 1

    if args.json:
        output = [
            {"label": value.label, "category": value.category, "text": text}
            for value, text in results
        ]
        print(json.dumps(output, indent=2))
        return 0

    for value, text in results:
        print(f"{Colors.CYAN}{value.label}{Colors.RESET}{Colors.GRAY}:{Colors.RESET} {text}")
    return 0


def cmd_check(args: argparse.Namespace, config: RenderConfig) -> int:
    """Handle the check command."""
    document = _load(args.input)
    if document is None:
        return 1
    print(
        f"{Colors.GREEN}OK:{Colors.RESET} {args.input} "
        f"({len(document.table)} items, {len(document.values)} values)"
    )
    return 0


def cmd_info(args: argparse.Namespace, config: RenderConfig) -> int:
    """Handle the info command - show renderer information."""
    print(f"""
{Colors.BOLD}tyrender{Colors.RESET}
========

{Colors.CYAN}Version:{Colors.RESET} {__version__}
{Colors.CYAN}Verbose:{Colors.RESET} {"on" if config.verbose else "off"} (TYRENDER_VERBOSE)
{Colors.CYAN}Log level:{Colors.RESET} {config.log_level} (TYRENDER_LOG)

{Colors.CYAN}Renders:{Colors.RESET}
  - Scalars, pointers, references, tuples, arrays and slices
  - Structs and enums with default arguments elided
  - Function items, function pointers and closures
  - Trait objects with Fn(A) -> R call syntax
  - Associated type projections
  - Regions, trait references and predicates

{Colors.CYAN}Commands:{Colors.RESET}
  tyrender render <file>     Render every value of a type document
  tyrender check <file>      Check that a type document decodes
  tyrender info              Show this information
""")
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        config = RenderConfig.from_env().override(log_level=args.log_level)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    configure_logging(config)

    if args.command is None:
        parser.print_help()
        return 0

    command_handlers = {
        "render": cmd_render,
        "r": cmd_render,
        "check": cmd_check,
        "info": cmd_info,
    }

    handler = command_handlers.get(args.command)
    if handler:
        logger.debug("running %s with %s", args.command, config)
        return handler(args, config)

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
