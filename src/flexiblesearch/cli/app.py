"""CLI application entry point and command routing for flexiblesearch.

This module is the **sole error boundary** for the application.  It
catches :class:`~flexiblesearch.exceptions.FlexibleSearchError`,
``KeyboardInterrupt`` and any unexpected ``Exception``, renders a
user-friendly message and returns a well-defined exit code.

Commands
--------
* ``flexiblesearch``                  - print help
* ``flexiblesearch constants``        - list the constant namespace
* ``flexiblesearch get EXTENSIONNAME`` - print one constant's value
* ``flexiblesearch --version``
"""

from __future__ import annotations

import argparse
import sys

from flexiblesearch.cli import exit_codes
from flexiblesearch.cli.console import console
from flexiblesearch.exceptions import FlexibleSearchError
from flexiblesearch.version import __version__


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="flexiblesearch",
        description="Inspect the kotlinflexiblesearch extension constants.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "target",
        nargs="?",
        default=None,
        help="'constants' to list all constants, or 'get' to print one.",
    )
    parser.add_argument(
        "name",
        nargs="?",
        default=None,
        help="Constant name for the 'get' command (e.g. EXTENSIONNAME).",
    )
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_constants() -> int:
    from flexiblesearch.cli.constants_table import run_constants

    return run_constants()


def _handle_get(name: str | None) -> int:
    """Print the value of constant *name* on stdout."""
    from flexiblesearch import constants

    if not name:
        raise FlexibleSearchError(
            "Missing constant name.",
            hint="Usage: flexiblesearch get EXTENSIONNAME",
        )
    print(constants.get(name))
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the flexiblesearch CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.target is None:
        parser.print_help()
        return exit_codes.SUCCESS

    target: str = args.target.lower()

    if target == "constants":
        return _handle_constants()
    if target == "get":
        return _handle_get(args.name)

    raise FlexibleSearchError(
        f"Unknown command: {args.target}",
        hint="Available commands: constants, get NAME",
    )


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point."""
    try:
        code = main()
        sys.exit(code)
    except FlexibleSearchError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
