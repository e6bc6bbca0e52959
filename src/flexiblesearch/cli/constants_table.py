"""``flexiblesearch constants``: render the composed constant namespace.

Lists every constant together with the layer it comes from, as a Rich
table when Rich is available and as plain text on stderr otherwise.
"""

from __future__ import annotations

import sys

from flexiblesearch import constants
from flexiblesearch.cli import exit_codes
from flexiblesearch.cli.console import console

GENERATED_LAYER = "generated"
EXTENSION_LAYER = "extension"
SHADOWED_LAYER = "extension (shadows generated)"


def _layer_label(name: str) -> str:
    """Name the layer whose value a reader of *name* observes."""
    if name in constants.EXTENSION:
        if name in constants.GENERATED:
            return SHADOWED_LAYER
        return EXTENSION_LAYER
    return GENERATED_LAYER


def collect_rows() -> list[tuple[str, str, str]]:
    """Return ``(name, value, layer)`` rows sorted by name."""
    return [
        (name, value, _layer_label(name))
        for name, value in sorted(constants.CONSTANTS.items())
    ]


def _print_plain_table(rows: list[tuple[str, str, str]]) -> None:
    """Render the table without Rich."""
    print(f"\n{constants.EXTENSIONNAME} constants", file=sys.stderr)
    print("=" * 64, file=sys.stderr)
    print(f"{'Name':<16} {'Value':<16} {'Layer':<30}", file=sys.stderr)
    print("-" * 64, file=sys.stderr)
    for name, value, layer in rows:
        print(f"{name:<16} {value!r:<16} {layer:<30}", file=sys.stderr)
    print(file=sys.stderr)


def run_constants() -> int:
    """Render the constant namespace; always returns :data:`exit_codes.SUCCESS`."""
    rows = collect_rows()

    try:
        from rich.table import Table
    except ModuleNotFoundError:
        _print_plain_table(rows)
        return exit_codes.SUCCESS

    table = Table(
        title=f"{constants.EXTENSIONNAME} constants",
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
    )
    table.add_column("Name", style="bold", min_width=14)
    table.add_column("Value", min_width=14)
    table.add_column("Layer", min_width=10)

    for name, value, layer in rows:
        style = "green" if layer != GENERATED_LAYER else "dim"
        table.add_row(name, repr(value), f"[{style}]{layer}[/{style}]")

    console.print()
    console.print(table)
    console.print()
    return exit_codes.SUCCESS
