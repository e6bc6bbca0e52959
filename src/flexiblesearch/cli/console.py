"""Stderr output for the ``flexiblesearch`` command.

Error messages, hints and the constants table all go through
:data:`console`.  It renders Rich markup when Rich can be imported and
prints the raw text otherwise, so ``get`` and the error boundary work on
a bare install.
"""

from __future__ import annotations

import sys
from typing import Any

from flexiblesearch.exceptions import FlexibleSearchError


def get_rich_console() -> Any:
    """Build a ``rich.console.Console`` bound to stderr.

    Raises
    ------
    FlexibleSearchError
        If Rich cannot be imported.
    """
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise FlexibleSearchError(
            "Rich output is unavailable.",
            hint="Install the 'rich' package to get formatted tables.",
        ) from exc
    return Console(stderr=True)


class _StderrConsole:
    """Resolves Rich per call; markup is printed verbatim without it."""

    def print(self, *objects: object) -> None:
        try:
            target = get_rich_console()
        except FlexibleSearchError:
            print(*objects, file=sys.stderr)
        else:
            target.print(*objects)


console = _StderrConsole()
