"""Allow ``python -m flexiblesearch`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m flexiblesearch`` behaves identically to the
``flexiblesearch`` console script.
"""

from __future__ import annotations

from flexiblesearch.cli.app import cli

if __name__ == "__main__":
    cli()
