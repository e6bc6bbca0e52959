"""Whitespace normalisation for query text written as multi-line strings."""

from __future__ import annotations

import textwrap


def flatten_query_text(text: str) -> str:
    """Collapse a (possibly indented, multi-line) query into one line.

    The common indentation is removed, a blank first and a blank last
    line are dropped, and the remaining lines are joined with single
    spaces.  Trailing whitespace inside a line is preserved, so::

        \"\"\"
            SELECT {PK} FROM {Product}
            WHERE {code} IS NULL
        \"\"\"

    becomes ``"SELECT {PK} FROM {Product} WHERE {code} IS NULL"``.
    """
    lines = textwrap.dedent(text).split("\n")
    if lines and not lines[0].strip():
        lines = lines[1:]
    if lines and not lines[-1].strip():
        lines = lines[:-1]
    return " ".join(lines)
