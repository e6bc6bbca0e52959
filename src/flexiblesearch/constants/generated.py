"""Generated constants for the kotlinflexiblesearch extension.

GENERATED FILE - DO NOT EDIT.  Hand-written constants belong in
:mod:`flexiblesearch.constants`, which extends this module and may
shadow any name defined here.
"""

from __future__ import annotations

from typing import Final

__all__: list[str] = [
    "AND",
    "AS",
    "AVG",
    "COUNT",
    "DISTINCT",
    "EXISTS",
    "FROM",
    "GROUP_BY",
    "HAVING",
    "JOIN",
    "LEFT",
    "MAX",
    "MIN",
    "ON",
    "OR",
    "ORDER_BY",
    "OUTER",
    "PK",
    "RIGHT",
    "SELECT",
    "SUM",
    "TYPECODE_FIELD",
    "UNION",
    "UNION_ALL",
    "UPPER",
    "WHERE",
]

# Statements
SELECT: Final[str] = "SELECT"
FROM: Final[str] = "FROM"
WHERE: Final[str] = "WHERE"
HAVING: Final[str] = "HAVING"
ORDER_BY: Final[str] = "ORDER BY"
GROUP_BY: Final[str] = "GROUP BY"
UNION: Final[str] = "UNION"
UNION_ALL: Final[str] = "UNION ALL"

# Logical operators
AND: Final[str] = "AND"
OR: Final[str] = "OR"
EXISTS: Final[str] = "EXISTS"

# Tables and joins
AS: Final[str] = "AS"
ON: Final[str] = "ON"
JOIN: Final[str] = "JOIN"
LEFT: Final[str] = "LEFT"
RIGHT: Final[str] = "RIGHT"
OUTER: Final[str] = "OUTER"
DISTINCT: Final[str] = "DISTINCT"

# Functions
COUNT: Final[str] = "COUNT"
UPPER: Final[str] = "UPPER"
MIN: Final[str] = "MIN"
MAX: Final[str] = "MAX"
SUM: Final[str] = "SUM"
AVG: Final[str] = "AVG"

# Item model
PK: Final[str] = "PK"
TYPECODE_FIELD: Final[str] = "_TYPECODE"
