"""Domain models for flexiblesearch.

All models are **frozen** dataclasses: immutable value objects with no
behaviour beyond data access.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any


class OrderOp(str, Enum):
    """Sort direction of an ``ORDER BY`` term."""

    ASC = "ASC"
    DESC = "DESC"


# ---------------------------------------------------------------------------
# Finished query
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class FlexibleSearchQuery:
    """A rendered FlexibleSearch query, ready to hand to the platform."""

    query: str
    """Single-line query text, e.g. ``SELECT {PK} FROM {Product}``."""

    query_parameters: Mapping[str, Any] = field(
        default_factory=lambda: MappingProxyType({}),
    )
    """Read-only parameter name → value bindings (``?name1`` → value)."""

    result_class_list: tuple[type, ...] = ()
    """Expected Python types of the selected columns, in select order."""

    def __str__(self) -> str:
        return self.query
