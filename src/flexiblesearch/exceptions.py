"""Custom exception hierarchy for flexiblesearch.

Every error raised by the package inherits from
:class:`FlexibleSearchError` so that the CLI error boundary can render a
clean message.  Where a caller would reasonably expect a builtin
exception type (``AttributeError`` for a missing constant,
``ValueError`` for a bad model class) the typed error inherits from that
builtin too.

Hierarchy
---------
FlexibleSearchError
├── ConstantError
│   ├── UnknownConstantError
│   └── ConstantDefinitionError
└── QueryBuildError
    └── InvalidModelClassError
"""

from __future__ import annotations


class FlexibleSearchError(Exception):
    """Base exception for all flexiblesearch errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Constant namespace ----------------------------------------------------

class ConstantError(FlexibleSearchError):
    """Raised for problems with the extension constant namespace."""


class UnknownConstantError(ConstantError, AttributeError):
    """Raised when a symbolic name is not defined in either layer."""


class ConstantDefinitionError(ConstantError):
    """Raised when a layer contributes a malformed constant."""


# --- Query building --------------------------------------------------------

class QueryBuildError(FlexibleSearchError):
    """Raised when a query clause cannot be rendered."""


class InvalidModelClassError(QueryBuildError, ValueError):
    """Raised when a model class does not declare a usable type code."""
