"""Global constants for the kotlinflexiblesearch extension.

This module is the hand-written layer on top of
:mod:`flexiblesearch.constants.generated`.  Everything the generated
layer defines is re-exported here; a name assigned below with the same
spelling shadows the generated value.  Add extension-wide constants to
this module, never to the generated one.

Prefer attribute access (``constants.EXTENSIONNAME``) so that a typo is
caught by the type checker.  :func:`get` serves collaborators that only
hold a symbolic name.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Final

from flexiblesearch.constants import generated as _generated
from flexiblesearch.constants.generated import *  # noqa: F403
from flexiblesearch.constants.layers import compose, layer_of
from flexiblesearch.exceptions import UnknownConstantError

EXTENSIONNAME: Final[str] = "kotlinflexiblesearch"
"""Name under which the hosting platform registers this extension."""

GENERATED: Final[Mapping[str, str]] = layer_of(_generated)
"""Constants contributed by the generated layer."""

EXTENSION: Final[Mapping[str, str]] = compose({}, {
    "EXTENSIONNAME": EXTENSIONNAME,
})
"""Constants contributed (or shadowed) by this hand-written layer."""

CONSTANTS: Final[Mapping[str, str]] = compose(GENERATED, EXTENSION)
"""Flat read-only view of the composed namespace."""


def get(name: str) -> str:
    """Return the value bound to *name* in the composed namespace.

    Raises
    ------
    UnknownConstantError
        If *name* is defined in neither layer.
    """
    try:
        return CONSTANTS[name]
    except KeyError:
        raise UnknownConstantError(
            f"Unknown constant: {name}",
            hint=f"Known constants: {', '.join(sorted(CONSTANTS))}",
        ) from None


__all__: list[str] = [
    *_generated.__all__,
    "CONSTANTS",
    "EXTENSION",
    "EXTENSIONNAME",
    "GENERATED",
    "get",
]
