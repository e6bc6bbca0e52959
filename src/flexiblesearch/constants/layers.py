"""Pure helpers that turn constant layers into one read-only namespace.

A *layer* is any mapping of upper-case symbolic names to string values.
:func:`compose` merges a generated layer with a hand-written one: every
generated entry is inherited unless the hand-written layer redefines the
same name, in which case the hand-written value wins.

The helpers run once, at import time of :mod:`flexiblesearch.constants`.
Nothing here is consulted per lookup.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from types import MappingProxyType, ModuleType

from flexiblesearch.exceptions import ConstantDefinitionError


def is_constant_name(name: str) -> bool:
    """Return ``True`` for public, upper-case identifiers such as ``PK``."""
    return name.isidentifier() and not name.startswith("_") and name.isupper()


def _validate(layer: Mapping[str, object], origin: str) -> None:
    for name, value in layer.items():
        if not is_constant_name(name):
            raise ConstantDefinitionError(
                f"Invalid constant name in {origin} layer: {name!r}",
                hint="Constant names must be public upper-case identifiers.",
            )
        if not isinstance(value, str):
            raise ConstantDefinitionError(
                f"Constant {name} in {origin} layer must be a str, "
                f"got {type(value).__name__}",
            )


def layer_of(module: ModuleType, names: Iterable[str] | None = None) -> Mapping[str, str]:
    """Collect the constants a module contributes as a read-only layer.

    When *names* is ``None`` the module's ``__all__`` is used.
    """
    selected = list(names) if names is not None else list(getattr(module, "__all__", ()))
    layer = {name: getattr(module, name) for name in selected}
    _validate(layer, module.__name__)
    return MappingProxyType(layer)


def compose(
    generated: Mapping[str, str],
    derived: Mapping[str, str],
) -> Mapping[str, str]:
    """Merge *generated* with *derived* overrides (derived wins).

    Returns
    -------
    Mapping[str, str]
        A :class:`types.MappingProxyType`; writes raise ``TypeError``.

    Raises
    ------
    ConstantDefinitionError
        If either layer holds a non-string value or a malformed name.
    """
    _validate(generated, "generated")
    _validate(derived, "derived")
    merged: dict[str, str] = dict(generated)
    merged.update(derived)
    return MappingProxyType(merged)
