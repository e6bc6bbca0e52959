"""Attributes and conditions: the building blocks of a query.

An :class:`Attr` renders a model attribute reference (``{code}``,
``{p:code}``, ``{name[en]}``) and, through its comparison methods, the
:class:`Condition` objects consumed by ``where``/``and_``/``or_``/``having``.

Comparing against a literal allocates a named parameter from the shared
builder counter (``{code} =  ?code1``); comparing against another
:class:`Attr` inlines it instead.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from flexiblesearch.constants import AND, DISTINCT
from flexiblesearch.core.state import current_state
from flexiblesearch.exceptions import QueryBuildError

if TYPE_CHECKING:
    from flexiblesearch.core.clauses import SubQuery, UnionSubQuery


# ---------------------------------------------------------------------------
# Conditions
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Condition:
    """A rendered condition plus the parameter values it binds."""

    text: str
    params: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))

    def __str__(self) -> str:
        return self.text


# ---------------------------------------------------------------------------
# Attributes
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Attr:
    """A reference to a model attribute inside a query.

    Instances are immutable; :func:`~flexiblesearch.core.functions.count`,
    :func:`loc` and friends return modified copies.
    """

    name: str
    alias: str | None = None
    function: str | None = None
    """Aggregate or scalar function wrapping the reference (``COUNT``…)."""
    distinct: bool = False
    locale: str = ""

    def _reference(self) -> str:
        prefix = f"{DISTINCT} " if self.distinct else ""
        suffix = f"{self.name}[{self.locale}]" if self.locale else self.name
        if self.alias is not None:
            return f"{prefix}{{{self.alias}:{suffix}}}"
        return f"{prefix}{{{suffix}}}"

    def __str__(self) -> str:
        if self.function:
            return f"{self.function}({self._reference()})"
        return self._reference()

    def to_param(self) -> str:
        """Allocate the next parameter name for this attribute (``code3``)."""
        return f"{self.name}{current_state().next_param_index()}"

    # -- condition helpers ----------------------------------------------

    def _compare(self, operator: str, value: Any) -> Condition:
        text = f"{self} {operator} "
        param = self.to_param()
        if isinstance(value, Attr):
            return Condition(f"{text} {value}")
        return Condition(f"{text} ?{param}", MappingProxyType({param: value}))

    def _range(self, operator: str, low: Any, high: Any) -> Condition:
        params: dict[str, Any] = {}
        bounds: list[str] = []
        for value in (low, high):
            if isinstance(value, Attr):
                bounds.append(f" {value}")
            else:
                param = self.to_param()
                params[param] = value
                bounds.append(f" ?{param}")
        text = f"{self} {operator} {bounds[0]} {AND} {bounds[1]}"
        return Condition(text, MappingProxyType(params))

    def _membership(self, operator: str, values: Iterable[Any]) -> Condition:
        scalar = isinstance(values, (str, bytes, Attr)) or not isinstance(values, Iterable)
        values = [] if scalar else list(values)
        if not values:
            raise QueryBuildError(
                f"{operator} condition on {self} needs a non-empty sequence of values",
            )
        params: dict[str, Any] = {}
        items: list[str] = []
        for value in values:
            if isinstance(value, Attr):
                items.append(str(value))
            else:
                param = self.to_param()
                params[param] = value
                items.append(f"?{param}")
        return Condition(
            f"{self} {operator}  ({', '.join(items)})",
            MappingProxyType(params),
        )

    # -- comparisons ------------------------------------------------------

    def eq(self, value: Any) -> Condition:
        """``{attr} = value``."""
        return self._compare("=", value)

    def neq(self, value: Any) -> Condition:
        """``{attr} <> value``."""
        return self._compare("<>", value)

    def gt(self, value: Any) -> Condition:
        """``{attr} > value``."""
        return self._compare(">", value)

    def gte(self, value: Any) -> Condition:
        """``{attr} >= value``."""
        return self._compare(">=", value)

    def lt(self, value: Any) -> Condition:
        """``{attr} < value``."""
        return self._compare("<", value)

    def lte(self, value: Any) -> Condition:
        """``{attr} <= value``."""
        return self._compare("<=", value)

    def like(self, pattern: Any) -> Condition:
        """``{attr} LIKE pattern``."""
        return self._compare("LIKE", pattern)

    def not_like(self, pattern: Any) -> Condition:
        """``{attr} NOT LIKE pattern``."""
        return self._compare("NOT LIKE", pattern)

    not_eq = neq
    greater = gt
    greater_eq = gte
    lower = lt
    lower_eq = lte

    # -- ranges and lists -------------------------------------------------

    def between(self, low: Any, high: Any) -> Condition:
        """``{attr} BETWEEN low AND high``."""
        return self._range("BETWEEN", low, high)

    def not_between(self, low: Any, high: Any) -> Condition:
        """``{attr} NOT BETWEEN low AND high``."""
        return self._range("NOT BETWEEN", low, high)

    def in_(self, values: Sequence[Any]) -> Condition:
        """``{attr} IN (v1, v2, ...)``; each literal becomes a parameter."""
        return self._membership("IN", values)

    def not_in(self, values: Sequence[Any]) -> Condition:
        """``{attr} NOT IN (v1, v2, ...)``."""
        return self._membership("NOT IN", values)

    in_list = in_
    not_in_list = not_in

    # -- subqueries -------------------------------------------------------

    def in_subquery(self, subquery: SubQuery | UnionSubQuery) -> Condition:
        """``{attr} IN ({{subquery}})``."""
        return Condition(f"{self} IN {subquery}")

    def not_in_subquery(self, subquery: SubQuery | UnionSubQuery) -> Condition:
        """``{attr} NOT IN ({{subquery}})``."""
        return Condition(f"{self} NOT IN {subquery}")

    insub = in_subquery
    not_insub = not_in_subquery

    # -- nullability ------------------------------------------------------

    def is_null(self) -> Condition:
        return Condition(f"{self} IS NULL")

    def is_not_null(self) -> Condition:
        return Condition(f"{self} IS NOT NULL")


@dataclass(frozen=True, slots=True)
class AliasBuilder:
    """Produces attributes qualified with a table alias.

    ``p["code"]``, ``p.attr("code")`` and, for the primary key,
    ``p.pk()`` all render as ``{p:...}``.
    """

    alias: str

    def attr(self, name: str) -> Attr:
        return Attr(name, alias=self.alias)

    def __getitem__(self, name: str) -> Attr:
        return self.attr(name)

    def pk(self) -> Attr:
        return self.attr("pk")

    def __str__(self) -> str:
        return self.alias


# ---------------------------------------------------------------------------
# Factories
# ---------------------------------------------------------------------------

def as_attr(value: str | Attr) -> Attr:
    """Return *value* unchanged if it is an :class:`Attr`, else wrap it."""
    return value if isinstance(value, Attr) else Attr(value)


def attr(name: str) -> Attr:
    """Build a non-aliased attribute, e.g. ``attr("code")`` → ``{code}``."""
    return Attr(name)


def pk() -> Attr:
    """Shortcut for ``attr("pk")``."""
    return Attr("pk")


def loc(attribute: str | Attr, locale: str) -> Attr:
    """Localize an attribute: ``loc("name", "en")`` → ``{name[en]}``."""
    return replace(as_attr(attribute), locale=locale)


def alias(name: str) -> AliasBuilder:
    """Return an :class:`AliasBuilder` for the table alias *name*."""
    return AliasBuilder(name)


def aliases(*names: str) -> tuple[AliasBuilder, ...]:
    """Return one :class:`AliasBuilder` per name, for tuple unpacking."""
    return tuple(AliasBuilder(name) for name in names)
