"""Clause objects: fields, tables, joins, selects and subqueries.

Every clause is a frozen dataclass whose ``__str__`` is its FlexibleSearch
rendering, so clauses compose naturally inside f-strings::

    p = alias("p")
    f"{select_from(as_('Product', p))} {where(p['code'].is_not_null())}"
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from flexiblesearch.constants import (
    AS,
    DISTINCT,
    FROM,
    JOIN,
    ON,
    OUTER,
    PK,
    SELECT,
    TYPECODE_FIELD,
    UNION,
    UNION_ALL,
)
from flexiblesearch.core.expressions import AliasBuilder, Attr, as_attr
from flexiblesearch.core.models import OrderOp
from flexiblesearch.core.state import current_state
from flexiblesearch.exceptions import InvalidModelClassError, QueryBuildError
from flexiblesearch.utils.text import flatten_query_text


# ---------------------------------------------------------------------------
# Tables
# ---------------------------------------------------------------------------

def get_type_code(model_class: type) -> str:
    """Return the type code a model class declares via ``TYPECODE_FIELD``.

    Raises
    ------
    InvalidModelClassError
        If the class has no type code or declares an empty one.
    """
    type_code = getattr(model_class, TYPECODE_FIELD, None)
    if not type_code:
        raise InvalidModelClassError(
            f"Invalid class: {model_class!r}",
            hint=f"Model classes must define a non-empty {TYPECODE_FIELD} attribute.",
        )
    return str(type_code)


def table_name(table: str | type) -> str:
    """Resolve a table given either as a type code or as a model class."""
    return table if isinstance(table, str) else get_type_code(table)


@dataclass(frozen=True, slots=True)
class AliasedTable:
    """A table reference, optionally aliased: ``{Product AS p}``."""

    table: str
    alias: AliasBuilder | None = None

    def on(self, left: Attr, right: Attr) -> Join:
        """Join this table where ``left = right``; both must be aliased."""
        for side in (left, right):
            if side.alias is None:
                raise QueryBuildError(
                    f"Join condition attribute {side} has no alias",
                    hint="Build join attributes from an alias, e.g. p['pk'].",
                )
        return Join(self, left, right)


def as_(table: str | type, alias_builder: AliasBuilder) -> AliasedTable:
    """Alias a table: ``as_("Product", p)`` → ``Product AS p``."""
    return AliasedTable(table_name(table), alias_builder)


aliased = as_


def as_table(table: str | type | AliasedTable) -> AliasedTable:
    if isinstance(table, AliasedTable):
        return table
    return AliasedTable(table_name(table))


# ---------------------------------------------------------------------------
# Joins
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Join:
    """``[LEFT|RIGHT] [OUTER] JOIN T AS x ON {x:a} = {y:b}``."""

    table: AliasedTable
    left: Attr
    right: Attr
    side: str | None = None
    outer: bool = False

    def __str__(self) -> str:
        words = [self.side, OUTER if self.outer else None, JOIN]
        head = " ".join(word for word in words if word)
        return (
            f"{head} {self.table.table} {AS} {self.table.alias} "
            f"{ON} {self.left} = {self.right}"
        )


# ---------------------------------------------------------------------------
# Fields and ordering
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Field:
    """A column of a ``SELECT`` clause returning primitive values."""

    attr: Attr
    target: type | None = None

    def __str__(self) -> str:
        return str(self.attr)


def _new_field(attribute: Attr, target: type | None) -> Field:
    if target is not None:
        current_state().result_classes.append(target)
    return Field(attribute, target)


def field(attribute: str | Attr, target: type | None = None) -> Field:
    """Build a field to select.

    A *target* class is appended to the result-class list of the query
    being built.  Omit it for fields inside subqueries.
    """
    return _new_field(as_attr(attribute), target)


def field_distinct(attribute: str | Attr, target: type | None = None) -> Field:
    """Like :func:`field`, rendered as ``DISTINCT {attr}``."""
    return _new_field(replace(as_attr(attribute), distinct=True), target)


@dataclass(frozen=True, slots=True)
class OrderBy:
    attr: Attr
    op: OrderOp

    def __str__(self) -> str:
        return f"{self.attr} {self.op.value}"


# ---------------------------------------------------------------------------
# SELECT
# ---------------------------------------------------------------------------

def _fields_str(fields: tuple[Field, ...], prefix: str = "") -> str:
    return ", ".join(f"{prefix}{item}" for item in fields)


@dataclass(frozen=True, slots=True)
class Select:
    """A ``SELECT ... FROM {...}`` clause over a table and its joins."""

    source: AliasedTable
    fields: tuple[Field, ...] = ()
    joins: tuple[Join, ...] = ()
    distinct: bool = False

    def __str__(self) -> str:
        table, alias_builder = self.source.table, self.source.alias
        distinct = f"{DISTINCT} " if self.distinct else ""

        if self.joins and alias_builder is None:
            raise QueryBuildError(
                "Error: joins with no alias",
                hint=f"Alias the {table} table with as_({table!r}, alias(...)).",
            )

        if alias_builder is None:
            source = f"{{{table}}}"
        else:
            joins = "".join(f"{item} " for item in self.joins)
            source = (
                f"{{{table} {AS} {alias_builder} {joins}}}"
                if self.joins
                else f"{{{table} {AS} {alias_builder}}}"
            )

        if self.fields:
            return f"{SELECT} {_fields_str(self.fields)} {FROM} {source}"

        primary_key = f"{{{PK}}}" if alias_builder is None else f"{{{alias_builder}:{PK}}}"
        return f"{SELECT} {distinct}{primary_key} {FROM} {source}"


# ---------------------------------------------------------------------------
# Subqueries
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class SubQuery:
    """An inner query rendered as ``({{...}}) alias``."""

    text: str
    alias: str = ""

    def raw(self) -> str:
        return flatten_query_text(self.text)

    def as_(self, name: str) -> SubQuery:
        return replace(self, alias=name)

    def union(self, other: SubQuery) -> UnionSubQuery:
        """``({{self}} UNION {{other}})``."""
        return UnionSubQuery(self, other)

    def union_all(self, other: SubQuery) -> UnionSubQuery:
        """``({{self}} UNION ALL {{other}})``."""
        return UnionSubQuery(self, other, all=True)

    def __str__(self) -> str:
        return f"({{{{{self.raw()}}}}}) {self.alias}"


@dataclass(frozen=True, slots=True)
class UnionSubQuery:
    first: SubQuery
    second: SubQuery
    all: bool = False
    alias: str = ""

    def as_(self, name: str) -> UnionSubQuery:
        return replace(self, alias=name)

    def __str__(self) -> str:
        keyword = UNION_ALL if self.all else UNION
        return (
            f"({{{{{self.first.raw()}}}}} {keyword} "
            f"{{{{{self.second.raw()}}}}}) {self.alias}"
        )


@dataclass(frozen=True, slots=True)
class SubQuerySelect:
    """``SELECT ... FROM (subquery) alias``."""

    query: SubQuery | UnionSubQuery
    fields: tuple[Field, ...] = ()
    distinct: bool = False

    def __str__(self) -> str:
        name = self.query.alias
        distinct = f"{DISTINCT} " if self.distinct else ""
        if self.fields:
            columns = _fields_str(self.fields, prefix=f"{name}." if name else "")
        else:
            columns = f"{name}.{PK}" if name else PK
        return f"{SELECT} {distinct}{columns} {FROM} {self.query}"
