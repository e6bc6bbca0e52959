"""Query builder entry points.

Queries are written as (possibly multi-line) f-strings assembled from the
helpers below and handed to :func:`build_query`::

    p = alias("p")
    query = build_query(f\"\"\"
        {select_from(as_(ProductModel, p))}
        {where(p["code"].eq("1234"))} {and_(p["name"].is_not_null())}
        {order_by_desc(p["modifiedtime"])}
    \"\"\")
    query.query             # 'SELECT {p:PK} FROM {Product AS p} WHERE ...'
    query.query_parameters  # {'code1': '1234'}

Clause helpers that take a :class:`~flexiblesearch.core.expressions.Condition`
register its parameters with the query under construction as they render;
:func:`build_query` collects them and resets the builder state.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from types import MappingProxyType

from flexiblesearch.constants import (
    AND,
    EXISTS,
    GROUP_BY,
    HAVING,
    LEFT,
    OR,
    ORDER_BY,
    RIGHT,
    WHERE,
)
from flexiblesearch.core.clauses import (
    AliasedTable,
    Field,
    Join,
    OrderBy,
    Select,
    SubQuery,
    SubQuerySelect,
    UnionSubQuery,
    as_table,
)
from flexiblesearch.core.expressions import Attr, Condition, as_attr
from flexiblesearch.core.models import FlexibleSearchQuery, OrderOp
from flexiblesearch.core.state import current_state
from flexiblesearch.utils.text import flatten_query_text

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Building
# ---------------------------------------------------------------------------

def build_query(query: str | Callable[[], str]) -> FlexibleSearchQuery:
    """Finish a query: flatten its text and attach parameters and result classes.

    *query* may be the query text or a zero-argument callable returning
    it.  The builder state is reset afterwards, so parameter numbering
    starts again at 1 for the next query.
    """
    state = current_state()
    try:
        text = query() if callable(query) else query
        built = FlexibleSearchQuery(
            query=flatten_query_text(text),
            query_parameters=MappingProxyType(dict(state.params)),
            result_class_list=tuple(state.result_classes),
        )
    finally:
        state.reset()
    logger.debug(
        "Built query %r with %d parameter(s)", built.query, len(built.query_parameters),
    )
    return built


def subquery(query: str | Select | SubQuerySelect) -> SubQuery:
    """Wrap query text (or a select clause) as an inner query."""
    return SubQuery(str(query))


# ---------------------------------------------------------------------------
# SELECT
# ---------------------------------------------------------------------------

def select_from(
    table: str | type | AliasedTable,
    *joins: Join,
    distinct: bool = False,
) -> Select:
    """``SELECT {PK} FROM {table}``, optionally through *joins*.

    Joins require an aliased table (see :func:`~flexiblesearch.core.clauses.as_`).
    """
    return Select(as_table(table), joins=joins, distinct=distinct)


def select_fields_from(
    table: str | type | AliasedTable,
    *fields: Field,
    joins: tuple[Join, ...] | list[Join] = (),
) -> Select:
    """``SELECT f1, f2 FROM {table}``, optionally through *joins*."""
    return Select(as_table(table), fields=fields, joins=tuple(joins))


def select_from_subquery(
    query: SubQuery | UnionSubQuery,
    *fields: Field,
    distinct: bool = False,
) -> SubQuerySelect:
    """``SELECT [DISTINCT] alias.PK FROM ({{query}}) alias``."""
    return SubQuerySelect(query, fields=fields, distinct=distinct)


# ---------------------------------------------------------------------------
# Joins
# ---------------------------------------------------------------------------

def join(join_clause: Join, outer: bool = False) -> Join:
    """``[OUTER] JOIN``; build *join_clause* with ``as_(T, x).on(a, b)``."""
    return Join(join_clause.table, join_clause.left, join_clause.right, outer=outer)


def left_join(join_clause: Join, outer: bool = False) -> Join:
    """``LEFT [OUTER] JOIN``."""
    return Join(
        join_clause.table, join_clause.left, join_clause.right, side=LEFT, outer=outer,
    )


def right_join(join_clause: Join, outer: bool = False) -> Join:
    """``RIGHT [OUTER] JOIN``."""
    return Join(
        join_clause.table, join_clause.left, join_clause.right, side=RIGHT, outer=outer,
    )


# ---------------------------------------------------------------------------
# WHERE / AND / OR / HAVING
# ---------------------------------------------------------------------------

def _register(condition: Condition) -> None:
    current_state().params.update(condition.params)


def _braced(condition: Condition, start_braces: bool, end_braces: bool) -> str:
    if start_braces:
        return f"({condition}"
    if end_braces:
        return f"{condition})"
    return str(condition)


def where(condition: Condition) -> str:
    _register(condition)
    return f"{WHERE} {condition}"


def and_(
    condition: Condition,
    start_braces: bool = False,
    end_braces: bool = False,
) -> str:
    """``AND condition``; *start_braces*/*end_braces* open or close a group."""
    _register(condition)
    return f"{AND} {_braced(condition, start_braces, end_braces)}"


def or_(
    condition: Condition,
    start_braces: bool = False,
    end_braces: bool = False,
) -> str:
    """``OR condition``; *start_braces*/*end_braces* open or close a group."""
    _register(condition)
    return f"{OR} {_braced(condition, start_braces, end_braces)}"


def having(condition: Condition) -> str:
    _register(condition)
    return f"{HAVING} {condition}"


def where_exists(query: SubQuery | UnionSubQuery) -> str:
    return f"{WHERE} {EXISTS} {query}"


def where_not_exists(query: SubQuery | UnionSubQuery) -> str:
    return f"{WHERE} NOT {EXISTS} {query}"


def and_exists(query: SubQuery | UnionSubQuery) -> str:
    return f"{AND} {EXISTS} {query}"


def or_exists(query: SubQuery | UnionSubQuery) -> str:
    return f"{OR} {EXISTS} {query}"


# ---------------------------------------------------------------------------
# ORDER BY / GROUP BY
# ---------------------------------------------------------------------------

def by_asc(attribute: str | Attr) -> OrderBy:
    return OrderBy(as_attr(attribute), OrderOp.ASC)


def by_desc(attribute: str | Attr) -> OrderBy:
    return OrderBy(as_attr(attribute), OrderOp.DESC)


def order(*terms: OrderBy) -> str:
    """``ORDER BY t1, t2``, e.g. ``order(by_desc("code"), by_asc("name"))``."""
    return f"{ORDER_BY} {', '.join(str(term) for term in terms)}"


def order_by_asc(attribute: str | Attr) -> str:
    return order(by_asc(attribute))


def order_by_desc(attribute: str | Attr) -> str:
    return order(by_desc(attribute))


def group_by(*attributes: str | Attr) -> str:
    return f"{GROUP_BY} {', '.join(str(as_attr(item)) for item in attributes)}"
