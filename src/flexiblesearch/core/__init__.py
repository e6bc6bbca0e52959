"""Core layer: the FlexibleSearch query DSL.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli``.
* Keywords come from :mod:`flexiblesearch.constants`, never literals.
"""

from flexiblesearch.core.builder import (
    and_,
    and_exists,
    build_query,
    by_asc,
    by_desc,
    group_by,
    having,
    join,
    left_join,
    or_,
    or_exists,
    order,
    order_by_asc,
    order_by_desc,
    right_join,
    select_fields_from,
    select_from,
    select_from_subquery,
    subquery,
    where,
    where_exists,
    where_not_exists,
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
    aliased,
    as_,
    field,
    field_distinct,
    get_type_code,
)
from flexiblesearch.core.expressions import (
    AliasBuilder,
    Attr,
    Condition,
    alias,
    aliases,
    attr,
    loc,
    pk,
)
from flexiblesearch.core.functions import avg, count, max_, min_, sum_, upper
from flexiblesearch.core.models import FlexibleSearchQuery, OrderOp
from flexiblesearch.core.state import reset_builder_state

__all__: list[str] = [
    "AliasBuilder",
    "AliasedTable",
    "Attr",
    "Condition",
    "Field",
    "FlexibleSearchQuery",
    "Join",
    "OrderBy",
    "OrderOp",
    "Select",
    "SubQuery",
    "SubQuerySelect",
    "UnionSubQuery",
    "alias",
    "aliased",
    "aliases",
    "and_",
    "and_exists",
    "as_",
    "attr",
    "avg",
    "build_query",
    "by_asc",
    "by_desc",
    "count",
    "field",
    "field_distinct",
    "get_type_code",
    "group_by",
    "having",
    "join",
    "left_join",
    "loc",
    "max_",
    "min_",
    "or_",
    "or_exists",
    "order",
    "order_by_asc",
    "order_by_desc",
    "pk",
    "reset_builder_state",
    "right_join",
    "select_fields_from",
    "select_from",
    "select_from_subquery",
    "subquery",
    "sum_",
    "upper",
    "where",
    "where_exists",
    "where_not_exists",
]
