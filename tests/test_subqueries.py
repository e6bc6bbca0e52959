"""Tests for subqueries: EXISTS, UNION and selecting from an inner query."""

from __future__ import annotations

import pytest

from flexiblesearch.core import (
    alias,
    and_exists,
    as_,
    attr,
    build_query,
    field,
    or_,
    or_exists,
    select_fields_from,
    select_from,
    select_from_subquery,
    subquery,
    upper,
    where,
    where_exists,
    where_not_exists,
)

from model_stubs import ProductModel

INNER = "({{SELECT UPPER({code}) FROM {Product}}}) "


@pytest.fixture()
def upper_codes():
    return subquery(select_fields_from(ProductModel, field(upper(ProductModel.CODE))))


class TestExists:
    def test_where_exists(self, upper_codes) -> None:
        query = build_query(f"{select_from(ProductModel)} {where_exists(upper_codes)}")
        assert query.query == f"SELECT {{PK}} FROM {{Product}} WHERE EXISTS {INNER}"
        assert len(query.query_parameters) == 0

    def test_aliased_where_exists(self, upper_codes) -> None:
        p = alias("p")
        query = build_query(f"{select_from(as_(ProductModel, p))} {where_exists(upper_codes)}")
        assert query.query == f"SELECT {{p:PK}} FROM {{Product AS p}} WHERE EXISTS {INNER}"

    def test_where_not_exists(self, upper_codes) -> None:
        query = build_query(f"{select_from(ProductModel)} {where_not_exists(upper_codes)}")
        assert query.query == f"SELECT {{PK}} FROM {{Product}} WHERE NOT EXISTS {INNER}"

    def test_and_exists(self, upper_codes) -> None:
        query = build_query(
            f"{select_from(ProductModel)} {where(attr('name').is_null())} {and_exists(upper_codes)}"
        )
        assert query.query == (
            f"SELECT {{PK}} FROM {{Product}} WHERE {{name}} IS NULL AND EXISTS {INNER}"
        )

    def test_or_exists(self, upper_codes) -> None:
        assert or_exists(upper_codes) == f"OR EXISTS {INNER}"


class TestSubQuery:
    def test_raw_flattens_multiline_text(self) -> None:
        inner = subquery(
            """
            SELECT {PK}
            FROM {Product}
            """
        )
        assert inner.raw() == "SELECT {PK} FROM {Product}"

    def test_as_returns_aliased_copy(self) -> None:
        inner = subquery("SELECT {PK} FROM {Product}")
        named = inner.as_("q")
        assert str(inner) == "({{SELECT {PK} FROM {Product}}}) "
        assert str(named) == "({{SELECT {PK} FROM {Product}}}) q"

    def test_union(self) -> None:
        union = subquery("SELECT {PK} FROM {Product}").union(subquery("SELECT {PK} FROM {Unit}"))
        assert str(union) == "({{SELECT {PK} FROM {Product}}} UNION {{SELECT {PK} FROM {Unit}}}) "

    def test_union_all(self) -> None:
        union = subquery("SELECT {PK} FROM {Product}").union_all(
            subquery("SELECT {PK} FROM {Unit}")
        )
        assert str(union.as_("u")) == (
            "({{SELECT {PK} FROM {Product}}} UNION ALL {{SELECT {PK} FROM {Unit}}}) u"
        )


class TestSelectFromSubquery:
    def test_unaliased(self) -> None:
        query = build_query(str(select_from_subquery(subquery(select_from(ProductModel)))))
        assert query.query == "SELECT PK FROM ({{SELECT {PK} FROM {Product}}}) "

    def test_aliased(self) -> None:
        inner = subquery(select_from(ProductModel)).as_("q")
        query = build_query(str(select_from_subquery(inner)))
        assert query.query == "SELECT q.PK FROM ({{SELECT {PK} FROM {Product}}}) q"

    def test_aliased_distinct(self) -> None:
        inner = subquery(select_from(ProductModel)).as_("q")
        query = build_query(str(select_from_subquery(inner, distinct=True)))
        assert query.query == "SELECT DISTINCT q.PK FROM ({{SELECT {PK} FROM {Product}}}) q"

    def test_unaliased_distinct(self) -> None:
        inner = subquery(select_from(ProductModel))
        query = build_query(str(select_from_subquery(inner, distinct=True)))
        assert query.query == "SELECT DISTINCT PK FROM ({{SELECT {PK} FROM {Product}}}) "

    def test_aliased_with_fields(self) -> None:
        inner = subquery(
            select_fields_from(ProductModel, field("code"), field("name"))
        ).as_("q")
        query = build_query(
            str(select_from_subquery(inner, field("code", str), field("name", str)))
        )
        assert query.query == (
            "SELECT q.{code}, q.{name} FROM ({{SELECT {code}, {name} FROM {Product}}}) q"
        )
        assert query.result_class_list == (str, str)

    def test_union_of_filtered_queries(self) -> None:
        first = subquery(
            f"{select_fields_from(ProductModel, field('code'))} "
            f"{where(attr('code').eq('A'))} {or_(attr('code').eq('B'))}"
        )
        second = subquery(
            f"{select_fields_from(ProductModel, field('code'))} "
            f"{where(attr('code').eq('C'))} {or_(attr('code').eq('D'))}"
        )
        query = build_query(
            str(select_from_subquery(first.union(second).as_("q"), field("code", str), distinct=True))
        )
        assert query.query == (
            "SELECT DISTINCT q.{code} FROM "
            "({{SELECT {code} FROM {Product} WHERE {code} =  ?code1 OR {code} =  ?code2}} "
            "UNION "
            "{{SELECT {code} FROM {Product} WHERE {code} =  ?code3 OR {code} =  ?code4}}) q"
        )
        assert dict(query.query_parameters) == {
            "code1": "A",
            "code2": "B",
            "code3": "C",
            "code4": "D",
        }
        assert query.result_class_list == (str,)
