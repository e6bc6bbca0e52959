"""Tests for per-query builder state (core/state.py) and query finishing."""

from __future__ import annotations

import asyncio
import threading

import pytest

from flexiblesearch.core import (
    aliases,
    as_,
    attr,
    build_query,
    field,
    join,
    reset_builder_state,
    select_fields_from,
    select_from,
    where,
)
from flexiblesearch.core.state import BuilderState, current_state
from flexiblesearch.exceptions import QueryBuildError
from flexiblesearch.utils.text import flatten_query_text

from model_stubs import OrderEntryModel, OrderModel, ProductModel


class TestBuilderState:
    def test_counter_is_one_based(self) -> None:
        state = BuilderState()
        assert state.next_param_index() == 1
        assert state.next_param_index() == 2

    def test_reset_clears_everything(self) -> None:
        state = BuilderState()
        state.next_param_index()
        state.params["code1"] = "x"
        state.result_classes.append(str)
        state.reset()
        assert state == BuilderState()

    def test_current_state_is_reused(self) -> None:
        assert current_state() is current_state()

    def test_explicit_reset(self) -> None:
        attr("code").eq("x")
        reset_builder_state()
        assert current_state().param_counter == 0


class TestBuildQuery:
    def test_counter_restarts_after_build(self) -> None:
        first = build_query(f"{select_from(ProductModel)} {where(attr('code').eq('a'))}")
        second = build_query(f"{select_from(ProductModel)} {where(attr('code').eq('b'))}")
        assert first.query.endswith("?code1")
        assert second.query.endswith("?code1")
        assert dict(second.query_parameters) == {"code1": "b"}

    def test_result_classes_do_not_leak(self) -> None:
        build_query(str(select_fields_from(ProductModel, field("code", str))))
        query = build_query(str(select_from(ProductModel)))
        assert query.result_class_list == ()

    def test_state_reset_after_build(self) -> None:
        build_query(f"{select_from(ProductModel)} {where(attr('code').eq('a'))}")
        state = current_state()
        assert state.param_counter == 0
        assert state.params == {}
        assert state.result_classes == []

    def test_callable_is_invoked(self) -> None:
        query = build_query(lambda: f"{select_from(ProductModel)} {where(attr('code').eq('a'))}")
        assert query.query == "SELECT {PK} FROM {Product} WHERE {code} =  ?code1"

    def test_parameters_are_read_only(self) -> None:
        query = build_query(f"{select_from(ProductModel)} {where(attr('code').eq('a'))}")
        with pytest.raises(TypeError):
            query.query_parameters["code1"] = "b"  # type: ignore[index]

    def test_state_reset_after_failed_build(self) -> None:
        e, o = aliases("e", "o")
        entries = join(as_(OrderEntryModel, e).on(e["order"], o.pk()))

        def _text() -> str:
            selection = select_fields_from(OrderModel, field("code", str), joins=[entries])
            return f"{where(attr('code').eq('x'))} {selection}"

        with pytest.raises(QueryBuildError, match="joins with no alias"):
            build_query(_text)
        state = current_state()
        assert state.param_counter == 0
        assert state.params == {}
        assert state.result_classes == []

    def test_tasks_do_not_share_state(self) -> None:
        async def _scenario():
            current_state()
            first_waiting = asyncio.Event()
            second_done = asyncio.Event()

            async def _first():
                condition = attr("code").eq("A")
                first_waiting.set()
                await second_done.wait()
                return build_query(f"{select_from(ProductModel)} {where(condition)}")

            async def _second():
                await first_waiting.wait()
                built = build_query(
                    f"{select_from(ProductModel)} {where(attr('name').eq('B'))}"
                )
                second_done.set()
                return built

            return await asyncio.gather(_first(), _second())

        first, second = asyncio.run(_scenario())

        assert first.query.endswith("{code} =  ?code1")
        assert dict(first.query_parameters) == {"code1": "A"}
        assert second.query.endswith("{name} =  ?name1")
        assert dict(second.query_parameters) == {"name1": "B"}

    def test_task_does_not_touch_caller_state(self) -> None:
        attr("code").eq("outer")

        async def _build_inside_task():
            return build_query(f"{select_from(ProductModel)} {where(attr('name').eq('x'))}")

        built = asyncio.run(_build_inside_task())
        assert built.query.endswith("?name1")
        assert current_state().param_counter == 1

    def test_threads_do_not_share_state(self) -> None:
        results: dict[str, str] = {}
        barrier = threading.Barrier(2)

        def _build(name: str) -> None:
            condition = attr(name).eq(name)
            barrier.wait()
            built = build_query(f"{select_from(ProductModel)} {where(condition)}")
            results[name] = built.query

        threads = [
            threading.Thread(target=_build, args=(name,))
            for name in ("code", "name")
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert results["code"].endswith("{code} =  ?code1")
        assert results["name"].endswith("{name} =  ?name1")


class TestFlattenQueryText:
    def test_dedents_and_joins_lines(self) -> None:
        text = """
            SELECT {PK} FROM {Product}
            WHERE {code} IS NULL
        """
        assert flatten_query_text(text) == "SELECT {PK} FROM {Product} WHERE {code} IS NULL"

    def test_single_line_is_unchanged(self) -> None:
        assert flatten_query_text("SELECT {PK} FROM {Product}") == "SELECT {PK} FROM {Product}"

    def test_trailing_space_inside_line_is_kept(self) -> None:
        assert flatten_query_text("WHERE EXISTS ({{x}}) ") == "WHERE EXISTS ({{x}}) "

    def test_empty_text(self) -> None:
        assert flatten_query_text("") == ""
