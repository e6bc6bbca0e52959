"""Shared pytest fixtures and configuration for the flexiblesearch test suite.

Guidelines
----------
* No platform access: model classes are plain stubs (see ``model_stubs``).
* Every test starts from a clean builder state.
"""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from flexiblesearch.core.state import reset_builder_state


@pytest.fixture(autouse=True)
def _clean_builder_state() -> Iterator[None]:
    reset_builder_state()
    yield
    reset_builder_state()
