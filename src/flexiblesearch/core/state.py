"""Per-query builder state.

While a query is being written, clause helpers allocate parameter names,
bind parameter values and record result classes.  That bookkeeping lives
in a :class:`BuilderState` held in a :class:`contextvars.ContextVar` and
tagged with the asyncio task or thread that owns it, so two threads or
two tasks building queries at the same time never see each other's
parameters.

:func:`flexiblesearch.core.builder.build_query` snapshots the state into
the finished query and then resets it.
"""

from __future__ import annotations

import asyncio
import logging
import threading
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import Any

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class BuilderState:
    """Mutable bookkeeping for the query currently under construction."""

    param_counter: int = 0
    """Last number handed out by :meth:`next_param_index`."""

    params: dict[str, Any] = field(default_factory=dict)
    """Parameter name → bound value, in registration order."""

    result_classes: list[type] = field(default_factory=list)
    """Target classes of the selected fields, in creation order."""

    owner: object = field(default=None, compare=False, repr=False)
    """Task or thread the state belongs to; see :func:`current_state`."""

    def next_param_index(self) -> int:
        """Advance the shared counter and return its new value (1-based)."""
        self.param_counter += 1
        return self.param_counter

    def reset(self) -> None:
        self.param_counter = 0
        self.params.clear()
        self.result_classes.clear()


_current: ContextVar[BuilderState | None] = ContextVar(
    "flexiblesearch_builder_state", default=None,
)


def _owner() -> object:
    try:
        task = asyncio.current_task()
    except RuntimeError:
        task = None
    return task if task is not None else threading.get_ident()


def current_state() -> BuilderState:
    """Return the builder state of the running task or thread.

    A new task starts with a copy of its parent's context, so the state it
    inherits still belongs to the parent.  Such a state is replaced by a
    fresh one the first time the task asks for it.
    """
    owner = _owner()
    state = _current.get()
    if state is None or state.owner != owner:
        state = BuilderState(owner=owner)
        _current.set(state)
    return state


def reset_builder_state() -> None:
    """Discard parameters and result classes collected so far."""
    current_state().reset()
    logger.debug("Builder state reset")
