"""SQL functions that wrap an attribute reference.

Each helper accepts an attribute name or an :class:`Attr` and returns a
new attribute rendered inside the function, e.g. ``count("pk")`` →
``COUNT({pk})``.  Applying a second function replaces the first.
"""

from __future__ import annotations

from dataclasses import replace

from flexiblesearch.constants import AVG, COUNT, MAX, MIN, SUM, UPPER
from flexiblesearch.core.expressions import Attr, as_attr


def _wrap(attribute: str | Attr, function: str) -> Attr:
    return replace(as_attr(attribute), function=function)


def count(attribute: str | Attr) -> Attr:
    return _wrap(attribute, COUNT)


def upper(attribute: str | Attr) -> Attr:
    return _wrap(attribute, UPPER)


def sum_(attribute: str | Attr) -> Attr:
    return _wrap(attribute, SUM)


def min_(attribute: str | Attr) -> Attr:
    return _wrap(attribute, MIN)


def max_(attribute: str | Attr) -> Attr:
    return _wrap(attribute, MAX)


def avg(attribute: str | Attr) -> Attr:
    return _wrap(attribute, AVG)
