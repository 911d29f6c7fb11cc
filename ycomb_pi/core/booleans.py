# ycomb_pi/core/booleans.py
"""
Selector-encoded booleans.

A boolean is a two-argument function returning one of its arguments:

    make_true(a, b)  = a
    make_false(a, b) = b

Both arguments are evaluated by Python before the call, so branches with
work in them are passed as thunks and forced after selection; see
if_then_else.
"""

from __future__ import annotations

from typing import Any, Callable

from .combinators import Thunk, const2, force

Boolean = Callable[[Any, Any], Any]


def make_true(a, b):
    return const2(a, b)


def make_false(a, b):
    return b


def not_(p: Boolean) -> Boolean:
    return p(make_false, make_true)


def and_(p: Boolean, q: Boolean) -> Boolean:
    return p(q, make_false)


def or_(p: Boolean, q: Boolean) -> Boolean:
    return p(make_true, q)


def if_then_else(p: Boolean, then_branch: Thunk, else_branch: Thunk):
    """Select a thunk with `p` and force only the selected one."""
    return force(p(then_branch, else_branch))


# ---------------------------------------------------------------------------
# Native projection
# ---------------------------------------------------------------------------


def to_boolean(value: bool) -> Boolean:
    if not isinstance(value, bool):
        raise TypeError(f"to_boolean expects bool, got {type(value).__name__}")
    return make_true if value else make_false


def from_boolean(p: Boolean) -> bool:
    return p(True, False)
