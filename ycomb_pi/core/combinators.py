# ycomb_pi/core/combinators.py
"""
Applicator primitives.

Single-expression combinators everything else is built from:

    identity  I x     = x
    const2    K a b   = a
    compose   B f g x = f (g x)

Plus the two helpers that stand in for lazy evaluation on a strict host:

    delay(fn, *args)  -> zero-argument thunk
    force(thunk)      -> thunk()
"""

from __future__ import annotations

from typing import Any, Callable

Thunk = Callable[[], Any]


def identity(x):
    return x


def const2(a, b):
    """K: select the first of two arguments."""
    return a


def compose(f: Callable, g: Callable) -> Callable:
    """B: compose(f, g)(x) == f(g(x))."""
    return lambda x: f(g(x))


def delay(fn: Callable, *args) -> Thunk:
    """Wrap `fn(*args)` so it is not evaluated until forced."""
    return lambda: fn(*args)


def force(thunk: Thunk):
    return thunk()
