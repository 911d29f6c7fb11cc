# ycomb_pi/core/pairs.py
"""
Ordered pairs as closures.

    pair(a, b)(f) = f(a, b)

Projections hand the pair a boolean selector.
"""

from __future__ import annotations

from typing import Any, Callable

from .booleans import make_false, make_true

Pair = Callable[[Callable[[Any, Any], Any]], Any]


def pair(a, b) -> Pair:
    return lambda f: f(a, b)


def first(p: Pair):
    return p(make_true)


def second(p: Pair):
    return p(make_false)


def pair_to_tuple(p: Pair) -> tuple:
    return p(lambda a, b: (a, b))
