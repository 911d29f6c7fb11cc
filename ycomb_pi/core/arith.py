# ycomb_pi/core/arith.py
"""
Predecessor, subtraction and comparison on Church numerals.

predecessor uses the pair-shift trick: starting from (0, 0), apply

    shift(a, b) = (b, b + 1)

n times. The pair ends at (n - 1, n) for n >= 1 and stays at (0, 0) for
n = 0, so predecessor(zero) is zero. Everything here is total; nothing
goes below zero.
"""

from __future__ import annotations

from .booleans import Boolean, make_false, make_true
from .numerals import Numeral, successor, zero
from .pairs import Pair, first, pair, second


def _shift(p: Pair) -> Pair:
    b = second(p)
    return pair(b, successor(b))


def predecessor(n: Numeral) -> Numeral:
    return first(n(_shift, pair(zero, zero)))


def subtract(n: Numeral, k: Numeral) -> Numeral:
    """Apply predecessor to `n`, `k` times (truncated at zero)."""
    return k(predecessor, n)


def is_zero(n: Numeral) -> Boolean:
    return n(lambda _: make_false, make_true)


def less_or_equal(n: Numeral, k: Numeral) -> Boolean:
    return is_zero(subtract(n, k))
