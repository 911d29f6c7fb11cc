# ycomb_pi/programs.py
"""
Demonstration programs built with the fixed-point combinators.

Each program is written as an "almost recursive" generator that takes its
own recursive call as a parameter. None of them refers to itself by name.

    is_even_step     native ints and bools, no encoding
    fibonacci_step   Church numerals end to end; 1-indexed with
                     fib(0) = fib(1) = 1

Fixed points:

    is_even               Y(is_even_step)
    is_even_self_applied  M with `self(self)(n - 1)` at the call site
    is_even_uncurried     self_call with `self(self, n - 1)`
    fibonacci             Y(fibonacci_step)
    fibonacci_z           Z(fibonacci_step)
"""

from __future__ import annotations

from typing import Callable

from ycomb_pi.core.arith import less_or_equal, predecessor
from ycomb_pi.core.booleans import if_then_else
from ycomb_pi.core.fixpoint import Y, Z, self_apply, self_call
from ycomb_pi.core.numerals import Numeral, add, one


# ---------------------------------------------------------------------------
# is_even
# ---------------------------------------------------------------------------


def is_even_step(self: Callable[[int], bool]) -> Callable[[int], bool]:
    return lambda n: True if n == 0 else not self(n - 1)


is_even: Callable[[int], bool] = Y(is_even_step)

is_even_self_applied: Callable[[int], bool] = self_apply(
    lambda self: lambda n: True if n == 0 else not self(self)(n - 1)
)

is_even_uncurried: Callable[[int], bool] = self_call(
    lambda self, n: True if n == 0 else not self(self, n - 1)
)


# ---------------------------------------------------------------------------
# fibonacci
# ---------------------------------------------------------------------------


def fibonacci_step(self: Callable[[Numeral], Numeral]) -> Callable[[Numeral], Numeral]:
    """
    Both branches are thunks: the recursive branch must not be evaluated
    when `a <= 1`, or the recursion never bottoms out.
    """
    return lambda a: if_then_else(
        less_or_equal(a, one),
        lambda: one,
        lambda: add(self(predecessor(a)), self(predecessor(predecessor(a)))),
    )


fibonacci: Callable[[Numeral], Numeral] = Y(fibonacci_step)

fibonacci_z: Callable[[Numeral], Numeral] = Z(fibonacci_step)
