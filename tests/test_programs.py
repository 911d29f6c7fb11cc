"""
Acceptance programs: is_even through every fixed-point family, and
Fibonacci on Church numerals.

Fibonacci is 1-indexed: fib(0) == fib(1) == 1.
"""

import pytest

from ycomb_pi import (
    Y,
    fibonacci,
    fibonacci_z,
    from_numeral,
    is_even,
    is_even_self_applied,
    is_even_uncurried,
    to_numeral,
)
from ycomb_pi.programs import fibonacci_step, is_even_step

IS_EVEN_VARIANTS = [is_even, is_even_self_applied, is_even_uncurried]

FIB = [1, 1, 2, 3, 5, 8, 13, 21]


@pytest.mark.parametrize("even", IS_EVEN_VARIANTS)
@pytest.mark.parametrize("n,expected", [(0, True), (4, True), (5, False), (7, False)])
def test_is_even_documented_cases(even, n, expected):
    assert even(n) is expected


@pytest.mark.parametrize("n", range(0, 30))
def test_is_even_variants_agree(n):
    results = {even(n) for even in IS_EVEN_VARIANTS}
    assert results == {n % 2 == 0}


def test_is_even_step_is_not_recursive_by_itself():
    # With a stub for the recursive call, the generator does a single step.
    step = is_even_step(lambda n: "stub")
    assert step(0) is True
    assert step(3) is False  # not "stub"


@pytest.mark.parametrize("n", range(len(FIB)))
def test_fibonacci(n):
    assert from_numeral(fibonacci(to_numeral(n))) == FIB[n]


@pytest.mark.parametrize("n,expected", [(0, 1), (1, 1), (4, 5), (5, 8)])
def test_fibonacci_documented_cases(n, expected):
    assert from_numeral(fibonacci(to_numeral(n))) == expected


@pytest.mark.parametrize("n", range(0, 7))
def test_fibonacci_z_agrees_with_y(n):
    assert from_numeral(fibonacci_z(to_numeral(n))) == from_numeral(fibonacci(to_numeral(n)))


def test_fibonacci_fresh_fixed_point():
    fib = Y(fibonacci_step)
    assert from_numeral(fib(to_numeral(6))) == 13
