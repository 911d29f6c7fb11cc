# ycomb_pi/__init__.py
"""
ycomb_pi public API surface.

Recursion without names: fixed-point combinators, and the pure-function
encodings of booleans, pairs and natural numbers needed to run real
programs on top of them.

    - Applicators: identity, const2, compose, delay, force
    - Fixed points: self_apply (M), self_call, Y, Z
    - Booleans: make_true, make_false, not_, and_, or_, if_then_else,
                to_boolean, from_boolean
    - Pairs: pair, first, second, pair_to_tuple
    - Numerals: zero, one .. five, successor, add, to_numeral,
                from_numeral
    - Arithmetic: predecessor, subtract, is_zero, less_or_equal
    - Programs: is_even, is_even_self_applied, is_even_uncurried,
                fibonacci, fibonacci_z
    - High-level API: ints_to_numerals, numerals_to_ints,
                      run_named_program
"""

from __future__ import annotations

from .core.combinators import identity, const2, compose, delay, force
from .core.fixpoint import self_apply, self_call, Y, Z

# ---------------------------------------------------------------------------
# Encodings
# ---------------------------------------------------------------------------

from .core.booleans import (
    make_true,
    make_false,
    not_,
    and_,
    or_,
    if_then_else,
    to_boolean,
    from_boolean,
)
from .core.pairs import pair, first, second, pair_to_tuple
from .core.numerals import (
    zero,
    one,
    two,
    three,
    four,
    five,
    successor,
    add,
    to_numeral,
    from_numeral,
)
from .core.arith import predecessor, subtract, is_zero, less_or_equal

# ---------------------------------------------------------------------------
# Programs and high-level API
# ---------------------------------------------------------------------------

from .programs import (
    is_even,
    is_even_self_applied,
    is_even_uncurried,
    fibonacci,
    fibonacci_z,
)
from .api import ints_to_numerals, numerals_to_ints, run_named_program


__all__ = [
    # applicators
    "identity",
    "const2",
    "compose",
    "delay",
    "force",

    # fixed points
    "self_apply",
    "self_call",
    "Y",
    "Z",

    # booleans
    "make_true",
    "make_false",
    "not_",
    "and_",
    "or_",
    "if_then_else",
    "to_boolean",
    "from_boolean",

    # pairs
    "pair",
    "first",
    "second",
    "pair_to_tuple",

    # numerals
    "zero",
    "one",
    "two",
    "three",
    "four",
    "five",
    "successor",
    "add",
    "to_numeral",
    "from_numeral",

    # arithmetic
    "predecessor",
    "subtract",
    "is_zero",
    "less_or_equal",

    # programs
    "is_even",
    "is_even_self_applied",
    "is_even_uncurried",
    "fibonacci",
    "fibonacci_z",

    # high-level API
    "ints_to_numerals",
    "numerals_to_ints",
    "run_named_program",
]
