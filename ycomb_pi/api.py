# ycomb_pi/api.py
"""
High-level ycomb_pi API helpers.

This module provides a small, stable surface for working with named
programs and Church-encoded inputs:

    - ints_to_numerals(xs)       : [int] -> [Numeral]
    - numerals_to_ints(ns)       : [Numeral] -> [int]
    - run_named_program(name, xs): look up a named program and run it
"""

from __future__ import annotations

from typing import Iterable, List

from ycomb_pi.core.numerals import Numeral, from_numeral, to_numeral
from ycomb_pi.program_registry import Result, get_program


def ints_to_numerals(xs: Iterable[int]) -> List[Numeral]:
    return [to_numeral(x) for x in xs]


def numerals_to_ints(ns: Iterable[Numeral]) -> List[int]:
    return [from_numeral(n) for n in ns]


def run_named_program(name: str, xs: List[int]) -> Result:
    """
    Look up a named program and run it on native ints.

    Args:
        name: Registered program name (e.g. "fibonacci").
        xs:   Positional arguments; length must match the program's arity.

    Returns:
        The program's native result (int or bool).

    Raises:
        KeyError    if no such program is registered.
        ValueError  if len(xs) does not match the program's arity, or an
                    argument is negative where a numeral is expected.
        TypeError   if an argument is not an int.
    """
    prog = get_program(name)
    if prog is None:
        raise KeyError(f"No program named {name!r} is registered")

    if len(xs) != prog.arity:
        raise ValueError(
            f"Program {name!r} takes {prog.arity} argument(s), got {len(xs)}"
        )

    return prog.fn(*xs)
