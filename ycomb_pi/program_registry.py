# ycomb_pi/program_registry.py
"""
Simple in-memory registry for named ycomb_pi programs.

This is a tiny helper layer so higher-level APIs (and the CLI) can talk
in terms of string-named programs like "fibonacci" instead of importing
combinator values directly.

Design:

- Registry is just a dict[str, Program].
- A Program carries its arity and a host-level `fn` that takes native
  ints and returns a JSON-compatible value (int or bool). Conversion to
  and from the Church encoding happens inside `fn`.
- Built-ins are seeded lazily on first lookup, which avoids import-order
  issues and lets tests start from a clean registry.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Union

from ycomb_pi import call_coverage
from ycomb_pi.core.arith import is_zero, less_or_equal, predecessor, subtract
from ycomb_pi.core.booleans import from_boolean
from ycomb_pi.core.fixpoint import Y, Z
from ycomb_pi.core.numerals import add, from_numeral, successor, to_numeral
from ycomb_pi.programs import (
    fibonacci_step,
    is_even_self_applied,
    is_even_step,
    is_even_uncurried,
)

Result = Union[int, bool]


@dataclass(frozen=True)
class Program:
    name: str
    arity: int
    fn: Callable[..., Result]
    description: str = ""


# Internal registry mapping string names -> Program.
_REGISTRY: Dict[str, Program] = {}
_seeded = False


# ---------------------------------------------------------------------------
# Core registry operations
# ---------------------------------------------------------------------------

def register_program(program: Program) -> None:
    """Register (or overwrite) a program under `program.name`."""
    _REGISTRY[program.name] = program


def get_program(name: str) -> Program | None:
    """
    Look up a named program by string name.

    Returns:
        Program if present, or None if not registered.
    """
    _ensure_defaults()
    return _REGISTRY.get(name)


def has_program(name: str) -> bool:
    _ensure_defaults()
    return name in _REGISTRY


def clear_registry() -> None:
    """
    Remove all registered programs.

    The next lookup seeds the built-ins again.
    """
    global _seeded
    _REGISTRY.clear()
    _seeded = False


def list_program_names() -> list[str]:
    """Return all registered program names, sorted for stability."""
    _ensure_defaults()
    return sorted(_REGISTRY.keys())


# ---------------------------------------------------------------------------
# Default / built-in programs
# ---------------------------------------------------------------------------

def _numeric(op: Callable) -> Callable[..., int]:
    return lambda *xs: from_numeral(op(*(to_numeral(x) for x in xs)))


def _predicate(op: Callable) -> Callable[..., bool]:
    return lambda *xs: from_boolean(op(*(to_numeral(x) for x in xs)))


def _is_even(n: int) -> bool:
    # Y rebuilds the fixed point per run so counted() picks up the calls.
    return Y(call_coverage.counted("is-even", is_even_step))(n)


def _fibonacci(fix: Callable, name: str) -> Callable[[int], int]:
    def run(n: int) -> int:
        fib = fix(call_coverage.counted(name, fibonacci_step))
        return from_numeral(fib(to_numeral(n)))

    return run


def _builtin_programs() -> list[Program]:
    return [
        Program("is-even", 1, _is_even, "parity of a native int via Y"),
        Program("is-even-m", 1, is_even_self_applied, "parity via explicit self(self)"),
        Program("is-even-uncurried", 1, is_even_uncurried, "parity via self(self, n - 1)"),
        Program("fibonacci", 1, _fibonacci(Y, "fibonacci"), "1-indexed Fibonacci on Church numerals via Y"),
        Program("fibonacci-z", 1, _fibonacci(Z, "fibonacci-z"), "1-indexed Fibonacci on Church numerals via Z"),
        Program("successor", 1, _numeric(successor), "n + 1"),
        Program("predecessor", 1, _numeric(predecessor), "max(n - 1, 0)"),
        Program("add", 2, _numeric(add), "n + k"),
        Program("subtract", 2, _numeric(subtract), "max(n - k, 0)"),
        Program("is-zero", 1, _predicate(is_zero), "n == 0"),
        Program("less-or-equal", 2, _predicate(less_or_equal), "n <= k"),
    ]


def _ensure_defaults() -> None:
    """
    Lazily seed built-in named programs.

    Programs registered under a built-in name before seeding keep their
    registration.
    """
    global _seeded
    if _seeded:
        return
    for program in _builtin_programs():
        _REGISTRY.setdefault(program.name, program)
    _seeded = True
