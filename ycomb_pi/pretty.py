# ycomb_pi/pretty.py
"""
Pretty-print helpers for encoded values.

Encoded values are plain closures, so their repr is useless. These
helpers render them by feeding the encoding symbolic arguments:

    >>> from ycomb_pi import to_numeral, make_true, pair
    >>> pretty_numeral(to_numeral(2))
    'λf.λx. f(f(x))'
    >>> pretty_boolean(make_true)
    'TRUE'
    >>> pretty_pair(pair(1, 2))
    '⟨1, 2⟩'
"""

from __future__ import annotations

from typing import Any, Callable

from ycomb_pi.core.booleans import Boolean
from ycomb_pi.core.numerals import Numeral, from_numeral
from ycomb_pi.core.pairs import Pair, pair_to_tuple


def pretty_numeral(n: Numeral, max_apps: int = 16) -> str:
    """
    Render a numeral as its lambda term.

    Terms with more than `max_apps` applications are elided as
    `λf.λx. f^N(x)` instead of spelling every application out.
    """
    count = from_numeral(n)
    if count > max_apps:
        return f"λf.λx. f^{count}(x)"
    body = n(lambda s: f"f({s})", "x")
    return f"λf.λx. {body}"


def pretty_boolean(b: Boolean) -> str:
    return b("TRUE", "FALSE")


def pretty_pair(p: Pair, render: Callable[[Any], str] = repr) -> str:
    a, b = pair_to_tuple(p)
    return f"⟨{render(a)}, {render(b)}⟩"
