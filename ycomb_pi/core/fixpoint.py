# ycomb_pi/core/fixpoint.py
"""
Fixed-point combinators.

Python evaluates arguments eagerly, so every self-application below is
guarded behind a lambda and only happens when the generator actually
invokes `self`. Building a fixed point never recurses by itself.

Two families:

    self_apply (M)     M f = f f
        The generator receives itself and must call `self(self)(n - 1)`.

    self_call          uncurried variant of M
        Generator shape `(self, *args) -> result`, called as
        `self(self, n - 1)`.

    Y                  the maker form, itself produced by M:

        Y = M(λm. λf. λa. f (m m f) a)

        Generator shape `self -> arg -> result`, recursive call is plain
        `self(n - 1)`.

    Z                  the eta-expanded textbook form:

        Z f = (λx. f (λv. x x v)) (λx. f (λv. x x v))

Y and Z agree on every input; both satisfy Y(G)(a) == G(Y(G))(a).
"""

from __future__ import annotations

from typing import Any, Callable

Generator = Callable[[Callable], Callable]


def self_apply(f: Callable) -> Any:
    """M: apply `f` to itself."""
    return f(f)


def self_call(g: Callable) -> Callable:
    """
    Close an uncurried generator over itself.

    `g` takes the self-reference as its first positional argument and
    recurses with `self(self, ...)`.
    """
    return lambda *args: g(g, *args)


# The maker `m` is handed to itself by M; `m(m)(f)` rebuilds Y(f) but is
# only reached once the generator calls `self`, since Y(f) is `lambda a`.
Y: Callable[[Generator], Callable] = self_apply(
    lambda m: lambda f: lambda a: f(m(m)(f))(a)
)


def Z(f: Generator) -> Callable:
    """Eta-expanded fixed point: `x(x)` sits behind `lambda v`."""
    return (lambda x: f(lambda v: x(x)(v)))(lambda x: f(lambda v: x(x)(v)))
