"""Helpers for building expressions and common derived forms."""

from __future__ import annotations

from typing import Sequence

from tartlet.kernel.syntax import (
    Add1,
    App,
    Expr,
    IndNat,
    Lam,
    Nat,
    Pi,
    Sigma,
    Var,
    Zero,
)

UNUSED = "_"


def arrow(*types: Expr) -> Expr:
    """Non-dependent function type ``A -> B -> ... -> R`` (right nested)."""

    if len(types) < 2:
        raise ValueError("arrow needs at least a domain and a codomain")
    result = types[-1]
    for ty in reversed(types[:-1]):
        result = Pi(UNUSED, ty, result)
    return result


def pair_type(car_type: Expr, cdr_type: Expr) -> Sigma:
    """Non-dependent pair type."""

    return Sigma(UNUSED, car_type, cdr_type)


def pis(binders: Sequence[tuple[str, Expr]], body: Expr) -> Expr:
    """Nest ``Pi`` binders ordered outermost -> innermost."""

    result = body
    for name, ty in reversed(binders):
        result = Pi(name, ty, result)
    return result


def lambdas(names: Sequence[str], body: Expr) -> Expr:
    result = body
    for name in reversed(names):
        result = Lam(name, result)
    return result


def apply(fn: Expr, *args: Expr) -> Expr:
    result = fn
    for arg in args:
        result = App(result, arg)
    return result


def numeral(value: int) -> Expr:
    """Return the canonical term representing the natural number ``value``."""

    if value < 0:
        raise ValueError("Natural numbers must be non-negative")
    term: Expr = Zero()
    for _ in range(value):
        term = Add1(term)
    return term


def numeral_value(term: Expr) -> int | None:
    """Inverse of :func:`numeral`; ``None`` if ``term`` is not a literal."""

    count = 0
    while isinstance(term, Add1):
        count += 1
        term = term.prev
    return count if isinstance(term, Zero) else None


def plus() -> Expr:
    """
    plus : Nat -> Nat -> Nat
    Addition by induction on the first argument.

    plus n k = ind-Nat n (λ_. Nat) k (λprev almost. add1 almost)
    """
    return lambdas(
        ["n", "k"],
        IndNat(
            Var("n"),
            Lam(UNUSED, Nat()),
            Var("k"),
            lambdas(["prev", "almost"], Add1(Var("almost"))),
        ),
    )


__all__ = [
    "arrow",
    "pair_type",
    "pis",
    "lambdas",
    "apply",
    "numeral",
    "numeral_value",
    "plus",
]
