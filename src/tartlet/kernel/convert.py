"""Alpha-equivalence and conversion checking."""

from __future__ import annotations

from itertools import count
from typing import Iterator, TypeAlias

from tartlet.kernel.context import Ctx
from tartlet.kernel.errors import ConversionFailed
from tartlet.kernel.pretty import pretty
from tartlet.kernel.readback import read_back, read_back_type
from tartlet.kernel.syntax import (
    Absurd,
    Add1,
    App,
    Car,
    Cdr,
    Cons,
    Eqv,
    Expr,
    IndAbsurd,
    IndNat,
    Lam,
    Pi,
    Quote,
    Replace,
    Sigma,
    The,
    Var,
)
from tartlet.kernel.values import Value

Renaming: TypeAlias = dict[str, int]


def alpha_equiv(left: Expr, right: Expr) -> bool:
    """Return ``True`` when ``left`` and ``right`` differ only in bound names."""

    return _alpha_equiv(left, right, {}, {}, count())


def _alpha_equiv(
    left: Expr,
    right: Expr,
    lnames: Renaming,
    rnames: Renaming,
    symbols: Iterator[int],
) -> bool:
    # Both sides of a binder pair are renamed to the same fresh symbol.
    def under(lname: str, lbody: Expr, rname: str, rbody: Expr) -> bool:
        symbol = next(symbols)
        return _alpha_equiv(
            lbody,
            rbody,
            {**lnames, lname: symbol},
            {**rnames, rname: symbol},
            symbols,
        )

    def same(*pairs: tuple[Expr, Expr]) -> bool:
        return all(_alpha_equiv(a, b, lnames, rnames, symbols) for a, b in pairs)

    while isinstance(left, Add1) and isinstance(right, Add1):
        left, right = left.prev, right.prev

    match left, right:
        case Var(x), Var(y):
            match lnames.get(x), rnames.get(y):
                case None, None:
                    return x == y
                case int(i), int(j):
                    return i == j
                case _:
                    return False
        case Pi(x, a1, b1), Pi(y, a2, b2):
            return same((a1, a2)) and under(x, b1, y, b2)
        case Sigma(x, a1, d1), Sigma(y, a2, d2):
            return same((a1, a2)) and under(x, d1, y, d2)
        case Lam(x, b1), Lam(y, b2):
            return under(x, b1, y, b2)
        case App(f1, a1), App(f2, a2):
            return same((f1, f2), (a1, a2))
        case Cons(a1, d1), Cons(a2, d2):
            return same((a1, a2), (d1, d2))
        case Car(p1), Car(p2):
            return same((p1, p2))
        case Cdr(p1), Cdr(p2):
            return same((p1, p2))
        case IndNat(t1, m1, b1, s1), IndNat(t2, m2, b2, s2):
            return same((t1, t2), (m1, m2), (b1, b2), (s1, s2))
        case Eqv(a1, f1, t1), Eqv(a2, f2, t2):
            return same((a1, a2), (f1, f2), (t1, t2))
        case Replace(t1, m1, b1), Replace(t2, m2, b2):
            return same((t1, t2), (m1, m2), (b1, b2))
        case IndAbsurd(t1, m1), IndAbsurd(t2, m2):
            return same((t1, t2), (m1, m2))
        case Quote(s1), Quote(s2):
            return s1 == s2
        case The(Absurd(), _), The(Absurd(), _):
            # All neutral proofs of Absurd are identified.
            return True
        case The(t1, e1), The(t2, e2):
            return same((t1, t2), (e1, e2))
    # Remaining forms carry no subterms.
    return type(left) is type(right)


def is_convertible(ctx: Ctx, ty: Value, left: Value, right: Value) -> bool:
    """Decide whether ``left`` and ``right`` are the same inhabitant of ``ty``."""

    return alpha_equiv(read_back(ctx, ty, left), read_back(ctx, ty, right))


def convert(ctx: Ctx, ty: Value, left: Value, right: Value) -> None:
    """Raise :class:`ConversionFailed` unless ``left`` and ``right`` are convertible."""

    left_nf = read_back(ctx, ty, left)
    right_nf = read_back(ctx, ty, right)
    if not alpha_equiv(left_nf, right_nf):
        raise ConversionFailed(
            "Not the same:\n"
            f"  type  = {pretty(read_back_type(ctx, ty))}\n"
            f"  left  = {pretty(left_nf)}\n"
            f"  right = {pretty(right_nf)}",
            left=pretty(left_nf),
            right=pretty(right_nf),
        )


__all__ = ["alpha_equiv", "is_convertible", "convert"]
