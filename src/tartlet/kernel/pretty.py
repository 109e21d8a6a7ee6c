"""Render expressions in the s-expression surface syntax."""

from __future__ import annotations

from tartlet.kernel.syntax import (
    Absurd,
    Add1,
    App,
    Atom,
    Car,
    Cdr,
    Cons,
    Eqv,
    Expr,
    IndAbsurd,
    IndNat,
    Lam,
    Nat,
    Pi,
    Quote,
    Replace,
    Same,
    Sigma,
    Sole,
    The,
    Trivial,
    Universe,
    Var,
    Zero,
)

ARROW_BINDER = "_"

_CONSTANTS: dict[type, str] = {
    Nat: "Nat",
    Zero: "zero",
    Same: "same",
    Trivial: "Trivial",
    Sole: "sole",
    Absurd: "Absurd",
    Atom: "Atom",
    Universe: "U",
}


def _form(head: str, *parts: str) -> str:
    return f"({' '.join((head, *parts))})"


def _pretty_nat(expr: Expr) -> str:
    layers = 0
    while isinstance(expr, Add1):
        layers += 1
        expr = expr.prev
    if isinstance(expr, Zero):
        return str(layers)
    text = pretty(expr)
    for _ in range(layers):
        text = _form("add1", text)
    return text


def pretty(expr: Expr) -> str:
    """Return the surface rendering of ``expr``.

    Nested binders and applications are collapsed into their n-ary forms and
    ``add1`` chains ending in ``zero`` become decimal literals, so the output
    reads back through :func:`tartlet.surface.parse.parse_expr` to ``expr``.
    """

    constant = _CONSTANTS.get(type(expr))
    if constant is not None:
        return constant

    match expr:
        case Var(name):
            return name
        case Pi() if expr.name == ARROW_BINDER:
            parts: list[str] = []
            while isinstance(expr, Pi) and expr.name == ARROW_BINDER:
                parts.append(pretty(expr.arg_type))
                expr = expr.ret_type
            return _form("->", *parts, pretty(expr))
        case Pi():
            binders: list[str] = []
            while isinstance(expr, Pi) and expr.name != ARROW_BINDER:
                binders.append(f"({expr.name} {pretty(expr.arg_type)})")
                expr = expr.ret_type
            return _form("Pi", f"({' '.join(binders)})", pretty(expr))
        case Sigma(name, car_type, cdr_type) if name == ARROW_BINDER:
            return _form("Pair", pretty(car_type), pretty(cdr_type))
        case Sigma():
            binders = []
            while isinstance(expr, Sigma) and expr.name != ARROW_BINDER:
                binders.append(f"({expr.name} {pretty(expr.car_type)})")
                expr = expr.cdr_type
            return _form("Sigma", f"({' '.join(binders)})", pretty(expr))
        case Lam():
            names: list[str] = []
            while isinstance(expr, Lam):
                names.append(expr.name)
                expr = expr.body
            return _form("lambda", f"({' '.join(names)})", pretty(expr))
        case App():
            args: list[str] = []
            while isinstance(expr, App):
                args.append(pretty(expr.rand))
                expr = expr.rator
            return _form(pretty(expr), *reversed(args))
        case Cons(car, cdr):
            return _form("cons", pretty(car), pretty(cdr))
        case Car(pair):
            return _form("car", pretty(pair))
        case Cdr(pair):
            return _form("cdr", pretty(pair))
        case Add1():
            return _pretty_nat(expr)
        case IndNat(target, motive, base, step):
            return _form(
                "ind-Nat", pretty(target), pretty(motive), pretty(base), pretty(step)
            )
        case Eqv(ty, from_, to):
            return _form("=", pretty(ty), pretty(from_), pretty(to))
        case Replace(target, motive, base):
            return _form("replace", pretty(target), pretty(motive), pretty(base))
        case IndAbsurd(target, motive):
            return _form("ind-Absurd", pretty(target), pretty(motive))
        case Quote(symbol):
            return f"'{symbol}"
        case The(ty, value):
            return _form("the", pretty(ty), pretty(value))
    raise TypeError(f"Unexpected expression in pretty: {expr!r}")


__all__ = ["pretty"]
