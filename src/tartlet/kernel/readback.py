"""Read-back: reify values into eta-long, beta-normal expressions."""

from __future__ import annotations

from tartlet.kernel.context import Ctx
from tartlet.kernel.errors import EvaluationFault
from tartlet.kernel.evaluate import do_apply, do_car, do_cdr, instantiate
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
from tartlet.kernel.values import (
    Closure,
    NApp,
    NCar,
    NCdr,
    Neutral,
    NIndAbsurd,
    NIndNat,
    Normal,
    NReplace,
    NVar,
    VAbsurd,
    VAdd1,
    Value,
    VAtom,
    VEqv,
    VLam,
    VNat,
    VNeutral,
    VPi,
    VQuote,
    VSame,
    VSigma,
    VTrivial,
    VUniverse,
    VZero,
    neutral_var,
)


def read_back(ctx: Ctx, ty: Value, value: Value) -> Expr:
    """Return the normal form of ``value`` viewed at type ``ty``.

    Dispatch is on the type: functions and pairs are eta-expanded, every
    inhabitant of ``Trivial`` is ``sole``, and neutral inhabitants of
    ``Absurd`` are wrapped in ``(the Absurd ...)``.
    """

    match ty, value:
        case VNat(), _:
            return _read_back_nat(ctx, value)
        case VPi(arg_type, ret_type), _:
            name = ctx.fresh(_binder_name(value, ret_type))
            arg = neutral_var(arg_type, name)
            body = read_back(
                ctx.extend_bound(name, arg_type),
                instantiate(ret_type, arg),
                do_apply(value, arg),
            )
            return Lam(name, body)
        case VSigma(car_type, cdr_type), _:
            car = do_car(value)
            cdr = do_cdr(value)
            return Cons(
                read_back(ctx, car_type, car),
                read_back(ctx, instantiate(cdr_type, car), cdr),
            )
        case VTrivial(), _:
            return Sole()
        case VAbsurd(), VNeutral(_, neutral):
            return The(Absurd(), read_back_neutral(ctx, neutral))
        case VEqv(), VSame():
            return Same()
        case VAtom(), VQuote(symbol):
            return Quote(symbol)
        case VUniverse(), _:
            return read_back_type(ctx, value)
        case _, VNeutral(_, neutral):
            return read_back_neutral(ctx, neutral)
    raise EvaluationFault(f"Cannot read back {value!r} at type {ty!r}")


def read_back_type(ctx: Ctx, ty: Value) -> Expr:
    """Read back a value of type ``U``."""

    match ty:
        case VNat():
            return Nat()
        case VAtom():
            return Atom()
        case VTrivial():
            return Trivial()
        case VAbsurd():
            return Absurd()
        case VUniverse():
            return Universe()
        case VPi(arg_type, ret_type):
            name, body = _read_back_binder(ctx, arg_type, ret_type)
            return Pi(name, read_back_type(ctx, arg_type), body)
        case VSigma(car_type, cdr_type):
            name, body = _read_back_binder(ctx, car_type, cdr_type)
            return Sigma(name, read_back_type(ctx, car_type), body)
        case VEqv(eq_ty, from_, to):
            return Eqv(
                read_back_type(ctx, eq_ty),
                read_back(ctx, eq_ty, from_),
                read_back(ctx, eq_ty, to),
            )
        case VNeutral(_, neutral):
            return read_back_neutral(ctx, neutral)
    raise EvaluationFault(f"Not a type: {ty!r}")


def read_back_neutral(ctx: Ctx, neutral: Neutral) -> Expr:
    """Rebuild the elimination expression a neutral term is stuck on."""

    match neutral:
        case NVar(name):
            return Var(name)
        case NApp(rator, rand):
            return App(read_back_neutral(ctx, rator), _read_back_normal(ctx, rand))
        case NCar(pair):
            return Car(read_back_neutral(ctx, pair))
        case NCdr(pair):
            return Cdr(read_back_neutral(ctx, pair))
        case NIndNat(target, motive, base, step):
            return IndNat(
                read_back_neutral(ctx, target),
                _read_back_normal(ctx, motive),
                _read_back_normal(ctx, base),
                _read_back_normal(ctx, step),
            )
        case NReplace(target, motive, base):
            return Replace(
                read_back_neutral(ctx, target),
                _read_back_normal(ctx, motive),
                _read_back_normal(ctx, base),
            )
        case NIndAbsurd(target, motive):
            return IndAbsurd(
                The(Absurd(), read_back_neutral(ctx, target)),
                _read_back_normal(ctx, motive),
            )
    raise EvaluationFault(f"Unknown neutral: {neutral!r}")


# ---- helpers ----------------------------------------------------------------


def _read_back_normal(ctx: Ctx, normal: Normal) -> Expr:
    return read_back(ctx, normal.ty, normal.value)


def _read_back_nat(ctx: Ctx, value: Value) -> Expr:
    layers = 0
    while isinstance(value, VAdd1):
        layers += 1
        value = value.prev
    match value:
        case VZero():
            result: Expr = Zero()
        case VNeutral(_, neutral):
            result = read_back_neutral(ctx, neutral)
        case _:
            raise EvaluationFault(f"Not a natural number: {value!r}")
    for _ in range(layers):
        result = Add1(result)
    return result


def _read_back_binder(ctx: Ctx, arg_type: Value, closure: Closure) -> tuple[str, Expr]:
    """Pick a fresh name for ``closure``'s binder and read back its body as a type."""

    name = ctx.fresh(closure.name)
    body = read_back_type(
        ctx.extend_bound(name, arg_type),
        instantiate(closure, neutral_var(arg_type, name)),
    )
    return name, body


def _binder_name(value: Value, ret_type: Closure) -> str:
    # A lambda keeps its own binder name; neutrals take the Pi binder.
    match value:
        case VLam(body):
            return body.name
    return ret_type.name


__all__ = ["read_back", "read_back_type", "read_back_neutral"]
