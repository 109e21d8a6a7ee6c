"""Bidirectional type checking with elaboration.

``infer`` returns ``(the T e')`` where ``T`` is the normal form of the type
and ``e'`` the elaborated expression; ``check`` returns ``e'`` alone. Types
are compared only through :func:`tartlet.kernel.convert.convert`.

Internally inference carries the type as a value. A read-back type names
neutral variables, and those names are only meaningful in the context that
produced them, so types are never read back and evaluated again.
"""

from __future__ import annotations

from tartlet.kernel.context import Ctx
from tartlet.kernel.convert import convert
from tartlet.kernel.errors import CannotInfer, ExpectedShape
from tartlet.kernel.evaluate import (
    do_apply,
    do_car,
    evaluate,
    ind_nat_step_type,
    instantiate,
    motive_type,
)
from tartlet.kernel.pretty import pretty
from tartlet.kernel.readback import read_back_type
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
    Value,
    VAbsurd,
    VAtom,
    VEqv,
    VNat,
    VPi,
    VSigma,
    VTrivial,
    VUniverse,
    VZero,
    neutral_var,
)


def eval_in(ctx: Ctx, expr: Expr) -> Value:
    """Evaluate an already-elaborated ``expr`` in the environment of ``ctx``."""

    return evaluate(ctx.to_env(), expr)


def bind(ctx: Ctx, name: str, ty: Value) -> tuple[Ctx, Value]:
    """Enter a binder: extend ``ctx`` with a fresh variable of type ``ty``.

    The variable is named ``ctx.fresh(name)``. When that differs from
    ``name`` the source name is also defined as the fresh variable, so the
    body still refers to it as ``name`` while every neutral stays distinct
    from the ones it shadows.
    """

    fresh = ctx.fresh(name)
    arg = neutral_var(ty, fresh)
    ctx = ctx.extend_bound(fresh, ty)
    if fresh != name:
        ctx = ctx.extend_defined(name, ty, arg)
    return ctx, arg


def _expected(ctx: Ctx, shape: str, ty: Value, subject: Expr) -> ExpectedShape:
    actual = pretty(read_back_type(ctx, ty))
    return ExpectedShape(
        f"Expected {shape}, got {actual}:\n  term = {pretty(subject)}",
        expected=shape,
        actual=actual,
    )


def _check_universe(ctx: Ctx, expr: Expr) -> Expr:
    return check(ctx, expr, VUniverse())


# ---- inference --------------------------------------------------------------


def infer(ctx: Ctx, expr: Expr) -> The:
    """Infer the type of ``expr`` under ``ctx``.

    Raises:
        NameNotFound: A variable is not in ``ctx``.
        ExpectedShape: A subterm's type has the wrong head.
        ConversionFailed: Two types or endpoints are not the same.
        CannotInfer: ``expr`` is a form that can only be checked.
    """

    ty, expr_out = synth(ctx, expr)
    return The(read_back_type(ctx, ty), expr_out)


def synth(ctx: Ctx, expr: Expr) -> tuple[Value, Expr]:
    """Like :func:`infer`, but return the type as a value."""

    match expr:
        case Var(name):
            return ctx.lookup_type(name), expr
        case Pi(name, arg_type, ret_type) | Sigma(name, arg_type, ret_type):
            arg_out = _check_universe(ctx, arg_type)
            body_ctx, _ = bind(ctx, name, eval_in(ctx, arg_out))
            ret_out = _check_universe(body_ctx, ret_type)
            return VUniverse(), type(expr)(name, arg_out, ret_out)
        case App(rator, rand):
            rator_ty, rator_out = synth(ctx, rator)
            if not isinstance(rator_ty, VPi):
                raise _expected(ctx, "Pi", rator_ty, rator)
            rand_out = check(ctx, rand, rator_ty.arg_type)
            result_ty = instantiate(rator_ty.ret_type, eval_in(ctx, rand_out))
            return result_ty, App(rator_out, rand_out)
        case Car(pair):
            pair_ty, pair_out = _synth_sigma(ctx, pair)
            return pair_ty.car_type, Car(pair_out)
        case Cdr(pair):
            pair_ty, pair_out = _synth_sigma(ctx, pair)
            car_value = do_car(eval_in(ctx, pair_out))
            return instantiate(pair_ty.cdr_type, car_value), Cdr(pair_out)
        case Nat() | Atom() | Trivial() | Absurd() | Universe():
            return VUniverse(), expr
        case IndNat(target, motive, base, step):
            target_out = check(ctx, target, VNat())
            motive_out = check(ctx, motive, motive_type(VNat()))
            motive_value = eval_in(ctx, motive_out)
            base_out = check(ctx, base, do_apply(motive_value, VZero()))
            step_out = check(ctx, step, ind_nat_step_type(motive_value))
            result_ty = do_apply(motive_value, eval_in(ctx, target_out))
            return result_ty, IndNat(target_out, motive_out, base_out, step_out)
        case Eqv(ty, from_, to):
            ty_out = _check_universe(ctx, ty)
            ty_value = eval_in(ctx, ty_out)
            from_out = check(ctx, from_, ty_value)
            to_out = check(ctx, to, ty_value)
            return VUniverse(), Eqv(ty_out, from_out, to_out)
        case Replace(target, motive, base):
            target_ty, target_out = synth(ctx, target)
            if not isinstance(target_ty, VEqv):
                raise _expected(ctx, "=", target_ty, target)
            motive_out = check(ctx, motive, motive_type(target_ty.ty))
            motive_value = eval_in(ctx, motive_out)
            base_out = check(ctx, base, do_apply(motive_value, target_ty.from_))
            result_ty = do_apply(motive_value, target_ty.to)
            return result_ty, Replace(target_out, motive_out, base_out)
        case IndAbsurd(target, motive):
            target_out = check(ctx, target, VAbsurd())
            motive_out = _check_universe(ctx, motive)
            return eval_in(ctx, motive_out), IndAbsurd(target_out, motive_out)
        case The(ty, value):
            ty_out = _check_universe(ctx, ty)
            ty_value = eval_in(ctx, ty_out)
            return ty_value, The(ty_out, check(ctx, value, ty_value))
    raise CannotInfer(
        f"Cannot infer a type; add an annotation with `the`:\n  term = {pretty(expr)}"
    )


def _synth_sigma(ctx: Ctx, pair: Expr) -> tuple[VSigma, Expr]:
    pair_ty, pair_out = synth(ctx, pair)
    if not isinstance(pair_ty, VSigma):
        raise _expected(ctx, "Sigma", pair_ty, pair)
    return pair_ty, pair_out


# ---- checking ---------------------------------------------------------------


def check(ctx: Ctx, expr: Expr, ty: Value) -> Expr:
    """Check ``expr`` against the type ``ty`` and return the elaborated term."""

    match expr:
        case Lam(name, body):
            if not isinstance(ty, VPi):
                raise _expected(ctx, "Pi", ty, expr)
            body_ctx, arg = bind(ctx, name, ty.arg_type)
            body_out = check(body_ctx, body, instantiate(ty.ret_type, arg))
            return Lam(name, body_out)
        case Cons(car, cdr):
            if not isinstance(ty, VSigma):
                raise _expected(ctx, "Sigma", ty, expr)
            car_out = check(ctx, car, ty.car_type)
            cdr_ty = instantiate(ty.cdr_type, eval_in(ctx, car_out))
            return Cons(car_out, check(ctx, cdr, cdr_ty))
        case Zero():
            if not isinstance(ty, VNat):
                raise _expected(ctx, "Nat", ty, expr)
            return expr
        case Add1():
            if not isinstance(ty, VNat):
                raise _expected(ctx, "Nat", ty, expr)
            layers = 0
            while isinstance(expr, Add1):
                layers += 1
                expr = expr.prev
            result = check(ctx, expr, ty)
            for _ in range(layers):
                result = Add1(result)
            return result
        case Same():
            if not isinstance(ty, VEqv):
                raise _expected(ctx, "=", ty, expr)
            convert(ctx, ty.ty, ty.from_, ty.to)
            return expr
        case Sole():
            if not isinstance(ty, VTrivial):
                raise _expected(ctx, "Trivial", ty, expr)
            return expr
        case Quote():
            if not isinstance(ty, VAtom):
                raise _expected(ctx, "Atom", ty, expr)
            return expr

    inferred_ty, expr_out = synth(ctx, expr)
    convert(ctx, VUniverse(), inferred_ty, ty)
    return expr_out


__all__ = ["infer", "synth", "check", "eval_in", "bind"]
