"""Evaluation of expressions into values, and the eliminator executors."""

from __future__ import annotations

from tartlet.kernel.env import Env
from tartlet.kernel.errors import EvaluationFault
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
    ConstantClosure,
    IndNatStepClosure,
    NApp,
    NCar,
    NCdr,
    NIndAbsurd,
    NIndNat,
    Normal,
    NReplace,
    SyntaxClosure,
    VAbsurd,
    VAdd1,
    Value,
    VAtom,
    VEqv,
    VLam,
    VNat,
    VNeutral,
    VPair,
    VPi,
    VQuote,
    VSame,
    VSigma,
    VSole,
    VTrivial,
    VUniverse,
    VZero,
)


def instantiate(closure: Closure, arg: Value) -> Value:
    """Supply ``arg`` for the variable bound by ``closure``."""

    match closure:
        case SyntaxClosure(env, name, body):
            return evaluate(env.extend(name, arg), body)
        case ConstantClosure(_, value):
            return value
        case IndNatStepClosure(motive):
            return VPi(
                do_apply(motive, arg),
                ConstantClosure("almost", do_apply(motive, VAdd1(arg))),
            )
    raise EvaluationFault(f"Unknown closure: {closure!r}")


def motive_type(domain: Value) -> VPi:
    """The type ``Pi (_ : domain). U`` of a motive over ``domain``."""

    return VPi(domain, ConstantClosure("_", VUniverse()))


def ind_nat_step_type(motive: Value) -> VPi:
    """``Pi (prev : Nat). Pi (almost : motive prev). motive (add1 prev)``."""

    return VPi(VNat(), IndNatStepClosure(motive))


def evaluate(env: Env, expr: Expr) -> Value:
    """Evaluate ``expr`` under ``env``.

    ``expr`` must already have been checked; evaluation of an ill-typed
    expression raises :class:`EvaluationFault`.
    """

    match expr:
        case Var(name):
            return env.lookup(name)
        case Pi(name, arg_type, ret_type):
            return VPi(evaluate(env, arg_type), SyntaxClosure(env, name, ret_type))
        case Lam(name, body):
            return VLam(SyntaxClosure(env, name, body))
        case App(rator, rand):
            return do_apply(evaluate(env, rator), evaluate(env, rand))
        case Sigma(name, car_type, cdr_type):
            return VSigma(
                evaluate(env, car_type), SyntaxClosure(env, name, cdr_type)
            )
        case Cons(car, cdr):
            return VPair(evaluate(env, car), evaluate(env, cdr))
        case Car(pair):
            return do_car(evaluate(env, pair))
        case Cdr(pair):
            return do_cdr(evaluate(env, pair))
        case Nat():
            return VNat()
        case Zero():
            return VZero()
        case Add1():
            # Peel the whole add1 chain so long literals do not recurse.
            layers = 0
            while isinstance(expr, Add1):
                layers += 1
                expr = expr.prev
            result = evaluate(env, expr)
            for _ in range(layers):
                result = VAdd1(result)
            return result
        case IndNat(target, motive, base, step):
            return do_ind_nat(
                evaluate(env, target),
                evaluate(env, motive),
                evaluate(env, base),
                evaluate(env, step),
            )
        case Eqv(ty, from_, to):
            return VEqv(evaluate(env, ty), evaluate(env, from_), evaluate(env, to))
        case Same():
            return VSame()
        case Replace(target, motive, base):
            return do_replace(
                evaluate(env, target), evaluate(env, motive), evaluate(env, base)
            )
        case Trivial():
            return VTrivial()
        case Sole():
            return VSole()
        case Absurd():
            return VAbsurd()
        case IndAbsurd(target, motive):
            return do_ind_absurd(evaluate(env, target), evaluate(env, motive))
        case Atom():
            return VAtom()
        case Quote(symbol):
            return VQuote(symbol)
        case Universe():
            return VUniverse()
        case The(_, value):
            return evaluate(env, value)
    raise EvaluationFault(f"Unexpected expression in evaluate: {expr!r}")


# ---- executors --------------------------------------------------------------


def do_apply(fun: Value, arg: Value) -> Value:
    match fun:
        case VLam(body):
            return instantiate(body, arg)
        case VNeutral(VPi(arg_type, ret_type), neutral):
            return VNeutral(
                instantiate(ret_type, arg), NApp(neutral, Normal(arg_type, arg))
            )
    raise EvaluationFault(f"Cannot apply non-function value: {fun!r}")


def do_car(pair: Value) -> Value:
    match pair:
        case VPair(car, _):
            return car
        case VNeutral(VSigma(car_type, _), neutral):
            return VNeutral(car_type, NCar(neutral))
    raise EvaluationFault(f"car of non-pair value: {pair!r}")


def do_cdr(pair: Value) -> Value:
    match pair:
        case VPair(_, cdr):
            return cdr
        case VNeutral(VSigma(_, cdr_type), neutral):
            return VNeutral(instantiate(cdr_type, do_car(pair)), NCdr(neutral))
    raise EvaluationFault(f"cdr of non-pair value: {pair!r}")


def do_ind_nat(target: Value, motive: Value, base: Value, step: Value) -> Value:
    """Run ``ind-Nat``.

    The recursion ``step prev (ind-Nat prev ...)`` is unfolded with an explicit
    list of predecessors: the bottom of the add1 chain is reduced first and the
    step is then applied once per layer, innermost first.
    """

    prevs: list[Value] = []
    while isinstance(target, VAdd1):
        prevs.append(target.prev)
        target = target.prev

    match target:
        case VZero():
            result = base
        case VNeutral(VNat(), neutral):
            result = VNeutral(
                do_apply(motive, target),
                NIndNat(
                    neutral,
                    Normal(motive_type(VNat()), motive),
                    Normal(do_apply(motive, VZero()), base),
                    Normal(ind_nat_step_type(motive), step),
                ),
            )
        case _:
            raise EvaluationFault(f"ind-Nat target is not a Nat: {target!r}")

    for prev in reversed(prevs):
        result = do_apply(do_apply(step, prev), result)
    return result


def do_replace(target: Value, motive: Value, base: Value) -> Value:
    match target:
        case VSame():
            return base
        case VNeutral(VEqv(ty, from_, to), neutral):
            return VNeutral(
                do_apply(motive, to),
                NReplace(
                    neutral,
                    Normal(motive_type(ty), motive),
                    Normal(do_apply(motive, from_), base),
                ),
            )
    raise EvaluationFault(f"replace target is not an equality: {target!r}")


def do_ind_absurd(target: Value, motive: Value) -> Value:
    match target:
        case VNeutral(VAbsurd(), neutral):
            return VNeutral(motive, NIndAbsurd(neutral, Normal(VUniverse(), motive)))
    raise EvaluationFault(f"ind-Absurd target is not neutral: {target!r}")


__all__ = [
    "evaluate",
    "instantiate",
    "motive_type",
    "ind_nat_step_type",
    "do_apply",
    "do_car",
    "do_cdr",
    "do_ind_nat",
    "do_replace",
    "do_ind_absurd",
]
