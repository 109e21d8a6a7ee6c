from tartlet.builders import arrow, lambdas, numeral, pair_type
from tartlet.kernel.context import Ctx
from tartlet.kernel.env import Env
from tartlet.kernel.evaluate import evaluate
from tartlet.kernel.readback import read_back, read_back_type
from tartlet.kernel.syntax import (
    Absurd,
    Add1,
    App,
    Atom,
    Car,
    Cdr,
    Cons,
    Eqv,
    IndAbsurd,
    IndNat,
    Lam,
    Nat,
    Pi,
    Quote,
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
    VAbsurd,
    VAtom,
    VEqv,
    VNat,
    VQuote,
    VSame,
    VTrivial,
    VUniverse,
    VZero,
    neutral_var,
)


def _type(expr):
    return evaluate(Env(), expr)


def test_read_back_numeral() -> None:
    value = evaluate(Env(), numeral(3))
    assert read_back(Ctx(), VNat(), value) == numeral(3)


def test_read_back_large_numeral() -> None:
    value = evaluate(Env(), numeral(4000))
    result = read_back(Ctx(), VNat(), value)
    count = 0
    while isinstance(result, Add1):
        count += 1
        result = result.prev
    assert count == 4000 and result == Zero()


def test_read_back_simple_values() -> None:
    assert read_back(Ctx(), VAtom(), VQuote("a")) == Quote("a")
    assert read_back(Ctx(), VEqv(VNat(), VZero(), VZero()), VSame()) == Same()
    assert read_back(Ctx(), VUniverse(), VNat()) == Nat()
    assert read_back(Ctx(), VUniverse(), VUniverse()) == Universe()


def test_trivial_is_eta_expanded_to_sole() -> None:
    ctx = Ctx().extend_bound("t", VTrivial())
    assert read_back(ctx, VTrivial(), neutral_var(VTrivial(), "t")) == Sole()


def test_neutral_absurd_is_ascribed() -> None:
    ctx = Ctx().extend_bound("nope", VAbsurd())
    value = neutral_var(VAbsurd(), "nope")
    assert read_back(ctx, VAbsurd(), value) == The(Absurd(), Var("nope"))


def test_function_is_eta_expanded() -> None:
    fn_ty = _type(arrow(Nat(), Nat()))
    ctx = Ctx().extend_bound("f", fn_ty)
    result = read_back(ctx, fn_ty, neutral_var(fn_ty, "f"))
    assert result == Lam("_", App(Var("f"), Var("_")))


def test_pair_is_eta_expanded() -> None:
    ty = _type(pair_type(Nat(), Atom()))
    ctx = Ctx().extend_bound("p", ty)
    result = read_back(ctx, ty, neutral_var(ty, "p"))
    assert result == Cons(Car(Var("p")), Cdr(Var("p")))


def test_read_back_freshens_binder_against_context() -> None:
    ctx = Ctx().extend_bound("x", VNat())
    identity = evaluate(Env(), Lam("x", Var("x")))
    result = read_back(ctx, _type(arrow(Nat(), Nat())), identity)
    assert result == Lam("x*", Var("x*"))


def test_read_back_normalizes_under_binders() -> None:
    # (lambda (x) ((lambda (y) y) x)) reads back as (lambda (x) x)
    value = evaluate(Env(), Lam("x", App(Lam("y", Var("y")), Var("x"))))
    assert read_back(Ctx(), _type(arrow(Nat(), Nat())), value) == Lam("x", Var("x"))


def test_read_back_dependent_types() -> None:
    ty = Pi("A", Universe(), Pi("x", Var("A"), Eqv(Var("A"), Var("x"), Var("x"))))
    assert read_back_type(Ctx(), _type(ty)) == ty
    sigma = Sigma("n", Nat(), Eqv(Nat(), Var("n"), Var("n")))
    assert read_back_type(Ctx(), _type(sigma)) == sigma


def test_read_back_type_freshens_binders() -> None:
    ctx = Ctx().extend_bound("A", VUniverse())
    ty = _type(Pi("A", Universe(), Var("A")))
    assert read_back_type(ctx, ty) == Pi("A*", Universe(), Var("A*"))


def test_read_back_stuck_ind_nat() -> None:
    step = lambdas(["prev", "almost"], Add1(Var("almost")))
    expr = IndNat(Var("n"), Lam("_", Nat()), Zero(), step)
    ctx = Ctx().extend_bound("n", VNat())
    value = evaluate(ctx.to_env(), expr)
    assert read_back(ctx, VNat(), value) == expr


def test_read_back_stuck_ind_absurd() -> None:
    ctx = Ctx().extend_bound("nope", VAbsurd())
    value = evaluate(ctx.to_env(), IndAbsurd(Var("nope"), Nat()))
    assert read_back(ctx, VNat(), value) == IndAbsurd(
        The(Absurd(), Var("nope")), Nat()
    )


def test_read_back_trivial_type() -> None:
    assert read_back_type(Ctx(), VTrivial()) == Trivial()
