import pytest

from tartlet.builders import apply, lambdas, numeral, numeral_value, plus
from tartlet.kernel.env import Env
from tartlet.kernel.errors import EvaluationFault, TartletError
from tartlet.kernel.evaluate import (
    do_apply,
    do_car,
    do_cdr,
    do_ind_absurd,
    do_ind_nat,
    do_replace,
    evaluate,
)
from tartlet.kernel.syntax import (
    Add1,
    App,
    Atom,
    Cons,
    Eqv,
    Lam,
    Nat,
    Pi,
    Quote,
    Sigma,
    The,
    Var,
    Zero,
)
from tartlet.kernel.values import (
    NApp,
    NCar,
    NCdr,
    NIndAbsurd,
    NIndNat,
    Normal,
    NReplace,
    NVar,
    VAbsurd,
    VAdd1,
    VAtom,
    VEqv,
    VLam,
    VNat,
    VNeutral,
    VPair,
    VQuote,
    VSame,
    VSigma,
    VUniverse,
    VZero,
    neutral_var,
)


def _nat_to_int(value: object) -> int:
    count = 0
    while isinstance(value, VAdd1):
        count += 1
        value = value.prev
    assert value == VZero()
    return count


def test_eval_lambda_builds_closure() -> None:
    value = evaluate(Env(), Lam("x", Lam("y", Var("y"))))
    assert isinstance(value, VLam)
    assert value.body.name == "x"


def test_eval_beta_reduces() -> None:
    identity = Lam("x", Var("x"))
    assert evaluate(Env(), App(identity, Quote("a"))) == VQuote("a")
    assert isinstance(evaluate(Env(), App(identity, identity)), VLam)


def test_eval_ignores_ascription() -> None:
    assert evaluate(Env(), The(Nat(), Zero())) == VZero()


def test_closures_capture_their_environment() -> None:
    konst = evaluate(Env(), Lam("x", Lam("y", Var("x"))))
    first = do_apply(konst, VQuote("a"))
    second = do_apply(konst, VQuote("b"))
    assert do_apply(first, VZero()) == VQuote("a")
    assert do_apply(second, VZero()) == VQuote("b")


def test_eval_plus_on_literals() -> None:
    value = evaluate(Env(), apply(plus(), numeral(3), numeral(3)))
    assert _nat_to_int(value) == 6


def test_ind_nat_on_large_literal_does_not_recurse() -> None:
    big = 5000
    step = evaluate(Env(), lambdas(["prev", "almost"], Add1(Var("almost"))))
    motive = evaluate(Env(), Lam("_", Nat()))
    target = evaluate(Env(), numeral(big))
    result = do_ind_nat(target, motive, VZero(), step)
    assert _nat_to_int(result) == big
    assert numeral_value(numeral(big)) == big


def test_apply_neutral_annotates_result_type() -> None:
    fn_ty = evaluate(Env(), Pi("_", Nat(), Nat()))
    f = neutral_var(fn_ty, "f")
    result = do_apply(f, VZero())
    assert result == VNeutral(VNat(), NApp(NVar("f"), Normal(VNat(), VZero())))


def test_car_and_cdr_of_pair() -> None:
    pair = evaluate(Env(), Cons(Zero(), Quote("a")))
    assert pair == VPair(VZero(), VQuote("a"))
    assert do_car(pair) == VZero()
    assert do_cdr(pair) == VQuote("a")


def test_cdr_of_neutral_uses_dependent_type() -> None:
    # p : (Sigma ((n Nat)) (= Nat n n))
    sigma = evaluate(Env(), Sigma("n", Nat(), Eqv(Nat(), Var("n"), Var("n"))))
    assert isinstance(sigma, VSigma)
    p = neutral_var(sigma, "p")

    car = do_car(p)
    assert car == VNeutral(VNat(), NCar(NVar("p")))

    cdr = do_cdr(p)
    assert isinstance(cdr, VNeutral)
    assert cdr.neutral == NCdr(NVar("p"))
    assert cdr.ty == VEqv(VNat(), car, car)


def test_ind_nat_on_neutral_target() -> None:
    n = neutral_var(VNat(), "n")
    motive = evaluate(Env(), Lam("_", Nat()))
    step = evaluate(Env(), lambdas(["prev", "almost"], Add1(Var("almost"))))
    result = do_ind_nat(n, motive, VZero(), step)
    assert isinstance(result, VNeutral)
    assert result.ty == VNat()
    assert isinstance(result.neutral, NIndNat)
    assert result.neutral.target == NVar("n")
    assert result.neutral.base.ty == VNat()


def test_ind_nat_on_add1_of_neutral_reduces_outer_layers() -> None:
    n = neutral_var(VNat(), "n")
    motive = evaluate(Env(), Lam("_", Nat()))
    step = evaluate(Env(), lambdas(["prev", "almost"], Add1(Var("almost"))))
    result = do_ind_nat(VAdd1(VAdd1(n)), motive, VZero(), step)
    assert isinstance(result, VAdd1) and isinstance(result.prev, VAdd1)
    assert isinstance(result.prev.prev.neutral, NIndNat)


def test_replace_reduces_on_same() -> None:
    motive = evaluate(Env(), Lam("x", Atom()))
    assert do_replace(VSame(), motive, VQuote("base")) == VQuote("base")


def test_replace_on_neutral_is_typed_by_motive() -> None:
    motive = evaluate(Env(), Lam("x", Atom()))
    target = neutral_var(VEqv(VNat(), VZero(), VAdd1(VZero())), "e")
    result = do_replace(target, motive, VQuote("a"))
    assert isinstance(result, VNeutral)
    assert result.ty == VAtom()
    assert isinstance(result.neutral, NReplace)


def test_ind_absurd_on_neutral() -> None:
    target = neutral_var(VAbsurd(), "nope")
    result = do_ind_absurd(target, VNat())
    assert result == VNeutral(VNat(), NIndAbsurd(NVar("nope"), Normal(VUniverse(), VNat())))


@pytest.mark.parametrize(
    "thunk",
    [
        lambda: do_apply(VZero(), VZero()),
        lambda: do_car(VZero()),
        lambda: do_cdr(VQuote("a")),
        lambda: do_ind_nat(VQuote("a"), VNat(), VZero(), VZero()),
        lambda: do_replace(VZero(), VNat(), VZero()),
        lambda: do_ind_absurd(VZero(), VNat()),
        lambda: do_apply(neutral_var(VNat(), "n"), VZero()),
    ],
)
def test_executors_fault_on_ill_typed_values(thunk) -> None:
    with pytest.raises(EvaluationFault) as info:
        thunk()
    assert not isinstance(info.value, TartletError)
