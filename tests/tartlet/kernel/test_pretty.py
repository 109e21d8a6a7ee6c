import pytest

from tartlet.builders import apply, arrow, lambdas, numeral, pair_type, plus
from tartlet.kernel.pretty import pretty
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
from tartlet.surface.parse import parse_expr


def test_constants() -> None:
    assert pretty(Nat()) == "Nat"
    assert pretty(Zero()) == "zero"
    assert pretty(Universe()) == "U"
    assert pretty(Sole()) == "sole"
    assert pretty(Quote("apple")) == "'apple"


def test_numerals_and_stuck_add1() -> None:
    assert pretty(numeral(3)) == "3"
    assert pretty(Add1(Add1(Var("n")))) == "(add1 (add1 n))"


def test_arrows_and_dependent_functions() -> None:
    assert pretty(arrow(Nat(), Nat(), Atom())) == "(-> Nat Nat Atom)"
    assert (
        pretty(Pi("A", Universe(), Pi("a", Var("A"), Var("A"))))
        == "(Pi ((A U) (a A)) A)"
    )
    assert pretty(Pi("A", Universe(), arrow(Var("A"), Var("A")))) == (
        "(Pi ((A U)) (-> A A))"
    )


def test_pairs() -> None:
    assert pretty(pair_type(Nat(), Atom())) == "(Pair Nat Atom)"
    assert (
        pretty(Sigma("n", Nat(), Eqv(Nat(), Var("n"), Var("n"))))
        == "(Sigma ((n Nat)) (= Nat n n))"
    )
    assert pretty(Cons(Zero(), Quote("a"))) == "(cons zero 'a)"
    assert pretty(Car(Var("p"))) == "(car p)"
    assert pretty(Cdr(Var("p"))) == "(cdr p)"


def test_lambdas_and_applications_collapse() -> None:
    assert pretty(lambdas(["x", "y"], Var("x"))) == "(lambda (x y) x)"
    assert pretty(apply(Var("f"), Var("a"), Var("b"))) == "(f a b)"
    assert pretty(App(Lam("x", Var("x")), Zero())) == "((lambda (x) x) zero)"


def test_eliminators() -> None:
    assert pretty(plus()) == (
        "(lambda (n k) (ind-Nat n (lambda (_) Nat) k "
        "(lambda (prev almost) (add1 almost))))"
    )
    assert (
        pretty(Replace(Var("e"), Lam("k", Atom()), Quote("a")))
        == "(replace e (lambda (k) Atom) 'a)"
    )
    assert (
        pretty(IndAbsurd(The(Absurd(), Var("nope")), Nat()))
        == "(ind-Absurd (the Absurd nope) Nat)"
    )


def test_rejects_non_expressions() -> None:
    with pytest.raises(TypeError):
        pretty("not an expression")  # type: ignore[arg-type]


@pytest.mark.parametrize(
    "expr",
    [
        plus(),
        numeral(7),
        Add1(Var("n")),
        Pi("A", Universe(), Pi("a", Var("A"), arrow(Var("A"), Var("A")))),
        Sigma("n", Nat(), pair_type(Eqv(Nat(), Var("n"), Var("n")), Trivial())),
        The(arrow(Atom(), Atom()), Lam("x", Var("x"))),
        apply(Var("f"), Cons(Zero(), Same()), Quote("b")),
    ],
)
def test_pretty_output_parses_back(expr) -> None:
    assert parse_expr(pretty(expr)) == expr
