"""Abstract syntax tree nodes for the tartlet core language."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias


@dataclass(frozen=True)
class Var:
    """Reference to a bound or defined name."""

    name: str


@dataclass(frozen=True)
class Pi:
    """Dependent function type ``(Pi ((name arg_type)) ret_type)``.

    Args:
        name: Binder visible in ``ret_type``.
        arg_type: Domain type.
        ret_type: Codomain type that may mention ``name``.
    """

    name: str
    arg_type: Expr
    ret_type: Expr


@dataclass(frozen=True)
class Lam:
    """Unannotated lambda; its type is always supplied by checking."""

    name: str
    body: Expr


@dataclass(frozen=True)
class App:
    """Function application.

    Args:
        rator: Term expected to have a Pi type.
        rand: Argument supplied to ``rator``.
    """

    rator: Expr
    rand: Expr


@dataclass(frozen=True)
class Sigma:
    """Dependent pair type ``(Sigma ((name car_type)) cdr_type)``."""

    name: str
    car_type: Expr
    cdr_type: Expr


@dataclass(frozen=True)
class Cons:
    car: Expr
    cdr: Expr


@dataclass(frozen=True)
class Car:
    pair: Expr


@dataclass(frozen=True)
class Cdr:
    pair: Expr


@dataclass(frozen=True)
class Nat:
    pass


@dataclass(frozen=True)
class Zero:
    pass


@dataclass(frozen=True)
class Add1:
    prev: Expr


@dataclass(frozen=True)
class IndNat:
    """Primitive induction on natural numbers.

    Args:
        target: The natural number being eliminated.
        motive: ``Nat -> U`` family describing the result type.
        base: Inhabitant of ``motive zero``.
        step: ``Pi (prev : Nat). motive prev -> motive (add1 prev)``.
    """

    target: Expr
    motive: Expr
    base: Expr
    step: Expr


@dataclass(frozen=True)
class Eqv:
    """Propositional equality ``(= ty from_ to)``."""

    ty: Expr
    from_: Expr
    to: Expr


@dataclass(frozen=True)
class Same:
    pass


@dataclass(frozen=True)
class Replace:
    """Transport ``base : motive from`` along ``target : (= A from to)``."""

    target: Expr
    motive: Expr
    base: Expr


@dataclass(frozen=True)
class Trivial:
    pass


@dataclass(frozen=True)
class Sole:
    pass


@dataclass(frozen=True)
class Absurd:
    pass


@dataclass(frozen=True)
class IndAbsurd:
    target: Expr
    motive: Expr


@dataclass(frozen=True)
class Atom:
    pass


@dataclass(frozen=True)
class Quote:
    symbol: str


@dataclass(frozen=True)
class Universe:
    pass


@dataclass(frozen=True)
class The:
    """Type ascription ``(the ty value)``."""

    ty: Expr
    value: Expr


Expr: TypeAlias = (
    Var
    | Pi
    | Lam
    | App
    | Sigma
    | Cons
    | Car
    | Cdr
    | Nat
    | Zero
    | Add1
    | IndNat
    | Eqv
    | Same
    | Replace
    | Trivial
    | Sole
    | Absurd
    | IndAbsurd
    | Atom
    | Quote
    | Universe
    | The
)


__all__ = [
    "Expr",
    "Var",
    "Pi",
    "Lam",
    "App",
    "Sigma",
    "Cons",
    "Car",
    "Cdr",
    "Nat",
    "Zero",
    "Add1",
    "IndNat",
    "Eqv",
    "Same",
    "Replace",
    "Trivial",
    "Sole",
    "Absurd",
    "IndAbsurd",
    "Atom",
    "Quote",
    "Universe",
    "The",
]
