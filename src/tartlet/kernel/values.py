"""Semantic values produced by evaluation.

Values mirror the type formers and constructors of :mod:`tartlet.kernel.syntax`
with two differences. Binders are represented by closures, so substitution is
deferred until a closure is instantiated. Computations stuck on a variable are
represented by neutral terms, always paired with their type in ``VNeutral`` so
that read-back knows which normal form to produce.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeAlias

from tartlet.kernel.syntax import Expr

if TYPE_CHECKING:
    from tartlet.kernel.env import Env


# ---- closures ---------------------------------------------------------------


@dataclass(frozen=True)
class SyntaxClosure:
    """A body waiting for a value for ``name``, evaluated under ``env``."""

    env: Env
    name: str
    body: Expr


@dataclass(frozen=True)
class ConstantClosure:
    """A closure that ignores its argument.

    Used for the non-dependent Pi and Sigma types the checker builds itself,
    such as the motive type ``Pi (_ : Nat). U``.
    """

    name: str
    value: Value


@dataclass(frozen=True)
class IndNatStepClosure:
    """Codomain of the type of an ``ind-Nat`` step for ``motive``.

    Instantiated at ``prev`` it yields
    ``Pi (almost : motive prev). motive (add1 prev)``.
    """

    motive: Value
    name: str = "prev"


Closure: TypeAlias = SyntaxClosure | ConstantClosure | IndNatStepClosure


# ---- values -----------------------------------------------------------------


@dataclass(frozen=True)
class VPi:
    arg_type: Value
    ret_type: Closure


@dataclass(frozen=True)
class VLam:
    body: Closure


@dataclass(frozen=True)
class VSigma:
    car_type: Value
    cdr_type: Closure


@dataclass(frozen=True)
class VPair:
    car: Value
    cdr: Value


@dataclass(frozen=True)
class VNat:
    pass


@dataclass(frozen=True)
class VZero:
    pass


@dataclass(frozen=True)
class VAdd1:
    prev: Value


@dataclass(frozen=True)
class VEqv:
    ty: Value
    from_: Value
    to: Value


@dataclass(frozen=True)
class VSame:
    pass


@dataclass(frozen=True)
class VTrivial:
    pass


@dataclass(frozen=True)
class VSole:
    pass


@dataclass(frozen=True)
class VAbsurd:
    pass


@dataclass(frozen=True)
class VAtom:
    pass


@dataclass(frozen=True)
class VQuote:
    symbol: str


@dataclass(frozen=True)
class VUniverse:
    pass


@dataclass(frozen=True)
class VNeutral:
    """A stuck computation together with its type."""

    ty: Value
    neutral: Neutral


Value: TypeAlias = (
    VPi
    | VLam
    | VSigma
    | VPair
    | VNat
    | VZero
    | VAdd1
    | VEqv
    | VSame
    | VTrivial
    | VSole
    | VAbsurd
    | VAtom
    | VQuote
    | VUniverse
    | VNeutral
)


# ---- neutral terms ----------------------------------------------------------


@dataclass(frozen=True)
class Normal:
    """A value paired with the type it should be read back at."""

    ty: Value
    value: Value


@dataclass(frozen=True)
class NVar:
    name: str


@dataclass(frozen=True)
class NApp:
    rator: Neutral
    rand: Normal


@dataclass(frozen=True)
class NCar:
    pair: Neutral


@dataclass(frozen=True)
class NCdr:
    pair: Neutral


@dataclass(frozen=True)
class NIndNat:
    target: Neutral
    motive: Normal
    base: Normal
    step: Normal


@dataclass(frozen=True)
class NReplace:
    target: Neutral
    motive: Normal
    base: Normal


@dataclass(frozen=True)
class NIndAbsurd:
    target: Neutral
    motive: Normal


Neutral: TypeAlias = NVar | NApp | NCar | NCdr | NIndNat | NReplace | NIndAbsurd


def neutral_var(ty: Value, name: str) -> VNeutral:
    """Return the variable ``name`` of type ``ty`` as a value."""

    return VNeutral(ty, NVar(name))


__all__ = [
    "Closure",
    "SyntaxClosure",
    "ConstantClosure",
    "IndNatStepClosure",
    "Value",
    "VPi",
    "VLam",
    "VSigma",
    "VPair",
    "VNat",
    "VZero",
    "VAdd1",
    "VEqv",
    "VSame",
    "VTrivial",
    "VSole",
    "VAbsurd",
    "VAtom",
    "VQuote",
    "VUniverse",
    "VNeutral",
    "Neutral",
    "Normal",
    "NVar",
    "NApp",
    "NCar",
    "NCdr",
    "NIndNat",
    "NReplace",
    "NIndAbsurd",
    "neutral_var",
]
