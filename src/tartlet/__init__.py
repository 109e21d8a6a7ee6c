"""A minimal dependently-typed language checked by normalization by evaluation."""

from tartlet.builders import apply, arrow, lambdas, numeral, pair_type, pis
from tartlet.kernel.errors import (
    AlreadyClaimed,
    AlreadyDefined,
    CannotInfer,
    ConversionFailed,
    EvaluationFault,
    ExpectedShape,
    ModuleError,
    NameCollisionOnUse,
    NameNotFound,
    NotClaimedBeforeDefine,
    TartletError,
)
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
from tartlet.module import Module

__all__ = [
    "Absurd",
    "Add1",
    "AlreadyClaimed",
    "AlreadyDefined",
    "App",
    "Atom",
    "CannotInfer",
    "Car",
    "Cdr",
    "Cons",
    "ConversionFailed",
    "Eqv",
    "EvaluationFault",
    "ExpectedShape",
    "Expr",
    "IndAbsurd",
    "IndNat",
    "Lam",
    "Module",
    "ModuleError",
    "NameCollisionOnUse",
    "NameNotFound",
    "Nat",
    "NotClaimedBeforeDefine",
    "Pi",
    "Quote",
    "Replace",
    "Same",
    "Sigma",
    "Sole",
    "TartletError",
    "The",
    "Trivial",
    "Universe",
    "Var",
    "Zero",
    "apply",
    "arrow",
    "lambdas",
    "numeral",
    "pair_type",
    "pis",
    "pretty",
]
