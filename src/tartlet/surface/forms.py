"""Toplevel forms of a tartlet program."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from tartlet.kernel.syntax import Expr


@dataclass(frozen=True)
class Claim:
    """``(claim name type)``"""

    name: str
    ty: Expr


@dataclass(frozen=True)
class Define:
    """``(define name expr)``"""

    name: str
    expr: Expr


@dataclass(frozen=True)
class CheckSame:
    """``(check-same type left right)``"""

    ty: Expr
    left: Expr
    right: Expr


@dataclass(frozen=True)
class Run:
    """A bare expression to normalize."""

    expr: Expr


Form: TypeAlias = Claim | Define | CheckSame | Run


__all__ = ["Form", "Claim", "Define", "CheckSame", "Run"]
