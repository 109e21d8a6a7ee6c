"""Toplevel bookkeeping: claims, definitions and running expressions."""

from __future__ import annotations

import logging

from tartlet.kernel.check import check, eval_in, synth
from tartlet.kernel.context import Bound, Ctx, Defined
from tartlet.kernel.convert import convert
from tartlet.kernel.errors import (
    AlreadyClaimed,
    AlreadyDefined,
    NameCollisionOnUse,
    NotClaimedBeforeDefine,
)
from tartlet.kernel.pretty import pretty
from tartlet.kernel.readback import read_back, read_back_type
from tartlet.kernel.syntax import Expr, The
from tartlet.kernel.values import VUniverse
from tartlet.surface.forms import CheckSame, Claim, Define, Form, Run

logger = logging.getLogger(__name__)


class Module:
    """
    A growing collection of claimed and defined names.

    The only mutable state is ``ctx``, the immutable context the module
    currently points to. Every operation builds a new context and only swaps
    it in once all checks have passed, so a failed call leaves the module as
    it was.
    """

    def __init__(self, ctx: Ctx | None = None) -> None:
        self.ctx = ctx or Ctx()

    def claim(self, name: str, type_expr: Expr) -> Module:
        if name in self.ctx:
            raise AlreadyClaimed(f"Name already claimed: {name}", name=name)
        type_out = check(self.ctx, type_expr, VUniverse())
        self.ctx = self.ctx.extend_bound(name, eval_in(self.ctx, type_out))
        logger.debug("claim %s : %s", name, pretty(type_out))
        return self

    def define(self, name: str, expr: Expr) -> Module:
        match self.ctx.lookup(name):
            case None:
                raise NotClaimedBeforeDefine(
                    f"Name not claimed before define: {name}", name=name
                )
            case Defined():
                raise AlreadyDefined(f"Name already defined: {name}", name=name)
            case Bound(ty):
                expr_out = check(self.ctx, expr, ty)
                value = eval_in(self.ctx, expr_out)
                self.ctx = self.ctx.extend_defined(name, ty, value)
        logger.debug("define %s", name)
        return self

    def use(self, other: Module) -> Module:
        """Import every entry of ``other``; fails before merging on a collision."""

        for name, _ in other.ctx:
            if name in self.ctx:
                raise NameCollisionOnUse(
                    f"Name already present in module: {name}", name=name
                )
        ctx = self.ctx
        for name, denotation in other.ctx:
            ctx = ctx.extend(name, denotation)
        self.ctx = ctx
        logger.debug("use %d entries", len(other.ctx.entries))
        return self

    def run(self, expr: Expr) -> The:
        """Infer ``expr``'s type, normalize it, and return ``(the T normal)``."""

        ty, expr_out = synth(self.ctx, expr)
        normal = read_back(self.ctx, ty, eval_in(self.ctx, expr_out))
        logger.debug("run %s => %s", pretty(expr), pretty(normal))
        return The(read_back_type(self.ctx, ty), normal)

    def check_same(self, type_expr: Expr, left: Expr, right: Expr) -> None:
        """Require ``left`` and ``right`` to be the same ``type_expr``."""

        type_out = check(self.ctx, type_expr, VUniverse())
        ty = eval_in(self.ctx, type_out)
        left_out = check(self.ctx, left, ty)
        right_out = check(self.ctx, right, ty)
        convert(self.ctx, ty, eval_in(self.ctx, left_out), eval_in(self.ctx, right_out))

    def execute(self, form: Form) -> The | None:
        """Perform a parsed toplevel form; only ``Run`` forms produce a result."""

        match form:
            case Claim(name, ty):
                self.claim(name, ty)
            case Define(name, expr):
                self.define(name, expr)
            case CheckSame(ty, left, right):
                self.check_same(ty, left, right)
            case Run(expr):
                return self.run(expr)
        return None

    def names(self) -> set[str]:
        return self.ctx.names()


__all__ = ["Module"]
