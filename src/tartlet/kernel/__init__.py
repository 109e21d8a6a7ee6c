"""The dependently-typed kernel: evaluation, read-back and checking."""

from tartlet.kernel.check import bind, check, eval_in, infer, synth
from tartlet.kernel.context import Bound, Ctx, Defined, freshen
from tartlet.kernel.convert import alpha_equiv, convert, is_convertible
from tartlet.kernel.env import Env
from tartlet.kernel.evaluate import evaluate
from tartlet.kernel.readback import read_back, read_back_neutral, read_back_type

__all__ = [
    "Bound",
    "Ctx",
    "Defined",
    "Env",
    "alpha_equiv",
    "bind",
    "check",
    "convert",
    "eval_in",
    "evaluate",
    "freshen",
    "infer",
    "is_convertible",
    "read_back",
    "read_back_neutral",
    "read_back_type",
    "synth",
]
