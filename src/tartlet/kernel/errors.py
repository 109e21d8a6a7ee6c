"""Error types raised by the kernel and the module layer."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class TartletError(Exception):
    """A recoverable failure caused by the input being checked."""

    message: str

    def __str__(self) -> str:
        return self.message


@dataclass
class NameNotFound(TartletError):
    name: str = ""


@dataclass
class ExpectedShape(TartletError):
    """An inferred or expected type did not have the required head.

    Args:
        expected: Name of the required type former, such as ``"Pi"``.
        actual: Rendering of the type that was found.
    """

    expected: str = ""
    actual: str = ""


@dataclass
class ConversionFailed(TartletError):
    left: str = ""
    right: str = ""


@dataclass
class CannotInfer(TartletError):
    pass


@dataclass
class ModuleError(TartletError):
    name: str = ""


class AlreadyClaimed(ModuleError):
    pass


class NotClaimedBeforeDefine(ModuleError):
    pass


class AlreadyDefined(ModuleError):
    pass


class NameCollisionOnUse(ModuleError):
    pass


class EvaluationFault(RuntimeError):
    """An executor met a value it cannot handle.

    Raised only when an ill-typed term reaches evaluation, i.e. a checker bug.
    Not a :class:`TartletError`, so user-error handlers do not catch it.
    """


__all__ = [
    "TartletError",
    "NameNotFound",
    "ExpectedShape",
    "ConversionFailed",
    "CannotInfer",
    "ModuleError",
    "AlreadyClaimed",
    "NotClaimedBeforeDefine",
    "AlreadyDefined",
    "NameCollisionOnUse",
    "EvaluationFault",
]
