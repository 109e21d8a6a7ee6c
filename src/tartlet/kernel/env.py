from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from tartlet.kernel.errors import EvaluationFault

if TYPE_CHECKING:
    from tartlet.kernel.values import Value


@dataclass(frozen=True)
class Env:
    """
    Runtime environment mapping names to values.

    Representation:
        Bindings are stored newest first, so lookup finds the innermost
        binding of a name and later bindings shadow earlier ones.

    Extension discipline:
        `extend` returns a new environment sharing nothing mutable with the
        old one. Closures capture an `Env` and may be instantiated any number
        of times without interfering with each other.
    """

    bindings: tuple[tuple[str, Value], ...] = ()

    def extend(self, name: str, value: Value) -> Env:
        return Env(((name, value),) + self.bindings)

    def lookup(self, name: str) -> Value:
        for bound, value in self.bindings:
            if bound == name:
                return value
        raise EvaluationFault(f"Unbound name during evaluation: {name}")

    def names(self) -> tuple[str, ...]:
        return tuple(name for name, _ in self.bindings)

    def __repr__(self) -> str:
        return f"Env({', '.join(self.names())})"
