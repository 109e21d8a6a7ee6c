"""Typing contexts and fresh-name generation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, TypeAlias

from tartlet.kernel.env import Env
from tartlet.kernel.errors import NameNotFound
from tartlet.kernel.values import Value, neutral_var

FRESH_MARKER = "*"


@dataclass(frozen=True)
class Bound:
    """A variable of known type without a value."""

    ty: Value


@dataclass(frozen=True)
class Defined:
    """A name bound to a closed, evaluated term."""

    ty: Value
    value: Value


Denotation: TypeAlias = Bound | Defined


def freshen(used: Iterable[str], name: str) -> str:
    """Return ``name`` with ``*`` appended until it is not in ``used``."""

    used = set(used)
    while name in used:
        name += FRESH_MARKER
    return name


@dataclass(frozen=True)
class Ctx:
    """
    Typing context mapping names to denotations.

    Entries are stored newest first. A `Defined` entry for a name shadows an
    older `Bound` entry for the same name, which is how the module layer
    records that a claimed name has been given a value.
    """

    entries: tuple[tuple[str, Denotation], ...] = ()

    # ---- extending the context ----
    def extend(self, name: str, denotation: Denotation) -> Ctx:
        return Ctx(((name, denotation),) + self.entries)

    def extend_bound(self, name: str, ty: Value) -> Ctx:
        return self.extend(name, Bound(ty))

    def extend_defined(self, name: str, ty: Value, value: Value) -> Ctx:
        return self.extend(name, Defined(ty, value))

    # ---- lookup ----
    def lookup(self, name: str) -> Denotation | None:
        for bound, denotation in self.entries:
            if bound == name:
                return denotation
        return None

    def lookup_type(self, name: str) -> Value:
        denotation = self.lookup(name)
        if denotation is None:
            raise NameNotFound(f"Unknown name: {name}", name=name)
        return denotation.ty

    def names(self) -> set[str]:
        return {name for name, _ in self.entries}

    def fresh(self, name: str) -> str:
        return freshen(self.names(), name)

    def __contains__(self, name: object) -> bool:
        return any(bound == name for bound, _ in self.entries)

    def __iter__(self) -> Iterator[tuple[str, Denotation]]:
        """Yield entries oldest first, the order they were added in."""
        return reversed(self.entries)

    # ---- evaluation ----
    def to_env(self) -> Env:
        """
        Derive the runtime environment for this context.

        Bound names become neutral variables annotated with their type;
        defined names evaluate to their value.
        """
        bindings: list[tuple[str, Value]] = []
        for name, denotation in self.entries:
            match denotation:
                case Bound(ty):
                    bindings.append((name, neutral_var(ty, name)))
                case Defined(_, value):
                    bindings.append((name, value))
        return Env(tuple(bindings))


__all__ = ["FRESH_MARKER", "Bound", "Defined", "Denotation", "Ctx", "freshen"]
