import pytest

from module_helpers import CHURCH_SOURCE, load, to_church
from tartlet.builders import arrow, numeral, plus
from tartlet.kernel.syntax import Nat
from tartlet.module import Module


@pytest.fixture
def church() -> Module:
    return load(Module(), CHURCH_SOURCE)


@pytest.fixture
def arithmetic() -> Module:
    m = Module()
    m.claim("three", Nat())
    m.define("three", numeral(3))
    m.claim("+", arrow(Nat(), Nat(), Nat()))
    m.define("+", plus())
    return m


@pytest.fixture
def church_numeral():
    return to_church
