from tartlet.builders import apply
from tartlet.kernel.syntax import Expr, Var
from tartlet.module import Module
from tartlet.surface.parse import parse_program

CHURCH_SOURCE = """
; Church numerals, typed as (Pi ((A U)) (-> (-> A A) A A)).
(claim CNat U)
(define CNat (Pi ((A U)) (-> (-> A A) A A)))

(claim church-zero CNat)
(define church-zero (lambda (A f x) x))

(claim church-add1 (-> CNat CNat))
(define church-add1 (lambda (prev A f x) (f (prev A f x))))

(claim church-add (-> CNat CNat CNat))
(define church-add (lambda (j k A f x) (j A f (k A f x))))
"""


def load(module: Module, source: str) -> Module:
    for form in parse_program(source):
        module.execute(form)
    return module


def to_church(n: int) -> Expr:
    term: Expr = Var("church-zero")
    for _ in range(n):
        term = apply(Var("church-add1"), term)
    return term
