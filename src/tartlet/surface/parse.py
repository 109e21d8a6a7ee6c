"""Parser for the s-expression surface language."""

from __future__ import annotations

from typing import cast

import ply.lex as lex  # type: ignore[import-untyped]
import ply.yacc as yacc  # type: ignore[import-untyped]

from tartlet.builders import UNUSED, numeral
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
from tartlet.surface.errors import Span, SurfaceError
from tartlet.surface.forms import CheckSame, Claim, Define, Form, Run

_SOURCE: str = ""

reserved = {
    "Pi": "PI",
    "Π": "PI",
    "Sigma": "SIGMA",
    "Σ": "SIGMA",
    "lambda": "LAMBDA",
    "λ": "LAMBDA",
    "->": "ARROW",
    "→": "ARROW",
    "Pair": "PAIR",
    "cons": "CONS",
    "car": "CAR",
    "cdr": "CDR",
    "Nat": "NAT",
    "zero": "ZERO",
    "add1": "ADD1",
    "ind-Nat": "INDNAT",
    "=": "EQUAL",
    "same": "SAME",
    "replace": "REPLACE",
    "Trivial": "TRIVIAL",
    "sole": "SOLE",
    "Absurd": "ABSURD",
    "ind-Absurd": "INDABSURD",
    "Atom": "ATOM",
    "quote": "QUOTEKW",
    "U": "UNIVERSE",
    "the": "THE",
    "claim": "CLAIM",
    "define": "DEFINE",
    "check-same": "CHECKSAME",
}

tokens = (
    "IDENT",
    "NUMBER",
    "QUOTED",
    "LPAREN",
    "RPAREN",
    *dict.fromkeys(reserved.values()),
)

_CONSTANTS: dict[str, type] = {
    "NAT": Nat,
    "ZERO": Zero,
    "SAME": Same,
    "TRIVIAL": Trivial,
    "SOLE": Sole,
    "ABSURD": Absurd,
    "ATOM": Atom,
    "UNIVERSE": Universe,
}

t_LPAREN = r"\("
t_RPAREN = r"\)"

t_ignore = " \t\r"
t_ignore_COMMENT = r";[^\n]*"


def t_newline(t: lex.LexToken) -> None:
    r"\n+"
    t.lexer.lineno += len(t.value)


def t_NUMBER(t: lex.LexToken) -> lex.LexToken:
    r"\d+"
    t.value = int(t.value)
    return t


def t_QUOTED(t: lex.LexToken) -> lex.LexToken:
    r"'[^\s()';]+"
    t.value = t.value[1:]
    return t


def t_IDENT(t: lex.LexToken) -> lex.LexToken:
    r"[^\s()';0-9][^\s()';]*"
    t.type = reserved.get(t.value, "IDENT")
    return t


def t_error(t: lex.LexToken) -> None:
    span = Span(t.lexpos, t.lexpos + 1)
    raise SurfaceError(f"Unexpected character {t.value[0]!r}", span, _SOURCE)


# ---- toplevel ---------------------------------------------------------------


def p_program(p: yacc.YaccProduction) -> None:
    "program : forms"
    p[0] = tuple(p[1])


def p_forms_multi(p: yacc.YaccProduction) -> None:
    "forms : forms form"
    p[0] = p[1] + [p[2]]


def p_forms_empty(p: yacc.YaccProduction) -> None:
    "forms : empty"
    p[0] = []


def p_form_claim(p: yacc.YaccProduction) -> None:
    "form : LPAREN CLAIM IDENT term RPAREN"
    p[0] = Claim(p[3], p[4])


def p_form_define(p: yacc.YaccProduction) -> None:
    "form : LPAREN DEFINE IDENT term RPAREN"
    p[0] = Define(p[3], p[4])


def p_form_check_same(p: yacc.YaccProduction) -> None:
    "form : LPAREN CHECKSAME term term term RPAREN"
    p[0] = CheckSame(p[3], p[4], p[5])


def p_form_run(p: yacc.YaccProduction) -> None:
    "form : term"
    p[0] = Run(p[1])


# ---- terms ------------------------------------------------------------------


def p_term_ident(p: yacc.YaccProduction) -> None:
    "term : IDENT"
    p[0] = Var(p[1])


def p_term_number(p: yacc.YaccProduction) -> None:
    "term : NUMBER"
    p[0] = numeral(p[1])


def p_term_constant(p: yacc.YaccProduction) -> None:
    """term : NAT
    | ZERO
    | SAME
    | TRIVIAL
    | SOLE
    | ABSURD
    | ATOM
    | UNIVERSE"""
    tok = cast(lex.LexToken, p.slice[1])
    p[0] = _CONSTANTS[tok.type]()


def p_term_quoted(p: yacc.YaccProduction) -> None:
    "term : QUOTED"
    p[0] = Quote(p[1])


def p_term_quote(p: yacc.YaccProduction) -> None:
    "term : LPAREN QUOTEKW IDENT RPAREN"
    p[0] = Quote(p[3])


def p_term_pi(p: yacc.YaccProduction) -> None:
    "term : LPAREN PI LPAREN binders RPAREN term RPAREN"
    body = p[6]
    for name, ty in reversed(p[4]):
        body = Pi(name, ty, body)
    p[0] = body


def p_term_sigma(p: yacc.YaccProduction) -> None:
    "term : LPAREN SIGMA LPAREN binders RPAREN term RPAREN"
    body = p[6]
    for name, ty in reversed(p[4]):
        body = Sigma(name, ty, body)
    p[0] = body


def p_term_lambda(p: yacc.YaccProduction) -> None:
    "term : LPAREN LAMBDA LPAREN names RPAREN term RPAREN"
    body = p[6]
    for name in reversed(p[4]):
        body = Lam(name, body)
    p[0] = body


def p_term_arrow(p: yacc.YaccProduction) -> None:
    "term : LPAREN ARROW term terms RPAREN"
    types = [p[3], *p[4]]
    body = types[-1]
    for ty in reversed(types[:-1]):
        body = Pi(UNUSED, ty, body)
    p[0] = body


def p_term_pair(p: yacc.YaccProduction) -> None:
    "term : LPAREN PAIR term term RPAREN"
    p[0] = Sigma(UNUSED, p[3], p[4])


def p_term_cons(p: yacc.YaccProduction) -> None:
    "term : LPAREN CONS term term RPAREN"
    p[0] = Cons(p[3], p[4])


def p_term_car(p: yacc.YaccProduction) -> None:
    "term : LPAREN CAR term RPAREN"
    p[0] = Car(p[3])


def p_term_cdr(p: yacc.YaccProduction) -> None:
    "term : LPAREN CDR term RPAREN"
    p[0] = Cdr(p[3])


def p_term_add1(p: yacc.YaccProduction) -> None:
    "term : LPAREN ADD1 term RPAREN"
    p[0] = Add1(p[3])


def p_term_ind_nat(p: yacc.YaccProduction) -> None:
    "term : LPAREN INDNAT term term term term RPAREN"
    p[0] = IndNat(p[3], p[4], p[5], p[6])


def p_term_eqv(p: yacc.YaccProduction) -> None:
    "term : LPAREN EQUAL term term term RPAREN"
    p[0] = Eqv(p[3], p[4], p[5])


def p_term_replace(p: yacc.YaccProduction) -> None:
    "term : LPAREN REPLACE term term term RPAREN"
    p[0] = Replace(p[3], p[4], p[5])


def p_term_ind_absurd(p: yacc.YaccProduction) -> None:
    "term : LPAREN INDABSURD term term RPAREN"
    p[0] = IndAbsurd(p[3], p[4])


def p_term_the(p: yacc.YaccProduction) -> None:
    "term : LPAREN THE term term RPAREN"
    p[0] = The(p[3], p[4])


def p_term_app(p: yacc.YaccProduction) -> None:
    "term : LPAREN term terms RPAREN"
    fn = p[2]
    for arg in p[3]:
        fn = App(fn, arg)
    p[0] = fn


def p_terms_multi(p: yacc.YaccProduction) -> None:
    "terms : terms term"
    p[0] = p[1] + [p[2]]


def p_terms_single(p: yacc.YaccProduction) -> None:
    "terms : term"
    p[0] = [p[1]]


def p_binders_multi(p: yacc.YaccProduction) -> None:
    "binders : binders binder"
    p[0] = p[1] + [p[2]]


def p_binders_single(p: yacc.YaccProduction) -> None:
    "binders : binder"
    p[0] = [p[1]]


def p_binder(p: yacc.YaccProduction) -> None:
    "binder : LPAREN IDENT term RPAREN"
    p[0] = (p[2], p[3])


def p_names_multi(p: yacc.YaccProduction) -> None:
    "names : names IDENT"
    p[0] = p[1] + [p[2]]


def p_names_single(p: yacc.YaccProduction) -> None:
    "names : IDENT"
    p[0] = [p[1]]


def p_empty(p: yacc.YaccProduction) -> None:
    "empty :"
    p[0] = None


def p_error(p: lex.LexToken | None) -> None:
    if p is None:
        raise SurfaceError("Unexpected end of input", Span.at_end(_SOURCE), _SOURCE)
    tok = cast(lex.LexToken, p)
    span = Span(tok.lexpos, tok.lexpos + len(str(tok.value)))
    raise SurfaceError("Unexpected token", span, _SOURCE)


_PARSERS: dict[str, yacc.LRParser] = {}


def _parse(source: str, start: str) -> object:
    global _SOURCE
    _SOURCE = source
    lexer = lex.lex()
    parser = _PARSERS.get(start)
    if parser is None:
        parser = yacc.yacc(
            start=start,
            debug=False,
            write_tables=False,
            errorlog=yacc.NullLogger(),
        )
        _PARSERS[start] = parser
    return parser.parse(source, lexer=lexer)


def parse_expr(source: str) -> Expr:
    """Parse a single expression."""

    term = _parse(source, "term")
    if term is None:
        raise SurfaceError("Unexpected end of input", Span.at_end(source), source)
    return cast(Expr, term)


def parse_program(source: str) -> tuple[Form, ...]:
    """Parse a sequence of toplevel forms."""

    return cast(tuple[Form, ...], _parse(source, "program"))


__all__ = ["parse_expr", "parse_program"]
