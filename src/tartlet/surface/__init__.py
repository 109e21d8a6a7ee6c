"""Surface syntax: the s-expression reader and toplevel forms."""

from tartlet.surface.errors import Span, SurfaceError
from tartlet.surface.forms import CheckSame, Claim, Define, Form, Run
from tartlet.surface.parse import parse_expr, parse_program

__all__ = [
    "CheckSame",
    "Claim",
    "Define",
    "Form",
    "Run",
    "Span",
    "SurfaceError",
    "parse_expr",
    "parse_program",
]
