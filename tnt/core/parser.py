"""
Text -> AST.

The grammar is the whole of TNT's concrete syntax:

    term    := "0" | var | "S" term | "(" term ("+"|"*") term ")"
    formula := term "=" term
             | "[" formula ("&"|"|"|">") formula "]"
             | "~" formula
             | ("A"|"E") var ":" formula

(numerals are just S...S0, so they fall out of the "S" term rule.)

It is LALR(1) and unambiguous, and it is compiled once at import time with
two entry points, one for terms and one for formulas. Whitespace is not
part of the language; "S0 = 0" is a parse error, "S0=0" is not.

parse_formula() also applies the well-formedness rules, so anything it
returns is a genuine TNT formula. Round trip: parse(str(parse(s))) ==
parse(s) for every s the parser accepts.
"""

from lark import Lark, v_args
from lark.visitors import Transformer_NonRecursive
from lark.exceptions import UnexpectedInput, UnexpectedEOF, UnexpectedToken

from . import symbols
from .errors import ParseError
from .term import Term, Zero, Variable, Successor, Sum, Product
from .formula import Formula, Equality, Negation, And, Or, Implies, Exists, ForAll
from .wellformed import check_well_formed


GRAMMAR = rf"""
    formula: term "{symbols.EQUALS}" term                                -> equality
           | "{symbols.LBRACKET}" formula CONNECTIVE formula "{symbols.RBRACKET}" -> connective
           | "{symbols.NOT}" formula                                     -> negation
           | QUANTIFIER VARIABLE "{symbols.QUANT_SEP}" formula           -> quantified

    term: "{symbols.ZERO}"                                               -> zero
        | VARIABLE                                                       -> variable
        | "{symbols.SUCC}" term                                          -> successor
        | "{symbols.LPAREN}" term OPERATOR term "{symbols.RPAREN}"       -> arithmetic

    QUANTIFIER: "{symbols.FORALL}" | "{symbols.EXISTS}"
    CONNECTIVE: "{symbols.AND}" | "{symbols.OR}" | "{symbols.IMPLIES}"
    OPERATOR: "{symbols.PLUS}" | "{symbols.TIMES}"
    VARIABLE: /{symbols.VARIABLE_PATTERN}/
"""

CONNECTIVES = {
    symbols.AND: And,
    symbols.OR: Or,
    symbols.IMPLIES: Implies,
}

QUANTIFIERS = {
    symbols.FORALL: ForAll,
    symbols.EXISTS: Exists,
}

OPERATORS = {
    symbols.PLUS: Sum,
    symbols.TIMES: Product,
}


@v_args(inline=True)
class ASTBuilder(Transformer_NonRecursive):
    """Turns lark's parse tree into Term / Formula nodes, without recursing (numerals nest deep)."""

    def zero(self):
        return Zero()

    def variable(self, token):
        return Variable(str(token))

    def successor(self, term):
        return Successor(term)

    def arithmetic(self, left, operator, right):
        return OPERATORS[str(operator)](left, right)

    def equality(self, left, right):
        return Equality(left, right)

    def negation(self, formula):
        return Negation(formula)

    def connective(self, left, connective, right):
        return CONNECTIVES[str(connective)](left, right)

    def quantified(self, quantifier, variable, body):
        return QUANTIFIERS[str(quantifier)](Variable(str(variable)), body)


_parser = Lark(GRAMMAR, start=["formula", "term"], parser="lalr")
_builder = ASTBuilder()


def _error_position(text: str, exc: UnexpectedInput) -> int:
    if isinstance(exc, UnexpectedEOF):
        return len(text)
    if isinstance(exc, UnexpectedToken) and exc.token.type == "$END":
        return len(text)
    pos = getattr(exc, "pos_in_stream", None)
    if pos is None or pos < 0:
        return len(text)
    return pos


def _parse(text: str, start: str):
    if not isinstance(text, str):
        raise TypeError(f"expected source text, got {text!r}")
    try:
        tree = _parser.parse(text, start=start)
    except UnexpectedInput as exc:
        expected = getattr(exc, "expected", None) or getattr(exc, "allowed", None) or ()
        raise ParseError(text, _error_position(text, exc), expected) from None
    return _builder.transform(tree)


def parse_term(text: str) -> Term:
    """Parse a term such as "S(a+S0)"."""
    return _parse(text, "term")


def parse_formula(text: str) -> Formula:
    """Parse and validate a formula such as "Aa:~Sa=0"."""
    return check_well_formed(_parse(text, "formula"))


def as_term(value) -> Term:
    """Accept a Term or its text."""
    if isinstance(value, Term):
        return value
    return parse_term(value)


def as_formula(value) -> Formula:
    """Accept a Formula or its text. Formulas given as ASTs are checked too."""
    if isinstance(value, Formula):
        return check_well_formed(value)
    return parse_formula(value)
