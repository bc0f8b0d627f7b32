"""
Formulas: the logical half of TNT.

    Equality(s, t)         ->  s=t
    Negation(f)            ->  ~f
    And(f, g)              ->  [f&g]
    Or(f, g)               ->  [f|g]
    Implies(f, g)          ->  [f>g]
    Exists(v, f)           ->  Ev:f
    ForAll(v, f)           ->  Av:f

Like terms, formulas are frozen dataclasses: structural equality, hashable,
immutable. str() gives the canonical text, and two formulas are the same
theorem exactly when their canonical texts match -- which, because the
grammar is unambiguous, is the same as the dataclasses comparing equal.

Construction only checks types (an Equality of two formulas is not a
thing). The quantification rules live in wellformed.py, because checking
them needs the variable queries from substitution.py.
"""

from dataclasses import dataclass

from . import symbols
from .term import Term, Variable, as_variable


class Formula:
    """Base class for the seven kinds of formula."""


def _require(value, kind, role):
    if not isinstance(value, kind):
        raise TypeError(f"{role} must be a {kind.__name__}, got {value!r}")


@dataclass(frozen=True)
class Equality(Formula):
    left: Term
    right: Term

    def __post_init__(self):
        _require(self.left, Term, "left side of an equality")
        _require(self.right, Term, "right side of an equality")

    def __str__(self):
        return f"{self.left}{symbols.EQUALS}{self.right}"


@dataclass(frozen=True)
class Negation(Formula):
    arg: Formula

    def __post_init__(self):
        _require(self.arg, Formula, "negated operand")

    def __str__(self):
        return f"{symbols.NOT}{self.arg}"


@dataclass(frozen=True)
class Connective(Formula):
    """Shared shape of And, Or, Implies."""
    left: Formula
    right: Formula

    symbol = ""

    def __post_init__(self):
        _require(self.left, Formula, "left operand")
        _require(self.right, Formula, "right operand")

    def __str__(self):
        return f"{symbols.LBRACKET}{self.left}{self.symbol}{self.right}{symbols.RBRACKET}"


@dataclass(frozen=True)
class And(Connective):
    symbol = symbols.AND


@dataclass(frozen=True)
class Or(Connective):
    symbol = symbols.OR


@dataclass(frozen=True)
class Implies(Connective):
    symbol = symbols.IMPLIES


@dataclass(frozen=True)
class Quantified(Formula):
    """Shared shape of Exists and ForAll. The variable may be given by name."""
    variable: Variable
    body: Formula

    symbol = ""

    def __post_init__(self):
        object.__setattr__(self, "variable", as_variable(self.variable))
        _require(self.body, Formula, "quantified body")

    @property
    def name(self) -> str:
        return self.variable.name

    def __str__(self):
        return f"{self.symbol}{self.variable}{symbols.QUANT_SEP}{self.body}"


@dataclass(frozen=True)
class Exists(Quantified):
    symbol = symbols.EXISTS


@dataclass(frozen=True)
class ForAll(Quantified):
    symbol = symbols.FORALL


# --- Constructors ---
# These always produce grammatical formulas. They may still be false, and
# they may still break the quantification rules; see wellformed.py.

def eq(left: Term, right: Term) -> Equality:
    return Equality(left, right)


def not_(formula: Formula) -> Negation:
    return Negation(formula)


def and_(left: Formula, right: Formula) -> And:
    return And(left, right)


def or_(left: Formula, right: Formula) -> Or:
    return Or(left, right)


def implies(left: Formula, right: Formula) -> Implies:
    return Implies(left, right)


def exists(variable, formula: Formula) -> Exists:
    return Exists(as_variable(variable), formula)


def forall(variable, formula: Formula) -> ForAll:
    return ForAll(as_variable(variable), formula)
