"""
Terms: the arithmetic half of TNT.

    Zero()                 ->  0
    Variable("a'")         ->  a'
    Successor(t)           ->  St
    Sum(s, t)              ->  (s+t)
    Product(s, t)          ->  (s*t)

Terms are frozen dataclasses, so equality and hashing are structural and a
term can never be changed after it is built. "Changing" a term means
building a new one; replace() does exactly that.

Nothing in here knows about quantifiers. Term.replace() swaps every
occurrence of a variable, bound or not, because at this level there is no
such thing as bound. Capture is policed one layer up, by the formula rules.
"""

import re
from dataclasses import dataclass

from . import symbols
from .errors import InvalidVariable


VARIABLE_NAME = re.compile(rf"^{symbols.VARIABLE_PATTERN}$")


class Term:
    """Base class for the five kinds of term."""

    def contains_var(self, name: str) -> bool:
        raise NotImplementedError

    def get_vars(self) -> dict:
        """Variable names in left-to-right order of first appearance (dict used as ordered set)."""
        found = {}
        self._collect_vars(found)
        return found

    def _collect_vars(self, found: dict):
        raise NotImplementedError

    def replace(self, name: str, term: "Term") -> "Term":
        raise NotImplementedError


@dataclass(frozen=True)
class Zero(Term):
    def contains_var(self, name: str) -> bool:
        return False

    def _collect_vars(self, found: dict):
        pass

    def replace(self, name: str, term: Term) -> Term:
        return self

    def __str__(self):
        return symbols.ZERO


@dataclass(frozen=True)
class Variable(Term):
    """A lowercase letter followed by any number of primes: a, b', z''."""
    name: str

    def __post_init__(self):
        if not isinstance(self.name, str) or not VARIABLE_NAME.match(self.name):
            raise InvalidVariable(self.name)

    def contains_var(self, name: str) -> bool:
        return self.name == name

    def _collect_vars(self, found: dict):
        found.setdefault(self.name, None)

    def replace(self, name: str, term: Term) -> Term:
        return term if self.name == name else self

    def __str__(self):
        return self.name


def successor_run(term: Term):
    """Split SSS...t into (number of S, t). Iterative, so long numerals are fine."""
    count = 0
    while isinstance(term, Successor):
        count += 1
        term = term.arg
    return count, term


def with_successors(count: int, term: Term) -> Term:
    for _ in range(count):
        term = Successor(term)
    return term


@dataclass(frozen=True, eq=False)
class Successor(Term):
    """
    St. Numerals are long chains of these, so every method walks the run
    of S in a loop instead of recursing once per S.
    """
    arg: Term

    def contains_var(self, name: str) -> bool:
        return successor_run(self)[1].contains_var(name)

    def _collect_vars(self, found: dict):
        successor_run(self)[1]._collect_vars(found)

    def replace(self, name: str, term: Term) -> Term:
        count, inner = successor_run(self)
        return with_successors(count, inner.replace(name, term))

    def __eq__(self, other):
        if not isinstance(other, Successor):
            return NotImplemented
        return successor_run(self) == successor_run(other)

    def __hash__(self):
        return hash((Successor, *successor_run(self)))

    def __str__(self):
        count, inner = successor_run(self)
        return f"{symbols.SUCC * count}{inner}"


@dataclass(frozen=True)
class _BinaryTerm(Term):
    left: Term
    right: Term

    operator = ""

    def contains_var(self, name: str) -> bool:
        return self.left.contains_var(name) or self.right.contains_var(name)

    def _collect_vars(self, found: dict):
        self.left._collect_vars(found)
        self.right._collect_vars(found)

    def replace(self, name: str, term: Term) -> Term:
        return type(self)(self.left.replace(name, term), self.right.replace(name, term))

    def __str__(self):
        return f"{symbols.LPAREN}{self.left}{self.operator}{self.right}{symbols.RPAREN}"


@dataclass(frozen=True)
class Sum(_BinaryTerm):
    operator = symbols.PLUS


@dataclass(frozen=True)
class Product(_BinaryTerm):
    operator = symbols.TIMES


# --- Constructors ---

def var(name: str) -> Variable:
    return Variable(name)


def succ(term: Term) -> Successor:
    return Successor(term)


def sum_(left: Term, right: Term) -> Sum:
    return Sum(left, right)


def prod(left: Term, right: Term) -> Product:
    return Product(left, right)


def num(n: int) -> Term:
    """The numeral for n: num(0) is 0, num(2) is SS0."""
    if n < 0:
        raise ValueError(f"numerals are natural numbers, got {n}")
    return with_successors(n, Zero())


def as_variable(value) -> Variable:
    """Accept a Variable or a bare name."""
    if isinstance(value, Variable):
        return value
    return Variable(value)
