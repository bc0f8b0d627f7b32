"""
The axioms of TNT.

Five statements, taken as true without proof. They are not quite Peano's
axioms (there is no induction axiom: induction is a rule of the
Deduction), but they pin down the same arithmetic:

    Aa:~Sa=0                  0 is not the successor of anything
    Aa:(a+0)=a                adding 0 changes nothing
    Aa:Ab:(a+Sb)=S(a+b)       S slides out of a sum
    Aa:(a*0)=0                anything times 0 is 0
    Aa:Ab:(a*Sb)=((a*b)+a)    multiplying by a successor adds one more copy

Parsed once at import and kept in a tuple. Formulas are immutable, so the
same objects can be handed to every Deduction.
"""

from .core.parser import parse_formula
from .core.term import Zero, Successor


PEANO_AXIOM_TEXT = (
    "Aa:~Sa=0",
    "Aa:(a+0)=a",
    "Aa:Ab:(a+Sb)=S(a+b)",
    "Aa:(a*0)=0",
    "Aa:Ab:(a*Sb)=((a*b)+a)",
)

PEANO = tuple(parse_formula(text) for text in PEANO_AXIOM_TEXT)

ZERO = Zero()
ONE = Successor(ZERO)
