"""
TNT: a deduction kernel for Typographical Number Theory.

Hofstadter's formal arithmetic from Godel, Escher, Bach. Formulas are
strings over a small alphabet; theorems are the strings you can reach from
the five axioms by the rules of production. A Deduction is a proof under
construction: every rule checks its premises before it writes anything, so
whatever ends up in the log really is a theorem.

Usage:
    from tnt import Deduction, PEANO

    d = Deduction("1+1=2")
    d.add_axiom(PEANO[2])                 # Aa:Ab:(a+Sb)=S(a+b)
    d.specification(0, "a", "S0")
    d.specification(1, "b", "0")          # (S0+S0)=S(S0+0)
    ...
"""

from .core import *  # noqa: F401,F403
from .core import __all__ as _core_all
from .axioms import PEANO, PEANO_AXIOM_TEXT, ZERO, ONE
from .deduction import Deduction, Step
from .display import format_step, print_deduction

__all__ = _core_all + [
    "PEANO", "PEANO_AXIOM_TEXT", "ZERO", "ONE",
    "Deduction", "Step",
    "format_step", "print_deduction",
]
