"""
Rules that work on a single equality s=t (or two of them).

    successor      s=t            ->  Ss=St
    predecessor    Ss=St          ->  s=t
    symmetry       s=t            ->  t=s
    transitivity   r=s, s=t       ->  r=t

All four look only at the outermost node. A theorem that merely contains
an equality somewhere inside it is not an equality.
"""

from ..core.errors import StructureError, MismatchError
from ..core.formula import Formula, Equality
from ..core.term import Successor


def _require_equality(formula: Formula, rule: str) -> Equality:
    if not isinstance(formula, Equality):
        raise StructureError(
            f"{rule}: {formula} is not an equality",
            formulas=(formula,),
        )
    return formula


def successor(formula: Formula) -> Equality:
    f = _require_equality(formula, "successor")
    return Equality(Successor(f.left), Successor(f.right))


def predecessor(formula: Formula) -> Equality:
    f = _require_equality(formula, "predecessor")
    if not (isinstance(f.left, Successor) and isinstance(f.right, Successor)):
        raise StructureError(
            f"predecessor: both sides of {f} must start with S",
            formulas=(f,),
        )
    return Equality(f.left.arg, f.right.arg)


def symmetry(formula: Formula) -> Equality:
    f = _require_equality(formula, "symmetry")
    return Equality(f.right, f.left)


def transitivity(first: Formula, second: Formula) -> Equality:
    """r=s and s=t give r=t. The two middle terms must be identical, not just equal in value."""
    f1 = _require_equality(first, "transitivity")
    f2 = _require_equality(second, "transitivity")
    if f1.right != f2.left:
        raise MismatchError(
            f"transitivity: {f1.right} (right of {f1}) does not match {f2.left} (left of {f2})",
            formulas=(f1, f2),
            variables=(f1.right, f2.left),
        )
    return Equality(f1.left, f2.right)
