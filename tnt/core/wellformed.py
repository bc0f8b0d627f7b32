"""
The quantification rules that the grammar alone cannot enforce.

A formula can be perfectly grammatical and still not be a formula of TNT:

    Aa:Aa:a=a              `a` quantified twice on one path
    [a=0&Aa:a=a]           `a` free on the left, bound on the right

Both are rejected with MalformedFormula, which is deliberately a different
error from ParseError: the text was readable, it just does not mean
anything.
"""

from .errors import MalformedFormula
from .formula import Formula, Equality, Negation, Connective, Quantified
from .substitution import free_vars, bound_vars


def check_well_formed(formula: Formula) -> Formula:
    """Raise MalformedFormula if the quantification rules are broken; else return the formula."""

    def walk(f, path):
        if isinstance(f, Equality):
            return
        if isinstance(f, Negation):
            walk(f.arg, path)
        elif isinstance(f, Connective):
            for one, other in ((f.left, f.right), (f.right, f.left)):
                clash = set(free_vars(one)) & set(bound_vars(other))
                if clash:
                    v = sorted(clash)[0]
                    raise MalformedFormula(
                        formula, v,
                        f"`{v}` is free in {one} but quantified in {other}",
                    )
            walk(f.left, path)
            walk(f.right, path)
        elif isinstance(f, Quantified):
            if f.name in path:
                raise MalformedFormula(
                    formula, f.name,
                    f"`{f.name}` is quantified again inside its own scope",
                )
            walk(f.body, path | {f.name})
        else:
            raise TypeError(f"not a formula: {f!r}")

    walk(formula, frozenset())
    return formula


def is_well_formed(formula: Formula) -> bool:
    try:
        check_well_formed(formula)
    except MalformedFormula:
        return False
    return True
