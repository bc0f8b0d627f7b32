"""
The induction rule.

    base:     P[v:=0]
    general:  Av:[P>P[v:=Sv]]
    ------------------------------
              Av:P

P is read off the general case, then both premises are rebuilt from it and
compared node for node. Nothing looser is accepted: a general case that is
logically equivalent but written differently (sides swapped, extra
quantifiers, a renamed variable) is an InductionError, and so is a base
case that only agrees up to variable naming.
"""

from ..core.errors import InductionError
from ..core.formula import Formula, Implies, ForAll
from ..core.term import Variable, Zero, Successor
from ..core.substitution import contains_var, is_bound, replace_free


def induction(variable: Variable, base: Formula, general: Formula) -> ForAll:
    v = variable.name

    if not (isinstance(general, ForAll) and general.name == v
            and isinstance(general.body, Implies)):
        raise InductionError(
            f"induction: the general case must have the form A{v}:[P>P'], got {general}",
            formulas=(base, general),
            variables=(variable,),
        )

    theorem = general.body.left
    if is_bound(theorem, v):
        raise InductionError(
            f"induction: {v} is quantified inside {theorem}",
            formulas=(base, general),
            variables=(variable,),
        )

    step_case = replace_free(theorem, v, Successor(variable))
    if general.body.right != step_case:
        raise InductionError(
            f"induction: the general case must be {ForAll(variable, Implies(theorem, step_case))}, "
            f"got {general}",
            formulas=(base, general),
            variables=(variable,),
        )

    if contains_var(base, v):
        raise InductionError(
            f"induction: {v} occurs in the base case {base}",
            formulas=(base, general),
            variables=(variable,),
        )

    base_case = replace_free(theorem, v, Zero())
    if base != base_case:
        raise InductionError(
            f"induction: the base case must be {base_case}, got {base}",
            formulas=(base, general),
            variables=(variable,),
        )

    return ForAll(variable, theorem)
