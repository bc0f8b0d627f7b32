"""
Rules that add, remove or move quantifiers.

    specification    Av:F              ->  F[v:=t]
    generalization   F                 ->  Av:F
    existence        F (containing t)  ->  Ev:F[t:=v]
    interchange_ea   ...~Ev:F...       ->  ...Av:~F...   (k-th occurrence)
    interchange_ae   ...Av:~F...       ->  ...~Ev:F...   (k-th occurrence)

This is where capture is prevented. Term.replace() will happily put a
variable underneath a quantifier that binds it; specification refuses to
ask it to. Every check is structural: the formula tree is matched node by
node, never searched as text, so `a` and `a'` can never be confused.
"""

from typing import Optional

from ..core.errors import ScopeError, CaptureError, GeneralizationError
from ..core.formula import Formula, Equality, Negation, Connective, Quantified, Exists, ForAll
from ..core.term import Term, Variable
from ..core.substitution import is_bound, is_free, replace_free, replace_term


def specification(formula: Formula, variable: Variable, term: Term) -> Formula:
    """
    Drop the outermost Av: and put `term` where `v` was.

    Only the outermost quantifier can be specified. No variable of `term`
    may be quantified inside the body (except v itself), otherwise the
    substitution would change what the term means.
    """
    if not (isinstance(formula, ForAll) and formula.name == variable.name):
        raise ScopeError(
            f"specification: {variable} is not universally quantified at the front of {formula}",
            formulas=(formula,),
            variables=(variable,),
        )
    captured = [name for name in term.get_vars()
                if name != variable.name and is_bound(formula.body, name)]
    if captured:
        raise CaptureError(
            f"specification: {term} contains {', '.join(captured)}, "
            f"which is quantified in {formula}",
            formulas=(formula,),
            variables=(variable, term),
        )
    return replace_free(formula.body, variable.name, term)


def generalization(formula: Formula, variable: Variable,
                   premise: Optional[Formula] = None) -> ForAll:
    """
    Put Av: in front of the theorem.

    Inside a supposition the variable must not be free in the premise:
    the premise is about one particular v, so nothing derived from it
    holds for all v.
    """
    if is_bound(formula, variable.name):
        raise GeneralizationError(
            f"generalization: {variable} is already quantified in {formula}",
            formulas=(formula,),
            variables=(variable,),
        )
    if premise is not None and is_free(premise, variable.name):
        raise GeneralizationError(
            f"generalization: {variable} is free in the premise {premise}",
            formulas=(formula, premise),
            variables=(variable,),
        )
    return ForAll(variable, formula)


def existence(formula: Formula, term: Term, variable: Variable) -> Exists:
    """Replace the free occurrences of `term` with `variable` and put Ev: in front."""
    if is_bound(formula, variable.name):
        raise GeneralizationError(
            f"existence: {variable} is already quantified in {formula}",
            formulas=(formula,),
            variables=(variable, term),
        )
    if term != variable and is_free(formula, variable.name):
        raise GeneralizationError(
            f"existence: {variable} already occurs free in {formula}",
            formulas=(formula,),
            variables=(variable, term),
        )
    return Exists(variable, replace_term(formula, term, variable))


def _rewrite_nth(formula: Formula, matches, rewrite, n: int):
    """
    Rewrite the n-th node (pre-order, i.e. left to right in the text) for
    which matches() holds. Returns (new_formula, number_of_matches_seen).
    """
    seen = 0

    def walk(f):
        nonlocal seen
        if matches(f):
            seen += 1
            if seen == n + 1:
                return rewrite(f)
        if isinstance(f, Equality):
            return f
        if isinstance(f, Negation):
            return Negation(walk(f.arg))
        if isinstance(f, Connective):
            return type(f)(walk(f.left), walk(f.right))
        if isinstance(f, Quantified):
            return type(f)(f.variable, walk(f.body))
        raise TypeError(f"not a formula: {f!r}")

    return walk(formula), seen


def interchange_ea(formula: Formula, variable: Variable, n: int) -> Formula:
    """~Ev:F becomes Av:~F at the n-th (0-indexed) place it occurs."""
    def matches(f):
        return (isinstance(f, Negation) and isinstance(f.arg, Exists)
                and f.arg.name == variable.name)

    def rewrite(f):
        return ForAll(variable, Negation(f.arg.body))

    result, seen = _rewrite_nth(formula, matches, rewrite, n)
    if n < 0 or seen <= n:
        raise ScopeError(
            f"interchange: ~E{variable}: occurs {seen} time(s) in {formula}, "
            f"no occurrence number {n}",
            formulas=(formula,),
            variables=(variable,),
        )
    return result


def interchange_ae(formula: Formula, variable: Variable, n: int) -> Formula:
    """Av:~F becomes ~Ev:F at the n-th (0-indexed) place it occurs."""
    def matches(f):
        return (isinstance(f, ForAll) and f.name == variable.name
                and isinstance(f.body, Negation))

    def rewrite(f):
        return Negation(Exists(variable, f.body.arg))

    result, seen = _rewrite_nth(formula, matches, rewrite, n)
    if n < 0 or seen <= n:
        raise ScopeError(
            f"interchange: A{variable}:~ occurs {seen} time(s) in {formula}, "
            f"no occurrence number {n}",
            formulas=(formula,),
            variables=(variable,),
        )
    return result
