"""
Variable queries and substitution over formulas.

Every function here walks the formula tree and dispatches on node type.
Results that are "sets" of variable names come back as lists in
left-to-right order of first appearance, so output is deterministic.

Free vs bound:
    In Aa:(a+b)=0, `a` is bound and `b` is free. A variable can be free in
    one subformula and bound in another only in formulas that break the
    well-formedness rules; the functions here still scope correctly in that
    case, they just never need to.

Substitution:
    replace_free(f, v, t)    v -> t at every free occurrence of v.
                             No capture check: that is the caller's job,
                             because only the caller knows whether the
                             rule allows it (see inference/quantifier.py).
    replace_term(f, s, v)    every free occurrence of the term s -> v.
                             Occurrences under a quantifier binding one of
                             s's variables are not occurrences of s.
    austere(f)               bound variables renamed a, a', a'', ...
"""

from . import symbols
from .term import Term, Variable, Zero, Successor, Sum, Product, successor_run, with_successors
from .formula import Formula, Equality, Negation, Connective, Quantified


def _ordered(names) -> list:
    return list(dict.fromkeys(names))


# --- Queries ---

def all_vars(formula: Formula) -> list:
    """Every variable name that appears, in a term or in a quantifier."""
    found = []

    def walk(f):
        if isinstance(f, Equality):
            found.extend(f.left.get_vars())
            found.extend(f.right.get_vars())
        elif isinstance(f, Negation):
            walk(f.arg)
        elif isinstance(f, Connective):
            walk(f.left)
            walk(f.right)
        elif isinstance(f, Quantified):
            found.append(f.name)
            walk(f.body)

    walk(formula)
    return _ordered(found)


def free_vars(formula: Formula) -> list:
    """Variables with at least one occurrence outside any quantifier binding them."""
    found = []

    def walk(f, bound):
        if isinstance(f, Equality):
            for name in list(f.left.get_vars()) + list(f.right.get_vars()):
                if name not in bound:
                    found.append(name)
        elif isinstance(f, Negation):
            walk(f.arg, bound)
        elif isinstance(f, Connective):
            walk(f.left, bound)
            walk(f.right, bound)
        elif isinstance(f, Quantified):
            walk(f.body, bound | {f.name})

    walk(formula, frozenset())
    return _ordered(found)


def bound_vars(formula: Formula) -> list:
    """Variables named by some quantifier in the formula."""
    found = []

    def walk(f):
        if isinstance(f, Negation):
            walk(f.arg)
        elif isinstance(f, Connective):
            walk(f.left)
            walk(f.right)
        elif isinstance(f, Quantified):
            found.append(f.name)
            walk(f.body)

    walk(formula)
    return _ordered(found)


def contains_var(formula: Formula, name: str) -> bool:
    return name in all_vars(formula)


def is_free(formula: Formula, name: str) -> bool:
    return name in free_vars(formula)


def is_bound(formula: Formula, name: str) -> bool:
    return name in bound_vars(formula)


# --- Substitution ---

def replace_free(formula: Formula, name: str, term: Term) -> Formula:
    """Replace every free occurrence of the variable `name` with `term`."""
    if isinstance(formula, Equality):
        return Equality(formula.left.replace(name, term), formula.right.replace(name, term))
    if isinstance(formula, Negation):
        return Negation(replace_free(formula.arg, name, term))
    if isinstance(formula, Connective):
        return type(formula)(replace_free(formula.left, name, term),
                             replace_free(formula.right, name, term))
    if isinstance(formula, Quantified):
        if formula.name == name:
            return formula  # shadowed below here
        return type(formula)(formula.variable, replace_free(formula.body, name, term))
    raise TypeError(f"not a formula: {formula!r}")


def replace_subterm(term: Term, target: Term, replacement: Term) -> Term:
    """Replace every subterm equal to `target`, outermost first."""
    count = 0
    while term != target and isinstance(term, Successor):
        count += 1
        term = term.arg
    if term == target:
        term = replacement
    elif isinstance(term, (Sum, Product)):
        term = type(term)(replace_subterm(term.left, target, replacement),
                          replace_subterm(term.right, target, replacement))
    return with_successors(count, term)


def replace_term(formula: Formula, target: Term, replacement: Term) -> Formula:
    """Replace the free occurrences of the term `target` with `replacement`."""
    target_vars = set(target.get_vars())

    def walk(f):
        if isinstance(f, Equality):
            return Equality(replace_subterm(f.left, target, replacement),
                            replace_subterm(f.right, target, replacement))
        if isinstance(f, Negation):
            return Negation(walk(f.arg))
        if isinstance(f, Connective):
            return type(f)(walk(f.left), walk(f.right))
        if isinstance(f, Quantified):
            if f.name in target_vars:
                return f
            return type(f)(f.variable, walk(f.body))
        raise TypeError(f"not a formula: {f!r}")

    return walk(formula)


def rename_bound(formula: Formula, mapping: dict) -> Formula:
    """
    Rename bound variables by name, simultaneously.

    Each quantifier whose variable is in `mapping` is renamed together with
    every occurrence it binds. Free occurrences are left alone.
    """
    def rename_term(term, scope):
        if isinstance(term, Variable):
            return Variable(scope[term.name]) if term.name in scope else term
        if isinstance(term, Zero):
            return term
        if isinstance(term, Successor):
            count, inner = successor_run(term)
            return with_successors(count, rename_term(inner, scope))
        return type(term)(rename_term(term.left, scope), rename_term(term.right, scope))

    def walk(f, scope):
        if isinstance(f, Equality):
            return Equality(rename_term(f.left, scope), rename_term(f.right, scope))
        if isinstance(f, Negation):
            return Negation(walk(f.arg, scope))
        if isinstance(f, Connective):
            return type(f)(walk(f.left, scope), walk(f.right, scope))
        if isinstance(f, Quantified):
            new_name = mapping.get(f.name, f.name)
            inner = dict(scope)
            if new_name != f.name:
                inner[f.name] = new_name
            else:
                inner.pop(f.name, None)
            return type(f)(Variable(new_name), walk(f.body, inner))
        raise TypeError(f"not a formula: {f!r}")

    return walk(formula, {})


# --- Austere form ---

def austere_names(exclude=()):
    """a, a', a'', ... skipping anything in `exclude`."""
    name = symbols.AUSTERE_BASE
    while True:
        if name not in exclude:
            yield name
        name += symbols.PRIME


def austere(formula: Formula) -> Formula:
    """
    Rename the bound variables to a, a', a'', ... in order of first binding.

    Names that occur free are skipped so the renaming never captures.
    Two formulas that differ only in their choice of bound names have the
    same austere form, and austere(austere(f)) == austere(f).
    """
    free = set(free_vars(formula))
    fresh = austere_names(free)
    mapping = {name: next(fresh) for name in bound_vars(formula)}
    return rename_bound(formula, mapping)


def same_up_to_naming(left: Formula, right: Formula) -> bool:
    return austere(left) == austere(right)
