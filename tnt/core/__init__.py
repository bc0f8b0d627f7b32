from .errors import (
    TNTError, ParseError, MalformedFormula, InvalidVariable,
    DeductionError, AxiomError, ScopeError, TheoremIndexError, CaptureError,
    GeneralizationError, MismatchError, StructureError, SuppositionError,
    NestedSuppositionError, NoSuppositionError, InductionError,
)
from .term import Term, Zero, Variable, Successor, Sum, Product, var, succ, sum_, prod, num
from .formula import (
    Formula, Equality, Negation, Connective, And, Or, Implies,
    Quantified, Exists, ForAll,
    eq, not_, and_, or_, implies, exists, forall,
)
from .substitution import (
    all_vars, free_vars, bound_vars, contains_var, is_free, is_bound,
    replace_free, replace_term, rename_bound, austere, same_up_to_naming,
)
from .wellformed import check_well_formed, is_well_formed
from .parser import parse_term, parse_formula, as_term, as_formula

__all__ = [
    "TNTError", "ParseError", "MalformedFormula", "InvalidVariable",
    "DeductionError", "AxiomError", "ScopeError", "TheoremIndexError", "CaptureError",
    "GeneralizationError", "MismatchError", "StructureError", "SuppositionError",
    "NestedSuppositionError", "NoSuppositionError", "InductionError",
    "Term", "Zero", "Variable", "Successor", "Sum", "Product",
    "var", "succ", "sum_", "prod", "num",
    "Formula", "Equality", "Negation", "Connective", "And", "Or", "Implies",
    "Quantified", "Exists", "ForAll",
    "eq", "not_", "and_", "or_", "implies", "exists", "forall",
    "all_vars", "free_vars", "bound_vars", "contains_var", "is_free", "is_bound",
    "replace_free", "replace_term", "rename_bound", "austere", "same_up_to_naming",
    "check_well_formed", "is_well_formed",
    "parse_term", "parse_formula", "as_term", "as_formula",
]
