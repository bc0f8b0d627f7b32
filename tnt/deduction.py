"""
The Deduction: an append-only proof log with a one-level supposition scope.

Every public rule method follows the same three steps:

    1. fetch the theorems it refers to (scope-checked)
    2. compute the new formula with a pure rule from tnt.inference
    3. check the result is well-formed, then append it

If anything raises in 1 or 2 or 3, nothing has been written yet, so a
failed call leaves the deduction exactly as it was. The caller can fix
the arguments and try again.

Suppositions:
    supposition(P) opens a block: P is appended as if it were a theorem.
    implication() closes it: [P>Q] is appended, where Q is the last
    theorem written inside the block. Blocks do not nest -- depth is 0 or
    1, never anything else. Theorems written inside a closed block can no
    longer be used, since they were only ever true under P.

Logging:
    verbose=True prints each step as it is appended.
"""

from dataclasses import dataclass
from typing import Optional

from .axioms import PEANO
from .core.errors import (
    AxiomError, ScopeError, TheoremIndexError,
    NestedSuppositionError, NoSuppositionError,
)
from .core.formula import Formula, Implies
from .core.term import as_variable
from .core.parser import as_formula, as_term
from .core.substitution import austere, same_up_to_naming
from .core.wellformed import check_well_formed
from .inference import equality, quantifier
from .inference.induction import induction as _induction
from .display import format_step


@dataclass(frozen=True)
class Step:
    """One line of the proof log."""
    formula: Formula
    annotation: str = ""
    depth: int = 0
    scope_start: Optional[int] = None   # index of the open supposition's premise

    @property
    def name(self):
        return str(self.formula)

    def __repr__(self):
        return f"Step({self.name})"


class Deduction:
    """
    A proof under construction.

    title:   free text, used when printing
    axioms:  the formulas add_axiom() accepts (default: the five PEANO axioms)
    """

    def __init__(self, title: str = "", axioms=PEANO, verbose: bool = False):
        self.title = title
        self.axioms = tuple(as_formula(a) for a in axioms)
        self.verbose = verbose
        self._steps = []
        self._depth = 0
        self._scope_stack = []

    # --- Read access ---

    @property
    def steps(self) -> tuple:
        return tuple(self._steps)

    @property
    def depth(self) -> int:
        return self._depth

    @property
    def scope_start(self) -> Optional[int]:
        return self._scope_stack[-1] if self._scope_stack else None

    def __len__(self):
        return len(self._steps)

    def theorem(self, n: int) -> Formula:
        return self._step(n).formula

    def last_theorem(self) -> Formula:
        if not self._steps:
            raise TheoremIndexError(f"{self.title or 'deduction'} has no theorems yet")
        return self._steps[-1].formula

    def all_theorems(self) -> list:
        return [step.formula for step in self._steps]

    def proves(self, target) -> bool:
        """Is the last theorem the target, up to the names of bound variables?"""
        return bool(self._steps) and same_up_to_naming(self.last_theorem(), as_formula(target))

    # --- Internals ---

    def _step(self, n: int) -> Step:
        if not isinstance(n, int) or not 0 <= n < len(self._steps):
            raise TheoremIndexError(
                f"no theorem {n}: the log has {len(self._steps)} entries",
                variables=(n,),
            )
        return self._steps[n]

    def _get_theorem(self, n: int) -> Formula:
        """Fetch theorem n for use by a rule. Theorems from closed suppositions are off limits."""
        step = self._step(n)
        if step.depth > 0 and step.scope_start != self.scope_start:
            raise ScopeError(
                f"theorem {n} ({step.formula}) belongs to a supposition that is no longer open",
                formulas=(step.formula,),
                variables=(n,),
            )
        return step.formula

    def _push(self, formula: Formula, annotation: str) -> Formula:
        check_well_formed(formula)
        step = Step(formula, annotation, self._depth, self.scope_start)
        self._steps.append(step)
        if self.verbose:
            print(f"  {format_step(len(self._steps) - 1, step)}")
        return formula

    # --- Axioms and suppositions ---

    def add_axiom(self, formula, comment: str = "") -> Formula:
        f = as_formula(formula)
        target = austere(f)
        if not any(austere(axiom) == target for axiom in self.axioms):
            raise AxiomError(f"{f} is not an axiom of {self.title or 'this deduction'}",
                             formulas=(f,))
        return self._push(f, comment or "axiom")

    def supposition(self, premise, comment: str = "") -> Formula:
        f = as_formula(premise)
        if self._depth != 0:
            raise NestedSuppositionError(
                f"cannot suppose {f}: the supposition opened at theorem "
                f"{self.scope_start} is still open",
                formulas=(f, self._steps[self.scope_start].formula),
            )
        start = len(self._steps)
        self._depth = 1
        self._scope_stack.append(start)
        try:
            return self._push(f, comment or "supposition")
        except Exception:
            self._scope_stack.pop()
            self._depth = 0
            raise

    def implication(self, comment: str = "") -> Formula:
        if self._depth != 1:
            raise NoSuppositionError("implication: there is no open supposition")
        start = self._scope_stack[-1]
        result = Implies(self._steps[start].formula, self._steps[-1].formula)
        check_well_formed(result)
        self._scope_stack.pop()
        self._depth = 0
        return self._push(result, comment or f"implication ({start}-{len(self._steps) - 1})")

    # --- Rules of production ---

    def specification(self, n: int, variable, term, comment: str = "") -> Formula:
        v, t = as_variable(variable), as_term(term)
        result = quantifier.specification(self._get_theorem(n), v, t)
        return self._push(result, comment or f"specification of {n}: {v} -> {t}")

    def generalization(self, n: int, variable, comment: str = "") -> Formula:
        v = as_variable(variable)
        premise = self._steps[self.scope_start].formula if self._depth else None
        result = quantifier.generalization(self._get_theorem(n), v, premise)
        return self._push(result, comment or f"generalization of {n} over {v}")

    def existence(self, n: int, term, variable, comment: str = "") -> Formula:
        t, v = as_term(term), as_variable(variable)
        result = quantifier.existence(self._get_theorem(n), t, v)
        return self._push(result, comment or f"existence from {n}: {t} -> {v}")

    def successor(self, n: int, comment: str = "") -> Formula:
        result = equality.successor(self._get_theorem(n))
        return self._push(result, comment or f"successor of {n}")

    def predecessor(self, n: int, comment: str = "") -> Formula:
        result = equality.predecessor(self._get_theorem(n))
        return self._push(result, comment or f"predecessor of {n}")

    def symmetry(self, n: int, comment: str = "") -> Formula:
        result = equality.symmetry(self._get_theorem(n))
        return self._push(result, comment or f"symmetry of {n}")

    def transitivity(self, n1: int, n2: int, comment: str = "") -> Formula:
        result = equality.transitivity(self._get_theorem(n1), self._get_theorem(n2))
        return self._push(result, comment or f"transitivity of {n1} and {n2}")

    def interchange_ea(self, n: int, variable, k: int = 0, comment: str = "") -> Formula:
        v = as_variable(variable)
        result = quantifier.interchange_ea(self._get_theorem(n), v, k)
        return self._push(result, comment or f"interchange ~E{v}: -> A{v}:~ in {n}")

    def interchange_ae(self, n: int, variable, k: int = 0, comment: str = "") -> Formula:
        v = as_variable(variable)
        result = quantifier.interchange_ae(self._get_theorem(n), v, k)
        return self._push(result, comment or f"interchange A{v}:~ -> ~E{v}: in {n}")

    def induction(self, variable, base: int, general: int, comment: str = "") -> Formula:
        v = as_variable(variable)
        result = _induction(v, self._get_theorem(base), self._get_theorem(general))
        return self._push(result, comment or f"induction on {v} from {base} and {general}")
