"""
Everything that can go wrong, as typed exceptions.

Three families:
    ParseError / MalformedFormula / InvalidVariable
        bad input text or a bad AST. Raised while building things.
    DeductionError and its subclasses
        an inference rule refused to fire. Raised by the rule functions
        and passed through the Deduction unchanged. The log is never
        touched when one of these escapes.

All of them are ValueErrors, so callers that only care about "bad input"
can catch that.
"""


class TNTError(ValueError):
    """Base class for every error raised by this package."""


class ParseError(TNTError):
    """Input text is outside the TNT grammar."""

    def __init__(self, text: str, position: int, expected=()):
        self.text = text
        self.position = position
        self.fragment = text[position:]
        self.expected = tuple(sorted(expected))
        msg = f"cannot parse {text!r} at position {position}: {self.fragment!r}"
        if self.expected:
            msg += f" (expected one of {', '.join(self.expected)})"
        super().__init__(msg)


class MalformedFormula(TNTError):
    """Grammatical, but the quantification rules are broken."""

    def __init__(self, formula, variable: str, reason: str):
        self.formula = formula
        self.variable = variable
        self.reason = reason
        super().__init__(f"malformed formula {formula}: {reason}")


class InvalidVariable(TNTError):
    """A variable name that is not a lowercase letter plus primes."""

    def __init__(self, name):
        self.name = name
        super().__init__(f"invalid variable name {name!r}")


class DeductionError(TNTError):
    """
    An inference rule refused to produce a theorem.

    formulas:  the theorems (or candidate results) involved
    variables: the variables or terms the rule was asked to use
    """

    def __init__(self, message: str, formulas=(), variables=()):
        self.formulas = tuple(formulas)
        self.variables = tuple(variables)
        super().__init__(message)


class AxiomError(DeductionError):
    """The formula is not one of the deduction's axioms."""


class ScopeError(DeductionError):
    """A quantifier or a theorem is not where the rule needs it to be."""


class TheoremIndexError(ScopeError, IndexError):
    """There is no theorem at that index."""


class CaptureError(DeductionError):
    """Substituting the term would let a quantifier capture one of its variables."""


class GeneralizationError(DeductionError):
    """The variable may not be quantified here."""


class MismatchError(DeductionError):
    """Two equalities do not chain."""


class StructureError(DeductionError):
    """The theorem does not have the shape the rule needs."""


class SuppositionError(DeductionError):
    """Misuse of the supposition / implication block."""


class NestedSuppositionError(SuppositionError):
    """A supposition is already open; only one level is allowed."""


class NoSuppositionError(SuppositionError):
    """implication() was called with no open supposition."""


class InductionError(DeductionError):
    """The base case or general case does not match the induction schema."""
