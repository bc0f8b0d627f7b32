"""
Unit tests for the induction rule.

The core claims:
    - base P[v:=0] and general Av:[P>P[v:=Sv]] give Av:P
    - the general case is matched exactly: no reordering, no renaming
    - the base case must be exactly P[v:=0]
"""

import pytest

from tnt.core import InductionError, DeductionError, Variable, parse_formula
from tnt.inference import induction


# ── Helpers ─────────────────────────────────────────────────────────────────

def f(text):
    return parse_formula(text)


b, c, d = Variable("b"), Variable("c"), Variable("d")


class TestInductionAccepts:
    def test_identity(self):
        assert str(induction(Variable("x"), f("0=0"), f("Ax:[x=x>Sx=Sx]"))) == "Ax:x=x"

    def test_simple(self):
        result = induction(b, f("(0+0)=0"), f("Ab:[(0+b)=b>(0+Sb)=Sb]"))
        assert str(result) == "Ab:(0+b)=b"

    def test_quantified_theorem(self):
        result = induction(
            c,
            f("Ad:(d+S0)=(Sd+0)"),
            f("Ac:[Ad:(d+Sc)=(Sd+c)>Ad:(d+SSc)=(Sd+Sc)]"),
        )
        assert str(result) == "Ac:Ad:(d+Sc)=(Sd+c)"

    def test_other_free_variables_carried(self):
        result = induction(b, f("(c+0)=(c+0)"), f("Ab:[(c+b)=(c+b)>(c+Sb)=(c+Sb)]"))
        assert str(result) == "Ab:(c+b)=(c+b)"


class TestInductionRejects:
    def test_general_case_on_other_variable(self):
        with pytest.raises(InductionError):
            induction(c, f("(0+0)=0"), f("Ab:[(0+b)=b>(0+Sb)=Sb]"))

    def test_general_case_not_an_implication(self):
        with pytest.raises(InductionError):
            induction(b, f("(0+0)=0"), f("Ab:(0+b)=b"))

    def test_general_case_without_quantifier(self):
        with pytest.raises(InductionError):
            induction(b, f("(0+0)=0"), f("[(0+b)=b>(0+Sb)=Sb]"))

    def test_step_with_sides_swapped(self):
        with pytest.raises(InductionError):
            induction(b, f("(0+0)=0"), f("Ab:[(0+b)=b>Sb=(0+Sb)]"))

    def test_wrong_base_case(self):
        with pytest.raises(InductionError):
            induction(b, f("(0+S0)=S0"), f("Ab:[(0+b)=b>(0+Sb)=Sb]"))

    def test_base_case_mentions_variable(self):
        with pytest.raises(InductionError):
            induction(b, f("(0+b)=b"), f("Ab:[(0+b)=b>(0+Sb)=Sb]"))

    def test_base_case_renamed_is_not_enough(self):
        with pytest.raises(InductionError):
            induction(
                c,
                f("Ae:(e+S0)=(Se+0)"),
                f("Ac:[Ad:(d+Sc)=(Sd+c)>Ad:(d+SSc)=(Sd+Sc)]"),
            )

    def test_is_a_deduction_error(self):
        with pytest.raises(DeductionError):
            induction(d, f("0=0"), f("Ad:[d=d>d=Sd]"))

