"""
Unit tests for the equality rules.

The core claims:
    - successor / predecessor add and remove one S on both sides
    - symmetry swaps the sides
    - transitivity needs the middle terms to be identical, not just equal in value
    - none of them look inside a compound formula
"""

import pytest

from tnt.core import StructureError, MismatchError, DeductionError, parse_formula
from tnt.inference import successor, predecessor, symmetry, transitivity


# ── Helpers ─────────────────────────────────────────────────────────────────

def f(text):
    return parse_formula(text)


class TestSuccessor:
    def test_adds_s_to_both_sides(self):
        assert str(successor(f("(a+0)=a"))) == "S(a+0)=Sa"

    def test_requires_equality(self):
        with pytest.raises(StructureError):
            successor(f("~a=0"))


class TestPredecessor:
    def test_removes_s_from_both_sides(self):
        assert str(predecessor(f("SSa=S(b+c)"))) == "Sa=(b+c)"

    def test_one_side_without_s(self):
        with pytest.raises(StructureError):
            predecessor(f("Sa=(S0+0)"))

    def test_inverse_of_successor(self):
        g = f("(a*b)=SS0")
        assert predecessor(successor(g)) == g


class TestSymmetry:
    def test_swaps_sides(self):
        assert str(symmetry(f("(S0+0)=S0"))) == "S0=(S0+0)"

    def test_quantified_equality_is_not_an_equality(self):
        with pytest.raises(StructureError):
            symmetry(f("Aa:a=a"))


class TestTransitivity:
    def test_variables(self):
        assert str(transitivity(f("a=b"), f("b=c"))) == "a=c"

    def test_chains(self):
        result = transitivity(f("(S0+S0)=S(S0+0)"), f("S(S0+0)=SS0"))
        assert str(result) == "(S0+S0)=SS0"

    def test_middle_terms_must_be_identical(self):
        with pytest.raises(MismatchError) as info:
            transitivity(f("a=(0+b)"), f("(b+0)=c"))
        assert len(info.value.formulas) == 2

    def test_order_matters(self):
        with pytest.raises(MismatchError):
            transitivity(f("b=c"), f("a=b"))

    def test_second_must_be_equality(self):
        with pytest.raises(StructureError):
            transitivity(f("a=b"), f("[b=c&c=d]"))

    def test_errors_are_deduction_errors(self):
        with pytest.raises(DeductionError):
            transitivity(f("a=b"), f("c=d"))
