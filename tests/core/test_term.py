"""
Unit tests for terms.

The core claims:
    - Canonical text:  str() gives exactly the TNT spelling, S and parentheses included
    - Variables:       only a lowercase letter plus primes is a variable name
    - Structure:       equal terms compare and hash equal; terms are immutable
    - Replacement:     replace() swaps every occurrence and nothing else
    - Long numerals:   thousands of S print, compare, hash and substitute without recursing
"""

import dataclasses

import pytest
from hypothesis import given
from hypothesis import strategies as st

from tnt.core import (
    InvalidVariable, Zero, Variable, Successor, Sum, Product,
    var, succ, sum_, prod, num,
)


# ── Helpers ─────────────────────────────────────────────────────────────────

a, b = Variable("a"), Variable("b")


# ── Canonical text ──────────────────────────────────────────────────────────

class TestCanonicalText:
    def test_zero(self):
        assert str(Zero()) == "0"

    def test_numerals(self):
        assert str(num(0)) == "0"
        assert str(num(3)) == "SSS0"

    def test_sum_and_product_are_parenthesized(self):
        assert str(sum_(a, succ(b))) == "(a+Sb)"
        assert str(prod(sum_(a, b), num(1))) == "((a+b)*S0)"

    def test_successor_of_compound(self):
        assert str(succ(sum_(a, b))) == "S(a+b)"

    @given(st.integers(min_value=0, max_value=50))
    def test_numeral_has_n_successors(self, n):
        assert str(num(n)) == "S" * n + "0"

    def test_negative_numeral_rejected(self):
        with pytest.raises(ValueError):
            num(-1)


# ── Variables ───────────────────────────────────────────────────────────────

class TestVariableNames:
    @pytest.mark.parametrize("name", ["a", "z", "b'", "c'''"])
    def test_valid(self, name):
        assert Variable(name).name == name

    @pytest.mark.parametrize("name", ["", "A", "ab", "'a", "a1", "S", "a '"])
    def test_invalid(self, name):
        with pytest.raises(InvalidVariable):
            Variable(name)

    def test_invalid_is_a_value_error(self):
        with pytest.raises(ValueError):
            var("0")

    def test_primes_make_distinct_variables(self):
        assert Variable("a") != Variable("a'")


# ── Structure ───────────────────────────────────────────────────────────────

class TestStructure:
    def test_structural_equality(self):
        assert sum_(a, num(2)) == Sum(Variable("a"), Successor(Successor(Zero())))

    def test_sum_is_not_product(self):
        assert Sum(a, b) != Product(a, b)

    def test_hashable(self):
        assert len({sum_(a, b), sum_(a, b), prod(a, b)}) == 2

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            a.name = "b"

    def test_get_vars_in_order_of_appearance(self):
        t = prod(sum_(b, a), sum_(a, var("c")))
        assert list(t.get_vars()) == ["b", "a", "c"]

    def test_contains_var_is_by_name_not_prefix(self):
        t = succ(Variable("a'"))
        assert t.contains_var("a'")
        assert not t.contains_var("a")


# ── Replacement ─────────────────────────────────────────────────────────────

class TestReplace:
    def test_replaces_every_occurrence(self):
        t = sum_(a, succ(a))
        assert t.replace("a", num(1)) == sum_(num(1), succ(num(1)))

    def test_leaves_other_variables(self):
        t = sum_(a, b)
        assert t.replace("a", Zero()) == sum_(Zero(), b)

    def test_missing_variable_is_identity(self):
        t = prod(a, b)
        assert t.replace("c", Zero()) == t

    def test_does_not_touch_primed_variant(self):
        t = sum_(a, Variable("a'"))
        assert str(t.replace("a", b)) == "(b+a')"


# ── Long numerals ───────────────────────────────────────────────────────────

class TestLongNumerals:
    N = 5000

    def test_text(self):
        assert str(num(self.N)) == "S" * self.N + "0"

    def test_equality_and_hash(self):
        assert num(self.N) == num(self.N)
        assert num(self.N) != num(self.N + 1)
        assert hash(num(self.N)) == hash(num(self.N))

    def test_replace_under_many_successors(self):
        t = succ(a)
        for _ in range(self.N):
            t = succ(t)
        assert t.replace("a", Zero()) == num(self.N + 2)
        assert list(t.get_vars()) == ["a"]

    def test_successor_is_not_zero(self):
        assert num(1) != Zero()
        assert Zero() != num(1)
