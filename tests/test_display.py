"""
Tests for the printed proof listing.
"""

from tnt import Deduction, PEANO, format_step, print_deduction


class TestFormatStep:
    def test_depth_zero(self):
        d = Deduction()
        d.add_axiom(PEANO[0])
        assert format_step(0, d.steps[0]) == "0) Aa:~Sa=0  [axiom]"

    def test_indented_inside_supposition(self):
        d = Deduction()
        d.supposition("a=0")
        d.symmetry(0, comment="flip")
        assert format_step(1, d.steps[1]) == "1)    0=a  [flip]"


class TestPrintDeduction:
    def test_lists_every_step(self, capsys):
        d = Deduction("Tiny")
        d.add_axiom(PEANO[1])
        d.specification(0, "a", "0")
        print_deduction(d)
        out = capsys.readouterr().out
        assert "Tiny (2 steps)" in out
        assert "0) Aa:(a+0)=a" in out
        assert "1) (0+0)=0" in out
        assert "=" * 60 in out

    def test_mentions_open_supposition(self, capsys):
        d = Deduction("Open")
        d.supposition("a=0")
        print_deduction(d)
        assert "still open" in capsys.readouterr().out
