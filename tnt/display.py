"""
Printing a Deduction: one numbered line per step, indented while a
supposition is open, with the rule that produced it in brackets.
"""

INDENT = "   "


def format_step(index: int, step) -> str:
    """One line of the listing: number, indentation for the supposition depth, formula, reason."""
    line = f"{index}) {INDENT * step.depth}{step.formula}"
    if step.annotation:
        line += f"  [{step.annotation}]"
    return line


def print_deduction(deduction):
    """Print the whole proof log of a Deduction."""
    print(f"\n{'='*60}")
    print(f"{deduction.title or 'Deduction'} ({len(deduction)} steps)")
    print(f"{'='*60}")
    for i, step in enumerate(deduction.steps):
        print(f"  {format_step(i, step)}")
    if deduction.depth:
        print(f"  (supposition opened at {deduction.scope_start} is still open)")
    print(f"{'='*60}")
