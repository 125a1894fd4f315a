"""Helpers functions for unit tests."""

from chembalance import Formula, Term


def create_formula(*terms: tuple[str, int]) -> Formula:
    """Create a formula from element and count pairs."""
    return Formula.from_terms(*(Term(element=e, count=n) for e, n in terms))
