"""chembalance constants."""

import enum


class TokenType(str, enum.Enum):
    """Token kinds produced when scanning formula and equation text."""

    ELEMENT = "element"
    """A single uppercase element symbol."""

    COUNT = "count"
    """A run of digits following an element symbol."""

    PLUS = "plus"
    """The `+` formula separator."""

    EQUALS = "equals"
    """The `=` side separator."""


class Side(str, enum.Enum):
    """Equation sides."""

    LHS = "lhs"
    RHS = "rhs"
