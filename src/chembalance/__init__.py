"""Parse chemical formulas and equations and check if equations are balanced.

Elements are represented by a single uppercase letter. A formula is a sequence of terms,
each term an element followed by an optional count, e.g. ``AX3YM67``. An equation contains
formulas separated by ``+`` on each side, with sides separated by ``=``, e.g.
``X3 + Y2Z2 = ZX + Y2X2 + Z``.

Objects
-------
- Term
- Formula
- Equation
- CompositionMatrix
- ParserConfiguration

"""

from .core.config import DEFAULT_CONFIG, ParserConfiguration
from .core.enums import Side
from .core.exceptions import EmptyInputError, MalformedTermError, MissingSeparatorError, ParseError
from .core.models import (
    CompositionMatrix,
    Equation,
    Formula,
    Term,
    parse_equation,
    parse_formula,
    standardized,
)

__all__ = [
    "DEFAULT_CONFIG",
    "CompositionMatrix",
    "EmptyInputError",
    "Equation",
    "Formula",
    "MalformedTermError",
    "MissingSeparatorError",
    "ParseError",
    "ParserConfiguration",
    "Side",
    "Term",
    "parse_equation",
    "parse_formula",
    "standardized",
]
