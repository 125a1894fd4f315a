"""chembalance core data models."""

from __future__ import annotations

from logging import getLogger
from typing import Self, Sequence, assert_never

import numpy
import pydantic

from ..utils.numpy import IntArray, IntArray1D, check_matrix_shape
from .config import DEFAULT_CONFIG, ParserConfiguration
from .enums import Side, TokenType
from .exceptions import MalformedTermError, MissingSeparatorError
from .scanner import Token, prepare, tokenize

logger = getLogger(__name__)

_INT64_MAX = numpy.iinfo(numpy.int64).max


class ChemBalanceBaseModel(pydantic.BaseModel):
    """Base model that all other library models inherit from.

    Models are immutable. Operations that transform a model, such as formula standardization,
    return a new instance.

    """

    model_config = pydantic.ConfigDict(frozen=True)


class Term(ChemBalanceBaseModel):
    """An element symbol and the number of atoms of the element.

    Terms are sorted using only the element symbol. Equality requires both equal
    elements and equal counts.

    """

    element: str = pydantic.Field(pattern=r"^[A-Z]$")
    """A single uppercase letter."""

    count: pydantic.PositiveInt = 1
    """The number of atoms of the element."""

    def __lt__(self, other: Term) -> bool:
        return self.element < other.element

    def __le__(self, other: Term) -> bool:
        return self.element <= other.element

    def __gt__(self, other: Term) -> bool:
        return self.element > other.element

    def __ge__(self, other: Term) -> bool:
        return self.element >= other.element

    def __str__(self) -> str:
        return self.display()

    @classmethod
    def from_str(cls, text: str, config: ParserConfiguration | None = None) -> Self:
        """Create a term from a string representation.

        :param text: an element symbol followed by an optional count, e.g. ``"X"`` or ``"M67"``.
        :param config: the parser configuration. If ``None``, the default configuration is used.
        :return: a new term instance.
        :raises ParseError: if the text is not a single valid term.

        """
        formula = Formula.from_str(text, config)
        if len(formula.terms) != 1:
            msg = f"Expected a single term. Got {len(formula.terms)} terms in `{text}`."
            raise MalformedTermError(msg, text)
        return cls(element=formula.terms[0].element, count=formula.terms[0].count)

    def display(self) -> str:
        """Render the term as text. A count of one is omitted."""
        return f"{self.element}{self.count}" if self.count > 1 else self.element


class Formula(ChemBalanceBaseModel):
    """An ordered sequence of terms, e.g. ``AX3YM67``.

    Parsed formulas keep the terms in the order they appear in the text. A formula may
    contain repeated elements. Use :py:meth:`standardize` to obtain the canonical form.

    """

    terms: tuple[Term, ...] = pydantic.Field(min_length=1)
    """The formula terms. A formula contains at least one term."""

    def __add__(self, other: Formula) -> Formula:
        return Formula(terms=self.terms + other.terms)

    def __str__(self) -> str:
        return self.display()

    @classmethod
    def from_terms(cls, *terms: Term) -> Self:
        """Create a formula containing a copy of the terms."""
        return cls(terms=terms)

    @classmethod
    def from_str(cls, text: str, config: ParserConfiguration | None = None) -> Self:
        """Create a formula from a string representation.

        :param text: a sequence of terms without separators, e.g. ``"AX3YM67"``.
        :param config: the parser configuration. If ``None``, the default configuration is used.
        :return: a new formula instance, with terms in the same order as in the text.
        :raises EmptyInputError: if the text is empty.
        :raises MalformedTermError: if the text contains invalid terms.

        """
        config = config or DEFAULT_CONFIG
        prepared = prepare(text, config)
        formula = cls(terms=_parse_terms(list(tokenize(prepared)), prepared, config))
        logger.debug(f"Parsed formula `{formula.display()}` from `{text}`.")
        return formula

    def standardize(self) -> Formula:
        """Compute the standardized form of the formula.

        The standardized form contains exactly one term per element, sorted by element symbol.
        The count of each term is the sum of all counts of the element in the formula. e.g.
        ``C3DB2D2C`` becomes ``B2C4D3``.

        :return: a new formula instance. The formula is not modified.

        """
        merged: list[Term] = list()
        for term in sorted(self.terms):
            if merged and merged[-1].element == term.element:
                merged[-1] = Term(element=term.element, count=merged[-1].count + term.count)
            else:
                merged.append(term)
        return Formula(terms=merged)

    def is_standardized(self) -> bool:
        """Check if the formula is already in standardized form."""
        return self.terms == self.standardize().terms

    def count_element(self, element: str) -> int:
        """Compute the total number of atoms of an element.

        :param element: the element symbol.
        :return: the number of atoms, or ``0`` if the element is not in the formula.

        """
        return sum(x.count for x in self.terms if x.element == element)

    def get_elements(self) -> list[str]:
        """Retrieve the sorted list of distinct elements in the formula."""
        return sorted({x.element for x in self.terms})

    def is_isomer(self, other: Formula) -> bool:
        """Check if two formulas contain the same number of atoms of every element.

        :param other: the formula to compare with.
        :return: ``True`` if both formulas have the same standardized form. ``False`` otherwise.

        """
        return self.standardize().terms == other.standardize().terms

    def display(self) -> str:
        """Render the formula as text, keeping the current term order."""
        return "".join(x.display() for x in self.terms)


class CompositionMatrix(pydantic.BaseModel):
    """Element counts of every formula in an equation.

    Each row is associated with an element and each column with a formula. Columns associated
    with the right-hand side formulas store negative counts, so the sum of a row is the difference
    between left and right atom counts of the element.

    """

    model_config = pydantic.ConfigDict(arbitrary_types_allowed=True)

    elements: list[str]
    """The sorted elements in the equation. Each element is associated with a row."""

    formulas: list[str]
    """The formulas displays, left-hand side first."""

    n_lhs: pydantic.PositiveInt
    """The number of formulas in the left-hand side."""

    data: IntArray
    """The signed element count matrix."""

    @pydantic.model_validator(mode="after")
    def _check_shape(self) -> Self:
        check_matrix_shape(self.data, n_rows=len(self.elements), n_cols=len(self.formulas))
        return self

    def get_imbalance(self) -> IntArray1D:
        """Compute the difference between left and right atom counts of each element."""
        return self.data.sum(axis=1)

    def is_balanced(self) -> bool:
        """Check if every element has the same number of atoms in both sides."""
        return not numpy.any(self.get_imbalance())


class Equation(ChemBalanceBaseModel):
    """A chemical equation with multiple formulas on each side, e.g. ``X3 + Y2Z2 = ZX + Y2X2 + Z``."""

    lhs: tuple[Formula, ...] = pydantic.Field(min_length=1)
    """The left-hand side formulas."""

    rhs: tuple[Formula, ...] = pydantic.Field(min_length=1)
    """The right-hand side formulas."""

    def __str__(self) -> str:
        return self.display()

    @classmethod
    def from_str(cls, text: str, config: ParserConfiguration | None = None) -> Self:
        """Create an equation from a string representation.

        :param text: formulas separated by ``+`` on each side and sides separated by ``=``, e.g.
            ``"X3 + Y2Z = ZX + Y2X4"``. Whitespace may be used between formulas and terms.
        :param config: the parser configuration. If ``None``, the default configuration is used.
        :return: a new equation instance.
        :raises EmptyInputError: if the text is empty.
        :raises MissingSeparatorError: if the text does not contain exactly one ``=`` or if a side or a
            formula is empty.
        :raises MalformedTermError: if any formula contains invalid terms.

        """
        config = config or DEFAULT_CONFIG
        prepared = prepare(text, config)
        tokens = list(tokenize(prepared))

        separators = [k for k, x in enumerate(tokens) if x.type is TokenType.EQUALS]
        if not separators:
            msg = f"Equation `{text}` does not contain a `=` separator."
            raise MissingSeparatorError(msg, prepared, len(prepared))
        if len(separators) > 1:
            position = tokens[separators[1]].position
            msg = f"Equation `{text}` contains more than one `=` separator."
            raise MissingSeparatorError(msg, prepared, position)

        index = separators[0]
        lhs = _parse_side(tokens[:index], prepared, config, tokens[index].position)
        rhs = _parse_side(tokens[index + 1 :], prepared, config, len(prepared))
        equation = cls(lhs=lhs, rhs=rhs)
        logger.debug(f"Parsed equation `{equation.display()}` from `{text}`.")
        return equation

    def get_lhs(self) -> tuple[Formula, ...]:
        """Retrieve the left-hand side formulas."""
        return self.lhs

    def get_rhs(self) -> tuple[Formula, ...]:
        """Retrieve the right-hand side formulas."""
        return self.rhs

    def aggregate(self, side: Side | str) -> Formula:
        """Combine all formulas of one side into a single formula.

        :param side: the equation side to combine.
        :return: a formula that contains the terms of every formula in the side, in order. Terms
            are not standardized.

        """
        if not isinstance(side, Side):
            side = Side(side)

        match side:
            case Side.LHS:
                formulas = self.lhs
            case Side.RHS:
                formulas = self.rhs
            case _ as never:
                assert_never(never)
        return Formula(terms=[term for formula in formulas for term in formula.terms])

    def is_valid(self) -> bool:
        """Check if the equation is balanced.

        :return: ``True`` if both sides contain the same number of atoms of every element.

        """
        valid = self.aggregate(Side.LHS).is_isomer(self.aggregate(Side.RHS))
        logger.debug(f"Equation `{self.display()}` is {'balanced' if valid else 'not balanced'}.")
        return valid

    def composition_matrix(self) -> CompositionMatrix:
        """Create the element count matrix of the equation."""
        formulas = self.lhs + self.rhs
        elements = sorted({e for formula in formulas for e in formula.get_elements()})
        # counts that do not fit in int64 are stored as python ints
        totals = [sum(x.count_element(e) for x in formulas) for e in elements]
        dtype = int if max(totals) <= _INT64_MAX else object
        data = numpy.zeros(shape=(len(elements), len(formulas)), dtype=dtype)
        for j, formula in enumerate(formulas):
            sign = 1 if j < len(self.lhs) else -1
            for i, element in enumerate(elements):
                data[i, j] = sign * formula.count_element(element)
        return CompositionMatrix(
            elements=elements, formulas=[x.display() for x in formulas], n_lhs=len(self.lhs), data=data
        )

    def imbalance(self) -> dict[str, int]:
        """Compute the atom count difference between sides for unbalanced elements.

        :return: a dictionary that maps elements to the left-hand side count minus the right-hand side
            count. Only elements with a non-zero difference are included. The dictionary is empty if the
            equation is balanced.

        """
        lhs = self.aggregate(Side.LHS)
        rhs = self.aggregate(Side.RHS)
        elements = sorted(set(lhs.get_elements()) | set(rhs.get_elements()))
        diff = {e: lhs.count_element(e) - rhs.count_element(e) for e in elements}
        return {e: d for e, d in diff.items() if d != 0}

    def display(self) -> str:
        """Render the equation as text."""
        lhs = " + ".join(x.display() for x in self.lhs)
        rhs = " + ".join(x.display() for x in self.rhs)
        return f"{lhs} = {rhs}"


def _parse_count(token: Token, text: str, config: ParserConfiguration) -> int:
    try:
        count = int(token.value)
    except ValueError as e:
        msg = f"Term count at position {token.position} in `{text}` has too many digits."
        raise MalformedTermError(msg, text, token.position) from e
    if count == 0:
        msg = f"Term count at position {token.position} in `{text}` must be a positive integer."
        raise MalformedTermError(msg, text, token.position)
    if config.max_count is not None and count > config.max_count:
        msg = f"Term count {count} at position {token.position} in `{text}` is greater than {config.max_count}."
        raise MalformedTermError(msg, text, token.position)
    return count


def _parse_terms(tokens: Sequence[Token], text: str, config: ParserConfiguration) -> list[Term]:
    # every term is an element token optionally followed by a count token
    terms = list()
    k = 0
    while k < len(tokens):
        token = tokens[k]
        if token.type is not TokenType.ELEMENT:
            msg = f"Expected an element symbol at position {token.position} in `{text}`. Got `{token.value}`."
            raise MalformedTermError(msg, text, token.position)
        count = 1
        if k + 1 < len(tokens) and tokens[k + 1].type is TokenType.COUNT:
            k += 1
            count = _parse_count(tokens[k], text, config)
        terms.append(Term(element=token.value, count=count))
        k += 1
    return terms


def _parse_side(tokens: Sequence[Token], text: str, config: ParserConfiguration, end: int) -> list[Formula]:
    formulas = list()
    group: list[Token] = list()
    for token in [*tokens, None]:
        if token is not None and token.type is not TokenType.PLUS:
            group.append(token)
            continue

        if not group:
            position = end if token is None else token.position
            msg = f"Expected a formula at position {position} in `{text}`."
            raise MissingSeparatorError(msg, text, position)
        formulas.append(Formula(terms=_parse_terms(group, text, config)))
        group = list()
    return formulas


def standardized(formula: Formula) -> Formula:
    """Compute the standardized form of a formula. Equivalent to ``formula.standardize()``."""
    return formula.standardize()


def parse_formula(text: str, config: ParserConfiguration | None = None) -> Formula:
    """Create a formula from a string. Equivalent to ``Formula.from_str(text, config)``."""
    return Formula.from_str(text, config)


def parse_equation(text: str, config: ParserConfiguration | None = None) -> Equation:
    """Create an equation from a string. Equivalent to ``Equation.from_str(text, config)``."""
    return Equation.from_str(text, config)
