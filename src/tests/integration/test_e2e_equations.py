import pytest

from chembalance import Equation, ParseError, parse_equation, parse_formula

EQUATIONS = [
    ("X2 = X2", True),
    ("X2 = X3", False),
    ("A + B = B + A", True),
    ("X3 + Y2Z2 = ZX + Y2X2 + Z", True),
    ("X3 + Y2Z2 = ZX + Y2X2", False),
    ("AX3YM67 = M60 + YM7X2 + XA", True),
    ("C3DB2D2C = B2C4D3", True),
    ("Q + Q + Q = Q2", False),
]


@pytest.mark.parametrize("text,expected", EQUATIONS)
def test_parse_and_validate_equation(text, expected):
    equation = parse_equation(text)
    assert equation.is_valid() is expected
    assert (equation.imbalance() == dict()) is expected


@pytest.mark.parametrize("text", [x for x, _ in EQUATIONS])
def test_display_can_be_parsed_back(text):
    equation = Equation.from_str(text)
    assert Equation.from_str(equation.display()) == equation


@pytest.mark.parametrize("text", ["3X = Y", "X2 + X3", "X = Y = Z", "X + = Y", "", "Xy = X"])
def test_invalid_equations_raise_ParseError(text):
    with pytest.raises(ParseError):
        parse_equation(text)


def test_standardized_formula_display():
    assert parse_formula("CDBDC").standardize().display() == "BC2D2"
