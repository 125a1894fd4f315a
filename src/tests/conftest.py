import pytest

from chembalance import Equation


@pytest.fixture(scope="session")
def balanced_text() -> str:
    return "X3 + Y2Z2 = ZX + Y2X2 + Z"


@pytest.fixture(scope="session")
def unbalanced_text() -> str:
    return "X3 + Y2Z2 = ZX + Y2X2"


@pytest.fixture
def balanced_equation(balanced_text) -> Equation:
    return Equation.from_str(balanced_text)


@pytest.fixture
def unbalanced_equation(unbalanced_text) -> Equation:
    return Equation.from_str(unbalanced_text)
