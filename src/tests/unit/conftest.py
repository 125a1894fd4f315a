import pytest

from chembalance import ParserConfiguration

from .helpers import create_formula


@pytest.fixture
def strict_config() -> ParserConfiguration:
    return ParserConfiguration(ignore_whitespace=False, max_count=10)


@pytest.fixture
def unsorted_formula():
    return create_formula(("C", 3), ("D", 1), ("B", 2), ("D", 2), ("C", 1))
