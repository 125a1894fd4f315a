"""Parser configuration."""

import pydantic


class ParserConfiguration(pydantic.BaseModel):
    """Store the configuration used to parse formulas and equations."""

    model_config = pydantic.ConfigDict(validate_assignment=True)

    ignore_whitespace: bool = True
    """Remove all whitespace before parsing. If ``False``, whitespace is treated as an invalid character."""

    max_count: pydantic.PositiveInt | None = None
    """If specified, terms with counts greater than this value are rejected."""


DEFAULT_CONFIG = ParserConfiguration()
"""Configuration used when none is passed to a parser."""
