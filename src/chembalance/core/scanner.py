"""Tokenizer for formula and equation text."""

from __future__ import annotations

import string
from typing import Generator

import pydantic

from .config import ParserConfiguration
from .enums import TokenType
from .exceptions import EmptyInputError, MalformedTermError

_SYMBOLS = {"+": TokenType.PLUS, "=": TokenType.EQUALS}


class Token(pydantic.BaseModel):
    """A lexical unit of formula or equation text."""

    model_config = pydantic.ConfigDict(frozen=True)

    type: TokenType
    """The token kind."""

    value: str
    """The text covered by the token."""

    position: pydantic.NonNegativeInt
    """The position of the first token character in the scanned text."""


class Scanner:
    """Cursor over a text.

    :param text: the text to scan.

    """

    def __init__(self, text: str):
        self._text = text
        self._cursor = 0
        self._size = len(text)

    @property
    def position(self) -> int:
        """The current cursor position."""
        return self._cursor

    def eof(self) -> bool:
        """Check if the cursor reached the end of the text."""
        return self._cursor >= self._size

    def current(self) -> str:
        """Retrieve the character at the cursor. An empty string is returned at the end of the text."""
        if self.eof():
            return ""
        return self._text[self._cursor]

    def advance(self) -> str:
        """Move the cursor one position and return the consumed character."""
        c = self.current()
        if c:
            self._cursor += 1
        return c

    def read_digits(self) -> str:
        """Consume a maximal run of decimal digits."""
        start = self._cursor
        while not self.eof() and self.current() in string.digits:
            self._cursor += 1
        return self._text[start : self._cursor]


def prepare(text: str, config: ParserConfiguration) -> str:
    """Check that text is not empty and remove whitespace if required by the configuration.

    :param text: the text to prepare.
    :param config: the parser configuration.
    :return: the text ready to be tokenized.
    :raises EmptyInputError: if the text is empty or contains only whitespace.

    """
    if not text or text.isspace():
        raise EmptyInputError("Cannot parse empty text.", text, 0)
    if config.ignore_whitespace:
        text = "".join(text.split())
    return text


def tokenize(text: str) -> Generator[Token, None, None]:
    """Split text into element, count and separator tokens.

    :param text: the text to tokenize.
    :return: a generator of tokens in text order.
    :raises MalformedTermError: if a character that is not an uppercase letter, a digit, `+` or `=` is found.

    """
    scanner = Scanner(text)
    while not scanner.eof():
        start = scanner.position
        c = scanner.current()
        if c in string.ascii_uppercase:
            yield Token(type=TokenType.ELEMENT, value=scanner.advance(), position=start)
        elif c in string.digits:
            yield Token(type=TokenType.COUNT, value=scanner.read_digits(), position=start)
        elif c in _SYMBOLS:
            yield Token(type=_SYMBOLS[c], value=scanner.advance(), position=start)
        else:
            raise MalformedTermError(f"Invalid character `{c}` at position {start} in `{text}`.", text, start)
