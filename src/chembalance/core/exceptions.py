"""chembalance core exceptions."""


class ParseError(ValueError):
    """Exception raised when formula or equation text cannot be parsed.

    :param msg: the error message.
    :param text: the text that failed to parse.
    :param position: the position in `text` where the error was detected.

    """

    def __init__(self, msg: str, text: str | None = None, position: int | None = None):
        super().__init__(msg)
        self.text = text
        self.position = position


class MalformedTermError(ParseError):
    """Exception raised when a term is expected but no valid element and count are found."""


class MissingSeparatorError(ParseError):
    """Exception raised when an equation lacks an `=` separator or contains an empty side or formula."""


class EmptyInputError(ParseError):
    """Exception raised when parsing empty or whitespace only text."""
