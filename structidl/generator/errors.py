"""Errors raised while lexing and parsing struct definitions."""


class ParseError(RuntimeError):
    """Base class for all errors raised by a parse pass."""


class EndOfInput(ParseError):
    """Raised when the cursor is asked for a character past the end of input."""

    def __init__(self) -> None:
        super().__init__("no more characters")


class NoMoreTokens(ParseError):
    """Raised when the token stream is asked for a token past the end."""

    def __init__(self) -> None:
        super().__init__("no more tokens")


class DelimiterNotFound(ParseError):
    """Raised when a skip-to-target scan runs off the end of input."""

    def __init__(self, target: str) -> None:
        super().__init__(f"cannot jump to {target!r}")
        self.target = target


class UnexpectedToken(ParseError):
    """Raised when a token does not match what the grammar expects."""

    def __init__(self, expected: str, actual: str) -> None:
        super().__init__(f"expected {expected!r}, but got {actual!r}")
        self.expected = expected
        self.actual = actual


class UnterminatedBlock(ParseError):
    """Raised when input ends before a type block's closing brace."""

    def __init__(self, type_name: str) -> None:
        super().__init__(f"type {type_name!r} is missing its closing '}}'")
        self.type_name = type_name


class MalformedTag(ParseError):
    """Raised when a struct tag is not a list of key:"value" pairs."""

    def __init__(self, tag: str) -> None:
        super().__init__(f"malformed struct tag {tag!r}")
        self.tag = tag


class LexError(ParseError):
    """Raised when the source text contains a character no token can start with."""

    def __init__(self, char: str, line: int, column: int) -> None:
        super().__init__(f"unexpected character {char!r} at line {line}, column {column}")
        self.char = char
        self.line = line
        self.column = column


class FieldNotFound(LookupError):
    """Raised when a struct has no field with the requested name."""

    def __init__(self, field_name: str) -> None:
        super().__init__(f"no such field {field_name!r}")
        self.field_name = field_name
