"""Tokenizer for Go struct definitions using Lark."""

import os
from collections.abc import Iterable

from lark import Lark, Token
from lark.exceptions import UnexpectedCharacters

from .cursor import Cursor
from .errors import DelimiterNotFound, LexError, MalformedTag, NoMoreTokens

_g_lexer: Lark | None = None

# Tokens the parser never needs to look at between structural tokens
INSIGNIFICANT = frozenset(["NEWLINE", "COMMENT"])


def _get_lexer() -> Lark:
    global _g_lexer

    if not _g_lexer:
        with open(f"{os.path.dirname(__file__)}/structdef.lark", encoding="utf-8") as f:
            grammar = f.read()

        _g_lexer = Lark(grammar, parser="lalr", lexer="basic")

    return _g_lexer


def tokenize(text: str) -> list[Token]:
    """Split source text into classified tokens."""
    try:
        return list(_get_lexer().lex(text))
    except UnexpectedCharacters as e:
        raise LexError(e.char, e.line, e.column) from e


class TokenStream:
    """Cursor over a token sequence."""

    def __init__(self, tokens: Iterable[Token]) -> None:
        self._tokens = list(tokens)
        self._i = 0

    def has_next(self) -> bool:
        return self._i < len(self._tokens)

    def peek(self) -> Token | None:
        if not self.has_next():
            return None
        return self._tokens[self._i]

    def next(self) -> Token:
        if not self.has_next():
            raise NoMoreTokens()
        token = self._tokens[self._i]
        self._i += 1
        return token

    def skip_insignificant(self) -> None:
        while self.has_next() and self._tokens[self._i].type in INSIGNIFICANT:
            self._i += 1

    def has_next_significant(self) -> bool:
        self.skip_insignificant()
        return self.has_next()

    def next_significant(self) -> Token:
        """Return the next token, skipping newlines and standalone comments."""
        self.skip_insignificant()
        return self.next()


def _is_escaped(text: str, start: int, index: int) -> bool:
    """True if text[index] follows an odd run of backslashes."""
    backslashes = 0
    while index - backslashes - 1 >= start and text[index - backslashes - 1] == "\\":
        backslashes += 1
    return backslashes % 2 == 1


def parse_struct_tag(tag: str) -> dict[str, str]:
    """Decode a backtick struct tag into its key/value pairs.

    >>> parse_struct_tag('`json:"name,omitempty" protobuf:"pet_name"`')
    {'json': 'name,omitempty', 'protobuf': 'pet_name'}

    Values are kept as written, so an escaped quote stays ``\\"``.
    """
    body = tag.strip("`")
    cursor = Cursor(body)
    tags: dict[str, str] = {}

    while True:
        while cursor.has_next() and cursor.peek().isspace():
            cursor.next()
        if not cursor.has_next():
            break

        if cursor.peek() in ':"':
            raise MalformedTag(tag)
        start = cursor.position
        try:
            cursor.skip_until(":")
            key = body[start : cursor.position]
            cursor.next()

            if not cursor.has_next() or cursor.peek() != '"':
                raise MalformedTag(tag)
            value_start = cursor.position + 1
            cursor.jump_to('"')
            while _is_escaped(body, value_start, cursor.position - 1):
                if not cursor.has_next():
                    raise MalformedTag(tag)
                if cursor.peek() == '"':
                    cursor.next()
                else:
                    cursor.jump_to('"')
        except DelimiterNotFound as e:
            raise MalformedTag(tag) from e
        tags[key] = body[value_start : cursor.position - 1]

    return tags


def strip_comment(comment: str) -> str:
    """Return the text of a ``//`` comment without its marker."""
    return comment.removeprefix("//").strip()
