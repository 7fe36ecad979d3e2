"""Struct definition parser."""

import logging
from collections.abc import Iterable
from enum import Enum, auto

from lark import Token

from .errors import NoMoreTokens, UnexpectedToken, UnterminatedBlock
from .lexer import TokenStream, parse_struct_tag, strip_comment, tokenize
from .types import POINTER_PREFIX, SLICE_PREFIX, FieldDesc, StructDesc, is_primitive

logger = logging.getLogger(__name__)


class ParserState(Enum):
    """Where the parser is relative to type blocks."""

    BETWEEN_BLOCKS = auto()
    IN_BLOCK = auto()


def parse_field(
    name: str,
    type_expr: str,
    tag: str | None = None,
    comment: str | None = None,
) -> FieldDesc:
    """Build a field from its name and Go type expression.

    The slice prefix is checked before the pointer prefix, so ``[]*Foo`` is a
    slice of pointers to ``Foo``.
    """
    f = FieldDesc(orig_name=str(name), name=str(name), type=str(type_expr))

    if f.type.startswith(SLICE_PREFIX):
        f.is_slice = True
        f.type = f.type[len(SLICE_PREFIX) :]

    if f.type.startswith(POINTER_PREFIX):
        f.is_pointer = True
        f.type = f.type[len(POINTER_PREFIX) :]

    f.is_primitive = is_primitive(f.type)

    if tag is not None:
        f.tag = str(tag)
        f.tags = parse_struct_tag(f.tag)
    if comment is not None:
        f.comment = strip_comment(comment)

    return f


class StructParser:
    """Builds struct descriptions from a token stream.

    A parser instance is good for a single pass over its stream.
    """

    def __init__(self, tokens: Iterable[Token]) -> None:
        self._stream = TokenStream(tokens)
        self.state = ParserState.BETWEEN_BLOCKS

    def parse(self) -> list[StructDesc]:
        structs: list[StructDesc] = []

        while self._stream.has_next_significant():
            structs.append(self._parse_block())

        return structs

    def _expect(self, kind: str, value: str) -> None:
        token = self._stream.next_significant()
        if token.type != kind:
            raise UnexpectedToken(value, str(token))

    def _parse_block(self) -> StructDesc:
        self._expect("TYPE", "type")
        self.state = ParserState.IN_BLOCK

        type_name = ""
        try:
            type_name = str(self._stream.next_significant())
            self._expect("STRUCT", "struct")
            self._expect("LBRACE", "{")

            fields: list[FieldDesc] = []
            while True:
                field_name = self._stream.next_significant()
                if field_name.type == "RBRACE":
                    break
                if field_name.type == "TYPE":
                    raise UnterminatedBlock(type_name)
                if field_name.type != "IDENT":
                    raise UnexpectedToken("identifier", str(field_name))
                fields.append(self._parse_field(field_name))
        except NoMoreTokens as e:
            raise UnterminatedBlock(type_name) from e

        self.state = ParserState.BETWEEN_BLOCKS
        logger.debug("Parsed struct %s with %d fields", type_name, len(fields))
        return StructDesc(name=type_name, fields=fields)

    def _parse_field(self, field_name: Token) -> FieldDesc:
        field_type = self._stream.next_significant()
        if field_type.type != "IDENT":
            raise UnexpectedToken("type", str(field_type))

        # Tag and comment only belong to the field when they sit on its line
        tag = comment = None
        token = self._stream.peek()
        if token is not None and token.type == "TAG":
            tag = self._stream.next()
            token = self._stream.peek()
        if token is not None and token.type == "COMMENT":
            comment = self._stream.next()

        return parse_field(field_name, field_type, tag, comment)


def parse_tokens(tokens: Iterable[Token]) -> list[StructDesc]:
    """Parse an already tokenized struct definition."""
    return StructParser(tokens).parse()


def parse(text: str) -> list[StructDesc]:
    """Parse Go struct definitions from source text."""
    return parse_tokens(tokenize(text))
