"""Tests for the struct parser."""

import pytest
from lark import Token

from structidl.generator import parse
from structidl.generator.errors import (
    FieldNotFound,
    MalformedTag,
    UnexpectedToken,
    UnterminatedBlock,
)
from structidl.generator.parser import ParserState, StructParser, parse_field, parse_tokens
from structidl.generator.types import PRIMITIVE_TYPE_MAP, is_primitive


def describe_parse_field():
    def strips_slice_then_pointer(expect):
        field = parse_field("Pets", "[]*Foo")
        expect(field.is_slice) == True
        expect(field.is_pointer) == True
        expect(field.type) == "Foo"
        expect(field.is_primitive) == False

    def recognizes_every_primitive(expect):
        for type_name in PRIMITIVE_TYPE_MAP:
            expect(is_primitive(type_name)) == True
            expect(parse_field("Value", type_name).is_primitive) == True
            expect(parse_field("Value", "[]" + type_name).is_primitive) == True

    def named_types_are_not_primitive(expect):
        expect(is_primitive("Pet")) == False
        expect(parse_field("Owner", "*Pet").is_primitive) == False

    def pointer_to_primitive(expect):
        field = parse_field("Count", "*int64")
        expect(field.is_pointer) == True
        expect(field.is_slice) == False
        expect(field.type) == "int64"
        expect(field.is_primitive) == True

    def keeps_the_name_as_written(expect):
        field = parse_field("UserID", "string")
        expect(field.orig_name) == "UserID"
        expect(field.name) == "UserID"
        expect(field.is_map) == False

    def rebuilds_go_type(expect):
        expect(parse_field("A", "[]*Foo").go_type) == "[]*Foo"
        expect(parse_field("B", "*Foo").go_type) == "*Foo"
        expect(parse_field("C", "[]int").go_type) == "[]int"

    def decodes_tag_and_comment(expect):
        field = parse_field("Name", "string", '`protobuf:"pet_name"`', "// what to call it")
        expect(field.tag) == '`protobuf:"pet_name"`'
        expect(field.tags) == {"protobuf": "pet_name"}
        expect(field.comment) == "what to call it"

    def rejects_malformed_tags():
        with pytest.raises(MalformedTag):
            parse_field("Name", "string", "`protobuf`")


def describe_parse():
    def parses_two_field_struct(expect):
        structs = parse("type Pet struct { Name string\n Age int }")
        expect(len(structs)) == 1
        expect(structs[0].name) == "Pet"
        expect([f.name for f in structs[0].fields]) == ["Name", "Age"]
        expect([f.type for f in structs[0].fields]) == ["string", "int"]

    def parses_consecutive_blocks_in_order(expect):
        structs = parse(
            """
            type Inner struct {
                Value uint8
            }

            type Outer struct {
                Inner *Inner
                Items []Inner
            }
            """
        )
        expect([s.name for s in structs]) == ["Inner", "Outer"]
        expect([f.name for f in structs[0].fields]) == ["Value"]
        expect([f.name for f in structs[1].fields]) == ["Inner", "Items"]

    def parses_empty_struct(expect):
        structs = parse("type Empty struct {}")
        expect(structs[0].fields) == []

    def empty_input_gives_empty_list(expect):
        expect(parse("")) == []
        expect(parse("\n\n// nothing here\n")) == []

    def attaches_trailing_tag_and_comment(expect):
        structs = parse(
            """
            type Pet struct {
                Name string `json:"pet_name"` // display name
                Age  int
            }
            """
        )
        name, age = structs[0].fields
        expect(name.tags) == {"json": "pet_name"}
        expect(name.comment) == "display name"
        expect(age.tag) == None
        expect(age.comment) == None

    def ignores_comment_lines_between_fields(expect):
        structs = parse(
            """
            type Pet struct {
                // the name
                Name string
            }
            """
        )
        expect([f.name for f in structs[0].fields]) == ["Name"]

    def fails_without_type_keyword(expect):
        with pytest.raises(UnexpectedToken) as e:
            parse("struct Pet {}")
        expect(e.value.expected) == "type"
        expect(e.value.actual) == "struct"

    def fails_on_garbage_after_a_block():
        with pytest.raises(UnexpectedToken):
            parse("type A struct {}\nB")

    def validates_struct_keyword(expect):
        with pytest.raises(UnexpectedToken) as e:
            parse("type Pet interface {}")
        expect(e.value.expected) == "struct"

    def validates_opening_brace(expect):
        with pytest.raises(UnexpectedToken) as e:
            parse("type Pet struct Name string }")
        expect(e.value.expected) == "{"

    def fails_on_unterminated_block(expect):
        with pytest.raises(UnterminatedBlock) as e:
            parse("type Pet struct {\n Name string\n")
        expect(e.value.type_name) == "Pet"

    def fails_on_field_without_type():
        with pytest.raises(UnterminatedBlock):
            parse("type Pet struct {\n Name")

    def missing_brace_does_not_swallow_next_block(expect):
        with pytest.raises(UnterminatedBlock) as e:
            parse("type A struct {\n X int\n\ntype B struct {\n Y int\n}\n")
        expect(e.value.type_name) == "A"

    def rejects_brace_as_field_type(expect):
        with pytest.raises(UnexpectedToken) as e:
            parse("type A struct {\n X\n}\ntype B struct {\n Y int\n}\n")
        expect(e.value.expected) == "type"
        expect(e.value.actual) == "}"

    def rejects_tag_on_its_own_line(expect):
        with pytest.raises(UnexpectedToken) as e:
            parse('type A struct {\n `json:"x"`\n}')
        expect(e.value.expected) == "identifier"

    def rejects_brace_as_field_name(expect):
        with pytest.raises(UnexpectedToken) as e:
            parse("type A struct {\n {\n}")
        expect(e.value.actual) == "{"

    def fails_on_missing_type_name(expect):
        with pytest.raises(UnterminatedBlock) as e:
            parse("type")
        expect(e.value.type_name) == ""


def describe_parse_tokens():
    def parses_hand_built_tokens(expect):
        tokens = [
            Token("TYPE", "type"),
            Token("IDENT", "Pet"),
            Token("STRUCT", "struct"),
            Token("LBRACE", "{"),
            Token("NEWLINE", "\n"),
            Token("IDENT", "Tags"),
            Token("IDENT", "[]string"),
            Token("NEWLINE", "\n"),
            Token("RBRACE", "}"),
        ]
        structs = parse_tokens(tokens)
        expect(len(structs)) == 1
        expect(structs[0].fields[0].is_slice) == True

    def end_of_stream_only_gives_empty_list(expect):
        structs = parse_tokens([])
        expect(structs) == []

    def tracks_block_state(expect):
        parser = StructParser([Token("TYPE", "type"), Token("IDENT", "Pet")])
        expect(parser.state) == ParserState.BETWEEN_BLOCKS
        with pytest.raises(UnterminatedBlock):
            parser.parse()
        expect(parser.state) == ParserState.IN_BLOCK

    def returns_to_between_blocks_after_closing_brace(expect):
        parser = StructParser(
            [
                Token("TYPE", "type"),
                Token("IDENT", "Pet"),
                Token("STRUCT", "struct"),
                Token("LBRACE", "{"),
                Token("RBRACE", "}"),
            ]
        )
        parser.parse()
        expect(parser.state) == ParserState.BETWEEN_BLOCKS


def describe_get_field():
    def finds_field_by_name(expect):
        struct = parse("type Pet struct { Name string\n Age int }")[0]
        expect(struct.get_field("Age").type) == "int"

    def fails_for_unknown_field(expect):
        struct = parse("type Pet struct { Name string }")[0]
        with pytest.raises(FieldNotFound) as e:
            struct.get_field("Owner")
        expect(e.value.field_name) == "Owner"
