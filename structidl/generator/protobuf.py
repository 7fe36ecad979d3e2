"""Protocol Buffers message renderer."""

import logging

from jinja2 import Environment, PackageLoader

from .types import PRIMITIVE_TYPE_MAP, FieldDesc, StructDesc
from .util import to_snake_case

logger = logging.getLogger(__name__)

env = Environment(
    loader=PackageLoader("structidl.generator", "templates"),
    trim_blocks=True,
    lstrip_blocks=True,
    keep_trailing_newline=True,
)

file_template = env.get_template("protobuf.proto.j2")
message_template = env.get_template("message.proto.j2")


def canonical_type(field: FieldDesc) -> str:
    """Map a field's type to its protobuf name.

    Named types are assumed to be other messages and pass through.
    """
    if field.is_primitive:
        return PRIMITIVE_TYPE_MAP[field.type]
    return field.type


def field_name(field: FieldDesc) -> str:
    return field.tags.get("protobuf") or to_snake_case(field.name)


def format_field(field: FieldDesc, number: int) -> str:
    """Render one numbered field, e.g. ``repeated string tags = 3;``."""
    s = f"{canonical_type(field)} {field_name(field)} = {number};"
    if field.is_slice:
        s = "repeated " + s
    return s


def render_message(struct: StructDesc) -> str:
    """Render a struct as a protobuf message, numbering fields from 1."""
    logger.debug("Rendering message %s", struct.name)
    return message_template.render(struct=struct, format_field=format_field).removesuffix("\n")


def render(structs: list[StructDesc], package: str | None = None) -> str:
    """Render structs as a proto3 file."""
    return file_template.render(structs=structs, package=package, render_message=render_message)
