"""Go struct renderer."""

import logging

from jinja2 import Environment, PackageLoader

from .types import FieldDesc, StructDesc
from .util import to_snake_case

logger = logging.getLogger(__name__)

env = Environment(
    loader=PackageLoader("structidl.generator", "templates"),
    trim_blocks=True,
    lstrip_blocks=True,
    keep_trailing_newline=True,
)

file_template = env.get_template("gostruct.go.j2")
struct_template = env.get_template("struct.go.j2")


def _struct_tag(field: FieldDesc) -> str:
    tags = {"json": to_snake_case(field.name)}
    tags.update(field.tags)
    return " ".join(f'{key}:"{value}"' for key, value in tags.items())


def format_field(field: FieldDesc) -> str:
    """Render one field line, e.g. ``Name string `json:"name"```."""
    s = f"{field.name} {field.go_type} `{_struct_tag(field)}`"
    if field.comment:
        s += f" // {field.comment}"
    return s


def render_struct(struct: StructDesc) -> str:
    """Render a single struct declaration."""
    logger.debug("Rendering struct %s", struct.name)
    return struct_template.render(struct=struct, format_field=format_field).removesuffix("\n")


def render(structs: list[StructDesc], package: str | None = None) -> str:
    """Render struct declarations as a Go source file."""
    return file_template.render(structs=structs, package=package, render_struct=render_struct)
