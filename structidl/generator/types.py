"""Type definitions for struct parsing and rendering."""

from dataclasses import dataclass, field

from dataclasses_json import DataClassJsonMixin

from .errors import FieldNotFound

SLICE_PREFIX = "[]"
POINTER_PREFIX = "*"

# Go primitive types and their protobuf equivalents
PRIMITIVE_TYPE_MAP: dict[str, str] = {
    "float32": "float",
    "float64": "float",
    "int": "int32",
    "int8": "int32",
    "int16": "int32",
    "int32": "int32",
    "int64": "int64",
    "rune": "rune",
    "string": "string",
    "uint": "uint32",
    "uint8": "uint32",
    "uint16": "uint32",
    "uint32": "uint32",
    "uint64": "uint64",
}

PRIMITIVE_TYPES = frozenset(PRIMITIVE_TYPE_MAP)


@dataclass
class FieldDesc(DataClassJsonMixin):
    """Represents one field of a struct.

    ``type`` holds the base type with any ``[]`` and ``*`` prefixes removed;
    the prefixes are recorded in ``is_slice`` and ``is_pointer``.
    ``is_map`` is reserved and never set by the parser.
    """

    orig_name: str
    name: str
    type: str
    is_pointer: bool = False
    is_slice: bool = False
    is_primitive: bool = False
    is_map: bool = False
    tag: str | None = None
    comment: str | None = None
    tags: dict[str, str] = field(default_factory=dict)

    @property
    def go_type(self) -> str:
        """The Go type expression, modifiers included."""
        prefix = ""
        if self.is_slice:
            prefix += SLICE_PREFIX
        if self.is_pointer:
            prefix += POINTER_PREFIX
        return prefix + self.type


@dataclass
class StructDesc(DataClassJsonMixin):
    """Represents a struct type definition.

    Field order is declaration order.
    """

    name: str
    fields: list[FieldDesc]
    comment: str | None = None

    def get_field(self, field_name: str) -> FieldDesc:
        for f in self.fields:
            if f.name == field_name:
                return f
        raise FieldNotFound(field_name)


def is_primitive(type_name: str) -> bool:
    """Check if a type name is a primitive type."""
    return type_name in PRIMITIVE_TYPES
