"""
Raw schema tree node definitions.

These nodes mirror the recognized schema grammar one to one. They are
built once by the parser, never mutated afterwards, and hold no resolved
information: `$ref`s are kept as definition keys.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Union


@dataclass(frozen=True)
class SchemaNode:
    """Base class for all raw schema nodes."""

    # Dotted location in the source document (for error messages)
    source_path: str = ""


# Type definitions


@dataclass(frozen=True)
class StringOrEnumNode(SchemaNode):
    """A `"string"` type, optionally restricted to an ordered list of values."""

    values: tuple[str, ...] | None = None

    @property
    def is_enum(self) -> bool:
        return self.values is not None


@dataclass(frozen=True)
class ObjectNode(SchemaNode):
    """An `"object"` type with named properties."""

    properties: Mapping[str, SpecNode] = field(default_factory=dict)
    required: tuple[str, ...] = ()

    def __post_init__(self):
        _freeze(self, "properties")


@dataclass(frozen=True)
class ArrayNode(SchemaNode):
    """An `"array"` type with a single items spec."""

    items: SpecNode | None = None


@dataclass(frozen=True)
class PrimitiveNode(SchemaNode):
    """A primitive type: "integer", "number", "boolean" or "null"."""

    type_name: str = ""


# Type specs (what can stand in a property or items position)


@dataclass(frozen=True)
class RefNode(SchemaNode):
    """A `$ref` to a definitions table entry."""

    key: str = ""  # Definition key, e.g. "__main____Address"
    ref_path: str = ""  # As written, e.g. "#/$defs/__main____Address"


@dataclass(frozen=True)
class InlineNode(SchemaNode):
    """A type definition written in place."""

    type_def: TypeDefNode | None = None


@dataclass(frozen=True)
class UnionNode(SchemaNode):
    """An anyOf/oneOf list of alternative specs."""

    variants: tuple[SpecNode, ...] = ()


TypeDefNode = Union[StringOrEnumNode, ObjectNode, ArrayNode, PrimitiveNode]
SpecNode = Union[RefNode, InlineNode, UnionNode]


@dataclass(frozen=True)
class RawSchema:
    """Root of the raw schema tree."""

    defs: Mapping[str, TypeDefNode] = field(default_factory=dict)
    properties: Mapping[str, SpecNode] = field(default_factory=dict)
    required: tuple[str, ...] = ()

    # Document title, used only as a naming hint for the root record
    title: str | None = None

    def __post_init__(self):
        _freeze(self, "defs")
        _freeze(self, "properties")


def _freeze(node, attr: str) -> None:
    """Replace a mapping attribute of a frozen node by a read-only copy."""
    object.__setattr__(node, attr, MappingProxyType(dict(getattr(node, attr))))
