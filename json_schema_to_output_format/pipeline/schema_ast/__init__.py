"""
Raw schema tree module.

Contains the node definitions and the grammar parser.
"""

from __future__ import annotations

from .nodes import (
    ArrayNode,
    InlineNode,
    ObjectNode,
    PrimitiveNode,
    RawSchema,
    RefNode,
    SchemaNode,
    SpecNode,
    StringOrEnumNode,
    TypeDefNode,
    UnionNode,
)
from .parser import SchemaParser

__all__ = [
    "SchemaNode",
    "StringOrEnumNode",
    "ObjectNode",
    "ArrayNode",
    "PrimitiveNode",
    "RefNode",
    "InlineNode",
    "UnionNode",
    "TypeDefNode",
    "SpecNode",
    "RawSchema",
    "SchemaParser",
]
