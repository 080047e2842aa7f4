"""
Schema-like renderer.

Lists enums as bullet lists, classes as brace blocks and the root record
after a short instruction, using JSON-flavoured type names.
"""

from __future__ import annotations

from ..analyzer.ir_nodes import FieldDef, PrimitiveType, TypeKind, TypeRef
from ..config import OutputFormatMode
from .base import RenderBackend


class SchemaBackend(RenderBackend):
    """Schema-like presentation."""

    TEMPLATE_MODE = OutputFormatMode.SCHEMA.value

    DEFAULT_PREFIX = "Answer in JSON using this schema:"

    UNION_SEPARATOR = " or "

    TYPE_MAP = {
        PrimitiveType.STRING: "string",
        PrimitiveType.INT: "int",
        PrimitiveType.FLOAT: "float",
        PrimitiveType.BOOL: "bool",
        PrimitiveType.NULL: "null",
    }

    def _prepare_field_context(self, field: FieldDef) -> dict:
        # No optional marker in this syntax: optional fields admit null
        context = super()._prepare_field_context(field)
        if field.optional and not _admits_null(field.type_ref):
            context["type"] = f"{context['type']}{self.UNION_SEPARATOR}null"
        return context


def _admits_null(type_ref: TypeRef) -> bool:
    if type_ref.kind is TypeKind.PRIMITIVE:
        return type_ref.primitive is PrimitiveType.NULL
    if type_ref.kind is TypeKind.UNION:
        return any(_admits_null(variant) for variant in type_ref.variants)
    return False
