"""
Analyzer module.

Contains reference resolution, name resolution, and output model building.
"""

from __future__ import annotations

from .analyzer import SchemaAnalyzer, resolve
from .ir_nodes import (
    ClassDef,
    EnumDef,
    FieldDef,
    OutputModel,
    PrimitiveType,
    TypeKind,
    TypeRef,
)
from .name_resolver import NameMapping, NameResolver

__all__ = [
    "ClassDef",
    "EnumDef",
    "FieldDef",
    "TypeRef",
    "TypeKind",
    "PrimitiveType",
    "OutputModel",
    "NameMapping",
    "NameResolver",
    "SchemaAnalyzer",
    "resolve",
]
