"""
Output model definitions.

These nodes represent the resolved schema handed to the renderer. All
references are resolved: classes and enums are referred to by their
final, unique name and no definitions table key survives.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..config import RenderOptions


class TypeKind(Enum):
    """Kind of type in the output model."""

    PRIMITIVE = "primitive"  # string, int, float, bool, null
    ENUM = "enum"  # Reference to an EnumDef by name
    CLASS = "class"  # Reference to a ClassDef by name
    LIST = "list"  # list[T]
    UNION = "union"  # T | U | ...


class PrimitiveType(Enum):
    STRING = "string"
    INT = "int"
    FLOAT = "float"
    BOOL = "bool"
    NULL = "null"


@dataclass(frozen=True)
class TypeRef:
    """A resolved type."""

    kind: TypeKind = TypeKind.PRIMITIVE

    # For primitives
    primitive: PrimitiveType | None = None

    # Final name, for enum and class references
    name: str = ""

    # For lists
    item: TypeRef | None = None

    # For unions, in declaration order
    variants: tuple[TypeRef, ...] = ()

    # Only meaningful on record fields
    optional: bool = False

    @staticmethod
    def of_primitive(primitive: PrimitiveType) -> TypeRef:
        return TypeRef(kind=TypeKind.PRIMITIVE, primitive=primitive)

    @staticmethod
    def of_enum(name: str) -> TypeRef:
        return TypeRef(kind=TypeKind.ENUM, name=name)

    @staticmethod
    def of_class(name: str) -> TypeRef:
        return TypeRef(kind=TypeKind.CLASS, name=name)

    @staticmethod
    def list_of(item: TypeRef) -> TypeRef:
        return TypeRef(kind=TypeKind.LIST, item=item)

    @staticmethod
    def union_of(variants: list[TypeRef]) -> TypeRef:
        return TypeRef(kind=TypeKind.UNION, variants=tuple(variants))

    def walk(self) -> Iterator[TypeRef]:
        """Yield this type and every type nested in it."""
        yield self
        if self.item is not None:
            yield from self.item.walk()
        for variant in self.variants:
            yield from variant.walk()


@dataclass(frozen=True)
class FieldDef:
    """A field of a class or of the root record."""

    name: str = ""
    type_ref: TypeRef = field(default_factory=TypeRef)

    @property
    def optional(self) -> bool:
        return self.type_ref.optional


@dataclass
class EnumDef:
    """An enum definition."""

    name: str = ""
    values: list[str] = field(default_factory=list)


@dataclass
class ClassDef:
    """A class definition."""

    name: str = ""
    fields: list[FieldDef] = field(default_factory=list)


@dataclass
class OutputModel:
    """The complete resolved model."""

    # Final name -> definition, in resolution order
    enums: dict[str, EnumDef] = field(default_factory=dict)
    classes: dict[str, ClassDef] = field(default_factory=dict)

    # Root fields in document order
    fields: list[FieldDef] = field(default_factory=list)

    root_name: str = ""

    def iter_type_refs(self) -> Iterator[TypeRef]:
        """Yield every type reachable from class fields and root fields."""
        for class_def in self.classes.values():
            for field_def in class_def.fields:
                yield from field_def.type_ref.walk()
        for field_def in self.fields:
            yield from field_def.type_ref.walk()

    def referenced_names(self) -> set[str]:
        """Names of all enums and classes referred to by some field."""
        return {t.name for t in self.iter_type_refs() if t.kind in (TypeKind.ENUM, TypeKind.CLASS)}

    def dangling_references(self) -> set[str]:
        """Referenced names without a matching definition of the right kind."""
        dangling = set()
        for type_ref in self.iter_type_refs():
            if type_ref.kind == TypeKind.ENUM and type_ref.name not in self.enums:
                dangling.add(type_ref.name)
            elif type_ref.kind == TypeKind.CLASS and type_ref.name not in self.classes:
                dangling.add(type_ref.name)
        return dangling

    def render(self, options: RenderOptions | None = None) -> str:
        """Render the model as a prompt fragment."""
        from ..backends import render_output_model

        return render_output_model(self, options)
