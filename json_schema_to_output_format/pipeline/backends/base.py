"""
Base class for output format renderers.

Presentation modes differ in their type spellings and templates only.
Templates live under `templates/<mode>/` and are rendered with jinja2.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import jinja2

from ..analyzer.ir_nodes import ClassDef, EnumDef, FieldDef, OutputModel, PrimitiveType, TypeKind, TypeRef
from ..config import RenderOptions
from ..errors import RenderError

logger = logging.getLogger(__name__)


class RenderBackend:
    """Base class for output format renderers."""

    # Type mapping from primitive types to their rendered spelling
    TYPE_MAP: dict[PrimitiveType, str] = {}

    # Template directory name
    TEMPLATE_MODE: str = ""

    # Text placed before the root listing when the options give none
    DEFAULT_PREFIX: str = ""

    # Separator between union branches
    UNION_SEPARATOR: str = " | "

    def __init__(self, options: RenderOptions | None = None):
        """
        Initialize the backend.

        Args:
            options: Rendering options
        """
        self.options = options or RenderOptions()
        self.model: OutputModel | None = None
        self._setup_templates()

    def _setup_templates(self) -> None:
        """Set up Jinja2 templates."""
        template_dir = Path(__file__).parent.parent.parent / "templates" / self.TEMPLATE_MODE
        self.jinja_env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(template_dir)),
            lstrip_blocks=True,
            trim_blocks=True,
            keep_trailing_newline=False,
            undefined=jinja2.StrictUndefined,
        )

        self.enum_template = self.jinja_env.get_template("enum.jinja2")
        self.class_template = self.jinja_env.get_template("class.jinja2")
        self.root_template = self.jinja_env.get_template("root.jinja2")

    def render(self, model: OutputModel) -> str:
        """
        Render an output model.

        Args:
            model: The resolved output model

        Returns:
            The rendered prompt fragment

        Raises:
            RenderError: If the model refers to names it does not define
        """
        dangling = model.dangling_references()
        if dangling:
            raise RenderError("", f"output model refers to undefined types: {', '.join(sorted(dangling))}")

        self.model = model
        blocks = []

        if self.options.always_hoist_enums:
            for enum_def in model.enums.values():
                blocks.append(self.enum_template.render(self._prepare_enum_context(enum_def)))

        for class_def in model.classes.values():
            blocks.append(self.class_template.render(self._prepare_class_context(class_def)))

        blocks.append(self.root_template.render(self._prepare_root_context(model)))

        logger.debug("Rendered %d blocks in %s mode", len(blocks), self.TEMPLATE_MODE)
        return "\n\n".join(block.strip("\n") for block in blocks) + "\n"

    def translate_type(self, type_ref: TypeRef) -> str:
        """
        Translate a resolved type to its rendered spelling.

        Args:
            type_ref: The type reference

        Returns:
            Rendered type string
        """
        if type_ref.kind is TypeKind.PRIMITIVE:
            return self.TYPE_MAP[type_ref.primitive]
        if type_ref.kind is TypeKind.ENUM:
            return self._translate_enum(type_ref)
        if type_ref.kind is TypeKind.CLASS:
            return type_ref.name
        if type_ref.kind is TypeKind.LIST:
            return self._translate_list(type_ref)
        return self.UNION_SEPARATOR.join(self.translate_type(variant) for variant in type_ref.variants)

    def _prepare_enum_context(self, enum_def: EnumDef) -> dict[str, Any]:
        return {
            "name": enum_def.name,
            "values": enum_def.values,
            "quoted_values": [json.dumps(value) for value in enum_def.values],
        }

    def _prepare_class_context(self, class_def: ClassDef) -> dict[str, Any]:
        return {
            "name": class_def.name,
            "fields": [self._prepare_field_context(field) for field in class_def.fields],
        }

    def _prepare_root_context(self, model: OutputModel) -> dict[str, Any]:
        prefix = self.options.prefix if self.options.prefix is not None else self.DEFAULT_PREFIX
        return {
            "name": model.root_name,
            "prefix": prefix,
            "fields": [self._prepare_field_context(field) for field in model.fields],
        }

    def _prepare_field_context(self, field: FieldDef) -> dict[str, Any]:
        return {
            "name": self.format_field_name(field.name),
            "type": self.translate_type(field.type_ref),
            "optional": field.optional,
        }

    def format_field_name(self, name: str) -> str:
        """Quote field names that are not plain identifiers."""
        return name if name.isidentifier() else json.dumps(name)

    def _translate_enum(self, type_ref: TypeRef) -> str:
        """Spell an enum reference, by name or as the list of its values."""
        if self.options.always_hoist_enums:
            return type_ref.name
        values = self.model.enums[type_ref.name].values
        return self.UNION_SEPARATOR.join(json.dumps(value) for value in values)

    def _needs_parentheses(self, type_ref: TypeRef) -> bool:
        """Whether a type must be parenthesized as a list item."""
        if type_ref.kind is TypeKind.UNION:
            return len(type_ref.variants) > 1
        if type_ref.kind is TypeKind.ENUM and not self.options.always_hoist_enums:
            return len(self.model.enums[type_ref.name].values) > 1
        return False

    def _translate_list(self, type_ref: TypeRef) -> str:
        item = self.translate_type(type_ref.item)
        if self._needs_parentheses(type_ref.item):
            item = f"({item})"
        return f"{item}[]"
