"""
TypeScript-interface-like renderer.

Enums become string literal type aliases, classes become interfaces and
optional fields are marked with `?`.
"""

from __future__ import annotations

from typing import Any

from ...utils import snake_to_pascal_case
from ..analyzer.ir_nodes import OutputModel, PrimitiveType
from ..config import OutputFormatMode
from .base import RenderBackend

DEFAULT_ROOT_NAME = "Output"


class InterfaceBackend(RenderBackend):
    """Interface-like presentation."""

    TEMPLATE_MODE = OutputFormatMode.INTERFACE.value

    DEFAULT_PREFIX = "Answer in JSON matching this interface:"

    TYPE_MAP = {
        PrimitiveType.STRING: "string",
        PrimitiveType.INT: "number",
        PrimitiveType.FLOAT: "number",
        PrimitiveType.BOOL: "boolean",
        PrimitiveType.NULL: "null",
    }

    def _prepare_root_context(self, model: OutputModel) -> dict[str, Any]:
        context = super()._prepare_root_context(model)
        name = model.root_name if model.root_name.isidentifier() else snake_to_pascal_case(model.root_name)
        context["name"] = name or DEFAULT_ROOT_NAME
        return context
