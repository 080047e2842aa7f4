"""
Schema parser that builds the raw schema tree.

Phase 1 of the pipeline: map a generic parsed document (dicts, lists,
scalars) onto the recognized grammar without resolving references.
Anything outside the grammar is rejected with a GrammarError naming the
offending path.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from ...utils import join_path, unescape_pointer_token
from ..errors import GrammarError
from .nodes import (
    ArrayNode,
    InlineNode,
    ObjectNode,
    PrimitiveNode,
    RawSchema,
    RefNode,
    SpecNode,
    StringOrEnumNode,
    TypeDefNode,
    UnionNode,
)

logger = logging.getLogger(__name__)

# Local reference prefixes and the definitions table they point into
REF_PREFIXES = ("#/$defs/", "#/definitions/")

UNION_MARKERS = ("anyOf", "oneOf")


class SchemaParser:
    """Parses a generic document into a RawSchema."""

    PRIMITIVE_TYPES = {"integer", "number", "boolean", "null"}

    def parse(self, document: Any) -> RawSchema:
        """
        Parse a document into a raw schema tree.

        Args:
            document: The parsed JSON Schema document

        Returns:
            RawSchema with definitions, root properties and required names

        Raises:
            GrammarError: If the document does not match the grammar
        """
        root = self._expect_mapping(document, "")
        type_tag = root.get("type")
        if type_tag != "object":
            raise GrammarError(join_path("type"), f"document root must have type 'object', got {type_tag!r}")

        if "$defs" in root:
            defs_key = "$defs"
        elif "definitions" in root:
            defs_key = "definitions"
        else:
            defs_key = None

        defs: dict[str, TypeDefNode] = {}
        if defs_key is not None:
            for key, def_schema in self._expect_mapping(root[defs_key], defs_key).items():
                def_path = join_path(defs_key, key)
                defs[key] = self._parse_type_def(self._expect_mapping(def_schema, def_path), def_path)

        properties = self._parse_properties(root, "")
        required = self._parse_required(root, "")

        title = root.get("title")
        if title is not None and not isinstance(title, str):
            raise GrammarError("title", "expected a string")

        logger.debug("Parsed schema with %d definitions and %d root properties", len(defs), len(properties))
        return RawSchema(defs=defs, properties=properties, required=required, title=title)

    def _parse_spec(self, schema: Any, path: str) -> SpecNode:
        """
        Parse a property or items entry.

        Args:
            schema: The entry from the document
            path: Current path in the document (for error messages)

        Returns:
            RefNode, UnionNode or InlineNode
        """
        schema = self._expect_mapping(schema, path)

        if "$ref" in schema:
            return self._parse_ref(schema["$ref"], path)

        for marker in UNION_MARKERS:
            if marker in schema:
                return self._parse_union(schema[marker], join_path(path, marker), path)

        if "type" in schema:
            return InlineNode(type_def=self._parse_type_def(schema, path), source_path=path)

        raise GrammarError(path, "expected '$ref', 'anyOf' or a 'type' tag")

    def _parse_ref(self, ref_path: Any, path: str) -> RefNode:
        """Parse a $ref marker into a definition key."""
        if not isinstance(ref_path, str):
            raise GrammarError(join_path(path, "$ref"), "expected a string")

        for prefix in REF_PREFIXES:
            if ref_path.startswith(prefix):
                token = ref_path[len(prefix) :]
                if token and "/" not in token:
                    return RefNode(key=unescape_pointer_token(token), ref_path=ref_path, source_path=path)

        raise GrammarError(join_path(path, "$ref"), f"unsupported reference {ref_path!r}")

    def _parse_union(self, variants_schema: Any, marker_path: str, path: str) -> UnionNode:
        """Parse a one-of list; a single branch stays a union of one."""
        if not isinstance(variants_schema, list):
            raise GrammarError(marker_path, "expected a list of alternatives")
        if not variants_schema:
            raise GrammarError(marker_path, "list of alternatives must not be empty")

        variants = tuple(self._parse_spec(variant, join_path(marker_path, str(i))) for i, variant in enumerate(variants_schema))
        return UnionNode(variants=variants, source_path=path)

    def _parse_type_def(self, schema: Mapping[str, Any], path: str) -> TypeDefNode:
        """Parse a type definition selected by its `type` tag."""
        if "type" not in schema:
            raise GrammarError(join_path(path, "type"), "missing type tag")

        type_tag = schema["type"]
        if not isinstance(type_tag, str):
            raise GrammarError(join_path(path, "type"), f"expected a string type tag, got {type_tag!r}")

        if type_tag == "string":
            return self._parse_string(schema, path)

        if type_tag == "object":
            return ObjectNode(
                properties=self._parse_properties(schema, path),
                required=self._parse_required(schema, path),
                source_path=path,
            )

        if type_tag == "array":
            if "items" not in schema:
                raise GrammarError(join_path(path, "items"), "array is missing required field 'items'")
            return ArrayNode(items=self._parse_spec(schema["items"], join_path(path, "items")), source_path=path)

        if type_tag in self.PRIMITIVE_TYPES:
            return PrimitiveNode(type_name=type_tag, source_path=path)

        raise GrammarError(join_path(path, "type"), f"unknown type tag {type_tag!r}")

    def _parse_string(self, schema: Mapping[str, Any], path: str) -> StringOrEnumNode:
        """Parse a string type, keeping enum values verbatim and in order."""
        if "enum" not in schema:
            return StringOrEnumNode(source_path=path)

        values = schema["enum"]
        enum_path = join_path(path, "enum")
        if not isinstance(values, list):
            raise GrammarError(enum_path, "expected a list of values")
        if not values:
            raise GrammarError(enum_path, "enum must list at least one value")
        for i, value in enumerate(values):
            if not isinstance(value, str):
                raise GrammarError(join_path(enum_path, str(i)), f"expected a string value, got {value!r}")

        return StringOrEnumNode(values=tuple(values), source_path=path)

    def _parse_properties(self, schema: Mapping[str, Any], path: str) -> dict[str, SpecNode]:
        """Parse a `properties` table, preserving declaration order."""
        properties_path = join_path(path, "properties")
        properties = self._expect_mapping(schema.get("properties", {}), properties_path)
        return {name: self._parse_spec(prop_schema, join_path(properties_path, name)) for name, prop_schema in properties.items()}

    def _parse_required(self, schema: Mapping[str, Any], path: str) -> tuple[str, ...]:
        """Parse a `required` list of property names."""
        required_path = join_path(path, "required")
        required = schema.get("required", [])
        if not isinstance(required, list):
            raise GrammarError(required_path, "expected a list of property names")
        for i, name in enumerate(required):
            if not isinstance(name, str):
                raise GrammarError(join_path(required_path, str(i)), f"expected a property name, got {name!r}")
        return tuple(required)

    def _expect_mapping(self, value: Any, path: str) -> Mapping[str, Any]:
        if not isinstance(value, Mapping):
            raise GrammarError(path or "<root>", f"expected an object, got {type(value).__name__}")
        return value
