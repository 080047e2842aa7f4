"""
Reference resolver for $ref lookup.

Looks up the definitions table entry a RefNode points at. The parser only
checks that a reference is syntactically local; existence is checked here.
"""

from __future__ import annotations

from ..errors import UnknownReferenceError
from ..schema_ast.nodes import RawSchema, RefNode, TypeDefNode


class ReferenceResolver:
    """Resolves $ref to definitions table entries."""

    def __init__(self, schema: RawSchema):
        self.schema = schema

    def resolve(self, ref_node: RefNode) -> TypeDefNode:
        """
        Resolve a RefNode to its target definition.

        Raises:
            UnknownReferenceError: If the key is not in the definitions table
        """
        def_node = self.schema.defs.get(ref_node.key)
        if def_node is None:
            raise UnknownReferenceError(ref_node.key, ref_node.source_path)
        return def_node
