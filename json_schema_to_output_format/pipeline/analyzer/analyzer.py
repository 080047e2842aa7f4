"""
Schema analyzer that transforms the raw schema tree into the output model.

Phase 2 of the pipeline: resolve references, assign final names, break
reference cycles and assemble the enums, classes and root fields.

Every definitions table key (and every class or enum declared inline) has
an entry in a registry that only lives for one `analyze` call. An entry
moves from UNVISITED to IN_PROGRESS to RESOLVED. Meeting an IN_PROGRESS
entry again means a reference cycle: named entries answer with a by-name
forward handle instead of recursing. Definitions without a name (arrays,
primitives) cannot be referred to by name; they are expanded again when
the cycle passes through a class or enum, and rejected otherwise.
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum

from ...utils import join_path
from ..config import ResolverConfig
from ..errors import (
    CyclicAliasError,
    DepthExceededError,
    EmptyUnionError,
    ResolveError,
    UnknownRequiredFieldError,
)
from ..schema_ast.nodes import (
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
from .ir_nodes import ClassDef, EnumDef, FieldDef, OutputModel, PrimitiveType, TypeKind, TypeRef
from .name_resolver import NameMapping, NameResolver
from .reference_resolver import ReferenceResolver

logger = logging.getLogger(__name__)

PRIMITIVE_TYPE_MAP = {
    "integer": PrimitiveType.INT,
    "number": PrimitiveType.FLOAT,
    "boolean": PrimitiveType.BOOL,
    "null": PrimitiveType.NULL,
}

# Inline classes/enums are registered under this prefix plus id() of the
# node; ids stay unique while the analyzer holds the raw tree
INLINE_KEY_PREFIX = "#inline:"

# Owner key reported for errors on the root record
ROOT_KEY = "#"


class ResolutionState(Enum):
    UNVISITED = "unvisited"
    IN_PROGRESS = "in_progress"
    RESOLVED = "resolved"


@dataclass
class RegistryEntry:
    """Resolution state of one definition."""

    final_name: str
    state: ResolutionState = ResolutionState.UNVISITED

    # Set before the body is resolved for classes and enums (the forward
    # handle), after it for everything else
    type_ref: TypeRef | None = None


class SchemaAnalyzer:
    """Analyzes a raw schema tree and builds the output model.

    An instance holds the state of the resolution in progress; use one
    instance per thread, or the module-level `resolve` function.
    """

    def __init__(self, config: ResolverConfig | None = None):
        """
        Initialize the analyzer.

        Args:
            config: Resolver configuration
        """
        self.config = config or ResolverConfig()
        self.name_resolver = NameResolver(self.config.namespace_separator)

        # Will be set during analysis
        self.schema: RawSchema | None = None
        self.name_mapping: NameMapping | None = None
        self.ref_resolver: ReferenceResolver | None = None
        self.registry: dict[str, RegistryEntry] = {}
        self.model: OutputModel | None = None

        # Aliases being expanded since the innermost class or enum body
        self._alias_stack: list[str] = []

    def analyze(self, schema: RawSchema) -> OutputModel:
        """
        Resolve a raw schema tree.

        Args:
            schema: The parsed raw schema

        Returns:
            OutputModel with unique names and no dangling references

        Raises:
            ResolveError: On unknown references, empty unions, required
                names without a property, cyclic aliases or excessive depth
        """
        self.schema = schema
        self.name_mapping = self.name_resolver.resolve_names(schema.defs)
        self.ref_resolver = ReferenceResolver(schema)
        self.registry = {key: RegistryEntry(final_name=name) for key, name in self.name_mapping.definition_names.items()}

        root_name = self.config.root_name or schema.title or ""
        self.model = OutputModel(root_name=root_name)
        self._alias_stack = []

        try:
            # Every definition is emitted, referenced or not
            for key in sorted(schema.defs):
                self._resolve_definition(key, schema.defs[key], schema.defs[key].source_path, 0)

            self.model.fields = self._resolve_fields(
                schema.properties,
                schema.required,
                owner_key=ROOT_KEY,
                parent_name=root_name,
                path="",
                depth=0,
            )
            model = self.model
        finally:
            self.registry = {}
            self.model = None

        logger.debug("Resolved %d enums, %d classes and %d root fields", len(model.enums), len(model.classes), len(model.fields))
        return model

    def _resolve_definition(self, key: str, def_node: TypeDefNode, path: str, depth: int) -> TypeRef:
        """
        Resolve a registered definition, memoized in the registry.

        Args:
            key: Registry key
            def_node: The definition body
            path: Where the definition is referenced from (for error messages)
            depth: Current nesting depth
        """
        entry = self.registry[key]

        if entry.state is ResolutionState.RESOLVED:
            return entry.type_ref

        named = _is_named(def_node)

        if entry.state is ResolutionState.IN_PROGRESS:
            if named:
                logger.debug("Reference cycle through %r, using forward handle %r", key, entry.final_name)
                return entry.type_ref
            if key in self._alias_stack:
                raise CyclicAliasError(key, path)
            # Alias reached again through a class or enum: its shape is finite
            return self._resolve_alias(key, def_node, entry.final_name, depth)

        entry.state = ResolutionState.IN_PROGRESS
        if named:
            entry.type_ref = self._forward_handle(def_node, entry.final_name)
            outer_stack, self._alias_stack = self._alias_stack, []
            try:
                entry.type_ref = self._resolve_named_body(key, def_node, entry.final_name, depth)
            finally:
                self._alias_stack = outer_stack
        else:
            entry.type_ref = self._resolve_alias(key, def_node, entry.final_name, depth)

        entry.state = ResolutionState.RESOLVED
        return entry.type_ref

    @staticmethod
    def _forward_handle(def_node: TypeDefNode, final_name: str) -> TypeRef:
        if isinstance(def_node, ObjectNode):
            return TypeRef.of_class(final_name)
        return TypeRef.of_enum(final_name)

    def _resolve_named_body(self, key: str, def_node: TypeDefNode, final_name: str, depth: int) -> TypeRef:
        """Resolve a class or enum body and add it to the model."""
        if isinstance(def_node, StringOrEnumNode):
            if final_name not in self.model.enums:
                self.model.enums[final_name] = EnumDef(name=final_name, values=list(def_node.values))
            return TypeRef.of_enum(final_name)

        fields = self._resolve_fields(
            def_node.properties,
            def_node.required,
            owner_key=key,
            parent_name=final_name,
            path=def_node.source_path,
            depth=depth + 1,
        )
        self.model.classes[final_name] = ClassDef(name=final_name, fields=fields)
        return TypeRef.of_class(final_name)

    def _resolve_alias(self, key: str, def_node: TypeDefNode, final_name: str, depth: int) -> TypeRef:
        """Resolve a definition without a named entry (plain string, primitive or array)."""
        self._alias_stack.append(key)
        try:
            return self._resolve_structural(def_node, f"{final_name}Item", depth)
        finally:
            self._alias_stack.pop()

    def _resolve_fields(
        self,
        properties: Mapping[str, SpecNode],
        required: tuple[str, ...],
        owner_key: str,
        parent_name: str,
        path: str,
        depth: int,
    ) -> list[FieldDef]:
        """Resolve the properties of a record in declaration order."""
        for name in required:
            if name not in properties:
                raise UnknownRequiredFieldError(owner_key, name, join_path(path, "required"))

        fields = []
        for name, spec in properties.items():
            type_ref = self._resolve_spec(spec, self.name_resolver.synthetic_hint(parent_name, name), depth + 1)
            fields.append(FieldDef(name=name, type_ref=dataclasses.replace(type_ref, optional=name not in required)))
        return fields

    def _resolve_spec(self, spec: SpecNode, hint: str, depth: int) -> TypeRef:
        """
        Resolve a property or items spec.

        Args:
            spec: The property or items node
            hint: Name for a class or enum declared inline at this position
            depth: Current nesting depth
        """
        if depth > self.config.max_depth:
            raise DepthExceededError(spec.source_path, self.config.max_depth)

        if isinstance(spec, RefNode):
            def_node = self.ref_resolver.resolve(spec)
            return self._resolve_definition(spec.key, def_node, spec.source_path, depth)

        if isinstance(spec, UnionNode):
            return self._resolve_union(spec, hint, depth)

        if isinstance(spec, InlineNode):
            if spec.type_def is None:
                raise ResolveError(spec.source_path, "inline spec has no type definition")
            return self._resolve_structural(spec.type_def, hint, depth)

        raise TypeError(f"Unexpected spec node: {spec!r}")

    def _resolve_union(self, spec: UnionNode, hint: str, depth: int) -> TypeRef:
        """Resolve each branch independently; nested unions are flattened."""
        variants: list[TypeRef] = []
        for i, variant in enumerate(spec.variants):
            branch_hint = hint if len(spec.variants) == 1 else f"{hint}Option{i + 1}"
            resolved = self._resolve_spec(variant, branch_hint, depth + 1)
            if resolved.kind is TypeKind.UNION:
                variants.extend(resolved.variants)
            else:
                variants.append(resolved)

        if not variants:
            raise EmptyUnionError(spec.source_path)
        return TypeRef.union_of(variants)

    def _resolve_structural(self, type_def: TypeDefNode, hint: str, depth: int) -> TypeRef:
        """Resolve a type definition in place."""
        if isinstance(type_def, PrimitiveNode):
            if type_def.type_name not in PRIMITIVE_TYPE_MAP:
                raise ResolveError(type_def.source_path, f"unknown primitive type '{type_def.type_name}'")
            return TypeRef.of_primitive(PRIMITIVE_TYPE_MAP[type_def.type_name])

        if isinstance(type_def, StringOrEnumNode) and not type_def.is_enum:
            return TypeRef.of_primitive(PrimitiveType.STRING)

        if isinstance(type_def, ArrayNode):
            if type_def.items is None:
                raise ResolveError(type_def.source_path, "array has no items spec")
            return TypeRef.list_of(self._resolve_spec(type_def.items, hint, depth + 1))

        # Inline class or enum: register it under a synthetic name
        key = f"{INLINE_KEY_PREFIX}{id(type_def)}"
        if key not in self.registry:
            final_name = self.name_resolver.claim_synthetic(hint, self.name_mapping)
            self.registry[key] = RegistryEntry(final_name=final_name)
            logger.debug("Inline type at %r named %r", type_def.source_path, final_name)
        return self._resolve_definition(key, type_def, type_def.source_path, depth)


def _is_named(def_node: TypeDefNode) -> bool:
    """Whether a definition becomes a named class or enum entry."""
    return isinstance(def_node, ObjectNode) or (isinstance(def_node, StringOrEnumNode) and def_node.is_enum)


def resolve(schema: RawSchema, config: ResolverConfig | None = None) -> OutputModel:
    """Resolve a raw schema tree with a fresh analyzer."""
    return SchemaAnalyzer(config).analyze(schema)
