"""
Pipeline - JSON Schema to prompt output format.

This module provides a multi-phase architecture:

1. Phase 1 (Parser): Parse the JSON Schema document into the raw schema tree
2. Phase 2 (Analyzer): Resolve references and names into the output model
3. Phase 3 (Backend): Render the output model in the selected mode
"""

from __future__ import annotations

from .analyzer import OutputModel, SchemaAnalyzer, resolve
from .config import OutputFormatConfig, OutputFormatMode, RenderOptions, ResolverConfig
from .errors import (
    CyclicAliasError,
    DepthExceededError,
    EmptyUnionError,
    GrammarError,
    OutputFormatError,
    RenderError,
    ResolveError,
    UnknownReferenceError,
    UnknownRequiredFieldError,
)
from .generator import PipelineGenerator, create_output_format
from .schema_ast import RawSchema, SchemaParser

__all__ = [
    "PipelineGenerator",
    "create_output_format",
    "SchemaParser",
    "SchemaAnalyzer",
    "resolve",
    "RawSchema",
    "OutputModel",
    "OutputFormatConfig",
    "OutputFormatMode",
    "RenderOptions",
    "ResolverConfig",
    "OutputFormatError",
    "GrammarError",
    "ResolveError",
    "UnknownReferenceError",
    "EmptyUnionError",
    "UnknownRequiredFieldError",
    "DepthExceededError",
    "CyclicAliasError",
    "RenderError",
]
