"""JSON Schema to Output Format

A Python package for turning JSON Schema documents (such as the ones
pydantic emits) into a closed type model and rendering it as a prompt
output format, schema-like or interface-like.
"""

__version__ = "0.1.0"

from .pipeline import (
    GrammarError,
    OutputFormatConfig,
    OutputFormatError,
    OutputFormatMode,
    OutputModel,
    PipelineGenerator,
    RenderError,
    RenderOptions,
    ResolveError,
    ResolverConfig,
    SchemaAnalyzer,
    SchemaParser,
    create_output_format,
    resolve,
)

__all__ = [
    "PipelineGenerator",
    "create_output_format",
    "SchemaParser",
    "SchemaAnalyzer",
    "resolve",
    "OutputModel",
    "OutputFormatConfig",
    "OutputFormatMode",
    "RenderOptions",
    "ResolverConfig",
    "OutputFormatError",
    "GrammarError",
    "ResolveError",
    "RenderError",
]
