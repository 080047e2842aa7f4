"""
Output format generator.

Chains the pipeline phases: parse the document into the raw schema tree,
resolve it into the output model, then render the model.
"""

from __future__ import annotations

import dataclasses
import logging
from typing import Any

from .analyzer import OutputModel, SchemaAnalyzer
from .backends import render_output_model
from .config import OutputFormatConfig, OutputFormatMode, RenderOptions
from .schema_ast import RawSchema, SchemaParser

logger = logging.getLogger(__name__)


class PipelineGenerator:
    """Generates an output format from a JSON Schema document."""

    def __init__(self, name: str | None, schema: dict[str, Any], config: OutputFormatConfig | None = None):
        """
        Initialize the generator.

        Args:
            name: Root record name (None = document title)
            schema: The parsed JSON Schema document
            config: Pipeline configuration
        """
        self.schema = schema
        config = config or OutputFormatConfig()
        if name:
            config = dataclasses.replace(config, resolver=dataclasses.replace(config.resolver, root_name=name))
        self.config = config

    def load(self) -> RawSchema:
        """Phase 1: parse the document into the raw schema tree."""
        return SchemaParser().parse(self.schema)

    def resolve(self) -> OutputModel:
        """Phases 1 and 2: parse and resolve into the output model."""
        raw = self.load()
        model = SchemaAnalyzer(self.config.resolver).analyze(raw)
        logger.info("Resolved %d classes and %d enums", len(model.classes), len(model.enums))
        return model

    def generate(self) -> str:
        """Run the whole pipeline and return the rendered output format."""
        return render_output_model(self.resolve(), self.config.render)


def create_output_format(schema: dict[str, Any], mode: OutputFormatMode | str = OutputFormatMode.SCHEMA) -> str:
    """Render a JSON Schema document as an output format in one call."""
    config = OutputFormatConfig(render=RenderOptions(mode=mode))
    return PipelineGenerator(None, schema, config).generate()
