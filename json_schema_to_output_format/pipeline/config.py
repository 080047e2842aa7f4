"""
Configuration for the output format pipeline.

Resolver limits and rendering options, loadable from a plain dictionary
(typically the content of a JSON config file).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class OutputFormatMode(str, Enum):
    """Presentation mode of the rendered output format."""

    SCHEMA = "schema"  # JSON-schema-like listing
    INTERFACE = "interface"  # TypeScript-interface-like declarations


@dataclass
class ResolverConfig:
    """Configuration for type resolution.

    Attributes:
        max_depth: Maximum nesting depth before resolution is aborted
        namespace_separator: Separator between namespace and display name in `$defs` keys
        root_name: Name of the root record (empty = document title)
    """

    max_depth: int = 64
    namespace_separator: str = "__"
    root_name: str = ""

    def __post_init__(self):
        if self.max_depth < 1:
            raise ValueError(f"max_depth must be positive, got {self.max_depth}")
        if not self.namespace_separator:
            raise ValueError("namespace_separator must not be empty")


@dataclass
class RenderOptions:
    """Options handed to the renderer."""

    # Presentation mode
    mode: OutputFormatMode = OutputFormatMode.SCHEMA

    # Text placed before the root listing (None = mode default)
    prefix: str | None = None

    # Render enums as separate named blocks instead of inline value lists
    always_hoist_enums: bool = True

    def __post_init__(self):
        if isinstance(self.mode, str):
            self.mode = OutputFormatMode(self.mode)


@dataclass
class OutputFormatConfig:
    """Top-level configuration."""

    resolver: ResolverConfig = field(default_factory=ResolverConfig)
    render: RenderOptions = field(default_factory=RenderOptions)

    @staticmethod
    def from_dict(d: dict) -> OutputFormatConfig:
        """Create a config from a dictionary."""
        config = OutputFormatConfig()
        for k, v in d.items():
            if k == "resolver" and isinstance(v, dict):
                config.resolver = ResolverConfig(**v)
            elif k == "render" and isinstance(v, dict):
                config.render = RenderOptions(**v)
            else:
                raise ValueError(f"Unknown configuration key: {k}")
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "resolver": {
                "max_depth": self.resolver.max_depth,
                "namespace_separator": self.resolver.namespace_separator,
                "root_name": self.resolver.root_name,
            },
            "render": {
                "mode": self.render.mode.value,
                "prefix": self.render.prefix,
                "always_hoist_enums": self.render.always_hoist_enums,
            },
        }
