"""
Output format renderers.

Contains one backend per presentation mode.
"""

from __future__ import annotations

from ..analyzer.ir_nodes import OutputModel
from ..config import OutputFormatMode, RenderOptions
from ..errors import RenderError
from .base import RenderBackend
from .interface_backend import InterfaceBackend
from .schema_backend import SchemaBackend

BACKENDS: dict[OutputFormatMode, type[RenderBackend]] = {
    OutputFormatMode.SCHEMA: SchemaBackend,
    OutputFormatMode.INTERFACE: InterfaceBackend,
}


def get_backend(options: RenderOptions) -> RenderBackend:
    """Create the backend for the mode selected in the options."""
    backend_class = BACKENDS.get(options.mode)
    if backend_class is None:
        raise RenderError("", f"unsupported output format mode: {options.mode!r}")
    return backend_class(options)


def render_output_model(model: OutputModel, options: RenderOptions | None = None) -> str:
    """Render an output model with the given options."""
    options = options or RenderOptions()
    return get_backend(options).render(model)


__all__ = [
    "RenderBackend",
    "SchemaBackend",
    "InterfaceBackend",
    "BACKENDS",
    "get_backend",
    "render_output_model",
]
