"""
Error types raised by the output format pipeline.

Every error carries the dotted document path it concerns so callers can
surface the message verbatim.
"""

from __future__ import annotations


class OutputFormatError(Exception):
    """Base class for all pipeline errors."""

    def __init__(self, path: str, message: str):
        self.path = path
        self.message = message
        super().__init__(f"{path}: {message}" if path else message)


class GrammarError(OutputFormatError):
    """Raised when the input document is not an instance of the recognized schema grammar.

    This can happen when:
    - A node has an unexpected shape (e.g. a list where an object is expected)
    - A `type` tag is unknown
    - A field the grammar requires is missing (e.g. `items` on an array)
    """

    def __init__(self, path: str, reason: str):
        super().__init__(path, reason)
        self.reason = reason


class ResolveError(OutputFormatError):
    """Raised when a grammatically valid schema cannot be resolved."""


class UnknownReferenceError(ResolveError):
    def __init__(self, key: str, path: str):
        super().__init__(path, f"unknown reference '{key}'")
        self.key = key


class EmptyUnionError(ResolveError):
    def __init__(self, path: str):
        super().__init__(path, "union has no branches")


class UnknownRequiredFieldError(ResolveError):
    def __init__(self, class_key: str, field_name: str, path: str):
        super().__init__(path, f"required field '{field_name}' of '{class_key}' is not a declared property")
        self.class_key = class_key
        self.field_name = field_name


class DepthExceededError(ResolveError):
    def __init__(self, path: str, max_depth: int):
        super().__init__(path, f"maximum resolution depth of {max_depth} exceeded")
        self.max_depth = max_depth


class CyclicAliasError(ResolveError):
    """Raised for a reference cycle through a definition that has no name to refer back to."""

    def __init__(self, key: str, path: str):
        super().__init__(path, f"definition '{key}' refers to itself without passing through a class or enum")
        self.key = key


class RenderError(OutputFormatError):
    """Raised when an output model cannot be rendered."""
