"""
Naming and path helpers shared by the pipeline phases.
"""

import re

# Regex pattern to split text into words, handling camelCase boundaries
_WORD_PATTERN = re.compile(r"[a-z]+|[A-Z][a-z]*|[0-9]+")


def snake_to_pascal_case(text: str) -> str:
    """Convert snake_case, camelCase, or dunder-wrapped text to PascalCase.

    Examples:
        "primary_address" -> "PrimaryAddress"
        "other_demo" -> "OtherDemo"
        "__main__" -> "Main"
        "ABC" -> "Abc"
    """
    if not text:
        return ""
    words = _WORD_PATTERN.findall(text.replace("_", " ").replace("-", " "))
    return "".join(word.capitalize() for word in words if word)


def join_path(*parts: str) -> str:
    """Join document path segments with dots, skipping empty ones."""
    return ".".join(part for part in parts if part)


def unescape_pointer_token(token: str) -> str:
    """Decode a JSON pointer reference token (RFC 6901)."""
    return token.replace("~1", "/").replace("~0", "~")
