"""
Name resolver for display names and naming collisions.

Definitions table keys written by data-modeling libraries are namespaced
(e.g. "other_demo__Address"); the human name is the trailing segment. When
several keys share a display name, keys are visited in lexicographic
order: the first keeps the bare name, later ones are prefixed with their
PascalCased namespace ("OtherDemoAddress"). A numeric suffix is only used
when that is still taken. The result depends on the set of keys alone, so
repeated resolutions assign identical names.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from ...utils import snake_to_pascal_case

logger = logging.getLogger(__name__)

# Base name for inline types whose hint is not a usable name
SYNTHETIC_FALLBACK = "Inline"


@dataclass
class NameMapping:
    """Result of name resolution."""

    # Definition key -> final name
    definition_names: dict[str, str] = field(default_factory=dict)

    # Every final name handed out so far (definitions and synthetic)
    used_names: set[str] = field(default_factory=set)


class NameResolver:
    """Assigns unique final names."""

    def __init__(self, namespace_separator: str = "__"):
        self.namespace_separator = namespace_separator

    def display_name(self, key: str) -> str:
        """Return the trailing segment of a definition key."""
        _, sep, tail = key.rpartition(self.namespace_separator)
        if sep and tail:
            return tail
        return key

    def namespace_prefix(self, key: str, display_name: str) -> str:
        """Return the part of a key before its display name."""
        suffix = self.namespace_separator + display_name
        if key.endswith(suffix):
            return key[: -len(suffix)]
        return ""

    def resolve_names(self, keys: Iterable[str]) -> NameMapping:
        """
        Assign a final name to every definition key.

        Args:
            keys: Definitions table keys

        Returns:
            NameMapping with one unique name per key
        """
        mapping = NameMapping()

        for key in sorted(keys):
            display_name = self.display_name(key)
            if display_name in mapping.used_names:
                prefix = snake_to_pascal_case(self.namespace_prefix(key, display_name))
                final_name = self._first_free(f"{prefix}{display_name}", mapping.used_names)
                logger.debug("Name collision on %r: %r renamed to %r", display_name, key, final_name)
            else:
                final_name = display_name

            mapping.definition_names[key] = final_name
            mapping.used_names.add(final_name)

        return mapping

    def claim_synthetic(self, hint: str, mapping: NameMapping) -> str:
        """Claim a unique name for an inline class or enum.

        Hints that are empty or do not start with a letter (a root without
        title and a field named "_" or "3d") are prefixed with "Inline".
        """
        if not hint[:1].isalpha():
            hint = f"{SYNTHETIC_FALLBACK}{hint}"
        final_name = self._first_free(hint, mapping.used_names)
        mapping.used_names.add(final_name)
        return final_name

    def synthetic_hint(self, parent_name: str, field_name: str) -> str:
        """Build the name hint for a type declared inline under a field."""
        return f"{parent_name}{snake_to_pascal_case(field_name)}"

    @staticmethod
    def _first_free(candidate: str, used: set[str]) -> str:
        if candidate not in used:
            return candidate
        counter = 2
        while f"{candidate}{counter}" in used:
            counter += 1
        return f"{candidate}{counter}"
