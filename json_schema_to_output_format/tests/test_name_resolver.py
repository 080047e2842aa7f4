"""
Tests for display names and collision disambiguation.
"""

from __future__ import annotations

import pytest

from json_schema_to_output_format.pipeline.analyzer import NameMapping, NameResolver


class TestDisplayName:
    @pytest.mark.parametrize(
        "key,expected",
        [
            ("Role", "Role"),
            ("a__Address", "Address"),
            ("__main____Address", "Address"),
            ("other_demo__Address", "Address"),
            ("pkg__sub__Thing", "Thing"),
            ("trailing__", "trailing__"),
        ],
    )
    def test_display_name(self, key, expected):
        assert NameResolver().display_name(key) == expected

    def test_custom_separator(self):
        assert NameResolver(".").display_name("models.user.Address") == "Address"


class TestResolveNames:
    def test_collisions_use_namespace_prefix(self):
        mapping = NameResolver().resolve_names(["c__Address", "a__Address", "b__Address"])

        assert mapping.definition_names == {
            "a__Address": "Address",
            "b__Address": "BAddress",
            "c__Address": "CAddress",
        }

    def test_pydantic_module_keys(self):
        mapping = NameResolver().resolve_names(["zebra__Address", "other_demo__Address", "__main____Address", "Role"])

        assert mapping.definition_names == {
            "Role": "Role",
            "__main____Address": "Address",
            "other_demo__Address": "OtherDemoAddress",
            "zebra__Address": "ZebraAddress",
        }

    def test_independent_of_input_order(self):
        keys = ["b__Item", "a__Item", "Item", "c__Item", "Other"]
        first = NameResolver().resolve_names(keys).definition_names
        second = NameResolver().resolve_names(list(reversed(keys))).definition_names

        assert first == second
        assert first["Item"] == "Item"
        assert len(set(first.values())) == len(keys)

    def test_numeric_suffix_when_prefixed_name_is_taken(self):
        mapping = NameResolver().resolve_names(["BAddress", "a__Address", "b__Address"])

        assert mapping.definition_names == {
            "BAddress": "BAddress",
            "a__Address": "Address",
            "b__Address": "BAddress2",
        }

    def test_unprefixed_collision(self):
        # Display name of "__Address" is "Address" with an empty namespace
        mapping = NameResolver().resolve_names(["Address", "__Address"])

        assert mapping.definition_names == {"Address": "Address", "__Address": "Address2"}

    def test_used_names(self):
        mapping = NameResolver().resolve_names(["a__X", "b__X"])

        assert mapping.used_names == {"X", "BX"}


class TestSyntheticNames:
    def test_hint(self):
        assert NameResolver().synthetic_hint("User", "home_address") == "UserHomeAddress"
        assert NameResolver().synthetic_hint("", "point") == "Point"

    def test_claim_avoids_used_names(self):
        resolver = NameResolver()
        mapping = NameMapping(used_names={"UserPoint"})

        assert resolver.claim_synthetic("UserPoint", mapping) == "UserPoint2"
        assert resolver.claim_synthetic("UserPoint", mapping) == "UserPoint3"
        assert resolver.claim_synthetic("UserLine", mapping) == "UserLine"
        assert {"UserPoint", "UserPoint2", "UserPoint3", "UserLine"} <= mapping.used_names

    @pytest.mark.parametrize("field_name,expected", [("_", "Inline"), ("-", "Inline"), ("3d", "Inline3D")])
    def test_claim_unusable_hint(self, field_name, expected):
        resolver = NameResolver()
        hint = resolver.synthetic_hint("", field_name)

        assert resolver.claim_synthetic(hint, NameMapping()) == expected

    def test_claim_empty_hint_twice(self):
        resolver = NameResolver()
        mapping = NameMapping()

        assert resolver.claim_synthetic("", mapping) == "Inline"
        assert resolver.claim_synthetic("", mapping) == "Inline2"


if __name__ == "__main__":
    pytest.main([__file__])
