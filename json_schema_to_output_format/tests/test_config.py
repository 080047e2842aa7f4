#!/usr/bin/env python3

import pytest

from json_schema_to_output_format.pipeline.config import (
    OutputFormatConfig,
    OutputFormatMode,
    RenderOptions,
    ResolverConfig,
)


class TestOutputFormatConfig:
    """Test cases for loading configuration dictionaries"""

    def test_defaults(self):
        config = OutputFormatConfig.from_dict({})

        assert config.resolver.max_depth == 64
        assert config.resolver.namespace_separator == "__"
        assert config.render.mode is OutputFormatMode.SCHEMA
        assert config.render.prefix is None
        assert config.render.always_hoist_enums is True

    def test_from_dict(self):
        config = OutputFormatConfig.from_dict(
            {
                "resolver": {"max_depth": 8, "root_name": "Answer"},
                "render": {"mode": "interface", "prefix": "Reply with:", "always_hoist_enums": False},
            }
        )

        assert config.resolver == ResolverConfig(max_depth=8, root_name="Answer")
        assert config.render.mode is OutputFormatMode.INTERFACE
        assert config.render.prefix == "Reply with:"
        assert not config.render.always_hoist_enums

    def test_to_dict_round_trip(self):
        d = {
            "resolver": {"max_depth": 10, "namespace_separator": ".", "root_name": ""},
            "render": {"mode": "interface", "prefix": None, "always_hoist_enums": True},
        }

        assert OutputFormatConfig.from_dict(d).to_dict() == d

    def test_unknown_section(self):
        with pytest.raises(ValueError, match="Unknown configuration key"):
            OutputFormatConfig.from_dict({"backend": {}})

    def test_unknown_option(self):
        with pytest.raises(TypeError):
            OutputFormatConfig.from_dict({"resolver": {"depth": 3}})

    @pytest.mark.parametrize(
        "d",
        [
            {"resolver": {"max_depth": 0}},
            {"resolver": {"namespace_separator": ""}},
            {"render": {"mode": "xml"}},
        ],
    )
    def test_invalid_values(self, d):
        with pytest.raises(ValueError):
            OutputFormatConfig.from_dict(d)

    def test_mode_from_string(self):
        assert RenderOptions(mode="interface").mode is OutputFormatMode.INTERFACE


if __name__ == "__main__":
    pytest.main([__file__])
