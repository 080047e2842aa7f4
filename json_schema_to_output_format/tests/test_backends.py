"""
Tests for the schema-like and interface-like renderers.
"""

from __future__ import annotations

import dataclasses
import json
from pathlib import Path

import pytest

from json_schema_to_output_format.pipeline.analyzer import (
    ClassDef,
    EnumDef,
    FieldDef,
    OutputModel,
    PrimitiveType,
    TypeRef,
    resolve,
)
from json_schema_to_output_format.pipeline.backends import (
    InterfaceBackend,
    SchemaBackend,
    get_backend,
    render_output_model,
)
from json_schema_to_output_format.pipeline.config import OutputFormatMode, RenderOptions
from json_schema_to_output_format.pipeline.errors import RenderError
from json_schema_to_output_format.pipeline.schema_ast import SchemaParser

TEST_DATA = Path(__file__).parent / "test_data"

ADDRESS_BODY = """\
  street: string,
  city: string,
  postal_code: string,"""

EXPECTED_SCHEMA = f"""\
Role
----
- admin
- user
- guest

Address {{
{ADDRESS_BODY}
}}

OtherDemoAddress {{
{ADDRESS_BODY}
}}

ZebraAddress {{
{ADDRESS_BODY}
  continent: string,
}}

Answer in JSON using this schema:
{{
  name: string,
  age: int,
  roles: Role[],
  primary_address: Address,
  secondary_addresses: OtherDemoAddress[],
  zebra_addresses: ZebraAddress[],
  tertiary_address: OtherDemoAddress or OtherDemoAddress[] or null,
  gpa: float or null,
  alive: bool or null,
  nope: null,
}}
"""

EXPECTED_INTERFACE = """\
type Role = "admin" | "user" | "guest";

interface Address {
  street: string;
  city: string;
  postal_code: string;
}

interface OtherDemoAddress {
  street: string;
  city: string;
  postal_code: string;
}

interface ZebraAddress {
  street: string;
  city: string;
  postal_code: string;
  continent: string;
}

Answer in JSON matching this interface:
interface User {
  name: string;
  age: number;
  roles: Role[];
  primary_address: Address;
  secondary_addresses: OtherDemoAddress[];
  zebra_addresses: ZebraAddress[];
  tertiary_address?: OtherDemoAddress | OtherDemoAddress[];
  gpa?: number;
  alive?: boolean;
  nope?: null;
}
"""


@pytest.fixture
def user_model() -> OutputModel:
    with open(TEST_DATA / "user_schema.json") as f:
        return resolve(SchemaParser().parse(json.load(f)))


def field(name, type_ref, optional=False):
    return FieldDef(name=name, type_ref=dataclasses.replace(type_ref, optional=optional))


class TestSchemaBackend:
    def test_user_schema(self, user_model):
        assert SchemaBackend().render(user_model) == EXPECTED_SCHEMA

    def test_inline_enums(self, user_model):
        out = SchemaBackend(RenderOptions(always_hoist_enums=False)).render(user_model)

        assert "----" not in out
        assert '  roles: ("admin" or "user" or "guest")[],' in out
        assert out.startswith("Address {\n")

    def test_custom_prefix(self):
        model = OutputModel(fields=[field("name", TypeRef.of_primitive(PrimitiveType.STRING))])

        assert SchemaBackend(RenderOptions(prefix="Reply with:")).render(model) == "Reply with:\n{\n  name: string,\n}\n"
        assert SchemaBackend(RenderOptions(prefix="")).render(model) == "{\n  name: string,\n}\n"

    def test_union_already_admitting_null(self):
        union = TypeRef.union_of([TypeRef.of_primitive(PrimitiveType.INT), TypeRef.of_primitive(PrimitiveType.NULL)])
        model = OutputModel(fields=[field("count", union, optional=True)])

        assert "  count: int or null,\n" in SchemaBackend().render(model)

    def test_list_of_union(self):
        union = TypeRef.union_of([TypeRef.of_primitive(PrimitiveType.INT), TypeRef.of_primitive(PrimitiveType.STRING)])
        model = OutputModel(fields=[field("values", TypeRef.list_of(union))])

        assert "  values: (int or string)[],\n" in SchemaBackend().render(model)

    def test_quoted_field_names(self):
        model = OutputModel(fields=[field("first-name", TypeRef.of_primitive(PrimitiveType.STRING))])

        assert '  "first-name": string,\n' in SchemaBackend().render(model)


class TestInterfaceBackend:
    def test_user_schema(self, user_model):
        assert InterfaceBackend(RenderOptions(mode=OutputFormatMode.INTERFACE)).render(user_model) == EXPECTED_INTERFACE

    def test_inline_enums(self, user_model):
        options = RenderOptions(mode=OutputFormatMode.INTERFACE, always_hoist_enums=False)
        out = InterfaceBackend(options).render(user_model)

        assert "type Role" not in out
        assert '  roles: ("admin" | "user" | "guest")[];' in out

    def test_single_value_enum_is_not_parenthesized(self):
        model = OutputModel(
            enums={"Kind": EnumDef(name="Kind", values=["circle"])},
            fields=[field("kinds", TypeRef.list_of(TypeRef.of_enum("Kind")))],
        )
        options = RenderOptions(mode=OutputFormatMode.INTERFACE, always_hoist_enums=False)

        assert '  kinds: "circle"[];\n' in InterfaceBackend(options).render(model)

    def test_root_name(self):
        model = OutputModel(root_name="user profile", fields=[field("id", TypeRef.of_primitive(PrimitiveType.INT))])
        out = InterfaceBackend(RenderOptions(mode=OutputFormatMode.INTERFACE, prefix="")).render(model)

        assert out == "interface UserProfile {\n  id: number;\n}\n"

    def test_default_root_name(self):
        out = InterfaceBackend(RenderOptions(mode=OutputFormatMode.INTERFACE, prefix="")).render(OutputModel())

        assert out == "interface Output {\n}\n"


class TestRenderDispatch:
    def test_get_backend(self):
        assert isinstance(get_backend(RenderOptions()), SchemaBackend)
        assert isinstance(get_backend(RenderOptions(mode="interface")), InterfaceBackend)

    def test_unknown_mode(self):
        options = RenderOptions()
        options.mode = "xml"

        with pytest.raises(RenderError):
            get_backend(options)

    def test_dangling_reference(self):
        model = OutputModel(
            classes={"Box": ClassDef(name="Box", fields=[field("content", TypeRef.of_class("Ghost"))])},
        )

        with pytest.raises(RenderError) as exc_info:
            render_output_model(model)
        assert "Ghost" in str(exc_info.value)

    def test_enum_referenced_as_class(self):
        model = OutputModel(
            enums={"Color": EnumDef(name="Color", values=["red"])},
            fields=[field("color", TypeRef.of_class("Color"))],
        )

        with pytest.raises(RenderError):
            render_output_model(model)

    def test_model_render_shortcut(self, user_model):
        assert user_model.render() == EXPECTED_SCHEMA
        assert user_model.render(RenderOptions(mode="interface")) == EXPECTED_INTERFACE


if __name__ == "__main__":
    pytest.main([__file__])
