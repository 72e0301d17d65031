# tests/test_scaffold.py
"""Tests for scaffolding new schema types."""

import ast

import pytest


class TestAddType:

    def test_registers_skeleton_under_type_name(self, tmp_path):
        from schemast.context import Context

        ctx = Context(schema_dir=tmp_path)
        unit = ctx.add_type("UserProfile")
        assert ctx.new_types["UserProfile"] is unit
        assert unit.path == tmp_path / "user_profile.py"
        assert unit.created

        classes = [n for n in unit.module.body if isinstance(n, ast.ClassDef)]
        assert [c.name for c in classes] == ["UserProfile"]
        assert ast.unparse(classes[0].bases[0]) == "ent.Schema"
        methods = [n.name for n in classes[0].body if isinstance(n, ast.FunctionDef)]
        assert methods == ["fields", "edges"]

    def test_fields_returns_sentinel_then_append_succeeds(self, tmp_path):
        from schemast.context import Context
        from schemast.descriptor import FieldDescriptor
        from schemast.editor import fields_return_stmt

        ctx = Context(schema_dir=tmp_path)
        ctx.add_type("Foo")
        _, stmt = fields_return_stmt(ctx, "Foo")
        assert isinstance(stmt.value, ast.Constant) and stmt.value.value is None

        ctx.append_field("Foo", FieldDescriptor(name="bar", type="string"))
        _, stmt = fields_return_stmt(ctx, "Foo")
        assert isinstance(stmt.value, ast.List)
        assert ctx.field_names("Foo") == ["bar"]

    def test_edges_also_sentinel(self, tmp_path):
        from schemast.context import Context

        ctx = Context(schema_dir=tmp_path)
        ctx.add_type("Foo")
        _, fd = ctx.lookup_method("Foo", "edges")
        assert ast.unparse(fd.body[0]) == "return None"

    def test_collision_with_new_type(self, tmp_path):
        from schemast.context import Context
        from schemast.errors import NameCollisionError

        ctx = Context(schema_dir=tmp_path)
        ctx.add_type("Foo")
        with pytest.raises(NameCollisionError):
            ctx.add_type("Foo")

    def test_collision_with_loaded_type(self, schema_dir):
        from schemast.context import Context
        from schemast.errors import NameCollisionError

        ctx = Context.load(schema_dir)
        with pytest.raises(NameCollisionError, match="User"):
            ctx.add_type("User")

    def test_collision_with_existing_file(self, tmp_path):
        from schemast.context import Context
        from schemast.errors import NameCollisionError

        ctx = Context.from_sources({"foo_bar.py": "X = 1\n"}, schema_dir=tmp_path)
        with pytest.raises(NameCollisionError, match="foo_bar.py"):
            ctx.add_type("FooBar")
        assert "FooBar" not in ctx.new_types

    @pytest.mark.parametrize("bad", ["Foo Bar", "class", "Foo("])
    def test_malformed_name_is_parse_failure(self, tmp_path, bad):
        from schemast.context import Context
        from schemast.errors import ParseFailureError

        ctx = Context(schema_dir=tmp_path)
        with pytest.raises(ParseFailureError):
            ctx.add_type(bad)
        assert bad not in ctx.new_types


class TestTypeFilename:

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("User", "user.py"),
            ("UserProfile", "user_profile.py"),
            ("HTTPServer", "http_server.py"),
            ("Card2FA", "card2_fa.py"),
        ],
    )
    def test_underscored(self, name, expected):
        from schemast.scaffold import type_filename

        assert type_filename(name) == expected
