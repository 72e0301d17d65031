# tests/test_editor.py
"""Tests for appending, removing and locating field declarations."""

import ast
import textwrap

import pytest


def _ctx(fields_body: str = "return None"):
    """Context with one ``User`` type whose ``fields`` body is *fields_body*."""
    from schemast.context import Context

    source = (
        "from schemast import ent\n"
        "from schemast.ent import field\n"
        "\n"
        "\n"
        "class User(ent.Schema):\n"
        "    def fields(self):\n"
        + textwrap.indent(fields_body, " " * 8)
        + "\n"
    )
    return Context.from_sources({"user.py": source})


def _returned(ctx, type_name="User"):
    from schemast.editor import fields_return_stmt

    return fields_return_stmt(ctx, type_name)[1].value


def _desc(name, type_="string", **kwargs):
    from schemast.descriptor import FieldDescriptor

    return FieldDescriptor(name=name, type=type_, **kwargs)


class TestFieldsReturnStmt:

    def test_multiple_statements_rejected(self):
        from schemast.errors import MalformedMethodBodyError

        ctx = _ctx("x = 1\nreturn None")
        with pytest.raises(MalformedMethodBodyError, match="single statement"):
            ctx.append_field("User", _desc("name"))

    def test_docstring_counts_as_statement(self):
        from schemast.errors import MalformedMethodBodyError

        ctx = _ctx('"""Fields."""\nreturn None')
        with pytest.raises(MalformedMethodBodyError):
            ctx.remove_field("User", "name")

    def test_non_return_rejected(self):
        from schemast.errors import MalformedMethodBodyError

        ctx = _ctx("pass")
        with pytest.raises(MalformedMethodBodyError, match="return statement"):
            ctx.append_field("User", _desc("name"))

    def test_unknown_type(self):
        from schemast.errors import TypeNotFoundError

        ctx = _ctx()
        with pytest.raises(TypeNotFoundError):
            ctx.append_field("Group", _desc("name"))

    def test_missing_fields_method(self):
        from schemast.context import Context
        from schemast.errors import MethodNotFoundError

        ctx = Context.from_sources({"g.py": "class Group:\n    pass\n"})
        with pytest.raises(MethodNotFoundError):
            ctx.field_names("Group")


class TestAppendField:

    def test_append_to_sentinel_creates_single_element_list(self):
        from schemast.extract import extract_field_name

        ctx = _ctx()
        ctx.append_field("User", _desc("name"))
        returned = _returned(ctx)
        assert isinstance(returned, ast.List)
        assert len(returned.elts) == 1
        assert extract_field_name(returned.elts[0]) == "name"

    def test_bare_return_is_sentinel(self):
        ctx = _ctx("return")
        ctx.append_field("User", _desc("name"))
        assert ctx.field_names("User") == ["name"]

    def test_append_preserves_order(self):
        ctx = _ctx('return [field.String("a")]')
        ctx.append_field("User", _desc("b"))
        ctx.append_field("User", _desc("c", "int"))
        assert ctx.field_names("User") == ["a", "b", "c"]

    def test_unexpected_return_shape(self):
        from schemast.errors import UnexpectedReturnShapeError

        ctx = _ctx('return (field.String("a"),)')
        with pytest.raises(UnexpectedReturnShapeError):
            ctx.append_field("User", _desc("b"))

    def test_failed_synthesis_leaves_tree_unchanged(self):
        from schemast.errors import UnsupportedFeatureError

        ctx = _ctx('return [field.String("a")]')
        before = ast.dump(_returned(ctx))
        with pytest.raises(UnsupportedFeatureError):
            ctx.append_field("User", _desc("b", default="x"))
        assert ast.dump(_returned(ctx)) == before
        unit, _ = ctx.lookup_type("User")
        assert not unit.modified

    def test_marks_unit_dirty(self):
        ctx = _ctx()
        unit, _ = ctx.lookup_type("User")
        assert not unit.modified
        ctx.append_field("User", _desc("name"))
        assert unit.modified
        assert len(unit.dirty) == 1


class TestRemoveField:

    def test_append_then_remove_restores_list(self):
        ctx = _ctx('return [field.String("a"), field.Int("b").optional()]')
        before = ast.dump(_returned(ctx))
        ctx.append_field("User", _desc("c"))
        ctx.remove_field("User", "c")
        assert ast.dump(_returned(ctx)) == before

    def test_removes_middle_element_keeping_siblings(self):
        ctx = _ctx('return [field.String("a"), field.String("b").unique(), field.Bool("c")]')
        ctx.remove_field("User", "b")
        assert ctx.field_names("User") == ["a", "c"]

    def test_removes_first_match_only(self):
        ctx = _ctx('return [field.String("a").optional(), field.String("a")]')
        ctx.remove_field("User", "a")
        returned = _returned(ctx)
        assert len(returned.elts) == 1
        assert ast.unparse(returned.elts[0]) == "field.String('a')"

    def test_missing_field_leaves_list_unchanged(self):
        from schemast.errors import FieldNotFoundError

        ctx = _ctx('return [field.String("a"), field.String("b")]')
        before = ast.dump(_returned(ctx))
        with pytest.raises(FieldNotFoundError) as info:
            ctx.remove_field("User", "zzz")
        assert info.value.field_name == "zzz"
        assert info.value.type_name == "User"
        assert "zzz" in str(info.value) and "User" in str(info.value)
        assert ast.dump(_returned(ctx)) == before

    def test_nothing_to_remove_from_sentinel(self):
        from schemast.errors import UnexpectedReturnShapeError

        ctx = _ctx()
        with pytest.raises(UnexpectedReturnShapeError, match="nothing to remove"):
            ctx.remove_field("User", "a")

    def test_non_call_element(self):
        from schemast.errors import NotAFieldChainError

        ctx = _ctx('return [fields_of_base, field.String("a")]')
        with pytest.raises(NotAFieldChainError):
            ctx.remove_field("User", "a")

    def test_foreign_chain_element(self):
        from schemast.errors import NotAFieldChainError

        ctx = _ctx('return [mixin.String("x"), field.String("a")]')
        with pytest.raises(NotAFieldChainError):
            ctx.remove_field("User", "a")


class TestLocate:

    def test_find_field(self):
        ctx = _ctx('return [field.String("a"), field.Int("b").optional()]')
        call = ctx.find_field("User", "b")
        assert ast.unparse(call) == "field.Int('b').optional()"

    def test_find_field_missing(self):
        from schemast.errors import FieldNotFoundError

        ctx = _ctx()
        with pytest.raises(FieldNotFoundError):
            ctx.find_field("User", "a")

    def test_field_names_of_sentinel(self):
        assert _ctx().field_names("User") == []
