"""Unit tests for engines.template.compiler and engines.template.names."""

import pytest
from jinja2 import nodes

from sqlfacade.core.config import settings
from sqlfacade.engines.template import (
    CompiledTemplate,
    TemplateSyntaxError,
    bound_by,
    collect_template_names,
    compile_template,
    top_level_bindings,
)
from sqlfacade.engines.template.names import macro_parameters, target_names


class TestCompileTemplate:
    def test_root_and_name(self):
        c = compile_template("SELECT {{ a }}")
        assert isinstance(c.root, nodes.Template)
        assert c.name == settings.ROOT_TEMPLATE_NAME
        assert c.definitions == {}

    def test_definitions_include_nested(self):
        c = compile_template(
            "{% macro a() %}{% macro b() %}x{% endmacro %}{% endmacro %}"
            "{% block c %}y{% endblock %}"
        )
        assert set(c.definitions) == {"a", "b", "c"}

    def test_functions_include_registry(self):
        c = compile_template("", functions={"now": lambda: "NOW()"})
        assert {"now", "table", "tables", "range"} <= c.functions

    def test_syntax_error(self):
        with pytest.raises(TemplateSyntaxError) as exc:
            compile_template("SELECT 1\n{{ a + }}", name="q")
        err = exc.value
        assert err.lineno == 2
        assert err.name == "q"
        assert "line 2" in str(err)
        assert err.__cause__ is not None

    def test_go_style_field_reference_is_syntax_error(self):
        with pytest.raises(TemplateSyntaxError):
            compile_template("{{ .A }}")


class TestCollectTemplateNames:
    def test_root_only(self):
        c = CompiledTemplate(name="<root>", root=nodes.Template([]))
        assert collect_template_names(c) == {"<root>"}

    def test_hand_built_definitions(self):
        c = CompiledTemplate(
            name="temp",
            root=nodes.Template([]),
            definitions={"sub": [], "other": []},
        )
        assert collect_template_names(c) == {"temp", "sub", "other"}


class TestBindings:
    def test_set_binds_its_target(self):
        c = compile_template("{% set a, b = Pair %}")
        assert bound_by(c.root.body[0]) == {"a", "b"}

    def test_imports(self):
        c = compile_template(
            '{% import "helpers" as h %}{% from "more" import x, y as z %}'
        )
        assert top_level_bindings(c) == {"h", "x", "z"}

    def test_output_binds_nothing(self):
        c = compile_template("{{ a }}")
        assert bound_by(c.root.body[0]) == set()

    def test_top_level_only(self):
        c = compile_template(
            "{% set a = 1 %}"
            "{% for b in Items %}{% set inner = b %}{% endfor %}"
            "{% with c = 2 %}{% endwith %}"
        )
        assert top_level_bindings(c) == {"a"}

    def test_macro_parameters(self):
        c = compile_template("{% macro m(d, e=1) %}{% endmacro %}")
        params = macro_parameters(c.definitions["m"][0])
        assert {"d", "e", "caller", "varargs", "kwargs"} == params

    def test_target_names_unpacks_tuples(self):
        target = nodes.Tuple(
            [nodes.Name("k", "store"), nodes.Name("v", "store")], "store"
        )
        assert target_names(target) == {"k", "v"}
        assert target_names(None) == set()
