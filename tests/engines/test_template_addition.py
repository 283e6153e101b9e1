"""Unit tests for engines.template.addition (render -> JSON specifications)."""

import pytest

from sqlfacade.engines.template import (
    TemplateDecodeError,
    TemplateExecutionError,
    TemplateSyntaxError,
    extract_addition_from_template,
)
from sqlfacade.models import NativeSqlHeader, Specification


class TestExtractAddition:
    def test_literal_json_array(self):
        header = extract_addition_from_template(
            '[{"table": "orders", "alias": "o"}, {"table": "users", "database": "crm"}]'
        )
        assert isinstance(header, NativeSqlHeader)
        assert header.specs == [
            Specification(table="orders", alias="o"),
            Specification(table="users", database="crm"),
        ]

    def test_rendered_with_functions(self):
        header = extract_addition_from_template(
            '{{ tables("orders", "users", schema="sales") | to_json }}'
        )
        assert [s.table for s in header.specs] == ["orders", "users"]
        assert all(s.schema_name == "sales" for s in header.specs)

    def test_rendered_loop(self):
        src = (
            "[{% for t in ['a', 'b'] %}"
            "{{ table(t, alias=t ~ '_x') | to_json }}{% if not loop.last %},{% endif %}"
            "{% endfor %}]"
        )
        header = extract_addition_from_template(src)
        assert [(s.table, s.alias) for s in header.specs] == [("a", "a_x"), ("b", "b_x")]

    def test_empty_array_and_null(self):
        assert extract_addition_from_template("[]").specs == []
        assert extract_addition_from_template("null").specs == []

    def test_custom_function(self):
        header = extract_addition_from_template(
            "{{ physical() | to_json }}",
            functions={"physical": lambda: [{"table": "fact_sales"}]},
        )
        assert header.specs == [Specification(table="fact_sales")]


class TestExtractAdditionErrors:
    def test_syntax_error(self):
        with pytest.raises(TemplateSyntaxError) as exc:
            extract_addition_from_template("[{% for %}]")
        assert exc.value.name == "addition"

    def test_undefined_variable_is_execution_error(self):
        with pytest.raises(TemplateExecutionError):
            extract_addition_from_template("[{{ Missing }}]")

    def test_failing_function_is_execution_error(self):
        def boom():
            raise RuntimeError("catalog unavailable")

        with pytest.raises(TemplateExecutionError) as exc:
            extract_addition_from_template("{{ boom() }}", functions={"boom": boom})
        assert "catalog unavailable" in str(exc.value)
        assert isinstance(exc.value.__cause__, RuntimeError)

    def test_invalid_json_is_decode_error(self):
        with pytest.raises(TemplateDecodeError):
            extract_addition_from_template("orders, users")

    def test_empty_output_is_decode_error(self):
        with pytest.raises(TemplateDecodeError):
            extract_addition_from_template("")

    def test_object_instead_of_array_is_decode_error(self):
        with pytest.raises(TemplateDecodeError):
            extract_addition_from_template('{"table": "orders"}')

    def test_missing_table_is_decode_error(self):
        with pytest.raises(TemplateDecodeError) as exc:
            extract_addition_from_template('[{"alias": "o"}]')
        assert "Output preview" in str(exc.value)
