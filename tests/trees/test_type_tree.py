# Copyright 2026 Idea Parser Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the type grammar, columns, and attributes."""

import time

import pytest

from idea_parser.compiler import Compiler
from idea_parser.exception import UnexpectedTokenError
from idea_parser.model.tokens import IdentifierToken, LiteralToken, StructureToken
from idea_parser.trees import TypeTree

ADDRESS = """type Address! @label("Address" "Addresses") {
  street String @field.input(Text) @is.required
  tags String[]
  country String? @default("US")
}"""

# ###############
# Test Helpers
# ###############


def _columns(code: str) -> dict[str, dict]:
    """Return the compiled columns of *code* keyed by column name."""
    _, config = Compiler.type(TypeTree.parse(code))
    return {column["name"]: column for column in config["columns"]}


# ###############
# Declarations
# ###############


class TestTypeDeclaration:
    def test_parses_structure(self) -> None:
        token = TypeTree.parse(ADDRESS)
        assert isinstance(token, StructureToken)
        assert token.kind == "type"
        assert token.id.name == "Address"
        assert (token.start, token.end) == (0, len(ADDRESS))

    def test_bang_marks_immutable(self) -> None:
        assert TypeTree.parse(ADDRESS).mutable is False

    def test_mutable_by_default(self) -> None:
        assert TypeTree.parse("type Point { x Number }").mutable is True

    def test_empty_body(self) -> None:
        token = TypeTree.parse("type Empty {}")
        assert token.columns == ()
        assert token.attributes == ()

    def test_declaration_attributes(self) -> None:
        token = TypeTree.parse(ADDRESS)
        assert [attribute.key.name for attribute in token.attributes] == ["label"]
        assert [argument.value for argument in token.attributes[0].arguments] == ["Address", "Addresses"]

    def test_columns_keep_source_order(self) -> None:
        token = TypeTree.parse(ADDRESS)
        assert [column.key.name for column in token.columns] == ["street", "tags", "country"]

    def test_column_span_ends_at_last_attribute(self) -> None:
        column = TypeTree.parse(ADDRESS).columns[0]
        assert ADDRESS[column.start : column.end] == "street String @field.input(Text) @is.required"

    def test_column_span_without_attributes(self) -> None:
        column = TypeTree.parse(ADDRESS).columns[1]
        assert ADDRESS[column.start : column.end] == "tags String[]"

    def test_compiled_config(self) -> None:
        name, config = Compiler.type(TypeTree.parse(ADDRESS))
        assert name == "Address"
        assert config["name"] == "Address"
        assert config["mutable"] is False
        assert config["attributes"] == {"label": ["Address", "Addresses"]}

    def test_lowercase_name(self) -> None:
        with pytest.raises(UnexpectedTokenError, match="Expected CapitalIdentifier but got address"):
            TypeTree.parse("type address { street String }")

    def test_missing_closing_brace(self) -> None:
        with pytest.raises(UnexpectedTokenError, match="Unexpected end of input expecting }"):
            TypeTree.parse("type Address {\n  street String\n")

    def test_keyword_must_be_whole_word(self) -> None:
        with pytest.raises(UnexpectedTokenError, match="expecting TypeWord"):
            TypeTree.parse("types Address {}")


# ###############
# Columns
# ###############


class TestColumns:
    def test_plain_column(self) -> None:
        assert _columns("type A { name String }")["name"] == {
            "name": "name",
            "type": "String",
            "required": True,
            "multiple": False,
            "attributes": {},
        }

    def test_multiple(self) -> None:
        column = _columns(ADDRESS)["tags"]
        assert column["multiple"] is True
        assert column["required"] is True

    def test_optional(self) -> None:
        column = _columns(ADDRESS)["country"]
        assert column["required"] is False
        assert column["multiple"] is False

    def test_optional_list(self) -> None:
        column = _columns("type A { tags String[]? }")["tags"]
        assert column["multiple"] is True
        assert column["required"] is False

    def test_column_types_reference_other_declarations(self) -> None:
        assert _columns("type A { address Address }")["address"]["type"] == "Address"

    def test_lowercase_column_type(self) -> None:
        with pytest.raises(UnexpectedTokenError, match="Expected CapitalIdentifier but got string"):
            TypeTree.parse("type A { name string }")


# ###############
# Attributes
# ###############


class TestAttributes:
    def test_bare_attribute_is_true(self) -> None:
        assert _columns(ADDRESS)["street"]["attributes"]["is.required"] is True

    def test_reference_argument_is_placeholder(self) -> None:
        assert _columns(ADDRESS)["street"]["attributes"]["field.input"] == "${Text}"

    def test_single_argument_is_value(self) -> None:
        assert _columns(ADDRESS)["country"]["attributes"] == {"default": "US"}

    def test_several_arguments_are_list(self) -> None:
        attributes = _columns("type A { age Number @between(1 99) }")["age"]["attributes"]
        assert attributes == {"between": [1, 99]}

    def test_empty_parentheses_are_true(self) -> None:
        assert _columns("type A { id String @id() }")["id"]["attributes"] == {"id": True}

    def test_object_and_array_arguments(self) -> None:
        attributes = _columns('type A { tags String[] @field.tags({ max 5 } ["a" "b"]) }')["tags"]["attributes"]
        assert attributes == {"field.tags": [{"max": 5}, ["a", "b"]]}

    def test_argument_tokens(self) -> None:
        column = TypeTree.parse(ADDRESS).columns[0]
        attribute = column.attributes[0]
        assert attribute.key.name == "field.input"
        start = ADDRESS.index("Text")
        assert attribute.arguments == (IdentifierToken(start=start, end=start + 4, name="Text"),)

    def test_attribute_span(self) -> None:
        column = TypeTree.parse(ADDRESS).columns[2]
        attribute = column.attributes[0]
        assert ADDRESS[attribute.start : attribute.end] == '@default("US")'
        assert isinstance(attribute.arguments[0], LiteralToken)

    def test_repeated_attribute_keeps_last(self) -> None:
        attributes = _columns('type A { name String @label("a") @label("b") }')["name"]["attributes"]
        assert attributes == {"label": "b"}

    def test_unclosed_argument_list(self) -> None:
        with pytest.raises(UnexpectedTokenError):
            TypeTree.parse('type A { name String @label("a" }')

    def test_deeply_nested_argument_parses_in_linear_time(self) -> None:
        depth = 25
        code = "type A { tags String @values(" + "[" * depth + "1" + "]" * depth + ") }"
        began = time.perf_counter()
        attributes = _columns(code)["tags"]["attributes"]
        assert time.perf_counter() - began < 1.0
        value = attributes["values"]
        for _ in range(depth):
            (value,) = value
        assert value == 1

    def test_placeholder_text_in_source_is_reported_verbatim(self) -> None:
        with pytest.raises(UnexpectedTokenError, match="Unexpected %s expecting }"):
            TypeTree.parse("type A { %s String }")
