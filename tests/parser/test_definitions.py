# Copyright 2026 Idea Parser Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the individual token readers."""

import re

import pytest

from idea_parser.model.tokens import IdentifierToken, UnknownToken
from idea_parser.parser.definitions import (
    DATA,
    DEFINITIONS,
    NONCODE,
    SCALAR,
    identifier,
    keyword,
    reader,
    scan,
)
from idea_parser.parser.lexer import Lexer

# ###############
# Test Helpers
# ###############


def _read(key: str, code: str, index: int = 0):
    """Run the reader registered under *key* directly."""
    return DEFINITIONS[key](code, index, Lexer(env={}))


# ###############
# Key Groups
# ###############


class TestGroups:
    def test_scalar_keys(self) -> None:
        assert SCALAR == ("Null", "Boolean", "String", "Float", "Integer", "Environment")

    def test_data_extends_scalar(self) -> None:
        assert DATA[: len(SCALAR)] == SCALAR
        assert set(DATA) - set(SCALAR) == {"Object", "Array"}

    def test_float_is_tried_before_integer(self) -> None:
        assert DATA.index("Float") < DATA.index("Integer")

    def test_every_group_key_is_defined(self) -> None:
        for key in (*DATA, *NONCODE):
            assert key in DEFINITIONS


# ###############
# Structural Tokens
# ###############


class TestStructural:
    @pytest.mark.parametrize(
        ("key", "expected_type"),
        [
            ("(", "_ParenOpen"),
            (")", "_ParenClose"),
            ("{", "_BraceOpen"),
            ("}", "_BraceClose"),
            ("[", "_SquareOpen"),
            ("]", "_SquareClose"),
            ("!", "_Final"),
        ],
    )
    def test_punctuation(self, key: str, expected_type: str) -> None:
        token = _read(key, key)
        assert isinstance(token, UnknownToken)
        assert token.type == expected_type
        assert token.value == key
        assert (token.start, token.end) == (0, 1)

    def test_whitespace_spans_newlines(self) -> None:
        token = _read("whitespace", "  \n\t x")
        assert token.end == 5

    def test_space_excludes_newlines(self) -> None:
        token = _read("space", "  \nx")
        assert token.end == 2

    def test_line(self) -> None:
        token = _read("line", "\r\n\nx")
        assert token.type == "_Line"
        assert token.end == 3

    def test_reader_matches_at_index_only(self) -> None:
        assert _read("{", "a {") is None
        assert _read("{", "a {", 2).start == 2


# ###############
# Identifiers
# ###############


class TestIdentifiers:
    @pytest.mark.parametrize(
        ("key", "source", "expected"),
        [
            ("AnyIdentifier", "some_Name1 rest", "some_Name1"),
            ("UpperIdentifier", "ADMIN_ROLE rest", "ADMIN_ROLE"),
            ("CapitalIdentifier", "Address rest", "Address"),
            ("CamelIdentifier", "firstName rest", "firstName"),
            ("LowerIdentifier", "first_name rest", "first_name"),
        ],
    )
    def test_matches(self, key: str, source: str, expected: str) -> None:
        token = _read(key, source)
        assert isinstance(token, IdentifierToken)
        assert token.name == expected
        assert token.end == len(expected)

    @pytest.mark.parametrize(
        ("key", "source"),
        [
            ("UpperIdentifier", "Admin"),
            ("CapitalIdentifier", "address"),
            ("CamelIdentifier", "Address"),
            ("LowerIdentifier", "firstName"),
            ("AnyIdentifier", "1abc"),
        ],
    )
    def test_rejects(self, key: str, source: str) -> None:
        assert _read(key, source) is None

    def test_attribute_keeps_at_sign(self) -> None:
        token = _read("AttributeIdentifier", "@field.input(Text)")
        assert token.name == "@field.input"
        assert token.end == 12

    def test_attribute_requires_lowercase_start(self) -> None:
        assert _read("AttributeIdentifier", "@Label") is None

    def test_identifier_helper(self) -> None:
        token = identifier(re.compile(r"[a-z]+"), "abc1", 0)
        assert token == IdentifierToken(start=0, end=3, name="abc")


# ###############
# Reader Builders
# ###############


class TestBuilders:
    def test_keyword_is_whole_word(self) -> None:
        read = keyword("_TypeWord", "type")
        assert read("types", 0, Lexer(env={})) is None
        token = read("type Foo", 0, Lexer(env={}))
        assert token.type == "_TypeWord"
        assert token.value == "type"

    def test_scan_returns_raw_match(self) -> None:
        token = scan("_Digits", re.compile(r"\d+"), "ab123c", 2)
        assert token == UnknownToken(type="_Digits", start=2, end=5, value="123", raw="123")

    def test_scan_miss(self) -> None:
        assert scan("_Digits", re.compile(r"\d+"), "abc", 0) is None

    def test_reader_applies_flags(self) -> None:
        token = reader("_Upper", r"[a-z]+", "ABC", 0, re.IGNORECASE)
        assert token.value == "ABC"
