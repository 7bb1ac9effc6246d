# Copyright 2026 Idea Parser Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the parser error types."""

import pytest

from idea_parser.exception import (
    DuplicateDeclarationError,
    ErrorKind,
    IdeaException,
    InvalidTokenError,
    UnexpectedTokenError,
    UnknownDefinitionError,
    UnknownReferenceError,
    format_error,
    location,
)


class TestIdeaException:
    def test_defaults(self) -> None:
        error = IdeaException("boom")
        assert str(error) == "boom"
        assert (error.start, error.end) == (0, 0)
        assert error.code is None
        assert error.kind is ErrorKind.GENERIC

    def test_template_fills_in_order(self) -> None:
        error = IdeaException.for_("Unexpected %s expecting %s", "foo", "Integer")
        assert error.message == "Unexpected foo expecting Integer"

    def test_template_keeps_subclass(self) -> None:
        assert isinstance(UnknownReferenceError.for_("Unknown reference %s", "Text"), UnknownReferenceError)

    def test_template_with_extra_placeholders(self) -> None:
        assert IdeaException.for_("%s and %s", "a").message == "a and %s"

    def test_values_are_not_rescanned(self) -> None:
        error = IdeaException.for_("Unexpected %s expecting %s", "%s", "}")
        assert error.message == "Unexpected %s expecting }"

    def test_extra_values_are_ignored(self) -> None:
        assert IdeaException.for_("Duplicate %s", "A", "B").message == "Duplicate A"

    def test_fluent_setters_return_same_error(self) -> None:
        error = IdeaException("boom")
        assert error.with_position(3, 8) is error
        assert error.with_code(404) is error
        assert (error.start, error.end, error.code) == (3, 8, 404)

    @pytest.mark.parametrize(
        ("error_type", "kind"),
        [
            (UnknownDefinitionError, ErrorKind.UNKNOWN_DEFINITION),
            (UnexpectedTokenError, ErrorKind.UNEXPECTED_TOKEN),
            (UnknownReferenceError, ErrorKind.UNKNOWN_REFERENCE),
            (DuplicateDeclarationError, ErrorKind.DUPLICATE_DECLARATION),
            (InvalidTokenError, ErrorKind.INVALID_TOKEN),
        ],
    )
    def test_subclasses(self, error_type: type[IdeaException], kind: ErrorKind) -> None:
        error = error_type("boom")
        assert isinstance(error, IdeaException)
        assert error.kind is kind

    def test_can_be_raised_and_caught(self) -> None:
        with pytest.raises(IdeaException, match="boom"):
            raise UnexpectedTokenError("boom")


class TestLocation:
    def test_first_character(self) -> None:
        assert location("abc", 0) == (1, 1)

    def test_later_line(self) -> None:
        assert location("ab\ncd\nef", 7) == (3, 2)

    def test_offset_is_clamped(self) -> None:
        assert location("ab", 10) == (1, 3)

    def test_format_error(self) -> None:
        code = "enum Roles {\n  ADMIN 1\n}"
        error = UnexpectedTokenError("boom").with_position(14, 15)
        assert format_error(error, code) == "Line 2, column 2: boom"
