# Copyright 2026 Idea Parser Contributors
# SPDX-License-Identifier: Apache-2.0

"""Position-aware errors raised while lexing, parsing, and compiling .idea code.

Every error carries the byte offsets of the offending span so that callers
can highlight the source. Mapping offsets to lines and columns is left to
:func:`format_error`.
"""

from __future__ import annotations

import enum

# ###############
# Public Interface
# ###############


class ErrorKind(enum.Enum):
    """Categories of failures reported by the parser pipeline."""

    GENERIC = "generic"
    UNKNOWN_DEFINITION = "unknown-definition"
    UNEXPECTED_TOKEN = "unexpected-token"
    UNKNOWN_REFERENCE = "unknown-reference"
    DUPLICATE_DECLARATION = "duplicate-declaration"
    INVALID_TOKEN = "invalid-token"


class IdeaException(Exception):
    """Base error for the .idea parser.

    Attributes:
        message: Human-readable description of the error.
        start: Offset of the first character of the offending span.
        end: Exclusive offset just past the offending span.
        code: Optional numeric category supplied by the caller.
        kind: The error category.
    """

    kind: ErrorKind = ErrorKind.GENERIC

    def __init__(self, message: str, start: int = 0, end: int = 0, code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.start = start
        self.end = end
        self.code = code

    @classmethod
    def for_(cls, template: str, *values: object) -> IdeaException:
        """Create an error from a template, filling each ``%s`` in order."""
        parts = template.split("%s", len(values))
        message = parts[0]
        for value, part in zip(values, parts[1:]):
            message += str(value) + part
        return cls(message)

    def with_position(self, start: int, end: int) -> IdeaException:
        """Set the offending span and return the same error."""
        self.start = start
        self.end = end
        return self

    def with_code(self, code: int) -> IdeaException:
        """Set the numeric category and return the same error."""
        self.code = code
        return self

    def __str__(self) -> str:
        return self.message


class UnknownDefinitionError(IdeaException):
    """A grammar asked the lexer for a token key that was never defined."""

    kind = ErrorKind.UNKNOWN_DEFINITION


class UnexpectedTokenError(IdeaException):
    """The source does not match any of the expected token definitions."""

    kind = ErrorKind.UNEXPECTED_TOKEN


class UnknownReferenceError(IdeaException):
    """An attribute argument names a declaration that does not exist."""

    kind = ErrorKind.UNKNOWN_REFERENCE


class DuplicateDeclarationError(IdeaException):
    """Two top-level declarations share the same name."""

    kind = ErrorKind.DUPLICATE_DECLARATION


class InvalidTokenError(IdeaException):
    """The compiler was handed a tree node of the wrong shape or kind."""

    kind = ErrorKind.INVALID_TOKEN


def location(code: str, offset: int) -> tuple[int, int]:
    """Return the 1-based ``(line, column)`` of *offset* within *code*."""
    offset = max(0, min(offset, len(code)))
    line = code.count("\n", 0, offset) + 1
    column = offset - (code.rfind("\n", 0, offset) + 1) + 1
    return line, column


def format_error(error: IdeaException, code: str) -> str:
    """Render *error* as ``Line L, column C: message`` against its source."""
    line, column = location(code, error.start)
    return f"Line {line}, column {column}: {error.message}"
