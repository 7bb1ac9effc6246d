# Copyright 2026 Idea Parser Contributors
# SPDX-License-Identifier: Apache-2.0

"""Token readers for the .idea language.

A reader is a pure function ``(code, index, lexer) -> Token | None``. It
inspects ``code`` starting exactly at ``index`` and returns a token when the
text there matches, or None otherwise. Readers never move the lexer cursor;
composite readers (arrays and objects) work on a cloned sub-lexer.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import TYPE_CHECKING

from idea_parser.exception import UnexpectedTokenError
from idea_parser.model.tokens import (
    ArrayToken,
    DataToken,
    IdentifierToken,
    LiteralToken,
    ObjectToken,
    PropertyToken,
    Token,
    UnknownToken,
)

if TYPE_CHECKING:
    from idea_parser.parser.lexer import Lexer

# ###############
# Public Interface
# ###############

Reader = Callable[[str, int, "Lexer"], "Token | None"]

SCALAR: tuple[str, ...] = ("Null", "Boolean", "String", "Float", "Integer", "Environment")
DATA: tuple[str, ...] = (*SCALAR, "Object", "Array")
NONCODE: tuple[str, ...] = ("whitespace", "comment", "note")


def scan(type: str, pattern: re.Pattern[str], code: str, start: int) -> UnknownToken | None:
    """Match a precompiled *pattern* exactly at *start*."""
    match = pattern.match(code, start)
    if match is None:
        return None
    value = match.group(0)
    return UnknownToken(type=type, start=start, end=match.end(), value=value, raw=value)


def reader(type: str, source: str, code: str, index: int, flags: int = 0) -> UnknownToken | None:
    """Match the regular expression *source* (compiled with *flags*) at *index*.

    Used for patterns that need flags, such as block comments spanning
    several lines.
    """
    return scan(type, re.compile(source, flags), code, index)


def identifier(pattern: re.Pattern[str], code: str, start: int) -> IdentifierToken | None:
    """Match *pattern* at *start* and wrap the result as an identifier."""
    token = scan("Identifier", pattern, code, start)
    if token is None:
        return None
    return IdentifierToken(start=token.start, end=token.end, name=token.value)


def null(code: str, index: int, lexer: Lexer) -> LiteralToken | None:
    """Read the ``null`` literal."""
    if _NULL.match(code, index) is None:
        return None
    return LiteralToken(start=index, end=index + 4, value=None, raw="null")


def boolean(code: str, index: int, lexer: Lexer) -> LiteralToken | None:
    """Read ``true`` or ``false``."""
    match = _BOOLEAN.match(code, index)
    if match is None:
        return None
    raw = match.group(0)
    return LiteralToken(start=index, end=match.end(), value=raw == "true", raw=raw)


def string(code: str, index: int, lexer: Lexer) -> LiteralToken | None:
    """Read a double-quoted string. The content is taken verbatim."""
    if not code.startswith('"', index):
        return None
    close = code.find('"', index + 1)
    if close < 0:
        return None
    end = close + 1
    return LiteralToken(start=index, end=end, value=code[index + 1 : close], raw=code[index:end])


def float_(code: str, start: int, lexer: Lexer) -> LiteralToken | None:
    """Read a decimal number such as ``-4.25``."""
    match = _FLOAT.match(code, start)
    if match is None:
        return None
    raw = match.group(0)
    return LiteralToken(start=start, end=match.end(), value=float(raw), raw=raw)


def integer(code: str, start: int, lexer: Lexer) -> LiteralToken | None:
    """Read a whole number such as ``-42``."""
    match = _INTEGER.match(code, start)
    if match is None:
        return None
    raw = match.group(0)
    return LiteralToken(start=start, end=match.end(), value=int(raw), raw=raw)


def environment(code: str, index: int, lexer: Lexer) -> LiteralToken | None:
    """Read ``env("NAME")`` and substitute the variable's value.

    The value is looked up once, at parse time, in the lexer's environment
    mapping. Unset variables become an empty string.
    """
    if not code.startswith('env("', index):
        return None
    close = code.find('")', index + 5)
    if close < 0:
        return None
    end = close + 2
    value = lexer.env.get(code[index + 5 : close], "")
    return LiteralToken(start=index, end=end, value=value, raw=code[index:end])


def array(code: str, index: int, lexer: Lexer) -> ArrayToken | None:
    """Read a ``[ value ... ]`` array of data values."""
    subparser = lexer.clone().load(code, index)
    elements: list[DataToken] = []
    try:
        subparser.expect("[")
        _noncode(subparser)
        while (element := subparser.optional(DATA)) is not None:
            elements.append(element)
            _noncode(subparser)
        subparser.expect("]")
    except UnexpectedTokenError:
        return None
    return ArrayToken(start=index, end=subparser.index, elements=tuple(elements))


def object_(code: str, index: int, lexer: Lexer) -> ObjectToken | None:
    """Read a ``{ key value ... }`` object of data values."""
    subparser = lexer.clone().load(code, index)
    properties: list[PropertyToken] = []
    try:
        subparser.expect("{")
        _noncode(subparser)
        while (key := subparser.optional("AnyIdentifier")) is not None:
            _noncode(subparser)
            value = subparser.expect(DATA)
            _noncode(subparser)
            properties.append(PropertyToken(start=key.start, end=value.end, key=key, value=value))
        subparser.expect("}")
    except UnexpectedTokenError:
        return None
    return ObjectToken(start=index, end=subparser.index, properties=tuple(properties))


def attribute_identifier(code: str, start: int, lexer: Lexer) -> IdentifierToken | None:
    """Read an ``@attribute`` or ``@namespaced.attribute`` name, keeping the ``@``."""
    return identifier(_ATTRIBUTE, code, start)


def keyword(type: str, word: str) -> Reader:
    """Build a reader for a reserved *word* that only matches as a whole word."""
    compiled = re.compile(re.escape(word) + r"(?![a-zA-Z0-9_])")
    return lambda code, index, lexer: scan(type, compiled, code, index)


def _structural(type: str, pattern: str) -> Reader:
    """Build a reader for a fixed structural token."""
    compiled = re.compile(pattern)
    return lambda code, index, lexer: scan(type, compiled, code, index)


def _identifier(pattern: str) -> Reader:
    """Build a reader for one identifier family."""
    compiled = re.compile(pattern)
    return lambda code, index, lexer: identifier(compiled, code, index)


DEFINITIONS: dict[str, Reader] = {
    "line": lambda code, index, lexer: reader("_Line", r"[\n\r]+", code, index),
    "space": _structural("_Space", r"[ ]+"),
    "whitespace": _structural("_Whitespace", r"\s+"),
    "note": lambda code, index, lexer: reader("_Note", r"/\*(?:(?!\*/).)+\*/", code, index, re.DOTALL),
    "comment": _structural("_Comment", r"//[^\n\r]*"),
    ")": _structural("_ParenClose", r"\)"),
    "(": _structural("_ParenOpen", r"\("),
    "}": _structural("_BraceClose", r"\}"),
    "{": _structural("_BraceOpen", r"\{"),
    "]": _structural("_SquareClose", r"\]"),
    "[": _structural("_SquareOpen", r"\["),
    "!": _structural("_Final", r"!"),
    "Null": null,
    "Boolean": boolean,
    "String": string,
    "Float": float_,
    "Integer": integer,
    "Environment": environment,
    "Array": array,
    "Object": object_,
    "AnyIdentifier": _identifier(r"[a-zA-Z_][a-zA-Z0-9_]*"),
    "UpperIdentifier": _identifier(r"[A-Z_][A-Z0-9_]*(?![a-zA-Z0-9_])"),
    "CapitalIdentifier": _identifier(r"[A-Z][a-zA-Z0-9_]*"),
    "CamelIdentifier": _identifier(r"[a-z_][a-zA-Z0-9_]*"),
    "LowerIdentifier": _identifier(r"[a-z_][a-z0-9_]*(?![a-zA-Z0-9_])"),
    "AttributeIdentifier": attribute_identifier,
}


# ################
# Implementation
# ################

_NULL = re.compile(r"null(?![a-zA-Z0-9_])")
_BOOLEAN = re.compile(r"(?:true|false)(?![a-zA-Z0-9_])")
_FLOAT = re.compile(r"-?\d+\.\d+")
_INTEGER = re.compile(r"-?\d+")
_ATTRIBUTE = re.compile(r"@[a-z](?:\.?[a-zA-Z0-9_]+)*")


def _noncode(lexer: Lexer) -> None:
    """Skip whitespace and comments at the lexer cursor."""
    while lexer.optional(NONCODE) is not None:
        pass
