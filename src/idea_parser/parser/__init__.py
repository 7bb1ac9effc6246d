# Copyright 2026 Idea Parser Contributors
# SPDX-License-Identifier: Apache-2.0

"""Lexer and token readers for .idea files."""

from idea_parser.parser import definitions
from idea_parser.parser.definitions import (
    DATA,
    DEFINITIONS,
    NONCODE,
    SCALAR,
    Reader,
    identifier,
    keyword,
    reader,
    scan,
)
from idea_parser.parser.lexer import Definition, Lexer

__all__ = [
    "definitions",
    "DEFINITIONS",
    "DATA",
    "SCALAR",
    "NONCODE",
    "Reader",
    "scan",
    "reader",
    "identifier",
    "keyword",
    "Definition",
    "Lexer",
]
