# Copyright 2026 Idea Parser Contributors
# SPDX-License-Identifier: Apache-2.0

"""Parser and compiler for the .idea schema definition language."""

from idea_parser.compiler import Compiler
from idea_parser.exception import (
    DuplicateDeclarationError,
    ErrorKind,
    IdeaException,
    InvalidTokenError,
    UnexpectedTokenError,
    UnknownDefinitionError,
    UnknownReferenceError,
    format_error,
)
from idea_parser.model import ColumnConfig, SchemaConfig, TypeConfig
from idea_parser.parser import DEFINITIONS, Lexer, definitions
from idea_parser.schema import final, load, parse
from idea_parser.trees import (
    AbstractTree,
    EnumTree,
    ModelTree,
    PluginTree,
    PropTree,
    SchemaTree,
    TypeTree,
    UseTree,
)

__all__ = [
    # API
    "parse",
    "final",
    "load",
    # Errors
    "IdeaException",
    "ErrorKind",
    "UnknownDefinitionError",
    "UnexpectedTokenError",
    "UnknownReferenceError",
    "DuplicateDeclarationError",
    "InvalidTokenError",
    "format_error",
    # Building blocks
    "Lexer",
    "definitions",
    "DEFINITIONS",
    "Compiler",
    "AbstractTree",
    "EnumTree",
    "ModelTree",
    "PluginTree",
    "PropTree",
    "SchemaTree",
    "TypeTree",
    "UseTree",
    # Configuration
    "SchemaConfig",
    "TypeConfig",
    "ColumnConfig",
]
