# Copyright 2026 Idea Parser Contributors
# SPDX-License-Identifier: Apache-2.0

"""Syntax tree nodes and the typed schema configuration."""

from idea_parser.model.config import ColumnConfig, SchemaConfig, TypeConfig
from idea_parser.model.tokens import (
    ArrayToken,
    AttributeToken,
    ColumnToken,
    DataToken,
    Declaration,
    DeclarationToken,
    IdentifierToken,
    ImportToken,
    LiteralToken,
    ObjectToken,
    PropertyToken,
    Scalar,
    SchemaToken,
    StructureToken,
    Token,
    UnknownToken,
)

__all__ = [
    # Tokens
    "Scalar",
    "UnknownToken",
    "LiteralToken",
    "IdentifierToken",
    "PropertyToken",
    "ObjectToken",
    "ArrayToken",
    "DataToken",
    "Token",
    # Declarations
    "AttributeToken",
    "ColumnToken",
    "DeclarationToken",
    "StructureToken",
    "ImportToken",
    "Declaration",
    "SchemaToken",
    # Configuration
    "ColumnConfig",
    "TypeConfig",
    "SchemaConfig",
]
