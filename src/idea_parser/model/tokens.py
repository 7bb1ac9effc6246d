# Copyright 2026 Idea Parser Contributors
# SPDX-License-Identifier: Apache-2.0

"""Token and syntax tree node representations produced by the .idea parser.

All nodes carry ``start`` and ``end`` offsets into the source text, where
``end`` is exclusive. The ``type`` field mirrors the node family and the
``kind`` field of declarations names the declaration keyword.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

# ###############
# Public Interface
# ###############

Scalar = None | bool | int | float | str


@dataclass(frozen=True)
class UnknownToken:
    """A structural token (whitespace, comment, punctuation, keyword).

    Attributes:
        type: Token family, prefixed with ``_`` for structural tokens.
        start: Offset of the first matched character.
        end: Offset just past the last matched character.
        value: The matched text.
        raw: The matched text, identical to ``code[start:end]``.
    """

    type: str
    start: int
    end: int
    value: str
    raw: str


@dataclass(frozen=True)
class LiteralToken:
    """A scalar literal: null, boolean, string, float, or integer."""

    start: int
    end: int
    value: Scalar
    raw: str
    type: Literal["Literal"] = "Literal"


@dataclass(frozen=True)
class IdentifierToken:
    """A bare name, such as a declaration id or an attribute reference."""

    start: int
    end: int
    name: str
    type: Literal["Identifier"] = "Identifier"


@dataclass(frozen=True)
class PropertyToken:
    """A ``key value`` pair inside an object literal."""

    start: int
    end: int
    key: IdentifierToken
    value: DataToken
    type: Literal["Property"] = "Property"


@dataclass(frozen=True)
class ObjectToken:
    """A ``{ key value ... }`` object literal."""

    start: int
    end: int
    properties: tuple[PropertyToken, ...] = ()
    type: Literal["ObjectExpression"] = "ObjectExpression"


@dataclass(frozen=True)
class ArrayToken:
    """A ``[ value ... ]`` array literal."""

    start: int
    end: int
    elements: tuple[DataToken, ...] = ()
    type: Literal["ArrayExpression"] = "ArrayExpression"


# Anything the compiler can turn into plain data. Identifiers appear only as
# attribute arguments, where they reference other declarations.
DataToken = LiteralToken | ObjectToken | ArrayToken | IdentifierToken

Token = UnknownToken | LiteralToken | IdentifierToken | PropertyToken | ObjectToken | ArrayToken


@dataclass(frozen=True)
class AttributeToken:
    """An ``@name(arg ...)`` annotation on a column, type, or model."""

    start: int
    end: int
    key: IdentifierToken
    arguments: tuple[DataToken, ...] = ()
    type: Literal["Attribute"] = "Attribute"


@dataclass(frozen=True)
class ColumnToken:
    """A ``name Type[]? @attr ...`` column of a type or model."""

    start: int
    end: int
    key: IdentifierToken
    value: IdentifierToken
    multiple: bool = False
    required: bool = True
    attributes: tuple[AttributeToken, ...] = ()
    type: Literal["Column"] = "Column"


@dataclass(frozen=True)
class DeclarationToken:
    """A named ``enum``, ``prop``, or ``plugin`` declaration.

    For enums and props ``id`` holds the capitalized name; for plugins it
    holds the quoted plugin path. ``init`` is the declaration body.
    """

    kind: Literal["enum", "prop", "plugin"]
    start: int
    end: int
    id: IdentifierToken
    init: ObjectToken
    type: Literal["VariableDeclaration"] = "VariableDeclaration"


@dataclass(frozen=True)
class StructureToken:
    """A ``type`` or ``model`` declaration with attributes and columns.

    ``mutable`` is False when the name is followed by ``!``.
    """

    kind: Literal["type", "model"]
    start: int
    end: int
    id: IdentifierToken
    mutable: bool = True
    attributes: tuple[AttributeToken, ...] = ()
    columns: tuple[ColumnToken, ...] = ()
    type: Literal["VariableDeclaration"] = "VariableDeclaration"


@dataclass(frozen=True)
class ImportToken:
    """A ``use "path"`` declaration."""

    start: int
    end: int
    source: LiteralToken
    kind: Literal["use"] = "use"
    type: Literal["ImportDeclaration"] = "ImportDeclaration"


Declaration = DeclarationToken | StructureToken | ImportToken


@dataclass(frozen=True)
class SchemaToken:
    """The program node holding every top-level declaration in source order."""

    start: int
    end: int
    body: tuple[Declaration, ...] = field(default_factory=tuple)
    kind: Literal["schema"] = "schema"
    type: Literal["Program"] = "Program"
