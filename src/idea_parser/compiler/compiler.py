# Copyright 2026 Idea Parser Contributors
# SPDX-License-Identifier: Apache-2.0

"""Reduces .idea syntax trees to plain, JSON-like configuration data.

The compiler is stateless. Attribute arguments that name another
declaration (``@field.input(Text)``) are kept as ``"${Text}"`` placeholders
unless a reference table is supplied, in which case they are resolved
against it and unknown names are rejected.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from idea_parser.exception import DuplicateDeclarationError, InvalidTokenError, UnknownReferenceError
from idea_parser.model.tokens import (
    ArrayToken,
    AttributeToken,
    ColumnToken,
    DataToken,
    DeclarationToken,
    IdentifierToken,
    ImportToken,
    LiteralToken,
    ObjectToken,
    SchemaToken,
    StructureToken,
)

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############

References = Mapping[str, Any]


class Compiler:
    """Namespace of pure functions turning tree nodes into plain data."""

    # ------------------------------------------------------------------
    # Data literals
    # ------------------------------------------------------------------

    @staticmethod
    def data(token: DataToken, references: References | None = None) -> Any:
        """Compile any data token into its native value."""
        if isinstance(token, LiteralToken):
            return token.value
        if isinstance(token, ObjectToken):
            return Compiler.object(token, references)
        if isinstance(token, ArrayToken):
            return Compiler.array(token, references)
        if isinstance(token, IdentifierToken):
            return Compiler.identifier(token, references)
        raise InvalidTokenError("Invalid data token type")

    @staticmethod
    def object(token: ObjectToken, references: References | None = None) -> dict[str, Any]:
        """Compile an object literal. A repeated key keeps its last value."""
        return {prop.key.name: Compiler.data(prop.value, references) for prop in token.properties}

    @staticmethod
    def array(token: ArrayToken, references: References | None = None) -> list[Any]:
        """Compile an array literal, preserving element order."""
        return [Compiler.data(element, references) for element in token.elements]

    @staticmethod
    def identifier(token: IdentifierToken, references: References | None = None) -> Any:
        """Compile a reference to another declaration.

        Without a reference table the name is kept as a ``"${Name}"``
        placeholder for a later merge step.

        Raises:
            UnknownReferenceError: If *references* is given but lacks the name.
        """
        if references is None:
            return "${" + token.name + "}"
        if token.name in references:
            return references[token.name]
        raise UnknownReferenceError.for_("Unknown reference %s", token.name).with_position(token.start, token.end)

    # ------------------------------------------------------------------
    # Declarations
    # ------------------------------------------------------------------

    @staticmethod
    def enum(token: DeclarationToken) -> tuple[str, dict[str, Any]]:
        """Compile an enum into ``(name, {KEY: value})``."""
        if not isinstance(token, DeclarationToken) or token.kind != "enum":
            raise InvalidTokenError("Invalid Enum")
        return token.id.name, Compiler.object(token.init)

    @staticmethod
    def prop(token: DeclarationToken) -> tuple[str, dict[str, Any]]:
        """Compile a prop into ``(name, config)``."""
        if not isinstance(token, DeclarationToken) or token.kind != "prop":
            raise InvalidTokenError("Invalid Prop")
        return token.id.name, Compiler.object(token.init)

    @staticmethod
    def plugin(token: DeclarationToken) -> tuple[str, dict[str, Any]]:
        """Compile a plugin into ``(path, config)``."""
        if not isinstance(token, DeclarationToken) or token.kind != "plugin":
            raise InvalidTokenError("Invalid Plugin")
        return token.id.name, Compiler.object(token.init)

    @staticmethod
    def use(token: ImportToken) -> str:
        """Compile a ``use`` declaration into its path."""
        if not isinstance(token, ImportToken):
            raise InvalidTokenError("Invalid Import")
        return str(token.source.value)

    @staticmethod
    def type(token: StructureToken, references: References | None = None) -> tuple[str, dict[str, Any]]:
        """Compile a ``type`` into ``(name, TypeConfig)``."""
        if not isinstance(token, StructureToken) or token.kind != "type":
            raise InvalidTokenError("Invalid Type")
        return token.id.name, _structure(token, references)

    @staticmethod
    def model(token: StructureToken, references: References | None = None) -> tuple[str, dict[str, Any]]:
        """Compile a ``model`` into ``(name, TypeConfig)``."""
        if not isinstance(token, StructureToken) or token.kind != "model":
            raise InvalidTokenError("Invalid Model")
        return token.id.name, _structure(token, references)

    @staticmethod
    def attributes(tokens: Iterable[AttributeToken], references: References | None = None) -> dict[str, Any]:
        """Fold attributes into a map.

        A bare attribute compiles to True, a single argument to its value,
        and several arguments to a list. A repeated attribute keeps its last
        value.
        """
        result: dict[str, Any] = {}
        for token in tokens:
            values = [Compiler.data(argument, references) for argument in token.arguments]
            if not values:
                result[token.key.name] = True
            elif len(values) == 1:
                result[token.key.name] = values[0]
            else:
                result[token.key.name] = values
        return result

    # ------------------------------------------------------------------
    # Whole documents
    # ------------------------------------------------------------------

    @staticmethod
    def schema(token: SchemaToken, finalize: bool = False) -> dict[str, Any]:
        """Compile a document into a schema configuration.

        Enum, prop, type, and model names share one namespace; plugins are
        keyed by path.

        Args:
            token: The program node produced by the schema tree.
            finalize: Resolve attribute references and fold away the
                ``prop`` and ``use`` sections. A type or model reference
                inlines its compiled config and must follow the declaration
                it names.

        Raises:
            InvalidTokenError: If *token* is not a program node.
            DuplicateDeclarationError: If a name or plugin path repeats.
            UnknownReferenceError: When finalizing and a reference is unknown.
        """
        if not isinstance(token, SchemaToken) or token.kind != "schema":
            raise InvalidTokenError("Invalid Schema")

        references = _collect_references(token.body) if finalize else None
        schema: dict[str, Any] = {}
        names: set[str] = set()
        paths: set[str] = set()

        for declaration in token.body:
            if isinstance(declaration, ImportToken):
                if not finalize:
                    schema.setdefault("use", []).append(Compiler.use(declaration))
                continue

            seen = paths if declaration.kind == "plugin" else names
            if declaration.id.name in seen:
                raise DuplicateDeclarationError.for_("Duplicate %s", declaration.id.name).with_position(
                    declaration.id.start, declaration.id.end
                )
            seen.add(declaration.id.name)

            if declaration.kind == "prop" and finalize:
                continue
            name, value = _compile_declaration(declaration, references)
            schema.setdefault(declaration.kind, {})[name] = value
            # Structures become referable once compiled, so only earlier ones resolve.
            if references is not None and isinstance(declaration, StructureToken):
                references[name] = value

        logger.debug(
            "Compiled %d declarations into sections %s (finalize=%s)",
            len(token.body),
            sorted(schema),
            finalize,
        )
        return schema

    @staticmethod
    def final(token: SchemaToken) -> dict[str, Any]:
        """Compile a document with every reference resolved."""
        return Compiler.schema(token, finalize=True)


# ################
# Implementation
# ################


def _structure(token: StructureToken, references: References | None) -> dict[str, Any]:
    """Build the TypeConfig shared by types and models."""
    return {
        "name": token.id.name,
        "mutable": token.mutable,
        "attributes": Compiler.attributes(token.attributes, references),
        "columns": [_column(column, references) for column in token.columns],
    }


def _column(token: ColumnToken, references: References | None) -> dict[str, Any]:
    """Build a single column config."""
    return {
        "name": token.key.name,
        "type": token.value.name,
        "required": token.required,
        "multiple": token.multiple,
        "attributes": Compiler.attributes(token.attributes, references),
    }


def _compile_declaration(
    declaration: DeclarationToken | StructureToken,
    references: References | None,
) -> tuple[str, Any]:
    """Dispatch a named declaration to its compiler function."""
    if isinstance(declaration, StructureToken):
        if declaration.kind == "model":
            return Compiler.model(declaration, references)
        return Compiler.type(declaration, references)
    if declaration.kind == "enum":
        return Compiler.enum(declaration)
    if declaration.kind == "prop":
        return Compiler.prop(declaration)
    return Compiler.plugin(declaration)


def _collect_references(body: Iterable[object]) -> dict[str, Any]:
    """Build the initial table used to resolve attribute references.

    Props and enums resolve to their compiled bodies from anywhere in the
    document. Types and models are added by :meth:`Compiler.schema` as they
    are compiled.
    """
    references: dict[str, Any] = {}
    for declaration in body:
        if isinstance(declaration, DeclarationToken) and declaration.kind == "prop":
            references[declaration.id.name] = Compiler.prop(declaration)[1]
        elif isinstance(declaration, DeclarationToken) and declaration.kind == "enum":
            references[declaration.id.name] = Compiler.enum(declaration)[1]
    return references
