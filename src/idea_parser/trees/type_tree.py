# Copyright 2026 Idea Parser Contributors
# SPDX-License-Identifier: Apache-2.0

"""Grammar for ``type`` declarations, including the column and attribute syntax.

::

    type Address! @label("Address" "Addresses") {
      street  String    @field.input(Text)
      tags    String[]
      country String?   @default("US")
    }
"""

from __future__ import annotations

import re
from typing import Literal

from idea_parser.model.tokens import AttributeToken, ColumnToken, DataToken, IdentifierToken, StructureToken
from idea_parser.parser.definitions import DATA, keyword, scan
from idea_parser.parser.lexer import Lexer
from idea_parser.trees.abstract import AbstractTree

# ###############
# Public Interface
# ###############

# Attribute arguments may also reference other declarations by name.
ARGUMENTS: tuple[str, ...] = (*DATA, "CapitalIdentifier")


class TypeTree(AbstractTree):
    """Parses a single ``type`` declaration."""

    @classmethod
    def definitions(cls, lexer: Lexer) -> Lexer:
        super().definitions(lexer)
        lexer.define("TypeWord", keyword("_TypeWord", "type"))
        lexer.define("[]", lambda code, index, lexer: scan("_Multiple", _MULTIPLE, code, index))
        lexer.define("?", lambda code, index, lexer: scan("_Optional", _OPTIONAL, code, index))
        return lexer

    def build(self, code: str, start: int = 0) -> StructureToken:
        self._lexer.load(code, start)
        return self.type()

    def type(self) -> StructureToken:
        """Parse ``type Name[!] @attr... { column... }``."""
        return self._structure("TypeWord", "type")

    def property(self) -> ColumnToken:
        """Parse one column: ``name Type[][?] @attr...``."""
        key = self._lexer.expect("CamelIdentifier")
        self._lexer.expect("whitespace")
        self._noncode()
        value = self._name("CapitalIdentifier")
        multiple = self._lexer.optional("[]") is not None
        required = self._lexer.optional("?") is None
        end = self._lexer.index

        attributes: list[AttributeToken] = []
        while True:
            # Only commit to the skipped whitespace if an attribute follows,
            # so the column ends right after its last token.
            snapshot = self._lexer.index
            self._noncode()
            if not self._lexer.next("AttributeIdentifier"):
                self._lexer.index = snapshot
                break
            attributes.append(self.parameter())
            end = self._lexer.index

        return ColumnToken(
            start=key.start,
            end=end,
            key=key,
            value=value,
            multiple=multiple,
            required=required,
            attributes=tuple(attributes),
        )

    def parameter(self) -> AttributeToken:
        """Parse one attribute: ``@name`` or ``@name(arg ...)``."""
        token = self._lexer.expect("AttributeIdentifier")
        key = IdentifierToken(start=token.start, end=token.end, name=token.name[1:])
        arguments: list[DataToken] = []
        end = token.end
        if self._lexer.optional("(") is not None:
            self._noncode()
            while (argument := self._lexer.optional(ARGUMENTS)) is not None:
                arguments.append(argument)
                self._noncode()
            end = self._lexer.expect(")").end
        return AttributeToken(start=token.start, end=end, key=key, arguments=tuple(arguments))

    # ------------------------------------------------------------------
    # Shared type / model grammar
    # ------------------------------------------------------------------

    def _structure(self, word: str, kind: Literal["type", "model"]) -> StructureToken:
        """Parse the declaration body shared by types and models."""
        head = self._lexer.expect(word)
        self._lexer.expect("whitespace")
        name = self._name("CapitalIdentifier")
        final = self._lexer.optional("!")
        self._noncode()

        attributes: list[AttributeToken] = []
        while self._lexer.next("AttributeIdentifier"):
            attributes.append(self.parameter())
            self._noncode()

        self._lexer.expect("{")
        self._noncode()
        columns: list[ColumnToken] = []
        while self._lexer.next("CamelIdentifier"):
            columns.append(self.property())
            self._noncode()
        close = self._lexer.expect("}")

        return StructureToken(
            kind=kind,
            start=head.start,
            end=close.end,
            id=name,
            mutable=final is None,
            attributes=tuple(attributes),
            columns=tuple(columns),
        )


# ################
# Implementation
# ################

_MULTIPLE = re.compile(r"\[\]")
_OPTIONAL = re.compile(r"\?")
