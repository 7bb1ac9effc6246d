# Copyright 2026 Idea Parser Contributors
# SPDX-License-Identifier: Apache-2.0

"""Grammar for ``enum`` declarations.

::

    enum Roles {
      ADMIN "Admin"
      USER  "User"
    }
"""

from __future__ import annotations

from idea_parser.model.tokens import DeclarationToken, ObjectToken, PropertyToken
from idea_parser.parser.definitions import SCALAR, keyword
from idea_parser.parser.lexer import Lexer
from idea_parser.trees.abstract import AbstractTree

# ###############
# Public Interface
# ###############


class EnumTree(AbstractTree):
    """Parses a single ``enum`` declaration."""

    @classmethod
    def definitions(cls, lexer: Lexer) -> Lexer:
        super().definitions(lexer)
        lexer.define("EnumWord", keyword("_EnumWord", "enum"))
        return lexer

    def build(self, code: str, start: int = 0) -> DeclarationToken:
        self._lexer.load(code, start)
        return self.enum()

    def enum(self) -> DeclarationToken:
        """Parse ``enum Name { KEY value ... }``."""
        head = self._lexer.expect("EnumWord")
        self._lexer.expect("whitespace")
        name = self._name("CapitalIdentifier")
        self._noncode()
        opening = self._lexer.expect("{")
        self._noncode()
        properties: list[PropertyToken] = []
        while self._lexer.next("AnyIdentifier"):
            properties.append(self.property())
            self._noncode()
        close = self._lexer.expect("}")

        init = ObjectToken(start=opening.start, end=close.end, properties=tuple(properties))
        return DeclarationToken(kind="enum", start=head.start, end=close.end, id=name, init=init)

    def property(self) -> PropertyToken:
        """Parse one member: ``KEY "Display value"``."""
        key = self._lexer.expect("AnyIdentifier")
        self._noncode()
        value = self._lexer.expect(SCALAR)
        return PropertyToken(start=key.start, end=value.end, key=key, value=value)
