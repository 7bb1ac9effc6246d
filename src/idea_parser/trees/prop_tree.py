# Copyright 2026 Idea Parser Contributors
# SPDX-License-Identifier: Apache-2.0

"""Grammar for ``prop`` declarations: reusable field configurations."""

from __future__ import annotations

from idea_parser.model.tokens import DeclarationToken
from idea_parser.parser.definitions import keyword
from idea_parser.parser.lexer import Lexer
from idea_parser.trees.abstract import AbstractTree

# ###############
# Public Interface
# ###############


class PropTree(AbstractTree):
    """Parses ``prop Name { key value ... }``."""

    @classmethod
    def definitions(cls, lexer: Lexer) -> Lexer:
        super().definitions(lexer)
        lexer.define("PropWord", keyword("_PropWord", "prop"))
        return lexer

    def build(self, code: str, start: int = 0) -> DeclarationToken:
        self._lexer.load(code, start)
        return self.prop()

    def prop(self) -> DeclarationToken:
        head = self._lexer.expect("PropWord")
        self._lexer.expect("whitespace")
        name = self._name("CapitalIdentifier")
        self._noncode()
        init = self._lexer.expect("Object")
        return DeclarationToken(kind="prop", start=head.start, end=init.end, id=name, init=init)
