# Copyright 2026 Idea Parser Contributors
# SPDX-License-Identifier: Apache-2.0

"""Grammar for ``plugin "path" { ... }`` declarations."""

from __future__ import annotations

from idea_parser.model.tokens import DeclarationToken, IdentifierToken
from idea_parser.parser.definitions import keyword
from idea_parser.parser.lexer import Lexer
from idea_parser.trees.abstract import AbstractTree

# ###############
# Public Interface
# ###############


class PluginTree(AbstractTree):
    """Parses a plugin declaration. The quoted path becomes the declaration id."""

    @classmethod
    def definitions(cls, lexer: Lexer) -> Lexer:
        super().definitions(lexer)
        lexer.define("PluginWord", keyword("_PluginWord", "plugin"))
        return lexer

    def build(self, code: str, start: int = 0) -> DeclarationToken:
        self._lexer.load(code, start)
        return self.plugin()

    def plugin(self) -> DeclarationToken:
        head = self._lexer.expect("PluginWord")
        self._lexer.expect("whitespace")
        path = self._lexer.expect("String")
        self._noncode()
        init = self._lexer.expect("Object")
        name = IdentifierToken(start=path.start, end=path.end, name=path.value)
        return DeclarationToken(kind="plugin", start=head.start, end=init.end, id=name, init=init)
