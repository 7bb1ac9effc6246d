# Copyright 2026 Idea Parser Contributors
# SPDX-License-Identifier: Apache-2.0

"""Grammar for ``use "path"`` import declarations."""

from __future__ import annotations

from idea_parser.model.tokens import ImportToken
from idea_parser.parser.definitions import keyword
from idea_parser.parser.lexer import Lexer
from idea_parser.trees.abstract import AbstractTree

# ###############
# Public Interface
# ###############


class UseTree(AbstractTree):
    """Parses a ``use`` declaration. Resolving the path is left to the caller."""

    @classmethod
    def definitions(cls, lexer: Lexer) -> Lexer:
        super().definitions(lexer)
        lexer.define("UseWord", keyword("_UseWord", "use"))
        return lexer

    def build(self, code: str, start: int = 0) -> ImportToken:
        self._lexer.load(code, start)
        return self.use()

    def use(self) -> ImportToken:
        head = self._lexer.expect("UseWord")
        self._lexer.expect("whitespace")
        source = self._lexer.expect("String")
        return ImportToken(start=head.start, end=source.end, source=source)
