# Copyright 2026 Idea Parser Contributors
# SPDX-License-Identifier: Apache-2.0

"""Grammar for ``model`` declarations, built on the type grammar."""

from __future__ import annotations

from idea_parser.model.tokens import StructureToken
from idea_parser.parser.definitions import keyword
from idea_parser.parser.lexer import Lexer
from idea_parser.trees.type_tree import TypeTree

# ###############
# Public Interface
# ###############


class ModelTree(TypeTree):
    """Parses a single ``model`` declaration."""

    @classmethod
    def definitions(cls, lexer: Lexer) -> Lexer:
        super().definitions(lexer)
        lexer.define("ModelWord", keyword("_ModelWord", "model"))
        return lexer

    def build(self, code: str, start: int = 0) -> StructureToken:
        self._lexer.load(code, start)
        return self.model()

    def model(self) -> StructureToken:
        """Parse ``model Name[!] @attr... { column... }``."""
        return self._structure("ModelWord", "model")
