# Copyright 2026 Idea Parser Contributors
# SPDX-License-Identifier: Apache-2.0

"""Top-level grammar for a whole .idea document.

A document is a sequence of ``use``, ``plugin``, ``prop``, ``enum``,
``type``, and ``model`` declarations separated by whitespace and comments.
Every sub-grammar reads from the schema tree's own lexer.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping

from idea_parser.model.tokens import Declaration, SchemaToken
from idea_parser.parser.lexer import Lexer
from idea_parser.trees.abstract import AbstractTree
from idea_parser.trees.enum_tree import EnumTree
from idea_parser.trees.model_tree import ModelTree
from idea_parser.trees.plugin_tree import PluginTree
from idea_parser.trees.prop_tree import PropTree
from idea_parser.trees.type_tree import TypeTree
from idea_parser.trees.use_tree import UseTree

# ###############
# Public Interface
# ###############


class SchemaTree(AbstractTree):
    """Parses a complete document into a :class:`SchemaToken`."""

    @classmethod
    def definitions(cls, lexer: Lexer) -> Lexer:
        super().definitions(lexer)
        for tree in (UseTree, PluginTree, PropTree, EnumTree, TypeTree, ModelTree):
            tree.definitions(lexer)
        return lexer

    def __init__(self, lexer: Lexer | None = None, *, env: Mapping[str, str] | None = None) -> None:
        super().__init__(lexer, env=env)
        self._use = UseTree(self._lexer)
        self._plugin = PluginTree(self._lexer)
        self._prop = PropTree(self._lexer)
        self._enum = EnumTree(self._lexer)
        self._type = TypeTree(self._lexer)
        self._model = ModelTree(self._lexer)

    def build(self, code: str, start: int = 0) -> SchemaToken:
        self._lexer.load(code, start)
        return self.schema()

    def schema(self) -> SchemaToken:
        """Parse declarations until the end of input.

        Raises:
            UnexpectedTokenError: If the document holds no declaration or
                something other than a declaration keyword is found.
        """
        grammars: list[tuple[str, Callable[[], Declaration]]] = [
            ("UseWord", self._use.use),
            ("PluginWord", self._plugin.plugin),
            ("PropWord", self._prop.prop),
            ("EnumWord", self._enum.enum),
            ("TypeWord", self._type.type),
            ("ModelWord", self._model.model),
        ]
        keywords = [word for word, _ in grammars]

        self._noncode()
        start = self._lexer.index
        body: list[Declaration] = []
        while True:
            grammar = next((rule for word, rule in grammars if self._lexer.next(word)), None)
            if grammar is None:
                # Nothing matched, so this always raises with the keyword list.
                self._lexer.expect(keywords)
            body.append(grammar())
            self._noncode()
            if self._lexer.index >= len(self._lexer.code):
                break

        return SchemaToken(start=start, end=self._lexer.index, body=tuple(body))
