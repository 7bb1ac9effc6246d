# Copyright 2026 Idea Parser Contributors
# SPDX-License-Identifier: Apache-2.0

"""Shared machinery for the recursive-descent grammar trees."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from idea_parser.exception import UnexpectedTokenError
from idea_parser.model.tokens import IdentifierToken
from idea_parser.parser.definitions import DEFINITIONS, NONCODE
from idea_parser.parser.lexer import Lexer

# ###############
# Public Interface
# ###############


class AbstractTree:
    """Base class for a grammar that turns source text into a syntax tree.

    A tree either owns a fresh lexer configured by :meth:`definitions` or
    shares the lexer of an enclosing tree, which must then already carry
    the definitions this grammar needs.

    Args:
        lexer: Lexer to read from. A new one is created when omitted.
        env: Environment mapping for ``env(...)`` literals, used only when
            a new lexer is created.
    """

    def __init__(self, lexer: Lexer | None = None, *, env: Mapping[str, str] | None = None) -> None:
        if lexer is None:
            lexer = self.definitions(Lexer(env=env))
        self._lexer = lexer

    @classmethod
    def definitions(cls, lexer: Lexer) -> Lexer:
        """Register the base literal, identifier, and bracket readers."""
        for key, reader in DEFINITIONS.items():
            lexer.define(key, reader)
        return lexer

    @classmethod
    def parse(cls, code: str, start: int = 0, *, env: Mapping[str, str] | None = None) -> Any:
        """Parse *code* from *start* with a freshly configured tree."""
        return cls(env=env).build(code, start)

    @property
    def lexer(self) -> Lexer:
        """The lexer this tree reads from."""
        return self._lexer

    def build(self, code: str, start: int = 0) -> Any:
        """Load *code* into the lexer and run the grammar entry point."""
        raise NotImplementedError

    # ------------------------------------------------------------------
    # Grammar helpers
    # ------------------------------------------------------------------

    def _noncode(self) -> None:
        """Skip any run of whitespace, line comments, and block notes."""
        while self._lexer.optional(NONCODE) is not None:
            pass

    def _name(self, key: str = "CapitalIdentifier") -> IdentifierToken:
        """Consume a declaration name of the identifier family *key*."""
        if not self._lexer.next(key):
            lexer = self._lexer
            if lexer.index >= len(lexer.code):
                raise UnexpectedTokenError.for_("Unexpected end of input expecting %s", key).with_position(
                    lexer.index, lexer.index
                )
            end = max(lexer.next_space(), lexer.index + 1)
            found = lexer.substring(lexer.index, end).strip()
            raise UnexpectedTokenError.for_("Expected %s but got %s", key, found).with_position(lexer.index, end)
        return self._lexer.expect(key)
