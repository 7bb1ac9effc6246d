# Copyright 2026 Idea Parser Contributors
# SPDX-License-Identifier: Apache-2.0

"""Cursor-based lexer driven by a registry of named token readers.

Unlike a conventional scanner, the lexer does not tokenize the whole source
up front. Grammars ask for the token they need next (``expect``,
``optional``) by key, and the lexer runs the matching readers at the cursor.
"""

from __future__ import annotations

import os
import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from types import MappingProxyType

from idea_parser.exception import UnexpectedTokenError, UnknownDefinitionError
from idea_parser.model.tokens import Token
from idea_parser.parser.definitions import Reader

# ###############
# Public Interface
# ###############

Keys = str | Sequence[str]


@dataclass(frozen=True)
class Definition:
    """A named entry in the lexer registry."""

    key: str
    reader: Reader


class Lexer:
    """Stateful cursor over source text plus a dictionary of token readers.

    Args:
        env: Mapping used to resolve ``env("NAME")`` literals. Defaults to
            the process environment.
    """

    def __init__(self, env: Mapping[str, str] | None = None) -> None:
        self._code = ""
        self._index = 0
        self._dictionary: dict[str, Definition] = {}
        self._env: Mapping[str, str] = os.environ if env is None else env

    @property
    def code(self) -> str:
        """The source text being read."""
        return self._code

    @property
    def index(self) -> int:
        """The current cursor offset."""
        return self._index

    @index.setter
    def index(self, value: int) -> None:
        self._index = value

    @property
    def dictionary(self) -> Mapping[str, Definition]:
        """Read-only view of the registered definitions."""
        return MappingProxyType(self._dictionary)

    @property
    def env(self) -> Mapping[str, str]:
        """The environment mapping used by ``env(...)`` literals."""
        return self._env

    def load(self, code: str, index: int = 0) -> Lexer:
        """Replace the source text and move the cursor to *index*."""
        self._code = code
        self._index = index
        return self

    def define(self, key: str, reader: Reader) -> Lexer:
        """Register *reader* under *key*, replacing any previous definition."""
        self._dictionary[key] = Definition(key=key, reader=reader)
        return self

    def get(self, key: str) -> Definition | None:
        """Return the definition registered under *key*, if any."""
        return self._dictionary.get(key)

    def clone(self) -> Lexer:
        """Return an independent lexer at the same position.

        The dictionary is copied shallowly: later ``define`` calls on either
        lexer do not affect the other, but reader functions are shared.
        """
        lexer = Lexer(env=self._env)
        lexer._code = self._code
        lexer._index = self._index
        lexer._dictionary = dict(self._dictionary)
        return lexer

    def match(self, code: str, start: int, keys: Keys | None = None) -> Token | None:
        """Return the first token any of *keys* reads at *start*.

        Keys are tried in the given order; when *keys* is None every
        registered definition is tried in registration order.

        Raises:
            UnknownDefinitionError: If a requested key is not registered.
        """
        if keys is None:
            definitions = list(self._dictionary.values())
        else:
            definitions = []
            for key in _as_keys(keys):
                definition = self._dictionary.get(key)
                if definition is None:
                    raise UnknownDefinitionError.for_("Unknown definition %s", key).with_position(start, start)
                definitions.append(definition)

        for definition in definitions:
            token = definition.reader(code, start, self)
            if token is not None:
                return token
        return None

    def next(self, keys: Keys) -> bool:
        """Return True if one of *keys* matches at the cursor. Never advances."""
        return self.match(self._code, self._index, keys) is not None

    def optional(self, keys: Keys) -> Token | None:
        """Consume and return a token for *keys* if one matches at the cursor."""
        token = self.match(self._code, self._index, keys)
        if token is not None:
            self._index = token.end
        return token

    def expect(self, keys: Keys) -> Token:
        """Consume and return a token for *keys*.

        Raises:
            UnexpectedTokenError: If none of *keys* matches at the cursor.
            UnknownDefinitionError: If a requested key is not registered.
        """
        token = self.optional(keys)
        if token is not None:
            return token

        expected = " or ".join(_as_keys(keys))
        if self._index >= len(self._code):
            raise UnexpectedTokenError.for_("Unexpected end of input expecting %s", expected).with_position(
                len(self._code), len(self._code)
            )
        end = max(self.next_space(), self._index + 1)
        found = self.substring(self._index, end).strip() or repr(self._code[self._index])
        raise UnexpectedTokenError.for_("Unexpected %s expecting %s", found, expected).with_position(self._index, end)

    def read(self) -> Token | None:
        """Return whatever any definition reads at the cursor, without advancing."""
        return self.match(self._code, self._index)

    def substring(self, start: int, end: int) -> str:
        """Return ``code[start:end]`` with both offsets clamped to the source."""
        start = max(0, min(start, len(self._code)))
        end = max(start, min(end, len(self._code)))
        return self._code[start:end]

    def next_space(self) -> int:
        """Return the offset of the next whitespace character at or after the cursor."""
        match = _WHITESPACE.search(self._code, self._index)
        return len(self._code) if match is None else match.start()


# ################
# Implementation
# ################

_WHITESPACE = re.compile(r"\s")


def _as_keys(keys: Keys) -> list[str]:
    """Normalize a single key or a sequence of keys into a list."""
    if isinstance(keys, str):
        return [keys]
    return list(keys)
