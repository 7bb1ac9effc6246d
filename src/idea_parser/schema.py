# Copyright 2026 Idea Parser Contributors
# SPDX-License-Identifier: Apache-2.0

"""Programmatic entry points: parse .idea source text into configuration."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from idea_parser.compiler.compiler import Compiler
from idea_parser.model.config import SchemaConfig
from idea_parser.trees.schema_tree import SchemaTree

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


def parse(code: str, *, env: Mapping[str, str] | None = None) -> dict[str, Any]:
    """Parse and compile *code*, keeping references as ``"${Name}"`` placeholders.

    This is the merge-ready form: ``prop`` and ``use`` sections are kept so
    that a loader can combine several documents before finalizing.

    Args:
        code: The full text of a .idea document.
        env: Mapping used for ``env("NAME")`` literals. Defaults to the
            process environment.

    Returns:
        The compiled schema configuration as plain data.

    Raises:
        IdeaException: On syntax errors or duplicate declarations.
    """
    logger.debug("Parsing %d characters of schema source", len(code))
    return Compiler.schema(SchemaTree.parse(code, env=env))


def final(code: str, *, env: Mapping[str, str] | None = None) -> dict[str, Any]:
    """Parse and compile *code* with every attribute reference resolved.

    The ``prop`` and ``use`` sections are folded away.

    Raises:
        IdeaException: On syntax errors, duplicate declarations, or unknown
            references.
    """
    logger.debug("Finalizing %d characters of schema source", len(code))
    return Compiler.final(SchemaTree.parse(code, env=env))


def load(code: str, *, env: Mapping[str, str] | None = None, resolve: bool = True) -> SchemaConfig:
    """Parse *code* into the typed :class:`SchemaConfig` model.

    Args:
        code: The full text of a .idea document.
        env: Mapping used for ``env("NAME")`` literals.
        resolve: Use :func:`final` when True, otherwise :func:`parse`.
    """
    config = final(code, env=env) if resolve else parse(code, env=env)
    return SchemaConfig.model_validate(config)
