# Copyright 2026 Idea Parser Contributors
# SPDX-License-Identifier: Apache-2.0

"""Compilation of .idea syntax trees into schema configuration data."""

from idea_parser.compiler.compiler import Compiler, References

__all__ = [
    "Compiler",
    "References",
]
