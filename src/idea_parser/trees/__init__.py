# Copyright 2026 Idea Parser Contributors
# SPDX-License-Identifier: Apache-2.0

"""Recursive-descent grammars, one per declaration kind."""

from idea_parser.trees.abstract import AbstractTree
from idea_parser.trees.enum_tree import EnumTree
from idea_parser.trees.model_tree import ModelTree
from idea_parser.trees.plugin_tree import PluginTree
from idea_parser.trees.prop_tree import PropTree
from idea_parser.trees.schema_tree import SchemaTree
from idea_parser.trees.type_tree import TypeTree
from idea_parser.trees.use_tree import UseTree

__all__ = [
    "AbstractTree",
    "EnumTree",
    "ModelTree",
    "PluginTree",
    "PropTree",
    "SchemaTree",
    "TypeTree",
    "UseTree",
]
