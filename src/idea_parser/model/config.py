# Copyright 2026 Idea Parser Contributors
# SPDX-License-Identifier: Apache-2.0

"""Typed view of the compiled schema configuration."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############


class ColumnConfig(BaseModel):
    """A compiled column of a type or model."""

    name: str
    type: str
    required: bool = True
    multiple: bool = False
    attributes: dict[str, Any] = _Field(default_factory=dict)


class TypeConfig(BaseModel):
    """A compiled ``type`` or ``model`` declaration."""

    name: str
    mutable: bool = True
    attributes: dict[str, Any] = _Field(default_factory=dict)
    columns: list[ColumnConfig] = _Field(default_factory=list)

    def column(self, name: str) -> ColumnConfig | None:
        """Return the column called *name*, or None."""
        for column in self.columns:
            if column.name == name:
                return column
        return None


class SchemaConfig(BaseModel):
    """The whole compiled schema. Sections absent from the source stay None."""

    enum: dict[str, dict[str, Any]] | None = None
    type: dict[str, TypeConfig] | None = None
    model: dict[str, TypeConfig] | None = None
    prop: dict[str, dict[str, Any]] | None = None
    plugin: dict[str, dict[str, Any]] | None = None
    use: list[str] | None = None
