# Copyright 2026 ccdgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Declarations of generated source units and their TypeScript rendering."""

from ccdgen.emit.declarations import (
    ClassDeclaration,
    ConstDeclaration,
    Declaration,
    FunctionDeclaration,
    ImportDeclaration,
    Parameter,
    PropertyDeclaration,
    Scope,
    SourceUnit,
    TypeAliasDeclaration,
)
from ccdgen.emit.typescript import TS_NOCHECK_DIRECTIVE, render_docs, render_source_unit

__all__ = [
    "ClassDeclaration",
    "ConstDeclaration",
    "Declaration",
    "FunctionDeclaration",
    "ImportDeclaration",
    "Parameter",
    "PropertyDeclaration",
    "Scope",
    "SourceUnit",
    "TypeAliasDeclaration",
    "TS_NOCHECK_DIRECTIVE",
    "render_docs",
    "render_source_unit",
]
