# Copyright 2026 ccdgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Declarations making up a generated TypeScript source unit."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############


class Scope(Enum):
    """Visibility of a class member."""

    PUBLIC = "public"
    PRIVATE = "private"


class ImportDeclaration(BaseModel):
    """A namespace import, ``import * as <namespace> from '<module_specifier>'``."""

    namespace: str
    module_specifier: str


class Parameter(BaseModel):
    """A function or constructor parameter."""

    name: str
    type: str
    optional: bool = False
    default: str | None = None


class ConstDeclaration(BaseModel):
    """A top-level ``const`` binding."""

    kind: Literal["const"] = "const"
    name: str
    initializer: str
    type: str | None = None
    docs: str | None = None
    exported: bool = True


class TypeAliasDeclaration(BaseModel):
    """A top-level ``type`` alias."""

    kind: Literal["type_alias"] = "type_alias"
    name: str
    type: str
    docs: str | None = None
    exported: bool = True


class PropertyDeclaration(BaseModel):
    """A class property."""

    name: str
    type: str | None = None
    initializer: str | None = None
    docs: str | None = None
    scope: Scope = Scope.PUBLIC
    readonly: bool = False


class ClassDeclaration(BaseModel):
    """A class with properties and a single constructor."""

    kind: Literal["class"] = "class"
    name: str
    docs: str | None = None
    properties: list[PropertyDeclaration] = _Field(default_factory=list)
    constructor_docs: str | None = None
    constructor_parameters: list[Parameter] = _Field(default_factory=list)
    constructor_body: list[str] = _Field(default_factory=list)
    exported: bool = False


class FunctionDeclaration(BaseModel):
    """A top-level function. Body statements may span several lines."""

    kind: Literal["function"] = "function"
    name: str
    parameters: list[Parameter] = _Field(default_factory=list)
    return_type: str | None = None
    body: list[str] = _Field(default_factory=list)
    docs: str | None = None
    exported: bool = True
    is_async: bool = False


Declaration = Annotated[
    ConstDeclaration | TypeAliasDeclaration | ClassDeclaration | FunctionDeclaration,
    _Field(discriminator="kind"),
]


class SourceUnit(BaseModel):
    """One generated source file, in declaration order."""

    name: str
    imports: list[ImportDeclaration] = _Field(default_factory=list)
    declarations: list[Declaration] = _Field(default_factory=list)

    @property
    def file_name(self) -> str:
        return f"{self.name}.ts"

    def names(self) -> list[str]:
        """Return the names of all declarations, in order."""
        return [decl.name for decl in self.declarations]

    def get(self, name: str) -> Declaration | None:
        """Return the declaration called *name*, or None if absent."""
        for decl in self.declarations:
            if decl.name == name:
                return decl
        return None
