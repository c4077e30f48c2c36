# Copyright 2026 ccdgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Rendering of source units as TypeScript text."""

from __future__ import annotations

from ccdgen.emit.declarations import (
    ClassDeclaration,
    ConstDeclaration,
    Declaration,
    FunctionDeclaration,
    ImportDeclaration,
    Parameter,
    PropertyDeclaration,
    SourceUnit,
    TypeAliasDeclaration,
)

# ###############
# Public Interface
# ###############

TS_NOCHECK_DIRECTIVE = "// @ts-nocheck"


def render_source_unit(unit: SourceUnit, indent: int = 4, ts_nocheck: bool = False) -> str:
    """Render *unit* as TypeScript source text.

    Args:
        unit: The source unit to render.
        indent: Number of spaces per nesting level.
        ts_nocheck: Start the file with a `// @ts-nocheck` directive.

    Returns:
        The source text, ending with a single newline.
    """
    renderer = _Renderer(" " * indent)
    blocks = [renderer.import_(imp) for imp in unit.imports]
    if blocks:
        blocks = ["\n".join(blocks)]
    blocks.extend(renderer.declaration(decl) for decl in unit.declarations)
    if ts_nocheck:
        blocks.insert(0, TS_NOCHECK_DIRECTIVE)
    return "\n\n".join(blocks) + "\n"


def render_docs(docs: str, prefix: str = "") -> str:
    """Render *docs* as a JSDoc comment, one ``*`` line per documentation line."""
    lines = docs.replace("*/", "*\\/").split("\n")
    if len(lines) == 1:
        return f"{prefix}/** {lines[0]} */"
    body = "\n".join(f"{prefix} *" + (f" {line}" if line else "") for line in lines)
    return f"{prefix}/**\n{body}\n{prefix} */"


# ################
# Implementation
# ################


class _Renderer:
    def __init__(self, unit: str) -> None:
        self._unit = unit

    def import_(self, imp: ImportDeclaration) -> str:
        return f"import * as {imp.namespace} from '{imp.module_specifier}';"

    def declaration(self, decl: Declaration) -> str:
        if isinstance(decl, ConstDeclaration):
            text = self._const(decl)
        elif isinstance(decl, TypeAliasDeclaration):
            text = self._type_alias(decl)
        elif isinstance(decl, ClassDeclaration):
            text = self._class(decl)
        elif isinstance(decl, FunctionDeclaration):
            text = self._function(decl)
        else:
            raise TypeError(f"Unsupported declaration: {decl!r}")
        if decl.docs:
            return render_docs(decl.docs) + "\n" + text
        return text

    def _export(self, exported: bool) -> str:
        return "export " if exported else ""

    def _const(self, decl: ConstDeclaration) -> str:
        type_part = f": {decl.type}" if decl.type else ""
        return f"{self._export(decl.exported)}const {decl.name}{type_part} = {decl.initializer};"

    def _type_alias(self, decl: TypeAliasDeclaration) -> str:
        return f"{self._export(decl.exported)}type {decl.name} = {decl.type};"

    def _parameter(self, param: Parameter) -> str:
        if param.default is not None:
            return f"{param.name}: {param.type} = {param.default}"
        question = "?" if param.optional else ""
        return f"{param.name}{question}: {param.type}"

    def _block(self, statements: list[str], depth: int = 1) -> str:
        prefix = self._unit * depth
        return "\n".join(prefix + line if line else line for stmt in statements for line in stmt.split("\n"))

    def _property(self, prop: PropertyDeclaration) -> str:
        parts = [prop.scope.value]
        if prop.readonly:
            parts.append("readonly")
        text = " ".join(parts) + f" {prop.name}"
        if prop.type:
            text += f": {prop.type}"
        if prop.initializer is not None:
            text += f" = {prop.initializer}"
        text = self._unit + text + ";"
        if prop.docs:
            return render_docs(prop.docs, self._unit) + "\n" + text
        return text

    def _class(self, decl: ClassDeclaration) -> str:
        members = [self._property(prop) for prop in decl.properties]
        params = ", ".join(self._parameter(p) for p in decl.constructor_parameters)
        constructor = f"{self._unit}constructor({params}) {{\n{self._block(decl.constructor_body, 2)}\n{self._unit}}}"
        if decl.constructor_docs:
            constructor = render_docs(decl.constructor_docs, self._unit) + "\n" + constructor
        members.append(constructor)
        body = "\n\n".join(members)
        return f"{self._export(decl.exported)}class {decl.name} {{\n{body}\n}}"

    def _function(self, decl: FunctionDeclaration) -> str:
        params = ", ".join(self._parameter(p) for p in decl.parameters)
        asynchronous = "async " if decl.is_async else ""
        return_part = f": {decl.return_type}" if decl.return_type else ""
        head = f"{self._export(decl.exported)}{asynchronous}function {decl.name}({params}){return_part}"
        return f"{head} {{\n{self._block(decl.body)}\n}}"
