# Copyright 2026 ccdgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for source unit declarations and their TypeScript rendering."""

from __future__ import annotations

import pytest

from ccdgen.emit import (
    TS_NOCHECK_DIRECTIVE,
    ClassDeclaration,
    ConstDeclaration,
    FunctionDeclaration,
    ImportDeclaration,
    Parameter,
    PropertyDeclaration,
    Scope,
    SourceUnit,
    TypeAliasDeclaration,
    render_docs,
    render_source_unit,
)

# ###############
# Helpers
# ###############


def _unit(*declarations) -> SourceUnit:
    return SourceUnit(name="demo", declarations=list(declarations))


# ###############
# Source units
# ###############


class TestSourceUnit:
    def test_file_name(self) -> None:
        assert SourceUnit(name="wCCD_cis2_wCCD").file_name == "wCCD_cis2_wCCD.ts"

    def test_names_and_lookup(self) -> None:
        alias = TypeAliasDeclaration(name="Type", type="Client")
        unit = _unit(ConstDeclaration(name="contractName", initializer="'c'"), alias)
        assert unit.names() == ["contractName", "Type"]
        assert unit.get("Type") == alias
        assert unit.get("missing") is None

    def test_declarations_deserialize_by_kind(self) -> None:
        unit = SourceUnit.model_validate(
            {
                "name": "demo",
                "declarations": [
                    {"kind": "type_alias", "name": "Type", "type": "number"},
                    {"kind": "function", "name": "run", "body": ["return;"]},
                ],
            }
        )
        assert isinstance(unit.declarations[0], TypeAliasDeclaration)
        assert isinstance(unit.declarations[1], FunctionDeclaration)


# ###############
# Rendering
# ###############


class TestRendering:
    def test_empty_unit(self) -> None:
        assert render_source_unit(SourceUnit(name="empty")) == "\n"

    def test_imports_and_declarations(self) -> None:
        unit = SourceUnit(
            name="demo",
            imports=[ImportDeclaration(namespace="SDK", module_specifier="@concordium/web-sdk")],
            declarations=[
                ConstDeclaration(name="answer", type="number", initializer="42", docs="The answer."),
                FunctionDeclaration(
                    name="double",
                    parameters=[Parameter(name="x", type="number")],
                    return_type="number",
                    body=["return x * 2;"],
                ),
            ],
        )
        assert render_source_unit(unit) == (
            "import * as SDK from '@concordium/web-sdk';\n"
            "\n"
            "/** The answer. */\n"
            "export const answer: number = 42;\n"
            "\n"
            "export function double(x: number): number {\n"
            "    return x * 2;\n"
            "}\n"
        )

    def test_type_alias(self) -> None:
        text = render_source_unit(_unit(TypeAliasDeclaration(name="Event", type="{ A: [] }")))
        assert text == "export type Event = { A: [] };\n"

    def test_class(self) -> None:
        cls = ClassDeclaration(
            name="Client",
            properties=[
                PropertyDeclaration(name="__nominal", initializer="true", scope=Scope.PRIVATE),
                PropertyDeclaration(name="inner", type="SDK.Contract", readonly=True, docs="Inner."),
            ],
            constructor_parameters=[Parameter(name="inner", type="SDK.Contract")],
            constructor_body=["this.inner = inner;"],
        )
        assert render_source_unit(_unit(cls)) == (
            "class Client {\n"
            "    private __nominal = true;\n"
            "\n"
            "    /** Inner. */\n"
            "    public readonly inner: SDK.Contract;\n"
            "\n"
            "    constructor(inner: SDK.Contract) {\n"
            "        this.inner = inner;\n"
            "    }\n"
            "}\n"
        )

    def test_async_function_with_optional_and_default_parameters(self) -> None:
        fn = FunctionDeclaration(
            name="dryRun",
            is_async=True,
            parameters=[
                Parameter(name="metadata", type="SDK.ContractInvokeMetadata", default="{}"),
                Parameter(name="blockHash", type="SDK.BlockHash.Type", optional=True),
            ],
            return_type="Promise<void>",
            body=["if (x) {\n    return;\n}"],
        )
        assert render_source_unit(_unit(fn)) == (
            "export async function dryRun(metadata: SDK.ContractInvokeMetadata = {}, "
            "blockHash?: SDK.BlockHash.Type): Promise<void> {\n"
            "    if (x) {\n"
            "        return;\n"
            "    }\n"
            "}\n"
        )

    def test_indent_width(self) -> None:
        fn = FunctionDeclaration(name="f", body=["return 1;"])
        assert render_source_unit(_unit(fn), indent=2) == "export function f() {\n  return 1;\n}\n"


class TestDocs:
    def test_single_line(self) -> None:
        assert render_docs("Hello.") == "/** Hello. */"

    def test_multi_line_with_blank_line(self) -> None:
        assert render_docs("a\n\nb", "  ") == "  /**\n   * a\n   *\n   * b\n   */"

    def test_comment_terminator_is_escaped(self) -> None:
        assert render_docs("x */ y") == "/** x *\\/ y */"


class TestFileDirectives:
    def test_ts_nocheck_heads_the_file(self) -> None:
        unit = SourceUnit(
            name="demo",
            imports=[ImportDeclaration(namespace="SDK", module_specifier="@concordium/web-sdk")],
            declarations=[TypeAliasDeclaration(name="Event", type="{ A: [] }")],
        )
        assert render_source_unit(unit, ts_nocheck=True) == (
            "// @ts-nocheck\n"
            "\n"
            "import * as SDK from '@concordium/web-sdk';\n"
            "\n"
            "export type Event = { A: [] };\n"
        )

    def test_no_directive_by_default(self) -> None:
        text = render_source_unit(_unit(TypeAliasDeclaration(name="Event", type="number")))
        assert TS_NOCHECK_DIRECTIVE not in text

    def test_unknown_declaration_raises(self) -> None:
        unit = SourceUnit.model_construct(name="demo", imports=[], declarations=[object()])
        with pytest.raises(TypeError, match="Unsupported declaration"):
            render_source_unit(unit)
