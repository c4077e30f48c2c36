# Copyright 2026 ccdgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for identifier hygiene helpers."""

from __future__ import annotations

import pytest

from ccdgen.compiler.naming import (
    GenerationContext,
    accessor,
    define_property,
    is_identifier,
    quote,
    to_pascal_case,
)

# ###############
# Generation context
# ###############


class TestGenerationContext:
    def test_ids_are_numbered_across_categories(self) -> None:
        ctx = GenerationContext()
        assert ctx.next_id("list") == "list0"
        assert ctx.next_id("item") == "item1"
        assert ctx.next_id("list") == "list2"
        assert ctx.allocated == 3

    def test_start_offset(self) -> None:
        ctx = GenerationContext(start=10)
        assert ctx.next_id("set") == "set10"

    def test_indent_defaults_to_four(self) -> None:
        assert GenerationContext().indent == 4
        assert GenerationContext(indent=2).indent == 2


# ###############
# Identifiers and literals
# ###############


class TestIdentifiers:
    @pytest.mark.parametrize("name", ["owner", "_private", "$ref", "a1", "tokenId"])
    def test_valid_identifiers(self, name: str) -> None:
        assert is_identifier(name)

    @pytest.mark.parametrize("name", ["", "1abc", "weird-name!", "with space", "a.b"])
    def test_invalid_identifiers(self, name: str) -> None:
        assert not is_identifier(name)

    def test_accessor_uses_dot_for_identifiers(self) -> None:
        assert accessor("value", "owner") == "value.owner"

    def test_accessor_uses_brackets_otherwise(self) -> None:
        assert accessor("value", "weird-name!") == "value['weird-name!']"

    def test_define_property(self) -> None:
        assert define_property("owner", "x") == "owner: x"
        assert define_property("token-id", "x") == "'token-id': x"


class TestQuote:
    def test_plain_text(self) -> None:
        assert quote("hello") == "'hello'"

    def test_escapes_quotes_and_backslashes(self) -> None:
        assert quote("it's") == "'it\\'s'"
        assert quote("a\\b") == "'a\\\\b'"

    def test_escapes_line_terminators(self) -> None:
        assert quote("a\nb\rc\td") == "'a\\nb\\rc\\td'"
        assert quote("\u2028\u2029") == "'\\u2028\\u2029'"


class TestPascalCase:
    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("balanceOf", "BalanceOf"),
            ("token_metadata", "TokenMetadata"),
            ("supports-interface", "SupportsInterface"),
            ("cis2_wCCD", "Cis2WCCD"),
            ("wCCD", "WCCD"),
        ],
    )
    def test_conversion(self, name: str, expected: str) -> None:
        assert to_pascal_case(name) == expected
