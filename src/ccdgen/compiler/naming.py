# Copyright 2026 ccdgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Identifier hygiene for generated TypeScript code.

Temporaries are named ``<category><n>`` where ``n`` comes from a single
counter per :class:`GenerationContext`. Names are therefore unique within a
whole generation run, even where lexical scoping would allow reuse.
Property names from a schema are author-chosen strings, so every property
access and definition goes through :func:`accessor` or
:func:`define_property`.
"""

from __future__ import annotations

import re

# ###############
# Public Interface
# ###############


class GenerationContext:
    """Per-run state shared by every compilation in one generation run.

    Attributes:
        indent: Number of spaces per nesting level in generated blocks.
    """

    def __init__(self, start: int = 0, indent: int = 4) -> None:
        self._counter = start
        self.indent = indent

    def next_id(self, category: str) -> str:
        """Allocate a fresh temporary name, e.g. ``list3``."""
        name = f"{category}{self._counter}"
        self._counter += 1
        return name

    @property
    def allocated(self) -> int:
        """Number of temporaries handed out so far."""
        return self._counter


def is_identifier(name: str) -> bool:
    """Return True if *name* can be used with dotted property access."""
    return _IDENTIFIER_PATTERN.fullmatch(name) is not None


def quote(text: str) -> str:
    """Render *text* as a single-quoted TypeScript string literal."""
    escaped = "".join(_ESCAPES.get(ch, ch) for ch in text)
    return f"'{escaped}'"


def accessor(ref: str, key: str) -> str:
    """Build an expression reading property *key* of the value *ref*.

    Examples:
        >>> accessor("value", "owner")
        'value.owner'
        >>> accessor("value", "weird-name!")
        "value['weird-name!']"
    """
    if is_identifier(key):
        return f"{ref}.{key}"
    return f"{ref}[{quote(key)}]"


def define_property(key: str, value: str) -> str:
    """Build a property definition for an object literal or object type."""
    if is_identifier(key):
        return f"{key}: {value}"
    return f"{quote(key)}: {value}"


def to_pascal_case(name: str) -> str:
    """Convert a snake_case or kebab-case name into PascalCase.

    Only the first character of each segment is changed, so ``wCCD`` stays
    ``WCCD`` and ``cis2_wCCD`` becomes ``Cis2WCCD``.
    """
    return "".join(_capitalize(segment) for segment in re.split(r"[-_]", name))


# ################
# Implementation
# ################

_IDENTIFIER_PATTERN = re.compile(r"[A-Za-z_$][A-Za-z0-9_$]*")

_ESCAPES = {
    "\\": "\\\\",
    "'": "\\'",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


def _capitalize(segment: str) -> str:
    return segment[:1].upper() + segment[1:]
