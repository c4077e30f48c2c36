# Copyright 2026 ccdgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Type-directed compilation of schema types into TypeScript code.

For every schema type the compiler derives the native TypeScript type used by
application code, the JSON type produced and consumed by the SDK's schema
serializer, and two code generators converting between them. A code
generator takes a reference to an input value and returns the statements
computing the converted value together with a reference to the result.

Compilation is recursive and total over the schema type union. The only state
involved is the temporary-name counter of the :class:`GenerationContext`.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from ccdgen.compiler.naming import GenerationContext, accessor, define_property, quote
from ccdgen.model.schema import (
    ArrayType,
    ByteArrayType,
    ByteListType,
    EnumType,
    Fields,
    LebType,
    ListType,
    MapType,
    NamedFields,
    NoFields,
    PairType,
    Scalar,
    ScalarType,
    SchemaType,
    SetType,
    StringType,
    StructType,
    TaggedEnumType,
    UnnamedFields,
)

# ###############
# Public Interface
# ###############

# Namespace the SDK is imported under in every generated source unit.
SDK_NAMESPACE = "SDK"


@dataclass(frozen=True)
class Code:
    """Generated statements and a reference to the value they compute.

    Attributes:
        statements: TypeScript statements, in order. A statement may span
            several lines.
        ref: Expression naming the converted value once the statements ran.
    """

    statements: tuple[str, ...]
    ref: str

    def is_noop(self, input_ref: str) -> bool:
        """Return True if the conversion leaves the input untouched."""
        return not self.statements and self.ref == input_ref


Converter = Callable[[str], Code]


@dataclass(frozen=True)
class TypeMapping:
    """Native type, JSON type and conversions for one schema type.

    Attributes:
        native_type: TypeScript type used by application code.
        json_type: TypeScript type of the schema JSON representation.
        native_to_json: Generates code converting a native value into its
            schema JSON representation.
        json_to_native: Generates code converting schema JSON into a native
            value.
    """

    native_type: str
    json_type: str
    native_to_json: Converter
    json_to_native: Converter


def compile_type(schema_type: SchemaType, ctx: GenerationContext) -> TypeMapping:
    """Compile a schema type into its :class:`TypeMapping`.

    Args:
        schema_type: The schema type to compile.
        ctx: Generation context providing unique temporary names.

    Returns:
        The type mapping. Temporaries are allocated from *ctx* when the
        conversions are generated, not when the mapping is created.

    Raises:
        TypeError: If *schema_type* is not a member of the schema type union.
    """
    if isinstance(schema_type, ScalarType):
        return _compile_scalar(schema_type.scalar, ctx)
    if isinstance(schema_type, LebType):
        return _wide_integer(ctx)
    if isinstance(schema_type, StringType):
        return TypeMapping("string", "string", _identity, _identity)
    if isinstance(schema_type, ByteListType | ByteArrayType):
        return TypeMapping(f"{SDK_NAMESPACE}.HexString", "string", _identity, _identity)
    if isinstance(schema_type, PairType):
        return _compile_pair(schema_type, ctx)
    if isinstance(schema_type, ListType):
        return _compile_list(schema_type, ctx)
    if isinstance(schema_type, ArrayType):
        return _compile_array(schema_type, ctx)
    if isinstance(schema_type, SetType):
        return _compile_set(schema_type, ctx)
    if isinstance(schema_type, MapType):
        return _compile_map(schema_type, ctx)
    if isinstance(schema_type, StructType):
        return compile_fields(schema_type.fields, ctx)
    if isinstance(schema_type, EnumType | TaggedEnumType):
        return _compile_enum(schema_type, ctx)
    raise TypeError(f"Unsupported schema type: {schema_type!r}")


def compile_fields(fields: Fields, ctx: GenerationContext) -> TypeMapping:
    """Compile the fields of a struct or enum variant into a :class:`TypeMapping`."""
    if isinstance(fields, NamedFields):
        return _compile_named_fields(fields, ctx)
    if isinstance(fields, UnnamedFields):
        if len(fields.fields) == 1:
            return _compile_single_unnamed_field(fields.fields[0], ctx)
        return _compile_unnamed_fields(fields, ctx)
    if isinstance(fields, NoFields):
        return TypeMapping(
            '"no-fields"',
            "[]",
            _constant("[]"),
            _constant(quote("no-fields")),
        )
    raise TypeError(f"Unsupported fields: {fields!r}")


def is_unit(schema_type: SchemaType) -> bool:
    """Return True if *schema_type* is the Unit type."""
    return isinstance(schema_type, ScalarType) and schema_type.scalar is Scalar.UNIT


# ################
# Implementation
# ################

_MACHINE_INTEGERS = {
    Scalar.U8,
    Scalar.U16,
    Scalar.U32,
    Scalar.I8,
    Scalar.I16,
    Scalar.I32,
}

_WIDE_INTEGERS = {Scalar.U128, Scalar.I128}

# Domain types exposed by the SDK, keyed to the SDK module defining them.
_DOMAIN_TYPES = {
    Scalar.AMOUNT: "CcdAmount",
    Scalar.ACCOUNT_ADDRESS: "AccountAddress",
    Scalar.CONTRACT_ADDRESS: "ContractAddress",
    Scalar.TIMESTAMP: "Timestamp",
    Scalar.DURATION: "Duration",
    Scalar.CONTRACT_NAME: "ContractName",
    Scalar.RECEIVE_NAME: "ReceiveName",
}


def _identity(ref: str) -> Code:
    return Code((), ref)


def _constant(expression: str) -> Converter:
    def convert(_ref: str) -> Code:
        return Code((), expression)

    return convert


def _indent(lines: Sequence[str], ctx: GenerationContext) -> str:
    """Indent every line of every (possibly multi-line) statement by one level."""
    unit = " " * ctx.indent
    return "\n".join(unit + line if line else line for stmt in lines for line in stmt.split("\n"))


def _compile_scalar(value: Scalar, ctx: GenerationContext) -> TypeMapping:
    if value is Scalar.UNIT:
        return TypeMapping('"Unit"', "[]", _constant("[]"), _constant(quote("Unit")))
    if value is Scalar.BOOL:
        return TypeMapping("boolean", "boolean", _identity, _identity)
    if value in _MACHINE_INTEGERS:
        return TypeMapping("number", "number", _identity, _identity)
    if value in (Scalar.U64, Scalar.I64):

        def to_bigint(ref: str) -> Code:
            result = ctx.next_id("bigint")
            return Code((f"const {result} = BigInt({ref});",), result)

        return TypeMapping("number | bigint", "bigint", to_bigint, _identity)
    if value in _WIDE_INTEGERS:
        return _wide_integer(ctx)
    if value in _DOMAIN_TYPES:
        return _domain_type(_DOMAIN_TYPES[value], ctx)
    raise TypeError(f"Unsupported scalar: {value!r}")


def _wide_integer(ctx: GenerationContext) -> TypeMapping:
    """Integers beyond 64 bits travel as decimal strings."""

    def to_json(ref: str) -> Code:
        result = ctx.next_id("number")
        return Code((f"const {result} = BigInt({ref}).toString();",), result)

    def to_native(ref: str) -> Code:
        result = ctx.next_id("number")
        return Code((f"const {result} = BigInt({ref});",), result)

    return TypeMapping("number | bigint", "string", to_json, to_native)


def _domain_type(name: str, ctx: GenerationContext) -> TypeMapping:
    module = f"{SDK_NAMESPACE}.{name}"
    category = name[:1].lower() + name[1:]

    def to_json(ref: str) -> Code:
        result = ctx.next_id(category)
        return Code((f"const {result} = {module}.toSchemaValue({ref});",), result)

    def to_native(ref: str) -> Code:
        result = ctx.next_id(category)
        return Code((f"const {result} = {module}.fromSchemaValue({ref});",), result)

    return TypeMapping(f"{module}.Type", f"{module}.SchemaValue", to_json, to_native)


def _compile_pair(schema_type: PairType, ctx: GenerationContext) -> TypeMapping:
    first = compile_type(schema_type.first, ctx)
    second = compile_type(schema_type.second, ctx)
    native_type = f"[{first.native_type}, {second.native_type}]"
    json_type = f"[{first.json_type}, {second.json_type}]"

    def rebuild(ref: str, convert_first: Converter, convert_second: Converter, result_type: str) -> Code:
        first_ref, second_ref = f"{ref}[0]", f"{ref}[1]"
        first_code = convert_first(first_ref)
        second_code = convert_second(second_ref)
        if first_code.is_noop(first_ref) and second_code.is_noop(second_ref):
            return Code((), ref)
        result = ctx.next_id("pair")
        return Code(
            (
                *first_code.statements,
                *second_code.statements,
                f"const {result}: {result_type} = [{first_code.ref}, {second_code.ref}];",
            ),
            result,
        )

    return TypeMapping(
        native_type,
        json_type,
        lambda ref: rebuild(ref, first.native_to_json, second.native_to_json, json_type),
        lambda ref: rebuild(ref, first.json_to_native, second.json_to_native, native_type),
    )


def _map_items(
    ref: str,
    convert_item: Converter,
    result_type: str,
    ctx: GenerationContext,
    *,
    cast: bool = False,
) -> Code:
    """Convert each element of an array, eliding the map when elements are untouched."""
    item = ctx.next_id("item")
    item_code = convert_item(item)
    if item_code.is_noop(item):
        return Code((), ref)
    result = ctx.next_id("list")
    body = _indent([*item_code.statements, f"return {item_code.ref};"], ctx)
    expression = f"{ref}.map(({item}) => {{\n{body}\n}})"
    if cast:
        expression = f"{expression} as {result_type}"
    return Code((f"const {result}: {result_type} = {expression};",), result)


def _compile_list(schema_type: ListType, ctx: GenerationContext) -> TypeMapping:
    item = compile_type(schema_type.item, ctx)
    native_type = f"Array<{item.native_type}>"
    json_type = f"Array<{item.json_type}>"
    return TypeMapping(
        native_type,
        json_type,
        lambda ref: _map_items(ref, item.native_to_json, json_type, ctx),
        lambda ref: _map_items(ref, item.json_to_native, native_type, ctx),
    )


def _compile_array(schema_type: ArrayType, ctx: GenerationContext) -> TypeMapping:
    item = compile_type(schema_type.item, ctx)
    native_type = "[" + ", ".join([item.native_type] * schema_type.size) + "]"
    json_type = "[" + ", ".join([item.json_type] * schema_type.size) + "]"
    return TypeMapping(
        native_type,
        json_type,
        lambda ref: _map_items(ref, item.native_to_json, json_type, ctx, cast=True),
        lambda ref: _map_items(ref, item.json_to_native, native_type, ctx, cast=True),
    )


def _compile_set(schema_type: SetType, ctx: GenerationContext) -> TypeMapping:
    item = compile_type(schema_type.item, ctx)
    native_type = f"Set<{item.native_type}>"
    json_type = f"Array<{item.json_type}>"

    def to_json(ref: str) -> Code:
        item_id = ctx.next_id("item")
        item_code = item.native_to_json(item_id)
        result = ctx.next_id("set")
        values = f"[...{ref}.values()]"
        if item_code.is_noop(item_id):
            return Code((f"const {result}: {json_type} = {values};",), result)
        body = _indent([*item_code.statements, f"return {item_code.ref};"], ctx)
        return Code((f"const {result}: {json_type} = {values}.map(({item_id}) => {{\n{body}\n}});",), result)

    def to_native(ref: str) -> Code:
        item_id = ctx.next_id("item")
        item_code = item.json_to_native(item_id)
        result = ctx.next_id("set")
        if item_code.is_noop(item_id):
            return Code((f"const {result} = new {native_type}({ref});",), result)
        body = _indent([*item_code.statements, f"return {item_code.ref};"], ctx)
        return Code(
            (f"const {result} = new {native_type}({ref}.map(({item_id}) => {{\n{body}\n}}));",),
            result,
        )

    return TypeMapping(native_type, json_type, to_json, to_native)


def _compile_map(schema_type: MapType, ctx: GenerationContext) -> TypeMapping:
    key = compile_type(schema_type.key, ctx)
    value = compile_type(schema_type.value, ctx)
    native_type = f"Map<{key.native_type}, {value.native_type}>"
    entry_json_type = f"[{key.json_type}, {value.json_type}]"
    entry_native_type = f"[{key.native_type}, {value.native_type}]"
    json_type = f"Array<{entry_json_type}>"

    def convert_entries(convert_key: Converter, convert_value: Converter, entries: str, entry_type: str) -> str:
        key_id = ctx.next_id("key")
        value_id = ctx.next_id("value")
        key_code = convert_key(key_id)
        value_code = convert_value(value_id)
        if key_code.is_noop(key_id) and value_code.is_noop(value_id):
            return entries
        body = _indent(
            [*key_code.statements, *value_code.statements, f"return [{key_code.ref}, {value_code.ref}];"],
            ctx,
        )
        return f"{entries}.map(([{key_id}, {value_id}]): {entry_type} => {{\n{body}\n}})"

    def to_json(ref: str) -> Code:
        entries = convert_entries(key.native_to_json, value.native_to_json, f"[...{ref}.entries()]", entry_json_type)
        result = ctx.next_id("map")
        return Code((f"const {result}: {json_type} = {entries};",), result)

    def to_native(ref: str) -> Code:
        entries = convert_entries(key.json_to_native, value.json_to_native, ref, entry_native_type)
        result = ctx.next_id("map")
        return Code((f"const {result} = new {native_type}({entries});",), result)

    return TypeMapping(native_type, json_type, to_json, to_native)


def _object_literal(properties: list[str], ctx: GenerationContext) -> str:
    if not properties:
        return "{}"
    return "{\n" + _indent([prop + "," for prop in properties], ctx) + "\n}"


def _compile_named_fields(fields: NamedFields, ctx: GenerationContext) -> TypeMapping:
    names = [field.name for field in fields.fields]
    mappings = [compile_type(field.type, ctx) for field in fields.fields]
    native_type = "{ " + ", ".join(define_property(n, m.native_type) for n, m in zip(names, mappings)) + " }"
    json_type = "{ " + ", ".join(define_property(n, m.json_type) for n, m in zip(names, mappings)) + " }"
    if not names:
        native_type = json_type = "{}"

    def convert(ref: str, converters: list[Converter], result_type: str) -> Code:
        statements: list[str] = []
        properties: list[str] = []
        for name, convert_field in zip(names, converters):
            field_code = convert_field(accessor(ref, name))
            statements.extend(field_code.statements)
            properties.append(define_property(name, field_code.ref))
        result = ctx.next_id("named")
        statements.append(f"const {result}: {result_type} = {_object_literal(properties, ctx)};")
        return Code(tuple(statements), result)

    return TypeMapping(
        native_type,
        json_type,
        lambda ref: convert(ref, [m.native_to_json for m in mappings], json_type),
        lambda ref: convert(ref, [m.json_to_native for m in mappings], native_type),
    )


def _compile_single_unnamed_field(field_type: SchemaType, ctx: GenerationContext) -> TypeMapping:
    """A single unnamed field is unwrapped on the native side but stays a 1-tuple in JSON."""
    mapping = compile_type(field_type, ctx)
    json_type = f"[{mapping.json_type}]"

    def to_json(ref: str) -> Code:
        field_code = mapping.native_to_json(ref)
        result = ctx.next_id("unnamed")
        return Code((*field_code.statements, f"const {result}: {json_type} = [{field_code.ref}];"), result)

    def to_native(ref: str) -> Code:
        return mapping.json_to_native(f"{ref}[0]")

    return TypeMapping(mapping.native_type, json_type, to_json, to_native)


def _compile_unnamed_fields(fields: UnnamedFields, ctx: GenerationContext) -> TypeMapping:
    mappings = [compile_type(field_type, ctx) for field_type in fields.fields]
    native_type = "[" + ", ".join(m.native_type for m in mappings) + "]"
    json_type = "[" + ", ".join(m.json_type for m in mappings) + "]"

    def convert(ref: str, converters: list[Converter], result_type: str) -> Code:
        statements: list[str] = []
        refs: list[str] = []
        for index, convert_field in enumerate(converters):
            field_code = convert_field(f"{ref}[{index}]")
            statements.extend(field_code.statements)
            refs.append(field_code.ref)
        result = ctx.next_id("unnamed")
        statements.append(f"const {result}: {result_type} = [{', '.join(refs)}];")
        return Code(tuple(statements), result)

    return TypeMapping(
        native_type,
        json_type,
        lambda ref: convert(ref, [m.native_to_json for m in mappings], json_type),
        lambda ref: convert(ref, [m.json_to_native for m in mappings], native_type),
    )


def _compile_enum(schema_type: EnumType | TaggedEnumType, ctx: GenerationContext) -> TypeMapping:
    variants = schema_type.variant_list()
    mappings = [compile_fields(variant.fields, ctx) for variant in variants]
    has_content = [not isinstance(variant.fields, NoFields) for variant in variants]

    native_variants: list[str] = []
    json_variants: list[str] = []
    for variant, mapping, content in zip(variants, mappings, has_content):
        if content:
            native_variants.append(f"{{ type: {quote(variant.name)}, content: {mapping.native_type} }}")
        else:
            native_variants.append(f"{{ type: {quote(variant.name)} }}")
        json_variants.append("{ " + define_property(variant.name, mapping.json_type) + " }")
    native_type = " | ".join(native_variants) or "never"
    json_type = " | ".join(json_variants) or "never"

    def to_json(ref: str) -> Code:
        result = ctx.next_id("match")
        cases: list[str] = []
        for variant, mapping in zip(variants, mappings):
            content_code = mapping.native_to_json(f"{ref}.content")
            body = _indent(
                [
                    *content_code.statements,
                    f"{result} = {{ {define_property(variant.name, content_code.ref)} }};",
                    "break;",
                ],
                ctx,
            )
            cases.append(f"case {quote(variant.name)}: {{\n{body}\n}}")
        switch = f"switch ({ref}.type) {{\n" + _indent(cases, ctx) + "\n}" if cases else ""
        statements = [f"let {result}: {json_type};"]
        if switch:
            statements.append(switch)
        return Code(tuple(statements), result)

    def to_native(ref: str) -> Code:
        result = ctx.next_id("match")
        branches: list[str] = []
        for variant, mapping, content in zip(variants, mappings, has_content):
            condition = f"{quote(variant.name)} in {ref}"
            if content:
                variant_id = ctx.next_id("variant")
                content_code = mapping.json_to_native(variant_id)
                body = [
                    f"const {variant_id} = {accessor(ref, variant.name)};",
                    *content_code.statements,
                    f"{result} = {{ type: {quote(variant.name)}, content: {content_code.ref} }};",
                ]
            else:
                body = [f"{result} = {{ type: {quote(variant.name)} }};"]
            keyword = "if" if not branches else "} else if"
            branches.append(f"{keyword} ({condition}) {{\n{_indent(body, ctx)}")
        failure = f"throw new Error('Unexpected enum variant: ' + Object.keys({ref}).join(', '));"
        if branches:
            chain = "\n".join(branches) + "\n} else {\n" + _indent([failure], ctx) + "\n}"
        else:
            chain = failure
        return Code((f"let {result}: {native_type};", chain), result)

    return TypeMapping(native_type, json_type, to_json, to_native)
