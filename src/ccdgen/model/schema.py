# Copyright 2026 ccdgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Schema type representations for smart contract values."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############


class Scalar(Enum):
    """Schema types without any type parameters."""

    UNIT = "Unit"
    BOOL = "Bool"
    U8 = "U8"
    U16 = "U16"
    U32 = "U32"
    U64 = "U64"
    U128 = "U128"
    I8 = "I8"
    I16 = "I16"
    I32 = "I32"
    I64 = "I64"
    I128 = "I128"
    AMOUNT = "Amount"
    ACCOUNT_ADDRESS = "AccountAddress"
    CONTRACT_ADDRESS = "ContractAddress"
    TIMESTAMP = "Timestamp"
    DURATION = "Duration"
    CONTRACT_NAME = "ContractName"
    RECEIVE_NAME = "ReceiveName"


class SizeLength(Enum):
    """Width of the length prefix used when serializing a collection."""

    U8 = "U8"
    U16 = "U16"
    U32 = "U32"
    U64 = "U64"


class ScalarType(BaseModel):
    """A schema type without type parameters."""

    kind: Literal["scalar"] = "scalar"
    scalar: Scalar
    # Only meaningful for ContractName and ReceiveName.
    size_length: SizeLength = SizeLength.U16


class LebType(BaseModel):
    """An arbitrary precision integer using LEB128 encoding."""

    kind: Literal["leb128"] = "leb128"
    signed: bool = False
    constraint: int = 16


class StringType(BaseModel):
    """A UTF-8 string."""

    kind: Literal["string"] = "string"
    size_length: SizeLength = SizeLength.U32


class ByteListType(BaseModel):
    """A variable length list of bytes, represented as a hex string."""

    kind: Literal["byte_list"] = "byte_list"
    size_length: SizeLength = SizeLength.U32


class ByteArrayType(BaseModel):
    """A fixed length array of bytes, represented as a hex string."""

    kind: Literal["byte_array"] = "byte_array"
    size: int


class PairType(BaseModel):
    """A pair of two values."""

    kind: Literal["pair"] = "pair"
    first: SchemaType
    second: SchemaType


class ListType(BaseModel):
    """A variable length list of items."""

    kind: Literal["list"] = "list"
    item: SchemaType
    size_length: SizeLength = SizeLength.U32


class SetType(BaseModel):
    """A set of unique items."""

    kind: Literal["set"] = "set"
    item: SchemaType
    size_length: SizeLength = SizeLength.U32


class MapType(BaseModel):
    """A map from keys to values."""

    kind: Literal["map"] = "map"
    key: SchemaType
    value: SchemaType
    size_length: SizeLength = SizeLength.U32


class ArrayType(BaseModel):
    """A fixed length array of items."""

    kind: Literal["array"] = "array"
    item: SchemaType
    size: int


class NamedField(BaseModel):
    """A field of a struct or enum variant identified by name."""

    name: str
    type: SchemaType


class NamedFields(BaseModel):
    """Fields identified by name, in declaration order."""

    kind: Literal["named"] = "named"
    fields: list[NamedField] = _Field(default_factory=list)


class UnnamedFields(BaseModel):
    """Fields identified by position."""

    kind: Literal["unnamed"] = "unnamed"
    fields: list[SchemaType] = _Field(default_factory=list)


class NoFields(BaseModel):
    """Absence of fields."""

    kind: Literal["none"] = "none"


Fields = Annotated[NamedFields | UnnamedFields | NoFields, _Field(discriminator="kind")]


class StructType(BaseModel):
    """A struct described by its fields."""

    kind: Literal["struct"] = "struct"
    fields: Fields


class EnumVariant(BaseModel):
    """A single variant of an enum."""

    name: str
    fields: Fields


class EnumType(BaseModel):
    """An enum where variants are tagged by their position."""

    kind: Literal["enum"] = "enum"
    variants: list[EnumVariant] = _Field(default_factory=list)

    def variant_list(self) -> list[EnumVariant]:
        return list(self.variants)


class TaggedEnumType(BaseModel):
    """An enum where each variant carries an explicit discriminant."""

    kind: Literal["tagged_enum"] = "tagged_enum"
    variants: dict[int, EnumVariant] = _Field(default_factory=dict)

    def variant_list(self) -> list[EnumVariant]:
        # The discriminant is only relevant for the binary encoding.
        return list(self.variants.values())


# A schema type, discriminated by `kind` so nested types deserialize without ambiguity.
SchemaType = Annotated[
    ScalarType
    | LebType
    | StringType
    | ByteListType
    | ByteArrayType
    | PairType
    | ListType
    | SetType
    | MapType
    | ArrayType
    | StructType
    | EnumType
    | TaggedEnumType,
    _Field(discriminator="kind"),
]


def scalar(value: Scalar) -> ScalarType:
    """Shorthand for constructing a :class:`ScalarType`."""
    return ScalarType(scalar=value)


# Resolve forward references for models that use SchemaType.
PairType.model_rebuild()
ListType.model_rebuild()
SetType.model_rebuild()
MapType.model_rebuild()
ArrayType.model_rebuild()
NamedField.model_rebuild()
NamedFields.model_rebuild()
UnnamedFields.model_rebuild()
StructType.model_rebuild()
EnumVariant.model_rebuild()
EnumType.model_rebuild()
TaggedEnumType.model_rebuild()
