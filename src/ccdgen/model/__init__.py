# Copyright 2026 ccdgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model for contract modules and their schemas."""

from ccdgen.model.module import (
    ContractInterface,
    ContractSchema,
    FunctionSchema,
    ModuleReference,
    ModuleSchema,
    Progress,
)
from ccdgen.model.schema import (
    ArrayType,
    ByteArrayType,
    ByteListType,
    EnumType,
    EnumVariant,
    Fields,
    LebType,
    ListType,
    MapType,
    NamedField,
    NamedFields,
    NoFields,
    PairType,
    Scalar,
    ScalarType,
    SchemaType,
    SetType,
    SizeLength,
    StringType,
    StructType,
    TaggedEnumType,
    UnnamedFields,
    scalar,
)

__all__ = [
    # Schema types
    "Scalar",
    "SizeLength",
    "ScalarType",
    "LebType",
    "StringType",
    "ByteListType",
    "ByteArrayType",
    "PairType",
    "ListType",
    "SetType",
    "MapType",
    "ArrayType",
    "NamedField",
    "NamedFields",
    "UnnamedFields",
    "NoFields",
    "Fields",
    "StructType",
    "EnumVariant",
    "EnumType",
    "TaggedEnumType",
    "SchemaType",
    "scalar",
    # Module description
    "ModuleReference",
    "ContractInterface",
    "FunctionSchema",
    "ContractSchema",
    "ModuleSchema",
    "Progress",
]
