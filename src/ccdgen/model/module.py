# Copyright 2026 ccdgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Description of a smart contract module: its interface and its schema."""

from __future__ import annotations

import re

from pydantic import BaseModel, field_validator
from pydantic import Field as _Field

from ccdgen.model.schema import SchemaType

# ###############
# Public Interface
# ###############


class ModuleReference(BaseModel):
    """Reference of an on-chain smart contract module (32 bytes, hex encoded)."""

    hex: str

    @field_validator("hex")
    @classmethod
    def check_hex(cls, value: str) -> str:
        if not _MODULE_REF_PATTERN.fullmatch(value):
            raise ValueError(f"Module reference must be 64 hex characters, got {value!r}")
        return value.lower()

    def __str__(self) -> str:
        return self.hex


class ContractInterface(BaseModel):
    """A contract found in a module together with its entrypoints in declaration order."""

    contract_name: str
    entrypoint_names: list[str] = _Field(default_factory=list)

    @field_validator("entrypoint_names")
    @classmethod
    def deduplicate(cls, value: list[str]) -> list[str]:
        # Entrypoint names form an ordered set.
        return list(dict.fromkeys(value))


class FunctionSchema(BaseModel):
    """Schema types of a contract function. Each part is optional."""

    parameter: SchemaType | None = None
    return_value: SchemaType | None = None
    error: SchemaType | None = None


class ContractSchema(BaseModel):
    """Schema of a single contract in a module."""

    init: FunctionSchema | None = None
    receive: dict[str, FunctionSchema] = _Field(default_factory=dict)
    event: SchemaType | None = None


class ModuleSchema(BaseModel):
    """Parsed schema of a module, mapping contract names to contract schemas."""

    contracts: dict[str, ContractSchema] = _Field(default_factory=dict)

    def contract(self, contract_name: str) -> ContractSchema | None:
        return self.contracts.get(contract_name)


class Progress(BaseModel):
    """Progress notification emitted after each generated entrypoint.

    Attributes:
        description: The entrypoint just generated, as `<contract>.<entrypoint>`.
        total_items: Number of entrypoints across all contracts in the module.
        done_items: Number of entrypoints generated so far.
        spent_time: Seconds spent generating the most recent entrypoint.
    """

    description: str
    total_items: int
    done_items: int
    spent_time: float


# ################
# Implementation
# ################

_MODULE_REF_PATTERN = re.compile(r"[0-9a-fA-F]{64}")
