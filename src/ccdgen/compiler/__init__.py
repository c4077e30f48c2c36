# Copyright 2026 ccdgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Compiler pipeline: schema type compilation and client assembly."""

from ccdgen.compiler.assembler import GeneratedClients, assemble_clients
from ccdgen.compiler.build import (
    GenerationError,
    ModuleToolkit,
    generate_contract_clients,
    generate_contract_clients_from_file,
    module_output_name,
)
from ccdgen.compiler.naming import (
    GenerationContext,
    accessor,
    define_property,
    is_identifier,
    quote,
    to_pascal_case,
)
from ccdgen.compiler.type_compiler import Code, TypeMapping, compile_fields, compile_type, is_unit

__all__ = [
    "compile_type",
    "compile_fields",
    "is_unit",
    "Code",
    "TypeMapping",
    "GenerationContext",
    "accessor",
    "define_property",
    "is_identifier",
    "quote",
    "to_pascal_case",
    "assemble_clients",
    "GeneratedClients",
    "generate_contract_clients",
    "generate_contract_clients_from_file",
    "module_output_name",
    "GenerationError",
    "ModuleToolkit",
]
