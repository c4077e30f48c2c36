# Copyright 2026 ccdgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Client generation workflow for smart contract modules.

Reading a module is delegated to a :class:`ModuleToolkit`: it lists the
contracts and entrypoints of the module, computes the module reference,
extracts and parses the embedded schema, and serializes schema types for
embedding in the generated code. The three reads of the module source are
independent and run concurrently; generation starts once all of them
completed. Any failure aborts the run, so callers never see partial output.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Protocol

from ccdgen.compiler.assembler import GeneratedClients, ProgressCallback, assemble_clients
from ccdgen.compiler.naming import GenerationContext
from ccdgen.model.module import ContractInterface, ModuleReference, ModuleSchema
from ccdgen.model.schema import SchemaType
from ccdgen.settings.config import GeneratorConfig

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############

MODULE_FILE_SUFFIX = ".wasm.v1"


class GenerationError(Exception):
    """Raised when client generation cannot complete.

    Covers unreadable module files and failures to parse the module
    interface, compute the module reference or read the embedded schema.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)


class ModuleToolkit(Protocol):
    """Operations on smart contract modules that the generator relies on."""

    async def parse_module_interface(self, module_source: bytes) -> list[ContractInterface]:
        """List the contracts of the module with their entrypoint names, in order."""
        ...

    async def calculate_module_reference(self, module_source: bytes) -> ModuleReference:
        """Compute the reference identifying the module on chain."""
        ...

    async def get_embedded_module_schema(self, module_source: bytes) -> bytes | None:
        """Return the raw schema embedded in the module, or None if there is none."""
        ...

    def parse_raw_module_schema(self, raw_schema: bytes) -> ModuleSchema:
        """Parse raw schema bytes."""
        ...

    def serialize_schema_type(self, schema_type: SchemaType) -> bytes:
        """Serialize a single schema type into its binary schema form."""
        ...


async def generate_contract_clients(
    module_source: bytes,
    out_name: str,
    toolkit: ModuleToolkit,
    *,
    config: GeneratorConfig | None = None,
    on_progress: ProgressCallback | None = None,
) -> GeneratedClients:
    """Generate client source units for a smart contract module.

    Args:
        module_source: Bytes of the versioned smart contract module.
        out_name: Name of the module unit, also the prefix of contract units.
        toolkit: Collaborator reading the module.
        config: Generator options. Defaults apply when omitted.
        on_progress: Called after each entrypoint has been generated.

    Returns:
        The generated module and contract units.

    Raises:
        GenerationError: If the module interface, reference or schema cannot
            be obtained.
    """
    config = config or GeneratorConfig()
    logger.debug("Reading module '%s' (%d bytes)", out_name, len(module_source))
    try:
        contracts, module_ref, raw_schema = await asyncio.gather(
            toolkit.parse_module_interface(module_source),
            toolkit.calculate_module_reference(module_source),
            toolkit.get_embedded_module_schema(module_source),
        )
    except Exception as exc:
        raise GenerationError(f"Failed to read smart contract module '{out_name}': {exc}") from exc

    schema: ModuleSchema | None = None
    if raw_schema is None:
        logger.debug("Module '%s' embeds no schema, generating untyped clients", out_name)
    else:
        try:
            schema = toolkit.parse_raw_module_schema(raw_schema)
        except Exception as exc:
            raise GenerationError(f"Failed to parse the schema embedded in module '{out_name}': {exc}") from exc

    return assemble_clients(
        out_name,
        module_ref,
        contracts,
        schema,
        toolkit.serialize_schema_type,
        config=config,
        ctx=GenerationContext(indent=config.indent),
        on_progress=on_progress,
    )


async def generate_contract_clients_from_file(
    module_path: Path,
    toolkit: ModuleToolkit,
    *,
    out_name: str | None = None,
    config: GeneratorConfig | None = None,
    on_progress: ProgressCallback | None = None,
) -> GeneratedClients:
    """Generate client source units for the module stored at *module_path*.

    The output name defaults to the file name without its ``.wasm.v1`` suffix.

    Raises:
        GenerationError: If the file cannot be read or generation fails.
    """
    try:
        module_source = module_path.read_bytes()
    except FileNotFoundError:
        raise GenerationError(f"No such module '{module_path}'") from None
    except OSError as exc:
        raise GenerationError(f"Cannot read module file '{module_path}': {exc}") from exc

    return await generate_contract_clients(
        module_source,
        out_name or module_output_name(module_path),
        toolkit,
        config=config,
        on_progress=on_progress,
    )


def module_output_name(module_path: Path) -> str:
    """Derive the output name for a module file, e.g. ``wCCD.wasm.v1`` -> ``wCCD``."""
    name = module_path.name
    if name.endswith(MODULE_FILE_SUFFIX):
        return name[: -len(MODULE_FILE_SUFFIX)]
    return module_path.stem
