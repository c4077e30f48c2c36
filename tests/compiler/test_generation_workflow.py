# Copyright 2026 ccdgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the client generation workflow."""

from __future__ import annotations

import asyncio
from pathlib import Path

import pytest

from ccdgen.compiler.build import (
    GenerationError,
    generate_contract_clients,
    generate_contract_clients_from_file,
    module_output_name,
)
from ccdgen.model import (
    ContractInterface,
    ContractSchema,
    FunctionSchema,
    ModuleReference,
    ModuleSchema,
    Progress,
    Scalar,
    SchemaType,
    scalar,
)
from ccdgen.settings import GeneratorConfig

_REF = "fe" * 32
_MODULE = b"\x00\x00\x00\x01module"

# ###############
# Helpers
# ###############


class _FakeToolkit:
    """In-memory module toolkit recording the calls it receives."""

    def __init__(
        self,
        contracts: list[ContractInterface],
        *,
        raw_schema: bytes | None = None,
        schema: ModuleSchema | None = None,
        fail: str | None = None,
    ) -> None:
        self.contracts = contracts
        self.raw_schema = raw_schema
        self.schema = schema or ModuleSchema()
        self.fail = fail
        self.calls: list[str] = []
        self.parsed: list[bytes] = []

    async def _step(self, name: str) -> None:
        self.calls.append(f"start:{name}")
        await asyncio.sleep(0)
        if self.fail == name:
            raise ValueError(f"{name} failed")
        self.calls.append(f"end:{name}")

    async def parse_module_interface(self, module_source: bytes) -> list[ContractInterface]:
        await self._step("interface")
        return self.contracts

    async def calculate_module_reference(self, module_source: bytes) -> ModuleReference:
        await self._step("reference")
        return ModuleReference(hex=_REF)

    async def get_embedded_module_schema(self, module_source: bytes) -> bytes | None:
        await self._step("schema")
        return self.raw_schema

    def parse_raw_module_schema(self, raw_schema: bytes) -> ModuleSchema:
        self.parsed.append(raw_schema)
        if self.fail == "parse":
            raise ValueError("malformed schema")
        return self.schema

    def serialize_schema_type(self, schema_type: SchemaType) -> bytes:
        return schema_type.kind.encode()


def _contracts() -> list[ContractInterface]:
    return [ContractInterface(contract_name="counter", entrypoint_names=["increment", "view"])]


def _typed_schema() -> ModuleSchema:
    return ModuleSchema(
        contracts={
            "counter": ContractSchema(
                receive={
                    "increment": FunctionSchema(parameter=scalar(Scalar.U64)),
                    "view": FunctionSchema(return_value=scalar(Scalar.U64)),
                }
            )
        }
    )


# ###############
# Module sources
# ###############


class TestGenerateContractClients:
    def test_without_embedded_schema(self) -> None:
        toolkit = _FakeToolkit(_contracts())
        clients = asyncio.run(generate_contract_clients(_MODULE, "counter_module", toolkit))

        assert toolkit.parsed == []
        assert clients.module_unit.name == "counter_module"
        assert [unit.name for unit in clients.contract_units] == ["counter_module_counter"]
        names = clients.contract_units[0].names()
        assert "sendIncrement" in names
        assert "createIncrementParameter" not in names

    def test_with_embedded_schema(self) -> None:
        toolkit = _FakeToolkit(_contracts(), raw_schema=b"schema", schema=_typed_schema())
        clients = asyncio.run(generate_contract_clients(_MODULE, "counter_module", toolkit))

        assert toolkit.parsed == [b"schema"]
        names = clients.contract_units[0].names()
        assert "createIncrementParameter" in names
        assert "parseReturnValueView" in names

    def test_module_reads_run_concurrently(self) -> None:
        toolkit = _FakeToolkit(_contracts())
        asyncio.run(generate_contract_clients(_MODULE, "counter_module", toolkit))
        assert toolkit.calls[:3] == ["start:interface", "start:reference", "start:schema"]
        assert sorted(toolkit.calls[3:]) == ["end:interface", "end:reference", "end:schema"]

    def test_module_reference_is_embedded(self) -> None:
        clients = asyncio.run(generate_contract_clients(_MODULE, "m", _FakeToolkit(_contracts())))
        const = clients.module_unit.get("moduleReference")
        assert const is not None
        assert _REF in const.initializer

    @pytest.mark.parametrize("step", ["interface", "reference", "schema"])
    def test_failing_read_aborts(self, step: str) -> None:
        toolkit = _FakeToolkit(_contracts(), fail=step)
        with pytest.raises(GenerationError, match="counter_module") as exc_info:
            asyncio.run(generate_contract_clients(_MODULE, "counter_module", toolkit))
        assert isinstance(exc_info.value.__cause__, ValueError)

    def test_failing_schema_parse_aborts(self) -> None:
        toolkit = _FakeToolkit(_contracts(), raw_schema=b"garbage", fail="parse")
        with pytest.raises(GenerationError, match="schema"):
            asyncio.run(generate_contract_clients(_MODULE, "counter_module", toolkit))

    def test_config_is_applied(self) -> None:
        config = GeneratorConfig(sdk_module="./sdk", indent=2)
        toolkit = _FakeToolkit(_contracts(), raw_schema=b"schema", schema=_typed_schema())
        clients = asyncio.run(generate_contract_clients(_MODULE, "m", toolkit, config=config))
        assert clients.module_unit.imports[0].module_specifier == "./sdk"
        assert clients.indent == 2
        assert clients.render()["m.ts"].startswith("import * as SDK from './sdk';\n")

    def test_progress_callback(self) -> None:
        events: list[Progress] = []
        toolkit = _FakeToolkit(_contracts())
        asyncio.run(generate_contract_clients(_MODULE, "m", toolkit, on_progress=events.append))
        assert [e.done_items for e in events] == [1, 2]
        assert {e.total_items for e in events} == {2}


# ###############
# Module files
# ###############


class TestGenerateFromFile:
    def test_output_name_from_file_name(self, tmp_path: Path) -> None:
        module_file = tmp_path / "counter.wasm.v1"
        module_file.write_bytes(_MODULE)
        clients = asyncio.run(generate_contract_clients_from_file(module_file, _FakeToolkit(_contracts())))
        assert clients.module_unit.name == "counter"
        assert clients.contract_units[0].name == "counter_counter"

    def test_explicit_output_name(self, tmp_path: Path) -> None:
        module_file = tmp_path / "counter.wasm.v1"
        module_file.write_bytes(_MODULE)
        clients = asyncio.run(
            generate_contract_clients_from_file(module_file, _FakeToolkit(_contracts()), out_name="client")
        )
        assert clients.module_unit.name == "client"

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(GenerationError, match="No such module"):
            asyncio.run(generate_contract_clients_from_file(tmp_path / "absent.wasm.v1", _FakeToolkit([])))

    @pytest.mark.parametrize(
        ("file_name", "expected"),
        [("wCCD.wasm.v1", "wCCD"), ("token.wasm", "token"), ("module", "module")],
    )
    def test_module_output_name(self, file_name: str, expected: str) -> None:
        assert module_output_name(Path(file_name)) == expected
