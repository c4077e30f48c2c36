# Copyright 2026 ccdgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Assembly of module and contract client source units.

The assembler walks the contracts of a module and their entrypoints in
declaration order. For every schema type it encounters it asks the type
compiler for a :class:`~ccdgen.compiler.type_compiler.TypeMapping` and wraps
the generated conversions into exported declarations:

* one module unit with the module reference, the module client and one
  ``instantiate<Contract>`` function per contract;
* one unit per contract with the contract client and, per entrypoint, the
  ``send<Entrypoint>`` and ``dryRun<Entrypoint>`` functions plus parameter
  constructors and result parsers where the schema provides the types.

Schemas are optional. Without a parameter schema the functions take the raw
``SDK.Parameter.Type``; without return value, error or event schemas the
corresponding parsers are not generated.
"""

from __future__ import annotations

import base64
import logging
import time
from collections.abc import Callable
from dataclasses import dataclass, field

from ccdgen.compiler.naming import GenerationContext, quote, to_pascal_case
from ccdgen.compiler.type_compiler import SDK_NAMESPACE, compile_type, is_unit
from ccdgen.emit.declarations import (
    ClassDeclaration,
    ConstDeclaration,
    Declaration,
    FunctionDeclaration,
    ImportDeclaration,
    Parameter,
    PropertyDeclaration,
    Scope,
    SourceUnit,
    TypeAliasDeclaration,
)
from ccdgen.emit.typescript import render_source_unit
from ccdgen.model.module import ContractInterface, ContractSchema, ModuleReference, ModuleSchema, Progress
from ccdgen.model.schema import SchemaType
from ccdgen.settings.config import GeneratorConfig

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############

ProgressCallback = Callable[[Progress], None]
SchemaTypeSerializer = Callable[[SchemaType], bytes]


@dataclass
class GeneratedClients:
    """Source units generated for one module.

    Attributes:
        module_unit: The module client unit.
        contract_units: One unit per contract, in module order.
        indent: Indent width the statement bodies were generated with.
        ts_nocheck: Whether rendered files start with a `// @ts-nocheck` directive.
    """

    module_unit: SourceUnit
    contract_units: list[SourceUnit] = field(default_factory=list)
    indent: int = 4
    ts_nocheck: bool = False

    def units(self) -> list[SourceUnit]:
        return [self.module_unit, *self.contract_units]

    def render(self, indent: int | None = None) -> dict[str, str]:
        """Render every unit as TypeScript, keyed by file name.

        The indent defaults to the one used during generation, so nested
        statement bodies line up with the enclosing blocks.
        """
        width = self.indent if indent is None else indent
        return {
            unit.file_name: render_source_unit(unit, width, ts_nocheck=self.ts_nocheck) for unit in self.units()
        }


def assemble_clients(
    out_name: str,
    module_ref: ModuleReference,
    contracts: list[ContractInterface],
    schema: ModuleSchema | None,
    serialize_schema_type: SchemaTypeSerializer,
    *,
    config: GeneratorConfig | None = None,
    ctx: GenerationContext | None = None,
    on_progress: ProgressCallback | None = None,
) -> GeneratedClients:
    """Assemble the client source units for a module.

    Args:
        out_name: Name of the module unit; contract units are named
            ``<out_name>_<contract name>``.
        module_ref: Reference of the on-chain module.
        contracts: Contracts of the module with their entrypoints, in order.
        schema: The parsed module schema, or None if the module embeds none.
        serialize_schema_type: Serializes a schema type into the binary form
            embedded (base64 encoded) in the generated code.
        config: Generator options. Defaults apply when omitted.
        ctx: Generation context for temporary names. A fresh context is
            created when omitted.
        on_progress: Called after the declarations of each entrypoint are
            produced.

    Returns:
        The generated source units.
    """
    config = config or GeneratorConfig()
    ctx = ctx or GenerationContext(indent=config.indent)
    assembler = _ClientAssembler(out_name, module_ref, schema, serialize_schema_type, config, ctx, on_progress)
    return assembler.assemble(contracts)


# ################
# Implementation
# ################

_SDK = SDK_NAMESPACE

_MISSING_RETURN_VALUE = (
    "throw new Error('Unexpected missing \\'returnValue\\' in result of invocation. "
    "Client expected a V1 smart contract.');"
)


@dataclass
class _ParameterCode:
    """How a generated function receives a contract parameter.

    Attributes:
        declarations: Type alias and constructor function, if any.
        argument: Function parameter to accept, or None if nothing is passed.
        expression: Expression producing the ``SDK.Parameter.Type``.
    """

    declarations: list[Declaration]
    argument: Parameter | None
    expression: str


class _ClientAssembler:
    """Builds the source units for a single module."""

    def __init__(
        self,
        out_name: str,
        module_ref: ModuleReference,
        schema: ModuleSchema | None,
        serialize_schema_type: SchemaTypeSerializer,
        config: GeneratorConfig,
        ctx: GenerationContext,
        on_progress: ProgressCallback | None,
    ) -> None:
        self._out_name = out_name
        self._module_ref = module_ref
        self._schema = schema
        self._serialize = serialize_schema_type
        self._config = config
        self._ctx = ctx
        self._on_progress = on_progress

    def assemble(self, contracts: list[ContractInterface]) -> GeneratedClients:
        total_items = sum(len(contract.entrypoint_names) for contract in contracts)
        done_items = 0

        module_unit = self._module_unit_base()
        contract_units: list[SourceUnit] = []
        for contract in contracts:
            logger.debug("Generating client for contract '%s'", contract.contract_name)
            contract_schema = self._schema.contract(contract.contract_name) if self._schema else None
            module_unit.declarations.extend(self._instantiate_declarations(contract, contract_schema))

            unit = self._contract_unit_base(contract, contract_schema)
            for entrypoint in contract.entrypoint_names:
                started = time.perf_counter()
                unit.declarations.extend(self._entrypoint_declarations(contract, contract_schema, entrypoint))
                done_items += 1
                spent = time.perf_counter() - started
                logger.debug(
                    "Generated entrypoint '%s.%s' (%d/%d)", contract.contract_name, entrypoint, done_items, total_items
                )
                if self._on_progress is not None:
                    self._on_progress(
                        Progress(
                            description=f"{contract.contract_name}.{entrypoint}",
                            total_items=total_items,
                            done_items=done_items,
                            spent_time=spent,
                        )
                    )
            contract_units.append(unit)

        return GeneratedClients(
            module_unit=module_unit,
            contract_units=contract_units,
            indent=self._config.indent,
            ts_nocheck=self._config.ts_nocheck,
        )

    # -- shared pieces ------------------------------------------------------

    def _sdk_import(self) -> ImportDeclaration:
        return ImportDeclaration(namespace=_SDK, module_specifier=self._config.sdk_module)

    def _module_reference_const(self) -> ConstDeclaration:
        return ConstDeclaration(
            name="moduleReference",
            type=f"{_SDK}.ModuleReference.Type",
            initializer=f"{_SDK}.ModuleReference.fromHexString({quote(self._module_ref.hex)})",
            docs="The reference of the smart contract module supported by the provided client.",
        )

    def _schema_base64(self, schema_type: SchemaType) -> str:
        return base64.b64encode(self._serialize(schema_type)).decode("ascii")

    def _parameter_code(
        self, type_name: str, function_name: str, schema_type: SchemaType | None, subject: str
    ) -> _ParameterCode:
        """Derive the parameter declarations for an init or receive function."""
        if schema_type is None:
            return _ParameterCode(
                declarations=[],
                argument=Parameter(name="parameter", type=f"{_SDK}.Parameter.Type"),
                expression="parameter",
            )
        if is_unit(schema_type):
            return _ParameterCode(declarations=[], argument=None, expression=f"{_SDK}.Parameter.empty()")

        mapping = compile_type(schema_type, self._ctx)
        code = mapping.native_to_json("parameter")
        out = self._ctx.next_id("out")
        body = [
            *code.statements,
            f"const {out} = {_SDK}.Parameter.fromBase64SchemaType({quote(self._schema_base64(schema_type))}, {code.ref});",
            f"return {out};",
        ]
        declarations: list[Declaration] = [
            TypeAliasDeclaration(name=type_name, type=mapping.native_type, docs=f"Parameter type for {subject}."),
            FunctionDeclaration(
                name=function_name,
                parameters=[Parameter(name="parameter", type=type_name)],
                return_type=f"{_SDK}.Parameter.Type",
                body=body,
                docs=(
                    f"Construct Parameter for {subject}.\n"
                    f"@param {{{type_name}}} parameter The structured parameter to construct from.\n"
                    f"@returns {{{_SDK}.Parameter.Type}} The smart contract parameter."
                ),
            ),
        ]
        return _ParameterCode(
            declarations=declarations,
            argument=Parameter(name="parameter", type=type_name),
            expression=f"{function_name}(parameter)",
        )

    # -- module unit --------------------------------------------------------

    def _module_client_type(self) -> str:
        return f"{to_pascal_case(self._out_name)}Module"

    def _module_unit_base(self) -> SourceUnit:
        client = self._module_client_type()
        ref = self._module_ref.hex
        grpc = Parameter(name="grpcClient", type=f"{_SDK}.ConcordiumGRPCClient")
        module_client = Parameter(name="moduleClient", type=client)
        declarations: list[Declaration] = [
            self._module_reference_const(),
            ClassDeclaration(
                name=client,
                docs=(
                    f"Client for an on-chain smart contract module with module reference '{ref}', "
                    "can be used for instantiating new smart contract instances."
                ),
                properties=[
                    PropertyDeclaration(
                        name="__nominal",
                        initializer="true",
                        scope=Scope.PRIVATE,
                        docs=(
                            "Having a private field prevents similar structured objects to be considered "
                            "the same type (similar to nominal typing)."
                        ),
                    ),
                    PropertyDeclaration(
                        name="internalModuleClient",
                        type=f"{_SDK}.ModuleClient.Type",
                        readonly=True,
                        docs="Generic module client used internally.",
                    ),
                ],
                constructor_docs=(
                    "Constructor is only meant to be used internally in this module. "
                    "Use functions such as `create` or `createUnchecked` for construction."
                ),
                constructor_parameters=[Parameter(name="internalModuleClient", type=f"{_SDK}.ModuleClient.Type")],
                constructor_body=["this.internalModuleClient = internalModuleClient;"],
            ),
            TypeAliasDeclaration(
                name="Type",
                type=client,
                docs=(
                    f"Client for an on-chain smart contract module with module reference '{ref}', "
                    "can be used for instantiating new smart contract instances."
                ),
            ),
            FunctionDeclaration(
                name="create",
                is_async=True,
                parameters=[grpc],
                return_type=f"Promise<{client}>",
                body=[
                    f"const moduleClient = await {_SDK}.ModuleClient.create(grpcClient, moduleReference);",
                    f"return new {client}(moduleClient);",
                ],
                docs=(
                    f"Construct a {client} client for interacting with a smart contract module on chain.\n"
                    "This function ensures the smart contract module is deployed on chain.\n"
                    f"@param {{{_SDK}.ConcordiumGRPCClient}} grpcClient - The concordium node client to use.\n"
                    "@throws If failing to communicate with the concordium node or if the module reference "
                    "is not present on chain.\n"
                    f"@returns {{{client}}} A module client ensured to be deployed on chain."
                ),
            ),
            FunctionDeclaration(
                name="createUnchecked",
                parameters=[grpc],
                return_type=client,
                body=[
                    f"const moduleClient = {_SDK}.ModuleClient.createUnchecked(grpcClient, moduleReference);",
                    f"return new {client}(moduleClient);",
                ],
                docs=(
                    f"Construct a {client} client for interacting with a smart contract module on chain.\n"
                    "It is up to the caller to ensure the module is deployed on chain.\n"
                    f"@param {{{_SDK}.ConcordiumGRPCClient}} grpcClient - The concordium node client to use.\n"
                    f"@returns {{{client}}}"
                ),
            ),
            FunctionDeclaration(
                name="checkOnChain",
                parameters=[module_client],
                return_type="Promise<void>",
                body=[f"return {_SDK}.ModuleClient.checkOnChain(moduleClient.internalModuleClient);"],
                docs=(
                    "Ensure the smart contract module is deployed on chain.\n"
                    f"@param {{{client}}} moduleClient - The client of the on-chain smart contract module "
                    f"with reference '{ref}'.\n"
                    "@throws If failing to communicate with the concordium node or if the module reference "
                    "is not present on chain."
                ),
            ),
            FunctionDeclaration(
                name="getModuleSource",
                parameters=[module_client],
                return_type=f"Promise<{_SDK}.VersionedModuleSource>",
                body=[f"return {_SDK}.ModuleClient.getModuleSource(moduleClient.internalModuleClient);"],
                docs=(
                    "Get the module source of the deployed smart contract module.\n"
                    f"@param {{{client}}} moduleClient - The client of the on-chain smart contract module "
                    f"with reference '{ref}'.\n"
                    f"@throws {{{_SDK}.RpcError}} If failing to communicate with the concordium node or module not found.\n"
                    f"@returns {{{_SDK}.VersionedModuleSource}} Module source of the deployed smart contract module."
                ),
            ),
        ]
        return SourceUnit(name=self._out_name, imports=[self._sdk_import()], declarations=declarations)

    def _instantiate_declarations(
        self, contract: ContractInterface, contract_schema: ContractSchema | None
    ) -> list[Declaration]:
        name = contract.contract_name
        pascal = to_pascal_case(name)
        init_parameter = contract_schema.init.parameter if contract_schema and contract_schema.init else None
        parameter = self._parameter_code(
            f"{pascal}Parameter",
            f"create{pascal}Parameter",
            init_parameter,
            f"the smart contract instance of the '{name}' contract",
        )
        parameters = [
            Parameter(name="moduleClient", type=self._module_client_type()),
            Parameter(name="transactionMetadata", type=f"{_SDK}.ContractTransactionMetadata"),
        ]
        parameter_doc = ""
        if parameter.argument is not None:
            parameters.append(parameter.argument)
            parameter_doc = (
                f"@param {{{parameter.argument.type}}} parameter - Parameter to provide as part of the "
                "transaction for the instantiation of a new smart contract contract.\n"
            )
        parameters.append(Parameter(name="signer", type=f"{_SDK}.AccountSigner"))
        call_args = [
            "moduleClient.internalModuleClient",
            f"{_SDK}.ContractName.fromStringUnchecked({quote(name)})",
            "transactionMetadata",
            parameter.expression,
            "signer",
        ]

        instantiate = FunctionDeclaration(
            name=f"instantiate{pascal}",
            parameters=parameters,
            return_type=f"Promise<{_SDK}.TransactionHash.Type>",
            body=[f"return {_SDK}.ModuleClient.createAndSendInitTransaction(\n{self._args(call_args)}\n);"],
            docs=(
                f"Send transaction for instantiating a new '{name}' smart contract instance.\n"
                f"@param {{{self._module_client_type()}}} moduleClient - The client of the on-chain smart contract "
                f"module with reference '{self._module_ref.hex}'.\n"
                f"@param {{{_SDK}.ContractTransactionMetadata}} transactionMetadata - Metadata related to "
                "constructing a transaction for a smart contract module.\n"
                f"{parameter_doc}"
                f"@param {{{_SDK}.AccountSigner}} signer - The signer of the update contract transaction.\n"
                "@throws If failing to communicate with the concordium node.\n"
                f"@returns {{{_SDK}.TransactionHash.Type}}"
            ),
        )
        return [*parameter.declarations, instantiate]

    # -- contract unit ------------------------------------------------------

    def _args(self, args: list[str]) -> str:
        unit = " " * self._config.indent
        return ",\n".join(unit + arg for arg in args)

    def _contract_unit_base(self, contract: ContractInterface, contract_schema: ContractSchema | None) -> SourceUnit:
        name = contract.contract_name
        client = f"{to_pascal_case(name)}Contract"
        grpc = Parameter(name="grpcClient", type=f"{_SDK}.ConcordiumGRPCClient")
        address = Parameter(name="contractAddress", type=f"{_SDK}.ContractAddress.Type")
        block_hash = Parameter(name="blockHash", type=f"{_SDK}.BlockHash.Type", optional=True)
        construct = f"const genericContract = new {_SDK}.Contract(grpcClient, contractAddress, contractName);"

        declarations: list[Declaration] = [
            self._module_reference_const(),
            ConstDeclaration(
                name="contractName",
                type=f"{_SDK}.ContractName.Type",
                initializer=f"{_SDK}.ContractName.fromStringUnchecked({quote(name)})",
                docs="Name of the smart contract supported by this client.",
            ),
            ClassDeclaration(
                name=client,
                docs="Smart contract client for a contract instance on chain.",
                properties=[
                    PropertyDeclaration(
                        name="__nominal",
                        initializer="true",
                        scope=Scope.PRIVATE,
                        docs=(
                            "Having a private field prevents similar structured objects to be considered "
                            "the same type (similar to nominal typing)."
                        ),
                    ),
                    PropertyDeclaration(
                        name="grpcClient",
                        type=grpc.type,
                        readonly=True,
                        docs="The gRPC connection used by this client.",
                    ),
                    PropertyDeclaration(
                        name="contractAddress",
                        type=address.type,
                        readonly=True,
                        docs="The contract address used by this client.",
                    ),
                    PropertyDeclaration(
                        name="genericContract",
                        type=f"{_SDK}.Contract",
                        readonly=True,
                        docs="Generic contract client used internally.",
                    ),
                ],
                constructor_parameters=[grpc, address, Parameter(name="genericContract", type=f"{_SDK}.Contract")],
                constructor_body=[
                    "this.grpcClient = grpcClient;",
                    "this.contractAddress = contractAddress;",
                    "this.genericContract = genericContract;",
                ],
            ),
            TypeAliasDeclaration(
                name="Type",
                type=client,
                docs="Smart contract client for a contract instance on chain.",
            ),
            FunctionDeclaration(
                name="create",
                is_async=True,
                parameters=[grpc, address, block_hash],
                return_type=f"Promise<{client}>",
                body=[
                    construct,
                    "await genericContract.checkOnChain({ moduleReference: moduleReference, blockHash: blockHash });",
                    f"return new {client}(grpcClient, contractAddress, genericContract);",
                ],
                docs=(
                    f"Construct an instance of `{client}` for interacting with a '{name}' contract on chain.\n"
                    "Checking the information instance on chain.\n"
                    f"@param {{{_SDK}.ConcordiumGRPCClient}} grpcClient - The client used for contract invocations and updates.\n"
                    f"@param {{{_SDK}.ContractAddress.Type}} contractAddress - Address of the contract instance.\n"
                    f"@param {{{_SDK}.BlockHash.Type}} [blockHash] - Hash of the block to check the information at. "
                    "When not provided the last finalized block is used.\n"
                    "@throws If failing to communicate with the concordium node or if any of the checks fails.\n"
                    f"@returns {{{client}}}"
                ),
            ),
            FunctionDeclaration(
                name="createUnchecked",
                parameters=[grpc, address],
                return_type=client,
                body=[construct, f"return new {client}(grpcClient, contractAddress, genericContract);"],
                docs=(
                    f"Construct the `{client}` for interacting with a '{name}' contract on chain.\n"
                    "Without checking the instance information on chain.\n"
                    f"@param {{{_SDK}.ConcordiumGRPCClient}} grpcClient - The client used for contract invocations and updates.\n"
                    f"@param {{{_SDK}.ContractAddress.Type}} contractAddress - Address of the contract instance.\n"
                    f"@returns {{{client}}}"
                ),
            ),
            FunctionDeclaration(
                name="checkOnChain",
                parameters=[Parameter(name="contractClient", type=client), block_hash],
                return_type="Promise<void>",
                body=[
                    "return contractClient.genericContract.checkOnChain({ moduleReference: moduleReference, blockHash: blockHash });"
                ],
                docs=(
                    "Check if the smart contract instance exists on the blockchain and whether it uses a matching "
                    "contract name and module reference.\n"
                    f"@param {{{client}}} contractClient The client for a '{name}' smart contract instance on chain.\n"
                    f"@param {{{_SDK}.BlockHash.Type}} [blockHash] A optional block hash to use for checking information "
                    "on chain, if not provided the last finalized will be used.\n"
                    f"@throws {{{_SDK}.RpcError}} If failing to communicate with the concordium node or if any of the checks fails."
                ),
            ),
        ]
        if contract_schema is not None and contract_schema.event is not None:
            declarations.extend(self._event_declarations(name, contract_schema.event))
        return SourceUnit(
            name=f"{self._out_name}_{name}",
            imports=[self._sdk_import()],
            declarations=declarations,
        )

    def _event_declarations(self, contract_name: str, event: SchemaType) -> list[Declaration]:
        mapping = compile_type(event, self._ctx)
        code = mapping.json_to_native("schemaJson")
        body = [
            f"const schemaJson = <{mapping.json_type}>{_SDK}.ContractEvent.parseWithSchemaTypeBase64("
            f"event, {quote(self._schema_base64(event))});",
            *code.statements,
            f"return {code.ref};",
        ]
        return [
            TypeAliasDeclaration(
                name="Event",
                type=mapping.native_type,
                docs=f"Contract event type for the '{contract_name}' contract.",
            ),
            FunctionDeclaration(
                name="parseEvent",
                parameters=[Parameter(name="event", type=f"{_SDK}.ContractEvent.Type")],
                return_type="Event",
                body=body,
                docs=(
                    f"Parse the contract events logged by the '{contract_name}' contract.\n"
                    f"@param {{{_SDK}.ContractEvent.Type}} event The unparsed contract event.\n"
                    "@returns {Event} The structured contract event."
                ),
            ),
        ]

    # -- entrypoints --------------------------------------------------------

    def _entrypoint_declarations(
        self, contract: ContractInterface, contract_schema: ContractSchema | None, entrypoint: str
    ) -> list[Declaration]:
        name = contract.contract_name
        pascal = to_pascal_case(entrypoint)
        client = f"{to_pascal_case(name)}Contract"
        subject = f"update transactions for '{entrypoint}' entrypoint of the '{name}' contract"
        function_schema = contract_schema.receive.get(entrypoint) if contract_schema else None
        parameter = self._parameter_code(
            f"{pascal}Parameter",
            f"create{pascal}Parameter",
            function_schema.parameter if function_schema else None,
            subject,
        )
        entrypoint_expr = f"{_SDK}.EntrypointName.fromStringUnchecked({quote(entrypoint)})"
        contract_client = Parameter(name="contractClient", type=client)

        send_params = [contract_client, Parameter(name="transactionMetadata", type=f"{_SDK}.ContractTransactionMetadata")]
        dry_run_params = [contract_client]
        parameter_doc = ""
        if parameter.argument is not None:
            send_params.append(parameter.argument)
            dry_run_params.append(parameter.argument)
            parameter_doc = (
                f"@param {{{parameter.argument.type}}} parameter - Parameter to provide the smart contract "
                "entrypoint as part of the transaction.\n"
            )
        send_params.append(Parameter(name="signer", type=f"{_SDK}.AccountSigner"))
        dry_run_params.extend(
            [
                Parameter(name="invokeMetadata", type=f"{_SDK}.ContractInvokeMetadata", default="{}"),
                Parameter(name="blockHash", type=f"{_SDK}.BlockHash.Type", optional=True),
            ]
        )

        send_args = [entrypoint_expr, f"{_SDK}.Parameter.toBuffer", "transactionMetadata", parameter.expression, "signer"]
        dry_run_args = [entrypoint_expr, "invokeMetadata", f"{_SDK}.Parameter.toBuffer", parameter.expression, "blockHash"]

        declarations: list[Declaration] = [*parameter.declarations]
        declarations.append(
            FunctionDeclaration(
                name=f"send{pascal}",
                parameters=send_params,
                return_type=f"Promise<{_SDK}.TransactionHash.Type>",
                body=[f"return contractClient.genericContract.createAndSendUpdateTransaction(\n{self._args(send_args)}\n);"],
                docs=(
                    f"Send an update-contract transaction to the '{entrypoint}' entrypoint of the '{name}' contract.\n"
                    f"@param {{{client}}} contractClient The client for a '{name}' smart contract instance on chain.\n"
                    f"@param {{{_SDK}.ContractTransactionMetadata}} transactionMetadata - Metadata related to "
                    "constructing a transaction for a smart contract.\n"
                    f"{parameter_doc}"
                    f"@param {{{_SDK}.AccountSigner}} signer - The signer of the update contract transaction.\n"
                    "@throws If the entrypoint is not successfully invoked.\n"
                    f"@returns {{{_SDK}.TransactionHash.Type}} Hash of the transaction."
                ),
            )
        )
        declarations.append(
            FunctionDeclaration(
                name=f"dryRun{pascal}",
                parameters=dry_run_params,
                return_type=f"Promise<{_SDK}.InvokeContractResult>",
                body=[f"return contractClient.genericContract.dryRun.invokeMethod(\n{self._args(dry_run_args)}\n);"],
                docs=(
                    f"Dry-run an update-contract transaction to the '{entrypoint}' entrypoint of the '{name}' contract.\n"
                    f"@param {{{client}}} contractClient The client for a '{name}' smart contract instance on chain.\n"
                    f"{parameter_doc}"
                    f"@param {{{_SDK}.ContractInvokeMetadata}} [invokeMetadata] - The address of the account or "
                    "contract which is invoking this transaction, and the amount and energy to use.\n"
                    f"@param {{{_SDK}.BlockHash.Type}} [blockHash] - Optional block hash allowing for dry-running "
                    "the transaction at the end of a specific block.\n"
                    f"@throws {{{_SDK}.RpcError}} If failing to communicate with the concordium node or if any of the checks fails.\n"
                    f"@returns {{{_SDK}.InvokeContractResult}} The result of invoking the smart contract instance."
                ),
            )
        )
        if function_schema is not None and function_schema.return_value is not None:
            declarations.extend(
                self._result_parser(
                    f"ReturnValue{pascal}",
                    f"parseReturnValue{pascal}",
                    function_schema.return_value,
                    "invokeResult.tag !== 'success'",
                    "return value",
                    f"dry-run invocations of '{entrypoint}' entrypoint of the '{name}' contract",
                )
            )
        if function_schema is not None and function_schema.error is not None:
            declarations.extend(
                self._result_parser(
                    f"ErrorMessage{pascal}",
                    f"parseErrorMessage{pascal}",
                    function_schema.error,
                    "invokeResult.tag !== 'failure' || invokeResult.reason.tag !== 'RejectedReceive'",
                    "error message",
                    f"dry-run invocations of '{entrypoint}' entrypoint of the '{name}' contract",
                )
            )
        return declarations

    def _result_parser(
        self,
        type_name: str,
        function_name: str,
        schema_type: SchemaType,
        mismatch_condition: str,
        label: str,
        subject: str,
    ) -> list[Declaration]:
        """Declarations decoding the raw return value of an invocation into a native value."""
        mapping = compile_type(schema_type, self._ctx)
        code = mapping.json_to_native("schemaJson")
        unit = " " * self._config.indent
        body = [
            f"if ({mismatch_condition}) {{\n{unit}return undefined;\n}}",
            f"if (invokeResult.returnValue === undefined) {{\n{unit}{_MISSING_RETURN_VALUE}\n}}",
            f"const schemaJson = <{mapping.json_type}>{_SDK}.ReturnValue.parseWithSchemaTypeBase64("
            f"invokeResult.returnValue, {quote(self._schema_base64(schema_type))});",
            *code.statements,
            f"return {code.ref};",
        ]
        return [
            TypeAliasDeclaration(name=type_name, type=mapping.native_type, docs=f"The {label} for {subject}."),
            FunctionDeclaration(
                name=function_name,
                parameters=[Parameter(name="invokeResult", type=f"{_SDK}.InvokeContractResult")],
                return_type=f"{type_name} | undefined",
                body=body,
                docs=(
                    f"Get and parse the {label} for {subject}.\n"
                    f"@param {{{_SDK}.InvokeContractResult}} invokeResult The result from dry-running the transaction/proposal.\n"
                    f"@returns {{{type_name} | undefined}} The structured {label} "
                    "or undefined if the result was not of the expected kind."
                ),
            ),
        ]
