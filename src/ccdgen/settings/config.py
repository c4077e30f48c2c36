# Copyright 2026 ccdgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model and YAML parser for the generator configuration file."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import yaml

# ###############
# Public Interface
# ###############

CONFIG_FILE_NAME = ".ccdgen.yaml"

DEFAULT_SDK_MODULE = "@concordium/web-sdk"


class ConfigError(Exception):
    """Raised when a generator configuration file is invalid or cannot be loaded."""


@dataclass(frozen=True)
class GeneratorConfig:
    """Options controlling the generated client code.

    Attributes:
        sdk_module: Module specifier the generated code imports the SDK from.
        indent: Number of spaces per nesting level in generated code.
        ts_nocheck: Start every generated file with a `// @ts-nocheck` directive.
    """

    sdk_module: str = DEFAULT_SDK_MODULE
    indent: int = 4
    ts_nocheck: bool = False


def load_generator_config(path: Path) -> GeneratorConfig:
    """Load and parse a generator configuration file.

    Args:
        path: Path to the `.ccdgen.yaml` file.

    Returns:
        A GeneratorConfig populated from the file, with defaults for absent keys.

    Raises:
        ConfigError: If the file cannot be read or the configuration is invalid.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ConfigError(f"Generator config file not found: {path}") from None
    except OSError as exc:
        raise ConfigError(f"Cannot read generator config file: {exc}") from exc

    return parse_generator_config(text, source_label=str(path))


def parse_generator_config(text: str, source_label: str = "<string>") -> GeneratorConfig:
    """Parse generator config YAML text into a GeneratorConfig.

    An empty document yields the default configuration.

    Raises:
        ConfigError: If the YAML is invalid, has unknown keys or values of the wrong type.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {source_label}: {exc}") from exc

    if data is None:
        return GeneratorConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"{source_label}: generator config must be a YAML mapping")

    unknown = sorted(set(data) - _KNOWN_KEYS)
    if unknown:
        raise ConfigError(f"{source_label}: unknown configuration key(s): {', '.join(map(str, unknown))}")

    sdk_module = DEFAULT_SDK_MODULE
    if "sdk-module" in data:
        sdk_module = data["sdk-module"]
        if not isinstance(sdk_module, str) or not sdk_module:
            raise ConfigError(f"{source_label}: 'sdk-module' must be a non-empty string")

    indent = 4
    if "indent" in data:
        indent = data["indent"]
        # bool is a subclass of int
        if isinstance(indent, bool) or not isinstance(indent, int) or indent < 1:
            raise ConfigError(f"{source_label}: 'indent' must be a positive integer")

    ts_nocheck = data.get("ts-nocheck", False)
    if not isinstance(ts_nocheck, bool):
        raise ConfigError(f"{source_label}: 'ts-nocheck' must be a boolean")

    return GeneratorConfig(sdk_module=sdk_module, indent=indent, ts_nocheck=ts_nocheck)


# ################
# Implementation
# ################

_KNOWN_KEYS = {"sdk-module", "indent", "ts-nocheck"}
