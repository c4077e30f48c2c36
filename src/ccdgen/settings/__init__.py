# Copyright 2026 ccdgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Generator configuration for ccdgen."""

from ccdgen.settings.config import (
    CONFIG_FILE_NAME,
    DEFAULT_SDK_MODULE,
    ConfigError,
    GeneratorConfig,
    load_generator_config,
    parse_generator_config,
)

__all__ = [
    "CONFIG_FILE_NAME",
    "DEFAULT_SDK_MODULE",
    "ConfigError",
    "GeneratorConfig",
    "load_generator_config",
    "parse_generator_config",
]
