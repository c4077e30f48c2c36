# Copyright 2026 ccdgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""ccdgen: typed TypeScript smart contract clients generated from contract schemas."""
