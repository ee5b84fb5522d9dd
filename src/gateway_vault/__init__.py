# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Gateway Vault - secret-backed configuration for a remote-access gateway.

This package provides:

- Keeper Secrets Manager configuration resolution (KsmConfigurationService)
- Validation of the base64 JSON vault configuration blob
- Local configuration access (guacamole.properties, environment overrides)
- The directory object event contract for authentication providers
- Transport-aware error handling with ModelInfraErrorContext
"""

__all__: list[str] = []
