# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Gateway Vault Errors Module.

Exports:
    ModelInfraErrorContext: Configuration model for bundled error context
    RuntimeHostError: Base infrastructure error class
    ProtocolConfigurationError: Base class for configuration failures
    InvalidConfigurationError: Malformed vault configuration blob
    ConfigurationParseError: Configuration property present but unparsable
    MissingConfigurationError: Required configuration value absent
    InfraConnectionError: Infrastructure connection errors
    InfraVaultError: Vault client errors

Error Sanitization Guidelines:
    NEVER include in error messages or context:
        - The vault configuration blob or any decoded part of it
        - Secret values resolved from the vault
        - Private keys, client keys or one-time tokens

    SAFE to include:
        - Property names (e.g., "ksm-config")
        - Operation names (e.g., "parse_config", "read_property")
        - Correlation IDs
        - Lengths and types of rejected values
"""

from gateway_vault.errors.error_vault import InfraVaultError
from gateway_vault.errors.infra_errors import (
    ConfigurationParseError,
    InfraConnectionError,
    InvalidConfigurationError,
    MissingConfigurationError,
    ProtocolConfigurationError,
    RuntimeHostError,
)
from gateway_vault.errors.model_infra_error_context import ModelInfraErrorContext

__all__: list[str] = [
    # Configuration model
    "ModelInfraErrorContext",
    # Error classes
    "RuntimeHostError",
    "ProtocolConfigurationError",
    "InvalidConfigurationError",
    "ConfigurationParseError",
    "MissingConfigurationError",
    "InfraConnectionError",
    "InfraVaultError",
]
