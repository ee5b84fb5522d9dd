# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Runtime configuration resolution.

Exports:
    KsmConfigurationService: Keeper Secrets Manager configuration service
    LocalEnvironment: Read-only view over guacamole.properties and environment
    build_secrets_manager_options: Blob + TLS policy -> connection options
    create_secrets_manager: Connection options -> KSM client
    parse_ksm_config: Blob -> KSM key-value storage
"""

from gateway_vault.runtime.ksm_configuration_service import KsmConfigurationService
from gateway_vault.runtime.ksm_storage import (
    build_secrets_manager_options,
    create_secrets_manager,
    parse_ksm_config,
)
from gateway_vault.runtime.local_environment import LocalEnvironment

__all__: list[str] = [
    "KsmConfigurationService",
    "LocalEnvironment",
    "build_secrets_manager_options",
    "create_secrets_manager",
    "parse_ksm_config",
]
