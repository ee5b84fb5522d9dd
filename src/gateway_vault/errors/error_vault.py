# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Vault-Specific Infrastructure Error Class.

This module defines the InfraVaultError class for failures raised while
opening a session with Keeper Secrets Manager.
"""

from __future__ import annotations

from gateway_vault.errors.infra_errors import InfraConnectionError

class InfraVaultError(InfraConnectionError):
    """Error communicating with the secrets vault.

    Used for client construction failures such as an unusable one-time
    token or storage missing the keys the SDK needs. The context should use
    ``transport_type=EnumInfraTransportType.VAULT``.

    Example:
        >>> context = ModelInfraErrorContext(
        ...     transport_type=EnumInfraTransportType.VAULT,
        ...     operation="create_client",
        ...     target_name="keeper-secrets-manager",
        ... )
        >>> raise InfraVaultError(
        ...     "Failed to initialize Keeper Secrets Manager client",
        ...     context=context,
        ... )
    """


__all__: list[str] = [
    "InfraVaultError",
]
