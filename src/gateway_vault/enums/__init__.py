# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Gateway Vault Enumerations Module.

Exports:
    EnumDirectoryOperation: Directory mutation kinds (CREATE, UPDATE, DELETE)
    EnumDirectoryType: Directory object types (USER, CONNECTION, ...)
    EnumInfraTransportType: Infrastructure transport type enumeration
"""

from gateway_vault.enums.enum_directory_operation import EnumDirectoryOperation
from gateway_vault.enums.enum_directory_type import EnumDirectoryType
from gateway_vault.enums.enum_infra_transport_type import EnumInfraTransportType

__all__: list[str] = [
    "EnumDirectoryOperation",
    "EnumDirectoryType",
    "EnumInfraTransportType",
]
