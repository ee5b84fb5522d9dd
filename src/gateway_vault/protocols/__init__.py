# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Gateway Vault Protocols Module.

Exports:
    ProtocolDirectoryEventListener: Consumer of directory object events
    ProtocolDirectoryObjectEvent: Directory object change notification
    ProtocolIdentifiable: Object addressable by identifier
    ProtocolVaultConfigurationService: Per-backend vault configuration resolution
"""

from gateway_vault.protocols.protocol_directory_object_event import (
    ProtocolDirectoryEventListener,
    ProtocolDirectoryObjectEvent,
    ProtocolIdentifiable,
)
from gateway_vault.protocols.protocol_vault_configuration_service import (
    ProtocolVaultConfigurationService,
)

__all__: list[str] = [
    "ProtocolDirectoryEventListener",
    "ProtocolDirectoryObjectEvent",
    "ProtocolIdentifiable",
    "ProtocolVaultConfigurationService",
]
