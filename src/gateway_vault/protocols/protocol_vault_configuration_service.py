# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Vault configuration service protocol.

Every vault backend exposes the same shape: one required setting (the
vault credential) and a number of optional flags with documented defaults,
plus the names of the two mapping files that redirect local names to
vault secrets.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from gateway_vault.runtime.models import (
        ModelKsmConnectionOptions,
        ModelMappingFileReferences,
    )


@runtime_checkable
class ProtocolVaultConfigurationService(Protocol):
    """Protocol for per-backend vault configuration resolution.

    Implementations are constructed explicitly and passed to the
    subsystems that need vault-backed secrets.
    """

    @property
    def mapping_files(self) -> ModelMappingFileReferences:
        """Names of the token-mapping and properties-mapping files."""
        ...

    def get_token_mapping_path(self) -> Path | None:
        """Location of the token-mapping file, if a configuration home is set."""
        ...

    def get_properties_path(self) -> Path | None:
        """Location of the properties-mapping file, if a configuration home is set."""
        ...

    def get_allow_unverified_certificate(self) -> bool:
        """Whether unverified vault server certificates are accepted."""
        ...

    def get_split_windows_usernames(self) -> bool:
        """Whether Windows domains are stripped from usernames read from the vault."""
        ...

    def get_vault_config(self) -> str:
        """The required vault credential configuration."""
        ...

    def get_secrets_manager_options(
        self,
        vault_config: str | None,
    ) -> ModelKsmConnectionOptions:
        """Options for opening a vault session from a configuration blob."""
        ...


__all__ = [
    "ProtocolVaultConfigurationService",
]
