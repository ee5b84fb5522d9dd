# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Keeper Secrets Manager configuration service.

KsmConfigurationService resolves the local settings that control how the
gateway uses Keeper Secrets Manager (KSM):

    ksm-config                  base64 JSON client configuration (required)
    ksm-allow-unverified-cert   accept unverified server certificates (default false)
    ksm-strip-windows-domains   strip Windows domains from vault usernames (default false)

It also names the two mapping files read from the configuration home:

    ksm-token-mapping.yml       connection parameter token -> secret name
    guacamole.properties.ksm    configuration property -> secret name

Example:
    Construct once and pass explicitly to dependents::

        environment = LocalEnvironment.from_home()
        config_service = KsmConfigurationService(environment)

        options = config_service.get_secrets_manager_options(
            config_service.get_vault_config()
        )
        client = create_secrets_manager(options)

Thread Safety:
    Every accessor re-reads the immutable environment and returns new value
    objects, so a single instance may be shared between threads.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Final

from gateway_vault.runtime.ksm_storage import (
    build_secrets_manager_options,
    require_ksm_config,
)
from gateway_vault.runtime.local_environment import LocalEnvironment
from gateway_vault.runtime.models import (
    BooleanLocalProperty,
    ModelKsmConnectionOptions,
    ModelMappingFileReferences,
    ModelVaultConfigurationFlags,
    StringLocalProperty,
)

logger = logging.getLogger(__name__)

# YAML mapping of connection parameter token to secret name
TOKEN_MAPPING_FILENAME: Final[str] = "ksm-token-mapping.yml"

# Properties file whose values are the names of secrets holding the real values
PROPERTIES_FILENAME: Final[str] = "guacamole.properties.ksm"

KSM_CONFIG: Final = StringLocalProperty(name="ksm-config")

ALLOW_UNVERIFIED_CERT: Final = BooleanLocalProperty(name="ksm-allow-unverified-cert")

STRIP_WINDOWS_DOMAINS: Final = BooleanLocalProperty(name="ksm-strip-windows-domains")


class KsmConfigurationService:
    """Vault configuration service for Keeper Secrets Manager.

    Satisfies ProtocolVaultConfigurationService via duck typing.
    """

    def __init__(self, environment: LocalEnvironment) -> None:
        """Initialize KsmConfigurationService.

        Args:
            environment: Local configuration to read properties from
        """
        self._environment = environment
        self._mapping_files = ModelMappingFileReferences(
            token_mapping_filename=TOKEN_MAPPING_FILENAME,
            properties_filename=PROPERTIES_FILENAME,
        )

    @property
    def mapping_files(self) -> ModelMappingFileReferences:
        return self._mapping_files

    def get_token_mapping_path(self) -> Path | None:
        return self._environment.resolve_path(self._mapping_files.token_mapping_filename)

    def get_properties_path(self) -> Path | None:
        return self._environment.resolve_path(self._mapping_files.properties_filename)

    def get_allow_unverified_certificate(self) -> bool:
        """Return whether unverified server certificates should be accepted.

        Returns:
            True if unverified server certificates should be accepted, False
            otherwise (including when the property is unset).

        Raises:
            ConfigurationParseError: If the property is set but not a boolean.
        """
        return self._environment.get_property(ALLOW_UNVERIFIED_CERT, False)

    def get_split_windows_usernames(self) -> bool:
        """Return whether Windows domains should be stripped from vault usernames.

        Raises:
            ConfigurationParseError: If the property is set but not a boolean.
        """
        return self._environment.get_property(STRIP_WINDOWS_DOMAINS, False)

    def get_configuration_flags(self) -> ModelVaultConfigurationFlags:
        """Resolve both optional flags into one snapshot.

        Raises:
            ConfigurationParseError: If either property is set but not a boolean.
        """
        return ModelVaultConfigurationFlags(
            allow_unverified_certificate=self.get_allow_unverified_certificate(),
            split_windows_usernames=self.get_split_windows_usernames(),
        )

    def get_vault_config(self) -> str:
        """Return the base64-encoded JSON KSM configuration blob, unchanged.

        Raises:
            MissingConfigurationError: If ksm-config is not set.
        """
        return self._environment.get_required_property(KSM_CONFIG)

    def get_secrets_manager_options(
        self,
        vault_config: str | None,
    ) -> ModelKsmConnectionOptions:
        """Return the options used to authenticate with Keeper Secrets Manager.

        Args:
            vault_config: The KSM configuration blob to parse.

        Returns:
            Options built from the blob with the configured TLS policy.

        Raises:
            MissingConfigurationError: If vault_config is None or blank.
            InvalidConfigurationError: If vault_config cannot be parsed.
            ConfigurationParseError: If ksm-allow-unverified-cert is invalid.
        """
        vault_config = require_ksm_config(vault_config)

        allow_unverified = self.get_allow_unverified_certificate()
        logger.debug(
            "Building Keeper Secrets Manager options (allow_unverified_certificate=%s)",
            allow_unverified,
        )
        return build_secrets_manager_options(vault_config, allow_unverified)


__all__: list[str] = [
    "ALLOW_UNVERIFIED_CERT",
    "KSM_CONFIG",
    "KsmConfigurationService",
    "PROPERTIES_FILENAME",
    "STRIP_WINDOWS_DOMAINS",
    "TOKEN_MAPPING_FILENAME",
]
