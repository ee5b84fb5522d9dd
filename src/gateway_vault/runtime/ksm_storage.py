# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Keeper Secrets Manager storage adapter and session options.

The KSM configuration blob is base64-encoded JSON generated by the Keeper
Commander CLI. This module is the single validation gate for that blob:

    parse_ksm_config()               blob -> InMemoryKeyValueStorage
    build_secrets_manager_options()  blob + TLS policy -> ModelKsmConnectionOptions
    create_secrets_manager()         options -> SecretsManager (vault client)

Only ``create_secrets_manager`` hands control to the vault SDK client;
the first two functions perform no network I/O.

Security Considerations:
    - The blob and its decoded contents never appear in logs or errors
    - Malformed input is rejected before any storage object exists
"""

from __future__ import annotations

import base64
import binascii
import json
import logging
import os
from typing import Final

from keeper_secrets_manager_core import SecretsManager
from keeper_secrets_manager_core.configkeys import ConfigKeys
from keeper_secrets_manager_core.exceptions import KeeperError
from keeper_secrets_manager_core.storage import InMemoryKeyValueStorage

from gateway_vault.enums import EnumInfraTransportType
from gateway_vault.errors import (
    InfraVaultError,
    InvalidConfigurationError,
    MissingConfigurationError,
    ModelInfraErrorContext,
)
from gateway_vault.runtime.models.model_ksm_connection_options import (
    ModelKsmConnectionOptions,
)

logger = logging.getLogger(__name__)

VAULT_TARGET_NAME: Final[str] = "keeper-secrets-manager"

# Environment variable the KSM SDK reads to override certificate verification
SKIP_VERIFY_ENV_VAR: Final[str] = "KSM_SKIP_VERIFY"

_KNOWN_CONFIG_KEYS: Final[frozenset[str]] = frozenset(key.value for key in ConfigKeys)


def _vault_context(operation: str) -> ModelInfraErrorContext:
    return ModelInfraErrorContext.with_correlation(
        transport_type=EnumInfraTransportType.VAULT,
        operation=operation,
        target_name=VAULT_TARGET_NAME,
    )


def parse_ksm_config(value: str) -> InMemoryKeyValueStorage:
    """Parse a base64-encoded JSON KSM configuration into key-value storage.

    Args:
        value: The base64-encoded JSON KSM configuration to parse.

    Returns:
        In-memory storage holding the decoded configuration. A new instance
        is returned on every call.

    Raises:
        InvalidConfigurationError: If the value is not valid base64, does not
            decode to a JSON object, contains no KSM configuration keys, or
            holds a KSM configuration key whose value is not a string.
    """
    context = _vault_context("parse_config")

    try:
        decoded = base64.b64decode(value, validate=True).decode("utf-8")
        config = json.loads(decoded)
    except (binascii.Error, ValueError, TypeError) as e:
        # json.JSONDecodeError and UnicodeDecodeError are ValueErrors
        raise InvalidConfigurationError(
            "Invalid base64 configuration for Keeper Secrets Manager.",
            context=context,
            reason=type(e).__name__,
        ) from e

    if not isinstance(config, dict):
        raise InvalidConfigurationError(
            "Keeper Secrets Manager configuration must be a JSON object.",
            context=context,
            json_type=type(config).__name__,
        )

    unknown_keys = sorted(key for key in config if key not in _KNOWN_CONFIG_KEYS)
    if unknown_keys:
        logger.debug(
            "Ignoring unrecognized Keeper Secrets Manager configuration keys: %s",
            ", ".join(unknown_keys),
        )

    known = {key: item for key, item in config.items() if key in _KNOWN_CONFIG_KEYS}
    if not known:
        raise InvalidConfigurationError(
            "Keeper Secrets Manager configuration contains no recognized keys.",
            context=context,
        )

    non_string_keys = sorted(
        key for key, item in known.items() if not isinstance(item, str)
    )
    if non_string_keys:
        raise InvalidConfigurationError(
            "Keeper Secrets Manager configuration values must be strings.",
            context=context,
            invalid_keys=", ".join(non_string_keys),
        )

    return InMemoryKeyValueStorage(known)


def require_ksm_config(ksm_config: str | None) -> str:
    """Return ``ksm_config`` unchanged if it is a non-blank string.

    Raises:
        MissingConfigurationError: If ``ksm_config`` is None or blank.
    """
    if ksm_config is None or not ksm_config.strip():
        raise MissingConfigurationError(
            "A Keeper Secrets Manager configuration is required.",
            property_name="ksm_config",
            context=_vault_context("build_options"),
        )
    return ksm_config


def build_secrets_manager_options(
    ksm_config: str | None,
    allow_unverified_certificate: bool,
) -> ModelKsmConnectionOptions:
    """Build the options needed to open a Keeper Secrets Manager session.

    Args:
        ksm_config: The base64-encoded JSON KSM configuration blob. Must be
            non-empty.
        allow_unverified_certificate: Whether unverified server certificates
            are accepted.

    Returns:
        Options holding freshly parsed storage, no request queue and the
        given TLS policy.

    Raises:
        MissingConfigurationError: If ``ksm_config`` is None or blank. Raised
            before any parsing is attempted.
        InvalidConfigurationError: If ``ksm_config`` cannot be parsed.
    """
    storage = parse_ksm_config(require_ksm_config(ksm_config))
    return ModelKsmConnectionOptions(
        storage=storage,
        request_queue=None,
        allow_unverified_certificate=allow_unverified_certificate,
    )


def create_secrets_manager(options: ModelKsmConnectionOptions) -> SecretsManager:
    """Open a Keeper Secrets Manager client from connection options.

    Args:
        options: Options produced by ``build_secrets_manager_options``.

    Returns:
        A SecretsManager bound to the options' storage.

    Raises:
        InfraVaultError: If the SDK rejects the configuration.
    """
    if options.allow_unverified_certificate:
        logger.warning(
            "Keeper Secrets Manager server certificates will not be verified"
        )

    # The SDK replaces verify_ssl_certs with this variable's value when set
    if SKIP_VERIFY_ENV_VAR in os.environ:
        logger.warning(
            "%s is set and overrides the configured Keeper Secrets Manager "
            "certificate verification policy",
            SKIP_VERIFY_ENV_VAR,
        )

    try:
        return SecretsManager(
            config=options.storage,
            verify_ssl_certs=not options.allow_unverified_certificate,
        )
    except (KeeperError, ValueError) as e:
        raise InfraVaultError(
            "Failed to initialize Keeper Secrets Manager client",
            context=_vault_context("create_client"),
            error_type=type(e).__name__,
        ) from e


__all__: list[str] = [
    "SKIP_VERIFY_ENV_VAR",
    "VAULT_TARGET_NAME",
    "build_secrets_manager_options",
    "create_secrets_manager",
    "parse_ksm_config",
    "require_ksm_config",
]
