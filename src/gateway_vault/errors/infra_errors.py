# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Infrastructure-Specific Error Classes.

All error classes extend ModelOnexError (from omnibase_core) so that
configuration and vault failures carry an error code, a correlation ID and
structured context.

Error Hierarchy:
    ModelOnexError (from omnibase_core)
    └── RuntimeHostError (base infrastructure error)
        ├── ProtocolConfigurationError
        │   ├── InvalidConfigurationError
        │   ├── ConfigurationParseError
        │   └── MissingConfigurationError
        └── InfraConnectionError
            └── InfraVaultError (see error_vault.py)

Propagation:
    None of these errors are retried or recovered locally. They are raised
    at the point of resolution and surface to whichever subsystem is reading
    configuration or opening a vault session.
"""

from __future__ import annotations

from omnibase_core.enums.enum_core_error_code import EnumCoreErrorCode
from omnibase_core.models.errors.model_onex_error import ModelOnexError

from gateway_vault.errors.model_infra_error_context import ModelInfraErrorContext


class RuntimeHostError(ModelOnexError):
    """Base error class for infrastructure errors.

    Structured Fields (via ModelInfraErrorContext):
        transport_type: Type of transport (vault, runtime, ...)
        operation: Operation being performed
        correlation_id: Request correlation ID for tracking
        target_name: Target resource/property name

    Example:
        >>> context = ModelInfraErrorContext(
        ...     transport_type=EnumInfraTransportType.RUNTIME,
        ...     operation="read_property",
        ... )
        >>> raise RuntimeHostError("Operation failed", context=context)
    """

    def __init__(
        self,
        message: str,
        error_code: EnumCoreErrorCode | None = None,
        context: ModelInfraErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        """Initialize RuntimeHostError with structured fields.

        Args:
            message: Human-readable error message
            error_code: Error code (defaults to OPERATION_FAILED)
            context: Bundled infrastructure context (transport_type, operation, etc.)
            **extra_context: Additional context information
        """
        structured_context: dict[str, object] = dict(extra_context)

        correlation_id = None
        if context is not None:
            if context.transport_type is not None:
                structured_context["transport_type"] = context.transport_type
            if context.operation is not None:
                structured_context["operation"] = context.operation
            if context.target_name is not None:
                structured_context["target_name"] = context.target_name
            correlation_id = context.correlation_id

        super().__init__(
            message=message,
            error_code=error_code or EnumCoreErrorCode.OPERATION_FAILED,
            correlation_id=correlation_id,
            **structured_context,
        )


class ProtocolConfigurationError(RuntimeHostError):
    """Raised when configuration validation fails.

    Base class of the three configuration failure kinds below. Catch this
    when any configuration problem should halt the dependent subsystem.
    """

    def __init__(
        self,
        message: str,
        context: ModelInfraErrorContext | None = None,
        error_code: EnumCoreErrorCode = EnumCoreErrorCode.INVALID_CONFIGURATION,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            context=context,
            **extra_context,
        )


class InvalidConfigurationError(ProtocolConfigurationError):
    """Raised when an externally supplied vault configuration blob is malformed.

    The blob itself is never included in the message or context.

    Example:
        >>> raise InvalidConfigurationError(
        ...     "Invalid base64 configuration for Keeper Secrets Manager.",
        ...     context=context,
        ... )
    """

    def __init__(
        self,
        message: str,
        context: ModelInfraErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            context=context,
            error_code=EnumCoreErrorCode.INVALID_CONFIGURATION,
            **extra_context,
        )


class ConfigurationParseError(ProtocolConfigurationError):
    """Raised when a configuration property is present but cannot be parsed.

    Attributes:
        property_name: Name of the offending property
    """

    def __init__(
        self,
        message: str,
        property_name: str,
        context: ModelInfraErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        self.property_name = property_name
        super().__init__(
            message=message,
            context=context,
            error_code=EnumCoreErrorCode.CONFIGURATION_PARSE_ERROR,
            property_name=property_name,
            **extra_context,
        )


class MissingConfigurationError(ProtocolConfigurationError):
    """Raised when a required configuration value is absent.

    There is no safe default for these values; startup of the dependent
    subsystem must stop.

    Attributes:
        property_name: Name of the missing property or argument
    """

    def __init__(
        self,
        message: str,
        property_name: str,
        context: ModelInfraErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        self.property_name = property_name
        super().__init__(
            message=message,
            context=context,
            error_code=EnumCoreErrorCode.CONFIGURATION_NOT_FOUND,
            property_name=property_name,
            **extra_context,
        )


class InfraConnectionError(RuntimeHostError):
    """Raised when a connection to an external service cannot be established.

    Example:
        >>> context = ModelInfraErrorContext(
        ...     transport_type=EnumInfraTransportType.VAULT,
        ...     operation="create_client",
        ... )
        >>> raise InfraConnectionError("Failed to open session", context=context)
    """

    def __init__(
        self,
        message: str,
        context: ModelInfraErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumCoreErrorCode.SERVICE_UNAVAILABLE,
            context=context,
            **extra_context,
        )


__all__ = [
    "ConfigurationParseError",
    "InfraConnectionError",
    "InvalidConfigurationError",
    "MissingConfigurationError",
    "ProtocolConfigurationError",
    "RuntimeHostError",
]
