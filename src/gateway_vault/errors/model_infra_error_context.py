# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Infrastructure Error Context Configuration Model.

This module defines the configuration model for infrastructure error context,
encapsulating common structured fields to reduce __init__ parameter count
while keeping them strongly typed.
"""

from __future__ import annotations

from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field

from gateway_vault.enums import EnumInfraTransportType


class ModelInfraErrorContext(BaseModel):
    """Bundled context for infrastructure errors.

    Attributes:
        transport_type: Transport the failing operation used (VAULT, RUNTIME, ...)
        operation: Operation being performed (parse_config, read_property, ...)
        target_name: Target resource name (property name, vault name, ...)
        correlation_id: Request correlation ID for distributed tracing

    Example:
        >>> context = ModelInfraErrorContext(
        ...     transport_type=EnumInfraTransportType.VAULT,
        ...     operation="parse_config",
        ...     target_name="keeper-secrets-manager",
        ... )
        >>> raise InvalidConfigurationError("Invalid blob", context=context)
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    transport_type: EnumInfraTransportType | None = Field(
        default=None,
        description="Type of infrastructure transport (VAULT, RUNTIME, etc.)",
    )
    operation: str | None = Field(
        default=None,
        description="Operation being performed",
    )
    target_name: str | None = Field(
        default=None,
        description="Target resource or property name",
    )
    correlation_id: UUID | None = Field(
        default=None,
        description="Request correlation ID for distributed tracing",
    )

    @classmethod
    def with_correlation(
        cls,
        correlation_id: UUID | None = None,
        **kwargs: object,
    ) -> ModelInfraErrorContext:
        """Create a context, generating a correlation ID when none is given."""
        return cls(correlation_id=correlation_id or uuid4(), **kwargs)


__all__ = ["ModelInfraErrorContext"]
