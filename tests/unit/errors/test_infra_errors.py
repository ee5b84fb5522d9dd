# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Tests for gateway_vault error classes.

Validates:
- Inheritance chain and distinct failure kinds
- Error code mapping
- Structured context via ModelInfraErrorContext
- Error chaining (raise ... from e)
"""

from uuid import UUID, uuid4

import pytest
from omnibase_core.enums.enum_core_error_code import EnumCoreErrorCode
from omnibase_core.errors import ModelOnexError
from pydantic import ValidationError

from gateway_vault.enums import EnumInfraTransportType
from gateway_vault.errors import (
    ConfigurationParseError,
    InfraConnectionError,
    InfraVaultError,
    InvalidConfigurationError,
    MissingConfigurationError,
    ModelInfraErrorContext,
    ProtocolConfigurationError,
    RuntimeHostError,
)


class TestModelInfraErrorContext:
    """Tests for ModelInfraErrorContext."""

    def test_defaults_are_none(self) -> None:
        context = ModelInfraErrorContext()
        assert context.transport_type is None
        assert context.operation is None
        assert context.target_name is None
        assert context.correlation_id is None

    def test_with_correlation_generates_uuid4(self) -> None:
        context = ModelInfraErrorContext.with_correlation(
            transport_type=EnumInfraTransportType.VAULT,
            operation="parse_config",
        )
        assert isinstance(context.correlation_id, UUID)
        assert context.correlation_id.version == 4
        assert context.transport_type == EnumInfraTransportType.VAULT
        assert context.operation == "parse_config"

    def test_with_correlation_keeps_provided_id(self) -> None:
        provided = uuid4()
        context = ModelInfraErrorContext.with_correlation(correlation_id=provided)
        assert context.correlation_id == provided

    def test_immutability(self) -> None:
        context = ModelInfraErrorContext(transport_type=EnumInfraTransportType.RUNTIME)
        with pytest.raises(ValidationError):
            context.transport_type = EnumInfraTransportType.VAULT  # type: ignore[misc]

    def test_extra_fields_forbidden(self) -> None:
        with pytest.raises(ValidationError):
            ModelInfraErrorContext(secret="nope")  # type: ignore[call-arg]


class TestRuntimeHostError:
    """Tests for RuntimeHostError base class."""

    def test_is_onex_error(self) -> None:
        error = RuntimeHostError("Test error message")
        assert isinstance(error, ModelOnexError)
        assert "Test error message" in str(error)

    def test_default_error_code(self) -> None:
        error = RuntimeHostError("Test error")
        assert error.model.error_code == EnumCoreErrorCode.OPERATION_FAILED

    def test_context_fields_copied(self) -> None:
        correlation_id = uuid4()
        context = ModelInfraErrorContext(
            transport_type=EnumInfraTransportType.RUNTIME,
            operation="read_property",
            target_name="ksm-config",
            correlation_id=correlation_id,
        )
        error = RuntimeHostError("Test error", context=context, attempt=1)

        assert error.correlation_id == correlation_id
        assert error.model.context["transport_type"] == EnumInfraTransportType.RUNTIME
        assert error.model.context["operation"] == "read_property"
        assert error.model.context["target_name"] == "ksm-config"
        assert error.model.context["attempt"] == 1

    def test_error_chaining(self) -> None:
        original = ValueError("boom")
        try:
            raise RuntimeHostError("Wrapped") from original
        except RuntimeHostError as e:
            assert e.__cause__ is original


class TestConfigurationErrors:
    """Tests for the three configuration failure kinds."""

    def test_invalid_configuration_error(self) -> None:
        error = InvalidConfigurationError("Invalid blob")
        assert isinstance(error, ProtocolConfigurationError)
        assert error.model.error_code == EnumCoreErrorCode.INVALID_CONFIGURATION

    def test_configuration_parse_error(self) -> None:
        error = ConfigurationParseError("Bad boolean", property_name="ksm-allow-unverified-cert")
        assert isinstance(error, ProtocolConfigurationError)
        assert error.property_name == "ksm-allow-unverified-cert"
        assert error.model.error_code == EnumCoreErrorCode.CONFIGURATION_PARSE_ERROR
        assert error.model.context["property_name"] == "ksm-allow-unverified-cert"

    def test_missing_configuration_error(self) -> None:
        error = MissingConfigurationError("Missing", property_name="ksm-config")
        assert isinstance(error, ProtocolConfigurationError)
        assert error.property_name == "ksm-config"
        assert error.model.error_code == EnumCoreErrorCode.CONFIGURATION_NOT_FOUND

    @pytest.mark.parametrize(
        ("error_cls", "other_classes"),
        [
            (InvalidConfigurationError, (ConfigurationParseError, MissingConfigurationError)),
            (ConfigurationParseError, (InvalidConfigurationError, MissingConfigurationError)),
            (MissingConfigurationError, (InvalidConfigurationError, ConfigurationParseError)),
        ],
    )
    def test_failure_kinds_are_distinct(
        self,
        error_cls: type[ProtocolConfigurationError],
        other_classes: tuple[type[ProtocolConfigurationError], ...],
    ) -> None:
        for other in other_classes:
            assert not issubclass(error_cls, other)

    def test_protocol_configuration_error_default_code(self) -> None:
        error = ProtocolConfigurationError("Bad file")
        assert error.model.error_code == EnumCoreErrorCode.INVALID_CONFIGURATION


class TestInfraVaultError:
    """Tests for InfraVaultError."""

    def test_inheritance(self) -> None:
        error = InfraVaultError("Vault failed")
        assert isinstance(error, InfraConnectionError)
        assert isinstance(error, RuntimeHostError)

    def test_vault_context(self) -> None:
        context = ModelInfraErrorContext(
            transport_type=EnumInfraTransportType.VAULT,
            operation="create_client",
        )
        error = InfraVaultError(
            "Vault failed",
            context=context,
        )
        assert error.model.context["transport_type"] == EnumInfraTransportType.VAULT
        assert error.model.error_code == EnumCoreErrorCode.SERVICE_UNAVAILABLE
