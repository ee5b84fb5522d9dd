# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Typed descriptors for local configuration properties.

A property descriptor pairs a well-known property name with the parser that
turns its raw text into a typed value. Descriptors are declared once, as
module constants, by the service that reads them::

    ALLOW_UNVERIFIED_CERT: Final = BooleanLocalProperty(name="ksm-allow-unverified-cert")

    allow = environment.get_property(ALLOW_UNVERIFIED_CERT, default=False)
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Final, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from gateway_vault.enums import EnumInfraTransportType
from gateway_vault.errors import ConfigurationParseError, ModelInfraErrorContext

T = TypeVar("T")

TRUE_VALUES: Final[frozenset[str]] = frozenset({"true", "yes", "on", "1"})
FALSE_VALUES: Final[frozenset[str]] = frozenset({"false", "no", "off", "0"})


class ModelLocalProperty(BaseModel, Generic[T]):
    """Base descriptor for a named local configuration property.

    Attributes:
        name: Property name as it appears in guacamole.properties
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(min_length=1, description="Property name")

    @property
    def env_name(self) -> str:
        """Environment variable that may override this property."""
        return self.name.upper().replace("-", "_")

    @abstractmethod
    def parse(self, value: str) -> T:
        """Convert raw property text into a typed value.

        Raises:
            ConfigurationParseError: If the text is not a valid value.
        """


class StringLocalProperty(ModelLocalProperty[str]):
    """Property whose value is used verbatim."""

    def parse(self, value: str) -> str:
        return value


class BooleanLocalProperty(ModelLocalProperty[bool]):
    """Property holding boolean text (true/false, yes/no, on/off, 1/0)."""

    def parse(self, value: str) -> bool:
        normalized = value.strip().lower()
        if normalized in TRUE_VALUES:
            return True
        if normalized in FALSE_VALUES:
            return False

        context = ModelInfraErrorContext.with_correlation(
            transport_type=EnumInfraTransportType.RUNTIME,
            operation="parse_property",
            target_name=self.name,
        )
        raise ConfigurationParseError(
            f"Property '{self.name}' must be a boolean "
            "(true/false, yes/no, on/off, 1/0)",
            property_name=self.name,
            context=context,
        )


__all__: list[str] = [
    "BooleanLocalProperty",
    "FALSE_VALUES",
    "ModelLocalProperty",
    "StringLocalProperty",
    "TRUE_VALUES",
]
