# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Local configuration environment for the gateway.

LocalEnvironment answers "what is the value of property X" from two sources:

    1. Environment variables (PROPERTY_NAME upper-cased, ``-`` -> ``_``),
       consulted only when ``enable-environment-properties`` is true
    2. guacamole.properties in the configuration home

Design Philosophy:
    - Dumb and deterministic: reads values, never caches parsed results
    - Absent means "use the default"; present-but-invalid always raises
    - File properties are an immutable snapshot taken at construction

Example:
    Load from the configuration home::

        environment = LocalEnvironment.from_home()
        service = KsmConfigurationService(environment)

    Or build directly (tests, embedding)::

        environment = LocalEnvironment({"ksm-config": blob})

Thread Safety:
    Instances hold no mutable state. ``get_property`` may be called from
    any number of threads concurrently.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Final, TypeVar, overload

from gateway_vault.enums import EnumInfraTransportType
from gateway_vault.errors import MissingConfigurationError, ModelInfraErrorContext
from gateway_vault.runtime.models.model_local_property import (
    BooleanLocalProperty,
    ModelLocalProperty,
)
from gateway_vault.runtime.util_properties_file import load_properties_file

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Environment variable naming the configuration home directory
HOME_ENV_VAR: Final[str] = "GUACAMOLE_HOME"

# Configuration home used when HOME_ENV_VAR is unset
DEFAULT_HOME: Final[Path] = Path("~/.guacamole")

PROPERTIES_FILENAME: Final[str] = "guacamole.properties"

ENABLE_ENVIRONMENT_PROPERTIES: Final = BooleanLocalProperty(
    name="enable-environment-properties",
)


class LocalEnvironment:
    """Read-only view over local gateway configuration.

    Attributes:
        home: Configuration home directory, if one was supplied
    """

    def __init__(
        self,
        properties: Mapping[str, str] | None = None,
        *,
        home: Path | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        """Initialize LocalEnvironment.

        Args:
            properties: Properties as read from guacamole.properties
            home: Configuration home directory holding auxiliary files
            environ: Environment used for overrides; defaults to os.environ,
                read at lookup time
        """
        self._properties: Mapping[str, str] = MappingProxyType(dict(properties or {}))
        self._environ = environ
        self.home = home
        self._environment_overrides = self._read_property(
            ENABLE_ENVIRONMENT_PROPERTIES, use_environ=False
        ) or False

    @classmethod
    def from_home(cls, home: Path | None = None) -> LocalEnvironment:
        """Load guacamole.properties from a configuration home.

        Args:
            home: Configuration home. Defaults to $GUACAMOLE_HOME, then
                ~/.guacamole.

        Raises:
            ProtocolConfigurationError: If the properties file cannot be read.
            ConfigurationParseError: If enable-environment-properties is not
                a boolean.
        """
        if home is None:
            home = Path(os.environ.get(HOME_ENV_VAR) or DEFAULT_HOME)
        home = home.expanduser()

        properties = load_properties_file(home / PROPERTIES_FILENAME)
        return cls(properties, home=home)

    @property
    def environment_overrides(self) -> bool:
        """Whether environment variables override file properties."""
        return self._environment_overrides

    def resolve_path(self, filename: str) -> Path | None:
        """Return ``filename`` inside the configuration home, if one is set."""
        if self.home is None:
            return None
        return self.home / filename

    @overload
    def get_property(self, prop: ModelLocalProperty[T]) -> T | None: ...

    @overload
    def get_property(self, prop: ModelLocalProperty[T], default: T) -> T: ...

    def get_property(
        self,
        prop: ModelLocalProperty[T],
        default: T | None = None,
    ) -> T | None:
        """Return the parsed value of a property, or ``default`` if absent.

        Raises:
            ConfigurationParseError: If the property is present but invalid.
        """
        value = self._read_property(prop, use_environ=self._environment_overrides)
        if value is None:
            return default
        return value

    def get_required_property(self, prop: ModelLocalProperty[T]) -> T:
        """Return the parsed value of a property that must be present.

        Raises:
            MissingConfigurationError: If the property is absent.
            ConfigurationParseError: If the property is present but invalid.
        """
        value = self._read_property(prop, use_environ=self._environment_overrides)
        if value is None:
            context = ModelInfraErrorContext.with_correlation(
                transport_type=EnumInfraTransportType.RUNTIME,
                operation="get_required_property",
                target_name=prop.name,
            )
            raise MissingConfigurationError(
                f"Property '{prop.name}' is required but not set",
                property_name=prop.name,
                context=context,
            )
        return value

    def _read_property(
        self,
        prop: ModelLocalProperty[T],
        *,
        use_environ: bool,
    ) -> T | None:
        raw: str | None = None
        if use_environ:
            environ = os.environ if self._environ is None else self._environ
            raw = environ.get(prop.env_name)
            if raw is not None:
                logger.debug(
                    "Property %s read from environment variable %s",
                    prop.name,
                    prop.env_name,
                )

        if raw is None:
            raw = self._properties.get(prop.name)

        if raw is None:
            return None
        return prop.parse(raw)


__all__: list[str] = [
    "DEFAULT_HOME",
    "ENABLE_ENVIRONMENT_PROPERTIES",
    "HOME_ENV_VAR",
    "LocalEnvironment",
    "PROPERTIES_FILENAME",
]
