# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Infrastructure Transport Type Enumeration.

Used for error context to identify which side of the library failed.
"""

from enum import Enum


class EnumInfraTransportType(str, Enum):
    """Transport types for gateway vault components.

    Attributes:
        VAULT: Keeper Secrets Manager transport
        RUNTIME: Local configuration resolution (properties file, environment)
    """

    VAULT = "vault"
    RUNTIME = "runtime"


__all__ = ["EnumInfraTransportType"]
