# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Directory Operation Enumeration."""

from enum import Enum


class EnumDirectoryOperation(str, Enum):
    """Mutations of a directory object that raise a directory event."""

    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


__all__ = ["EnumDirectoryOperation"]
