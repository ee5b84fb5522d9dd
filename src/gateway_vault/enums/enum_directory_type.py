# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Directory Type Enumeration.

The kinds of object stores a gateway authentication provider exposes.
"""

from enum import Enum


class EnumDirectoryType(str, Enum):
    """Types of objects stored within a directory.

    Attributes:
        ACTIVE_CONNECTION: Connections currently in use
        CONNECTION: Remote desktop connections
        CONNECTION_GROUP: Groups of connections
        SHARING_PROFILE: Sharing profiles attached to connections
        USER: User accounts
        USER_GROUP: Groups of users
    """

    ACTIVE_CONNECTION = "active_connection"
    CONNECTION = "connection"
    CONNECTION_GROUP = "connection_group"
    SHARING_PROFILE = "sharing_profile"
    USER = "user"
    USER_GROUP = "user_group"


__all__ = ["EnumDirectoryType"]
