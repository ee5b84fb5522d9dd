# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Directory object event model.

Concrete, immutable implementation of ProtocolDirectoryObjectEvent. The
producer of the event decides whether it can cheaply include the affected
object: typically yes right after an in-process mutation, no after a
deletion or an external change.

Example:
    >>> event = ModelDirectoryObjectEvent[User](
    ...     directory_type=EnumDirectoryType.USER,
    ...     operation=EnumDirectoryOperation.DELETE,
    ...     object_identifier="guacadmin",
    ... )
    >>> event.object is None
    True
"""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from gateway_vault.enums import EnumDirectoryOperation, EnumDirectoryType

ObjectT = TypeVar("ObjectT")


class ModelDirectoryObjectEvent(BaseModel, Generic[ObjectT]):
    """Notification that an object in a directory was created, updated or deleted.

    Attributes:
        directory_type: Type of directory containing the affected object
        operation: Mutation that was performed
        object_identifier: Identifier of the affected object (always present)
        object: Snapshot of the affected object, or None if unavailable
        authenticated_user: Identifier of the user who performed the operation
        authentication_provider: Identifier of the provider owning the directory
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        arbitrary_types_allowed=True,
    )

    directory_type: EnumDirectoryType = Field(
        description="Type of directory containing the affected object",
    )
    operation: EnumDirectoryOperation = Field(
        description="Mutation that was performed",
    )
    object_identifier: str = Field(
        min_length=1,
        description="Identifier of the affected object",
    )
    object: ObjectT | None = Field(
        default=None,
        description="Affected object, if available in this context",
    )
    authenticated_user: str | None = Field(
        default=None,
        description="Identifier of the user who performed the operation",
    )
    authentication_provider: str | None = Field(
        default=None,
        description="Identifier of the authentication provider owning the directory",
    )

    @property
    def has_object(self) -> bool:
        """Whether a snapshot of the affected object was supplied."""
        return self.object is not None


__all__: list[str] = ["ModelDirectoryObjectEvent"]
