# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Directory object event protocols.

A directory object event is raised after an object in a directory has been
created, updated or deleted. Events are fired after the fact: by the time
a listener runs, the directory may already hold a different state.

Consumer rules:
    - ``object`` is advisory and may be None; never assume it is present
    - ``object_identifier`` is always present, even after deletion
    - Do not refetch the object from the directory inside a handler
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from gateway_vault.enums import EnumDirectoryOperation, EnumDirectoryType


@runtime_checkable
class ProtocolIdentifiable(Protocol):
    """An object stored in a directory, addressed by identifier."""

    @property
    def identifier(self) -> str | None:
        """Unique identifier within its directory."""
        ...


ObjectT_co = TypeVar("ObjectT_co", bound=ProtocolIdentifiable, covariant=True)


@runtime_checkable
class ProtocolDirectoryObjectEvent(Protocol[ObjectT_co]):
    """Notification of a change to an object within a directory."""

    @property
    def directory_type(self) -> EnumDirectoryType:
        """Type of directory containing the affected object."""
        ...

    @property
    def operation(self) -> EnumDirectoryOperation:
        """The mutation that was performed."""
        ...

    @property
    def object_identifier(self) -> str:
        """Identifier of the affected object."""
        ...

    @property
    def object(self) -> ObjectT_co | None:
        """The affected object, or None if not available in this context."""
        ...

    @property
    def authenticated_user(self) -> str | None:
        """Identifier of the user who performed the operation."""
        ...

    @property
    def authentication_provider(self) -> str | None:
        """Identifier of the authentication provider owning the directory."""
        ...


@runtime_checkable
class ProtocolDirectoryEventListener(Protocol):
    """Consumer of directory object events."""

    def handle_event(
        self, event: ProtocolDirectoryObjectEvent[ProtocolIdentifiable]
    ) -> None:
        """Handle an event that has already taken effect."""
        ...


__all__ = [
    "ProtocolDirectoryEventListener",
    "ProtocolDirectoryObjectEvent",
    "ProtocolIdentifiable",
]
