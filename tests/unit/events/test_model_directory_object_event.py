# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for ModelDirectoryObjectEvent and the directory event protocols."""

from __future__ import annotations

from dataclasses import dataclass

import pytest
from pydantic import ValidationError

from gateway_vault.enums import EnumDirectoryOperation, EnumDirectoryType
from gateway_vault.events import ModelDirectoryObjectEvent
from gateway_vault.protocols import (
    ProtocolDirectoryEventListener,
    ProtocolDirectoryObjectEvent,
    ProtocolIdentifiable,
)


@dataclass(frozen=True)
class StubConnection:
    """Minimal identifiable directory object."""

    identifier: str
    name: str


class RecordingListener:
    """Listener that records the identifiers and objects it receives."""

    def __init__(self) -> None:
        self.seen: list[tuple[str, object | None]] = []

    def handle_event(
        self, event: ProtocolDirectoryObjectEvent[ProtocolIdentifiable]
    ) -> None:
        self.seen.append((event.object_identifier, event.object))


class TestModelDirectoryObjectEvent:
    """Tests for the event model."""

    def test_with_object(self) -> None:
        connection = StubConnection(identifier="42", name="rdp-host")
        event = ModelDirectoryObjectEvent[StubConnection](
            directory_type=EnumDirectoryType.CONNECTION,
            operation=EnumDirectoryOperation.UPDATE,
            object_identifier="42",
            object=connection,
            authenticated_user="guacadmin",
            authentication_provider="postgresql",
        )

        assert event.object is connection
        assert event.has_object is True
        assert event.directory_type == EnumDirectoryType.CONNECTION
        assert event.authenticated_user == "guacadmin"

    def test_absent_object_is_tolerated(self) -> None:
        event = ModelDirectoryObjectEvent[StubConnection](
            directory_type=EnumDirectoryType.CONNECTION,
            operation=EnumDirectoryOperation.DELETE,
            object_identifier="42",
        )

        assert event.object is None
        assert event.has_object is False
        assert event.object_identifier == "42"

    def test_identifier_required(self) -> None:
        with pytest.raises(ValidationError):
            ModelDirectoryObjectEvent(
                directory_type=EnumDirectoryType.USER,
                operation=EnumDirectoryOperation.CREATE,
                object_identifier="",
            )

    def test_immutable(self) -> None:
        event = ModelDirectoryObjectEvent(
            directory_type=EnumDirectoryType.USER,
            operation=EnumDirectoryOperation.CREATE,
            object_identifier="alice",
        )
        with pytest.raises(ValidationError):
            event.object_identifier = "bob"  # type: ignore[misc]

    def test_wrong_object_type_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ModelDirectoryObjectEvent[StubConnection](
                directory_type=EnumDirectoryType.CONNECTION,
                operation=EnumDirectoryOperation.CREATE,
                object_identifier="42",
                object="not a connection",
            )

    def test_enum_values_accepted(self) -> None:
        event = ModelDirectoryObjectEvent(
            directory_type="user_group",
            operation="create",
            object_identifier="admins",
        )
        assert event.directory_type is EnumDirectoryType.USER_GROUP
        assert event.operation is EnumDirectoryOperation.CREATE


class TestDirectoryEventProtocols:
    """Duck-typing conformance of the event contract."""

    def test_model_satisfies_event_protocol(self) -> None:
        event = ModelDirectoryObjectEvent(
            directory_type=EnumDirectoryType.SHARING_PROFILE,
            operation=EnumDirectoryOperation.CREATE,
            object_identifier="7",
        )
        assert isinstance(event, ProtocolDirectoryObjectEvent)

    def test_identifiable(self) -> None:
        assert isinstance(StubConnection(identifier="1", name="x"), ProtocolIdentifiable)

    def test_listener_receives_events_without_objects(self) -> None:
        listener = RecordingListener()
        assert isinstance(listener, ProtocolDirectoryEventListener)

        listener.handle_event(
            ModelDirectoryObjectEvent(
                directory_type=EnumDirectoryType.USER,
                operation=EnumDirectoryOperation.DELETE,
                object_identifier="alice",
            )
        )

        assert listener.seen == [("alice", None)]

    def test_event_object_is_bound_to_identifiable(self) -> None:
        (object_type,) = ProtocolDirectoryObjectEvent.__parameters__
        assert object_type.__bound__ is ProtocolIdentifiable

    def test_listener_receives_identifiable_object(self) -> None:
        listener = RecordingListener()
        connection = StubConnection(identifier="12", name="rdp-host")

        listener.handle_event(
            ModelDirectoryObjectEvent[StubConnection](
                directory_type=EnumDirectoryType.CONNECTION,
                operation=EnumDirectoryOperation.UPDATE,
                object_identifier="12",
                object=connection,
            )
        )

        assert listener.seen == [("12", connection)]
        assert isinstance(listener.seen[0][1], ProtocolIdentifiable)
