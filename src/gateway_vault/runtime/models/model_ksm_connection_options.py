# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Options for opening a Keeper Secrets Manager session.

Security Note:
    ``storage`` holds decoded client credentials. The model's repr never
    renders the storage contents, and callers must not log it.
"""

from __future__ import annotations

from keeper_secrets_manager_core.storage import KeyValueStorage
from pydantic import BaseModel, ConfigDict, Field


class ModelKsmConnectionOptions(BaseModel):
    """Immutable options value built once per resolution call.

    Attributes:
        storage: Key-value storage decoded from the KSM configuration blob
        request_queue: Optional request queue; always None on every path
            this library builds
        allow_unverified_certificate: Skip TLS certificate verification
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        arbitrary_types_allowed=True,
    )

    storage: KeyValueStorage = Field(
        repr=False,
        description="KSM key-value storage holding client credentials",
    )
    request_queue: object | None = Field(
        default=None,
        description="Optional request queue (unused)",
    )
    allow_unverified_certificate: bool = Field(
        default=False,
        description="Whether unverified server certificates are accepted",
    )


__all__: list[str] = ["ModelKsmConnectionOptions"]
