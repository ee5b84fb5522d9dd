# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Resolved vault behavior flags."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ModelVaultConfigurationFlags(BaseModel):
    """Snapshot of the optional vault flags read from local configuration.

    Attributes:
        allow_unverified_certificate: Accept unverified vault server certificates
        split_windows_usernames: Strip Windows domains from usernames read from the vault
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    allow_unverified_certificate: bool = Field(
        default=False,
        description="Whether unverified server certificates are accepted",
    )
    split_windows_usernames: bool = Field(
        default=False,
        description="Whether Windows domains are stripped from vault usernames",
    )


__all__: list[str] = ["ModelVaultConfigurationFlags"]
