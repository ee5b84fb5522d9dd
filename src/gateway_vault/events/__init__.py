# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Directory event models."""

from gateway_vault.events.model_directory_object_event import (
    ModelDirectoryObjectEvent,
)

__all__: list[str] = ["ModelDirectoryObjectEvent"]
