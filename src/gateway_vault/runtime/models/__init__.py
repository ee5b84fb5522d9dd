# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Runtime configuration models."""

from gateway_vault.runtime.models.model_ksm_connection_options import (
    ModelKsmConnectionOptions,
)
from gateway_vault.runtime.models.model_local_property import (
    BooleanLocalProperty,
    ModelLocalProperty,
    StringLocalProperty,
)
from gateway_vault.runtime.models.model_mapping_file_references import (
    ModelMappingFileReferences,
)
from gateway_vault.runtime.models.model_vault_configuration_flags import (
    ModelVaultConfigurationFlags,
)

__all__: list[str] = [
    "BooleanLocalProperty",
    "ModelKsmConnectionOptions",
    "ModelLocalProperty",
    "ModelMappingFileReferences",
    "ModelVaultConfigurationFlags",
    "StringLocalProperty",
]
