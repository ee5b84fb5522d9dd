# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Names of the auxiliary files mapping local names onto vault secrets."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ModelMappingFileReferences(BaseModel):
    """The two mapping files a vault backend reads from the configuration home.

    Only the names are held here. Loading the files is the job of the
    mapping loader that consumes them.

    Attributes:
        token_mapping_filename: YAML file mapping connection parameter tokens
            to the names of the secrets supplying their values
        properties_filename: Properties file whose values are the names of
            secrets holding the actual configuration values
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    token_mapping_filename: str = Field(
        min_length=1,
        description="Token-to-secret YAML mapping file name",
    )
    properties_filename: str = Field(
        min_length=1,
        description="Property-to-secret mapping file name",
    )


__all__: list[str] = ["ModelMappingFileReferences"]
