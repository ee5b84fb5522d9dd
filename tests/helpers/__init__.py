# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Test helpers for gateway_vault tests.

Available Utilities:
    KSM Configs:
        - SAMPLE_KSM_CONFIG: Decoded configuration in Keeper Commander CLI shape
        - encode_config: Encode a JSON value as a base64 configuration blob

    Log Helpers:
        - filter_module_records: Filter captured log records by module and level
"""

from tests.helpers.ksm_configs import SAMPLE_KSM_CONFIG, encode_config
from tests.helpers.log_helpers import filter_module_records

__all__ = [
    "SAMPLE_KSM_CONFIG",
    "encode_config",
    "filter_module_records",
]
