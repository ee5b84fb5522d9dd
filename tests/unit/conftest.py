# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Shared pytest configuration for unit tests.

Applies the ``unit`` marker to every test collected under tests/unit so
that ``pytest -m unit`` selects them without per-module ``pytestmark``.
"""

import pytest


def pytest_collection_modifyitems(
    config: pytest.Config,
    items: list[pytest.Item],
) -> None:
    """Add the unit marker to all tests in the unit directory."""
    unit_marker = pytest.mark.unit

    for item in items:
        if "tests/unit" in str(item.path) and item.get_closest_marker("unit") is None:
            item.add_marker(unit_marker)
