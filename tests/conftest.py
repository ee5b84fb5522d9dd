# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Pytest configuration and shared fixtures for gateway_vault tests."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from gateway_vault.runtime.local_environment import LocalEnvironment
from tests.helpers import SAMPLE_KSM_CONFIG, encode_config


@pytest.fixture
def ksm_config_blob() -> str:
    """A valid base64 JSON KSM configuration blob."""
    return encode_config(SAMPLE_KSM_CONFIG)


@pytest.fixture
def guacamole_home(tmp_path: Path) -> Path:
    """An empty configuration home directory."""
    home = tmp_path / "guacamole-home"
    home.mkdir()
    return home


@pytest.fixture
def make_environment() -> Callable[..., LocalEnvironment]:
    """Factory for LocalEnvironment isolated from the process environment."""

    def _make(
        properties: dict[str, str] | None = None,
        *,
        environ: dict[str, str] | None = None,
        home: Path | None = None,
    ) -> LocalEnvironment:
        return LocalEnvironment(properties, home=home, environ=environ or {})

    return _make
