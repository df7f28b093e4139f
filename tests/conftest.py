# SPDX-License-Identifier: MIT
"""Pytest configuration for integration tests."""

from __future__ import annotations

from pathlib import Path

import pytest

ENV_VARS = ("WEBEXT_ENABLE_MV3", "WEBEXT_STRICT", "WEBEXT_MANIFEST_VERSION")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep configuration from the caller's environment out of the tests."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def samples_dir() -> Path:
    """Directory holding the sample extensions."""
    return Path(__file__).parent
