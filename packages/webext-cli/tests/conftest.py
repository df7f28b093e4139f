# SPDX-License-Identifier: MIT
"""Pytest configuration and fixtures for CLI tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Callable

import pytest
from click.testing import CliRunner

ENV_VARS = ("WEBEXT_ENABLE_MV3", "WEBEXT_STRICT", "WEBEXT_MANIFEST_VERSION")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep configuration from the caller's environment out of the tests."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def write_json(tmp_path: Path) -> Callable[[object, str], Path]:
    """Return a helper writing a JSON document into the temp directory."""

    def write(document: object, name: str = "manifest.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(document))
        return path

    return write


@pytest.fixture
def minimal_manifest() -> dict:
    """A minimal valid manifest."""
    return {"manifest_version": 2, "name": "Test Extension", "version": "1.0"}
