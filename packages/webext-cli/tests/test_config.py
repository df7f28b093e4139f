# SPDX-License-Identifier: MIT
"""Tests for CLI configuration."""

import pytest

from webext_cli.config import ConfigError, LinterConfig


class TestLinterConfigFromEnv:
    """Tests for LinterConfig.from_env."""

    def test_defaults(self):
        """An empty environment gives the defaults."""
        config = LinterConfig.from_env({})
        assert config == LinterConfig(enable_manifest_version3=False, strict=False, manifest_version=None)

    def test_reads_variables(self):
        """All variables are read."""
        config = LinterConfig.from_env(
            {"WEBEXT_ENABLE_MV3": "true", "WEBEXT_STRICT": "1", "WEBEXT_MANIFEST_VERSION": "3"}
        )
        assert config.enable_manifest_version3 is True
        assert config.strict is True
        assert config.manifest_version == 3

    @pytest.mark.parametrize("value", ["false", "0", "no", "off", ""])
    def test_false_values(self, value):
        """Common false spellings are accepted."""
        assert LinterConfig.from_env({"WEBEXT_STRICT": value}).strict is False

    def test_invalid_bool(self):
        """Unknown boolean spellings are an error."""
        with pytest.raises(ConfigError, match="WEBEXT_ENABLE_MV3"):
            LinterConfig.from_env({"WEBEXT_ENABLE_MV3": "maybe"})

    def test_invalid_manifest_version(self):
        """Non-integer manifest versions are an error."""
        with pytest.raises(ConfigError, match="integer"):
            LinterConfig.from_env({"WEBEXT_MANIFEST_VERSION": "three"})

    def test_manifest_version_too_small(self):
        """Manifest versions start at 1."""
        with pytest.raises(ConfigError, match="at least 1"):
            LinterConfig.from_env({"WEBEXT_MANIFEST_VERSION": "0"})

    def test_reads_process_environment(self, monkeypatch):
        """Without an explicit mapping the process environment is used."""
        monkeypatch.setenv("WEBEXT_MANIFEST_VERSION", "3")
        assert LinterConfig.from_env().manifest_version == 3
