# SPDX-License-Identifier: MIT
"""Tests for the webext validate command."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest
from click.testing import CliRunner

from webext_cli.config import ConfigError
from webext_cli.main import cli, main

THEME_WITH_DEPRECATION = {
    "manifest_version": 2,
    "name": "Test Theme",
    "version": "1.0",
    "theme": {"colors": {"accentcolor": "#000000", "tab_background_text": "#ffffff"}},
}


class TestValidateCommand:
    """Tests for webext validate command."""

    def test_valid_manifest(self, cli_runner: CliRunner, write_json, minimal_manifest) -> None:
        """A valid manifest passes."""
        result = cli_runner.invoke(cli, ["validate", str(write_json(minimal_manifest))])

        assert result.exit_code == 0
        assert "Validation passed!" in result.output

    def test_invalid_manifest(self, cli_runner: CliRunner, write_json) -> None:
        """Errors are listed with their field and the command fails."""
        path = write_json({"manifest_version": 2, "name": "Test Extension"})

        result = cli_runner.invoke(cli, ["validate", str(path)])

        assert result.exit_code == 1
        assert "[version] Missing required field: version" in result.output
        assert "Validation failed!" in result.output

    def test_mv3_needs_flag(self, cli_runner: CliRunner, write_json, minimal_manifest) -> None:
        """manifest_version 3 is rejected unless enabled."""
        path = write_json({**minimal_manifest, "manifest_version": 3})

        assert cli_runner.invoke(cli, ["validate", str(path)]).exit_code == 1
        assert cli_runner.invoke(cli, ["validate", "--mv3", str(path)]).exit_code == 0

    def test_mv3_from_environment(self, cli_runner: CliRunner, write_json, minimal_manifest) -> None:
        """WEBEXT_ENABLE_MV3 enables manifest version 3."""
        path = write_json({**minimal_manifest, "manifest_version": 3})

        result = cli_runner.invoke(cli, ["validate", str(path)], env={"WEBEXT_ENABLE_MV3": "true"})

        assert result.exit_code == 0

    def test_unsupported_property(self, cli_runner: CliRunner, write_json, minimal_manifest) -> None:
        """Properties from another manifest generation are reported."""
        path = write_json({**minimal_manifest, "manifest_version": 3, "browser_action": {}})

        result = cli_runner.invoke(cli, ["validate", "--mv3", str(path)])

        assert result.exit_code == 1
        assert "[browser_action] is in a format only supported in manifest versions <= 2" in result.output

    def test_deprecation_is_warning(self, cli_runner: CliRunner, write_json) -> None:
        """Deprecated properties warn but pass."""
        path = write_json(THEME_WITH_DEPRECATION)

        result = cli_runner.invoke(cli, ["validate", "--kind", "theme", str(path)])

        assert result.exit_code == 0
        assert "please use 'frame' instead" in result.output
        assert "Validation passed with warnings." in result.output

    def test_deprecation_fails_in_strict_mode(self, cli_runner: CliRunner, write_json) -> None:
        """--strict turns deprecation warnings into a failure."""
        path = write_json(THEME_WITH_DEPRECATION)

        result = cli_runner.invoke(cli, ["validate", "-k", "theme", "--strict", str(path)])

        assert result.exit_code == 1
        assert "strict mode" in result.output

    def test_strict_from_environment(self, cli_runner: CliRunner, write_json) -> None:
        """WEBEXT_STRICT enables strict mode."""
        path = write_json(THEME_WITH_DEPRECATION)

        result = cli_runner.invoke(cli, ["validate", "-k", "theme", str(path)], env={"WEBEXT_STRICT": "1"})

        assert result.exit_code == 1

    def test_messages_kind(self, cli_runner: CliRunner, write_json) -> None:
        """Locale message files can be validated."""
        path = write_json({"extensionName": {"message": "Test"}}, "messages.json")

        result = cli_runner.invoke(cli, ["validate", "-k", "messages", str(path)])

        assert result.exit_code == 0

    def test_invalid_json(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        """Unparseable files fail with a syntax error."""
        path = tmp_path / "manifest.json"
        path.write_text("{not json")

        result = cli_runner.invoke(cli, ["validate", str(path)])

        assert result.exit_code == 1
        assert "Invalid JSON syntax" in result.output

    def test_missing_file(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        """Missing files are a usage error."""
        result = cli_runner.invoke(cli, ["validate", str(tmp_path / "missing.json")])

        assert result.exit_code == 2

    def test_invalid_environment(self, cli_runner: CliRunner, write_json, minimal_manifest) -> None:
        """Invalid configuration raises ConfigError."""
        path = write_json(minimal_manifest)

        result = cli_runner.invoke(cli, ["validate", str(path)], env={"WEBEXT_STRICT": "maybe"})

        assert isinstance(result.exception, ConfigError)

    def test_verbose(self, cli_runner: CliRunner, write_json, minimal_manifest) -> None:
        """-v is accepted before the command."""
        result = cli_runner.invoke(cli, ["-v", "validate", str(write_json(minimal_manifest))])

        assert result.exit_code == 0


class TestMain:
    """Tests for the main entry point."""

    def test_version(self, cli_runner: CliRunner) -> None:
        """--version prints the version."""
        result = cli_runner.invoke(cli, ["--version"])

        assert result.exit_code == 0
        assert "0.1.0" in result.output

    def test_config_error_reported(self, monkeypatch, capsys, write_json, minimal_manifest) -> None:
        """main() reports configuration errors and exits with status 1."""
        path = write_json(minimal_manifest)
        monkeypatch.setenv("WEBEXT_STRICT", "maybe")
        monkeypatch.setattr(sys, "argv", ["webext", "validate", str(path)])

        with pytest.raises(SystemExit) as exc_info:
            main()

        assert exc_info.value.code == 1
        assert "WEBEXT_STRICT" in capsys.readouterr().err
