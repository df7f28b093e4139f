# SPDX-License-Identifier: MIT
"""CLI configuration loading from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"", "0", "false", "no", "off"}


class ConfigError(Exception):
    """Raised when configuration loading fails."""

    pass


def _parse_bool(name: str, value: str) -> bool:
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ConfigError(f"{name} must be a boolean (true/false), got {value!r}")


@dataclass
class LinterConfig:
    """Linter configuration.

    Attributes:
        enable_manifest_version3: Accept manifest_version 3 in add-on manifests
        strict: Treat deprecation warnings as errors
        manifest_version: Manifest version assumed when checking API
            references (None means the default)
    """

    enable_manifest_version3: bool = False
    strict: bool = False
    manifest_version: Optional[int] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "LinterConfig":
        """Create configuration from environment variables.

        Reads ``WEBEXT_ENABLE_MV3``, ``WEBEXT_STRICT`` and
        ``WEBEXT_MANIFEST_VERSION``.

        Raises:
            ConfigError: If a variable holds an invalid value
        """
        if environ is None:
            environ = os.environ

        config = cls()

        if (value := environ.get("WEBEXT_ENABLE_MV3")) is not None:
            config.enable_manifest_version3 = _parse_bool("WEBEXT_ENABLE_MV3", value)
        if (value := environ.get("WEBEXT_STRICT")) is not None:
            config.strict = _parse_bool("WEBEXT_STRICT", value)

        if version := environ.get("WEBEXT_MANIFEST_VERSION", "").strip():
            try:
                config.manifest_version = int(version)
            except ValueError:
                raise ConfigError(
                    f"WEBEXT_MANIFEST_VERSION must be an integer, got {version!r}"
                ) from None
            if config.manifest_version < 1:
                raise ConfigError("WEBEXT_MANIFEST_VERSION must be at least 1")

        return config
