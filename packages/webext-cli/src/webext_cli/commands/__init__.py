# SPDX-License-Identifier: MIT
"""CLI command implementations."""

from . import api, validate

__all__ = ["api", "validate"]
