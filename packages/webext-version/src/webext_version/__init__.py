# SPDX-License-Identifier: MIT
"""Manifest version bounds for WebExtension tooling.

This package provides the arithmetic shared by the API compatibility oracle
and the manifest schema keywords: intersecting maxima, unioning minima and
checking a manifest version against a bound.

Example:
    >>> from webext_version import VersionBound, in_range, intersect_max
    >>>
    >>> intersect_max(3, 2)
    2
    >>> in_range(2, VersionBound(min=3))
    False
"""

__version__ = "0.1.0"

from .bounds import (
    MANIFEST_VERSION_DEFAULT,
    MANIFEST_VERSION_MAX,
    MANIFEST_VERSION_MIN,
    MAX_KEY,
    MIN_KEY,
    UNBOUNDED,
    VersionBound,
    in_range,
    intersect_max,
    union_min,
)

__all__ = [
    # Constants
    "MANIFEST_VERSION_DEFAULT",
    "MANIFEST_VERSION_MIN",
    "MANIFEST_VERSION_MAX",
    "MIN_KEY",
    "MAX_KEY",
    # Bounds
    "VersionBound",
    "UNBOUNDED",
    "in_range",
    "intersect_max",
    "union_min",
]
