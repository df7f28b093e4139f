# SPDX-License-Identifier: MIT
"""Command line interface for WebExtension manifest and API checks."""
