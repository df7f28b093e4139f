# SPDX-License-Identifier: MIT
"""Check browser API availability for a manifest version."""

from __future__ import annotations

import logging
from typing import Optional

import click

from webext_apis import (
    IssueCode,
    api_name,
    check_api_usage,
    default_table,
    effective_manifest_version,
    max_supported_version,
    min_required_version,
    split_api_reference,
)

from ..main import Context, echo_error, echo_info, echo_success, echo_warning, pass_context

logger = logging.getLogger(__name__)


def _describe_window(namespace: str, member: str) -> str:
    """Describe the manifest versions an API is available in."""
    if default_table().get_member(namespace, member) is None:
        return "unknown API"
    low = min_required_version(namespace, member, None)
    high = max_supported_version(namespace, member, None)
    if low and high is not None:
        return f"available in manifest versions {low} to {high}"
    if low:
        return f"available from manifest version {low}"
    if high is not None:
        return f"available up to manifest version {high}"
    return "available in all manifest versions"


@click.command()
@click.argument("references", nargs=-1, required=True)
@click.option(
    "--manifest-version",
    "-m",
    type=click.IntRange(min=1),
    default=None,
    help="Manifest version to check against (default: 2).",
)
@click.option(
    "--strict",
    is_flag=True,
    help="Treat deprecated APIs as errors.",
)
@pass_context
def api(ctx: Context, references: tuple[str, ...], manifest_version: Optional[int], strict: bool) -> None:
    """Check whether browser APIs are available.

    Each REFERENCE is namespace.member or browser.namespace.member.
    WEBEXT_MANIFEST_VERSION sets the default manifest version.

    \b
    Examples:
        webext api tabs.query
        webext api browser.tabs.executeScript -m 3
        webext api runtime.getBackgroundPage action.setIcon --manifest-version 3
    """
    config = ctx.load_config()
    strict = strict or config.strict
    if manifest_version is None:
        manifest_version = config.manifest_version

    metadata = None if manifest_version is None else {"manifestVersion": manifest_version}
    echo_info(f"Checking APIs for manifest version {effective_manifest_version(metadata)}")

    failures = 0
    deprecations = 0

    for reference in references:
        split = split_api_reference(reference)
        if split is None:
            echo_error(f"{reference}: not an API reference (expected namespace.member)")
            failures += 1
            continue

        namespace, member = split
        name = api_name(namespace, member)
        codes = {issue.code: issue.message for issue in check_api_usage([reference], metadata)}
        logger.debug("%s -> %s", name, sorted(codes) or "ok")

        if IssueCode.UNSUPPORTED_API in codes:
            echo_error(f"{codes[IssueCode.UNSUPPORTED_API]} ({_describe_window(namespace, member)})")
            failures += 1
            continue

        if IssueCode.DEPRECATED_API in codes:
            echo_warning(codes[IssueCode.DEPRECATED_API])
            deprecations += 1
        if IssueCode.TEMPORARY_API in codes:
            echo_warning(codes[IssueCode.TEMPORARY_API])
        if not codes:
            echo_success(f"{name} is supported")

    if failures or (strict and deprecations):
        raise SystemExit(1)
