# SPDX-License-Identifier: MIT
"""Report issues for browser API references found in extension code.

Finding the references is left to the caller (usually a linter walking
JavaScript syntax). This module turns ``browser.namespace.member`` style
references into structured issues using the compatibility oracle.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from .oracle import AddonMetadata, has_api, is_deprecated, is_temporary
from .table import ApiTable, api_name

# Top-level identifiers under which the extension APIs are exposed
BROWSER_NAMESPACES = frozenset({"browser", "chrome"})


class IssueCode:
    """Issue codes emitted for API references."""

    UNSUPPORTED_API = "UNSUPPORTED_API"
    DEPRECATED_API = "DEPRECATED_API"
    TEMPORARY_API = "TEMPORARY_API"


_MESSAGES = {
    IssueCode.UNSUPPORTED_API: "{api} is not supported",
    IssueCode.DEPRECATED_API: "{api} is deprecated",
    IssueCode.TEMPORARY_API: "{api} can cause issues when loaded temporarily",
}


@dataclass(frozen=True, slots=True)
class ApiUsageIssue:
    """A problem found with one API reference.

    Attributes:
        code: One of the IssueCode values
        api: Fully-qualified API name (e.g., "tabs.executeScript")
        message: Human-readable description
    """

    code: str
    api: str
    message: str


def is_browser_namespace(name: str) -> bool:
    """Return True if ``name`` is a top-level extension API identifier."""
    return name in BROWSER_NAMESPACES


def parse_api_reference(reference: str) -> Optional[tuple[str, str]]:
    """Split a ``browser.namespace.member`` reference into (namespace, member).

    Returns None when the reference is not guarded by a recognised top-level
    identifier or does not have exactly three parts.

    Examples:
        >>> parse_api_reference("browser.tabs.query")
        ('tabs', 'query')
        >>> parse_api_reference("window.tabs.query") is None
        True
    """
    parts = reference.split(".")
    if len(parts) != 3 or not all(parts):
        return None
    top, namespace, member = parts
    if not is_browser_namespace(top):
        return None
    return namespace, member


def split_api_reference(reference: str) -> Optional[tuple[str, str]]:
    """Like parse_api_reference, but also accept an unguarded ``namespace.member``."""
    parsed = parse_api_reference(reference)
    if parsed is not None:
        return parsed
    parts = reference.split(".")
    if len(parts) == 2 and all(parts):
        return parts[0], parts[1]
    return None


def check_api_usage(
    references: Iterable[str],
    metadata: Optional[AddonMetadata] = None,
    table: Optional[ApiTable] = None,
) -> list[ApiUsageIssue]:
    """Check API references and return the issues found.

    Each reference is either ``namespace.member`` or guarded, as in
    ``browser.namespace.member``. References that match neither form are
    ignored. Each API is reported at most once per issue code, in the order
    first seen.

    Args:
        references: API references found in extension code
        metadata: Add-on metadata carrying ``manifestVersion``
        table: Table to consult (defaults to the shipped table)

    Returns:
        List of issues, empty if every reference is fine
    """
    issues: list[ApiUsageIssue] = []
    seen: set[tuple[str, str]] = set()

    for reference in references:
        split = split_api_reference(reference)
        if split is None:
            continue
        namespace, member = split
        api = api_name(namespace, member)

        codes = []
        if not has_api(namespace, member, metadata, table):
            codes.append(IssueCode.UNSUPPORTED_API)
        if is_deprecated(namespace, member, metadata, table):
            codes.append(IssueCode.DEPRECATED_API)
        if is_temporary(namespace, member, table):
            codes.append(IssueCode.TEMPORARY_API)

        for code in codes:
            if (code, api) in seen:
                continue
            seen.add((code, api))
            issues.append(ApiUsageIssue(code=code, api=api, message=_MESSAGES[code].format(api=api)))

    return issues
