# SPDX-License-Identifier: MIT
"""Browser API compatibility lookups for WebExtension tooling.

This package answers whether a ``namespace.member`` API can be used under a
given manifest version:
- A typed compatibility table loaded from browser API schema data
- Oracle functions (has_api, is_deprecated, is_temporary, ...)
- Issue reporting for API references found by a linter

Example:
    >>> from webext_apis import has_api, is_deprecated
    >>>
    >>> has_api("tabs", "query", {"manifestVersion": 3})
    True
    >>> is_deprecated("runtime", "getBackgroundPage", {"manifestVersion": 3})
    True
"""

__version__ = "0.1.0"

from .data import BROWSER_API_SCHEMAS, DEPRECATED_JAVASCRIPT_APIS, TEMPORARY_APIS
from .oracle import (
    default_table,
    effective_manifest_version,
    has_api,
    is_deprecated,
    is_temporary,
    max_supported_version,
    min_required_version,
)
from .table import ApiTable, MemberEntry, NamespaceEntry, api_name
from .usage import (
    ApiUsageIssue,
    IssueCode,
    check_api_usage,
    is_browser_namespace,
    parse_api_reference,
    split_api_reference,
)

__all__ = [
    # Data
    "BROWSER_API_SCHEMAS",
    "DEPRECATED_JAVASCRIPT_APIS",
    "TEMPORARY_APIS",
    # Table
    "ApiTable",
    "NamespaceEntry",
    "MemberEntry",
    "api_name",
    # Oracle
    "default_table",
    "effective_manifest_version",
    "has_api",
    "is_deprecated",
    "is_temporary",
    "max_supported_version",
    "min_required_version",
    # Usage reporting
    "ApiUsageIssue",
    "IssueCode",
    "check_api_usage",
    "is_browser_namespace",
    "parse_api_reference",
    "split_api_reference",
]
