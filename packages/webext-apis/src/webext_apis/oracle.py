# SPDX-License-Identifier: MIT
"""Answer whether a browser API can be used under a manifest version.

Every function here is a pure lookup against an :class:`ApiTable`. Unknown
namespaces and members resolve to "not available" instead of raising, so a
lint pass is never interrupted by a missing table entry.

Add-on metadata is a mapping carrying ``manifestVersion``. Its three states
resolve differently:

- no metadata at all (``None``): the default manifest version 2 applies
- metadata without ``manifestVersion``: the version is unknown (``None``)
- metadata with ``manifestVersion``: that version applies

The asymmetry between the first two states is intentional and callers rely
on it.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Mapping, Optional

from webext_version import MANIFEST_VERSION_DEFAULT, intersect_max, union_min

from .data import BROWSER_API_SCHEMAS, DEPRECATED_JAVASCRIPT_APIS, TEMPORARY_APIS
from .table import ApiTable, api_name

AddonMetadata = Mapping[str, Any]


@lru_cache(maxsize=1)
def default_table() -> ApiTable:
    """Return the shipped API table, loading it on first use."""
    table = ApiTable.from_schemas(
        BROWSER_API_SCHEMAS,
        temporary=TEMPORARY_APIS,
        deprecated=DEPRECATED_JAVASCRIPT_APIS,
    )
    table.check_consistency()
    return table


def effective_manifest_version(metadata: Optional[AddonMetadata] = None) -> Optional[int]:
    """Return the manifest version that applies to the given metadata.

    Examples:
        >>> effective_manifest_version()
        2
        >>> effective_manifest_version({}) is None
        True
        >>> effective_manifest_version({"manifestVersion": 3})
        3
    """
    if metadata is None:
        return MANIFEST_VERSION_DEFAULT
    return metadata.get("manifestVersion")


def is_temporary(namespace: str, member: str, table: Optional[ApiTable] = None) -> bool:
    """Return True if the API is always available regardless of version bounds."""
    table = table or default_table()
    return api_name(namespace, member) in table.temporary


def is_deprecated(
    namespace: str,
    member: str,
    metadata: Optional[AddonMetadata] = None,
    table: Optional[ApiTable] = None,
) -> bool:
    """Return True if the API is deprecated for the metadata's manifest version."""
    table = table or default_table()
    bound = table.deprecated.get(api_name(namespace, member))
    if bound is None:
        return False
    return bound.contains(effective_manifest_version(metadata))


def has_api(
    namespace: str,
    member: str,
    metadata: Optional[AddonMetadata] = None,
    table: Optional[ApiTable] = None,
) -> bool:
    """Return True if ``namespace.member`` is usable for the metadata's manifest version.

    Temporary APIs are always available. Otherwise the member must be
    declared in the table and the manifest version must fall inside the
    namespace window narrowed by the member window. Deprecated APIs are
    resolved the same way; deprecation does not remove availability.

    Args:
        namespace: API namespace (e.g., "tabs")
        member: Function, event or property name (e.g., "query")
        metadata: Add-on metadata, see module docstring for its states
        table: Table to consult (defaults to the shipped table)

    Returns:
        Whether the API can be used

    Examples:
        >>> has_api("tabs", "query")
        True
        >>> has_api("scripting", "executeScript", {"manifestVersion": 2})
        False
    """
    table = table or default_table()
    if is_temporary(namespace, member, table):
        return True
    bound = table.effective_bound(namespace, member)
    if bound is None:
        return False
    return bound.contains(effective_manifest_version(metadata))


def max_supported_version(
    namespace: str,
    member: str,
    metadata: Optional[AddonMetadata] = None,
    table: Optional[ApiTable] = None,
) -> Optional[int]:
    """Return the highest manifest version the API supports, None if unbounded.

    ``metadata`` is accepted for symmetry with the other lookups; only the
    table bounds matter.
    """
    table = table or default_table()
    namespace_entry = table.get_namespace(namespace)
    member_entry = table.get_member(namespace, member)
    return intersect_max(
        namespace_entry.bound.max if namespace_entry else None,
        member_entry.bound.max if member_entry else None,
    )


def min_required_version(
    namespace: str,
    member: str,
    metadata: Optional[AddonMetadata] = None,
    table: Optional[ApiTable] = None,
) -> int:
    """Return the lowest manifest version the API requires, 0 if unbounded."""
    table = table or default_table()
    namespace_entry = table.get_namespace(namespace)
    member_entry = table.get_member(namespace, member)
    return union_min(
        namespace_entry.bound.min if namespace_entry else None,
        member_entry.bound.min if member_entry else None,
    )
