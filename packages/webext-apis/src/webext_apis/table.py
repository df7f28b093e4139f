# SPDX-License-Identifier: MIT
"""Typed API compatibility table.

The table records, per API namespace, which members exist and in which
manifest versions they can be used. It is loaded once from data shaped like
the browser's API schemas and is read-only afterwards.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Iterable, Iterator, Mapping, Optional

from webext_version import UNBOUNDED, VersionBound

logger = logging.getLogger(__name__)

# Schema sections that list callable or observable members of a namespace
MEMBER_LIST_SECTIONS = ("functions", "events")
MEMBER_MAP_SECTIONS = ("properties",)


def api_name(namespace: str, member: str) -> str:
    """Return the fully-qualified ``namespace.member`` name."""
    return f"{namespace}.{member}"


@dataclass(frozen=True, slots=True)
class MemberEntry:
    """A single function, event or property of a namespace.

    Attributes:
        name: Member name (e.g., "query")
        bound: Manifest version window narrowing the namespace window
    """

    name: str
    bound: VersionBound = UNBOUNDED


@dataclass(frozen=True, slots=True)
class NamespaceEntry:
    """An API namespace and its members.

    Attributes:
        name: Namespace name (e.g., "tabs")
        bound: Manifest version window for the whole namespace
        members: Members declared by the namespace
    """

    name: str
    bound: VersionBound = UNBOUNDED
    members: tuple[MemberEntry, ...] = ()

    def get_member(self, name: str) -> Optional[MemberEntry]:
        """Return the member called ``name``, or None if not declared."""
        for member in self.members:
            if member.name == name:
                return member
        return None

    @classmethod
    def from_schema(cls, name: str, data: Mapping[str, Any]) -> "NamespaceEntry":
        """Build an entry from a browser API schema namespace."""
        members: list[MemberEntry] = []
        for section in MEMBER_LIST_SECTIONS:
            for item in data.get(section) or ():
                members.append(MemberEntry(item["name"], VersionBound.from_schema(item)))
        for section in MEMBER_MAP_SECTIONS:
            for member_name, item in (data.get(section) or {}).items():
                members.append(MemberEntry(member_name, VersionBound.from_schema(item)))
        return cls(name=name, bound=VersionBound.from_schema(data), members=tuple(members))


@dataclass(frozen=True)
class ApiTable:
    """Read-only table of API namespaces, temporary and deprecated members.

    Attributes:
        namespaces: Namespace entries keyed by name
        temporary: Fully-qualified names that are always available
        deprecated: Fully-qualified names mapped to the window in which they
            are deprecated
    """

    namespaces: Mapping[str, NamespaceEntry] = field(default_factory=dict)
    temporary: frozenset[str] = frozenset()
    deprecated: Mapping[str, VersionBound] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "namespaces", MappingProxyType(dict(self.namespaces)))
        object.__setattr__(self, "temporary", frozenset(self.temporary))
        object.__setattr__(self, "deprecated", MappingProxyType(dict(self.deprecated)))

    @classmethod
    def from_schemas(
        cls,
        schemas: Mapping[str, Mapping[str, Any]],
        temporary: Iterable[str] = (),
        deprecated: Optional[Mapping[str, Mapping[str, Any]]] = None,
    ) -> "ApiTable":
        """Load a table from browser API schema data.

        Args:
            schemas: Namespace name mapped to its schema, where the schema may
                declare ``min_manifest_version``/``max_manifest_version`` and
                list members under ``functions``, ``events`` or ``properties``
            temporary: Fully-qualified names that are always available
            deprecated: Fully-qualified names mapped to an optional
                ``min_manifest_version``/``max_manifest_version`` window

        Returns:
            ApiTable instance

        Example:
            >>> table = ApiTable.from_schemas(
            ...     {"tabs": {"functions": [{"name": "query"}]}}
            ... )
            >>> table.get_member("tabs", "query").name
            'query'
        """
        return cls(
            namespaces={
                name: NamespaceEntry.from_schema(name, data) for name, data in schemas.items()
            },
            temporary=frozenset(temporary),
            deprecated={
                name: VersionBound.from_schema(data or {})
                for name, data in (deprecated or {}).items()
            },
        )

    def get_namespace(self, namespace: str) -> Optional[NamespaceEntry]:
        """Return the namespace entry, or None if unknown."""
        return self.namespaces.get(namespace)

    def get_member(self, namespace: str, member: str) -> Optional[MemberEntry]:
        """Return the member entry, or None if the namespace or member is unknown."""
        entry = self.namespaces.get(namespace)
        if entry is None:
            return None
        return entry.get_member(member)

    def effective_bound(self, namespace: str, member: str) -> Optional[VersionBound]:
        """Return the namespace window narrowed by the member window.

        Returns None when the pair is not in the table.
        """
        entry = self.namespaces.get(namespace)
        if entry is None:
            return None
        item = entry.get_member(member)
        if item is None:
            return None
        return entry.bound.intersect(item.bound)

    def iter_members(self) -> Iterator[tuple[NamespaceEntry, MemberEntry]]:
        """Yield every (namespace, member) pair in table order."""
        for entry in self.namespaces.values():
            for member in entry.members:
                yield entry, member

    def inconsistent_members(self) -> list[str]:
        """List members whose effective window can never be satisfied.

        These are authoring mistakes such as a namespace maximum below a
        member minimum. They are reported, not corrected: lookups keep
        resolving bounds mechanically.
        """
        return [
            api_name(entry.name, member.name)
            for entry, member in self.iter_members()
            if entry.bound.intersect(member.bound).is_empty
        ]

    def check_consistency(self) -> list[str]:
        """Log a warning for every inconsistent member and return them."""
        problems = self.inconsistent_members()
        for name in problems:
            logger.warning("API %s has an empty manifest version window", name)
        return problems
