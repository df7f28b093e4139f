# SPDX-License-Identifier: MIT
"""Manifest version bounds and their resolution rules.

A bound is an optional ``min``/``max`` pair of manifest versions. Missing
values mean the bound is open in that direction. Bounds declared on a
namespace and on one of its members are combined field-wise:

- maxima intersect: the lower ceiling wins
- minima union: the higher floor wins

No consistency check is made when combining. A bound whose ``min`` is above
its ``max`` is simply never satisfied.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

# Manifest version assumed when a caller provides no metadata at all
MANIFEST_VERSION_DEFAULT = 2

# Manifest generations currently understood by the schemas
MANIFEST_VERSION_MIN = 2
MANIFEST_VERSION_MAX = 3

# Keys used by browser API schemas and manifest schemas for bounds
MIN_KEY = "min_manifest_version"
MAX_KEY = "max_manifest_version"


def intersect_max(a: Optional[int], b: Optional[int]) -> Optional[int]:
    """Return the more restrictive of two optional maxima.

    Examples:
        >>> intersect_max(3, 2)
        2
        >>> intersect_max(None, 2)
        2
        >>> intersect_max(None, None) is None
        True
    """
    if a is None:
        return b
    if b is None:
        return a
    return min(a, b)


def union_min(a: Optional[int], b: Optional[int]) -> int:
    """Return the more restrictive of two optional minima, ``0`` if neither.

    Examples:
        >>> union_min(2, 3)
        3
        >>> union_min(None, None)
        0
    """
    present = [value for value in (a, b) if value is not None]
    return max(present) if present else 0


@dataclass(frozen=True, slots=True)
class VersionBound:
    """An optional manifest version window.

    Attributes:
        min: Lowest supported manifest version, inclusive
        max: Highest supported manifest version, inclusive
    """

    min: Optional[int] = None
    max: Optional[int] = None

    @classmethod
    def from_schema(cls, data: Mapping[str, Any]) -> "VersionBound":
        """Read ``min_manifest_version``/``max_manifest_version`` from a schema entry."""
        return cls(min=data.get(MIN_KEY), max=data.get(MAX_KEY))

    @property
    def is_unbounded(self) -> bool:
        """Return True if neither direction is constrained."""
        return self.min is None and self.max is None

    @property
    def is_empty(self) -> bool:
        """Return True if no version can ever satisfy this bound."""
        return self.min is not None and self.max is not None and self.min > self.max

    def intersect(self, other: Optional["VersionBound"]) -> "VersionBound":
        """Combine with a narrower bound using the max/min resolution rules.

        An absent minimum stays absent rather than collapsing to ``0`` so the
        result can be combined again without changing meaning.
        """
        if other is None:
            return self
        if self.min is None and other.min is None:
            minimum = None
        else:
            minimum = union_min(self.min, other.min)
        return VersionBound(min=minimum, max=intersect_max(self.max, other.max))

    def contains(self, version: Optional[int]) -> bool:
        """Return True if ``version`` falls inside this bound."""
        return in_range(version, self)

    def __str__(self) -> str:
        low = "*" if self.min is None else str(self.min)
        high = "*" if self.max is None else str(self.max)
        return f"[{low}, {high}]"


UNBOUNDED = VersionBound()


def in_range(version: Optional[int], bound: Optional[VersionBound]) -> bool:
    """Check whether a manifest version satisfies a bound.

    A missing bound accepts every version. A missing version satisfies no
    comparison, so it is only accepted by a bound with neither ``min`` nor
    ``max``.

    Examples:
        >>> in_range(2, VersionBound(min=3))
        False
        >>> in_range(3, VersionBound(min=3))
        True
        >>> in_range(3, VersionBound(max=2))
        False
        >>> in_range(None, VersionBound(min=3))
        False
    """
    if bound is None:
        return True
    if version is None:
        return bound.is_unbounded
    if bound.min is not None and version < bound.min:
        return False
    if bound.max is not None and version > bound.max:
        return False
    return True
