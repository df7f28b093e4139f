# SPDX-License-Identifier: MIT
"""Unit tests for manifest version bounds."""

import pytest

from webext_version import (
    MANIFEST_VERSION_DEFAULT,
    UNBOUNDED,
    VersionBound,
    in_range,
    intersect_max,
    union_min,
)


class TestIntersectMax:
    """Tests for intersect_max function."""

    def test_neither_present(self):
        """No maxima means no ceiling."""
        assert intersect_max(None, None) is None

    def test_only_one_present(self):
        """A single maximum is returned unchanged."""
        assert intersect_max(2, None) == 2
        assert intersect_max(None, 3) == 3

    def test_member_tightens_namespace(self):
        """A lower member ceiling wins over the namespace ceiling."""
        assert intersect_max(3, 2) == 2

    def test_namespace_still_wins_when_lower(self):
        """The namespace ceiling wins when it is the lower one."""
        assert intersect_max(2, 3) == 2


class TestUnionMin:
    """Tests for union_min function."""

    def test_neither_present(self):
        """No minima means a floor of zero."""
        assert union_min(None, None) == 0

    def test_only_one_present(self):
        """A single minimum is returned unchanged."""
        assert union_min(3, None) == 3
        assert union_min(None, 3) == 3

    def test_higher_floor_wins(self):
        """The higher of two floors wins regardless of order."""
        assert union_min(2, 3) == 3
        assert union_min(3, 2) == 3


class TestInRange:
    """Tests for in_range function."""

    def test_missing_bound_accepts_everything(self):
        """No bound at all accepts any version."""
        assert in_range(2, None) is True
        assert in_range(None, None) is True

    def test_unbounded(self):
        """An unbounded window accepts any version."""
        for version in (1, 2, 3, 99):
            assert in_range(version, UNBOUNDED) is True

    def test_minimum(self):
        """Versions below the minimum are rejected."""
        bound = VersionBound(min=3)
        assert in_range(2, bound) is False
        assert in_range(3, bound) is True
        assert in_range(4, bound) is True

    def test_maximum(self):
        """Versions above the maximum are rejected."""
        bound = VersionBound(max=2)
        assert in_range(2, bound) is True
        assert in_range(3, bound) is False

    def test_inverted_bound_never_matches(self):
        """A bound with min above max is empty, not an error."""
        bound = VersionBound(min=3, max=2)
        assert bound.is_empty
        for version in (1, 2, 3, 4):
            assert in_range(version, bound) is False

    def test_missing_version_fails_every_comparison(self):
        """An unknown version is only accepted by an unbounded window."""
        assert in_range(None, VersionBound(min=2)) is False
        assert in_range(None, VersionBound(max=3)) is False
        assert in_range(None, VersionBound(min=2, max=3)) is False
        assert in_range(None, VersionBound(min=3, max=2)) is False
        assert in_range(None, VersionBound()) is True
        assert in_range(None, None) is True

    def test_contains_matches_in_range(self):
        """VersionBound.contains is the method form of in_range."""
        bound = VersionBound(min=2, max=3)
        assert bound.contains(2) is True
        assert bound.contains(4) is False
        assert bound.contains(None) is False
        assert UNBOUNDED.contains(None) is True


class TestVersionBound:
    """Tests for the VersionBound dataclass."""

    def test_from_schema(self):
        """Bounds are read from the schema keys."""
        bound = VersionBound.from_schema(
            {"name": "query", "min_manifest_version": 3, "max_manifest_version": 4}
        )
        assert bound == VersionBound(min=3, max=4)

    def test_from_schema_without_keys(self):
        """Entries without bounds are unbounded."""
        assert VersionBound.from_schema({"name": "query"}).is_unbounded

    def test_intersect_keeps_absent_min(self):
        """Intersecting two open minima keeps the minimum open."""
        combined = VersionBound(max=3).intersect(VersionBound(max=2))
        assert combined == VersionBound(min=None, max=2)

    def test_intersect_combines_both_sides(self):
        """Intersect applies the max and min rules independently."""
        combined = VersionBound(min=2, max=3).intersect(VersionBound(min=3, max=2))
        assert combined == VersionBound(min=3, max=2)
        assert combined.is_empty

    def test_intersect_with_none(self):
        """Intersecting with nothing returns the same bound."""
        bound = VersionBound(min=2)
        assert bound.intersect(None) is bound

    def test_immutable(self):
        """Bounds are frozen."""
        bound = VersionBound(min=2)
        with pytest.raises(AttributeError):
            bound.min = 3  # type: ignore[misc]

    def test_str(self):
        """String form shows open sides as stars."""
        assert str(VersionBound(min=3)) == "[3, *]"
        assert str(UNBOUNDED) == "[*, *]"


def test_default_manifest_version():
    """Manifest version 2 is the default generation."""
    assert MANIFEST_VERSION_DEFAULT == 2
