# SPDX-License-Identifier: MIT
"""Property-based tests for bound resolution.

These tests verify that:
- intersect_max and union_min are commutative and never loosen a bound
- a combined bound accepts exactly the versions both inputs accept
"""

from __future__ import annotations

from hypothesis import given, settings, strategies as st

from webext_version import VersionBound, in_range, intersect_max, union_min


# =============================================================================
# Strategies for generating test data
# =============================================================================

optional_versions = st.one_of(st.none(), st.integers(min_value=1, max_value=6))


@st.composite
def version_bounds(draw):
    """Generate a VersionBound, possibly inverted."""
    return VersionBound(min=draw(optional_versions), max=draw(optional_versions))


class TestResolutionProperties:
    """Algebraic properties of the bound resolution rules."""

    @given(a=optional_versions, b=optional_versions)
    @settings(max_examples=100)
    def test_intersect_max_commutative(self, a, b):
        """Order of namespace and member maxima does not matter."""
        assert intersect_max(a, b) == intersect_max(b, a)

    @given(a=optional_versions, b=optional_versions)
    @settings(max_examples=100)
    def test_union_min_commutative(self, a, b):
        """Order of namespace and member minima does not matter."""
        assert union_min(a, b) == union_min(b, a)

    @given(a=optional_versions, b=optional_versions)
    @settings(max_examples=100)
    def test_intersect_max_never_loosens(self, a, b):
        """The resolved ceiling is never above a present input ceiling."""
        result = intersect_max(a, b)
        for value in (a, b):
            if value is not None:
                assert result is not None and result <= value

    @given(a=optional_versions, b=optional_versions)
    @settings(max_examples=100)
    def test_union_min_never_loosens(self, a, b):
        """The resolved floor is never below a present input floor."""
        result = union_min(a, b)
        for value in (a, b):
            if value is not None:
                assert result >= value

    @given(
        first=version_bounds(),
        second=version_bounds(),
        version=st.integers(min_value=0, max_value=8),
    )
    @settings(max_examples=200)
    def test_intersection_accepts_common_versions(self, first, second, version):
        """A version is in the combined bound iff it is in both bounds."""
        combined = first.intersect(second)
        expected = in_range(version, first) and in_range(version, second)
        assert in_range(version, combined) == expected
