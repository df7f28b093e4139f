# SPDX-License-Identifier: MIT
"""Property-based tests for schema composition.

These tests verify that:
- deep_patch is idempotent and never mutates its inputs
- keys the patch does not mention are carried over unchanged
- merge_patch is idempotent
"""

from __future__ import annotations

import copy

from hypothesis import given, settings, strategies as st

from webext_manifest import deep_patch, merge_patch


# =============================================================================
# Strategies for generating test data
# =============================================================================

json_scalars = st.one_of(
    st.none(),
    st.booleans(),
    st.integers(min_value=-5, max_value=5),
    st.text(alphabet="abc", max_size=3),
)

json_trees = st.recursive(
    json_scalars,
    lambda children: st.one_of(
        st.lists(children, max_size=3),
        st.dictionaries(st.text(alphabet="abcd", max_size=2), children, max_size=3),
    ),
    max_leaves=12,
)

json_objects = st.dictionaries(st.text(alphabet="abcd", max_size=2), json_trees, max_size=4)


class TestDeepPatchProperties:
    """Properties of deep_patch."""

    @given(base=json_objects, patch=json_objects)
    @settings(max_examples=100)
    def test_idempotent(self, base, patch):
        """Re-applying a patch gives an equal tree."""
        once = deep_patch(base, patch)
        assert deep_patch(once, patch) == once
        assert deep_patch(base, patch) == once

    @given(base=json_objects, patch=json_objects)
    @settings(max_examples=100)
    def test_inputs_not_mutated(self, base, patch):
        """deep_patch is pure."""
        base_before = copy.deepcopy(base)
        patch_before = copy.deepcopy(patch)
        deep_patch(base, patch)
        assert base == base_before
        assert patch == patch_before

    @given(base=json_objects, patch=json_objects)
    @settings(max_examples=100)
    def test_untouched_keys_preserved(self, base, patch):
        """Keys the patch does not mention keep their base value."""
        result = deep_patch(base, patch)
        for key, value in base.items():
            if key not in patch:
                assert result[key] == value

    @given(base=json_objects, patch=json_objects)
    @settings(max_examples=100)
    def test_patch_keys_win(self, base, patch):
        """Non-mapping patch values always end up in the result."""
        result = deep_patch(base, patch)
        for key, value in patch.items():
            if not isinstance(value, dict):
                assert result[key] == value


class TestMergePatchProperties:
    """Properties of merge_patch."""

    @given(target=json_trees, patch=json_trees)
    @settings(max_examples=100)
    def test_idempotent(self, target, patch):
        """Applying a merge patch twice equals applying it once."""
        once = merge_patch(target, patch)
        assert merge_patch(once, patch) == once

    @given(target=json_objects, patch=json_objects)
    @settings(max_examples=100)
    def test_none_removes(self, target, patch):
        """Keys patched with None are absent from the result."""
        result = merge_patch(target, patch)
        for key, value in patch.items():
            if value is None:
                assert key not in result
