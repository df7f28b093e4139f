# SPDX-License-Identifier: MIT
"""Derive specialised manifest schemas from a shared base schema.

Schemas are plain JSON-like trees except for :class:`PatchDirective` nodes.
A directive says "take ``source`` and apply ``with_`` to it as a JSON merge
patch". Directives let a type such as the theme manifest reuse the base
manifest type without copying it.

Two steps turn authored schemas into something the schema engine accepts:

1. :func:`deep_patch` layers patches on top of a base schema. Directives met
   on the way are combined, not merged as plain mappings.
2. :func:`resolve_directives` replaces every directive with the merged schema
   it describes, wrapped under the ``$merge`` keyword.

Both functions are pure: inputs are never modified and the same inputs
always produce equal outputs.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from functools import reduce
from typing import Any, Iterator, Mapping, Optional

# Keyword under which resolved directives are handed to the schema engine
MERGE_KEYWORD = "$merge"


class SchemaCompositionError(Exception):
    """Raised when an authored schema or patch cannot be composed."""

    pass


@dataclass(frozen=True)
class PatchDirective:
    """A schema node built by merge-patching a source schema.

    Attributes:
        source: Schema to start from: a ``{"$ref": "#/..."}`` pointer into the
            same document, an inline schema, or None to inherit the source of
            the node being patched
        with_: JSON merge patch applied on top of the source
    """

    source: Optional[Any] = None
    with_: Mapping[str, Any] = field(default_factory=dict)


def deep_patch(base: Any, patch: Any) -> Any:
    """Structurally merge ``patch`` onto ``base`` and return a new tree.

    Mappings are merged key by key and recursively. Any other patch value
    replaces the base value, lists included. When the patch node is a
    directive the result is a directive too: its source comes from the patch
    if given, otherwise from the base directive (or from the base node itself
    when that is a plain schema), and its ``with_`` is the base's ``with_``
    deep-patched with the patch's ``with_``. A plain mapping patched onto a
    directive is deep-patched into the directive's ``with_``.

    Examples:
        >>> deep_patch({"a": {"b": 1, "c": 2}}, {"a": {"c": 3}})
        {'a': {'b': 1, 'c': 3}}
    """
    if isinstance(patch, PatchDirective):
        return _patch_with_directive(base, patch)
    if isinstance(base, PatchDirective) and isinstance(patch, Mapping):
        return PatchDirective(
            source=copy.deepcopy(base.source),
            with_=deep_patch(base.with_, patch),
        )
    if isinstance(base, Mapping) and isinstance(patch, Mapping):
        result = {key: copy.deepcopy(value) for key, value in base.items()}
        for key, value in patch.items():
            if key in base:
                result[key] = deep_patch(base[key], value)
            else:
                result[key] = copy.deepcopy(value)
        return result
    return copy.deepcopy(patch)


def _patch_with_directive(base: Any, patch: PatchDirective) -> PatchDirective:
    if isinstance(base, PatchDirective):
        source = patch.source if patch.source is not None else base.source
        with_ = deep_patch(base.with_, patch.with_)
    else:
        source = patch.source if patch.source is not None else base
        with_ = copy.deepcopy(dict(patch.with_))
    return PatchDirective(source=copy.deepcopy(source), with_=with_)


def compose(base: Any, *patches: Any) -> Any:
    """Apply several patches to ``base`` in order."""
    return reduce(deep_patch, patches, base)


def forbid_additional_properties(type_name: str) -> dict:
    """Return a patch making one ``$defs`` type reject unknown properties.

    Only the named type changes; every other type in the schema is left as it
    is.
    """
    return {"$defs": {type_name: PatchDirective(with_={"additionalProperties": False})}}


def merge_patch(target: Any, patch: Any) -> Any:
    """Apply an RFC 7386 JSON merge patch and return the result.

    ``None`` values in the patch delete keys. Mappings merge recursively and
    every other value, lists included, replaces the target value.

    Examples:
        >>> merge_patch({"a": 1, "b": 2}, {"b": None, "c": 3})
        {'a': 1, 'c': 3}
    """
    if not isinstance(patch, Mapping):
        return copy.deepcopy(patch)
    if isinstance(target, Mapping):
        result = {key: copy.deepcopy(value) for key, value in target.items()}
    else:
        result = {}
    for key, value in patch.items():
        if value is None:
            result.pop(key, None)
        else:
            result[key] = merge_patch(result.get(key), value)
    return result


def _unescape(segment: str) -> str:
    return segment.replace("~1", "/").replace("~0", "~")


class _DirectiveResolver:
    """Resolve directives against the document that contains them."""

    def __init__(self, document: Mapping[str, Any]) -> None:
        self.document = document
        self._active: list[str] = []

    def resolve(self, node: Any) -> Any:
        if isinstance(node, PatchDirective):
            return {MERGE_KEYWORD: self.merge(node)}
        if isinstance(node, Mapping):
            return {key: self.resolve(value) for key, value in node.items()}
        if isinstance(node, (list, tuple)):
            return [self.resolve(value) for value in node]
        return node

    def merge(self, directive: PatchDirective) -> dict:
        source = self._source(directive.source)
        return merge_patch(source, self.resolve(directive.with_))

    def _source(self, source: Any) -> Any:
        if source is None:
            raise SchemaCompositionError("Patch directive has no source to patch")
        if isinstance(source, Mapping) and set(source) == {"$ref"}:
            return self._follow(source["$ref"])
        if isinstance(source, PatchDirective):
            return self.merge(source)
        return self.resolve(source)

    def _follow(self, ref: str) -> Any:
        if not isinstance(ref, str) or not ref.startswith("#"):
            raise SchemaCompositionError(f"Patch source must be a local reference: {ref!r}")
        if ref in self._active:
            chain = " -> ".join([*self._active, ref])
            raise SchemaCompositionError(f"Circular patch source: {chain}")

        node: Any = self.document
        for segment in ref[1:].split("/")[1:]:
            key = _unescape(segment)
            if not isinstance(node, Mapping) or key not in node:
                raise SchemaCompositionError(f"Unresolvable patch source: {ref}")
            node = node[key]

        self._active.append(ref)
        try:
            if isinstance(node, PatchDirective):
                return self.merge(node)
            return self.resolve(node)
        finally:
            self._active.pop()


def resolve_directives(document: Mapping[str, Any]) -> dict:
    """Replace every directive in ``document`` with its merged schema.

    Each directive becomes ``{"$merge": <merged schema>}``. Directive sources
    given as ``$ref`` pointers are looked up in ``document`` itself, following
    chains of directives.

    Raises:
        SchemaCompositionError: If a directive has no source, points outside
            the document, points nowhere, or the sources form a cycle
    """
    return _DirectiveResolver(document).resolve(document)


def iter_merged_schemas(node: Any) -> Iterator[dict]:
    """Yield every merged schema found under ``$merge`` in a resolved tree."""
    if isinstance(node, Mapping):
        for key, value in node.items():
            if key == MERGE_KEYWORD and isinstance(value, Mapping):
                yield value
            yield from iter_merged_schemas(value)
    elif isinstance(node, list):
        for value in node:
            yield from iter_merged_schemas(value)
