# SPDX-License-Identifier: MIT
"""Manifest-specific schema keywords.

Three checks extend generic JSON Schema matching:

- ``min_manifest_version`` / ``max_manifest_version`` reject values whose
  format needs a different manifest generation than the document declares.
- ``deprecated`` on a property reports documents that still use it, but only
  for properties listed in ``DEPRECATED_MANIFEST_PROPERTIES``.

Checks are plain objects with an ``evaluate`` method. They see the whole
document through a :class:`ValidationContext`, which :func:`document_context`
installs for the duration of one validation call. :data:`ManifestValidator` is
the Draft 2020-12 validator class with the checks wired in.
"""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Any, Iterator, Mapping, Optional

from jsonschema import Draft202012Validator, ValidationError, validators

from webext_version import MANIFEST_VERSION_DEFAULT, MAX_KEY, MIN_KEY

from .composer import MERGE_KEYWORD
from .schema import DEPRECATED_MANIFEST_PROPERTIES

UNSUPPORTED_KEYWORD = "unsupported"
DEPRECATED_KEYWORD = "deprecated"


@dataclass(frozen=True, slots=True)
class Violation:
    """A failed check: the reported keyword and its message."""

    keyword: str
    message: str


@dataclass(frozen=True, slots=True)
class ValidationContext:
    """What a check knows besides the value it is looking at.

    Attributes:
        document_root: The whole document being validated, or None outside a
            validation call
        path: JSON pointer of the value being checked, when known
    """

    document_root: Any = None
    path: Optional[str] = None


def escape_pointer_segment(segment: str) -> str:
    """Escape ``~`` and ``/`` for use in a JSON pointer (RFC 6901)."""
    return segment.replace("~", "~0").replace("/", "~1")


def document_manifest_version(document_root: Any) -> int:
    """Return the manifest generation a document declares.

    Missing, zero or non-numeric ``manifest_version`` values fall back to the
    default generation.
    """
    if not isinstance(document_root, Mapping):
        return MANIFEST_VERSION_DEFAULT
    version = document_root.get("manifest_version")
    if isinstance(version, bool) or not isinstance(version, (int, float)) or not version:
        return MANIFEST_VERSION_DEFAULT
    return version


class MinManifestVersion:
    """Fail when the document's manifest version is below the bound."""

    keyword = MIN_KEY

    def evaluate(self, bound: int, instance: Any, context: ValidationContext) -> Optional[Violation]:
        if document_manifest_version(context.document_root) >= bound:
            return None
        return Violation(
            UNSUPPORTED_KEYWORD,
            f"is in a format only supported with manifest versions >= {bound}",
        )


class MaxManifestVersion:
    """Fail when the document's manifest version is above the bound."""

    keyword = MAX_KEY

    def evaluate(self, bound: int, instance: Any, context: ValidationContext) -> Optional[Violation]:
        if document_manifest_version(context.document_root) <= bound:
            return None
        return Violation(
            UNSUPPORTED_KEYWORD,
            f"is in a format only supported in manifest versions <= {bound}",
        )


class DeprecatedProperty:
    """Fail for a deprecated property if its path is in the registry."""

    keyword = DEPRECATED_KEYWORD

    def __init__(self, registry: Mapping[str, str] = DEPRECATED_MANIFEST_PROPERTIES) -> None:
        self.registry = registry

    def evaluate(self, annotation: Any, instance: Any, context: ValidationContext) -> Optional[Violation]:
        if not annotation or context.path is None:
            return None
        message = self.registry.get(context.path)
        if message is None:
            return None
        return Violation(DEPRECATED_KEYWORD, message)


class _DocumentState:
    """The document under validation and the JSON pointer of each container."""

    def __init__(self, root: Any) -> None:
        self.root = root
        self._pointers: dict[int, str] = {}
        stack = [(root, "")]
        while stack:
            node, pointer = stack.pop()
            if isinstance(node, Mapping):
                children = ((str(key), value) for key, value in node.items())
            elif isinstance(node, (list, tuple)):
                children = ((str(index), value) for index, value in enumerate(node))
            else:
                continue
            if id(node) in self._pointers:
                continue
            self._pointers[id(node)] = pointer
            for segment, value in children:
                stack.append((value, f"{pointer}/{escape_pointer_segment(segment)}"))

    def pointer_of(self, instance: Any) -> Optional[str]:
        return self._pointers.get(id(instance))


_current_document: ContextVar[Optional[_DocumentState]] = ContextVar(
    "webext_manifest_document", default=None
)


@contextmanager
def document_context(document: Any) -> Iterator[None]:
    """Make ``document`` the root seen by checks during one validation."""
    token = _current_document.set(_DocumentState(document))
    try:
        yield
    finally:
        _current_document.reset(token)


def _context_for(instance: Any) -> ValidationContext:
    state = _current_document.get()
    if state is None:
        return ValidationContext()
    return ValidationContext(document_root=state.root, path=state.pointer_of(instance))


def keyword_validator(check):
    """Adapt a check object to a jsonschema keyword function."""

    def validate(validator, value, instance, schema):
        violation = check.evaluate(value, instance, _context_for(instance))
        if violation is not None:
            yield ValidationError(violation.message, validator=violation.keyword)

    validate.__name__ = check.keyword
    return validate


_draft_properties = Draft202012Validator.VALIDATORS["properties"]
_deprecated = DeprecatedProperty()


def properties_with_deprecations(validator, properties, instance, schema):
    """Run the draft ``properties`` keyword, then check deprecated properties.

    The check runs from the parent object so that it knows the name, and
    therefore the path, of each property present in the document.
    """
    yield from _draft_properties(validator, properties, instance, schema)
    if not validator.is_type(instance, "object"):
        return

    parent = _context_for(instance)
    for name, subschema in properties.items():
        if name not in instance or not isinstance(subschema, Mapping):
            continue
        if DEPRECATED_KEYWORD not in subschema:
            continue
        path = None
        if parent.path is not None:
            path = f"{parent.path}/{escape_pointer_segment(name)}"
        violation = _deprecated.evaluate(
            subschema[DEPRECATED_KEYWORD],
            instance[name],
            ValidationContext(document_root=parent.document_root, path=path),
        )
        if violation is not None:
            yield ValidationError(violation.message, validator=violation.keyword, path=[name])


def merge(validator, merged, instance, schema):
    """Validate against a resolved patch directive.

    A failing merged schema also yields one ``$merge`` error of its own, the
    composition artifact the validation facade removes.
    """
    errors = list(validator.descend(instance, merged))
    yield from errors
    if errors:
        yield ValidationError(f'should pass "{MERGE_KEYWORD}" keyword validation', validator=MERGE_KEYWORD)


ManifestValidator = validators.extend(
    Draft202012Validator,
    validators={
        MIN_KEY: keyword_validator(MinManifestVersion()),
        MAX_KEY: keyword_validator(MaxManifestVersion()),
        "properties": properties_with_deprecations,
        MERGE_KEYWORD: merge,
    },
)
