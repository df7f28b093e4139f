# SPDX-License-Identifier: MIT
"""Manifest validation for WebExtensions.

This module compiles one validator per document kind (add-on manifest,
manifest v3, static theme, language pack, dictionary, locale messages) and
validates documents against them with structured diagnostics.
"""

from __future__ import annotations

import logging
import re
from collections import defaultdict
from dataclasses import dataclass, field
from functools import lru_cache
from types import MappingProxyType
from typing import Any, Iterable, Iterator, Mapping, Optional

from jsonschema import FormatChecker, ValidationError

from .composer import (
    MERGE_KEYWORD,
    SchemaCompositionError,
    compose,
    forbid_additional_properties,
    iter_merged_schemas,
    resolve_directives,
)
from .formats import manifest_format_checker
from .keywords import (
    UNSUPPORTED_KEYWORD,
    ManifestValidator,
    document_context,
    escape_pointer_segment,
)
from .messages import MESSAGES_SCHEMA, MESSAGES_TYPE
from .schema import (
    ADDON_MANIFEST_TYPE,
    DICTIONARY_MANIFEST_TYPE,
    LANGPACK_MANIFEST_TYPE,
    MANIFEST_SCHEMA,
    MANIFEST_V3_PATCH,
)
from .theme import THEME_MANIFEST_TYPE, THEME_SCHEMA

logger = logging.getLogger(__name__)

# Variant identifiers
MANIFEST = "manifest"
MANIFEST_V3 = "manifest-v3"
STATIC_THEME_MANIFEST = "static-theme-manifest"
LANGPACK_MANIFEST = "langpack-manifest"
DICTIONARY_MANIFEST = "dictionary-manifest"
MESSAGES = "messages"


class ManifestError(Exception):
    """Base exception for manifest-related errors."""

    pass


class UnknownVariantError(ManifestError, KeyError):
    """Raised when asking the registry for a variant it does not hold."""

    pass


class ManifestValidationError(ManifestError):
    """Raised when manifest validation fails.

    Attributes:
        errors: List of diagnostics with paths and messages
    """

    def __init__(self, errors: list[Diagnostic]):
        self.errors = errors
        message = f"Manifest validation failed with {len(errors)} error(s)"
        if errors:
            message += f": {errors[0].message}"
        super().__init__(message)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """A single validation problem.

    Attributes:
        keyword: ``"unsupported"``, ``"deprecated"`` or the schema keyword that
            failed (e.g. ``"required"``)
        message: Human-readable error message
        path: JSON pointer to the offending value (``""`` for the root)
    """

    keyword: str
    message: str
    path: str = ""

    @property
    def field(self) -> str:
        """The path as a readable field name (e.g. ``theme.colors`` or ``js[0]``)."""
        if not self.path:
            return "<root>"
        parts: list[str] = []
        for segment in self.path[1:].split("/"):
            segment = segment.replace("~1", "/").replace("~0", "~")
            if segment.isdigit():
                parts.append(f"[{segment}]")
            elif parts:
                parts.append(f".{segment}")
            else:
                parts.append(segment)
        return "".join(parts)


@dataclass
class ValidationResult:
    """Result of validating one document.

    Attributes:
        valid: Whether the document is valid
        errors: Diagnostics sorted by path (empty if valid)
    """

    valid: bool
    errors: list[Diagnostic] = field(default_factory=list)

    def by_keyword(self, keyword: str) -> list[Diagnostic]:
        return [error for error in self.errors if error.keyword == keyword]


def _pointer(path: Iterable[Any]) -> str:
    return "".join(f"/{escape_pointer_segment(str(part))}" for part in path)


def _format_error_message(error: ValidationError) -> str:
    """Format a jsonschema error into a human-readable message."""
    if error.validator == "type":
        expected = error.validator_value
        actual = type(error.instance).__name__
        return f"Expected {expected}, got {actual}"

    if error.validator == "pattern":
        return f"Value does not match required pattern {error.validator_value}"

    if error.validator == "enum":
        allowed = ", ".join(repr(v) for v in error.validator_value)
        return f"Value must be one of: {allowed}"

    if error.validator == "minLength":
        return f"String must be at least {error.validator_value} character(s)"

    if error.validator == "maxLength":
        return f"String must be at most {error.validator_value} character(s)"

    if error.validator == "minimum":
        return f"Value must be at least {error.validator_value}"

    if error.validator == "maximum":
        return f"Value must be at most {error.validator_value}"

    if error.validator == "minItems":
        return f"Array must have at least {error.validator_value} item(s)"

    if error.validator == "uniqueItems":
        return "Array items must be unique"

    if error.validator == "const":
        return f"Value must be {error.validator_value}"

    if error.validator == "format":
        return f"Invalid {error.validator_value} format"

    return error.message


def _unexpected_properties(error: ValidationError) -> list[str]:
    properties = error.schema.get("properties", {})
    patterns = error.schema.get("patternProperties", {})
    return [
        name
        for name in error.instance
        if name not in properties and not any(re.search(pattern, name) for pattern in patterns)
    ]


def _lift_unsupported(error: ValidationError) -> list[ValidationError]:
    """Return version errors from anyOf/oneOf branches failing only on version."""
    branches: dict[Any, list[ValidationError]] = defaultdict(list)
    for suberror in error.context or ():
        branch = suberror.relative_schema_path[0] if suberror.relative_schema_path else None
        branches[branch].append(suberror)
    lifted = []
    for suberrors in branches.values():
        if all(suberror.validator == UNSUPPORTED_KEYWORD for suberror in suberrors):
            lifted.extend(suberrors)
    return lifted


def _diagnostics_from_error(error: ValidationError) -> Iterator[Diagnostic]:
    """Convert one engine error to diagnostics pointing at the offending property.

    Missing and unexpected properties are reported at the property's own path,
    one diagnostic each.
    """
    path = _pointer(error.absolute_path)

    if error.validator == "required" and isinstance(error.instance, Mapping):
        for name in error.validator_value:
            if name not in error.instance:
                yield Diagnostic(
                    "required",
                    f"Missing required field: {name}",
                    f"{path}/{escape_pointer_segment(name)}",
                )
        return

    if error.validator == "additionalProperties" and isinstance(error.instance, Mapping):
        for name in _unexpected_properties(error):
            yield Diagnostic(
                "additionalProperties",
                f"Unexpected property: {name}",
                f"{path}/{escape_pointer_segment(name)}",
            )
        return

    if error.validator in ("anyOf", "oneOf"):
        lifted = _lift_unsupported(error)
        if lifted:
            for suberror in lifted:
                yield from _diagnostics_from_error(suberror)
            return

    yield Diagnostic(str(error.validator), _format_error_message(error), path)


def filter_artifacts(diagnostics: Iterable[Diagnostic]) -> list[Diagnostic]:
    """Drop diagnostics produced by patch-directive resolution."""
    return [diagnostic for diagnostic in diagnostics if diagnostic.keyword != MERGE_KEYWORD]


@dataclass(frozen=True)
class ValidationVariant:
    """A compiled validator for one kind of document.

    Attributes:
        id: Variant identifier, e.g. ``"static-theme-manifest"``
        schema: The fully resolved schema
        validator: The compiled schema validator
    """

    id: str
    schema: Mapping[str, Any]
    validator: Any

    def raw_diagnostics(self, document: Any) -> list[Diagnostic]:
        """Return every diagnostic for ``document``, artifacts included."""
        with document_context(document):
            errors = list(self.validator.iter_errors(document))
        diagnostics = [diagnostic for error in errors for diagnostic in _diagnostics_from_error(error)]
        diagnostics.sort(key=lambda diagnostic: diagnostic.path)
        return list(dict.fromkeys(diagnostics))

    def validate(self, document: Any) -> ValidationResult:
        """Validate a document against this variant.

        Args:
            document: The parsed JSON document

        Returns:
            ValidationResult with validation status and diagnostics
        """
        if not isinstance(document, Mapping):
            return ValidationResult(
                valid=False,
                errors=[
                    Diagnostic(
                        keyword="type",
                        message=f"Document must be an object, got {type(document).__name__}",
                    )
                ],
            )

        errors = filter_artifacts(self.raw_diagnostics(document))
        return ValidationResult(valid=not errors, errors=errors)


def compile_variant(
    variant_id: str,
    document: Mapping[str, Any],
    root_type: str,
    format_checker: Optional[FormatChecker] = None,
) -> ValidationVariant:
    """Compile a schema document into a validator rooted at one of its types.

    Raises:
        SchemaCompositionError: If a patch directive cannot be resolved
        jsonschema.exceptions.SchemaError: If the resulting schema is invalid
    """
    resolved = resolve_directives(document)
    if root_type not in resolved.get("$defs", {}):
        raise SchemaCompositionError(f"Variant {variant_id} has no root type {root_type}")

    schema = {**resolved, "$ref": f"#/$defs/{root_type}"}
    ManifestValidator.check_schema(schema)
    for merged in iter_merged_schemas(schema):
        ManifestValidator.check_schema(merged)

    logger.debug("Compiled validation variant %s (root type %s)", variant_id, root_type)
    return ValidationVariant(
        id=variant_id,
        schema=schema,
        validator=ManifestValidator(schema, format_checker=format_checker or manifest_format_checker()),
    )


def variant_definitions() -> dict[str, tuple[dict, str]]:
    """Return the schema document and root type of every shipped variant."""
    theme_schema = compose(THEME_SCHEMA, forbid_additional_properties(THEME_MANIFEST_TYPE))
    return {
        MANIFEST: (MANIFEST_SCHEMA, ADDON_MANIFEST_TYPE),
        MANIFEST_V3: (compose(MANIFEST_SCHEMA, MANIFEST_V3_PATCH), ADDON_MANIFEST_TYPE),
        STATIC_THEME_MANIFEST: (compose(MANIFEST_SCHEMA, theme_schema), THEME_MANIFEST_TYPE),
        LANGPACK_MANIFEST: (
            compose(MANIFEST_SCHEMA, forbid_additional_properties(LANGPACK_MANIFEST_TYPE)),
            LANGPACK_MANIFEST_TYPE,
        ),
        DICTIONARY_MANIFEST: (
            compose(MANIFEST_SCHEMA, forbid_additional_properties(DICTIONARY_MANIFEST_TYPE)),
            DICTIONARY_MANIFEST_TYPE,
        ),
        MESSAGES: (MESSAGES_SCHEMA, MESSAGES_TYPE),
    }


class VariantRegistry:
    """Read-only collection of compiled variants keyed by id."""

    def __init__(self, variants: Iterable[ValidationVariant]) -> None:
        self._variants = MappingProxyType({variant.id: variant for variant in variants})

    @classmethod
    def build(cls, definitions: Optional[Mapping[str, tuple[Mapping, str]]] = None) -> VariantRegistry:
        """Compile every variant; any authoring error is raised here."""
        if definitions is None:
            definitions = variant_definitions()
        checker = manifest_format_checker()
        return cls(
            compile_variant(variant_id, document, root_type, checker)
            for variant_id, (document, root_type) in definitions.items()
        )

    def get(self, variant_id: str) -> ValidationVariant:
        try:
            return self._variants[variant_id]
        except KeyError:
            raise UnknownVariantError(f"Unknown validation variant: {variant_id}") from None

    @property
    def ids(self) -> tuple[str, ...]:
        return tuple(self._variants)

    def __contains__(self, variant_id: object) -> bool:
        return variant_id in self._variants

    def __iter__(self) -> Iterator[ValidationVariant]:
        return iter(self._variants.values())

    def __len__(self) -> int:
        return len(self._variants)


@lru_cache(maxsize=1)
def get_registry() -> VariantRegistry:
    """Return the shipped variants, compiled on first use."""
    return VariantRegistry.build()


def validate(document: Any, variant_id: str = MANIFEST) -> ValidationResult:
    """Validate a document against one of the shipped variants.

    Example:
        >>> result = validate({"manifest_version": 2, "name": "Test", "version": "1.0"})
        >>> result.valid
        True
    """
    return get_registry().get(variant_id).validate(document)


def validate_addon(document: Any, enable_manifest_version3: bool = False) -> ValidationResult:
    """Validate an extension manifest.

    Args:
        document: The parsed manifest.json
        enable_manifest_version3: Accept ``manifest_version: 3``

    Returns:
        ValidationResult with validation status and diagnostics
    """
    return validate(document, MANIFEST_V3 if enable_manifest_version3 else MANIFEST)


def validate_static_theme(document: Any) -> ValidationResult:
    return validate(document, STATIC_THEME_MANIFEST)


def validate_langpack(document: Any) -> ValidationResult:
    return validate(document, LANGPACK_MANIFEST)


def validate_dictionary(document: Any) -> ValidationResult:
    return validate(document, DICTIONARY_MANIFEST)


def validate_locale_messages(document: Any) -> ValidationResult:
    return validate(document, MESSAGES)


def validate_addon_strict(document: Any, enable_manifest_version3: bool = False) -> Mapping[str, Any]:
    """Validate an extension manifest and raise an exception if invalid.

    Returns:
        The manifest, unchanged

    Raises:
        ManifestValidationError: If the manifest is invalid
    """
    result = validate_addon(document, enable_manifest_version3)
    if not result.valid:
        raise ManifestValidationError(result.errors)
    return document
