# SPDX-License-Identifier: MIT
"""Manifest validation for WebExtensions.

This package validates manifest.json files and locale messages:
- Authored schemas for extensions, static themes, language packs and dictionaries
- A schema composer deriving each document kind from one base schema
- Manifest-version gating and deprecated-property keywords
- Structured diagnostics instead of exceptions

Example:
    >>> from webext_manifest import validate_addon
    >>>
    >>> result = validate_addon({"manifest_version": 2, "name": "Demo", "version": "1.0"})
    >>> result.valid
    True
"""

__version__ = "0.1.0"

from .composer import (
    MERGE_KEYWORD,
    PatchDirective,
    SchemaCompositionError,
    compose,
    deep_patch,
    forbid_additional_properties,
    merge_patch,
    resolve_directives,
)
from .formats import manifest_format_checker
from .keywords import (
    DEPRECATED_KEYWORD,
    UNSUPPORTED_KEYWORD,
    DeprecatedProperty,
    ManifestValidator,
    MaxManifestVersion,
    MinManifestVersion,
    ValidationContext,
    Violation,
    document_context,
    document_manifest_version,
    escape_pointer_segment,
)
from .messages import MESSAGES_SCHEMA
from .schema import DEPRECATED_MANIFEST_PROPERTIES, MANIFEST_SCHEMA, MANIFEST_V3_PATCH
from .theme import THEME_SCHEMA
from .validator import (
    DICTIONARY_MANIFEST,
    LANGPACK_MANIFEST,
    MANIFEST,
    MANIFEST_V3,
    MESSAGES,
    STATIC_THEME_MANIFEST,
    Diagnostic,
    ManifestError,
    ManifestValidationError,
    UnknownVariantError,
    ValidationResult,
    ValidationVariant,
    VariantRegistry,
    compile_variant,
    filter_artifacts,
    get_registry,
    validate,
    validate_addon,
    validate_addon_strict,
    validate_dictionary,
    validate_langpack,
    validate_locale_messages,
    validate_static_theme,
)

__all__ = [
    # Schemas
    "MANIFEST_SCHEMA",
    "MANIFEST_V3_PATCH",
    "THEME_SCHEMA",
    "MESSAGES_SCHEMA",
    "DEPRECATED_MANIFEST_PROPERTIES",
    # Composition
    "MERGE_KEYWORD",
    "PatchDirective",
    "SchemaCompositionError",
    "compose",
    "deep_patch",
    "forbid_additional_properties",
    "merge_patch",
    "resolve_directives",
    # Keywords and formats
    "DEPRECATED_KEYWORD",
    "UNSUPPORTED_KEYWORD",
    "DeprecatedProperty",
    "ManifestValidator",
    "MaxManifestVersion",
    "MinManifestVersion",
    "ValidationContext",
    "Violation",
    "document_context",
    "document_manifest_version",
    "escape_pointer_segment",
    "manifest_format_checker",
    # Variants
    "MANIFEST",
    "MANIFEST_V3",
    "STATIC_THEME_MANIFEST",
    "LANGPACK_MANIFEST",
    "DICTIONARY_MANIFEST",
    "MESSAGES",
    "ValidationVariant",
    "VariantRegistry",
    "compile_variant",
    "get_registry",
    # Validation
    "Diagnostic",
    "ValidationResult",
    "ManifestError",
    "ManifestValidationError",
    "UnknownVariantError",
    "filter_artifacts",
    "validate",
    "validate_addon",
    "validate_addon_strict",
    "validate_static_theme",
    "validate_langpack",
    "validate_dictionary",
    "validate_locale_messages",
]
