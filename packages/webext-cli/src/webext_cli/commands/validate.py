# SPDX-License-Identifier: MIT
"""Validate manifest.json and locale message files."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import click

from webext_manifest import (
    DEPRECATED_KEYWORD,
    Diagnostic,
    ValidationResult,
    validate_addon,
    validate_dictionary,
    validate_langpack,
    validate_locale_messages,
    validate_static_theme,
)

from ..main import Context, echo_error, echo_info, echo_success, echo_warning, pass_context

logger = logging.getLogger(__name__)

# Document kinds other than the add-on manifest, which needs the mv3 option
VALIDATORS = {
    "theme": validate_static_theme,
    "langpack": validate_langpack,
    "dictionary": validate_dictionary,
    "messages": validate_locale_messages,
}

KINDS = ["manifest", *VALIDATORS]


def _describe(diagnostic: Diagnostic) -> str:
    return f"[{diagnostic.field}] {diagnostic.message}"


def _run_validation(document: object, kind: str, enable_mv3: bool) -> ValidationResult:
    if kind == "manifest":
        return validate_addon(document, enable_manifest_version3=enable_mv3)
    return VALIDATORS[kind](document)


@click.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--kind",
    "-k",
    type=click.Choice(KINDS),
    default="manifest",
    show_default=True,
    help="Kind of document to validate.",
)
@click.option(
    "--mv3",
    is_flag=True,
    help="Accept manifest_version 3 in add-on manifests.",
)
@click.option(
    "--strict",
    is_flag=True,
    help="Treat deprecation warnings as errors.",
)
@pass_context
def validate(ctx: Context, path: Path, kind: str, mv3: bool, strict: bool) -> None:
    """Validate a manifest or locale messages file.

    Deprecated properties are reported as warnings; everything else is an
    error. WEBEXT_ENABLE_MV3 and WEBEXT_STRICT enable --mv3 and --strict.

    \b
    Examples:
        webext validate manifest.json
        webext validate --mv3 manifest.json
        webext validate -k messages _locales/en/messages.json
    """
    config = ctx.load_config()
    enable_mv3 = mv3 or config.enable_manifest_version3
    strict = strict or config.strict

    echo_info(f"Validating {kind}: {path}")

    try:
        document = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        echo_error(f"Invalid JSON syntax: {e}")
        raise SystemExit(1)

    logger.debug("Validating %s as %s (mv3=%s, strict=%s)", path, kind, enable_mv3, strict)
    result = _run_validation(document, kind, enable_mv3)

    errors = [error for error in result.errors if error.keyword != DEPRECATED_KEYWORD]
    warnings = result.by_keyword(DEPRECATED_KEYWORD)

    # Report results
    echo_info("")

    if warnings:
        echo_warning(f"Warnings ({len(warnings)}):")
        for warning in warnings:
            echo_warning(f"  - {_describe(warning)}")

    if errors:
        echo_error(f"Errors ({len(errors)}):")
        for error in errors:
            echo_error(f"  - {_describe(error)}")

    # Determine exit status
    if errors:
        echo_error("\nValidation failed!")
        raise SystemExit(1)

    if warnings and strict:
        echo_error("\nValidation failed (strict mode)!")
        raise SystemExit(1)

    if warnings:
        echo_success("\nValidation passed with warnings.")
    else:
        echo_success("\nValidation passed!")
