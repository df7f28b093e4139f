# SPDX-License-Identifier: MIT
"""String formats used by the manifest schemas.

The URL format names follow the browser's schema files and do not mean what
their names suggest:

- ``url``: must be an absolute URL
- ``relativeUrl`` and ``homepageUrl``: absolute or relative, including
  protocol-relative
- ``strictRelativeUrl``: must be relative and path-only
- ``unresolvedRelativeUrl``: any relative URL, kept as written
"""

from __future__ import annotations

import re
from urllib.parse import urlsplit

from jsonschema import FormatChecker

# Add-on version strings: up to four dot-separated numbers of at most 9 digits
VERSION_STRING_PATTERN = re.compile(r"^(0|[1-9]\d{0,8})(\.(0|[1-9]\d{0,8})){0,3}$")

SCHEME_PATTERN = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.-]*:")

# Schemes that need an authority part to be usable
HIERARCHICAL_SCHEMES = frozenset({"http", "https", "ws", "wss", "ftp", "moz-extension"})

SECURE_SCHEMES = frozenset({"https", "wss"})

IMAGE_DATA_PREFIXES = ("data:image/png;base64,", "data:image/jpeg;base64,")

SHORTCUT_MODIFIERS = frozenset({"Alt", "Ctrl", "Command", "MacCtrl"})
SHORTCUT_SECONDARY_MODIFIERS = frozenset({"Shift"})
SHORTCUT_MEDIA_KEYS = frozenset({"MediaNextTrack", "MediaPlayPause", "MediaPrevTrack", "MediaStop"})
SHORTCUT_NAMED_KEYS = frozenset(
    {
        "Comma",
        "Period",
        "Home",
        "End",
        "PageUp",
        "PageDown",
        "Space",
        "Insert",
        "Delete",
        "Up",
        "Down",
        "Left",
        "Right",
    }
)
SHORTCUT_FUNCTION_KEY_PATTERN = re.compile(r"^F([1-9]|1[0-2])$")


def _split(value: str):
    try:
        return urlsplit(value)
    except ValueError:
        return None


def is_absolute_url(value: str) -> bool:
    """Return True for an absolute URL such as ``https://example.com/``."""
    if not SCHEME_PATTERN.match(value) or any(char.isspace() for char in value):
        return False
    parts = _split(value)
    if parts is None:
        return False
    if parts.scheme.lower() in HIERARCHICAL_SCHEMES:
        return bool(parts.netloc)
    return True


def is_relative_url(value: str) -> bool:
    """Return True for a URL that needs a base URL to resolve."""
    if SCHEME_PATTERN.match(value):
        return False
    return _split(value) is not None


def is_any_url(value: str) -> bool:
    return is_absolute_url(value) or is_relative_url(value)


def is_strict_relative_url(value: str) -> bool:
    """Return True for a path-only relative URL (not protocol-relative)."""
    return not value.startswith("//") and is_relative_url(value)


def is_unresolved_relative_url(value: str) -> bool:
    return is_relative_url(value)


def is_secure_url(value: str) -> bool:
    if not is_absolute_url(value):
        return False
    return urlsplit(value).scheme.lower() in SECURE_SCHEMES


def is_image_data_or_strict_relative_url(value: str) -> bool:
    if value.startswith(IMAGE_DATA_PREFIXES):
        return True
    return is_strict_relative_url(value)


def is_valid_version_string(value: str) -> bool:
    """Return True for versions like ``1``, ``1.0`` or ``1.2.3.4``.

    Examples:
        >>> is_valid_version_string("1.10.0")
        True
        >>> is_valid_version_string("01.0")
        False
    """
    return VERSION_STRING_PATTERN.match(value) is not None


def _is_shortcut_key(key: str) -> bool:
    if len(key) == 1:
        return key.isascii() and key.isalnum() and not key.islower()
    return key in SHORTCUT_NAMED_KEYS or SHORTCUT_FUNCTION_KEY_PATTERN.match(key) is not None


def is_manifest_shortcut_key(value: str) -> bool:
    """Return True for a keyboard shortcut such as ``Ctrl+Shift+Y``.

    Media keys are accepted on their own. Function keys may be used without
    modifiers. Any other key needs one of Alt, Ctrl, Command or MacCtrl,
    optionally followed by Shift.
    """
    if value in SHORTCUT_MEDIA_KEYS:
        return True
    parts = value.split("+")
    *modifiers, key = parts
    if not _is_shortcut_key(key):
        return False
    if not modifiers:
        return SHORTCUT_FUNCTION_KEY_PATTERN.match(key) is not None
    if len(set(modifiers)) != len(modifiers):
        return False
    if modifiers[0] not in SHORTCUT_MODIFIERS:
        return False
    return all(
        modifier in SHORTCUT_MODIFIERS or modifier in SHORTCUT_SECONDARY_MODIFIERS
        for modifier in modifiers[1:]
    )


def _accept(value: str) -> bool:
    return True


# Format name -> check, in the order the schema engine registers them
MANIFEST_FORMATS = {
    "versionString": is_valid_version_string,
    "contentSecurityPolicy": _accept,
    "ignore": _accept,
    "manifestShortcutKey": is_manifest_shortcut_key,
    "url": is_absolute_url,
    "relativeUrl": is_any_url,
    "homepageUrl": is_any_url,
    "strictRelativeUrl": is_strict_relative_url,
    "unresolvedRelativeUrl": is_unresolved_relative_url,
    "secureUrl": is_secure_url,
    "imageDataOrStrictRelativeUrl": is_image_data_or_strict_relative_url,
}


def _string_only(check):
    def checker(instance: object) -> bool:
        # Formats only constrain strings
        if not isinstance(instance, str):
            return True
        return check(instance)

    return checker


def manifest_format_checker() -> FormatChecker:
    """Build a format checker knowing every manifest format."""
    checker = FormatChecker(formats=())
    for name, check in MANIFEST_FORMATS.items():
        checker.checks(name)(_string_only(check))
    return checker
