# SPDX-License-Identifier: MIT
"""JSON Schema definitions for WebExtension manifests (manifest.json).

The base schema holds every manifest type under ``$defs``. Types shared by
several document kinds are written once, in ``ManifestBase``; the add-on,
language pack and dictionary manifests are patch directives layered over it.
Properties whose availability depends on the manifest generation carry
``min_manifest_version`` / ``max_manifest_version`` annotations.
"""

from __future__ import annotations

from webext_version import MANIFEST_VERSION_MAX, MANIFEST_VERSION_MIN

from .composer import PatchDirective

SCHEMA_DIALECT = "https://json-schema.org/draft/2020-12/schema"

# Root types of the add-on manifest variants
ADDON_MANIFEST_TYPE = "WebExtensionManifest"
LANGPACK_MANIFEST_TYPE = "WebExtensionLangpackManifest"
DICTIONARY_MANIFEST_TYPE = "WebExtensionDictionaryManifest"

# Add-on IDs are email-like or a GUID in braces
EXTENSION_ID_PATTERN = (
    r"^(\{[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}\}"
    r"|[a-zA-Z0-9-._]*@[a-zA-Z0-9-._]+)$"
)

LOCALE_PATTERN = r"^[a-z]{2,3}([-_][a-zA-Z0-9]+)*$"

# Deprecated manifest properties reported by the validator, keyed by JSON
# pointer. Properties annotated ``deprecated`` in a schema but missing here are
# accepted silently.
DEPRECATED_MANIFEST_PROPERTIES: dict[str, str] = {
    "/theme/images/headerURL": (
        "This theme is using a deprecated property, please use 'theme_frame' instead"
    ),
    "/theme/colors/accentcolor": (
        "This theme is using a deprecated property, please use 'frame' instead"
    ),
    "/theme/colors/textcolor": (
        "This theme is using a deprecated property, please use 'tab_background_text' instead"
    ),
}


def _strings(**extra) -> dict:
    return {"type": "array", "items": {"type": "string"}, **extra}


def _ref(name: str, **extra) -> dict:
    return {"$ref": f"#/$defs/{name}", **extra}


_BASE_REF = _ref("ManifestBase")

MANIFEST_SCHEMA: dict = {
    "$schema": SCHEMA_DIALECT,
    "title": "WebExtension Manifest",
    "description": "Manifest types for extensions, language packs and dictionaries",
    "$defs": {
        "ManifestBase": {
            "type": "object",
            "description": "Common properties for all manifest.json files",
            "required": ["manifest_version", "name", "version"],
            "properties": {
                "manifest_version": {
                    "type": "integer",
                    "minimum": MANIFEST_VERSION_MIN,
                    "maximum": MANIFEST_VERSION_MIN,
                },
                "applications": _ref("BrowserSpecificSettings", max_manifest_version=2),
                "browser_specific_settings": _ref("BrowserSpecificSettings"),
                "name": {"type": "string", "minLength": 2, "maxLength": 75},
                "short_name": {"type": "string"},
                "description": {"type": "string"},
                "author": {"type": "string"},
                "version": {"type": "string", "format": "versionString"},
                "homepage_url": {"type": "string", "format": "homepageUrl"},
                "developer": {
                    "type": "object",
                    "properties": {
                        "name": {"type": "string"},
                        "url": {"type": "string", "format": "url"},
                    },
                },
            },
        },
        "BrowserSpecificSettings": {
            "type": "object",
            "properties": {
                "gecko": {
                    "type": "object",
                    "properties": {
                        "id": _ref("ExtensionID"),
                        "strict_min_version": {"type": "string"},
                        "strict_max_version": {"type": "string"},
                        "update_url": {"type": "string", "format": "url"},
                    },
                },
            },
        },
        "ExtensionID": {"type": "string", "pattern": EXTENSION_ID_PATTERN},
        ADDON_MANIFEST_TYPE: PatchDirective(
            source=_BASE_REF,
            with_={
                "properties": {
                    "action": _ref("ActionManifest", min_manifest_version=3),
                    "browser_action": _ref("ActionManifest", max_manifest_version=2),
                    "page_action": {
                        "type": "object",
                        "properties": {
                            "default_title": {"type": "string"},
                            "default_icon": _ref("IconPath"),
                            "default_popup": {"type": "string", "format": "relativeUrl"},
                            "show_matches": _strings(minItems=1),
                        },
                    },
                    "background": _ref("Background"),
                    "content_scripts": {"type": "array", "items": _ref("ContentScript")},
                    "content_security_policy": {
                        "anyOf": [
                            {
                                "type": "string",
                                "format": "contentSecurityPolicy",
                                "max_manifest_version": 2,
                            },
                            {
                                "type": "object",
                                "min_manifest_version": 3,
                                "properties": {
                                    "extension_pages": {
                                        "type": "string",
                                        "format": "contentSecurityPolicy",
                                    },
                                },
                            },
                        ],
                    },
                    "permissions": _strings(uniqueItems=True),
                    "optional_permissions": _strings(uniqueItems=True),
                    "host_permissions": _strings(uniqueItems=True, min_manifest_version=3),
                    "web_accessible_resources": {
                        "anyOf": [
                            {
                                "type": "array",
                                "items": {"type": "string", "format": "strictRelativeUrl"},
                                "max_manifest_version": 2,
                            },
                            {
                                "type": "array",
                                "min_manifest_version": 3,
                                "items": {
                                    "type": "object",
                                    "required": ["resources"],
                                    "properties": {
                                        "resources": _strings(),
                                        "matches": _strings(),
                                        "extension_ids": _strings(),
                                    },
                                },
                            },
                        ],
                    },
                    "icons": _ref("IconPath"),
                    "incognito": {"enum": ["spanning", "split", "not_allowed"]},
                    "default_locale": {"type": "string", "pattern": LOCALE_PATTERN},
                    "options_ui": {
                        "type": "object",
                        "required": ["page"],
                        "properties": {
                            "page": {"type": "string", "format": "strictRelativeUrl"},
                            "browser_style": {"type": "boolean"},
                            "open_in_tab": {"type": "boolean"},
                        },
                    },
                    "commands": {
                        "type": "object",
                        "additionalProperties": {
                            "type": "object",
                            "properties": {
                                "suggested_key": {
                                    "type": "object",
                                    "additionalProperties": {
                                        "type": "string",
                                        "format": "manifestShortcutKey",
                                    },
                                },
                                "description": {"type": "string"},
                            },
                        },
                    },
                    "devtools_page": {"type": "string", "format": "strictRelativeUrl"},
                    "user_scripts": {
                        "type": "object",
                        "max_manifest_version": 2,
                        "properties": {
                            "api_script": {"type": "string", "format": "strictRelativeUrl"},
                        },
                    },
                    "optional_host_permissions": _strings(min_manifest_version=3),
                },
            },
        ),
        "ActionManifest": {
            "type": "object",
            "properties": {
                "default_title": {"type": "string"},
                "default_icon": _ref("IconPath"),
                "default_popup": {"type": "string", "format": "relativeUrl"},
                "browser_style": {"type": "boolean"},
                "default_area": {"enum": ["navbar", "menupanel", "tabstrip", "personaltoolbar"]},
            },
        },
        "Background": {
            "type": "object",
            "properties": {
                "page": {"type": "string", "format": "strictRelativeUrl"},
                "scripts": {
                    "type": "array",
                    "items": {"type": "string", "format": "strictRelativeUrl"},
                },
                "service_worker": {
                    "type": "string",
                    "format": "strictRelativeUrl",
                    "min_manifest_version": 3,
                },
                "persistent": {"type": "boolean", "max_manifest_version": 2},
                "type": {"enum": ["classic", "module"]},
            },
        },
        "IconPath": {
            "anyOf": [
                {
                    "type": "object",
                    "patternProperties": {
                        r"^[1-9]\d*$": {"type": "string", "format": "strictRelativeUrl"},
                    },
                    "additionalProperties": False,
                },
                {"type": "string", "format": "strictRelativeUrl"},
            ],
        },
        "ContentScript": {
            "type": "object",
            "required": ["matches"],
            "properties": {
                "matches": _strings(minItems=1),
                "exclude_matches": _strings(),
                "js": {"type": "array", "items": {"type": "string", "format": "strictRelativeUrl"}},
                "css": {"type": "array", "items": {"type": "string", "format": "strictRelativeUrl"}},
                "all_frames": {"type": "boolean"},
                "match_about_blank": {"type": "boolean"},
                "run_at": {"enum": ["document_start", "document_end", "document_idle"]},
            },
        },
        LANGPACK_MANIFEST_TYPE: PatchDirective(
            source=_BASE_REF,
            with_={
                "description": "Represents a WebExtension language pack manifest.json file",
                "required": ["manifest_version", "name", "version", "langpack_id", "languages"],
                "properties": {
                    "homepage_url": {"type": "string", "format": "url"},
                    "langpack_id": {"type": "string", "pattern": r"^[a-zA-Z][a-zA-Z-]+$"},
                    "languages": {
                        "type": "object",
                        "patternProperties": {
                            LOCALE_PATTERN: {
                                "type": "object",
                                "required": ["chrome_resources", "version"],
                                "properties": {
                                    "chrome_resources": {"type": "object"},
                                    "version": {"type": "string"},
                                },
                            },
                        },
                    },
                    "sources": {
                        "type": "object",
                        "additionalProperties": {
                            "type": "object",
                            "required": ["base_path"],
                            "properties": {
                                "base_path": {"type": "string", "format": "strictRelativeUrl"},
                                "paths": _strings(),
                            },
                        },
                    },
                },
            },
        ),
        DICTIONARY_MANIFEST_TYPE: PatchDirective(
            source=_BASE_REF,
            with_={
                "description": "Represents a WebExtension dictionary manifest.json file",
                "required": ["manifest_version", "name", "version", "dictionaries"],
                "properties": {
                    "homepage_url": {"type": "string", "format": "url"},
                    "dictionaries": {
                        "type": "object",
                        "minProperties": 1,
                        "patternProperties": {
                            LOCALE_PATTERN: {
                                "type": "string",
                                "format": "strictRelativeUrl",
                                "pattern": r"\.dic$",
                            },
                        },
                        "additionalProperties": False,
                    },
                },
            },
        ),
    },
}

# Lets the add-on manifest declare manifest_version 3
MANIFEST_V3_PATCH: dict = {
    "$defs": {
        ADDON_MANIFEST_TYPE: PatchDirective(
            with_={"properties": {"manifest_version": {"maximum": MANIFEST_VERSION_MAX}}},
        ),
    },
}
