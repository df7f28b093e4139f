# SPDX-License-Identifier: MIT
"""Static theme manifest types.

This schema only makes sense patched onto the base manifest schema: the
theme manifest reuses ``ManifestBase`` from there.
"""

from __future__ import annotations

from .composer import PatchDirective

THEME_MANIFEST_TYPE = "ThemeManifest"

# Color values are CSS color strings or RGB(A) component arrays
_COLOR = {"$ref": "#/$defs/ThemeColor"}
_IMAGE = {"$ref": "#/$defs/ImageDataOrStrictRelativeUrl"}

THEME_COLOR_NAMES = (
    "bookmark_text",
    "button_background_active",
    "button_background_hover",
    "frame",
    "frame_inactive",
    "icons",
    "icons_attention",
    "ntp_background",
    "ntp_text",
    "popup",
    "popup_border",
    "popup_text",
    "sidebar",
    "sidebar_text",
    "tab_background_text",
    "tab_line",
    "tab_loading",
    "tab_selected",
    "tab_text",
    "toolbar",
    "toolbar_field",
    "toolbar_field_text",
    "toolbar_text",
)

THEME_SCHEMA: dict = {
    "$defs": {
        THEME_MANIFEST_TYPE: PatchDirective(
            source={"$ref": "#/$defs/ManifestBase"},
            with_={
                "description": "Contents of manifest.json for a static theme",
                "required": ["manifest_version", "name", "version", "theme"],
                "properties": {
                    "theme": {"$ref": "#/$defs/ThemeType"},
                    "dark_theme": {"$ref": "#/$defs/ThemeType"},
                    "default_locale": {"type": "string"},
                    "theme_experiment": {"$ref": "#/$defs/ThemeExperiment"},
                    "icons": {
                        "type": "object",
                        "patternProperties": {
                            r"^[1-9]\d*$": {"type": "string", "format": "strictRelativeUrl"},
                        },
                    },
                },
            },
        ),
        "ThemeColor": {
            "anyOf": [
                {"type": "string"},
                {
                    "type": "array",
                    "minItems": 3,
                    "maxItems": 4,
                    "items": {"type": "number", "minimum": 0, "maximum": 255},
                },
            ],
        },
        "ImageDataOrStrictRelativeUrl": {
            "type": "string",
            "format": "imageDataOrStrictRelativeUrl",
        },
        "ThemeExperiment": {
            "type": "object",
            "properties": {
                "stylesheet": {"type": "string", "format": "strictRelativeUrl"},
                "images": {"type": "object"},
                "colors": {"type": "object"},
                "properties": {"type": "object"},
            },
        },
        "ThemeType": {
            "type": "object",
            "properties": {
                "images": {
                    "type": "object",
                    "properties": {
                        "additional_backgrounds": {"type": "array", "items": _IMAGE},
                        "headerURL": {**_IMAGE, "deprecated": True},
                        "theme_frame": _IMAGE,
                    },
                },
                "colors": {
                    "type": "object",
                    "properties": {
                        "accentcolor": {**_COLOR, "deprecated": True},
                        "textcolor": {**_COLOR, "deprecated": True},
                        **{name: _COLOR for name in THEME_COLOR_NAMES},
                    },
                },
                "properties": {
                    "type": "object",
                    "properties": {
                        "additional_backgrounds_alignment": {
                            "type": "array",
                            "items": {
                                "enum": [
                                    "bottom",
                                    "center",
                                    "left",
                                    "right",
                                    "top",
                                    "center bottom",
                                    "center center",
                                    "center top",
                                    "left bottom",
                                    "left center",
                                    "left top",
                                    "right bottom",
                                    "right center",
                                    "right top",
                                ],
                            },
                        },
                        "additional_backgrounds_tiling": {
                            "type": "array",
                            "items": {"enum": ["no-repeat", "repeat", "repeat-x", "repeat-y"]},
                        },
                        "color_scheme": {"enum": ["auto", "light", "dark", "system"]},
                    },
                },
            },
        },
    },
}
