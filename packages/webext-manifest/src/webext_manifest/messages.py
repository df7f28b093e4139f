# SPDX-License-Identifier: MIT
"""JSON Schema for locale message files (_locales/<locale>/messages.json)."""

from __future__ import annotations

from .schema import SCHEMA_DIALECT

MESSAGES_TYPE = "WebExtensionMessages"

MESSAGE_NAME_PATTERN = r"^[a-zA-Z0-9_@]+$"
PLACEHOLDER_NAME_PATTERN = r"^[a-zA-Z0-9_@]+$"

MESSAGES_SCHEMA: dict = {
    "$schema": SCHEMA_DIALECT,
    "title": "WebExtension locale messages",
    "$defs": {
        MESSAGES_TYPE: {
            "type": "object",
            "propertyNames": {"pattern": MESSAGE_NAME_PATTERN},
            "additionalProperties": {"$ref": "#/$defs/Message"},
        },
        "Message": {
            "type": "object",
            "required": ["message"],
            "properties": {
                "message": {"type": "string"},
                "description": {"type": "string"},
                "placeholders": {
                    "type": "object",
                    "propertyNames": {"pattern": PLACEHOLDER_NAME_PATTERN},
                    "additionalProperties": {
                        "type": "object",
                        "required": ["content"],
                        "properties": {
                            "content": {"type": "string"},
                            "example": {"type": "string"},
                        },
                    },
                },
            },
        },
    },
}
