# SPDX-License-Identifier: MIT
"""Shipped browser API compatibility data.

The namespace data follows the shape of the browser's API schemas: a
namespace may declare ``min_manifest_version``/``max_manifest_version`` and
lists its members under ``functions``, ``events`` and ``properties``, each of
which may narrow the namespace window.
"""

from __future__ import annotations

# APIs usable regardless of manifest version bounds. They require an add-on
# ID and are mostly exercised from temporarily installed extensions.
TEMPORARY_APIS = [
    "identity.getRedirectURL",
    "identity.launchWebAuthFlow",
    "storage.managed",
    "storage.sync",
]

# APIs still available but discouraged. The window says in which manifest
# versions the deprecation applies; an empty window means always.
DEPRECATED_JAVASCRIPT_APIS: dict = {
    "extension.getURL": {},
    "extension.getExtensionTabs": {},
    "extension.sendRequest": {},
    "extension.onRequest": {},
    "extension.onRequestExternal": {},
    "tabs.getSelected": {},
    "tabs.getAllInWindow": {},
    "tabs.sendRequest": {},
    "tabs.onActiveChanged": {},
    "tabs.onHighlightChanged": {},
    "tabs.onSelectionChanged": {},
    "runtime.getBackgroundPage": {"min_manifest_version": 3},
    "extension.getBackgroundPage": {"min_manifest_version": 3},
}


def _members(*names: str, **bounds: int) -> list[dict]:
    return [{"name": name, **bounds} for name in names]


BROWSER_API_SCHEMAS: dict = {
    "action": {
        "min_manifest_version": 3,
        "functions": _members(
            "disable",
            "enable",
            "getBadgeBackgroundColor",
            "getBadgeText",
            "getPopup",
            "getTitle",
            "getUserSettings",
            "isEnabled",
            "openPopup",
            "setBadgeBackgroundColor",
            "setBadgeText",
            "setIcon",
            "setPopup",
            "setTitle",
        ),
        "events": _members("onClicked"),
    },
    "alarms": {
        "functions": _members("clear", "clearAll", "create", "get", "getAll"),
        "events": _members("onAlarm"),
    },
    "bookmarks": {
        "functions": _members(
            "create",
            "get",
            "getChildren",
            "getRecent",
            "getSubTree",
            "getTree",
            "move",
            "remove",
            "removeTree",
            "search",
            "update",
        ),
        "events": _members("onChanged", "onCreated", "onMoved", "onRemoved"),
    },
    "browserAction": {
        "max_manifest_version": 2,
        "functions": _members(
            "disable",
            "enable",
            "getBadgeBackgroundColor",
            "getBadgeText",
            "getPopup",
            "getTitle",
            "isEnabled",
            "openPopup",
            "setBadgeBackgroundColor",
            "setBadgeText",
            "setIcon",
            "setPopup",
            "setTitle",
        ),
        "events": _members("onClicked"),
    },
    "contextMenus": {
        "functions": _members("create", "remove", "removeAll", "update"),
        "events": _members("onClicked"),
    },
    "cookies": {
        "functions": _members("get", "getAll", "getAllCookieStores", "remove", "set"),
        "events": _members("onChanged"),
    },
    "extension": {
        "functions": _members(
            "getBackgroundPage",
            "getExtensionTabs",
            "getURL",
            "getViews",
            "isAllowedFileSchemeAccess",
            "isAllowedIncognitoAccess",
            "sendRequest",
            "setUpdateUrlData",
        ),
        "events": _members("onRequest", "onRequestExternal"),
        "properties": {
            "inIncognitoContext": {},
            "lastError": {"max_manifest_version": 2},
        },
    },
    "identity": {
        "functions": _members("getRedirectURL", "launchWebAuthFlow"),
    },
    "pageAction": {
        "functions": _members(
            "getPopup", "getTitle", "hide", "isShown", "setIcon", "setPopup", "setTitle", "show"
        ),
        "events": _members("onClicked"),
    },
    "permissions": {
        "functions": _members("contains", "getAll", "remove", "request"),
        "events": _members("onAdded", "onRemoved"),
    },
    "runtime": {
        "functions": _members(
            "connect",
            "connectNative",
            "getBackgroundPage",
            "getBrowserInfo",
            "getManifest",
            "getPlatformInfo",
            "getURL",
            "openOptionsPage",
            "reload",
            "sendMessage",
            "sendNativeMessage",
            "setUninstallURL",
        ),
        "events": _members(
            "onConnect",
            "onConnectExternal",
            "onInstalled",
            "onMessage",
            "onMessageExternal",
            "onStartup",
            "onSuspend",
            "onSuspendCanceled",
            "onUpdateAvailable",
        ),
        "properties": {"id": {}, "lastError": {}},
    },
    "scripting": {
        "min_manifest_version": 3,
        "functions": _members(
            "executeScript",
            "getRegisteredContentScripts",
            "insertCSS",
            "registerContentScripts",
            "removeCSS",
            "unregisterContentScripts",
            "updateContentScripts",
        ),
    },
    "storage": {
        "events": _members("onChanged"),
        "properties": {"local": {}, "managed": {}, "session": {}, "sync": {}},
    },
    "tabs": {
        "functions": (
            _members(
                "captureTab",
                "captureVisibleTab",
                "connect",
                "create",
                "discard",
                "duplicate",
                "get",
                "getAllInWindow",
                "getCurrent",
                "getSelected",
                "getZoom",
                "highlight",
                "move",
                "query",
                "reload",
                "remove",
                "sendMessage",
                "sendRequest",
                "setZoom",
                "update",
            )
            + _members("executeScript", "insertCSS", "removeCSS", max_manifest_version=2)
        ),
        "events": _members(
            "onActivated",
            "onActiveChanged",
            "onCreated",
            "onHighlightChanged",
            "onHighlighted",
            "onMoved",
            "onRemoved",
            "onSelectionChanged",
            "onUpdated",
        ),
    },
    "webRequest": {
        "functions": _members("filterResponseData", "getSecurityInfo", "handlerBehaviorChanged"),
        "events": _members(
            "onAuthRequired",
            "onBeforeRedirect",
            "onBeforeRequest",
            "onBeforeSendHeaders",
            "onCompleted",
            "onErrorOccurred",
            "onHeadersReceived",
            "onResponseStarted",
            "onSendHeaders",
        ),
    },
}
