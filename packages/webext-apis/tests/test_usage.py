# SPDX-License-Identifier: MIT
"""Tests for API usage reporting."""

from webext_apis import (
    ApiTable,
    IssueCode,
    check_api_usage,
    is_browser_namespace,
    parse_api_reference,
    split_api_reference,
)


class TestParseApiReference:
    """Tests for parse_api_reference function."""

    def test_browser_reference(self):
        """browser.ns.member is split into namespace and member."""
        assert parse_api_reference("browser.tabs.query") == ("tabs", "query")

    def test_chrome_reference(self):
        """chrome is also a recognised top-level identifier."""
        assert parse_api_reference("chrome.runtime.id") == ("runtime", "id")

    def test_unguarded_reference(self):
        """Other top-level identifiers are not API references."""
        assert parse_api_reference("window.tabs.query") is None

    def test_wrong_shape(self):
        """References need exactly three non-empty parts."""
        assert parse_api_reference("browser.tabs") is None
        assert parse_api_reference("browser.tabs.query.length") is None
        assert parse_api_reference("browser..query") is None

    def test_is_browser_namespace(self):
        """Only browser and chrome are recognised."""
        assert is_browser_namespace("browser")
        assert is_browser_namespace("chrome")
        assert not is_browser_namespace("msBrowser")


class TestCheckApiUsage:
    """Tests for check_api_usage function."""

    def test_supported_api_has_no_issues(self):
        """Available APIs produce no issues."""
        assert check_api_usage(["browser.tabs.query"], {"manifestVersion": 3}) == []

    def test_unsupported_api(self):
        """Unavailable APIs are reported as unsupported."""
        issues = check_api_usage(["browser.tabs.executeScript"], {"manifestVersion": 3})
        assert [issue.code for issue in issues] == [IssueCode.UNSUPPORTED_API]
        assert issues[0].api == "tabs.executeScript"
        assert issues[0].message == "tabs.executeScript is not supported"

    def test_unknown_api(self):
        """Unknown APIs are reported as unsupported."""
        issues = check_api_usage(["browser.foo.notAnApi"])
        assert [issue.code for issue in issues] == [IssueCode.UNSUPPORTED_API]

    def test_deprecated_api(self):
        """Deprecated APIs are reported but not as unsupported."""
        issues = check_api_usage(["runtime.getBackgroundPage"], {"manifestVersion": 3})
        assert [issue.code for issue in issues] == [IssueCode.DEPRECATED_API]

    def test_temporary_api(self):
        """Temporary APIs are reported as temporary."""
        issues = check_api_usage(["browser.identity.getRedirectURL"])
        assert [issue.code for issue in issues] == [IssueCode.TEMPORARY_API]

    def test_duplicates_reported_once(self):
        """Repeated references produce a single issue, in first-seen order."""
        issues = check_api_usage(
            ["browser.foo.a", "chrome.foo.b", "browser.foo.a", "foo.b"],
        )
        assert [issue.api for issue in issues] == ["foo.a", "foo.b"]

    def test_unparseable_references_ignored(self):
        """References that are not API references are skipped."""
        assert check_api_usage(["document", "window.location.href"]) == []

    def test_synthetic_table(self):
        """A custom table can be supplied."""
        table = ApiTable.from_schemas({"demo": {"functions": [{"name": "run"}]}})
        assert check_api_usage(["demo.run"], table=table) == []
        issues = check_api_usage(["tabs.query"], table=table)
        assert [issue.code for issue in issues] == [IssueCode.UNSUPPORTED_API]


class TestSplitApiReference:
    """Tests for split_api_reference function."""

    def test_guarded_and_unguarded(self):
        """Both browser.ns.member and ns.member are accepted."""
        assert split_api_reference("browser.tabs.query") == ("tabs", "query")
        assert split_api_reference("tabs.query") == ("tabs", "query")

    def test_rejects_other_shapes(self):
        """Single names and unguarded three-part references are rejected."""
        assert split_api_reference("tabs") is None
        assert split_api_reference("window.tabs.query") is None
        assert split_api_reference(".query") is None
