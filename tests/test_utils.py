"""
Tests for the shared helpers in app.core.utils.
"""

import pytest

from app.core.utils import (
    append_error,
    check_localhost_url,
    client_with_token,
    get_value_string,
    sanitize_labels,
    sanitize_map,
)


class TestStrings:

    def test_get_value_string(self):
        assert get_value_string("value", "default") == "value"
        assert get_value_string("", "default") == "default"
        assert get_value_string(None, "default") == "default"

    def test_append_error(self):
        assert append_error("request failed", ValueError("bad")) == "request failed: [bad]"
        assert append_error("request failed", None) == "request failed"


class TestSanitize:

    def test_labels(self):
        assert sanitize_labels([" a ", "", "   ", "b"]) == ["a", "b"]
        assert sanitize_labels(None) == []

    def test_map(self):
        assert sanitize_map({" k ": " v ", "  ": "x", "e": "  "}) == {"k": "v", "e": ""}
        assert sanitize_map(None) == {}


class TestLocalhostUrl:

    def test_localhost(self):
        check_localhost_url("http://localhost:5050/redirect")

    @pytest.mark.parametrize("url", ["invalid-value", "http://example.com:5050/redirect"])
    def test_rejected(self, url):
        with pytest.raises(ValueError):
            check_localhost_url(url)


def test_client_with_token_sets_bearer_header():
    client = client_with_token("abc")
    assert client.headers["Authorization"] == "Bearer abc"
