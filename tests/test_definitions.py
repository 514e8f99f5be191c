"""Tests for loading webhook definitions from YAML."""

import pytest

from brokerhook.webhooks.definitions import load_webhook, webhook_from_dict
from brokerhook.webhooks.errors import ConfigurationError


@pytest.fixture
def definition_file(tmp_path):
    path = tmp_path / "webhook.yaml"
    path.write_text(
        "request:\n"
        "  method: post\n"
        "  url: https://ci.example.org/build?pact=${PACT_VERSION_URL}\n"
        "  headers:\n"
        "    Content-Type: application/json\n"
        "  username: ci\n"
        "  password: hunter2\n"
        "  body: '{\"pact\": \"${PACT_VERSION_URL}\"}'\n"
    )
    return path


class TestLoadWebhook:
    def test_loads_nested_request(self, definition_file):
        request = load_webhook(definition_file)
        assert request.method == "POST"
        assert request.url == "https://ci.example.org/build?pact=${PACT_VERSION_URL}"
        assert request.headers == {"Content-Type": "application/json"}
        assert request.username == "ci"
        assert request.password == "hunter2"
        assert request.body == '{"pact": "${PACT_VERSION_URL}"}'

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError):
            load_webhook(tmp_path / "absent.yaml")

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("request: [unclosed\n")
        with pytest.raises(ConfigurationError):
            load_webhook(path)


class TestWebhookFromDict:
    def test_top_level_fields(self):
        request = webhook_from_dict({"method": "get", "url": "http://example.org/hook"})
        assert request.description() == "GET example.org"
        assert request.headers == {}
        assert request.body is None
        assert request.username is None

    def test_missing_url(self):
        with pytest.raises(ConfigurationError):
            webhook_from_dict({"method": "post"})

    def test_missing_method(self):
        with pytest.raises(ConfigurationError):
            webhook_from_dict({"url": "http://example.org/hook"})

    def test_headers_must_be_mapping(self):
        with pytest.raises(ConfigurationError):
            webhook_from_dict({"method": "post", "url": "http://example.org", "headers": ["a"]})

    def test_body_must_be_string(self):
        with pytest.raises(ConfigurationError):
            webhook_from_dict({"method": "post", "url": "http://example.org", "body": {"a": 1}})

    def test_not_a_mapping(self):
        with pytest.raises(ConfigurationError):
            webhook_from_dict(["method", "url"])

    def test_header_values_stringified(self):
        request = webhook_from_dict({
            "method": "post",
            "url": "http://example.org",
            "headers": {"X-Retry": 3},
        })
        assert request.headers == {"X-Retry": "3"}

    def test_bad_scheme(self):
        with pytest.raises(ConfigurationError):
            webhook_from_dict({"method": "post", "url": "file:///etc/passwd"})
