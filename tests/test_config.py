"""Tests for settings loading."""

import pytest

from brokerhook.config import Settings, WebhookConfig, load_settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (
        "BROKERHOOK_CONFIG",
        "BROKERHOOK_WEBHOOK__TIMEOUT",
        "BROKERHOOK_WEBHOOK__PLACEHOLDER",
        "BROKERHOOK_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


class TestWebhookConfig:
    def test_defaults(self):
        cfg = WebhookConfig()
        assert cfg.timeout == 10.0
        assert cfg.connect_timeout == 5.0
        assert cfg.placeholder == "${PACT_VERSION_URL}"
        assert cfg.ca_bundle == ""

    def test_settings_has_webhook(self):
        settings = Settings()
        assert isinstance(settings.webhook, WebhookConfig)
        assert settings.log_level == "INFO"
        assert settings.log_json is False


class TestLoadSettings:
    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("BROKERHOOK_WEBHOOK__TIMEOUT", "2.5")
        monkeypatch.setenv("BROKERHOOK_LOG_LEVEL", "DEBUG")
        settings = load_settings()
        assert settings.webhook.timeout == 2.5
        assert settings.log_level == "DEBUG"

    def test_yaml_file(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(
            "webhook:\n"
            "  placeholder: '${DYNAMIC_VALUE}'\n"
            "  connect_timeout: 1.5\n"
            "log_json: true\n"
        )
        settings = load_settings(path)
        assert settings.webhook.placeholder == "${DYNAMIC_VALUE}"
        assert settings.webhook.connect_timeout == 1.5
        assert settings.log_json is True

    def test_config_path_from_env(self, tmp_path, monkeypatch):
        path = tmp_path / "config.yaml"
        path.write_text("log_level: WARNING\n")
        monkeypatch.setenv("BROKERHOOK_CONFIG", str(path))
        assert load_settings().log_level == "WARNING"

    def test_missing_file_uses_defaults(self, tmp_path):
        settings = load_settings(tmp_path / "absent.yaml")
        assert settings.webhook.timeout == 10.0
