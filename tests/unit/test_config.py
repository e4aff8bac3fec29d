# Author: Green Mountain Systems AI Inc.
# Donated to IAB Tech Lab

"""Tests for settings, client config and the CLI config file."""

import json

import pytest
from pydantic import ValidationError

from scope3_agentic.config import cli_config
from scope3_agentic.config.client_config import ClientConfig
from scope3_agentic.config.settings import Settings
from scope3_agentic.errors import ConfigError


class TestSettings:
    """Tests for environment-driven settings."""

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("SCOPE3_API_KEY", "env_key")
        monkeypatch.setenv("SCOPE3_ENVIRONMENT", "staging")
        monkeypatch.setenv("MIN_DAILY_BUDGET", "250")
        monkeypatch.setenv("RESPONSE_POLICY", "lenient")

        settings = Settings()

        assert settings.scope3_api_key == "env_key"
        assert settings.scope3_environment == "staging"
        assert settings.min_daily_budget == 250
        assert settings.response_policy == "lenient"

    def test_client_config(self):
        settings = Settings(scope3_api_key="k", scope3_base_url="http://localhost:4000", scope3_timeout=10)
        config = settings.client_config()

        assert config.api_key == "k"
        assert config.base_url == "http://localhost:4000"
        assert config.timeout == 10


class TestClientConfig:
    """Tests for the ClientConfig model."""

    def test_aliases(self):
        config = ClientConfig(apiKey="k", baseUrl="http://x")
        assert config.api_key == "k"
        assert config.base_url == "http://x"
        assert config.environment == "production"
        assert config.timeout == 30

    def test_api_key_required(self):
        with pytest.raises(ValidationError):
            ClientConfig(api_key="")


class TestCliConfig:
    """Tests for ~/.scope3/config.json handling."""

    @pytest.fixture(autouse=True)
    def clean_env(self, monkeypatch):
        for name in ("SCOPE3_API_KEY", "SCOPE3_BASE_URL", "SCOPE3_ENVIRONMENT"):
            monkeypatch.delenv(name, raising=False)

    def test_missing_file(self, tmp_path):
        assert cli_config.load_config(tmp_path / "config.json") == {}

    def test_set_and_load(self, tmp_path):
        path = tmp_path / "nested" / "config.json"

        cli_config.set_config_value("apiKey", "file_key", path)
        cli_config.set_config_value("baseUrl", "http://localhost:4000", path)

        assert json.loads(path.read_text()) == {"apiKey": "file_key", "baseUrl": "http://localhost:4000"}
        assert cli_config.load_config(path)["apiKey"] == "file_key"

    def test_environment_overrides_file(self, tmp_path, monkeypatch):
        path = tmp_path / "config.json"
        cli_config.save_config({"apiKey": "file_key"}, path)
        monkeypatch.setenv("SCOPE3_API_KEY", "env_key")

        assert cli_config.load_config(path)["apiKey"] == "env_key"

    def test_unknown_key_rejected(self, tmp_path):
        with pytest.raises(ConfigError, match="Unknown config key"):
            cli_config.set_config_value("token", "x", tmp_path / "config.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("{not json")
        with pytest.raises(ConfigError):
            cli_config.read_config_file(path)

    def test_clear(self, tmp_path):
        path = tmp_path / "config.json"
        cli_config.save_config({"apiKey": "k"}, path)

        assert cli_config.clear_config(path) is True
        assert not path.exists()
        assert cli_config.clear_config(path) is False
