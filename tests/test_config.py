"""Tests for configuration loading and persistence."""

import json
import os

import pytest
from pydantic import ValidationError

import recipe_finder.config as config_module
from recipe_finder.config import AgentSettings, AppSettings, BrowserSettings, ServerSettings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove RECIPE_* variables so defaults apply."""
    for var in list(os.environ.keys()):
        if var.startswith("RECIPE_"):
            monkeypatch.delenv(var, raising=False)


@pytest.fixture
def config_file(tmp_path, monkeypatch):
    """Point the config file at a temporary location."""
    path = tmp_path / "config.json"
    monkeypatch.setattr(config_module, "CONFIG_FILE", path)
    return path


class TestDefaults:
    def test_agent_defaults(self):
        settings = AgentSettings()
        assert settings.model == "haiku"
        assert settings.max_turns == 50

    def test_browser_defaults(self):
        settings = BrowserSettings()
        assert settings.runner == "npx"
        assert settings.devtools_package == "chrome-devtools-mcp@latest"
        assert settings.container_chrome_path == "/usr/bin/chromium"

    def test_server_defaults(self):
        settings = ServerSettings()
        assert settings.logging_level == "INFO"
        assert settings.results_dir is None


class TestEnvOverrides:
    def test_agent_env(self, monkeypatch):
        monkeypatch.setenv("RECIPE_AGENT_MODEL", "opus")
        monkeypatch.setenv("RECIPE_AGENT_MAX_TURNS", "5")
        settings = AppSettings()
        assert settings.agent.model == "opus"
        assert settings.agent.max_turns == 5

    def test_invalid_max_turns_rejected(self, monkeypatch):
        monkeypatch.setenv("RECIPE_AGENT_MAX_TURNS", "0")
        with pytest.raises(ValidationError):
            AgentSettings()


class TestConfigFile:
    def test_missing_file_is_empty(self, config_file):
        assert config_module.load_config_file() == {}

    def test_blank_file_is_empty(self, config_file):
        config_file.write_text("   ", encoding="utf-8")
        assert config_module.load_config_file() == {}

    def test_corrupt_file_is_empty(self, config_file):
        config_file.write_text("{not json", encoding="utf-8")
        assert config_module.load_config_file() == {}

    def test_save_and_reload(self, config_file):
        settings = AppSettings(agent=AgentSettings(model="sonnet", max_turns=20))
        assert settings.save() == config_file

        data = json.loads(config_file.read_text(encoding="utf-8"))
        assert data["agent"] == {"model": "sonnet", "max_turns": 20}
        assert "results_dir" not in data["server"]

        reloaded = config_module._load_settings()
        assert reloaded.agent.model == "sonnet"
        assert reloaded.agent.max_turns == 20


class TestResultsDir:
    def test_configured_results_dir_is_created(self, tmp_path):
        target = tmp_path / "out" / "recipes"
        settings = AppSettings(server=ServerSettings(results_dir=str(target)))
        assert settings.get_results_dir() == target
        assert target.is_dir()
