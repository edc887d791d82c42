"""Configuration management using Pydantic settings with optional file persistence."""

import json
import os
from pathlib import Path
from typing import Any, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# --- Paths ---

APP_NAME = "recipe-finder"


def get_config_dir() -> Path:
    """Get the configuration directory (e.g. ~/.config/recipe-finder)."""
    if os.name == "nt":
        base = Path(os.environ.get("APPDATA", Path.home() / ".config")).expanduser()
    else:
        base = Path("~/.config").expanduser()

    path = base / APP_NAME
    path.mkdir(parents=True, exist_ok=True)
    return path


def get_default_results_dir() -> Path:
    """Get the default directory for saving run results."""
    base = Path("~/Documents").expanduser()
    if not base.exists():
        base = Path.home()

    path = base / "recipe-finder-results"
    return path


CONFIG_FILE = get_config_dir() / "config.json"


def load_config_file() -> dict[str, Any]:
    """Load settings from the JSON config file if it exists."""
    if not CONFIG_FILE.exists():
        return {}

    try:
        text = CONFIG_FILE.read_text(encoding="utf-8")
        if not text.strip():
            return {}
        return json.loads(text)
    except Exception:
        return {}


def save_config_file(config_data: dict[str, Any]) -> None:
    """Save settings to the JSON config file."""
    CONFIG_FILE.parent.mkdir(parents=True, exist_ok=True)
    CONFIG_FILE.write_text(json.dumps(config_data, indent=2), encoding="utf-8")


# Environment variable whose value signals a containerized chromium install
CHROME_PATH_ENV_VAR = "CHROME_PATH"
CONTAINER_CHROME_PATH = "/usr/bin/chromium"


class AgentSettings(BaseSettings):
    """Agent behavior configuration."""

    model_config = SettingsConfigDict(env_prefix="RECIPE_AGENT_")

    model: str = Field(default="haiku", description="Model alias passed to the agent runtime")
    max_turns: int = Field(default=50, ge=1)


class BrowserSettings(BaseSettings):
    """Browser tool server configuration."""

    model_config = SettingsConfigDict(env_prefix="RECIPE_BROWSER_")

    runner: str = Field(default="npx", description="Package runner used to launch the tool server")
    devtools_package: str = Field(default="chrome-devtools-mcp@latest")
    container_chrome_path: str = Field(default=CONTAINER_CHROME_PATH, description="Chromium path that marks a container install")


class ServerSettings(BaseSettings):
    """Process-level configuration."""

    model_config = SettingsConfigDict(env_prefix="RECIPE_SERVER_")

    logging_level: str = Field(default="INFO")
    results_dir: Optional[str] = Field(default=None, description="Directory to save run results")


class AppSettings(BaseSettings):
    """Root application settings.

    Priority: Environment Variables > Config File > Defaults
    """

    model_config = SettingsConfigDict(env_prefix="RECIPE_", extra="ignore")

    agent: AgentSettings = Field(default_factory=AgentSettings)
    browser: BrowserSettings = Field(default_factory=BrowserSettings)
    server: ServerSettings = Field(default_factory=ServerSettings)

    def save(self) -> Path:
        """Save current configuration to file."""
        data = self.model_dump(mode="json", exclude_none=True)
        save_config_file(data)
        return CONFIG_FILE

    def get_results_dir(self) -> Path:
        """Get the results directory, creating if needed."""
        if self.server.results_dir:
            path = Path(self.server.results_dir).expanduser()
        else:
            path = get_default_results_dir()
        path.mkdir(parents=True, exist_ok=True)
        return path


def _load_settings() -> AppSettings:
    """Load settings with file config as base, env vars overlay."""
    file_data = load_config_file()
    # Pydantic will overlay env vars on top
    return AppSettings(**file_data)


settings = _load_settings()
