"""Agent invocation options and chrome-devtools tool server declaration."""

import logging
import os
from collections.abc import Mapping
from typing import Optional

from claude_agent_sdk import ClaudeAgentOptions
from claude_agent_sdk.types import McpStdioServerConfig

from .config import CHROME_PATH_ENV_VAR, AppSettings, settings
from .prompts import ALLOWED_TOOLS, CHROME_DEVTOOLS_SERVER_NAME, SYSTEM_PROMPT

logger = logging.getLogger(__name__)

# Headless, isolated profile with the heavy instrumentation categories turned off
BASE_FLAGS = (
    "--headless",
    "--isolated",
    "--no-category-emulation",
    "--no-category-performance",
    "--no-category-network",
)

# Chromium cannot use its own sandbox inside an unprivileged container
CONTAINER_CHROME_FLAGS = (
    "--no-sandbox",
    "--disable-setuid-sandbox",
    "--disable-gpu",
)


def build_chrome_devtools_args(chrome_path: str | None = None, app_settings: AppSettings | None = None) -> list[str]:
    """Build the package-runner arguments that launch chrome-devtools-mcp.

    Locally the tool server auto-detects an installed Chrome. When ``chrome_path``
    points at the container chromium install, the executable is pinned and the
    sandbox and GPU are disabled.

    Args:
        chrome_path: Value of the CHROME_PATH environment variable, if any.
        app_settings: Settings to read the package and container path from.

    Returns:
        Argument list for the package runner.
    """
    cfg = app_settings or settings
    args = ["-y", cfg.browser.devtools_package, *BASE_FLAGS]
    if chrome_path == cfg.browser.container_chrome_path:
        args.append(f"--executable-path={cfg.browser.container_chrome_path}")
        args.extend(f"--chrome-arg={flag}" for flag in CONTAINER_CHROME_FLAGS)
    return args


def chrome_devtools_server_config(
    env: Optional[Mapping[str, str]] = None,
    app_settings: AppSettings | None = None,
) -> McpStdioServerConfig:
    """Declare the stdio launch descriptor for the chrome-devtools tool server."""
    cfg = app_settings or settings
    env = os.environ if env is None else env
    return {
        "type": "stdio",
        "command": cfg.browser.runner,
        "args": build_chrome_devtools_args(env.get(CHROME_PATH_ENV_VAR), cfg),
    }


def get_options(
    standalone: bool = False,
    env: Optional[Mapping[str, str]] = None,
    app_settings: AppSettings | None = None,
) -> ClaudeAgentOptions:
    """Build the options for one agent query.

    Args:
        standalone: Also declare the chrome-devtools tool server so the agent
            runtime launches it, instead of relying on one supplied by a host.
        env: Environment to snapshot, defaults to the process environment.
        app_settings: Settings override, defaults to the loaded settings.

    Returns:
        A fresh ClaudeAgentOptions; nothing in it is shared with the caller.
    """
    cfg = app_settings or settings
    env_snapshot = dict(os.environ if env is None else env)

    mcp_servers: dict[str, McpStdioServerConfig] = {}
    if standalone:
        mcp_servers[CHROME_DEVTOOLS_SERVER_NAME] = chrome_devtools_server_config(env_snapshot, cfg)
        logger.debug(f"Declaring standalone tool server: {mcp_servers[CHROME_DEVTOOLS_SERVER_NAME]['args']}")

    return ClaudeAgentOptions(
        env=env_snapshot,
        system_prompt=SYSTEM_PROMPT,
        model=cfg.agent.model,
        allowed_tools=list(ALLOWED_TOOLS),
        max_turns=cfg.agent.max_turns,
        mcp_servers=mcp_servers,
    )
