"""Recipe finder agent driving chrome-devtools-mcp through the Claude Agent SDK."""

from .config import settings
from .events import AgentEvent, DoneEvent, ResultEvent, TextEvent, ToolEvent, UsageEvent
from .exceptions import AgentRunError, ConfigurationError, RecipeFinderError
from .options import build_chrome_devtools_args, get_options
from .prompts import ALLOWED_TOOLS, SYSTEM_PROMPT
from .stream import normalize_messages, stream_agent

__all__ = [
    "ALLOWED_TOOLS",
    "SYSTEM_PROMPT",
    "settings",
    "get_options",
    "build_chrome_devtools_args",
    "stream_agent",
    "normalize_messages",
    "AgentEvent",
    "TextEvent",
    "ToolEvent",
    "UsageEvent",
    "ResultEvent",
    "DoneEvent",
    "RecipeFinderError",
    "ConfigurationError",
    "AgentRunError",
]
