"""Structured logging with per-run context using structlog and contextvars."""

import logging
import sys
from contextvars import ContextVar

import structlog

# Context variable for the current agent run
current_run_id: ContextVar[str | None] = ContextVar("current_run_id", default=None)

_configured = False

# Dependencies that are chatty at INFO and below
NOISY_LOGGERS = ("asyncio", "anyio", "httpx", "httpcore", "claude_agent_sdk", "mcp")


def setup_structured_logging(level: str = "INFO") -> None:
    """Configure structlog with JSON output on stderr and per-run context.

    Stdout is left to the caller for rendering events, so every log record
    goes to stderr.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
    """
    global _configured
    if _configured:
        return

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,  # Inject run context
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, level.upper()),
    )

    for logger_name in NOISY_LOGGERS:
        logging.getLogger(logger_name).setLevel(logging.WARNING)

    _configured = True


def bind_run_context(run_id: str, prompt: str) -> None:
    """Bind run context for all subsequent logs in this async context.

    Args:
        run_id: Unique run identifier
        prompt: User prompt, only a short preview is bound
    """
    current_run_id.set(run_id)
    structlog.contextvars.bind_contextvars(run_id=run_id, prompt_preview=prompt[:60])


def clear_run_context() -> None:
    """Clear run context after the run completes."""
    current_run_id.set(None)
    structlog.contextvars.clear_contextvars()


def get_run_logger(name: str = "recipe_finder") -> structlog.stdlib.BoundLogger:
    """Get a structlog logger carrying the run context."""
    return structlog.get_logger(name)


def get_current_run_id() -> str | None:
    """Get the current run ID from context."""
    return current_run_id.get()
