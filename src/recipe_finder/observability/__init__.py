"""Observability helpers: structured logging with per-run context."""

from .logging import bind_run_context, clear_run_context, get_current_run_id, get_run_logger, setup_structured_logging

__all__ = [
    "bind_run_context",
    "clear_run_context",
    "get_current_run_id",
    "get_run_logger",
    "setup_structured_logging",
]
