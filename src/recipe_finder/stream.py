"""Normalize the agent runtime's message stream into a small, stable event set."""

import logging
from collections.abc import AsyncIterable, AsyncIterator, Callable, Mapping
from typing import Any, Optional

from claude_agent_sdk import AssistantMessage, ResultMessage, TextBlock, ToolUseBlock, query

from .events import AgentEvent, DoneEvent, ResultEvent, TextEvent, ToolEvent, UsageEvent
from .observability import get_run_logger
from .options import get_options

logger = logging.getLogger(__name__)

QueryFn = Callable[..., AsyncIterable[Any]]


def _token_count(usage: Mapping[str, Any], key: str) -> int:
    return usage.get(key) or 0


def events_from_message(message: Any) -> list[AgentEvent]:
    """Project one raw message onto normalized events.

    Within an assistant message every text event comes before every tool
    event, whatever the original block interleaving. Existing consumers rely
    on this order.

    Only assistant turns report usage. The usage attached to the final result
    is the run total and would count every turn twice.
    """
    events: list[AgentEvent] = []

    match message:
        case AssistantMessage(content=blocks):
            if blocks:
                events.extend(TextEvent(block.text) for block in blocks if isinstance(block, TextBlock) and block.text)
                events.extend(ToolEvent(block.name) for block in blocks if isinstance(block, ToolUseBlock))
            usage = getattr(message, "usage", None)
            if isinstance(usage, Mapping):
                events.append(UsageEvent(input=_token_count(usage, "input_tokens"), output=_token_count(usage, "output_tokens")))
        case ResultMessage(result=str() as text) if text:
            events.append(ResultEvent(text))

    return events


async def normalize_messages(messages: AsyncIterable[Any]) -> AsyncIterator[AgentEvent]:
    """Yield normalized events for a raw message stream, then a single done event.

    Errors raised by the upstream iterator propagate unchanged.
    """
    async for message in messages:
        logger.debug(f"Raw message: {type(message).__name__}")
        for event in events_from_message(message):
            yield event
    yield DoneEvent()


async def stream_agent(
    prompt: str,
    *,
    query_fn: QueryFn = query,
    env: Optional[Mapping[str, str]] = None,
) -> AsyncIterator[AgentEvent]:
    """Run the recipe finder agent on ``prompt`` and stream normalized events.

    The agent runtime is asked to launch its own chrome-devtools tool server.
    Each call starts a fresh query; the stream is not restartable.

    Args:
        prompt: Free-text user request, forwarded verbatim.
        query_fn: Query primitive, ``claude_agent_sdk.query`` by default.
        env: Environment snapshot for the run, defaults to the process environment.

    Yields:
        Text, tool, usage and result events in upstream order, then a done event.
    """
    run_logger = get_run_logger()
    options = get_options(standalone=True, env=env)
    run_logger.info("run_started", model=options.model, max_turns=options.max_turns)

    count = 0
    try:
        async for event in normalize_messages(query_fn(prompt=prompt, options=options)):
            count += 1
            yield event
    except GeneratorExit:
        run_logger.info("run_closed", events=count)
        raise
    except Exception as e:
        run_logger.error("run_failed", events=count, error=str(e))
        raise
    else:
        run_logger.info("run_finished", events=count)
