"""CLI interface for the recipe finder agent."""

import asyncio
import json
import os
import uuid

import typer
from pydantic import ValidationError

from .config import CHROME_PATH_ENV_VAR, AgentSettings, AppSettings, settings
from .events import AgentEvent, DoneEvent, ResultEvent, TextEvent, ToolEvent, UsageEvent
from .exceptions import AgentRunError, ConfigurationError
from .observability import bind_run_context, clear_run_context, setup_structured_logging
from .options import build_chrome_devtools_args
from .prompts import ALLOWED_TOOLS
from .stream import stream_agent
from .utils import save_recipe_result

app = typer.Typer(help="Find recipes on AllRecipes with a browser-driving agent")


def render_event(event: AgentEvent) -> str | None:
    """Render an event as a human-readable line, or None to print nothing."""
    match event:
        case TextEvent(text=text):
            return text
        case ToolEvent(name=name):
            return f"[tool] {name}"
        case UsageEvent(input=tokens_in, output=tokens_out):
            return f"[usage] input={tokens_in} output={tokens_out}"
        case ResultEvent(text=text):
            return f"\n--- Result ---\n{text}"
        case DoneEvent():
            return None


@app.command()
def run(
    prompt: str = typer.Argument(..., help="What to look for, e.g. 'vegetarian lasagna'"),
    json_output: bool = typer.Option(False, "--json", help="Print one JSON event per line"),
    save: bool = typer.Option(False, "--save", "-s", help="Save the final result to the results directory"),
) -> None:
    """Run the agent and stream its events."""
    setup_structured_logging(settings.server.logging_level)

    async def _run() -> tuple[ResultEvent | None, list[UsageEvent]]:
        run_id = str(uuid.uuid4())
        bind_run_context(run_id, prompt)
        result = None
        usage: list[UsageEvent] = []
        try:
            async for event in stream_agent(prompt):
                if json_output:
                    print(json.dumps(event.to_dict()))
                else:
                    line = render_event(event)
                    if line is not None:
                        print(line)
                if isinstance(event, ResultEvent):
                    result = event
                elif isinstance(event, UsageEvent):
                    usage.append(event)
        except Exception as e:
            raise AgentRunError(f"Agent run failed: {e}") from e
        finally:
            clear_run_context()
        return result, usage

    result, usage = asyncio.run(_run())

    if save and result:
        path = save_recipe_result(result, prompt, usage, model=settings.agent.model)
        typer.echo(f"Saved to: {path}", err=True)


@app.command()
def config(
    model: str = typer.Option(None, "--model", help="Override the model alias"),
    max_turns: int = typer.Option(None, "--max-turns", help="Override the turn budget"),
    save: bool = typer.Option(False, "--save", help="Persist the effective configuration"),
) -> None:
    """Show (and optionally update) the current configuration."""
    cfg: AppSettings = settings
    if model is not None or max_turns is not None:
        try:
            agent = AgentSettings(
                model=model if model is not None else cfg.agent.model,
                max_turns=max_turns if max_turns is not None else cfg.agent.max_turns,
            )
        except ValidationError as e:
            raise ConfigurationError(f"Invalid agent settings: {e}") from e
        cfg = cfg.model_copy(update={"agent": agent})

    print(f"Model: {cfg.agent.model}")
    print(f"Max Turns: {cfg.agent.max_turns}")
    print(f"Runner: {cfg.browser.runner}")
    print(f"Launch Args: {' '.join(build_chrome_devtools_args(os.environ.get(CHROME_PATH_ENV_VAR), cfg))}")
    print(f"Results Dir: {cfg.server.results_dir or '(default)'}")

    if save:
        path = cfg.save()
        print(f"Saved to: {path}")


@app.command()
def tools() -> None:
    """List the browser tools the agent may call."""
    for tool_id in ALLOWED_TOOLS:
        print(tool_id)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
