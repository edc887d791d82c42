"""Saving finished recipe runs to the results directory."""

import json
import logging
import re
from collections.abc import Sequence
from datetime import datetime
from pathlib import Path

from .config import AppSettings, settings
from .events import ResultEvent, UsageEvent

logger = logging.getLogger(__name__)

_TITLE_RE = re.compile(r"^#\s+(.+?)\s*$", re.MULTILINE)


def recipe_title(markdown: str) -> str | None:
    """Return the first top-level heading of a recipe, if it has one."""
    match = _TITLE_RE.search(markdown)
    return match.group(1) if match else None


def _slug(text: str) -> str:
    return re.sub(r"[^\w]+", "-", text.lower()).strip("-")[:40] or "recipe"


def save_recipe_result(
    result: ResultEvent,
    prompt: str,
    usage: Sequence[UsageEvent] = (),
    model: str | None = None,
    app_settings: AppSettings | None = None,
) -> Path:
    """Write the final recipe as markdown with a JSON sidecar describing the run.

    The file is named after the recipe title, or the prompt when the result has
    no heading. The sidecar records the prompt, the model and the token totals
    summed over the per-turn usage events.

    Returns:
        Path to the markdown file.
    """
    results_dir = (app_settings or settings).get_results_dir()
    title = recipe_title(result.text)
    base = f"{datetime.now().strftime('%Y%m%d_%H%M%S_%f')}_{_slug(title or prompt)}"

    path = results_dir / f"{base}.md"
    n = 1
    while path.exists():
        path = results_dir / f"{base}_{n}.md"
        n += 1
    path.write_text(result.text, encoding="utf-8")

    sidecar = {
        "saved_at": datetime.now().isoformat(),
        "file": path.name,
        "title": title,
        "prompt": prompt,
        "model": model,
        "turns": len(usage),
        "input_tokens": sum(event.input for event in usage),
        "output_tokens": sum(event.output for event in usage),
    }
    path.with_suffix(".json").write_text(json.dumps(sidecar, indent=2), encoding="utf-8")

    logger.info(f"Saved recipe to {path}")
    return path
