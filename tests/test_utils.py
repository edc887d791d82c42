"""Tests for saving recipe results."""

import json

import pytest

from recipe_finder.config import AppSettings, ServerSettings
from recipe_finder.events import ResultEvent, UsageEvent
from recipe_finder.utils import recipe_title, save_recipe_result

LASAGNA = """# World's Best Lasagna

Rating: 4.8/5 (19,000 reviews)

## Ingredients
- 1 pound sweet Italian sausage
"""


@pytest.fixture
def app_settings(tmp_path) -> AppSettings:
    return AppSettings(server=ServerSettings(results_dir=str(tmp_path)))


class TestRecipeTitle:
    def test_first_heading(self):
        assert recipe_title(LASAGNA) == "World's Best Lasagna"

    def test_subheadings_are_not_titles(self):
        assert recipe_title("Here you go\n\n## Ingredients\n- eggs") is None


class TestSaveRecipeResult:
    def test_named_after_recipe_title(self, app_settings, tmp_path):
        path = save_recipe_result(ResultEvent(LASAGNA), "lasagna", app_settings=app_settings)
        assert path.parent == tmp_path
        assert path.name.endswith("_world-s-best-lasagna.md")
        assert path.read_text(encoding="utf-8") == LASAGNA

    def test_falls_back_to_prompt(self, app_settings):
        path = save_recipe_result(ResultEvent("No recipes matched."), "../../Vegan Chili!", app_settings=app_settings)
        assert path.name.endswith("_vegan-chili.md")
        assert "/" not in path.name

    def test_sidecar_sums_turn_usage(self, app_settings):
        usage = [UsageEvent(100, 10), UsageEvent(250, 40)]
        path = save_recipe_result(ResultEvent(LASAGNA), "lasagna", usage, model="haiku", app_settings=app_settings)
        meta = json.loads(path.with_suffix(".json").read_text(encoding="utf-8"))
        assert meta["file"] == path.name
        assert meta["title"] == "World's Best Lasagna"
        assert meta["prompt"] == "lasagna"
        assert meta["model"] == "haiku"
        assert meta["turns"] == 2
        assert meta["input_tokens"] == 350
        assert meta["output_tokens"] == 50
        assert "saved_at" in meta

    def test_repeated_saves_do_not_collide(self, app_settings):
        paths = {save_recipe_result(ResultEvent(LASAGNA), "lasagna", app_settings=app_settings) for _ in range(5)}
        assert len(paths) == 5
