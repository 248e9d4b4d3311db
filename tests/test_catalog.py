from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import pytest

from recipemeta.catalog import build_catalog, exported_descriptors, load_catalog
from recipemeta.domain import make_recipe
from recipemeta.errors import ConfigError, DuplicateSlugError, ValidationError
from recipemeta.recipes import IMPLEMENTING_SERIES_FOR_NFTS
import recipemeta.recipes
from tests.utils import write_recipe_module


def test_load_default_catalog() -> None:
    catalog = load_catalog(["recipemeta.recipes"])
    assert list(catalog) == ["implementing-series-for-nfts"]
    assert catalog["implementing-series-for-nfts"] is IMPLEMENTING_SERIES_FOR_NFTS


def test_catalog_is_read_only() -> None:
    catalog = load_catalog(["recipemeta.recipes"])
    with pytest.raises(TypeError):
        catalog["other"] = IMPLEMENTING_SERIES_FOR_NFTS  # type: ignore[index]


def test_reexported_descriptor_counts_once() -> None:
    catalog = load_catalog(
        ["recipemeta.recipes", "recipemeta.recipes.implementing_series_for_nfts"]
    )
    assert len(catalog) == 1


def test_build_catalog_duplicate_slug(recipe_kwargs: dict[str, Any]) -> None:
    first = make_recipe(**recipe_kwargs)
    recipe_kwargs["title"] = "Another Title"
    second = make_recipe(**recipe_kwargs)
    with pytest.raises(DuplicateSlugError) as excinfo:
        build_catalog([first, second])
    assert excinfo.value.field == "slug"
    assert excinfo.value.first == "entry 0"
    assert excinfo.value.second == "entry 1"


def test_build_catalog_keys_by_slug(recipe_kwargs: dict[str, Any]) -> None:
    first = make_recipe(**recipe_kwargs)
    recipe_kwargs["slug"] = "another-recipe"
    second = make_recipe(**recipe_kwargs)
    catalog = build_catalog([first, second])
    assert catalog["another-recipe"] is second
    assert catalog["implementing-series-for-nfts"] is first


def test_exported_descriptors_skips_private(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    write_recipe_module(
        tmp_path,
        "recipes_private_case",
        "_HIDDEN = make_recipe('hidden', 'Hidden', date(2022, 1, 1), 'A', None, 'Excerpt')\n"
        "SHOWN = make_recipe('shown', 'Shown', date(2022, 1, 1), 'A', None, 'Excerpt')\n"
        "OTHER = 'not a recipe'\n",
    )
    monkeypatch.syspath_prepend(str(tmp_path))
    catalog = load_catalog(["recipes_private_case"])
    assert list(catalog) == ["shown"]


def test_duplicate_slug_across_modules(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    write_recipe_module(
        tmp_path,
        "recipes_duplicate_case",
        "CLASH = make_recipe('implementing-series-for-nfts', 'Clash', date(2022, 1, 1), 'A', None, 'Excerpt')\n",
    )
    monkeypatch.syspath_prepend(str(tmp_path))
    with pytest.raises(DuplicateSlugError) as excinfo:
        load_catalog(["recipemeta.recipes", "recipes_duplicate_case"])
    assert "recipemeta.recipes.IMPLEMENTING_SERIES_FOR_NFTS" in str(excinfo.value)
    assert "recipes_duplicate_case.CLASH" in str(excinfo.value)


def test_invalid_definition_fails_load(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    write_recipe_module(
        tmp_path,
        "recipes_invalid_case",
        "BAD = make_recipe('bad', 'Bad', date(2022, 1, 1), 'A', None, 'Excerpt', {'difficulty': 'expert'})\n",
    )
    monkeypatch.syspath_prepend(str(tmp_path))
    with pytest.raises(ValidationError) as excinfo:
        load_catalog(["recipes_invalid_case"])
    assert excinfo.value.field == "difficulty"


def test_missing_module() -> None:
    with pytest.raises(ConfigError):
        load_catalog(["recipemeta_no_such_module"])


def test_exported_descriptors() -> None:
    found = exported_descriptors(recipemeta.recipes)
    assert found == [("IMPLEMENTING_SERIES_FOR_NFTS", IMPLEMENTING_SERIES_FOR_NFTS)]


def test_load_catalog_logs_registrations(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="recipemeta.catalog")
    load_catalog(["recipemeta.recipes"])
    messages = [record.getMessage() for record in caplog.records]
    assert "scanning recipemeta.recipes for recipes" in messages
    assert any(msg.startswith("registered implementing-series-for-nfts") for msg in messages)
