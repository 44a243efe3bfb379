"""
Tests de la CLI (sin subprocess: se llama a `main()` directamente).
"""

import json

import pytest

from recipemd_core import cli
from recipemd_core.config import get_settings

from .samples import PIE


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch, tmp_path):
    for var in (
        "RECIPEMD_PARSE_MODE",
        "RECIPEMD_OUTPUT_FORMAT",
        "RECIPEMD_HTML_PROFILE",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("RECIPEMD_OUTPUT_DIR", str(tmp_path / "output"))
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def recipe_file(tmp_path):
    path = tmp_path / "pie.md"
    path.write_text(PIE, encoding="utf-8")
    return path


def test_json_to_stdout(recipe_file, capsys):
    assert cli.main([str(recipe_file)]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["title"] == "Pie"


def test_html_to_file(recipe_file, tmp_path):
    out = tmp_path / "site" / "pie.html"
    assert cli.main([str(recipe_file), "--format", "html", "--profile", "schema_org_v1", "--out", str(out)]) == 0
    assert "itemscope" in out.read_text(encoding="utf-8")


def test_save_uses_output_dir(recipe_file, tmp_path):
    assert cli.main([str(recipe_file), "--format", "markdown", "--save"]) == 0
    saved = tmp_path / "output" / "pie.md"
    assert saved.read_text(encoding="utf-8").startswith("# Pie")


def test_structure_error_exits_1(tmp_path, capsys):
    path = tmp_path / "bad.md"
    path.write_text("# Only a title\n", encoding="utf-8")

    assert cli.main([str(path)]) == 1
    assert "❌" in capsys.readouterr().err

    assert cli.main([str(path), "--mode", "permissive"]) == 0
    assert "missing_divider" in capsys.readouterr().err


def test_fail_on_warning(tmp_path, capsys):
    path = tmp_path / "warn.md"
    path.write_text("# T\n\n---\n\n- *2 cups*\n- salt\n", encoding="utf-8")

    assert cli.main([str(path)]) == 0
    assert cli.main([str(path), "--fail-on-warning"]) == 1
    assert "[content]" in capsys.readouterr().err


def test_defaults_come_from_environment(recipe_file, monkeypatch, capsys):
    monkeypatch.setenv("RECIPEMD_OUTPUT_FORMAT", "markdown")
    get_settings.cache_clear()

    assert cli.main([str(recipe_file)]) == 0
    assert capsys.readouterr().out.startswith("# Pie")
