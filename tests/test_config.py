import pytest

from recipemd_core.config import Settings, get_settings


def test_defaults(monkeypatch):
    for var in (
        "RECIPEMD_PARSE_MODE",
        "RECIPEMD_OUTPUT_FORMAT",
        "RECIPEMD_HTML_PROFILE",
        "RECIPEMD_OUTPUT_DIR",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()

    assert get_settings() == Settings()
    get_settings.cache_clear()


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("RECIPEMD_PARSE_MODE", "permissive")
    monkeypatch.setenv("RECIPEMD_HTML_PROFILE", "schema_org_v1")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    get_settings.cache_clear()

    settings = get_settings()
    assert settings.parse_mode == "permissive"
    assert settings.html_profile == "schema_org_v1"
    assert settings.log_level == "DEBUG"
    assert get_settings() is settings
    get_settings.cache_clear()


def test_unknown_parse_mode_is_rejected(monkeypatch):
    monkeypatch.setenv("RECIPEMD_PARSE_MODE", "strcit")
    get_settings.cache_clear()

    with pytest.raises(ValueError):
        get_settings()
    get_settings.cache_clear()
