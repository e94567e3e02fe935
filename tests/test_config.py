"""Tests for configuration helpers."""

from dri_engine.config import Settings, parse_nutrient_ids


def test_parse_nutrient_ids_keeps_order_and_dedupes() -> None:
    assert parse_nutrient_ids(" protein, sodium,,protein ,fiber") == [
        "protein",
        "sodium",
        "fiber",
    ]


def test_parse_nutrient_ids_whole_table_markers() -> None:
    assert parse_nutrient_ids(None) is None
    assert parse_nutrient_ids("") is None
    assert parse_nutrient_ids(" * ") is None
    assert parse_nutrient_ids(" , ,") is None


def test_settings_read_environment(monkeypatch) -> None:
    monkeypatch.setenv("API_TOKEN", "secret")
    monkeypatch.setenv("DEFAULT_NUTRIENT_IDS", "protein,sodium")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")

    settings = Settings()

    assert settings.api_token == "secret"
    assert parse_nutrient_ids(settings.default_nutrient_ids) == ["protein", "sodium"]
    assert settings.log_level == "DEBUG"
