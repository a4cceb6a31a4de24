"""Tests for configuration loading."""
import json

import pytest

from showcase.config import DEFAULT_CATEGORIES, HomeConfig, load_config

ENV_VARS = (
    "CATEGORIES", "ROTATE_WINDOW_MS", "HOME_COUNT", "REQUEST_TIMEOUT", "REFRESH_SECONDS",
    "MANIFEST_BASE", "MANIFEST_NAME", "MOUNT_ID", "THEME_TZ", "THEME_BY_TIME",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class TestHomeConfig:
    def test_defaults(self):
        config = HomeConfig()
        assert config.categories == DEFAULT_CATEGORIES
        assert config.rotate_window_ms == 60 * 60 * 1000
        assert config.home_count == 6
        assert config.manifest_name == "manifest.json"
        assert config.mount_id == "project-grid"
        assert config.refresh_seconds == 0
        assert config.timezone == ""

    def test_categories_become_tuple(self):
        assert HomeConfig(categories=["IA", "Juegos"]).categories == ("IA", "Juegos")

    @pytest.mark.parametrize("kwargs", [
        {"rotate_window_ms": 0},
        {"rotate_window_ms": -5},
        {"request_timeout": 0},
        {"refresh_seconds": -1},
        {"categories": "IA"},
        {"categories": ["IA", ""]},
        {"categories": ["IA", 3]},
        {"home_count": "6"},
        {"home_count": 2.5},
        {"home_count": True},
        {"rotate_window_ms": "3600000"},
        {"refresh_seconds": None},
        {"request_timeout": "30"},
        {"theme_by_time": "false"},
        {"theme_by_time": 1},
        {"timezone": None},
    ])
    def test_invalid_values(self, kwargs):
        with pytest.raises(ValueError):
            HomeConfig(**kwargs)

    def test_from_mapping(self):
        config = HomeConfig.from_mapping({
            "categories": ["IA"],
            "rotateWindowMs": 300000,
            "homeCount": 3,
            "mountId": "home",
            "somethingElse": True,
        })
        assert config.categories == ("IA",)
        assert config.rotate_window_ms == 300000
        assert config.home_count == 3
        assert config.mount_id == "home"

    def test_from_mapping_keeps_base(self):
        base = HomeConfig(manifest_base="https://site.test")
        assert HomeConfig.from_mapping({"homeCount": 2}, base=base).manifest_base == "https://site.test"


class TestFromEnv:
    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("CATEGORIES", "IA; Musica ,,Juegos")
        monkeypatch.setenv("ROTATE_WINDOW_MS", "1800000")
        monkeypatch.setenv("HOME_COUNT", "4")
        monkeypatch.setenv("MANIFEST_BASE", "https://site.test")
        monkeypatch.setenv("THEME_TZ", "Europe/Madrid")
        monkeypatch.setenv("THEME_BY_TIME", "false")

        config = HomeConfig.from_env()

        assert config.categories == ("IA", "Musica", "Juegos")
        assert config.rotate_window_ms == 1800000
        assert config.home_count == 4
        assert config.manifest_base == "https://site.test"
        assert config.timezone == "Europe/Madrid"
        assert config.theme_by_time is False

    def test_empty_env_gives_defaults(self):
        assert HomeConfig.from_env() == HomeConfig()


class TestLoadConfig:
    def test_without_file(self):
        assert load_config(None) == HomeConfig()

    def test_file_overlays_env(self, tmp_path, monkeypatch):
        monkeypatch.setenv("MANIFEST_BASE", "https://site.test")
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"categories": ["IA"], "homeCount": 2}), encoding="utf-8")

        config = load_config(str(path))

        assert config.categories == ("IA",)
        assert config.home_count == 2
        assert config.manifest_base == "https://site.test"

    @pytest.mark.parametrize("content", [
        "{broken",
        "[1, 2]",
        '{"rotateWindowMs": 0}',
        '{"rotateWindowMs": "hourly"}',
        '{"homeCount": "6"}',
        '{"homeCount": 6.5}',
        '{"homeCount": true}',
        '{"themeByTime": "false"}',
        '{"refreshSeconds": "60"}',
    ])
    def test_invalid_file_exits(self, tmp_path, content):
        path = tmp_path / "config.json"
        path.write_text(content, encoding="utf-8")
        with pytest.raises(SystemExit) as exc:
            load_config(str(path))
        assert exc.value.code == 1

    def test_missing_file_exits(self, tmp_path):
        with pytest.raises(SystemExit):
            load_config(str(tmp_path / "missing.json"))

    def test_invalid_env_exits(self, monkeypatch):
        monkeypatch.setenv("HOME_COUNT", "six")
        with pytest.raises(SystemExit):
            load_config(None)


def test_float_timeout_and_bool_theme_accepted(tmp_path):
    path = tmp_path / "config.json"
    path.write_text('{"requestTimeout": 7.5, "themeByTime": false, "homeCount": 4}', encoding="utf-8")
    config = load_config(str(path))
    assert config.request_timeout == 7.5
    assert config.theme_by_time is False
    assert config.home_count == 4
