"""Tests for configuration loading."""

import pytest
from pathlib import Path

from lifecommit.config import load_config

_ENV_KEYS = [
    "LIFE_COMMIT_HOME",
    "LIFE_COMMIT_LIFEMOJI_URL",
    "LIFE_COMMIT_TIMEOUT",
    "LIFE_COMMIT_LOG_LEVEL",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


class TestConfig:
    def test_defaults(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)

        config = load_config(tmp_path / "missing.toml")
        assert config.home_dir.name == ".life-commit"
        assert config.lifemoji.path == "/src/data/lifemojis.json"
        assert config.lifemoji.timeout == 10
        assert config.site_folder == "website"
        assert config.log_level == "WARNING"

    def test_env_override(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("LIFE_COMMIT_HOME", str(tmp_path / "journal"))
        monkeypatch.setenv("LIFE_COMMIT_TIMEOUT", "3")
        monkeypatch.setenv("LIFE_COMMIT_LIFEMOJI_URL", "http://localhost:8080")

        config = load_config(tmp_path / "missing.toml")
        assert config.home_dir == tmp_path / "journal"
        assert config.lifemoji.timeout == 3
        assert config.lifemoji.base_url == "http://localhost:8080"

    def test_toml_file(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)

        toml_path = tmp_path / "life-commit.toml"
        toml_path.write_text(f"""
home_dir = "{tmp_path / 'data'}"
site_folder = "viewer"
log_level = "DEBUG"

[lifemoji]
base_url = "https://example.org/life"
path = "/lifemojis.json"
timeout = 30
""")
        config = load_config(toml_path)
        assert config.home_dir == tmp_path / "data"
        assert config.site_folder == "viewer"
        assert config.log_level == "DEBUG"
        assert config.lifemoji.base_url == "https://example.org/life"
        assert config.lifemoji.path == "/lifemojis.json"
        assert config.lifemoji.timeout == 30

    def test_toml_discovered_in_cwd(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "life-commit.toml").write_text('site_folder = "found"\n')

        config = load_config()
        assert config.site_folder == "found"

    def test_env_overrides_toml(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("LIFE_COMMIT_LOG_LEVEL", "ERROR")

        toml_path = tmp_path / "life-commit.toml"
        toml_path.write_text('log_level = "DEBUG"\n')
        config = load_config(toml_path)
        assert config.log_level == "ERROR"  # env wins

    def test_toml_discovered_in_base_dir(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        home = tmp_path / "journal"
        home.mkdir()
        (home / "life-commit.toml").write_text('site_folder = "from-home"\n')
        monkeypatch.setenv("LIFE_COMMIT_HOME", str(home))

        config = load_config()
        assert config.site_folder == "from-home"
        assert config.home_dir == home
