"""Configuration loading from environment variables and life-commit.toml."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib
from pathlib import Path

_DEFAULT_HOME_DIR = Path.home() / ".life-commit"
_CONFIG_FILENAME = "life-commit.toml"
_DEFAULT_LIFEMOJI_URL = "https://raw.githubusercontent.com/life-commit/life-commit/master"


@dataclass
class LifemojiConfig:
    """Where the lifemoji vocabulary is fetched from."""

    base_url: str = _DEFAULT_LIFEMOJI_URL
    path: str = "/src/data/lifemojis.json"
    timeout: int = 10


@dataclass
class LifeConfig:
    """Top-level life-commit configuration."""

    home_dir: Path = _DEFAULT_HOME_DIR
    lifemoji: LifemojiConfig = field(default_factory=LifemojiConfig)
    site_folder: str = "website"
    log_level: str = "WARNING"


def load_config(config_path: Path | None = None) -> LifeConfig:
    """Load configuration from environment variables and optional life-commit.toml.

    Priority: environment variables > life-commit.toml > defaults.
    """
    env_home = os.getenv("LIFE_COMMIT_HOME")
    search_home = Path(env_home).expanduser() if env_home else _DEFAULT_HOME_DIR

    file_data: dict = {}
    if config_path and config_path.exists():
        file_data = tomllib.loads(config_path.read_text())
    else:
        # Search current dir and the base directory ($LIFE_COMMIT_HOME or ~/.life-commit/)
        for candidate in [Path.cwd() / _CONFIG_FILENAME, search_home / _CONFIG_FILENAME]:
            if candidate.exists():
                file_data = tomllib.loads(candidate.read_text())
                break

    lifemoji_data = file_data.get("lifemoji", {})
    home_dir = os.getenv("LIFE_COMMIT_HOME", file_data.get("home_dir"))

    config = LifeConfig(
        home_dir=Path(home_dir).expanduser() if home_dir else _DEFAULT_HOME_DIR,
        lifemoji=LifemojiConfig(
            base_url=os.getenv(
                "LIFE_COMMIT_LIFEMOJI_URL", lifemoji_data.get("base_url", _DEFAULT_LIFEMOJI_URL)
            ),
            path=lifemoji_data.get("path", "/src/data/lifemojis.json"),
            timeout=int(os.getenv("LIFE_COMMIT_TIMEOUT", lifemoji_data.get("timeout", 10))),
        ),
        site_folder=file_data.get("site_folder", "website"),
        log_level=os.getenv("LIFE_COMMIT_LOG_LEVEL", file_data.get("log_level", "WARNING")),
    )
    return config
