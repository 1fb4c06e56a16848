import logging
import os
import sys
from pathlib import Path

import dotenv

# GitPython only reads the .git directory here; no git executable is needed
os.environ.setdefault("GIT_PYTHON_REFRESH", "quiet")
import git  # noqa: E402
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from herogrowth.constants import DEFAULT_TRACKED_STATS

dotenv.load_dotenv()


def _find_project_root() -> Path:
    env_value = os.environ.get("PROJECT_ROOT")
    if env_value:
        return Path(env_value)
    try:
        return Path(str(git.Repo(".", search_parent_directories=True).working_tree_dir))
    except (git.InvalidGitRepositoryError, git.NoSuchPathError):
        return Path.cwd()


PROJECT_ROOT = _find_project_root()


def default_asset_dir() -> Path:
    env_value = os.getenv("ASSET_OUTPUT_DIR")
    if env_value:
        return Path(env_value)
    return PROJECT_ROOT / "data" / "outputs"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )
    # Project Paths
    BASE_DIR: Path = PROJECT_ROOT
    DATA_DIR: Path = BASE_DIR / "data"
    # Logging
    LOG_LEVEL: str = "INFO"
    # Pipeline Settings
    TRACKED_STATS: tuple[str, ...] = DEFAULT_TRACKED_STATS
    TOP_N: int = 3
    # Presentation Settings
    GRAPH_HEIGHT: int = 20
    SAVE_HTML: bool = False
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8000
    ASSET_OUTPUT_DIR: Path = Field(default_factory=default_asset_dir)


settings = Settings()


def setup_logging(name: str | None = None) -> logging.Logger:
    logger = logging.getLogger(name if name else "herogrowth")

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

        level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)
        logger.setLevel(level)

    return logger
