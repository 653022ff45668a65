"""Settings for the Task Management API, read from the environment (+ optional .env)."""

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

from taskmanager.database.seed import SAMPLE_TASKS_FILE

load_dotenv()

DEVELOPMENT = "development"
PRODUCTION = "production"


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


@dataclass(frozen=True)
class Settings:
    """Application settings."""

    app_env: str = DEVELOPMENT
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"
    seed_sample_tasks: bool = True
    seed_file: Path = SAMPLE_TASKS_FILE

    @property
    def debug(self) -> bool:
        """Expose internal error detail in responses (development only)."""
        return self.app_env == DEVELOPMENT

    @classmethod
    def from_env(cls) -> "Settings":
        seed_file = os.getenv("SEED_FILE", "").strip()
        return cls(
            app_env=os.getenv("APP_ENV", DEVELOPMENT).strip().lower() or DEVELOPMENT,
            host=os.getenv("HOST", "0.0.0.0"),
            port=_env_int("PORT", 3000),
            log_level=os.getenv("LOG_LEVEL", "INFO").strip().upper() or "INFO",
            seed_sample_tasks=_env_bool("SEED_SAMPLE_TASKS", True),
            seed_file=Path(seed_file).expanduser() if seed_file else SAMPLE_TASKS_FILE,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Process-wide settings (read once)."""
    return Settings.from_env()
