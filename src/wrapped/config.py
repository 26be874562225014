from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from platformdirs import PlatformDirs

APP_NAME = "choku-wrapped"
ENV_PREFIX = "CHOKU_WRAPPED_"
DEFAULT_CORS_ORIGINS: tuple[str, ...] = ("https://*.haroohie.club", "http://localhost:3000")
DEFAULT_DATABASE_NAME = "chokuretsu.sqlite3"
DEFAULT_BACKUP_DIR_NAME = "backup"


def default_data_dir() -> Path:
    return Path(PlatformDirs(appname=APP_NAME, appauthor=False).user_data_path)


def _env_path(env: Mapping[str, str], name: str) -> Path | None:
    value = env.get(ENV_PREFIX + name, "").strip()
    if not value:
        return None
    return Path(value).expanduser()


def _env_list(env: Mapping[str, str], name: str) -> tuple[str, ...] | None:
    raw = env.get(ENV_PREFIX + name)
    if raw is None:
        return None
    return tuple(part.strip() for part in raw.split(",") if part.strip())


@dataclass(frozen=True, slots=True)
class WrappedConfig:
    data_dir: Path = field(default_factory=default_data_dir)
    database_url: str | None = None
    backup_dir: Path | None = None
    refresh_secret: str | None = None
    cors_origins: tuple[str, ...] = DEFAULT_CORS_ORIGINS
    log_path: Path | None = None

    @property
    def resolved_database_url(self) -> str:
        if self.database_url:
            return self.database_url
        return f"sqlite:///{(self.data_dir / DEFAULT_DATABASE_NAME).as_posix()}"

    @property
    def resolved_backup_dir(self) -> Path:
        if self.backup_dir is not None:
            return self.backup_dir
        return self.data_dir / DEFAULT_BACKUP_DIR_NAME

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> WrappedConfig:
        """Read `CHOKU_WRAPPED_*` overrides; anything unset keeps its default."""

        env = os.environ if env is None else env
        data_dir = _env_path(env, "DATA_DIR") or default_data_dir()
        secret = env.get(ENV_PREFIX + "REFRESH_SECRET") or None
        origins = _env_list(env, "CORS_ORIGINS")
        return cls(
            data_dir=data_dir,
            database_url=env.get(ENV_PREFIX + "DATABASE_URL") or None,
            backup_dir=_env_path(env, "BACKUP_DIR"),
            refresh_secret=secret,
            cors_origins=DEFAULT_CORS_ORIGINS if origins is None else origins,
            log_path=_env_path(env, "LOG_PATH"),
        )


__all__ = [
    "APP_NAME",
    "DEFAULT_CORS_ORIGINS",
    "WrappedConfig",
    "default_data_dir",
]
