from __future__ import annotations

from pathlib import Path

from wrapped.config import DEFAULT_CORS_ORIGINS, WrappedConfig


def test_config_defaults_derive_paths_from_data_dir(tmp_path: Path) -> None:
    config = WrappedConfig(data_dir=tmp_path)

    assert config.resolved_database_url == f"sqlite:///{(tmp_path / 'chokuretsu.sqlite3').as_posix()}"
    assert config.resolved_backup_dir == tmp_path / "backup"
    assert config.cors_origins == DEFAULT_CORS_ORIGINS
    assert config.refresh_secret is None


def test_config_from_env_overrides(tmp_path: Path) -> None:
    env = {
        "CHOKU_WRAPPED_DATA_DIR": str(tmp_path / "data"),
        "CHOKU_WRAPPED_DATABASE_URL": "postgresql://db/wrapped",
        "CHOKU_WRAPPED_BACKUP_DIR": str(tmp_path / "blobs"),
        "CHOKU_WRAPPED_REFRESH_SECRET": "hunter2",
        "CHOKU_WRAPPED_CORS_ORIGINS": "https://a.example, https://b.example,",
        "CHOKU_WRAPPED_LOG_PATH": str(tmp_path / "wrapped.log"),
    }

    config = WrappedConfig.from_env(env)

    assert config.data_dir == tmp_path / "data"
    assert config.resolved_database_url == "postgresql://db/wrapped"
    assert config.resolved_backup_dir == tmp_path / "blobs"
    assert config.refresh_secret == "hunter2"
    assert config.cors_origins == ("https://a.example", "https://b.example")
    assert config.log_path == tmp_path / "wrapped.log"


def test_config_from_env_ignores_blank_values(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setattr("wrapped.config.default_data_dir", lambda: tmp_path / "default")

    config = WrappedConfig.from_env({"CHOKU_WRAPPED_DATA_DIR": "  ", "CHOKU_WRAPPED_REFRESH_SECRET": ""})

    assert config.data_dir == tmp_path / "default"
    assert config.refresh_secret is None
    assert config.database_url is None
