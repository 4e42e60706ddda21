"""Application settings.

設定値は環境変数（``VOTING_REGISTRY_`` プレフィックス）と .env ファイルから読み込む。
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def find_env_file(start: Path | None = None) -> Path | None:
    """カレントディレクトリから親方向に .env ファイルを探す.

    Args:
        start: 探索を開始するディレクトリ（省略時はカレントディレクトリ）

    Returns:
        見つかった .env のパス、見つからない場合はNone
    """
    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / ".env"
        if candidate.is_file():
            return candidate
    return None


ENV_FILE_PATH = find_env_file()


class Settings(BaseSettings):
    """Voting registry settings."""

    model_config = SettingsConfigDict(
        env_prefix="VOTING_REGISTRY_",
        env_file=ENV_FILE_PATH,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    admin_address: str = Field(default="admin", min_length=1)
    log_level: str = "INFO"
    log_format: Literal["console", "json"] = "console"
    publish_events_to_log: bool = True

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Invalid log level: {value}")
        return level


@lru_cache
def get_settings() -> Settings:
    """設定インスタンスを取得する（キャッシュ付き）."""
    return Settings()


settings = get_settings()
