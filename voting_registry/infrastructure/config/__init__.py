"""
Configuration module for the voting registry.

設定管理の一元化モジュール。settings.pyが唯一のエントリーポイント。
"""

from voting_registry.infrastructure.config.settings import (
    ENV_FILE_PATH,
    Settings,
    find_env_file,
    get_settings,
    settings,
)


__all__ = [
    "Settings",
    "settings",
    "get_settings",
    "find_env_file",
    "ENV_FILE_PATH",
]
