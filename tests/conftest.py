"""テスト全体の共通設定."""

import pytest

from voting_registry.common.logging import setup_logging


@pytest.fixture(scope="session", autouse=True)
def configure_logging():
    """テスト実行中のログ出力を設定する."""
    setup_logging(log_level="WARNING")
