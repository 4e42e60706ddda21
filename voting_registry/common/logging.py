"""Structured logging setup.

structlogを標準のloggingと組み合わせて設定する。アプリケーション全体で
``get_logger(__name__)`` を使ってロガーを取得すること。
"""

import logging
import sys

from typing import Any

import structlog


def setup_logging(log_level: str = "INFO", log_format: str = "console") -> None:
    """ログ出力を設定する.

    Args:
        log_level: ログレベル（DEBUG, INFO, WARNING, ERROR）
        log_format: 出力形式。"json" の場合はJSON、それ以外はコンソール向け
    """
    level = getattr(logging, log_level.upper(), logging.INFO)
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=level,
        force=True,
    )

    renderer: Any
    if log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """構造化ロガーを取得する.

    出力設定は行わない。設定はエントリポイントで ``setup_logging`` を呼ぶこと。
    """
    return structlog.get_logger(name)
