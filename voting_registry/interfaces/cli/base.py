"""Shared helpers for CLI commands."""

import functools
import sys

from collections.abc import Callable
from typing import Any, TypeVar

import click

from voting_registry.application.exceptions import ApplicationException
from voting_registry.common.logging import get_logger
from voting_registry.domain.exceptions import ElectionDomainException


F = TypeVar("F", bound=Callable[..., Any])

logger = get_logger(__name__)


class BaseCommand:
    """Base class for CLI commands with shared echo helpers."""

    @staticmethod
    def echo_info(message: str):
        """Show an info message"""
        click.echo(message)

    @staticmethod
    def echo_success(message: str):
        """Show a success message"""
        click.echo(click.style(f"✓ {message}", fg="green"))

    @staticmethod
    def echo_warning(message: str):
        """Show a warning message"""
        click.echo(click.style(f"⚠️  {message}", fg="yellow"))

    @staticmethod
    def echo_error(message: str):
        """Show an error message"""
        click.echo(click.style(f"✗ {message}", fg="red"), err=True)


def with_error_handling(func: F) -> F:
    """コマンド実行中の例外をエラーメッセージと終了コード1に変換する.

    click自身の例外（引数エラー、Abort、Exit）はそのままclickに処理させる。
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except (click.ClickException, click.exceptions.Exit, click.Abort):
            raise
        except (ElectionDomainException, ApplicationException) as e:
            BaseCommand.echo_error(f"{e.error_code}: {e.message}")
            sys.exit(1)
        except Exception as e:
            logger.error("Unexpected error in command", error=str(e), exc_info=True)
            BaseCommand.echo_error(f"Unexpected error: {e}")
            sys.exit(1)

    return wrapper  # type: ignore[return-value]
