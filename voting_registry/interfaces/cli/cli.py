"""Command line entry point."""

import click

from voting_registry import __version__
from voting_registry.common.logging import setup_logging
from voting_registry.infrastructure.config.settings import get_settings
from voting_registry.interfaces.cli.commands.election import election


@click.group()
@click.option("--log-level", default=None, help="ログレベル（省略時は設定値）")
@click.option(
    "--log-format",
    type=click.Choice(["console", "json"]),
    default=None,
    help="ログ出力形式（省略時は設定値）",
)
@click.version_option(__version__, prog_name="voting-registry")
def main(log_level: str | None, log_format: str | None):
    """Voting registry CLI."""
    app_settings = get_settings()
    setup_logging(
        log_level=log_level or app_settings.log_level,
        log_format=log_format or app_settings.log_format,
    )


main.add_command(election)


if __name__ == "__main__":
    main()
