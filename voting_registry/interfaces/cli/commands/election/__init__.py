"""選挙 CLI コマンドグループ."""

import click

from voting_registry.interfaces.cli.commands.election.demo import demo
from voting_registry.interfaces.cli.commands.election.replay import replay


@click.group()
def election():
    """選挙レジストリ関連コマンド."""
    pass


election.add_command(demo)
election.add_command(replay)
