"""選挙の一連の流れを実演するコマンド."""

import click

from voting_registry.infrastructure.config.settings import get_settings
from voting_registry.infrastructure.di.container import init_container
from voting_registry.interfaces.cli.base import with_error_handling
from voting_registry.interfaces.cli.commands.election.replay import ReplayCommand
from voting_registry.interfaces.cli.commands.election.script import (
    ElectionScript,
    ScriptOperation,
)


DEFAULT_VOTERS = ("alice", "bob", "carol")


def build_demo_script(owner: str, voters: list[str]) -> ElectionScript:
    """有権者ごとに1件提案し、各自が自分の提案に投票するスクリプトを生成する.

    得票が全て同数になるため、最初の有権者の提案（ID 1）が当選する。
    """
    operations = [
        ScriptOperation(caller=owner, operation="add_voter", address=voter)
        for voter in voters
    ]
    operations.append(
        ScriptOperation(caller=owner, operation="start_proposals_registering")
    )
    operations.extend(
        ScriptOperation(
            caller=voter, operation="add_proposal", description=f"Proposal by {voter}"
        )
        for voter in voters
    )
    operations.append(ScriptOperation(caller=owner, operation="end_proposals_registering"))
    operations.append(ScriptOperation(caller=owner, operation="start_voting_session"))
    operations.extend(
        ScriptOperation(caller=voter, operation="set_vote", proposal_id=index)
        for index, voter in enumerate(voters, 1)
    )
    operations.append(ScriptOperation(caller=owner, operation="end_voting_session"))
    operations.append(ScriptOperation(caller=owner, operation="tally_votes"))
    return ElectionScript(owner=owner, operations=operations)


@click.command("demo")
@click.option("--owner", default=None, help="管理者アドレス（省略時は設定値）")
@click.option(
    "--voter",
    "voters",
    multiple=True,
    help="有権者アドレス（複数指定可、省略時は alice, bob, carol）",
)
@click.option("--no-events", is_flag=True, help="発行されたイベント一覧を表示しない")
@with_error_handling
def demo(owner: str | None, voters: tuple[str, ...], no_events: bool):
    """有権者登録から開票までの一連の流れを実行する."""
    owner = owner or get_settings().admin_address
    script = build_demo_script(owner, list(voters or DEFAULT_VOTERS))
    init_container()
    ReplayCommand(strict=True, show_events=not no_events).execute(script)
