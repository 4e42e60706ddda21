"""選挙操作スクリプトの再生コマンド."""

import asyncio
import json

from pathlib import Path

import click

from pydantic import ValidationError

from voting_registry.domain.value_objects.election_event import ElectionEvent
from voting_registry.infrastructure.di.container import get_container, init_container
from voting_registry.interfaces.cli.base import BaseCommand, with_error_handling
from voting_registry.interfaces.cli.commands.election.script import (
    ElectionScript,
    OperationOutcome,
    open_election,
    run_operation,
)


class ReplayCommand(BaseCommand):
    """スクリプトを新しいレジストリに適用して結果を表示する."""

    def __init__(self, strict: bool = False, show_events: bool = True) -> None:
        self.strict = strict
        self.show_events = show_events

    def execute(self, script: ElectionScript) -> bool:
        """登録済みのコンテナ上でスクリプトを実行する.

        Returns:
            全操作が成功した場合True
        """
        return asyncio.run(self._run(script))

    async def _run(self, script: ElectionScript) -> bool:
        container = get_container()
        await open_election(container, script.owner)
        self.echo_info(f"Election opened by {script.owner}")

        all_succeeded = True
        for op in script.operations:
            outcome = await run_operation(container, op)
            self._print_outcome(outcome)
            if not outcome.success:
                all_succeeded = False
                if self.strict:
                    self.echo_error("Stopped at first rejected operation (--strict)")
                    break

        if self.show_events:
            self._print_events(container.events.event_recorder().events)

        summary = await container.use_cases.manage_workflow_usecase().get_summary()
        self.echo_info("\n=== Election summary ===")
        self.echo_info(f"  Status:     {summary.status.label}")
        self.echo_info(f"  Voters:     {summary.voter_count}")
        self.echo_info(f"  Proposals:  {summary.proposal_count}")
        self.echo_info(f"  Votes cast: {summary.votes_cast}")
        if summary.winning_proposal_id is not None:
            self.echo_success(f"Winning proposal: #{summary.winning_proposal_id}")
        return all_succeeded

    def _print_outcome(self, outcome: OperationOutcome) -> None:
        label = f"[{outcome.caller}] {outcome.operation}"
        if outcome.success:
            suffix = f": {outcome.detail}" if outcome.detail else ""
            self.echo_success(f"{label}{suffix}")
        else:
            self.echo_warning(
                f"{label} rejected ({outcome.error_code}): {outcome.error_message}"
            )

    def _print_events(self, events: list[ElectionEvent]) -> None:
        self.echo_info(f"\n=== Events ({len(events)}) ===")
        for i, event in enumerate(events, 1):
            fields = ", ".join(f"{k}={v}" for k, v in event.to_dict().items())
            self.echo_info(f"  {i:>3}. {event.name}({fields})")


def load_script(path: Path) -> ElectionScript:
    """JSONファイルからスクリプトを読み込む."""
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise click.BadParameter(f"Invalid JSON: {e}", param_hint="SCRIPT") from e
    try:
        return ElectionScript.model_validate(raw)
    except ValidationError as e:
        raise click.BadParameter(str(e), param_hint="SCRIPT") from e


@click.command("replay")
@click.argument(
    "script_path", type=click.Path(exists=True, dir_okay=False, path_type=Path)
)
@click.option("--strict", is_flag=True, help="最初に拒否された操作で中断し、終了コード1で終了")
@click.option("--no-events", is_flag=True, help="発行されたイベント一覧を表示しない")
@with_error_handling
def replay(script_path: Path, strict: bool, no_events: bool):
    """JSONスクリプトの操作を新しい選挙に順番に適用する."""
    script = load_script(script_path)
    init_container()
    command = ReplayCommand(strict=strict, show_events=not no_events)
    if not command.execute(script) and strict:
        raise click.exceptions.Exit(1)
