"""election replay コマンドのテスト."""

import json

import pytest

from click.testing import CliRunner

from voting_registry.infrastructure.config.settings import Settings
from voting_registry.infrastructure.di.container import init_container, reset_container
from voting_registry.interfaces.cli.commands.election import election
from voting_registry.interfaces.cli.commands.election.replay import ReplayCommand
from voting_registry.interfaces.cli.commands.election.script import (
    ElectionScript,
    ScriptOperation,
)


OWNER = "admin"


@pytest.fixture
def runner():
    return CliRunner()


def _write_script(tmp_path, operations, owner=OWNER):
    path = tmp_path / "script.json"
    path.write_text(json.dumps({"owner": owner, "operations": operations}))
    return path


class TestScriptOperation:
    """スクリプトモデルの検証."""

    def test_camel_case_operation_names(self):
        op = ScriptOperation.model_validate(
            {"caller": OWNER, "operation": "startProposalsRegistering"}
        )

        assert op.operation == "start_proposals_registering"

    def test_proposal_id_alias(self):
        op = ScriptOperation.model_validate(
            {"caller": "alice", "operation": "setVote", "proposalId": 2}
        )

        assert op.operation == "set_vote"
        assert op.proposal_id == 2

    def test_missing_required_field(self):
        with pytest.raises(ValueError, match="add_voter requires 'address'"):
            ScriptOperation.model_validate({"caller": OWNER, "operation": "add_voter"})

    def test_unknown_operation(self):
        with pytest.raises(ValueError):
            ScriptOperation.model_validate({"caller": OWNER, "operation": "drop_all"})

    def test_script_requires_owner(self):
        with pytest.raises(ValueError):
            ElectionScript.model_validate({"owner": "", "operations": []})


class TestReplayCommand:
    """replayコマンドのテスト."""

    def test_replay_full_election(self, runner, tmp_path):
        """一連の操作が適用され、当選提案が表示されることを確認."""
        path = _write_script(
            tmp_path,
            [
                {"caller": OWNER, "operation": "addVoter", "address": "alice"},
                {"caller": OWNER, "operation": "addVoter", "address": "bob"},
                {"caller": OWNER, "operation": "startProposalsRegistering"},
                {"caller": "alice", "operation": "addProposal", "description": "Parks"},
                {"caller": "bob", "operation": "addProposal", "description": "Roads"},
                {"caller": OWNER, "operation": "endProposalsRegistering"},
                {"caller": OWNER, "operation": "startVotingSession"},
                {"caller": "alice", "operation": "setVote", "proposalId": 2},
                {"caller": "bob", "operation": "setVote", "proposalId": 2},
                {"caller": OWNER, "operation": "endVotingSession"},
                {"caller": OWNER, "operation": "tallyVotes"},
                {"caller": "alice", "operation": "getWinningProposalId"},
                {"caller": "bob", "operation": "getOwner"},
            ],
        )

        result = runner.invoke(election, ["replay", str(path)])

        assert result.exit_code == 0, result.output
        assert "Election opened by admin" in result.output
        assert "[alice] add_proposal: proposal #1" in result.output
        assert "winner #2 (2/2 votes)" in result.output
        assert "[alice] get_winning_proposal_id: #2" in result.output
        assert "[bob] get_owner: admin" in result.output
        assert "Status:     VotesTallied" in result.output
        assert "Winning proposal: #2" in result.output
        assert "=== Events (11) ===" in result.output

    def test_rejected_operation_is_reported(self, runner, tmp_path):
        path = _write_script(
            tmp_path,
            [
                {"caller": "mallory", "operation": "add_voter", "address": "eve"},
                {"caller": OWNER, "operation": "get_workflow_status"},
            ],
        )

        result = runner.invoke(election, ["replay", str(path), "--no-events"])

        assert result.exit_code == 0
        assert "rejected (not_owner): Caller is not the owner" in result.output
        assert "[admin] get_workflow_status: RegisteringVoters" in result.output
        assert "=== Events" not in result.output

    def test_strict_stops_at_first_rejection(self, runner, tmp_path):
        path = _write_script(
            tmp_path,
            [
                {"caller": OWNER, "operation": "start_voting_session"},
                {"caller": OWNER, "operation": "add_voter", "address": "alice"},
            ],
        )

        result = runner.invoke(election, ["replay", str(path), "--strict"])

        assert result.exit_code == 1
        assert "workflow_status_mismatch" in result.output
        assert "voter alice registered" not in result.output
        assert "Voters:     0" in result.output

    def test_invalid_json(self, runner, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json")

        result = runner.invoke(election, ["replay", str(path)])

        assert result.exit_code == 2
        assert "Invalid JSON" in result.output

    def test_invalid_script(self, runner, tmp_path):
        path = _write_script(tmp_path, [{"caller": OWNER, "operation": "set_vote"}])

        result = runner.invoke(election, ["replay", str(path)])

        assert result.exit_code == 2
        assert "set_vote requires 'proposal_id'" in result.output


class TestReplayCommandContainer:
    """ReplayCommandが登録済みのコンテナを使うことの確認."""

    @pytest.fixture(autouse=True)
    def clean_container(self):
        reset_container()
        yield
        reset_container()

    def test_uses_registered_container(self):
        container = init_container(Settings(_env_file=None, publish_events_to_log=False))
        script = ElectionScript(
            owner=OWNER,
            operations=[
                ScriptOperation(caller=OWNER, operation="add_voter", address="alice")
            ],
        )

        succeeded = ReplayCommand(show_events=False).execute(script)

        assert succeeded is True
        recorded = container.events.event_recorder().events
        assert [e.name for e in recorded] == ["VoterRegistered"]

    def test_requires_initialized_container(self):
        script = ElectionScript(owner=OWNER, operations=[])

        with pytest.raises(RuntimeError, match="Container is not initialized"):
            ReplayCommand().execute(script)
